"""
点唱机 - 管理有容量上限且不含重复歌曲的播放队列

播放队列按先进先出顺序播放。可以整张专辑导入歌曲并保持专辑原始的添加顺序，
也可以随机打乱队列。
"""

import logging
import random
from typing import Any, Dict, Optional

from jukebox.structures import LinkedQueue, LinkedStack
from .album import Album
from .errors import (
    CapacityExceededError,
    DuplicateSongError,
    EmptyCollectionError,
    InvalidArgumentError,
)
from .song import Song

DEFAULT_CAPACITY = 10


class JukeBox:
    """
    点唱机实现

    提供容量检查、去重添加、专辑导入、播放和随机打乱功能。
    随机源可以注入，便于测试使用固定种子。
    """

    def __init__(self, capacity: int, rng: Optional[random.Random] = None, config_manager=None):
        """
        初始化点唱机

        Args:
            capacity: 播放队列的最大歌曲数，0 表示永远是满的
            rng: 随机源（可选），用于打乱队列
            config_manager: 配置管理器（可选）

        Raises:
            InvalidArgumentError: 当容量为负数或不是整数时
        """
        if isinstance(capacity, bool) or not isinstance(capacity, int) or capacity < 0:
            raise InvalidArgumentError(f"无效的点唱机容量: {capacity}", "capacity", capacity)

        self.logger = logging.getLogger("jukebox.queue.jukebox")
        self._capacity = capacity
        self._song_queue: LinkedQueue[Song] = LinkedQueue()
        self._config_manager = config_manager
        self._random = rng if rng is not None else random.Random(self._get_shuffle_seed())

        self.logger.debug(f"点唱机初始化完成 - 容量 {capacity}")

    @classmethod
    def from_config(cls, config_manager, rng: Optional[random.Random] = None) -> "JukeBox":
        """
        根据配置创建点唱机

        Args:
            config_manager: 配置管理器
            rng: 随机源（可选）

        Returns:
            容量取自配置 jukebox.capacity 的点唱机
        """
        logger = logging.getLogger("jukebox.queue.jukebox")
        capacity = config_manager.get('jukebox.capacity', DEFAULT_CAPACITY)

        if isinstance(capacity, bool) or not isinstance(capacity, int) or capacity < 0:
            logger.warning(f"无效的点唱机容量配置: {capacity}，使用默认值{DEFAULT_CAPACITY}")
            capacity = DEFAULT_CAPACITY

        return cls(capacity, rng=rng, config_manager=config_manager)

    def _get_shuffle_seed(self) -> Optional[int]:
        """
        获取随机打乱的种子配置

        Returns:
            配置的整数种子，未配置或配置无效时返回None
        """
        if self._config_manager is None:
            return None

        seed = self._config_manager.get('jukebox.shuffle_seed', None)
        if seed is None:
            return None
        if isinstance(seed, bool) or not isinstance(seed, int):
            self.logger.warning(f"无效的随机种子配置: {seed}，不使用固定种子")
            return None
        return seed

    def capacity(self) -> int:
        return self._capacity

    def size(self) -> int:
        return self._song_queue.size()

    def is_empty(self) -> bool:
        return self._song_queue.is_empty()

    def is_full(self) -> bool:
        return self._song_queue.size() >= self._capacity

    def add_song_to_queue(self, song: Song) -> int:
        """
        添加歌曲到播放队列末尾

        Args:
            song: 要添加的歌曲

        Returns:
            歌曲在队列中的位置（从1开始）

        Raises:
            CapacityExceededError: 当队列已满时
            DuplicateSongError: 当队列中已有相等的歌曲时
        """
        if self.is_full():
            self.logger.info(f"阻止歌曲添加 - 队列已满 ({self._capacity}): {song}")
            raise CapacityExceededError(
                f"播放队列已满（容量 {self._capacity}）", self._capacity, getattr(song, "title", None)
            )

        if self._song_queue.contains(song):
            self.logger.info(f"阻止歌曲添加 - 重复歌曲: {song}")
            raise DuplicateSongError(f"歌曲 {song} 已经在播放队列中", getattr(song, "title", None))

        self._song_queue.enqueue(song)
        position = self._song_queue.size()

        self.logger.debug(f"添加歌曲到队列: {song} (位置 {position})")
        return position

    def add_album_to_queue(self, album: Album) -> int:
        """
        将整张专辑的歌曲导入播放队列

        只要队列还有空位，就把专辑中的歌曲全部弹出到临时栈，使顺序翻转回
        专辑原始的添加顺序，然后逐首加入队列。重复的歌曲会被跳过；
        队列满后临时栈中剩余的歌曲会被丢弃，不会放回专辑。

        Args:
            album: 要导入的专辑

        Returns:
            实际加入队列的歌曲数量
        """
        temp_stack: LinkedStack[Song] = LinkedStack()
        removed = 0

        while not self.is_full() and album.size() > 0:
            temp_stack.push(album.remove_song())
            removed += 1

        added = 0
        while not temp_stack.is_empty():
            song = temp_stack.pop()
            try:
                self.add_song_to_queue(song)
                added += 1
            except (CapacityExceededError, DuplicateSongError):
                continue

        self.logger.info(
            f"导入专辑 {album.get_album_name()}: 取出 {removed} 首, 加入 {added} 首, "
            f"丢弃 {removed - added} 首 (队列长度: {self.size()}/{self._capacity})"
        )
        return added

    def play_song(self) -> Song:
        """
        播放并移除队首歌曲

        Returns:
            最早加入队列的歌曲

        Raises:
            EmptyCollectionError: 当队列为空时
        """
        if self.is_empty():
            raise EmptyCollectionError("播放队列为空")

        song = self._song_queue.dequeue()
        self.logger.info(f"播放歌曲: {song}")
        return song

    def peek_next_song(self) -> Optional[Song]:
        """
        查看下一首歌曲但不从队列中移除

        Returns:
            下一首歌曲，如果队列为空则返回None
        """
        return self._song_queue.peek()

    def shuffle_song_queue(self, rng: Optional[random.Random] = None) -> None:
        """
        随机打乱播放队列

        对队列快照做 Fisher-Yates 洗牌后按新顺序重建队列，歌曲集合和数量不变。

        Args:
            rng: 本次使用的随机源（可选），默认使用点唱机自身的随机源
        """
        songs = self._song_queue.get_list()
        (rng or self._random).shuffle(songs)

        self._song_queue.clear()
        for song in songs:
            self._song_queue.enqueue(song)

        self.logger.debug(f"队列已打乱 - 共 {len(songs)} 首")

    def get_queue_info(self) -> Dict[str, Any]:
        """
        获取队列信息

        Returns:
            包含队列状态的字典
        """
        songs = self._song_queue.get_list()
        return {
            'queue_length': len(songs),
            'capacity': self._capacity,
            'is_empty': not songs,
            'is_full': self.is_full(),
            'total_duration': sum(getattr(song, 'duration', 0) for song in songs),
            'next_song': songs[0] if songs else None,
        }

    def __str__(self) -> str:
        """按播放顺序以 " -> " 连接歌曲，并以 END 结尾"""
        parts = [str(song) for song in self._song_queue.get_list()]
        parts.append("END")
        return " -> ".join(parts)

    def __repr__(self) -> str:
        return f"JukeBox(capacity={self._capacity}, size={self.size()})"

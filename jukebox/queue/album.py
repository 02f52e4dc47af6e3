"""
专辑 - 以后进先出顺序保存歌曲

专辑内部使用链式栈存储歌曲，最近添加的歌曲最先被取出。
同一张专辑中不允许出现相等的歌曲。
"""

import logging
from typing import Optional

from jukebox.structures import LinkedStack
from .errors import DuplicateSongError, EmptyCollectionError, InvalidArgumentError
from .song import Song


class Album:
    """
    专辑实现

    负责歌曲的去重添加、按后进先出顺序移除以及文本展示。
    """

    def __init__(self, album_name: str):
        """
        初始化专辑

        Args:
            album_name: 专辑名称

        Raises:
            InvalidArgumentError: 当专辑名称为空时
        """
        if not album_name:
            raise InvalidArgumentError("专辑名称不能为空", "album_name", album_name)

        self._album_name = album_name
        self._size = 0
        self._track_list: LinkedStack[Song] = LinkedStack()
        self.logger = logging.getLogger("jukebox.queue.album")

        self.logger.debug(f"专辑初始化完成 - {album_name}")

    @property
    def album_name(self) -> str:
        return self._album_name

    def get_album_name(self) -> str:
        return self._album_name

    def add_song(self, song: Song) -> None:
        """
        添加歌曲到专辑

        添加成功后会把歌曲的所属专辑设置为本专辑。

        Args:
            song: 要添加的歌曲

        Raises:
            DuplicateSongError: 当专辑中已有相等的歌曲时
        """
        if self._track_list.contains(song):
            self.logger.info(f"阻止重复歌曲加入专辑 {self._album_name}: {song}")
            raise DuplicateSongError(
                f"歌曲 {song} 已经在专辑 {self._album_name} 中", getattr(song, "title", None)
            )

        song.set_album(self)
        self._track_list.push(song)
        self._size += 1

        self.logger.debug(f"添加歌曲到专辑 {self._album_name}: {song} (共 {self._size} 首)")

    def first_song(self) -> Optional[Song]:
        """
        查看最近添加的歌曲但不移除

        Returns:
            最近添加的歌曲，专辑为空时返回None
        """
        if self._size == 0:
            return None
        return self._track_list.peek()

    def remove_song(self) -> Song:
        """
        移除并返回最近添加的歌曲

        Returns:
            被移除的歌曲

        Raises:
            EmptyCollectionError: 当专辑为空时
        """
        if self._size == 0:
            raise EmptyCollectionError(f"专辑 {self._album_name} 中没有歌曲")

        self._size -= 1
        song = self._track_list.pop()

        self.logger.debug(f"从专辑 {self._album_name} 移除歌曲: {song}")
        return song

    def size(self) -> int:
        return self._size

    def __str__(self) -> str:
        """专辑名称，后接按从新到旧排列的歌曲，每首一行"""
        if self._size == 0:
            return self._album_name

        lines = [self._album_name]
        lines.extend(str(song) for song in self._track_list.get_list())
        return "\n".join(lines)

    def __repr__(self) -> str:
        return f"Album(album_name='{self._album_name}', size={self._size})"

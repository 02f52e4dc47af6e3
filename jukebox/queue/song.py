"""
歌曲数据模型 - 定义歌曲的数据结构和基本操作

歌曲按标题和艺术家判断是否相同；所属专辑只是一个弱引用，
不参与相等比较，也不会让歌曲持有专辑。
"""

import weakref
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Optional

if TYPE_CHECKING:
    from .album import Album


@dataclass
class Song:
    """
    歌曲数据类

    两首歌曲的标题和艺术家都相同时视为同一首歌，用于去重。
    """
    title: str
    artist: str
    duration: int = field(default=0, compare=False)
    _album_ref: Optional["weakref.ReferenceType[Album]"] = field(
        default=None, init=False, compare=False, repr=False
    )

    @property
    def album(self) -> Optional["Album"]:
        """获取所属专辑，专辑已被回收或未设置时返回None"""
        if self._album_ref is None:
            return None
        return self._album_ref()

    def get_album(self) -> Optional["Album"]:
        return self.album

    def set_album(self, album: Optional["Album"]) -> None:
        """
        设置所属专辑的反向引用

        Args:
            album: 专辑对象，None 表示清除
        """
        self._album_ref = weakref.ref(album) if album is not None else None

    def format_duration(self) -> str:
        """
        格式化时长为可读字符串

        Returns:
            格式化的时长字符串 (例: "3:45")
        """
        minutes = self.duration // 60
        seconds = self.duration % 60
        return f"{minutes}:{seconds:02d}"

    def __str__(self) -> str:
        """字符串表示"""
        if self.duration > 0:
            return f"{self.title} - {self.artist} ({self.format_duration()})"
        return f"{self.title} - {self.artist}"

"""
队列管理模块 - 处理专辑和点唱机播放队列

专辑以后进先出顺序保存歌曲，点唱机以先进先出顺序播放歌曲，
并负责容量限制、去重以及从专辑导入歌曲。
"""

from .album import Album
from .errors import (
    CapacityExceededError,
    DuplicateSongError,
    EmptyCollectionError,
    InvalidArgumentError,
    JukeBoxError,
)
from .jukebox import JukeBox
from .song import Song

__all__ = [
    "Album",
    "JukeBox",
    "Song",
    "JukeBoxError",
    "InvalidArgumentError",
    "DuplicateSongError",
    "EmptyCollectionError",
    "CapacityExceededError"
]

"""
点唱机 - 由专辑供歌的播放队列

专辑以后进先出顺序保存歌曲，点唱机以先进先出顺序播放，
两者都建立在链式栈和链式队列之上。
"""

from jukebox.queue import (
    Album,
    CapacityExceededError,
    DuplicateSongError,
    EmptyCollectionError,
    InvalidArgumentError,
    JukeBox,
    JukeBoxError,
    Song,
)
from jukebox.structures import LinkedNode, LinkedQueue, LinkedStack

__version__ = "0.1.0"

__all__ = [
    "Album",
    "JukeBox",
    "Song",
    "LinkedNode",
    "LinkedStack",
    "LinkedQueue",
    "JukeBoxError",
    "InvalidArgumentError",
    "DuplicateSongError",
    "EmptyCollectionError",
    "CapacityExceededError"
]

"""
点唱机异常定义

专辑和点唱机在参数非法、重复添加、空集合取歌以及容量已满时抛出这些异常。
底层的栈和队列从不抛出它们。
"""

from typing import Any, Optional


class JukeBoxError(Exception):
    """点唱机相关异常的基类"""


class InvalidArgumentError(JukeBoxError, ValueError):
    """
    参数非法异常

    构造专辑时名称为空，或构造点唱机时容量为负数时抛出。
    """
    def __init__(self, message: str, argument: str, value: Any = None):
        super().__init__(message)
        self.argument = argument
        self.value = value


class DuplicateSongError(JukeBoxError, ValueError):
    """
    重复歌曲异常

    当添加的歌曲与容器中已有歌曲相等时抛出，容器保持不变。
    """
    def __init__(self, message: str, song_title: Optional[str] = None):
        super().__init__(message)
        self.song_title = song_title


class EmptyCollectionError(JukeBoxError, LookupError):
    """
    空集合异常

    从空专辑移除歌曲或从空点唱机播放歌曲时抛出。
    """


class CapacityExceededError(JukeBoxError):
    """
    容量超限异常

    当点唱机已满时继续添加歌曲抛出。
    """
    def __init__(self, message: str, capacity: int, song_title: Optional[str] = None):
        super().__init__(message)
        self.capacity = capacity
        self.song_title = song_title

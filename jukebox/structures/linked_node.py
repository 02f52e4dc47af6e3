"""
链表节点 - 单向链表的基本存储单元
"""

from typing import Generic, Optional, TypeVar

T = TypeVar("T")


class LinkedNode(Generic[T]):
    """
    单向链表节点

    保存一个元素和指向下一个节点的引用，不做任何校验。
    """

    def __init__(self, data: T, next_node: Optional["LinkedNode[T]"] = None):
        self._data = data
        self._next = next_node

    def get_data(self) -> T:
        return self._data

    def set_data(self, data: T) -> None:
        self._data = data

    def get_next(self) -> Optional["LinkedNode[T]"]:
        return self._next

    def set_next(self, next_node: Optional["LinkedNode[T]"]) -> None:
        self._next = next_node

    @property
    def data(self) -> T:
        return self._data

    @data.setter
    def data(self, data: T) -> None:
        self._data = data

    @property
    def next(self) -> Optional["LinkedNode[T]"]:
        return self._next

    @next.setter
    def next(self, next_node: Optional["LinkedNode[T]"]) -> None:
        self._next = next_node

    def __repr__(self) -> str:
        return f"LinkedNode(data={self._data!r}, has_next={self._next is not None})"

"""
链式栈 - 基于单向链表的后进先出容器

栈本身不限制容量，也从不因为空栈而抛出异常：
pop/peek 在空栈上返回 None，由调用方决定如何处理。
"""

from typing import Iterator, List, Optional, TypeVar

from jukebox.core.interfaces import IStack
from .linked_node import LinkedNode

T = TypeVar("T")


class LinkedStack(IStack[T]):
    """
    链式栈实现

    只持有栈顶节点的引用，从栈顶沿 next 遍历即为从新到旧的顺序。
    """

    def __init__(self):
        self._top: Optional[LinkedNode[T]] = None

    def push(self, value: T) -> None:
        """
        将元素压入栈顶

        Args:
            value: 要压入的元素
        """
        self._top = LinkedNode(value, self._top)

    def pop(self) -> Optional[T]:
        """
        弹出栈顶元素

        Returns:
            最近压入的元素，栈为空时返回None
        """
        if self._top is None:
            return None

        node = self._top
        self._top = node.get_next()
        node.set_next(None)
        return node.get_data()

    def peek(self) -> Optional[T]:
        """
        查看栈顶元素但不移除

        Returns:
            最近压入的元素，栈为空时返回None
        """
        if self._top is None:
            return None
        return self._top.get_data()

    def is_empty(self) -> bool:
        return self._top is None

    def contains(self, value: T) -> bool:
        """
        检查栈中是否存在与 value 相等的元素（按值比较，而非身份）

        Args:
            value: 要查找的元素

        Returns:
            找到相等元素时返回True
        """
        for item in self:
            if item == value:
                return True
        return False

    def get_list(self) -> List[T]:
        """
        获取栈内元素的快照列表

        Returns:
            从栈顶到栈底排列的新列表，修改它不会影响栈
        """
        return list(self)

    def __iter__(self) -> Iterator[T]:
        current = self._top
        while current is not None:
            yield current.get_data()
            current = current.get_next()

    def __repr__(self) -> str:
        return f"LinkedStack({self.get_list()!r})"

"""
链式队列 - 基于单向链表的先进先出容器

同时跟踪队首和队尾节点以及元素数量。队列本身不限制容量，
容量约束由上层的点唱机负责。
"""

from typing import Iterator, List, Optional, TypeVar

from jukebox.core.interfaces import IQueue
from .linked_node import LinkedNode

T = TypeVar("T")


class LinkedQueue(IQueue[T]):
    """
    链式队列实现

    不变量：_front 为空 当且仅当 _back 为空 当且仅当 _size 为 0；
    _back.next 始终为空。
    """

    def __init__(self):
        self._front: Optional[LinkedNode[T]] = None
        self._back: Optional[LinkedNode[T]] = None
        self._size = 0

    def enqueue(self, value: T) -> None:
        """
        将元素加入队尾

        Args:
            value: 要加入的元素
        """
        node = LinkedNode(value)

        if self.is_empty():
            self._front = node
            self._back = node
        else:
            self._back.set_next(node)
            self._back = node

        self._size += 1

    def dequeue(self) -> Optional[T]:
        """
        移除并返回队首元素

        Returns:
            最早加入的元素，队列为空时返回None
        """
        if self.is_empty():
            return None

        node = self._front

        if self._size == 1:
            self.clear()
        else:
            self._front = node.get_next()
            node.set_next(None)
            self._size -= 1

        return node.get_data()

    def peek(self) -> Optional[T]:
        """
        查看队首元素但不移除

        Returns:
            最早加入的元素，队列为空时返回None
        """
        if self.is_empty():
            return None
        return self._front.get_data()

    def is_empty(self) -> bool:
        return self._size == 0

    def size(self) -> int:
        return self._size

    def clear(self) -> None:
        """清空队列，节点链交给垃圾回收"""
        self._front = None
        self._back = None
        self._size = 0

    def contains(self, value: T) -> bool:
        """
        检查队列中是否存在与 value 相等的元素（按值比较）

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
        获取队列元素的快照列表

        Returns:
            从队首到队尾排列的新列表
        """
        return list(self)

    def __iter__(self) -> Iterator[T]:
        # 遍历在到达 _back 节点本身时结束，而不只依赖 next 为空
        current = self._front
        while current is not None:
            yield current.get_data()
            if current is self._back:
                break
            current = current.get_next()

    def __len__(self) -> int:
        return self._size

    def __repr__(self) -> str:
        return f"LinkedQueue({self.get_list()!r})"

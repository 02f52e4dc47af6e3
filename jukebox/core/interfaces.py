"""
核心接口定义 - 定义顺序容器的抽象接口

栈和队列只约定"无值时返回 None"的行为，从不抛出异常；
是否把"空"视为错误由上层的专辑和点唱机决定。
"""

from abc import ABC, abstractmethod
from typing import Generic, List, Optional, TypeVar

T = TypeVar("T")


class IStack(ABC, Generic[T]):
    """栈接口 - 定义后进先出容器的基本操作"""

    @abstractmethod
    def push(self, value: T) -> None:
        """将元素压入栈顶"""
        pass

    @abstractmethod
    def pop(self) -> Optional[T]:
        """弹出并返回栈顶元素，栈为空时返回None"""
        pass

    @abstractmethod
    def peek(self) -> Optional[T]:
        """查看栈顶元素但不移除"""
        pass

    @abstractmethod
    def is_empty(self) -> bool:
        """检查栈是否为空"""
        pass

    @abstractmethod
    def contains(self, value: T) -> bool:
        """检查栈中是否存在相等的元素"""
        pass

    @abstractmethod
    def get_list(self) -> List[T]:
        """获取从栈顶到栈底的元素快照"""
        pass


class IQueue(ABC, Generic[T]):
    """队列接口 - 定义先进先出容器的基本操作"""

    @abstractmethod
    def enqueue(self, value: T) -> None:
        """将元素加入队尾"""
        pass

    @abstractmethod
    def dequeue(self) -> Optional[T]:
        """移除并返回队首元素，队列为空时返回None"""
        pass

    @abstractmethod
    def peek(self) -> Optional[T]:
        """查看队首元素但不移除"""
        pass

    @abstractmethod
    def is_empty(self) -> bool:
        """检查队列是否为空"""
        pass

    @abstractmethod
    def size(self) -> int:
        """获取队列中的元素数量"""
        pass

    @abstractmethod
    def clear(self) -> None:
        """清空队列"""
        pass

    @abstractmethod
    def contains(self, value: T) -> bool:
        """检查队列中是否存在相等的元素"""
        pass

    @abstractmethod
    def get_list(self) -> List[T]:
        """获取从队首到队尾的元素快照"""
        pass

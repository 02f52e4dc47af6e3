"""
顺序容器模块 - 基于单向链表的栈和队列

栈和队列在空状态下返回 None 而不是抛出异常，
上层的专辑和点唱机再决定是否将其视为错误。
"""

from .linked_node import LinkedNode
from .linked_stack import LinkedStack
from .linked_queue import LinkedQueue

__all__ = [
    "LinkedNode",
    "LinkedStack",
    "LinkedQueue"
]

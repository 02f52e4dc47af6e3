"""
链式栈测试

测试后进先出顺序、空栈返回 None、按值查找以及快照列表。
"""

import unittest
import sys
import os

# Add the project root to the path
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from jukebox.core.interfaces import IStack
from jukebox.structures import LinkedStack


class TestLinkedStack(unittest.TestCase):
    """测试链式栈"""

    def setUp(self):
        """设置测试环境"""
        self.stack = LinkedStack()

    def test_implements_interface(self):
        self.assertIsInstance(self.stack, IStack)

    def test_empty_stack(self):
        """测试空栈的行为"""
        self.assertTrue(self.stack.is_empty())
        self.assertIsNone(self.stack.pop())
        self.assertIsNone(self.stack.peek())
        self.assertFalse(self.stack.contains(1))
        self.assertEqual(self.stack.get_list(), [])

    def test_push_then_peek(self):
        """测试压栈后查看栈顶"""
        self.stack.push(1)
        self.stack.push(2)

        self.assertFalse(self.stack.is_empty())
        self.assertEqual(self.stack.peek(), 2)
        self.assertTrue(self.stack.contains(1))

    def test_pop_returns_reverse_order(self):
        """测试弹出顺序与压入顺序相反，且恰好 n 次弹出后为空"""
        values = list(range(1, 8))
        for value in values:
            self.stack.push(value)

        popped = []
        for _ in values:
            self.assertFalse(self.stack.is_empty())
            popped.append(self.stack.pop())

        self.assertEqual(popped, list(reversed(values)))
        self.assertTrue(self.stack.is_empty())
        self.assertIsNone(self.stack.pop())

    def test_pop_updates_contains(self):
        """测试弹出后不再包含该元素"""
        self.stack.push(1)
        self.stack.push(2)

        self.assertEqual(self.stack.pop(), 2)
        self.assertEqual(self.stack.peek(), 1)
        self.assertFalse(self.stack.contains(2))

    def test_peek_does_not_mutate(self):
        """测试查看栈顶不修改栈"""
        self.stack.push("a")
        self.stack.push("b")

        self.assertEqual(self.stack.peek(), "b")
        self.assertEqual(self.stack.peek(), "b")
        self.assertEqual(self.stack.get_list(), ["b", "a"])

    def test_contains_uses_value_equality(self):
        """测试按值而不是按身份查找"""
        self.stack.push([1, 2])
        self.assertTrue(self.stack.contains([1, 2]))
        self.assertFalse(self.stack.contains([2, 1]))

    def test_get_list_is_snapshot(self):
        """测试快照列表从栈顶到栈底，修改它不影响栈"""
        for value in (1, 2, 3):
            self.stack.push(value)

        snapshot = self.stack.get_list()
        self.assertEqual(snapshot, [3, 2, 1])

        snapshot.clear()
        self.assertEqual(self.stack.get_list(), [3, 2, 1])

    def test_iteration_matches_list(self):
        self.stack.push("x")
        self.stack.push("y")
        self.assertEqual(list(self.stack), ["y", "x"])

    def test_none_can_be_pushed(self):
        """测试 None 可以作为元素，此时 pop 的 None 与空栈无法区分，需用 is_empty 判断"""
        self.stack.push(None)
        self.assertFalse(self.stack.is_empty())
        self.assertIsNone(self.stack.pop())
        self.assertTrue(self.stack.is_empty())


if __name__ == '__main__':
    unittest.main()

"""
链表节点测试
"""

import unittest
import sys
import os

# Add the project root to the path
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from jukebox.structures import LinkedNode


class TestLinkedNode(unittest.TestCase):
    """测试链表节点"""

    def test_next_defaults_to_none(self):
        """测试新节点没有后继"""
        node = LinkedNode("a")
        self.assertEqual(node.get_data(), "a")
        self.assertIsNone(node.get_next())

    def test_set_data_and_next(self):
        """测试修改数据和后继"""
        first = LinkedNode(1)
        second = LinkedNode(2)

        first.set_next(second)
        first.set_data(10)

        self.assertIs(first.get_next(), second)
        self.assertEqual(first.get_data(), 10)

    def test_properties_mirror_accessors(self):
        """测试属性与访问方法一致"""
        tail = LinkedNode("tail")
        node = LinkedNode("head", tail)

        self.assertEqual(node.data, "head")
        self.assertIs(node.next, tail)

        node.data = "new head"
        node.next = None
        self.assertEqual(node.get_data(), "new head")
        self.assertIsNone(node.get_next())


if __name__ == '__main__':
    unittest.main()

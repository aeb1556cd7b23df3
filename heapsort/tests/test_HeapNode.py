import unittest

from ..Heap import Heap


class HeapNodeTests(unittest.TestCase):
    def setUp(self):
        self.heap = Heap([6, 5, 4, 3, 2, 1])

    def test_layout(self):
        self.assertEqual(self.heap.values, [6, 5, 4, 3, 2, 1])

    def test_indices(self):
        node = self.heap.node(0)
        self.assertIsNone(node.parent_index(0))
        self.assertEqual(node.parent_index(5), 2)
        self.assertEqual(node.parent_index(4), 1)
        self.assertEqual(node.left_child_index(2), 5)
        self.assertIsNone(node.right_child_index(2))
        self.assertIsNone(node.left_child_index(3))

    def test_root(self):
        root = self.heap.node(0)
        self.assertTrue(root.is_root())
        self.assertIsNone(root.parent())
        self.assertEqual(root.left().value, 5)
        self.assertEqual(root.right().value, 4)
        self.assertEqual([n.index for n in root.children()], [1, 2])
        self.assertEqual([n.index for n in root.self_and_children()], [1, 2, 0])

    def test_one_child(self):
        node = self.heap.node(2)
        self.assertFalse(node.is_root())
        self.assertEqual(node.parent(), self.heap.node(0))
        self.assertEqual([n.value for n in node.children()], [1])
        self.assertIsNone(node.right())

    def test_leaf(self):
        leaf = self.heap.node(4)
        self.assertEqual(leaf.children(), [])
        self.assertEqual(leaf.self_and_children(), [leaf])
        self.assertEqual(leaf.parent().value, 5)

    def test_value_writes_through(self):
        node = self.heap.node(3)
        node.value = 0
        self.assertEqual(self.heap.values[3], 0)
        self.assertEqual(repr(node), "[0, 3]")

    def test_equality(self):
        self.assertEqual(self.heap.node(1), self.heap.node(1))
        self.assertNotEqual(self.heap.node(1), self.heap.node(2))
        self.assertNotEqual(self.heap.node(1), Heap([6, 5]).node(1))


if __name__ == "__main__":
    unittest.main()

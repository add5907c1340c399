import sys
import os
import unittest

sys.path.insert(0, os.path.join(os.path.dirname(__file__), "..", "src"))

from linked_list import LinkedList


class TestLinkedList(unittest.TestCase):
    def test_new_list_is_empty(self):
        lst = LinkedList()
        self.assertEqual(lst.size(), 0)
        self.assertTrue(lst.is_empty())
        self.assertEqual(len(lst), 0)
        self.assertEqual(list(lst), [])

    def test_is_empty_false_once_populated(self):
        lst = LinkedList()
        lst.add(1)
        self.assertFalse(lst.is_empty())

    def test_add_keeps_insertion_order(self):
        lst = LinkedList()
        lst.add(3)
        lst.add(1)
        lst.add(2)
        self.assertEqual(lst.size(), 3)
        self.assertEqual(list(lst), [3, 1, 2])

    def test_construct_from_iterable(self):
        lst = LinkedList(x * 2 for x in range(4))
        self.assertEqual(list(lst), [0, 2, 4, 6])

    def test_duplicates_are_kept(self):
        lst = LinkedList([2, 2, 2])
        self.assertEqual(len(lst), 3)

    def test_remove_at_head(self):
        lst = LinkedList([1, 2, 3])
        self.assertEqual(lst.remove_at(0), 1)
        self.assertEqual(list(lst), [2, 3])

    def test_remove_at_tail(self):
        lst = LinkedList([1, 2, 3])
        self.assertEqual(lst.remove_at(2), 3)
        self.assertEqual(list(lst), [1, 2])
        lst.add(4)
        self.assertEqual(list(lst), [1, 2, 4])

    def test_remove_at_middle(self):
        lst = LinkedList([1, 2, 3, 4, 5])
        self.assertEqual(lst.remove_at(1), 2)
        self.assertEqual(lst.remove_at(2), 4)
        self.assertEqual(list(lst), [1, 3, 5])
        self.assertEqual(lst.size(), 3)

    def test_remove_only_element(self):
        lst = LinkedList([7])
        self.assertEqual(lst.remove_at(0), 7)
        self.assertTrue(lst.is_empty())
        lst.add(8)
        self.assertEqual(list(lst), [8])

    def test_remove_at_out_of_range_raises(self):
        lst = LinkedList([1])
        with self.assertRaises(IndexError):
            lst.remove_at(1)
        with self.assertRaises(IndexError):
            lst.remove_at(-1)
        with self.assertRaises(IndexError):
            LinkedList().remove_at(0)

    def test_remove_at_non_integer_raises(self):
        lst = LinkedList([1])
        with self.assertRaises(TypeError):
            lst.remove_at("0")

    def test_clear(self):
        lst = LinkedList([1, 2])
        lst.clear()
        self.assertTrue(lst.is_empty())
        self.assertEqual(list(lst), [])

    def test_repr(self):
        self.assertEqual(repr(LinkedList([1, 2])), "LinkedList([1, 2])")


if __name__ == "__main__":
    unittest.main()

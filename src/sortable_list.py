from typing import Iterable, List, TypeVar

from binary_search_tree import BinarySearchTree, Comparable, Traversal
from linked_list import LinkedList

T = TypeVar('T', bound=Comparable)


def sorted_values(values: Iterable[T]) -> List[T]:
    """Sort ``values`` ascending by building a tree and reading it in-order.

    Equal values collapse to a single entry holding the last one inserted,
    so this is not a multiset sort.
    """
    tree: BinarySearchTree[T] = BinarySearchTree()
    for value in values:
        tree.insert(value)
    return tree.traverse(Traversal.IN_ORDER)


class SortableList(LinkedList):
    """A LinkedList that can hand back its contents in sorted order."""

    def sorted_list(self) -> LinkedList:
        return LinkedList(sorted_values(self))

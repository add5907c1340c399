from enum import Enum
from typing import Any, Callable, Dict, Generic, Iterator, List, Optional, Protocol, Tuple, TypeVar


class Comparable(Protocol):
    def __lt__(self, other: Any) -> bool: ...

    def __gt__(self, other: Any) -> bool: ...


T = TypeVar('T', bound=Comparable)


class InvalidArgument(ValueError):
    """Raised for a None value or an unknown traversal order.

    The tree is never modified when this is raised.
    """


class Traversal(Enum):
    PRE_ORDER = "pre-order"
    IN_ORDER = "in-order"
    POST_ORDER = "post-order"


class BinarySearchTree(Generic[T]):
    """Unbalanced binary search tree.

    Inserting a value equal to one already stored replaces the stored value,
    so the tree never holds two equal values. Removing a node with two
    children promotes its in-order successor (leftmost node of the right
    subtree) into its place.

    Every operation walks the tree iteratively, so a degenerate tree built
    from sorted input is handled regardless of the recursion limit.
    """

    class Node:
        def __init__(self, value: T) -> None:
            self.value: T = value
            self.left: Optional['BinarySearchTree.Node'] = None
            self.right: Optional['BinarySearchTree.Node'] = None

        def __repr__(self) -> str:
            return f"Node({self.value!r})"

    def __init__(self) -> None:
        self._root: Optional[BinarySearchTree.Node] = None
        self._size: int = 0

    @property
    def root(self) -> Optional['BinarySearchTree.Node']:
        return self._root

    def insert(self, value: T) -> None:
        if value is None:
            raise InvalidArgument("cannot insert None")

        if self._root is None:
            self._root = BinarySearchTree.Node(value)
            self._size += 1
            return

        node = self._root
        while True:
            if value < node.value:
                if node.left is None:
                    node.left = BinarySearchTree.Node(value)
                    self._size += 1
                    return
                node = node.left
            elif value > node.value:
                if node.right is None:
                    node.right = BinarySearchTree.Node(value)
                    self._size += 1
                    return
                node = node.right
            else:
                # equal keys: keep the node, take the newer payload
                node.value = value
                return

    def remove(self, value: T) -> None:
        if value is None:
            raise InvalidArgument("cannot remove None")

        parent: Optional[BinarySearchTree.Node] = None
        node = self._root
        is_left_child = False

        while node is not None:
            if value < node.value:
                parent = node
                node = node.left
                is_left_child = True
            elif value > node.value:
                parent = node
                node = node.right
                is_left_child = False
            else:
                break

        if node is None:
            return

        if node.right is None:
            replacement = node.left
        elif node.left is None:
            replacement = node.right
        else:
            replacement = self._join_subtrees(node.left, node.right)

        if parent is None:
            self._root = replacement
        elif is_left_child:
            parent.left = replacement
        else:
            parent.right = replacement

        node.left = None
        node.right = None
        self._size -= 1

    def _join_subtrees(self, left_root: Node, right_root: Node) -> Node:
        """Join two subtrees whose common parent was removed.

        The leftmost node of ``right_root`` is unlinked (its right child
        takes its place) and becomes the root of the joined tree, with
        ``left_root`` on its left and what remains of ``right_root`` on its
        right.
        """
        successor_parent: Optional[BinarySearchTree.Node] = None
        successor = right_root
        while successor.left is not None:
            successor_parent = successor
            successor = successor.left

        if successor_parent is not None:
            successor_parent.left = successor.right
            successor.right = right_root
        successor.left = left_root
        return successor

    def traverse(self, order: Traversal) -> List[T]:
        """Return a new list of every value in the given traversal order."""
        if not isinstance(order, Traversal):
            raise InvalidArgument(f"unknown traversal order: {order!r}")
        walkers: Dict[Traversal, Callable[[], List[T]]] = {
            Traversal.PRE_ORDER: self.pre_order,
            Traversal.IN_ORDER: self.in_order,
            Traversal.POST_ORDER: self.post_order,
        }
        return walkers[order]()

    def in_order(self) -> List[T]:
        result: List[T] = []
        stack: List[BinarySearchTree.Node] = []
        node = self._root
        while stack or node is not None:
            while node is not None:
                stack.append(node)
                node = node.left
            node = stack.pop()
            result.append(node.value)
            node = node.right
        return result

    def pre_order(self) -> List[T]:
        result: List[T] = []
        if self._root is None:
            return result
        stack: List[BinarySearchTree.Node] = [self._root]
        while stack:
            node = stack.pop()
            result.append(node.value)
            if node.right is not None:
                stack.append(node.right)
            if node.left is not None:
                stack.append(node.left)
        return result

    def post_order(self) -> List[T]:
        # root-right-left, reversed
        result: List[T] = []
        if self._root is None:
            return result
        stack: List[BinarySearchTree.Node] = [self._root]
        while stack:
            node = stack.pop()
            result.append(node.value)
            if node.left is not None:
                stack.append(node.left)
            if node.right is not None:
                stack.append(node.right)
        result.reverse()
        return result

    def contains(self, value: T) -> bool:
        if value is None:
            return False
        return self._find_node(self._root, value) is not None

    def min(self) -> T:
        if self._root is None:
            raise ValueError("min from empty tree")
        return self._find_min(self._root).value

    def max(self) -> T:
        if self._root is None:
            raise ValueError("max from empty tree")
        return self._find_max(self._root).value

    def height(self) -> int:
        if self._root is None:
            return 0
        deepest = 0
        stack: List[Tuple[BinarySearchTree.Node, int]] = [(self._root, 1)]
        while stack:
            node, depth = stack.pop()
            deepest = max(deepest, depth)
            if node.left is not None:
                stack.append((node.left, depth + 1))
            if node.right is not None:
                stack.append((node.right, depth + 1))
        return deepest

    def size(self) -> int:
        return self._size

    def is_empty(self) -> bool:
        return self._size == 0

    def clear(self) -> None:
        self._root = None
        self._size = 0

    def copy(self) -> 'BinarySearchTree[T]':
        clone: BinarySearchTree[T] = BinarySearchTree()
        for value in self.pre_order():
            clone.insert(value)
        return clone

    def dump(self) -> str:
        """Render one line per node, in-order, for debugging."""
        lines: List[str] = []
        stack: List[BinarySearchTree.Node] = []
        node = self._root
        while stack or node is not None:
            while node is not None:
                stack.append(node)
                node = node.left
            node = stack.pop()
            left = node.left.value if node.left is not None else None
            right = node.right.value if node.right is not None else None
            prefix = "root " if node is self._root else ""
            lines.append(f"{prefix}{node.value!r} left={left!r} right={right!r}")
            node = node.right
        return "\n".join(lines)

    def _find_node(self, node: Optional[Node], value: T) -> Optional[Node]:
        while node is not None:
            if value < node.value:
                node = node.left
            elif value > node.value:
                node = node.right
            else:
                return node
        return None

    def _find_min(self, node: Node) -> Node:
        while node.left is not None:
            node = node.left
        return node

    def _find_max(self, node: Node) -> Node:
        while node.right is not None:
            node = node.right
        return node

    def __len__(self) -> int:
        return self._size

    def __contains__(self, value: T) -> bool:
        return self.contains(value)

    def __iter__(self) -> Iterator[T]:
        return iter(self.in_order())

    def __repr__(self) -> str:
        return f"BinarySearchTree({self.in_order()})"

    def __str__(self) -> str:
        return f"BinarySearchTree(size={self._size})"

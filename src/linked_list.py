class LinkedList:
    """Doubly linked list with append, removal by index and iteration."""

    class Node:
        def __init__(self, value, prev=None):
            self.value = value
            self.prev = prev
            self.next = None

    def __init__(self, values=None):
        self._head = None
        self._tail = None
        self._size = 0
        if values is not None:
            for value in values:
                self.add(value)

    def add(self, value):
        node = self.Node(value, self._tail)
        if self._tail is None:
            self._head = node
        else:
            self._tail.next = node
        self._tail = node
        self._size += 1

    def remove_at(self, index):
        if not isinstance(index, int):
            raise TypeError("index must be an integer")
        if index < 0 or index >= self._size:
            raise IndexError("index out of range")
        if index < self._size // 2:
            current = self._head
            for _ in range(index):
                current = current.next
        else:
            current = self._tail
            for _ in range(self._size - 1 - index):
                current = current.prev

        if current.prev is None:
            self._head = current.next
        else:
            current.prev.next = current.next
        if current.next is None:
            self._tail = current.prev
        else:
            current.next.prev = current.prev
        current.prev = None
        current.next = None
        self._size -= 1
        return current.value

    def size(self):
        return self._size

    def is_empty(self):
        return self._size == 0

    def clear(self):
        self._head = None
        self._tail = None
        self._size = 0

    def __iter__(self):
        current = self._head
        while current is not None:
            yield current.value
            current = current.next

    def __len__(self):
        return self._size

    def __repr__(self):
        return f"{type(self).__name__}({list(self)})"

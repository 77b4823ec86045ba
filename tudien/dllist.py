"""Circular doubly linked list with a sentinel node."""

from __future__ import annotations

from typing import Any, Iterable, Iterator, Optional


class DllNode:
    """One element of a :class:`DoublyLinkedList`."""

    __slots__ = ("value", "flink", "blink", "_sentinel")

    def __init__(self, value: Any = None, *, sentinel: bool = False) -> None:
        self.value = value
        self.flink: Optional[DllNode] = None
        self.blink: Optional[DllNode] = None
        self._sentinel = sentinel

    def next(self) -> Optional["DllNode"]:
        """Return the following node, or None at the end of the list."""
        n = self.flink
        if n is None or n._sentinel:
            return None
        return n

    def prev(self) -> Optional["DllNode"]:
        """Return the preceding node, or None at the start of the list."""
        n = self.blink
        if n is None or n._sentinel:
            return None
        return n

    def __repr__(self) -> str:
        return f"DllNode({self.value!r})"


class DoublyLinkedList:
    """A doubly linked list; nodes may be inserted or removed anywhere in O(1)."""

    def __init__(self, values: Optional[Iterable[Any]] = None) -> None:
        self._head = DllNode(sentinel=True)
        self._head.flink = self._head
        self._head.blink = self._head
        self._size = 0
        if values is not None:
            for value in values:
                self.append(value)

    @staticmethod
    def _check_member(node: DllNode) -> None:
        if node._sentinel:
            raise ValueError("the sentinel node cannot be used here")
        if node.flink is None or node.blink is None:
            raise ValueError("node is not in a list")

    def _link_before(self, node: DllNode, value: Any) -> DllNode:
        new = DllNode(value)
        new.flink = node
        new.blink = node.blink
        new.flink.blink = new
        new.blink.flink = new
        self._size += 1
        return new

    def insert_before(self, node: DllNode, value: Any) -> DllNode:
        """Insert ``value`` before ``node`` and return the new node."""
        self._check_member(node)
        return self._link_before(node, value)

    def insert_after(self, node: DllNode, value: Any) -> DllNode:
        """Insert ``value`` after ``node`` and return the new node."""
        self._check_member(node)
        return self._link_before(node.flink, value)

    def append(self, value: Any) -> DllNode:
        """Insert ``value`` at the end and return the new node."""
        return self._link_before(self._head, value)

    def prepend(self, value: Any) -> DllNode:
        """Insert ``value`` at the beginning and return the new node."""
        return self._link_before(self._head.flink, value)

    def delete_node(self, node: DllNode) -> None:
        """Unlink ``node`` from the list."""
        self._check_member(node)
        node.flink.blink = node.blink
        node.blink.flink = node.flink
        node.flink = node.blink = None
        self._size -= 1

    def is_empty(self) -> bool:
        return self._head.flink is self._head

    def first(self) -> Optional[DllNode]:
        """Return the first node, or None if the list is empty."""
        return self._head.next()

    def last(self) -> Optional[DllNode]:
        """Return the last node, or None if the list is empty."""
        return self._head.prev()

    def clear(self) -> None:
        """Remove every node."""
        while not self.is_empty():
            self.delete_node(self._head.flink)

    def __iter__(self) -> Iterator[DllNode]:
        node = self._head.flink
        while node is not self._head:
            following = node.flink
            yield node
            node = following

    def __reversed__(self) -> Iterator[DllNode]:
        node = self._head.blink
        while node is not self._head:
            preceding = node.blink
            yield node
            node = preceding

    def __len__(self) -> int:
        return self._size
"""Doubly linked list with head and tail sentinels and bidirectional iterators."""

from __future__ import annotations

from collections.abc import Callable, Iterator
from typing import Any, Optional


class _Node:
    __slots__ = ("data", "prev", "next")

    def __init__(self, data: Any = None) -> None:
        self.data = data
        self.prev: Optional[_Node] = None
        self.next: Optional[_Node] = None


class ListIterator:
    """A position in a list: an element or the end (the tail sentinel)."""

    __slots__ = ("_node",)

    def __init__(self, node: _Node) -> None:
        self._node = node

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ListIterator):
            return NotImplemented
        return self._node is other._node

    def __hash__(self) -> int:
        return id(self._node)

    def __repr__(self) -> str:
        if not self._is_element():
            return "ListIterator(<end>)"
        return f"ListIterator({self._node.data!r})"

    def _is_element(self) -> bool:
        return self._node.prev is not None and self._node.next is not None

    def next(self) -> ListIterator:
        """Return the following position; the end iterator returns itself."""
        following = self._node.next
        if following is None:
            return self
        return ListIterator(following)

    def prev(self) -> ListIterator:
        """Return the preceding position; the first position returns itself."""
        before = self._node.prev
        if before is None or before.prev is None:
            return self
        return ListIterator(before)

    def get(self) -> Any:
        """Return the element here; raises IndexError at the end."""
        if not self._is_element():
            raise IndexError("iterator does not point at an element")
        return self._node.data

    def set(self, element: Any) -> Any:
        """Replace the element here and return the old one."""
        if not self._is_element():
            raise IndexError("iterator does not point at an element")
        old, self._node.data = self._node.data, element
        return old

    def insert_before(self, element: Any) -> ListIterator:
        """Insert element before this position and return an iterator to it."""
        current = self._node
        before = current.prev
        if before is None:
            raise IndexError("cannot insert before this position")
        node = _Node(element)
        node.next = current
        node.prev = before
        before.next = node
        current.prev = node
        return ListIterator(node)

    def remove(self) -> Any:
        """Unlink the element here from its list and return it."""
        if not self._is_element():
            raise IndexError("iterator does not point at an element")
        node = self._node
        node.prev.next = node.next
        node.next.prev = node.prev
        node.prev = node.next = None
        return node.data


class DList:
    """A doubly linked list."""

    def __init__(self) -> None:
        self._head = _Node()
        self._tail = _Node()
        self._head.next = self._tail
        self._tail.prev = self._head

    def push_head(self, item: Any) -> ListIterator:
        """Add item at the front; return an iterator to it."""
        return ListIterator(self._head.next).insert_before(item)

    def push_tail(self, item: Any) -> ListIterator:
        """Add item at the back; return an iterator to it."""
        return ListIterator(self._tail).insert_before(item)

    def pop_head(self) -> Any:
        """Remove and return the first item."""
        if self.is_empty():
            raise IndexError("pop from empty list")
        return ListIterator(self._head.next).remove()

    def pop_tail(self) -> Any:
        """Remove and return the last item."""
        if self.is_empty():
            raise IndexError("pop from empty list")
        return ListIterator(self._tail.prev).remove()

    def begin(self) -> ListIterator:
        """Return an iterator to the first element, or the end if empty."""
        return ListIterator(self._head.next)

    def end(self) -> ListIterator:
        return ListIterator(self._tail)

    def __len__(self) -> int:
        return sum(1 for _ in self)

    def is_empty(self) -> bool:
        return self._head.next is self._tail

    def __iter__(self) -> Iterator[Any]:
        node = self._head.next
        while node is not self._tail:
            yield node.data
            node = node.next


def for_each(
    begin: ListIterator, end: ListIterator, action: Callable[[Any], Any]
) -> ListIterator:
    """Call action on each element in [begin, end) until it returns a false value.

    Returns an iterator to where iteration stopped, which may be end.
    Raises ValueError if end cannot be reached from begin.
    """
    if not callable(action):
        raise TypeError("action must be callable")
    node = begin._node
    stop = end._node
    while node is not stop:
        if node.next is None or node.prev is None:
            raise ValueError("end is not reachable from begin")
        if not action(node.data):
            break
        node = node.next
    return ListIterator(node)
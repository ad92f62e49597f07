"""Binary search tree with a sentinel node and bidirectional in-order iterators."""

from __future__ import annotations

from collections.abc import Callable, Iterator
from enum import Enum
from typing import Any, Optional

Comparator = Callable[[Any, Any], int]


def natural_order(left: Any, right: Any) -> int:
    """Return 1 if left < right, -1 if left > right and 0 if they are equal."""
    if left < right:
        return 1
    if left > right:
        return -1
    return 0


class TraversalMode(Enum):
    PREORDER = 0
    INORDER = 1
    POSTORDER = 2


class _Node:
    __slots__ = ("data", "left", "right", "parent")

    def __init__(self, data: Any = None, parent: Optional[_Node] = None) -> None:
        self.data = data
        self.left: Optional[_Node] = None
        self.right: Optional[_Node] = None
        self.parent = parent


def _leftmost(node: _Node) -> _Node:
    while node.left is not None:
        node = node.left
    return node


def _rightmost(node: _Node) -> _Node:
    while node.right is not None:
        node = node.right
    return node


def _preorder(node: Optional[_Node]) -> Iterator[_Node]:
    if node is None:
        return
    yield node
    yield from _preorder(node.left)
    yield from _preorder(node.right)


def _inorder(node: Optional[_Node]) -> Iterator[_Node]:
    if node is None:
        return
    yield from _inorder(node.left)
    yield node
    yield from _inorder(node.right)


def _postorder(node: Optional[_Node]) -> Iterator[_Node]:
    if node is None:
        return
    yield from _postorder(node.left)
    yield from _postorder(node.right)
    yield node


_WALKS = {
    TraversalMode.PREORDER: _preorder,
    TraversalMode.INORDER: _inorder,
    TraversalMode.POSTORDER: _postorder,
}


class TreeIterator:
    """A position in a tree: an element or the end (the sentinel)."""

    __slots__ = ("_node",)

    def __init__(self, node: _Node) -> None:
        self._node = node

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, TreeIterator):
            return NotImplemented
        return self._node is other._node

    def __hash__(self) -> int:
        return id(self._node)

    def __repr__(self) -> str:
        if self.at_end():
            return "TreeIterator(<end>)"
        return f"TreeIterator({self._node.data!r})"

    def at_end(self) -> bool:
        """Tell whether this iterator points at the end of the tree."""
        return self._node.parent is None

    def next(self) -> TreeIterator:
        """Return the in-order successor, or the end iterator after the last element."""
        node = self._node
        if node.parent is None:
            return self
        if node.right is not None:
            return TreeIterator(_leftmost(node.right))
        parent = node.parent
        while parent is not None and node is parent.right:
            node, parent = parent, parent.parent
        return TreeIterator(parent) if parent is not None else self

    def prev(self) -> TreeIterator:
        """Return the in-order predecessor; at the first element, return self."""
        node = self._node
        if node.parent is None:
            if node.left is None:
                return self
            return TreeIterator(_rightmost(node.left))
        if node.left is not None:
            return TreeIterator(_rightmost(node.left))
        parent = node.parent
        while (
            parent is not None
            and parent.parent is not None
            and node is parent.left
        ):
            node, parent = parent, parent.parent
        if parent is None or parent.parent is None:
            return self
        return TreeIterator(parent)

    def get(self) -> Any:
        """Return the element here; raises IndexError at the end."""
        if self.at_end():
            raise IndexError("iterator is at the end of the tree")
        return self._node.data

    def remove(self) -> Any:
        """Remove the element here from its tree and return it.

        When the node has two children its place is taken by the in-order
        successor's value, so this iterator then points at that value.
        """
        node = self._node
        if node.parent is None:
            raise IndexError("cannot remove the end of the tree")
        removed = node.data
        if node.left is None or node.right is None:
            child = node.left if node.left is not None else node.right
            parent = node.parent
            if parent.left is node:
                parent.left = child
            else:
                parent.right = child
            if child is not None:
                child.parent = parent
            node.parent = None
            node.left = node.right = None
        else:
            successor = _leftmost(node.right)
            node.data = successor.data
            parent = successor.parent
            child = successor.right
            if parent.left is successor:
                parent.left = child
            else:
                parent.right = child
            if child is not None:
                child.parent = parent
        return removed


class BSTree:
    """A binary search tree without duplicates, ordered by a comparator.

    The comparator returns 1 when its first argument goes before the second,
    -1 when it goes after and 0 when they are equal.
    """

    def __init__(self, less: Comparator = natural_order) -> None:
        if not callable(less):
            raise TypeError("less must be callable")
        self._less = less
        self._sentinel = _Node()

    def insert(self, item: Any) -> TreeIterator:
        """Insert item; return an iterator to it, or the end iterator if already present."""
        parent = self._sentinel
        current = self._sentinel.left
        result = 0
        while current is not None:
            parent = current
            result = self._less(item, current.data)
            if result == 1:
                current = current.left
            elif result == -1:
                current = current.right
            else:
                return self.end()
        node = _Node(item, parent)
        if parent is self._sentinel or result == 1:
            parent.left = node
        else:
            parent.right = node
        return TreeIterator(node)

    def begin(self) -> TreeIterator:
        """Return an iterator to the smallest element, or the end if empty."""
        root = self._sentinel.left
        if root is None:
            return self.end()
        return TreeIterator(_leftmost(root))

    def end(self) -> TreeIterator:
        return TreeIterator(self._sentinel)

    def for_each(
        self, mode: TraversalMode, action: Callable[[Any], Any]
    ) -> TreeIterator:
        """Call action on each element in the given order until it returns a false value.

        Returns an iterator to the element where it stopped, or the end iterator.
        """
        if not callable(action):
            raise TypeError("action must be callable")
        walk = _WALKS[TraversalMode(mode)]
        for node in walk(self._sentinel.left):
            if not action(node.data):
                return TreeIterator(node)
        return self.end()

    def __iter__(self) -> Iterator[Any]:
        for node in _inorder(self._sentinel.left):
            yield node.data
"""A bounded FIFO queue of fixed size."""

from collections import deque
from collections.abc import Callable, Iterator
from typing import Any


class QueueOverflowError(OverflowError):
    """Raised when inserting into a full queue."""


class QueueEmptyError(IndexError):
    """Raised when removing from an empty queue."""


class Queue:
    """A first-in first-out queue holding at most size items; None is not allowed."""

    def __init__(self, size: int) -> None:
        if size <= 0:
            raise ValueError("size must be positive")
        self._size = size
        self._items: deque[Any] = deque()

    @property
    def size(self) -> int:
        return self._size

    def insert(self, item: Any) -> None:
        """Add item at the back."""
        if item is None:
            raise ValueError("item must not be None")
        if len(self._items) == self._size:
            raise QueueOverflowError("queue is full")
        self._items.append(item)

    def remove(self) -> Any:
        """Remove and return the item at the front."""
        if not self._items:
            raise QueueEmptyError("remove from empty queue")
        return self._items.popleft()

    def is_empty(self) -> bool:
        return not self._items

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[Any]:
        """Iterate from front to back."""
        return iter(self._items)

    def for_each(self, action: Callable[[Any], Any]) -> int:
        """Call action on each item from front to back until it returns a false value.

        Returns the number of times action was called.
        """
        if not callable(action):
            raise TypeError("action must be callable")
        calls = 0
        for item in self._items:
            calls += 1
            if not action(item):
                break
        return calls
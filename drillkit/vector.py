"""A vector whose capacity grows and shrinks by a fixed block size."""

from collections.abc import Callable, Iterator
from typing import Any


class VectorFullError(IndexError):
    """Raised when appending to a full vector of fixed size."""


class Vector:
    """A growable array; with block_size 0 its capacity is fixed."""

    def __init__(self, initial_capacity: int, block_size: int) -> None:
        if initial_capacity < 0 or block_size < 0:
            raise ValueError("capacity and block size must not be negative")
        if initial_capacity == 0 and block_size == 0:
            raise ValueError("initial capacity and block size cannot both be zero")
        self._items: list[Any] = []
        self._original_capacity = initial_capacity
        self._capacity = initial_capacity
        self._block_size = block_size

    def append(self, item: Any) -> None:
        """Add item at the back, growing by one block when full."""
        if len(self._items) == self._capacity:
            if self._block_size == 0:
                raise VectorFullError("vector of fixed size is full")
            self._capacity += self._block_size
        self._items.append(item)

    def remove(self) -> Any:
        """Remove and return the last item, shrinking by one block when roomy."""
        if not self._items:
            raise IndexError("remove from empty vector")
        item = self._items.pop()
        block = self._block_size
        if (
            block > 0
            and self._capacity - len(self._items) >= block * 2
            and self._capacity - block >= self._original_capacity
        ):
            self._capacity -= block
        return item

    def _check_index(self, index: int) -> None:
        if not 0 <= index < len(self._items):
            raise IndexError(f"index {index} out of range")

    def __getitem__(self, index: int) -> Any:
        self._check_index(index)
        return self._items[index]

    def __setitem__(self, index: int, value: Any) -> None:
        self._check_index(index)
        self._items[index] = value

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[Any]:
        return iter(self._items)

    @property
    def capacity(self) -> int:
        return self._capacity

    def for_each(self, action: Callable[[Any, int], Any]) -> int:
        """Call action(item, index) until it returns a false value.

        Returns the index where iteration stopped, or the size if it ran through.
        """
        if not callable(action):
            raise TypeError("action must be callable")
        for index, item in enumerate(self._items):
            if not action(item, index):
                return index
        return len(self._items)
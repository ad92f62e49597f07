"""Person records with sorting helpers, and a block-growing integer array."""

from collections.abc import Iterator, MutableSequence
from dataclasses import dataclass
from operator import attrgetter

MAX_SIZE = 100


@dataclass
class Person:
    id: int
    name: str


def _check_people(people: MutableSequence[Person]) -> None:
    if not 0 < len(people) <= MAX_SIZE:
        raise ValueError(f"expected between 1 and {MAX_SIZE} people")


def sort_by_id(people: MutableSequence[Person]) -> None:
    """Sort people in place by id."""
    _check_people(people)
    people[:] = sorted(people, key=attrgetter("id"))


def sort_by_name(people: MutableSequence[Person]) -> None:
    """Sort people in place by name."""
    _check_people(people)
    people[:] = sorted(people, key=attrgetter("name"))


class DynamicArray:
    """An array of integers whose capacity grows by a fixed block."""

    def __init__(self, size: int, block_size: int) -> None:
        if size <= 0 or block_size <= 0 or size > MAX_SIZE:
            raise ValueError(
                f"size must be in 1..{MAX_SIZE} and block_size positive"
            )
        self._items: list[int] = []
        self._capacity = size
        self._block_size = block_size

    def insert(self, data: int) -> None:
        """Append data, growing the capacity by one block when full."""
        if len(self._items) == self._capacity:
            self._capacity += self._block_size
        self._items.append(data)

    def delete(self) -> int:
        """Remove and return the last element."""
        if not self._items:
            raise IndexError("delete from empty array")
        return self._items.pop()

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[int]:
        return iter(self._items)

    @property
    def capacity(self) -> int:
        return self._capacity
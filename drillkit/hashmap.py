"""Hash map with separate chaining and a prime number of buckets."""

from __future__ import annotations

import operator
from collections.abc import Callable, Hashable
from dataclasses import dataclass
from typing import Any


class DuplicateKeyError(KeyError):
    """Raised when inserting a key that is already in the map."""


@dataclass(frozen=True)
class MapStats:
    number_of_buckets: int
    number_of_chains: int
    max_chain_length: int
    average_chain_length: int


def is_prime(num: int) -> bool:
    """Tell whether num is a prime number."""
    if num <= 1:
        return False
    if num <= 3:
        return True
    if num % 2 == 0 or num % 3 == 0:
        return False
    i = 5
    while i * i <= num:
        if num % i == 0 or num % (i + 2) == 0:
            return False
        i += 6
    return True


def next_prime(num: int) -> int:
    """Return the smallest prime not below num (and at least 2)."""
    if num <= 2:
        return 2
    while not is_prime(num):
        num += 1
    return num


class HashMap:
    """A map of distinct keys to values, using user hashing and equality.

    The bucket count is rounded up to a prime. Each bucket holds a chain;
    new pairs go to the front of their chain.
    """

    def __init__(
        self,
        capacity: int,
        hash_func: Callable[[Any], int] = hash,
        equal_func: Callable[[Any, Any], Any] = operator.eq,
    ) -> None:
        if capacity <= 0:
            raise ValueError("capacity must be positive")
        if not callable(hash_func) or not callable(equal_func):
            raise TypeError("hash_func and equal_func must be callable")
        self._hash = hash_func
        self._equal = equal_func
        self._buckets: list[list[list[Any]]] = [[] for _ in range(next_prime(capacity))]
        self._size = 0

    def _chain(self, key: Hashable) -> list[list[Any]]:
        if key is None:
            raise ValueError("key must not be None")
        return self._buckets[self._hash(key) % len(self._buckets)]

    def insert(self, key: Any, value: Any) -> None:
        """Add a key-value pair; raises DuplicateKeyError if key is present."""
        chain = self._chain(key)
        if any(self._equal(key, entry[0]) for entry in chain):
            raise DuplicateKeyError(key)
        chain.insert(0, [key, value])
        self._size += 1

    def remove(self, key: Any) -> tuple[Any, Any]:
        """Remove the pair for key and return it as (stored key, value)."""
        chain = self._chain(key)
        for position, entry in enumerate(chain):
            if self._equal(key, entry[0]):
                del chain[position]
                self._size -= 1
                return entry[0], entry[1]
        raise KeyError(key)

    def find(self, key: Any) -> Any:
        """Return the value stored for key; raises KeyError if absent."""
        for stored_key, value in self._chain(key):
            if self._equal(key, stored_key):
                return value
        raise KeyError(key)

    def rehash(self, new_capacity: int) -> None:
        """Move every pair into a new table of next_prime(new_capacity) buckets."""
        buckets: list[list[list[Any]]] = [[] for _ in range(next_prime(new_capacity))]
        for chain in self._buckets:
            for entry in chain:
                buckets[self._hash(entry[0]) % len(buckets)].insert(0, entry)
        self._buckets = buckets

    def __len__(self) -> int:
        return self._size

    @property
    def capacity(self) -> int:
        return len(self._buckets)

    def for_each(self, action: Callable[[Any, Any], Any]) -> int:
        """Call action(key, value) on each pair until it returns a false value.

        Returns the number of times action was called.
        """
        if not callable(action):
            raise TypeError("action must be callable")
        calls = 0
        for chain in self._buckets:
            for key, value in chain:
                calls += 1
                if not action(key, value):
                    return calls
        return calls

    def statistics(self) -> MapStats:
        """Return bucket and chain statistics; the average is rounded down."""
        lengths = [len(chain) for chain in self._buckets if chain]
        chains = len(lengths)
        return MapStats(
            number_of_buckets=len(self._buckets),
            number_of_chains=chains,
            max_chain_length=max(lengths, default=0),
            average_chain_length=self._size // chains if chains else 0,
        )
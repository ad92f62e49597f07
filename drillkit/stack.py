"""A stack whose capacity grows and shrinks by a fixed block, with bracket and postfix helpers."""

from collections.abc import Callable, Iterator
from typing import Any

_OPENERS = {")": "(", "]": "[", "}": "{"}


class StackEmptyError(IndexError):
    """Raised when reading from an empty stack."""


class StackFullError(OverflowError):
    """Raised when pushing onto a full stack of fixed size."""


class Stack:
    """A LIFO stack; with block_size 0 its capacity is fixed.

    Capacity grows by one block when full and shrinks by one block when at
    least two blocks are free, never below the initial capacity.
    """

    def __init__(self, initial_capacity: int, block_size: int) -> None:
        if initial_capacity < 0 or block_size < 0:
            raise ValueError("capacity and block size must not be negative")
        if initial_capacity == 0 and block_size == 0:
            raise ValueError("initial capacity and block size cannot both be zero")
        self._items: list[Any] = []
        self._capacity = initial_capacity
        self._original_capacity = initial_capacity
        self._block_size = block_size

    def push(self, item: Any) -> None:
        """Put item on top, growing by one block when full."""
        if len(self._items) == self._capacity:
            if self._block_size == 0:
                raise StackFullError("stack of fixed size is full")
            self._capacity += self._block_size
        self._items.append(item)

    def pop(self) -> Any:
        """Remove and return the top item."""
        if not self._items:
            raise StackEmptyError("pop from empty stack")
        item = self._items.pop()
        block = self._block_size
        if (
            block > 0
            and self._capacity > self._original_capacity
            and self._capacity - len(self._items) >= block * 2
        ):
            self._capacity -= block
        return item

    def top(self) -> Any:
        """Return the top item without removing it."""
        if not self._items:
            raise StackEmptyError("top of empty stack")
        return self._items[-1]

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[Any]:
        """Iterate from bottom to top."""
        return iter(self._items)

    @property
    def capacity(self) -> int:
        return self._capacity

    def is_empty(self) -> bool:
        return not self._items

    def for_each(self, action: Callable[[Any, int], Any]) -> int:
        """Call action(item, index) from bottom to top until it returns a false value.

        Returns the number of times action was called.
        """
        if not callable(action):
            raise TypeError("action must be callable")
        calls = 0
        for index, item in enumerate(self._items):
            calls += 1
            if not action(item, index):
                break
        return calls


def check_balanced_brackets(text: str) -> bool:
    """Tell whether the (), [] and {} brackets in text are balanced and properly nested."""
    stack = Stack(20, 10)
    for char in text:
        if char in "([{":
            stack.push(char)
        elif char in _OPENERS:
            if stack.is_empty() or stack.pop() != _OPENERS[char]:
                return False
    return stack.is_empty()


def _truncating_divide(a: int, b: int) -> int:
    quotient = abs(a) // abs(b)
    return quotient if (a >= 0) == (b >= 0) else -quotient


_OPERATIONS: dict[str, Callable[[int, int], int]] = {
    "+": lambda a, b: a + b,
    "-": lambda a, b: a - b,
    "*": lambda a, b: a * b,
    "/": _truncating_divide,
}


def evaluate_postfix(expression: str) -> int:
    """Evaluate a postfix expression of single-digit operands and + - * /.

    Spaces are ignored and division truncates toward zero. An empty
    expression gives 0. Raises ValueError on a malformed expression,
    an unknown character or division by zero.
    """
    stack = Stack(20, 10)
    for char in expression:
        if char == " ":
            continue
        if "0" <= char <= "9":
            stack.push(int(char))
            continue
        try:
            right = stack.pop()
            left = stack.pop()
        except StackEmptyError:
            raise ValueError(f"missing operand for {char!r}") from None
        operation = _OPERATIONS.get(char)
        if operation is None:
            raise ValueError(f"unknown character {char!r}")
        if char == "/" and right == 0:
            raise ValueError("division by zero")
        stack.push(operation(left, right))
    return stack.pop() if not stack.is_empty() else 0
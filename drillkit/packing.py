"""Lookup-table bit reversal, generic bubble sort and 4-bit letter packing."""

from collections.abc import Callable, MutableSequence
from dataclasses import dataclass

_REVERSED_BYTES = tuple(int(f"{i:08b}"[::-1], 2) for i in range(256))
_FIRST_LETTER = "a"
_LAST_LETTER = "o"


def reverse_bits_lut(n: int) -> int:
    """Reverse the bits of a 32-bit unsigned integer one byte at a time."""
    if not 0 <= n <= 0xFFFFFFFF:
        raise ValueError("n must fit in 32 unsigned bits")
    return (
        (_REVERSED_BYTES[n & 0xFF] << 24)
        | (_REVERSED_BYTES[(n >> 8) & 0xFF] << 16)
        | (_REVERSED_BYTES[(n >> 16) & 0xFF] << 8)
        | _REVERSED_BYTES[(n >> 24) & 0xFF]
    )


def descending(a: int, b: int) -> bool:
    return a < b


def ascending(a: int, b: int) -> bool:
    return a > b


def by_absolute(a: int, b: int) -> bool:
    return abs(a) > abs(b)


def evens_first(a: int, b: int) -> bool:
    """Evens go before odds; within the same parity, smaller first."""
    a_even, b_even = a % 2 == 0, b % 2 == 0
    if a_even != b_even:
        return b_even
    return a > b


def bubble_sort(
    values: MutableSequence[int], should_swap: Callable[[int, int], bool] = ascending
) -> None:
    """Bubble sort in place, swapping neighbours whenever should_swap says so."""
    size = len(values)
    for done in range(size - 1):
        for j in range(size - done - 1):
            if should_swap(values[j], values[j + 1]):
                values[j], values[j + 1] = values[j + 1], values[j]


@dataclass(frozen=True)
class CharPair:
    """Two 4-bit letter codes packed side by side."""

    left: int
    right: int

    def __int__(self) -> int:
        return (self.left << 4) | self.right


def _letter_code(letter: str) -> int:
    if not _FIRST_LETTER <= letter <= _LAST_LETTER:
        raise ValueError(f"only letters a-o can be packed, got {letter!r}")
    return ord(letter) - ord(_FIRST_LETTER) + 1


def _pairs(text: str) -> list[CharPair]:
    codes = [_letter_code(letter) for letter in text]
    if len(codes) % 2:
        codes.append(0)
    return [CharPair(left, right) for left, right in zip(codes[::2], codes[1::2])]


def compress_bitwise(text: str) -> bytes:
    """Pack letters a-o two per byte: first in the high nibble, second in the low."""
    return bytes(int(pair) for pair in _pairs(text))


def compress_bitfield(text: str) -> list[CharPair]:
    """Pack letters a-o two per CharPair."""
    return _pairs(text)
"""Bit manipulation on bytes and 32-bit unsigned integers."""

BYTE_MASK = 0xFF
WORD_BITS = 32
WORD_MASK = (1 << WORD_BITS) - 1


def _require_byte(value: int, name: str = "value") -> None:
    if not 0 <= value <= BYTE_MASK:
        raise ValueError(f"{name} must be in 0..255, got {value}")


def format_byte(value: int) -> str:
    """Return the 8-digit binary form of a byte."""
    _require_byte(value)
    return f"{value:08b}"


def invert_bits(x: int) -> int:
    """Return the byte with every bit of x flipped."""
    _require_byte(x, "x")
    return ~x & BYTE_MASK


def rotate_right(x: int, n: int) -> int:
    """Rotate the bits of a byte right by n positions; no bits are lost."""
    _require_byte(x, "x")
    n %= 8
    return ((x >> n) | (x << (8 - n))) & BYTE_MASK


def set_bits(x: int, p: int, n: int, y: int) -> int:
    """Return x with the n bits ending at position p replaced by the low n bits of y.

    Position 0 is the least significant bit.
    """
    _require_byte(x, "x")
    _require_byte(y, "y")
    if not 0 <= p <= 7:
        raise ValueError(f"p must be in 0..7, got {p}")
    if not 0 <= n <= p + 1:
        raise ValueError(f"n must be in 0..{p + 1}, got {n}")
    mask = (1 << n) - 1
    shift = p + 1 - n
    cleared = x & ~(mask << shift) & BYTE_MASK
    return cleared | ((y & mask) << shift)


def reverse_bits(value: int) -> int:
    """Reverse the order of the bits of a 32-bit unsigned integer."""
    if not 0 <= value <= WORD_MASK:
        raise ValueError(f"value must fit in {WORD_BITS} unsigned bits")
    return int(f"{value:0{WORD_BITS}b}"[::-1], 2)
"""In-place exercises on lists of integers."""

from collections import Counter
from collections.abc import MutableSequence, Sequence


def _require_items(values: Sequence[int]) -> None:
    if not values:
        raise ValueError("expected a non-empty sequence")


def most_common(values: Sequence[int]) -> int:
    """Return the most frequent element; ties go to the one seen first."""
    _require_items(values)
    return Counter(values).most_common(1)[0][0]


def even_odd(values: MutableSequence[int]) -> int:
    """Move even numbers before odd ones, keeping relative order.

    The list is rearranged in place; the number of even elements is returned.
    """
    _require_items(values)
    evens = [value for value in values if value % 2 == 0]
    odds = [value for value in values if value % 2 != 0]
    values[:] = evens + odds
    return len(evens)


def ascending_array(values: MutableSequence[int]) -> None:
    """Sort the list in place in ascending order."""
    values[:] = sorted(values)


def zeros_first_ones_last(values: MutableSequence[int]) -> None:
    """Place every 0 before every 1, in place.

    Raises ValueError if the list holds anything other than 0 and 1.
    """
    if any(value not in (0, 1) for value in values):
        raise ValueError("values must be 0 or 1 only")
    values[:] = sorted(values)
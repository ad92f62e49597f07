import pytest

from drillkit.arrays import (
    ascending_array,
    even_odd,
    most_common,
    zeros_first_ones_last,
)


def test_most_common_source_example():
    assert most_common([4, 1, 2, 2, 2, 3, 4, 2]) == 2


def test_most_common_all_unique_returns_first():
    assert most_common([9, 5, 7]) == 9


def test_most_common_tie_goes_to_first_seen():
    assert most_common([3, 8, 8, 3]) == 3


def test_most_common_empty_raises():
    with pytest.raises(ValueError):
        most_common([])


def test_even_odd_source_example_count():
    values = [3, 8, -5, 2, 7, -4]
    assert even_odd(values) == 3


def test_even_odd_is_stable_partition():
    original = [3, 8, -5, 2, 7, -4, 10, 11]
    values = list(original)
    count = even_odd(values)
    assert values[:count] == [v for v in original if v % 2 == 0]
    assert values[count:] == [v for v in original if v % 2 != 0]
    assert sorted(values) == sorted(original)


def test_even_odd_empty_raises():
    with pytest.raises(ValueError):
        even_odd([])


def test_ascending_array_sorts_in_place():
    values = [9, 4, 7, 1, 3, 8, 5]
    ascending_array(values)
    assert values == sorted([9, 4, 7, 1, 3, 8, 5])


def test_ascending_array_empty_stays_empty():
    values = []
    ascending_array(values)
    assert values == []


def test_zeros_first_ones_last():
    values = [1, 0, 1, 1, 0, 0, 1, 0]
    zeros_first_ones_last(values)
    assert values == [0] * 4 + [1] * 4


def test_zeros_first_ones_last_rejects_other_values():
    with pytest.raises(ValueError):
        zeros_first_ones_last([0, 1, 2])
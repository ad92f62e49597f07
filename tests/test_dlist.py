import pytest

from drillkit.dlist import DList, for_each


def make_list(values):
    dl = DList()
    for value in values:
        dl.push_tail(value)
    return dl


def test_push_tail_keeps_order():
    dl = make_list([1, 2, 3])
    assert list(dl) == [1, 2, 3]
    assert len(dl) == 3


def test_push_head_prepends():
    dl = DList()
    for value in [1, 2, 3]:
        dl.push_head(value)
    assert list(dl) == [3, 2, 1]


def test_push_returns_iterator_to_item():
    dl = DList()
    it = dl.push_tail("x")
    assert it.get() == "x"
    assert it == dl.begin()


def test_pop_head_and_tail():
    dl = make_list([10, 20, 30])
    assert dl.pop_head() == 10
    assert dl.pop_tail() == 30
    assert list(dl) == [20]


def test_pop_from_empty_raises():
    dl = DList()
    with pytest.raises(IndexError):
        dl.pop_head()
    with pytest.raises(IndexError):
        dl.pop_tail()


def test_empty_list_begin_is_end():
    dl = DList()
    assert dl.is_empty()
    assert dl.begin() == dl.end()
    assert len(dl) == 0


def test_walk_forward_with_next():
    dl = make_list(["a", "b", "c"])
    seen = []
    it = dl.begin()
    while it != dl.end():
        seen.append(it.get())
        it = it.next()
    assert seen == ["a", "b", "c"]


def test_next_at_end_returns_end():
    dl = make_list([1])
    assert dl.end().next() == dl.end()


def test_prev_at_begin_returns_begin():
    dl = make_list([1, 2])
    assert dl.begin().prev() == dl.begin()


def test_prev_from_end_is_last():
    dl = make_list([1, 2, 3])
    assert dl.end().prev().get() == 3


def test_get_at_end_raises():
    dl = make_list([1])
    with pytest.raises(IndexError):
        dl.end().get()


def test_set_returns_old_value():
    dl = make_list([1, 2, 3])
    it = dl.begin().next()
    assert it.set(99) == 2
    assert list(dl) == [1, 99, 3]


def test_set_at_end_raises():
    dl = DList()
    with pytest.raises(IndexError):
        dl.end().set(5)


def test_insert_before_middle():
    dl = make_list([1, 3])
    it = dl.begin().next()
    new = it.insert_before(2)
    assert new.get() == 2
    assert list(dl) == [1, 2, 3]


def test_insert_before_end_appends():
    dl = make_list([1])
    dl.end().insert_before(2)
    assert list(dl) == [1, 2]


def test_remove_returns_data_and_unlinks():
    dl = make_list([1, 2, 3])
    it = dl.begin().next()
    assert it.remove() == 2
    assert list(dl) == [1, 3]
    with pytest.raises(IndexError):
        it.get()


def test_remove_end_raises():
    dl = make_list([1])
    with pytest.raises(IndexError):
        dl.end().remove()


def test_for_each_visits_all():
    dl = make_list([1, 2, 3])
    seen = []
    result = for_each(dl.begin(), dl.end(), lambda x: seen.append(x) or True)
    assert seen == [1, 2, 3]
    assert result == dl.end()


def test_for_each_stops_on_false():
    dl = make_list([1, 2, 3, 4])
    result = for_each(dl.begin(), dl.end(), lambda x: x < 3)
    assert result.get() == 3


def test_for_each_half_open_range():
    dl = make_list([1, 2, 3, 4])
    begin = dl.begin().next()
    end = dl.end().prev()
    seen = []
    result = for_each(begin, end, lambda x: seen.append(x) or True)
    assert seen == [2, 3]
    assert result == end


def test_for_each_unreachable_end_raises():
    dl = make_list([1, 2])
    with pytest.raises(ValueError):
        for_each(dl.end().prev(), dl.begin(), lambda x: True)
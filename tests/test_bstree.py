import pytest

from drillkit.bstree import BSTree, TraversalMode, natural_order

VALUES = [50, 30, 70, 20, 40, 60, 80]


@pytest.fixture
def tree():
    t = BSTree(natural_order)
    for value in VALUES:
        t.insert(value)
    return t


def collect(tree, mode):
    seen = []
    tree.for_each(mode, lambda x: seen.append(x) or True)
    return seen


def test_natural_order():
    assert natural_order(1, 2) == 1
    assert natural_order(2, 1) == -1
    assert natural_order(3, 3) == 0


def test_traversals(tree):
    assert collect(tree, TraversalMode.PREORDER) == [50, 30, 20, 40, 70, 60, 80]
    assert collect(tree, TraversalMode.INORDER) == [20, 30, 40, 50, 60, 70, 80]
    assert collect(tree, TraversalMode.POSTORDER) == [20, 40, 30, 60, 80, 70, 50]


def test_iteration_with_next(tree):
    it = tree.begin()
    seen = []
    while it != tree.end():
        seen.append(it.get())
        it = it.next()
    assert seen == sorted(VALUES)
    assert list(tree) == sorted(VALUES)


def test_iteration_backwards_with_prev(tree):
    it = tree.end().prev()
    seen = [it.get()]
    while it != tree.begin():
        it = it.prev()
        seen.append(it.get())
    assert seen == sorted(VALUES, reverse=True)


def test_prev_of_begin_is_begin(tree):
    begin = tree.begin()
    assert begin.prev() == begin
    assert begin.get() == min(VALUES)


def test_next_of_end_is_end(tree):
    assert tree.end().next() == tree.end()


def test_insert_returns_iterator_to_item(tree):
    it = tree.insert(45)
    assert it.get() == 45
    assert it.next().get() == 50
    assert it.prev().get() == 40


def test_duplicate_insert_returns_end(tree):
    assert tree.insert(40).at_end()
    assert list(tree) == sorted(VALUES)


def test_removals(tree):
    assert tree.begin().remove() == 20
    it = tree.begin()
    while not it.at_end() and it.get() != 70:
        it = it.next()
    assert it.remove() == 70
    assert collect(tree, TraversalMode.INORDER) == [30, 40, 50, 60, 80]


def test_remove_root_keeps_order(tree):
    it = tree.begin()
    while it.get() != 50:
        it = it.next()
    assert it.remove() == 50
    assert list(tree) == [20, 30, 40, 60, 70, 80]


def test_remove_everything(tree):
    for _ in VALUES:
        tree.begin().remove()
    assert list(tree) == []
    assert tree.begin() == tree.end()


def test_end_get_and_remove_raise(tree):
    with pytest.raises(IndexError):
        tree.end().get()
    with pytest.raises(IndexError):
        tree.end().remove()


def test_empty_tree():
    t = BSTree()
    assert t.begin() == t.end()
    assert t.end().prev() == t.end()
    assert t.for_each(TraversalMode.INORDER, lambda x: True).at_end()


def test_for_each_stops(tree):
    stop = tree.for_each(TraversalMode.INORDER, lambda x: x < 40)
    assert stop.get() == 40
    stop = tree.for_each(TraversalMode.PREORDER, lambda x: x != 70)
    assert stop.get() == 70


def test_for_each_complete_returns_end(tree):
    assert tree.for_each(TraversalMode.POSTORDER, lambda x: True) == tree.end()


def test_custom_comparator_reverses_order():
    t = BSTree(lambda a, b: natural_order(b, a))
    for value in VALUES:
        t.insert(value)
    assert list(t) == sorted(VALUES, reverse=True)


def test_non_callable_comparator_rejected():
    with pytest.raises(TypeError):
        BSTree(None)
from drillkit.shapes import (
    arrow,
    diamond,
    inverted_pyramid,
    inverted_triangle,
    pyramid,
    right_triangle,
)


def test_right_triangle_pinned():
    assert right_triangle(2, "#") == "\n#\n##\n"


def test_right_triangle_row_lengths():
    rows = right_triangle(5, "*").split("\n")[:-1]
    assert [len(row) for row in rows] == list(range(6))


def test_inverted_triangle_is_reverse_of_nonempty_rows():
    up = right_triangle(4, "x").split("\n")[1:-1]
    down = inverted_triangle(4, "x").split("\n")[:-1]
    assert down == up[::-1]


def test_arrow_is_symmetric():
    rows = arrow(4, "o").split("\n")[:-1]
    assert rows[1:] == rows[1:][::-1]
    assert max(len(row) for row in rows) == 4


def test_inverted_pyramid_mirrors_pyramid():
    assert inverted_pyramid(5, "+").split("\n")[:-1] == pyramid(5, "+").split("\n")[:-1][::-1]


def test_diamond_combines_halves():
    rows = diamond(4, "*").split("\n")[:-1]
    assert len(rows) == 2 * 4 - 1
    assert rows == rows[::-1]
    assert rows[:4] == pyramid(4, "*").split("\n")[:-1]


def test_zero_height_draws_nothing_but_first_row():
    assert pyramid(0, "*") == ""
    assert right_triangle(0, "*") == "\n"
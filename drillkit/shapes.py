"""Text triangles drawn with a repeated character."""

from collections.abc import Iterable


def _render(lines: Iterable[str]) -> str:
    return "".join(f"{line}\n" for line in lines)


def _centered_row(n: int, i: int, char: str) -> str:
    return " " * (n - i - 1) + f"{char} " * (i + 1)


def right_triangle(n: int, char: str) -> str:
    """Rows of 0 to n characters, growing by one."""
    return _render(char * i for i in range(n + 1))


def inverted_triangle(n: int, char: str) -> str:
    """Rows of n down to 1 characters."""
    return _render(char * (i + 1) for i in range(n - 1, -1, -1))


def arrow(n: int, char: str) -> str:
    """A right triangle growing to n followed by its shrinking half."""
    growing = (char * i for i in range(n + 1))
    shrinking = (char * i for i in range(n - 1, 0, -1))
    return _render([*growing, *shrinking])


def pyramid(n: int, char: str) -> str:
    """A centred pyramid of n rows."""
    return _render(_centered_row(n, i, char) for i in range(n))


def inverted_pyramid(n: int, char: str) -> str:
    """A centred pyramid of n rows, upside down."""
    return _render(_centered_row(n, i, char) for i in range(n - 1, -1, -1))


def diamond(n: int, char: str) -> str:
    """A pyramid of n rows followed by its mirror without the widest row."""
    rows = [_centered_row(n, i, char) for i in range(n)]
    rows += [_centered_row(n, i, char) for i in range(n - 2, -1, -1)]
    return _render(rows)
"""Reading the tail of a text file and counting its lines, words and characters."""

import re
from dataclasses import dataclass
from os import PathLike
from typing import Union

MAX_LINE_LENGTH = 1000
MAX_LINES = 1000

_WORD = re.compile(rb"[^ \t\n]+")

PathType = Union[str, "PathLike[str]"]


@dataclass(frozen=True)
class FileStats:
    lines: int
    words: int
    characters: int


def last_lines(path: PathType, n: int) -> list[str]:
    """Return the last n lines of the file.

    Lines longer than MAX_LINE_LENGTH - 1 characters are split into pieces of
    that length, and at most MAX_LINES pieces are read from the start of the file.
    """
    if n <= 0:
        raise ValueError("n must be positive")
    lines: list[str] = []
    with open(path, encoding="utf-8", newline="") as handle:
        while len(lines) < MAX_LINES:
            line = handle.readline(MAX_LINE_LENGTH - 1)
            if not line:
                break
            lines.append(line)
    return lines[-n:]


def count_stats(path: PathType) -> FileStats:
    """Count newlines, words and bytes in a file.

    Words are separated by spaces, tabs and newlines.
    """
    with open(path, "rb") as handle:
        data = handle.read()
    return FileStats(
        lines=data.count(b"\n"),
        words=len(_WORD.findall(data)),
        characters=len(data),
    )
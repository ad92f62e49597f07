"""Interactive menu that runs the number and triangle exercises."""

import argparse
import string
import sys
from typing import Callable, Optional, TextIO

from drillkit.numbers import (
    arithmetic,
    factorial,
    is_armstrong,
    is_ascending,
    is_palindrome,
    is_prime,
    reverse,
    same_place,
)
from drillkit.shapes import (
    arrow,
    diamond,
    inverted_pyramid,
    inverted_triangle,
    pyramid,
    right_triangle,
)

_MENU = (
    "\n--- Choose an Exercise to Test (1-8) or 0 to Exit ---\n"
    "1. Sum/Difference/Multiply [Ex 1]\n"
    "2. Factorial of N [Ex 2]\n"
    "3. Palindrome Check [Ex 3]\n"
    "4. Ascending Order Check [Ex 4]\n"
    "5. Prime Number Check [Ex 5]\n"
    "6. Reverse Number [Ex 6]\n"
    "7. Same Place (Mastermind) [Ex 7]\n"
    "8. Armstrong Numbers (0-999) [Ex 8]\n"
    "9. Print Triangles [Ex 9]\n"
    "Selection: "
)

_TRIANGLES = {
    1: right_triangle,
    2: inverted_triangle,
    3: arrow,
    4: pyramid,
    5: inverted_pyramid,
    6: diamond,
}


class _Scanner:
    """Reads whitespace-separated integers and characters one char at a time."""

    def __init__(self, stream: TextIO) -> None:
        self._stream = stream
        self._pending = ""

    def _getc(self) -> str:
        if self._pending:
            ch, self._pending = self._pending, ""
            return ch
        return self._stream.read(1)

    def _skip_space(self) -> str:
        ch = self._getc()
        while ch and ch.isspace():
            ch = self._getc()
        return ch

    def read_int(self) -> Optional[int]:
        ch = self._skip_space()
        text = ""
        if ch and ch in "+-":
            text, ch = ch, self._getc()
        while ch and ch in string.digits:
            text += ch
            ch = self._getc()
        if ch:
            self._pending = ch
        if text in ("", "+", "-"):
            return None
        return int(text)

    def read_ints(self, count: int) -> Optional[list[int]]:
        values = []
        for _ in range(count):
            value = self.read_int()
            if value is None:
                return None
            values.append(value)
        return values

    def read_char(self) -> Optional[str]:
        return self._skip_space() or None


def _prompt(out: TextIO, text: str) -> None:
    out.write(text)
    out.flush()


def _arithmetic(scan: _Scanner, out: TextIO) -> bool:
    _prompt(out, "Enter two integers (a b): ")
    pair = scan.read_ints(2)
    if pair is None:
        return False
    result = arithmetic(*pair)
    out.write(f"sum: {result.total}\ndif: {result.difference}\nmul: {result.product}\n")
    return True


def _single(prompt: str, label: str, func: Callable[[int], int]):
    def handler(scan: _Scanner, out: TextIO) -> bool:
        _prompt(out, prompt)
        n = scan.read_int()
        if n is None:
            return False
        out.write(f"{label}: {int(func(n))}\n")
        return True

    return handler


def _same_place(scan: _Scanner, out: TextIO) -> bool:
    _prompt(out, "Enter base and check numbers: ")
    pair = scan.read_ints(2)
    if pair is None:
        return False
    try:
        out.write(f"Result: {same_place(*pair)}\n")
    except ValueError as exc:
        out.write(f"Error: {exc}\n")
    return True


def _armstrong(scan: _Scanner, out: TextIO) -> bool:
    _prompt(out, "Enter a number to check if it is Armstrong: ")
    n = scan.read_int()
    if n is None:
        return False
    if is_armstrong(n):
        out.write(f"{n} is an Armstrong number!\n")
    else:
        out.write(f"{n} is NOT an Armstrong number.\n")
    found = "".join(f"{i} " for i in range(1000) if is_armstrong(i))
    out.write(f"Armstrong numbers in range 0-999: {found}\n")
    return True


def _triangles(scan: _Scanner, out: TextIO) -> bool:
    out.write("\n--- Triangles Menu ---\n")
    _prompt(out, "Enter height (N) and character to print: ")
    n = scan.read_int()
    char = scan.read_char() if n is not None else None
    if n is None or char is None:
        return False
    _prompt(out, "Select triangle type (1-6): ")
    kind = scan.read_int()
    if kind is None:
        return False
    draw = _TRIANGLES.get(kind)
    if draw is None:
        out.write("Invalid triangle type!\n")
    else:
        out.write(draw(n, char))
    return True


_HANDLERS = {
    1: _arithmetic,
    2: _single("Enter N: ", "Factorial", factorial),
    3: _single("Enter number: ", "Result", is_palindrome),
    4: _single("Enter number: ", "Result", is_ascending),
    5: _single("Enter number: ", "Result", is_prime),
    6: _single("Enter number: ", "Reversed", reverse),
    7: _same_place,
    8: _armstrong,
    9: _triangles,
}


def run(input_stream: TextIO, output_stream: TextIO) -> None:
    """Run the menu until 0 is chosen or the input ends or is not a number."""
    scan = _Scanner(input_stream)
    while True:
        _prompt(output_stream, _MENU)
        choice = scan.read_int()
        if choice is None or choice == 0:
            return
        handler = _HANDLERS.get(choice)
        if handler is None:
            output_stream.write("Invalid selection!\n")
            continue
        if not handler(scan, output_stream):
            return


def main(argv=None) -> int:
    parser = argparse.ArgumentParser(
        prog="drillkit-menu",
        description="Interactive menu of number and triangle exercises.",
    )
    parser.parse_args(argv)
    run(sys.stdin, sys.stdout)
    return 0
"""Exercises on integers and their decimal digits."""

from itertools import pairwise, product
from typing import NamedTuple


class Arithmetic(NamedTuple):
    total: int
    difference: int
    product: int


def arithmetic(a: int, b: int) -> Arithmetic:
    """Return the sum, difference and product of two integers."""
    return Arithmetic(a + b, a - b, a * b)


def factorial(n: int) -> int:
    """Return n!; values below 1 give 1."""
    result = 1
    for factor in range(1, n + 1):
        result *= factor
    return result


def is_palindrome(num: int) -> bool:
    """Tell whether a non-negative number reads the same both ways."""
    if num < 0:
        return False
    digits = str(num)
    return digits == digits[::-1]


def is_ascending(num: int) -> bool:
    """Tell whether the digits never decrease from left to right."""
    if num <= 0:
        return True
    return all(left <= right for left, right in pairwise(str(num)))


def is_prime(num: int) -> bool:
    """Tell whether num is a prime number."""
    if num <= 1:
        return False
    divisor = 2
    while divisor * divisor <= num:
        if num % divisor == 0:
            return False
        divisor += 1
    return True


def reverse(num: int) -> int:
    """Reverse the decimal digits of num, keeping its sign."""
    sign = -1 if num < 0 else 1
    return sign * int(str(abs(num))[::-1])


def same_place(base: int, check: int) -> int:
    """Score check against base, Mastermind style.

    Every pair of equal characters adds 10 when at the same position and
    1 otherwise. Raises ValueError when the numbers differ in length.
    """
    base_text, check_text = str(base), str(check)
    if len(base_text) != len(check_text):
        raise ValueError("numbers must have the same number of digits")
    hits = misses = 0
    for (i, c), (j, b) in product(enumerate(check_text), enumerate(base_text)):
        if c == b:
            if i == j:
                hits += 1
            else:
                misses += 1
    return hits * 10 + misses


def is_armstrong(num: int) -> bool:
    """Tell whether num equals the sum of its digits each raised to the digit count."""
    if num < 0:
        return False
    digits = str(num)
    power = len(digits)
    return sum(int(d) ** power for d in digits) == num
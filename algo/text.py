"""FizzBuzz output and string reversal."""

import sys
from collections.abc import Iterator
from typing import TextIO


def fizz_buzz_items(n: int) -> Iterator[str]:
    """Yield the FizzBuzz entries for 1 to ``n``.

    Multiples of 3 become "Fizz", of 5 "Buzz", and of both "Fizz Buzz".
    """
    for i in range(1, n + 1):
        if i % 15 == 0:
            yield "Fizz Buzz"
        elif i % 3 == 0:
            yield "Fizz"
        elif i % 5 == 0:
            yield "Buzz"
        else:
            yield str(i)


def fizz_buzz(n: int, file: TextIO | None = None) -> None:
    """Write the FizzBuzz entries for 1 to ``n`` on one comma-separated line."""
    print(", ".join(fizz_buzz_items(n)), file=file if file is not None else sys.stdout)


def reverse(word: str) -> str:
    """Return ``word`` with its characters in reverse order."""
    return word[::-1]
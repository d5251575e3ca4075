"""Small functions whose running times illustrate common Big O classes."""

import sys
from collections.abc import Iterable, Sequence
from typing import TextIO


def add(a: int, b: int) -> int:
    """Return ``a + b``; constant time, O(1)."""
    return a + b


def sum_to_max(maximum: int) -> int:
    """Return 1 + 2 + ... + ``maximum`` by adding each term; O(N) in ``maximum``."""
    total = 0
    for i in range(1, maximum + 1):
        total += i
    return total


def sum_to_max_v2(maximum: int) -> int:
    """Return 1 + 2 + ... + ``maximum`` by the closed formula; O(1)."""
    return maximum * (maximum + 1) // 2


def sum_vals(vals: Iterable[int]) -> int:
    """Return the sum of ``vals``; O(N) in the number of values."""
    total = 0
    for val in vals:
        total += val
    return total


def find(items: Iterable[int], x: int) -> int:
    """Return the index of the first occurrence of ``x`` in ``items``, or -1; O(N)."""
    for index, value in enumerate(items):
        if value == x:
            return index
    return -1


def grid(x: int, y: int) -> str:
    """Return ``y`` lines of ``x`` characters alternating between 'x' and 'o'; O(XY).

    The alternation carries on from one line to the next.
    """
    chars = "xo"
    lines = []
    position = 0
    for _ in range(y):
        row = "".join(chars[(position + offset) % 2] for offset in range(x))
        position += x
        lines.append(row + "\n")
    return "".join(lines)


def print_list(word: str, n: int, file: TextIO | None = None) -> None:
    """Write ``n`` lines, each the code points of ``word`` written back to back; O(N*M)."""
    out = file if file is not None else sys.stdout
    line = "".join(str(ord(char)) for char in word)
    for _ in range(n):
        print(line, file=out)


def cube(n: int) -> str:
    """Return one "(x, y, z)" line for every point of an n*n*n grid; O(N^3)."""
    return "".join(
        f"({x}, {y}, {z})\n" for x in range(n) for y in range(n) for z in range(n)
    )


def _as_sequence(vals: Sequence[int]) -> list[int]:
    return list(vals)
"""Read pairs of integers from standard input and print the GCD of each pair.

The input starts with a count ``n``, followed by ``n`` pairs of integers.
"""

import argparse
import sys

from algo.arithmetic import gcd


def _build_parser() -> argparse.ArgumentParser:
    return argparse.ArgumentParser(
        prog="algo-gcd",
        description=(
            "Read a count N and then N pairs of integers from standard input; "
            "print the greatest common divisor of each pair on its own line."
        ),
    )


def main(argv=None) -> int:
    """Run the command; return the exit status."""
    parser = _build_parser()
    parser.parse_args(argv)

    tokens = sys.stdin.read().split()
    if not tokens:
        parser.error("expected a count of pairs on standard input")
    try:
        numbers = [int(token) for token in tokens]
    except ValueError as exc:
        parser.error(f"invalid integer in input: {exc}")

    count, values = numbers[0], numbers[1:]
    if count < 0:
        parser.error(f"count must not be negative, got {count}")
    if len(values) < 2 * count:
        parser.error(f"expected {count} pairs, got {len(values) // 2}")

    pairs = zip(values[0 : 2 * count : 2], values[1 : 2 * count : 2])
    for a, b in pairs:
        print(gcd(a, b))
    return 0


if __name__ == "__main__":
    sys.exit(main())
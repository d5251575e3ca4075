"""Searching and summing lists of integers."""


def find_two_that_sum(numbers, target: int) -> tuple[int, int] | None:
    """Return indices ``(i, j)`` of two distinct entries whose values add up to ``target``.

    Returns None when no such pair exists. ``numbers`` is not modified.
    """
    seen: dict[int, int] = {}
    for j, value in enumerate(numbers):
        i = seen.get(target - value)
        if i is not None:
            return i, j
        seen.setdefault(value, j)
    return None


def num_in_list(items, num: int) -> bool:
    """Report whether ``num`` occurs in ``items``."""
    return num in items


def sum_numbers(numbers) -> int:
    """Return the sum of ``numbers``."""
    return sum(numbers)


def recursive_sum(numbers) -> int:
    """Return the sum of the sequence ``numbers``, computed recursively."""
    if not numbers:
        return 0
    return numbers[0] + recursive_sum(numbers[1:])
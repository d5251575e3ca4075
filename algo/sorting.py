"""Bubble sort and insertion sort, both sorting a list in place."""

from bisect import insort
from collections.abc import Callable, MutableSequence
from typing import Any

from algo.person import Person


def bubble_sort(items: MutableSequence, key: Callable[[Any], Any] | None = None) -> None:
    """Sort ``items`` in place with bubble sort; O(N^2). The sort is stable."""
    keyed = key if key is not None else (lambda item: item)
    length = len(items)
    for sweep in range(length):
        swapped = False
        for i in range(length - 1 - sweep):
            if keyed(items[i + 1]) < keyed(items[i]):
                items[i], items[i + 1] = items[i + 1], items[i]
                swapped = True
        if not swapped:
            break


def insertion_sort(items: MutableSequence, key: Callable[[Any], Any] | None = None) -> None:
    """Sort ``items`` in place by inserting each item into a sorted list.

    A binary search finds each insertion point; equal items keep their order.
    """
    ordered: list = []
    for item in items:
        insort(ordered, item, key=key)
    items[:] = ordered


def bubble_sort_people(people: MutableSequence[Person]) -> None:
    """Sort people in place by age, then last name, then first name, with bubble sort."""
    bubble_sort(people, key=Person.sort_key)


def insertion_sort_people(people: MutableSequence[Person]) -> None:
    """Sort people in place by age, then last name, then first name, with insertion sort."""
    insertion_sort(people, key=Person.sort_key)
import random

import pytest

from algo.person import Person
from algo.sorting import bubble_sort, bubble_sort_people, insertion_sort, insertion_sort_people

PEOPLE_SORTERS = [bubble_sort_people, insertion_sort_people]


def _random_words(rng, count):
    alphabet = "abcdefghijklmnopqrstuvwxyz"
    words = []
    for _ in range(count):
        chars = []
        for _ in range(20):
            chars.append(rng.choice(alphabet))
            if rng.randrange(3) == 0:
                break
        words.append("".join(chars))
    return words


_RNG = random.Random(20200107)

INT_CASES = {
    "sorted": [1, 2, 3, 4],
    "reverse": [10, 9, 8, 7, 6, 5, 4, 3, 2, 1],
    "duplicates": [3, 5, 3, 5, 3, 5],
    "random-len10": _RNG.sample(range(10), 10),
    "random-len20": _RNG.sample(range(20), 20),
    "random-len50": _RNG.sample(range(50), 50),
    "random-len100": _RNG.sample(range(100), 100),
    "random-len1000": _RNG.sample(range(1000), 1000),
    "empty": [],
}

STRING_CASES = {
    "sorted": ["apple", "banana", "cat", "dog"],
    "reverse": ["dog", "cat", "ball", "alphabet"],
    "duplicates": ["alphabet", "ball", "cat", "alphabet", "ball", "cat"],
    "similar": ["apple", "app", "alligator", "all", "all-in", "alphabet", "apoplexy", "apology", "apologize"],
    "random-1000-20": _random_words(_RNG, 1000),
}

SIMILAR_SORTED = [
    "all", "all-in", "alligator", "alphabet", "apologize", "apology", "apoplexy", "app", "apple",
]

PEOPLE_CASES = {
    "sorted": [
        Person(12, "Billy", "Tables"),
        Person(12, "Bobby", "Tables"),
        Person(12, "Jordan", "Tables"),
        Person(12, "Alex", "Zero"),
        Person(21, "Frank", "Smith"),
        Person(33, "Bob", "Smilesalot"),
        Person(45, "Johnny", "Testuser"),
        Person(65, "Harry", "Hippo"),
        Person(71, "Thomas", "Train"),
        Person(53, "Percy", "Engine"),
    ],
    "reverse": [
        Person(71, "Thomas", "Train"),
        Person(65, "Harry", "Hippo"),
        Person(53, "Percy", "Engine"),
        Person(45, "Johnny", "Testuser"),
        Person(33, "Bob", "Smilesalot"),
        Person(21, "Frank", "Smith"),
        Person(12, "Alex", "Zero"),
        Person(12, "Jordan", "Tables"),
        Person(12, "Bobby", "Tables"),
        Person(12, "Billy", "Tables"),
    ],
    "duplicates": [
        Person(53, "Percy", "Engine"),
        Person(45, "Johnny", "Testuser"),
        Person(12, "Billy", "Tables"),
        Person(65, "Harry", "Hippo"),
        Person(33, "Bob", "Smilesalot"),
        Person(12, "Bobby", "Tables"),
        Person(12, "Alex", "Zero"),
        Person(45, "Johnny", "Testuser"),
        Person(12, "Billy", "Tables"),
        Person(21, "Frank", "Smith"),
        Person(71, "Thomas", "Train"),
        Person(21, "Frank", "Smith"),
        Person(12, "Jordan", "Tables"),
    ],
}


@pytest.mark.parametrize("name", list(INT_CASES))
def test_bubble_sort_ints(name):
    items = list(INT_CASES[name])
    want = sorted(items)
    assert bubble_sort(items) is None
    assert items == want


@pytest.mark.parametrize("name", list(INT_CASES))
def test_insertion_sort_ints(name):
    items = list(INT_CASES[name])
    want = sorted(items)
    assert insertion_sort(items) is None
    assert items == want


@pytest.mark.parametrize("name", list(STRING_CASES))
def test_bubble_sort_strings(name):
    items = list(STRING_CASES[name])
    want = sorted(items)
    bubble_sort(items)
    assert items == want


@pytest.mark.parametrize("name", list(STRING_CASES))
def test_insertion_sort_strings(name):
    items = list(STRING_CASES[name])
    want = sorted(items)
    insertion_sort(items)
    assert items == want


def test_bubble_sort_similar_strings_pinned():
    items = list(STRING_CASES["similar"])
    bubble_sort(items)
    assert items == SIMILAR_SORTED


def test_insertion_sort_similar_strings_pinned():
    items = list(STRING_CASES["similar"])
    insertion_sort(items)
    assert items == SIMILAR_SORTED


def test_bubble_sort_with_key_is_stable():
    items = ["bb", "a", "cc", "d", "eee", "ff"]
    bubble_sort(items, key=len)
    assert items == ["a", "d", "bb", "cc", "ff", "eee"]


def test_insertion_sort_with_key_is_stable():
    items = ["bb", "a", "cc", "d", "eee", "ff"]
    insertion_sort(items, key=len)
    assert items == ["a", "d", "bb", "cc", "ff", "eee"]


def test_bubble_sort_long_sorted_input():
    items = list(range(1, 2001))
    bubble_sort(items)
    assert items == list(range(1, 2001))


def test_insertion_sort_long_sorted_input():
    items = list(range(1, 2001))
    insertion_sort(items)
    assert items == list(range(1, 2001))


@pytest.mark.parametrize("sorter", PEOPLE_SORTERS)
@pytest.mark.parametrize("name", list(PEOPLE_CASES))
def test_sort_people(sorter, name):
    people = list(PEOPLE_CASES[name])
    want = sorted(people, key=Person.sort_key)
    sorter(people)
    assert people == want


@pytest.mark.parametrize("sorter", PEOPLE_SORTERS)
def test_sort_people_pinned(sorter):
    people = list(PEOPLE_CASES["reverse"])
    sorter(people)
    assert people == [
        Person(12, "Billy", "Tables"),
        Person(12, "Bobby", "Tables"),
        Person(12, "Jordan", "Tables"),
        Person(12, "Alex", "Zero"),
        Person(21, "Frank", "Smith"),
        Person(33, "Bob", "Smilesalot"),
        Person(45, "Johnny", "Testuser"),
        Person(53, "Percy", "Engine"),
        Person(65, "Harry", "Hippo"),
        Person(71, "Thomas", "Train"),
    ]
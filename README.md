# algo

Small algorithms with tests: number base conversion, factoring,
Fibonacci numbers, greatest common divisors, list helpers, functions that
illustrate Big O growth, and hand-written bubble and insertion sorts.
It has no dependencies outside the standard library.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Usage

### Base conversion (`algo.bases`)

```python
from algo.bases import base_to_dec, dec_to_base, base_to_base

base_to_dec("E", 16)        # 14
base_to_dec("1110", 2)      # 14
dec_to_base(14, 2)          # "1110"
base_to_base("E", 16, 2)    # "1110"
```

Bases 2 to 16 are supported, with the digits `0123456789ABCDEF`;
`base_to_dec` also accepts lower-case letters. A base outside that range,
a digit that is not valid for the base, or a negative number passed to
`dec_to_base` raises `ValueError`. `dec_to_base(0, base)` returns the
empty string.

### Arithmetic (`algo.arithmetic`)

```python
from algo.arithmetic import factor, fibonacci, gcd

factor([2, 3, 5], 30)   # [2, 3, 5]
factor([2, 3, 5], 28)   # [2, 2, 7]  - a remainder above 1 is kept as a final factor
factor([], 4)           # [4]
fibonacci(14)           # 377
gcd(30, 9)              # 3
```

`factor` raises `ValueError` for a number below 1 or a "prime" below 2.

### Lists (`algo.lists`)

```python
from algo.lists import find_two_that_sum, num_in_list, sum_numbers, recursive_sum

find_two_that_sum([1, 2, 3, 4], 7)   # (2, 3)
find_two_that_sum([0, 1, 1], 0)      # None - no pair adds up to the target
num_in_list([1, 2, 3], 2)            # True
sum_numbers([1, 2, 3, 4, 5])         # 15
recursive_sum([1, 2, 3])             # 6
```

`find_two_that_sum` returns the indices of two different entries and
leaves the list unchanged.

### Text (`algo.text`)

```python
import sys
from algo.text import fizz_buzz, fizz_buzz_items, reverse

list(fizz_buzz_items(5))   # ["1", "2", "Fizz", "4", "Buzz"]
fizz_buzz(15, sys.stdout)  # prints "1, 2, Fizz, ..., 14, Fizz Buzz"
reverse("日本語")           # "語本日"
```

`fizz_buzz` writes to standard output when no file is given.

### Big O examples (`algo.bigo`)

Functions whose running times illustrate common growth rates:

- `add(a, b)` – O(1)
- `sum_to_max(maximum)` – adds 1 to `maximum` term by term, O(N)
- `sum_to_max_v2(maximum)` – the same sum by formula, O(1)
- `sum_vals(vals)` – O(N)
- `find(items, x)` – index of the first `x`, or -1, O(N)
- `grid(x, y)` – `y` lines of `x` alternating `x`/`o` characters, O(XY)
- `print_list(word, n, file=None)` – writes `n` lines, each the code points
  of `word` written back to back, O(N·M)
- `cube(n)` – one `(x, y, z)` line per point of an n×n×n grid, O(N³)

```python
from algo.bigo import grid
print(grid(3, 3), end="")
# xox
# oxo
# xox
```

### Sorting (`algo.sorting`, `algo.person`)

`bubble_sort` and `insertion_sort` sort a list in place, take an optional
`key` function, and are stable. `Person` is a frozen dataclass with
`age`, `first_name` and `last_name`; its `sort_key()` orders by age, then
last name, then first name.

```python
from algo.sorting import bubble_sort, insertion_sort, bubble_sort_people, insertion_sort_people
from algo.person import Person

values = [3, 1, 2]
bubble_sort(values)          # values == [1, 2, 3]

words = ["dog", "cat", "ball"]
insertion_sort(words)        # words == ["ball", "cat", "dog"]

people = [Person(33, "Bob", "Smilesalot"), Person(12, "Alex", "Zero")]
bubble_sort_people(people)   # people[0] is Person(12, "Alex", "Zero")
```

## Command line

`algo-gcd` reads from standard input a count `n` followed by `n` pairs of
integers (separated by any whitespace) and prints the greatest common
divisor of each pair on its own line:

```
$ printf '2\n30 9\n100 25\n' | algo-gcd
3
25
```

Empty input, a token that is not an integer, a negative count or too few
pairs is reported as a usage error with exit status 2.
"""Small number-theory helpers: factoring, Fibonacci numbers and GCD."""


def factor(primes, number: int) -> list[int]:
    """Factor ``number`` with the given primes.

    Each prime appears once per time it divides ``number``, in the order the
    primes are given. A remainder greater than 1 that none of the primes
    divides is appended as a final factor.
    """
    if number < 1:
        raise ValueError(f"number must be positive, got {number}")
    result = []
    for prime in primes:
        if prime < 2:
            raise ValueError(f"invalid prime {prime}")
        while number % prime == 0:
            result.append(prime)
            number //= prime
    if number > 1:
        result.append(number)
    return result


def fibonacci(n: int) -> int:
    """Return the nth Fibonacci number, with fibonacci(0) == 0 and fibonacci(1) == 1.

    Values of ``n`` below 2 are returned unchanged.
    """
    if n <= 1:
        return n
    previous, current = 0, 1
    for _ in range(n - 1):
        previous, current = current, previous + current
    return current


def gcd(a: int, b: int) -> int:
    """Return the greatest common divisor of ``a`` and ``b`` by Euclid's method."""
    while b != 0:
        a, b = b, a % b
    return a
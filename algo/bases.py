"""Conversions between decimal integers and digit strings in bases 2 to 16."""

DIGITS = "0123456789ABCDEF"
MIN_BASE = 2
MAX_BASE = len(DIGITS)


def _check_base(base: int) -> None:
    if not MIN_BASE <= base <= MAX_BASE:
        raise ValueError(f"base must be between {MIN_BASE} and {MAX_BASE}, got {base}")


def base_to_dec(value: str, base: int) -> int:
    """Return the integer that the digit string ``value`` denotes in ``base``.

    Digits are 0-9 and A-F; lower-case letters are accepted too.
    """
    _check_base(base)
    result = 0
    for char in value.upper():
        digit = DIGITS.find(char)
        if digit < 0 or digit >= base:
            raise ValueError(f"invalid digit {char!r} for base {base}")
        result = result * base + digit
    return result


def dec_to_base(dec: int, base: int) -> str:
    """Return ``dec`` written in ``base`` with upper-case digits.

    Zero is written as the empty string.
    """
    _check_base(base)
    if dec < 0:
        raise ValueError(f"cannot convert negative number {dec}")
    digits = []
    while dec > 0:
        dec, rem = divmod(dec, base)
        digits.append(DIGITS[rem])
    return "".join(reversed(digits))


def base_to_base(value: str, base: int, new_base: int) -> str:
    """Rewrite the digit string ``value`` from ``base`` into ``new_base``."""
    return dec_to_base(base_to_dec(value, base), new_base)
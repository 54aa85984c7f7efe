"""Conversions between decimal text and integers."""

from __future__ import annotations

import re

__all__ = ["atoi", "itoa", "INT_MIN", "INT_MAX"]

INT_MIN = -(2**31)
INT_MAX = 2**31 - 1

_NUMBER = re.compile(r"[\t\n\v\f\r ]*([+-]?)([0-9]*)")


def atoi(text: str) -> int:
    """Parse a leading decimal integer from ``text``.

    Leading blanks (space and ``\\t`` through ``\\r``) are skipped, one
    optional sign is accepted, and digits are read until the first
    non-digit. Text without digits gives 0.
    """
    match = _NUMBER.match(text)
    sign, digits = match.group(1), match.group(2)
    if not digits:
        return 0
    value = int(digits)
    return -value if sign == "-" else value


def itoa(n: int) -> str:
    """Return the decimal text of a 32-bit signed integer."""
    if not INT_MIN <= n <= INT_MAX:
        raise OverflowError(f"{n} does not fit in a 32-bit signed integer")
    return str(n)
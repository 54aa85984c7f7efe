"""Bounded search and comparison over strings."""

from __future__ import annotations

from itertools import islice, zip_longest

__all__ = ["strnstr", "strncmp", "strchr", "strrchr"]


def _require_single_char(value: str) -> None:
    if not isinstance(value, str) or len(value) != 1:
        raise ValueError(f"expected a single character, got {value!r}")


def strnstr(haystack: str, needle: str, length: int) -> int | None:
    """Return the index of ``needle`` lying wholly in the first ``length``
    characters of ``haystack``, or ``None``.

    An empty needle is found at index 0.
    """
    if length < 0:
        raise ValueError("length must not be negative")
    if not needle:
        return 0
    index = haystack[:length].find(needle)
    return None if index < 0 else index


def strncmp(first: str, second: str, n: int) -> int:
    """Compare at most ``n`` characters; a negative ``n`` means no limit.

    Returns the difference of the first differing character codes, the end
    of a string counting as code 0.
    """
    if n == 0:
        return 0
    limit = None if n < 0 else n
    pairs = zip_longest(map(ord, first), map(ord, second), fillvalue=0)
    for a, b in islice(pairs, limit):
        if a != b or a == 0:
            return a - b
    return 0


def strchr(text: str, char: str) -> int | None:
    """Index of the first ``char`` in ``text``; ``"\\0"`` finds the end."""
    _require_single_char(char)
    if char == "\0":
        return len(text)
    index = text.find(char)
    return None if index < 0 else index


def strrchr(text: str, char: str) -> int | None:
    """Index of the last ``char`` in ``text``; ``"\\0"`` finds the end."""
    _require_single_char(char)
    if char == "\0":
        return len(text)
    index = text.rfind(char)
    return None if index < 0 else index
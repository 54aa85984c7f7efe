"""Applying a function to every character of a string, with its index."""

from __future__ import annotations

from collections.abc import Callable, MutableSequence
from typing import Optional

__all__ = ["strmapi", "striteri"]


def _check_char(value: object) -> str:
    if not isinstance(value, str) or len(value) != 1:
        raise ValueError(f"expected a single character, got {value!r}")
    return value


def strmapi(text: str, func: Callable[[int, str], str]) -> str:
    """Return a new string of ``func(index, char)`` for every character.

    ``func`` must return a single character.
    """
    return "".join(_check_char(func(index, char)) for index, char in enumerate(text))


def striteri(
    chars: MutableSequence[str],
    func: Callable[[int, str], Optional[str]],
) -> None:
    """Call ``func(index, char)`` on every character of ``chars`` in place.

    A character returned by ``func`` replaces the one at that index; a
    return of ``None`` leaves it unchanged.
    """
    for index, char in enumerate(chars):
        replacement = func(index, char)
        if replacement is not None:
            chars[index] = _check_char(replacement)
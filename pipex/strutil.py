"""String building and slicing helpers used by the pipeline."""

from __future__ import annotations

from collections.abc import Iterable

__all__ = ["split", "substr", "strtrim", "strjoin", "strjoin3", "super_strjoin"]


def _require_single_char(value: str, name: str) -> None:
    if not isinstance(value, str) or len(value) != 1:
        raise ValueError(f"{name} must be a single character, got {value!r}")


def split(text: str, sep: str) -> list[str]:
    """Split ``text`` on the character ``sep``, dropping empty fields."""
    _require_single_char(sep, "sep")
    return [field for field in text.split(sep) if field]


def substr(text: str, start: int, length: int) -> str:
    """Return at most ``length`` characters of ``text`` from ``start``.

    A ``start`` past the end of the text yields an empty string.
    """
    if start < 0 or length < 0:
        raise ValueError("start and length must not be negative")
    if start > len(text):
        return ""
    return text[start:start + length]


def strtrim(text: str, chars: str) -> str:
    """Strip every character found in ``chars`` from both ends of ``text``."""
    if not chars:
        return text
    return text.strip(chars)


def strjoin(first: str, second: str) -> str:
    """Concatenate two strings."""
    return first + second


def strjoin3(first: str, second: str, third: str) -> str:
    """Concatenate three strings."""
    return first + second + third


def super_strjoin(parts: Iterable[str], sep: str) -> str:
    """Join ``parts`` with ``sep`` placed between neighbours only."""
    return sep.join(parts)
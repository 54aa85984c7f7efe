"""ASCII character classification on integer character codes."""

from __future__ import annotations

__all__ = [
    "is_alpha",
    "is_digit",
    "is_alnum",
    "is_ascii",
    "is_print",
    "to_upper",
    "to_lower",
]

_UPPER = range(ord("A"), ord("Z") + 1)
_LOWER = range(ord("a"), ord("z") + 1)
_DIGIT = range(ord("0"), ord("9") + 1)
_CASE_OFFSET = ord("a") - ord("A")


def is_alpha(code: int) -> bool:
    """True for the codes of ASCII letters."""
    return code in _UPPER or code in _LOWER


def is_digit(code: int) -> bool:
    """True for the codes of ASCII decimal digits."""
    return code in _DIGIT


def is_alnum(code: int) -> bool:
    """True for the codes of ASCII letters and digits."""
    return is_alpha(code) or is_digit(code)


def is_ascii(code: int) -> bool:
    """True for codes 0 through 127."""
    return 0 <= code <= 127


def is_print(code: int) -> bool:
    """True for printable ASCII codes, space through tilde."""
    return 32 <= code <= 126


def to_upper(code: int) -> int:
    """Map an ASCII lowercase letter code to uppercase; others unchanged."""
    return code - _CASE_OFFSET if code in _LOWER else code


def to_lower(code: int) -> int:
    """Map an ASCII uppercase letter code to lowercase; others unchanged."""
    return code + _CASE_OFFSET if code in _UPPER else code
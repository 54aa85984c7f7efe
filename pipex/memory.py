"""Byte-level search and comparison over the first ``n`` bytes."""

from __future__ import annotations

__all__ = ["memchr", "memcmp"]


def _check_length(n: int, *buffers: bytes) -> None:
    if n < 0:
        raise ValueError("n must not be negative")
    for buffer in buffers:
        if n > len(buffer):
            raise ValueError(f"n={n} exceeds buffer of {len(buffer)} bytes")


def memchr(data: bytes, value: int, n: int) -> int | None:
    """Index of the first byte equal to ``value & 0xFF`` among the first
    ``n`` bytes of ``data``, or ``None``."""
    view = memoryview(data).cast("B")
    _check_length(n, view)
    index = bytes(view[:n]).find(value & 0xFF)
    return None if index < 0 else index


def memcmp(first: bytes, second: bytes, n: int) -> int:
    """Compare the first ``n`` bytes; return the difference of the first
    differing bytes, or 0 when they match."""
    a = memoryview(first).cast("B")
    b = memoryview(second).cast("B")
    _check_length(n, a, b)
    for x, y in zip(a[:n], b[:n]):
        if x != y:
            return x - y
    return 0
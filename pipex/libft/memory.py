"""Byte-buffer helpers: filling, searching, comparing and copying."""

from __future__ import annotations

import operator


def _check_span(buf, n: int) -> int:
    n = operator.index(n)
    if n < 0 or n > len(buf):
        raise ValueError(f"span of {n} bytes does not fit a buffer of {len(buf)}")
    return n


def memset(buf, c: int, n: int):
    """Set the first ``n`` bytes of ``buf`` to ``c`` (low 8 bits) and return it."""
    n = _check_span(buf, n)
    buf[:n] = bytes([c & 0xFF]) * n
    return buf


def bzero(buf, n: int) -> None:
    """Zero the first ``n`` bytes of ``buf``."""
    memset(buf, 0, n)


def calloc(nmemb: int, size: int) -> bytearray:
    """Return a zero-filled buffer of ``nmemb * size`` bytes."""
    nmemb, size = operator.index(nmemb), operator.index(size)
    if nmemb < 0 or size < 0:
        raise ValueError("allocation sizes must not be negative")
    return bytearray(nmemb * size)


def memchr(data, c: int, n: int) -> int | None:
    """Index of the first byte equal to ``c`` in the first ``n`` bytes, or None."""
    n = _check_span(data, n)
    index = bytes(data[:n]).find(c & 0xFF)
    return None if index < 0 else index


def memcmp(a, b, n: int) -> int:
    """Compare the first ``n`` bytes of two buffers; return -1, 0 or 1."""
    n = _check_span(a, n)
    _check_span(b, n)
    left, right = bytes(a[:n]), bytes(b[:n])
    return (left > right) - (left < right)


def memcpy(dest, src, n: int):
    """Copy ``n`` bytes from ``src`` into ``dest`` and return ``dest``."""
    if dest is None and src is None:
        return None
    n = _check_span(dest, n)
    _check_span(src, n)
    dest[:n] = bytes(src[:n])
    return dest


def memmove(dest, src, n: int):
    """Copy ``n`` bytes from ``src`` into ``dest``, safe when the two overlap."""
    if dest is None and src is None:
        return None
    n = _check_span(dest, n)
    _check_span(src, n)
    chunk = bytes(src[:n])
    dest[:n] = chunk
    return dest
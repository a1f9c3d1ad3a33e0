"""String helpers: searching, comparing, copying, slicing, joining and splitting."""

from __future__ import annotations

import operator
from collections.abc import Callable, MutableSequence
from itertools import islice, zip_longest

_TERMINATOR = "\0"


def _require_str(value, name: str) -> str:
    if not isinstance(value, str):
        raise TypeError(f"{name} must be a str, not {type(value).__name__}")
    return value


def _char(c: int | str) -> str:
    """Return ``c`` as one character; ints are reduced to their low 8 bits."""
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {c!r}")
        return c
    return chr(operator.index(c) & 0xFF)


def _size(value: int, name: str) -> int:
    value = operator.index(value)
    if value < 0:
        raise ValueError(f"{name} must not be negative")
    return value


def strlen(s: str) -> int:
    """Number of characters in ``s``."""
    return len(_require_str(s, "s"))


def strchr(s: str, c: int | str) -> int | None:
    """Index of the first ``c`` in ``s``, or None.

    Searching for the terminator finds the end of the string.
    """
    s, ch = _require_str(s, "s"), _char(c)
    if ch == _TERMINATOR:
        return len(s)
    index = s.find(ch)
    return None if index < 0 else index


def strrchr(s: str, c: int | str) -> int | None:
    """Index of the last ``c`` in ``s``, or None.

    Searching for the terminator finds the end of the string.
    """
    s, ch = _require_str(s, "s"), _char(c)
    if ch == _TERMINATOR:
        return len(s)
    index = s.rfind(ch)
    return None if index < 0 else index


def strncmp(s1: str, s2: str, n: int) -> int:
    """Compare at most ``n`` characters.

    Returns the difference of the first differing character codes, the end of
    a string counting as code 0, or 0 when the compared parts are equal.
    """
    _require_str(s1, "s1")
    _require_str(s2, "s2")
    n = _size(n, "n")
    for a, b in islice(zip_longest(s1, s2, fillvalue=_TERMINATOR), n):
        if a != b:
            return ord(a) - ord(b)
        if a == _TERMINATOR:
            break
    return 0


def strnstr(haystack: str, needle: str, n: int) -> int | None:
    """Index of ``needle`` lying wholly within the first ``n`` characters, or None.

    An empty needle is found at index 0.
    """
    _require_str(haystack, "haystack")
    _require_str(needle, "needle")
    n = _size(n, "n")
    if not needle:
        return 0
    index = haystack[:n].find(needle)
    return None if index < 0 else index


def strlcpy(src: str, size: int) -> tuple[str, int]:
    """Copy ``src`` into a buffer of ``size`` slots, one kept for the terminator.

    Returns the copied text and the full length of ``src``; a size of 0 copies
    nothing.
    """
    _require_str(src, "src")
    size = _size(size, "size")
    copied = src[: size - 1] if size else ""
    return copied, len(src)


def strlcat(dest: str, src: str, size: int) -> tuple[str, int]:
    """Append ``src`` to ``dest`` within a buffer of ``size`` slots.

    Returns the resulting text and the length the full result would have had:
    ``len(src)`` plus the smaller of ``size`` and ``len(dest)``.
    """
    _require_str(dest, "dest")
    _require_str(src, "src")
    size = _size(size, "size")
    room = max(0, size - 1 - len(dest))
    return dest + src[:room], len(src) + min(size, len(dest))


def strdup(s: str) -> str:
    """Return a copy of ``s``."""
    return "".join(_require_str(s, "s"))


def substr(s: str, start: int, length: int) -> str:
    """Up to ``length`` characters of ``s`` from ``start``; empty past the end."""
    _require_str(s, "s")
    start = _size(start, "start")
    length = _size(length, "length")
    return s[start : start + length]


def strjoin(s1: str, s2: str) -> str:
    """Join ``s1`` with the first word of ``s2``, stopping at the first space."""
    _require_str(s1, "s1")
    _require_str(s2, "s2")
    return s1 + s2.partition(" ")[0]


def strtrim(s: str, charset: str) -> str:
    """Remove characters found in ``charset`` from both ends of ``s``."""
    _require_str(s, "s")
    _require_str(charset, "charset")
    return s.strip(charset) if charset else s


def split(s: str, sep: int | str) -> list[str]:
    """Split ``s`` on the character ``sep``, dropping empty pieces."""
    _require_str(s, "s")
    ch = _char(sep)
    return [word for word in s.split(ch) if word]


def strmapi(s: str, f: Callable[[int, str], str]) -> str:
    """Build a new string from ``f(index, char)`` for every character of ``s``."""
    _require_str(s, "s")
    return "".join(f(index, ch) for index, ch in enumerate(s))


def striteri(s: MutableSequence | None, f: Callable[[int, object], object]) -> None:
    """Call ``f(index, item)`` on each item of a mutable sequence, in place.

    Where ``f`` returns something other than None, that value replaces the item.
    """
    if s is None:
        return
    for index, item in enumerate(s):
        result = f(index, item)
        if result is not None:
            s[index] = result
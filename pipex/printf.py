"""A small printf: %s %c %d %i %u %p %x %X and %% conversions."""

from __future__ import annotations

import operator
import sys
from collections.abc import Callable, Iterator
from typing import Any

UPPER_BASE = "0123456789ABCDEF"
LOWER_BASE = "0123456789abcdef"

_NO_ARGUMENT = object()


def _signed32(value: int) -> int:
    value = operator.index(value) % (1 << 32)
    return value - (1 << 32) if value >= (1 << 31) else value


def _unsigned32(value: int) -> int:
    return operator.index(value) % (1 << 32)


def _in_base(value: int, base: str) -> str:
    digits = []
    while value:
        value, remainder = divmod(value, len(base))
        digits.append(base[remainder])
    return "".join(reversed(digits)) or base[0]


def _string(value: Any) -> str:
    return "(null)" if value is None else str(value)


def _character(value: Any) -> str:
    if isinstance(value, str):
        if len(value) != 1:
            raise ValueError(f"%c expects a single character, got {value!r}")
        return value
    return chr(operator.index(value) & 0xFF)


def _pointer(value: Any) -> str:
    if value is None:
        return "(nil)"
    try:
        address = operator.index(value)
    except TypeError:
        address = id(value)
    return "0x" + _in_base(address % (1 << 64), LOWER_BASE)


_CONVERSIONS: dict[str, Callable[[Any], str]] = {
    "s": _string,
    "c": _character,
    "d": lambda value: str(_signed32(value)),
    "i": lambda value: str(_signed32(value)),
    "u": lambda value: str(_unsigned32(value)),
    "p": _pointer,
    "x": lambda value: _in_base(_unsigned32(value), LOWER_BASE),
    "X": lambda value: _in_base(_unsigned32(value), UPPER_BASE),
}


def _next_argument(arguments: Iterator[Any], spec: str) -> Any:
    value = next(arguments, _NO_ARGUMENT)
    if value is _NO_ARGUMENT:
        raise TypeError(f"not enough arguments for %{spec}")
    return value


def format_message(fmt: str, *args: Any) -> str:
    """Expand the conversions in ``fmt`` with ``args`` and return the text.

    Unknown conversions produce nothing and consume no argument; a lone
    trailing ``%`` ends the output.
    """
    arguments = iter(args)
    chars = iter(fmt)
    pieces: list[str] = []
    for ch in chars:
        if ch != "%":
            pieces.append(ch)
            continue
        spec = next(chars, None)
        if spec is None:
            break
        if spec == "%":
            pieces.append("%")
            continue
        convert = _CONVERSIONS.get(spec)
        if convert is not None:
            pieces.append(convert(_next_argument(arguments, spec)))
    return "".join(pieces)


def printf(fmt: str, *args: Any) -> int:
    """Write the formatted text to standard output and return its length."""
    text = format_message(fmt, *args)
    sys.stdout.write(text)
    sys.stdout.flush()
    return len(text)
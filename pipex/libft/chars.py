"""ASCII character classification, case mapping and integer/text conversion."""

from __future__ import annotations

import operator
from itertools import takewhile

_WHITESPACE = " \t\n\v\f\r"
_INT_BITS = 32


def _code(c: int | str) -> int:
    """Return the character code of ``c``, given as an int or one character."""
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {c!r}")
        return ord(c)
    return operator.index(c)


def _wrap_int(value: int) -> int:
    """Reduce ``value`` to the range of a 32-bit signed integer."""
    modulus = 1 << _INT_BITS
    value %= modulus
    return value - modulus if value >= modulus // 2 else value


def isalpha(c: int | str) -> bool:
    """True for ASCII letters."""
    code = _code(c)
    return ord("A") <= code <= ord("Z") or ord("a") <= code <= ord("z")


def isdigit(c: int | str) -> bool:
    """True for the ASCII decimal digits."""
    return ord("0") <= _code(c) <= ord("9")


def isalnum(c: int | str) -> bool:
    """True for ASCII letters and digits."""
    return isalpha(c) or isdigit(c)


def isascii(c: int | str) -> bool:
    """True for codes 0 to 127."""
    return 0 <= _code(c) <= 127


def isprint(c: int | str) -> bool:
    """True for printable ASCII, space included."""
    return 31 < _code(c) < 127


def tolower(c: int | str) -> int | str:
    """Map an upper-case ASCII letter to lower case; other values pass through."""
    code = _code(c)
    if ord("A") <= code <= ord("Z"):
        code += 32
    return chr(code) if isinstance(c, str) else code


def toupper(c: int | str) -> int | str:
    """Map a lower-case ASCII letter to upper case; other values pass through."""
    code = _code(c)
    if ord("a") <= code <= ord("z"):
        code -= 32
    return chr(code) if isinstance(c, str) else code


def atoi(text: str) -> int:
    """Parse a leading decimal integer the way a 32-bit ``atoi`` does.

    Leading whitespace is skipped, one sign is accepted, and parsing stops at
    the first non-digit. Text without digits yields 0; results wrap to 32 bits.
    """
    rest = text.lstrip(_WHITESPACE)
    sign = -1 if rest.startswith("-") else 1
    if rest[:1] in ("+", "-"):
        rest = rest[1:]
    digits = "".join(takewhile(lambda ch: "0" <= ch <= "9", rest))
    value = int(digits) if digits else 0
    return _wrap_int(value * sign)


def itoa(n: int) -> str:
    """Return the decimal text of an integer."""
    return str(operator.index(n))
"""Conversion between decimal text and integers."""

from __future__ import annotations

import operator

_WHITESPACE = " \n\t\v\f\r"
_DIGITS = "0123456789"
_LONG_MAX = 9223372036854775807


def _to_int32(value: int) -> int:
    value &= 0xFFFFFFFF
    return value - (1 << 32) if value >= (1 << 31) else value


def atoi(text: str) -> int:
    """Parse a leading decimal integer from ``text``.

    Leading whitespace is skipped, one optional sign is read, then digits up
    to the first non-digit. The result wraps to a 32-bit signed integer. If
    the magnitude exceeds the 64-bit signed maximum, -1 is returned for a
    positive number and 0 for a negative one.
    """
    rest = text.lstrip(_WHITESPACE)
    sign = 1
    if rest[:1] in ("+", "-"):
        if rest[0] == "-":
            sign = -1
        rest = rest[1:]
    value = 0
    for ch in rest:
        if ch not in _DIGITS:
            break
        digit = ord(ch) - ord("0")
        if value > (_LONG_MAX - digit) // 10:
            return -1 if sign == 1 else 0
        value = value * 10 + digit
    return _to_int32(value * sign)


def itoa(n: int) -> str:
    """Return the decimal text of the integer ``n``."""
    return str(operator.index(n))
"""Character classification and case conversion for ASCII code points."""

from __future__ import annotations

from typing import Union

CharLike = Union[int, str]


def _code(c: CharLike) -> int:
    """Return the integer code of ``c``, which is an int or a one-character str."""
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {c!r}")
        return ord(c)
    if isinstance(c, int):
        return int(c)
    raise TypeError(f"expected an int or a one-character str, got {type(c).__name__}")


def is_alpha(c: CharLike) -> bool:
    """True for ASCII letters A-Z and a-z."""
    code = _code(c)
    return ord("A") <= code <= ord("Z") or ord("a") <= code <= ord("z")


def is_digit(c: CharLike) -> bool:
    """True for ASCII digits 0-9."""
    return ord("0") <= _code(c) <= ord("9")


def is_alnum(c: CharLike) -> bool:
    """True for ASCII letters and digits."""
    return is_alpha(c) or is_digit(c)


def is_ascii(c: CharLike) -> bool:
    """True for codes 0 through 127."""
    return 0 <= _code(c) <= 127


def is_print(c: CharLike) -> bool:
    """True for printable ASCII, space (32) through tilde (126)."""
    return 32 <= _code(c) <= 126


def _convert(c: CharLike, low: int, high: int, shift: int) -> CharLike:
    code = _code(c)
    if low <= code <= high:
        code += shift
    return chr(code) if isinstance(c, str) else code


def to_upper(c: CharLike) -> CharLike:
    """Map a-z to A-Z; anything else is returned unchanged, in the type given."""
    return _convert(c, ord("a"), ord("z"), -32)


def to_lower(c: CharLike) -> CharLike:
    """Map A-Z to a-z; anything else is returned unchanged, in the type given."""
    return _convert(c, ord("A"), ord("Z"), 32)
"""String utilities with C-string semantics: text ends at the first NUL."""

from __future__ import annotations

from itertools import zip_longest
from typing import Callable, MutableSequence, Optional, Union

CharLike = Union[int, str]


def _cstr(s: str) -> str:
    """Return ``s`` up to, not including, its first NUL character."""
    return s.partition("\0")[0]


def _char(c: CharLike) -> str:
    """Normalise ``c`` to a one-character str; ints are truncated to a byte."""
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {c!r}")
        return c
    if isinstance(c, int):
        return chr(c & 0xFF)
    raise TypeError(f"expected an int or a one-character str, got {type(c).__name__}")


def _check_size(value: int, name: str) -> None:
    if value < 0:
        raise ValueError(f"{name} must not be negative")


def strlen(s: str) -> int:
    """Number of characters before the first NUL."""
    return len(_cstr(s))


def strchr(s: str, c: CharLike) -> Optional[int]:
    """Index of the first ``c`` in ``s``, or None.

    Searching for NUL finds the terminator, at index ``strlen(s)``.
    """
    text = _cstr(s)
    ch = _char(c)
    if ch == "\0":
        return len(text)
    index = text.find(ch)
    return None if index < 0 else index


def strrchr(s: str, c: CharLike) -> Optional[int]:
    """Index of the last ``c`` in ``s``, or None.

    Searching for NUL finds the terminator, at index ``strlen(s)``.
    """
    text = _cstr(s)
    ch = _char(c)
    if ch == "\0":
        return len(text)
    index = text.rfind(ch)
    return None if index < 0 else index


def strncmp(s1: str, s2: str, n: int) -> int:
    """Compare at most ``n`` characters; return the difference of the first mismatch."""
    _check_size(n, "n")
    a, b = _cstr(s1)[:n], _cstr(s2)[:n]
    for x, y in zip_longest(a, b, fillvalue="\0"):
        if x != y:
            return ord(x) - ord(y)
    return 0


def strlcpy(src: str, dstsize: int) -> tuple[str, int]:
    """Copy ``src`` into a buffer of ``dstsize`` characters.

    Returns the text that fits, leaving room for the terminator, and the
    full length of ``src``; a truncation happened if that length is not
    smaller than ``dstsize``.
    """
    _check_size(dstsize, "dstsize")
    text = _cstr(src)
    if dstsize == 0:
        return "", len(text)
    return text[:dstsize - 1], len(text)


def strlcat(dst: str, src: str, dstsize: int) -> tuple[str, int]:
    """Append ``src`` to ``dst`` within a buffer of ``dstsize`` characters.

    Returns the resulting text and the length the full result would have
    had. When ``dstsize`` is zero the length of ``src`` is returned; when
    ``dstsize`` does not exceed the length of ``dst`` nothing is appended
    and ``len(src) + dstsize`` is returned.
    """
    _check_size(dstsize, "dstsize")
    head = _cstr(dst)
    tail = _cstr(src)
    if dstsize == 0:
        return head, len(tail)
    if dstsize <= len(head):
        return head, len(tail) + dstsize
    room = dstsize - 1 - len(head)
    return head + tail[:room], len(head) + len(tail)


def strnstr(haystack: str, needle: str, length: int) -> Optional[int]:
    """Index of the first ``needle`` lying wholly within ``haystack[:length]``, or None.

    An empty needle is found at index 0.
    """
    _check_size(length, "length")
    pattern = _cstr(needle)
    if not pattern:
        return 0
    index = _cstr(haystack)[:length].find(pattern)
    return None if index < 0 else index


def strdup(s: str) -> str:
    """Copy of ``s`` up to its first NUL."""
    return _cstr(s)


def substr(s: Optional[str], start: int, length: int) -> Optional[str]:
    """At most ``length`` characters of ``s`` from ``start``; empty if start is past the end."""
    if s is None:
        return None
    _check_size(start, "start")
    _check_size(length, "length")
    text = _cstr(s)
    if start >= len(text) or length == 0:
        return ""
    return text[start:start + length]


def strjoin(s1: Optional[str], s2: Optional[str]) -> Optional[str]:
    """Concatenate two strings; a missing one is treated as absent, both missing gives None."""
    if s1 is None and s2 is None:
        return None
    if s1 is None:
        return _cstr(s2)
    if s2 is None:
        return _cstr(s1)
    return _cstr(s1) + _cstr(s2)


def strtrim(s: Optional[str], charset: Optional[str]) -> Optional[str]:
    """Remove characters of ``charset`` from both ends of ``s``."""
    if s is None or charset is None:
        return None
    return _cstr(s).strip(_cstr(charset))


def split(s: Optional[str], sep: CharLike) -> Optional[list[str]]:
    """Split ``s`` on the character ``sep``, dropping empty pieces."""
    if s is None:
        return None
    text = _cstr(s)
    delimiter = _char(sep)
    if delimiter == "\0":
        return [text] if text else []
    return [word for word in text.split(delimiter) if word]


def strmapi(s: Optional[str], f: Optional[Callable[[int, str], str]]) -> Optional[str]:
    """Build a new string from ``f(index, char)`` for every character of ``s``."""
    if s is None or f is None:
        return None
    return "".join(f(index, ch) for index, ch in enumerate(_cstr(s)))


def striteri(buffer: Optional[MutableSequence], f: Optional[Callable]) -> None:
    """Apply ``f(index, item)`` to each item of ``buffer`` in place, up to a NUL.

    ``buffer`` is a bytearray or a list of one-character strings. Whatever
    ``f`` returns replaces the item, unless it returns None.
    """
    if buffer is None or f is None:
        return
    for index, item in enumerate(buffer):
        if item in (0, "\0"):
            break
        replacement = f(index, item)
        if replacement is not None:
            buffer[index] = replacement
"""String helpers with the semantics of the classic C string routines.

Text routines work on ``str`` and report positions as indices (``None`` where
nothing is found). The bounded-copy routines ``strlcpy`` and ``strlcat`` work
on NUL-terminated data held in a ``bytearray``.
"""

from __future__ import annotations

from collections.abc import Callable, MutableSequence

_NUL = "\0"


def _single_char(c: str | int) -> str:
    if isinstance(c, int):
        return chr(c)
    if len(c) != 1:
        raise ValueError(f"expected a single character, got {c!r}")
    return c


def _cstr_len(data: bytes | bytearray, limit: int | None = None) -> int:
    """Length of the NUL-terminated content of ``data``, looking at most ``limit`` bytes."""
    end = len(data) if limit is None else min(limit, len(data))
    nul = data.find(0, 0, end)
    return end if nul < 0 else nul


def strlen(s: str) -> int:
    """Number of characters in ``s``."""
    return len(s)


def strchr(s: str, c: str | int) -> int | None:
    """Index of the first ``c`` in ``s``; the terminator ``"\\0"`` is found at ``len(s)``."""
    ch = _single_char(c)
    if ch == _NUL:
        return len(s)
    index = s.find(ch)
    return None if index < 0 else index


def strrchr(s: str, c: str | int) -> int | None:
    """Index of the last ``c`` in ``s``; the terminator ``"\\0"`` is found at ``len(s)``."""
    ch = _single_char(c)
    if ch == _NUL:
        return len(s)
    index = s.rfind(ch)
    return None if index < 0 else index


def strcmp(a: str, b: str) -> int:
    """Difference of the first differing characters, 0 when the strings are equal."""
    for left, right in zip(a, b):
        if left != right:
            return ord(left) - ord(right)
    if len(a) == len(b):
        return 0
    return ord(a[len(b)]) if len(a) > len(b) else -ord(b[len(a)])


def strncmp(a: str, b: str, n: int) -> int:
    """Like :func:`strcmp`, looking at no more than ``n`` characters."""
    if n < 0:
        raise ValueError("n must not be negative")
    return strcmp(a[:n], b[:n])


def strnstr(big: str, little: str, length: int) -> int | None:
    """Index of ``little`` in the first ``length`` characters of ``big``.

    An empty ``little`` is found at 0.
    """
    if not little:
        return 0
    window = big[:max(length, 0)]
    index = window.find(little)
    return None if index < 0 else index


def strdup(s: str) -> str:
    """A copy of ``s``."""
    return str(s)


def substr(s: str, start: int, length: int) -> str:
    """At most ``length`` characters of ``s`` from ``start``; empty when ``start`` is past the end."""
    if start < 0 or length < 0:
        raise ValueError("start and length must not be negative")
    if start >= len(s):
        return ""
    return s[start:start + length]


def strjoin(a: str, b: str) -> str:
    """``a`` followed by ``b``."""
    if a is None or b is None:
        raise TypeError("both strings are required")
    return a + b


def strtrim(s: str, chars: str) -> str:
    """``s`` without leading and trailing characters found in ``chars``."""
    if not s or not chars:
        return s
    return s.strip(chars)


def split(s: str, sep: str | int) -> list[str]:
    """Words of ``s`` separated by runs of the single character ``sep``."""
    delimiter = _single_char(sep)
    return [word for word in s.split(delimiter) if word]


def strmapi(s: str, func: Callable[[int, str], str]) -> str:
    """A new string made of ``func(index, char)`` for every character of ``s``."""
    return "".join(func(index, ch) for index, ch in enumerate(s))


def striteri(chars: MutableSequence[str], func: Callable[[int, str], str]) -> None:
    """Replace every element of ``chars`` in place with ``func(index, char)``."""
    for index, ch in enumerate(chars):
        chars[index] = func(index, ch)


def strlcpy(dst: bytearray, src: bytes | bytearray, size: int) -> int:
    """Copy ``src`` into ``dst``, writing at most ``size`` bytes including the NUL.

    Returns the length of ``src``, so a result of ``size`` or more means the
    copy was truncated.
    """
    if size < 0:
        raise ValueError("size must not be negative")
    if size > len(dst):
        raise ValueError("size exceeds the destination buffer")
    src_len = _cstr_len(src)
    if size:
        count = min(src_len, size - 1)
        dst[:count] = src[:count]
        dst[count] = 0
    return src_len


def strlcat(dst: bytearray, src: bytes | bytearray, size: int) -> int:
    """Append ``src`` to the NUL-terminated content of ``dst`` within ``size`` bytes.

    Returns the length the full result would have had: the initial length of
    ``dst`` (capped at ``size``) plus the length of ``src``.
    """
    if size < 0:
        raise ValueError("size must not be negative")
    if size > len(dst):
        raise ValueError("size exceeds the destination buffer")
    src_len = _cstr_len(src)
    dst_len = _cstr_len(dst, size)
    if dst_len < size:
        count = min(src_len, size - dst_len - 1)
        dst[dst_len:dst_len + count] = src[:count]
        dst[dst_len + count] = 0
    return dst_len + src_len
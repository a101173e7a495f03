"""NUL-aware string inspection, comparison, search and bounded copies.

Text functions take :class:`str` and treat an embedded ``"\\0"`` as the end
of the string, so that a string never reaches past its terminator. The
bounded copy functions :func:`strlcpy` and :func:`strlcat` work on a
writable :class:`bytearray` destination that holds NUL-terminated bytes.
"""

from __future__ import annotations

from typing import Optional, Union

CharLike = Union[int, str]
ReadableBuffer = Union[bytes, bytearray, memoryview]

_INT_BITS = 32
_WHITESPACE = frozenset(" \t\n\v\f\r")


def _terminated(s: str) -> str:
    """Return ``s`` up to, but not including, its first NUL."""
    return s.split("\0", 1)[0]


def _terminated_bytes(data: ReadableBuffer) -> bytes:
    return bytes(data).split(b"\0", 1)[0]


def _char_code(c: CharLike) -> int:
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {c!r}")
        return ord(c)
    if isinstance(c, int):
        return c & 0xFF
    raise TypeError(f"expected an int or a one-character str, got {type(c).__name__}")


def _check_size(name: str, size: int) -> None:
    if size < 0:
        raise ValueError(f"{name}: size must not be negative, got {size}")


def strlen(s: str) -> int:
    """Return the number of characters before the first NUL."""
    return len(_terminated(s))


def strchr(s: str, c: CharLike) -> Optional[int]:
    """Return the index of the first ``c`` in ``s``, or None.

    Searching for NUL finds the terminator, at index ``strlen(s)``.
    """
    text = _terminated(s)
    code = _char_code(c)
    if code == 0:
        return len(text)
    index = text.find(chr(code))
    return None if index < 0 else index


def strrchr(s: str, c: CharLike) -> Optional[int]:
    """Return the index of the last ``c`` in ``s``, or None.

    Searching for NUL finds the terminator, at index ``strlen(s)``.
    """
    text = _terminated(s)
    code = _char_code(c)
    if code == 0:
        return len(text)
    index = text.rfind(chr(code))
    return None if index < 0 else index


def strncmp(s1: str, s2: str, n: int) -> int:
    """Compare at most ``n`` characters, stopping at the end of either string.

    Returns the difference of the first pair of character codes that differ,
    or 0 when the compared prefixes are equal.
    """
    _check_size("strncmp", n)
    a = _terminated(s1)
    b = _terminated(s2)
    for index in range(n):
        x = ord(a[index]) if index < len(a) else 0
        y = ord(b[index]) if index < len(b) else 0
        if x != y or x == 0 or y == 0:
            return x - y
    return 0


def strnstr(haystack: str, needle: str, length: int) -> Optional[int]:
    """Return the index of ``needle`` lying wholly in the first ``length``
    characters of ``haystack``, or None.

    An empty needle is found at index 0.
    """
    _check_size("strnstr", length)
    wanted = _terminated(needle)
    if not wanted:
        return 0
    index = _terminated(haystack)[:length].find(wanted)
    return None if index < 0 else index


def strlcpy(dest: bytearray, src: ReadableBuffer, size: int) -> int:
    """Copy ``src`` into ``dest``, writing at most ``size`` bytes with the NUL.

    The copy is always NUL-terminated when ``size`` is positive. Returns the
    length of ``src``, so a result of ``size`` or more means it was truncated.
    """
    _check_size("strlcpy", size)
    source = _terminated_bytes(src)
    if size == 0:
        return len(source)
    copied = source[: size - 1]
    if len(copied) + 1 > len(dest):
        raise ValueError(
            f"strlcpy: {len(copied) + 1} bytes do not fit a buffer of {len(dest)}"
        )
    dest[: len(copied) + 1] = copied + b"\0"
    return len(source)


def strlcat(dst: bytearray, src: ReadableBuffer, size: int) -> int:
    """Append ``src`` to the NUL-terminated string in ``dst``.

    At most ``size - strlen(dst) - 1`` bytes are appended and the result is
    NUL-terminated. Returns the length of the string it tried to build; when
    the existing string is longer than ``size`` nothing is written and the
    result is ``len(src) + size``.
    """
    _check_size("strlcat", size)
    terminator = bytes(dst).find(b"\0")
    if terminator < 0:
        raise ValueError("strlcat: destination holds no NUL terminator")
    source = _terminated_bytes(src)
    dst_len = terminator
    if dst_len > size:
        return len(source) + size
    room = max(size - dst_len - 1, 0)
    appended = source[:room]
    end = dst_len + len(appended)
    if end >= len(dst):
        raise ValueError(
            f"strlcat: {end + 1} bytes do not fit a buffer of {len(dst)}"
        )
    dst[dst_len : end + 1] = appended + b"\0"
    return dst_len + len(source)


def strdup(s: str) -> str:
    """Return a copy of ``s`` up to its first NUL."""
    return _terminated(s)


def atoi(s: str) -> int:
    """Parse a leading decimal integer the way C's ``atoi`` does.

    Leading whitespace is skipped, one optional sign is read, then digits up
    to the first non-digit. Anything unparseable yields 0. The result wraps
    to a signed 32-bit integer.
    """
    text = _terminated(s)
    position = 0
    while position < len(text) and text[position] in _WHITESPACE:
        position += 1
    sign = 1
    if position < len(text) and text[position] in "+-":
        if text[position] == "-":
            sign = -1
        position += 1
    total = 0
    while position < len(text) and "0" <= text[position] <= "9":
        total = total * 10 + (ord(text[position]) - ord("0"))
        position += 1
    half = 1 << (_INT_BITS - 1)
    return (total * sign + half) % (1 << _INT_BITS) - half
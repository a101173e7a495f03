"""Building new strings: substrings, joins, trims, splits and per-character maps.

Inputs are treated as NUL-terminated. Anything after an embedded ``"\\0"`` is
ignored, as if the string ended there.
"""

from __future__ import annotations

from collections.abc import Callable, MutableSequence
from typing import Any, Optional

from bytekit.strings import strdup


def _check_char(name: str, c: str) -> None:
    if not isinstance(c, str) or len(c) != 1:
        raise ValueError(f"{name}: expected a single character, got {c!r}")


def substr(s: str, start: int, length: int) -> str:
    """Return at most ``length`` characters of ``s`` beginning at ``start``.

    A ``start`` beyond the end of ``s`` gives an empty string.
    """
    if start < 0:
        raise ValueError(f"substr: start must not be negative, got {start}")
    if length < 0:
        raise ValueError(f"substr: length must not be negative, got {length}")
    text = strdup(s)
    if start > len(text):
        return ""
    return text[start : start + length]


def strjoin(s1: str, s2: str) -> str:
    """Return ``s1`` followed by ``s2``."""
    return strdup(s1) + strdup(s2)


def strtrim(s: str, charset: Optional[str]) -> str:
    """Remove characters found in ``charset`` from both ends of ``s``.

    With ``charset`` of None the string is returned unchanged.
    """
    text = strdup(s)
    if charset is None:
        return text
    chars = strdup(charset)
    if not chars:
        return text
    return text.strip(chars)


def split(s: str, sep: str) -> list[str]:
    """Split ``s`` on the character ``sep``, dropping empty words."""
    _check_char("split", sep)
    return [word for word in strdup(s).split(sep) if word]


def itoa(n: int) -> str:
    """Return the decimal form of ``n``."""
    return str(int(n))


def strmapi(s: str, f: Callable[[int, str], str]) -> str:
    """Return a new string made of ``f(index, char)`` for every character of ``s``."""
    return "".join(f(index, char) for index, char in enumerate(strdup(s)))


def _is_terminator(item: Any) -> bool:
    return item == 0 or item == "\0"


def striteri(
    s: MutableSequence[Any], f: Callable[[int, Any], Any]
) -> MutableSequence[Any]:
    """Call ``f(index, item)`` for each item of ``s`` up to its first NUL.

    A result other than None replaces the item in place. ``s`` is a mutable
    sequence such as a list of characters or a :class:`bytearray`; it is
    returned for convenience.
    """
    for index, item in enumerate(s):
        if _is_terminator(item):
            break
        replacement = f(index, item)
        if replacement is not None:
            s[index] = replacement
    return s
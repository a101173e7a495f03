"""ASCII character classification and case conversion.

Every function accepts either an integer character code or a string of
exactly one character. Only the ASCII ranges count: a non-ASCII letter is
neither alphabetic nor printable here.
"""

from __future__ import annotations

from typing import Union

CharLike = Union[int, str]


def _code(c: CharLike) -> int:
    """Return the integer code of ``c``."""
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {c!r}")
        return ord(c)
    if isinstance(c, int):
        return c
    raise TypeError(f"expected an int or a one-character str, got {type(c).__name__}")


def _same_kind(original: CharLike, code: int) -> CharLike:
    return chr(code) if isinstance(original, str) else code


def is_alpha(c: CharLike) -> bool:
    """True for ASCII letters ``a``-``z`` and ``A``-``Z``."""
    code = _code(c)
    return ord("a") <= code <= ord("z") or ord("A") <= code <= ord("Z")


def is_digit(c: CharLike) -> bool:
    """True for the ASCII digits ``0``-``9``."""
    return ord("0") <= _code(c) <= ord("9")


def is_alnum(c: CharLike) -> bool:
    """True for ASCII letters and digits."""
    return is_alpha(c) or is_digit(c)


def is_ascii(c: CharLike) -> bool:
    """True for codes 0 to 127 inclusive."""
    return 0 <= _code(c) <= 127


def is_print(c: CharLike) -> bool:
    """True for printable ASCII, space through tilde."""
    return ord(" ") <= _code(c) <= ord("~")


def to_upper(c: CharLike) -> CharLike:
    """Map an ASCII lower-case letter to upper case; return others unchanged."""
    code = _code(c)
    if ord("a") <= code <= ord("z"):
        code -= 32
    return _same_kind(c, code)


def to_lower(c: CharLike) -> CharLike:
    """Map an ASCII upper-case letter to lower case; return others unchanged."""
    code = _code(c)
    if ord("A") <= code <= ord("Z"):
        code += 32
    return _same_kind(c, code)
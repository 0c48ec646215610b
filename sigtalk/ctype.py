"""ASCII character classification and case conversion.

Every function accepts either an integer character code or a one-character
string. Only the ASCII ranges are recognised; any other value is left alone
or classified as false.
"""

from __future__ import annotations

import operator
from typing import Union

CharLike = Union[int, str]

_UPPER = range(ord("A"), ord("Z") + 1)
_LOWER = range(ord("a"), ord("z") + 1)
_DIGITS = range(ord("0"), ord("9") + 1)
_ASCII = range(0, 128)
_PRINTABLE = range(32, 127)
_CASE_OFFSET = ord("a") - ord("A")


def _code(c: CharLike) -> int:
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {c!r}")
        return ord(c)
    return operator.index(c)


def isalpha(c: CharLike) -> bool:
    """True for an ASCII letter."""
    code = _code(c)
    return code in _UPPER or code in _LOWER


def isdigit(c: CharLike) -> bool:
    """True for an ASCII decimal digit."""
    return _code(c) in _DIGITS


def isalnum(c: CharLike) -> bool:
    """True for an ASCII letter or digit."""
    return isalpha(c) or isdigit(c)


def isascii(c: CharLike) -> bool:
    """True for a code in the range 0..127."""
    return _code(c) in _ASCII


def isprint(c: CharLike) -> bool:
    """True for a printable ASCII character, space included."""
    return _code(c) in _PRINTABLE


def _convert(c: CharLike, source: range, shift: int) -> CharLike:
    code = _code(c)
    if code in source:
        code += shift
    return chr(code) if isinstance(c, str) else code


def toupper(c: CharLike) -> CharLike:
    """Upper-case an ASCII lower-case letter; return anything else unchanged."""
    return _convert(c, _LOWER, -_CASE_OFFSET)


def tolower(c: CharLike) -> CharLike:
    """Lower-case an ASCII upper-case letter; return anything else unchanged."""
    return _convert(c, _UPPER, _CASE_OFFSET)
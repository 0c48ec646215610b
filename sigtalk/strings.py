"""String helpers: integer parsing and formatting, splitting, trimming and searching."""

from __future__ import annotations

import operator
from itertools import zip_longest
from typing import Callable, Optional, Union

from sigtalk.printf import format_decimal

CharLike = Union[int, str]

_WHITESPACE = frozenset(" \t\n\v\f\r")
_DIGITS = frozenset("0123456789")
_INT_BITS = 32


def _wrap_int(value: int) -> int:
    mask = (1 << _INT_BITS) - 1
    value &= mask
    if value >= 1 << (_INT_BITS - 1):
        value -= 1 << _INT_BITS
    return value


def _char(ch: CharLike) -> str:
    if isinstance(ch, str):
        if len(ch) != 1:
            raise ValueError(f"expected a single character, got {ch!r}")
        return ch
    return chr(operator.index(ch) & 0xFF)


def _non_negative(value: int, name: str) -> int:
    value = operator.index(value)
    if value < 0:
        raise ValueError(f"{name} must not be negative, got {value}")
    return value


def atoi(text: str) -> int:
    """Parse a leading decimal integer, as a 32-bit signed value.

    Leading whitespace is skipped, one optional sign is accepted, and parsing
    stops at the first non-digit. Text without digits yields 0; values beyond
    the 32-bit range wrap around.
    """
    rest = text.lstrip("".join(_WHITESPACE))
    sign = 1
    if rest[:1] in ("-", "+"):
        if rest[0] == "-":
            sign = -1
        rest = rest[1:]
    digits = []
    for ch in rest:
        if ch not in _DIGITS:
            break
        digits.append(ch)
    value = int("".join(digits)) if digits else 0
    return _wrap_int(sign * value)


def itoa(n: int) -> str:
    """Render ``n`` as a 32-bit signed decimal string."""
    return format_decimal(n)


def split(text: str, sep: CharLike) -> list[str]:
    """Split ``text`` on the character ``sep``, dropping empty words."""
    return [word for word in text.split(_char(sep)) if word]


def strtrim(text: str, charset: str) -> str:
    """Remove every leading and trailing character that appears in ``charset``."""
    if not charset:
        return text
    return text.strip(charset)


def substr(text: str, start: int, length: int) -> str:
    """Return at most ``length`` characters of ``text`` starting at ``start``."""
    start = _non_negative(start, "start")
    length = _non_negative(length, "length")
    return text[start:start + length]


def strnstr(haystack: str, needle: str, length: int) -> Optional[int]:
    """Find ``needle`` wholly inside the first ``length`` characters of ``haystack``.

    Returns the index of the first match, 0 for an empty needle, or None.
    """
    length = _non_negative(length, "length")
    if not needle:
        return 0
    index = haystack.find(needle, 0, length)
    return None if index < 0 else index


def strncmp(s1: str, s2: str, n: int) -> int:
    """Compare at most ``n`` characters of two strings.

    Returns zero when they are equal, otherwise the difference of the codes
    of the first pair that differs; the end of a string counts as code 0.
    """
    n = _non_negative(n, "n")
    for a, b in zip_longest(s1[:n], s2[:n], fillvalue="\0"):
        if a != b:
            return ord(a) - ord(b)
    return 0


def strchr(text: str, ch: CharLike) -> Optional[int]:
    """Index of the first ``ch`` in ``text``, or None.

    Searching for the NUL character finds the end of the string.
    """
    target = _char(ch)
    if target == "\0":
        return len(text)
    index = text.find(target)
    return None if index < 0 else index


def strrchr(text: str, ch: CharLike) -> Optional[int]:
    """Index of the last ``ch`` in ``text``, or None.

    Searching for the NUL character finds the end of the string.
    """
    target = _char(ch)
    if target == "\0":
        return len(text)
    index = text.rfind(target)
    return None if index < 0 else index


def strmapi(text: str, func: Callable[[int, str], str]) -> str:
    """Build a string from ``func(index, char)`` applied to every character."""
    return "".join(func(index, ch) for index, ch in enumerate(text))
"""A small printf supporting the conversions %c %s %p %d %i %u %x %X and %%."""

from __future__ import annotations

import operator
import sys
from typing import Any, Callable, Iterator, Optional

_INT_BITS = 32
_LONG_BITS = 64
_NIL = "(nil)"
_NULL = "(null)"


def _to_signed(value: int, bits: int) -> int:
    value = operator.index(value) & ((1 << bits) - 1)
    if value >= 1 << (bits - 1):
        value -= 1 << bits
    return value


def _to_unsigned(value: int, bits: int) -> int:
    return operator.index(value) & ((1 << bits) - 1)


def format_decimal(n: int) -> str:
    """Render ``n`` as a signed 32-bit decimal integer."""
    return str(_to_signed(n, _INT_BITS))


def format_unsigned(n: int) -> str:
    """Render ``n`` as an unsigned 32-bit decimal integer."""
    return str(_to_unsigned(n, _INT_BITS))


def format_hex(n: int, upper: bool) -> str:
    """Render ``n`` as unsigned 32-bit hexadecimal without a prefix."""
    return format(_to_unsigned(n, _INT_BITS), "X" if upper else "x")


def format_pointer(address: Optional[int]) -> str:
    """Render an address as ``0x``-prefixed hex, or ``(nil)`` for zero."""
    if address is None:
        return _NIL
    value = _to_unsigned(address, _LONG_BITS)
    if not value:
        return _NIL
    return "0x" + format(value, "x")


def _format_char(value: Any) -> str:
    if isinstance(value, str):
        if len(value) != 1:
            raise ValueError(f"%c expects a single character, got {value!r}")
        return value
    return chr(_to_unsigned(value, 8))


def _format_string(value: Any) -> str:
    if value is None:
        return _NULL
    if not isinstance(value, str):
        raise TypeError(f"%s expects a string, got {type(value).__name__}")
    return value


_CONVERSIONS: dict[str, Callable[[Any], str]] = {
    "c": _format_char,
    "s": _format_string,
    "p": format_pointer,
    "d": format_decimal,
    "i": format_decimal,
    "u": format_unsigned,
    "x": lambda value: format_hex(value, False),
    "X": lambda value: format_hex(value, True),
}


def _take(values: Iterator[Any], spec: str) -> Any:
    try:
        return next(values)
    except StopIteration:
        raise TypeError(f"not enough arguments for %{spec}") from None


def render(fmt: str, *args: Any) -> str:
    """Return ``fmt`` with its conversions replaced by ``args``.

    An unknown conversion, or a lone ``%`` at the end, produces nothing and
    consumes no argument. Surplus arguments are ignored.
    """
    values = iter(args)
    chars = iter(fmt)
    parts: list[str] = []
    for ch in chars:
        if ch != "%":
            parts.append(ch)
            continue
        spec = next(chars, "")
        if spec == "%":
            parts.append("%")
        elif spec in _CONVERSIONS:
            parts.append(_CONVERSIONS[spec](_take(values, spec)))
    return "".join(parts)


def printf(fmt: str, *args: Any) -> int:
    """Write the rendered text to standard output and return its length."""
    text = render(fmt, *args)
    sys.stdout.write(text)
    sys.stdout.flush()
    return len(text)
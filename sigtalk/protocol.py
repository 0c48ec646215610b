"""Bit-level wire format for sending text over two user signals.

Each byte travels as eight signals, most significant bit first: the zero
signal carries a 0 bit and the one signal carries a 1 bit. A message ends
with a NUL byte. The receiver acknowledges every bit with the ack signal,
and in bonus mode confirms a whole message with the receipt signal.
"""

from __future__ import annotations

import operator
import signal
from typing import Optional, Union

BITS_PER_CHAR = 8
TERMINATOR = 0

ZERO_SIGNAL = signal.SIGUSR1
ONE_SIGNAL = signal.SIGUSR2
ACK_SIGNAL = signal.SIGUSR1
RECEIPT_SIGNAL = signal.SIGUSR2

RECEIPT_NOTICE = "server >> message received.\n"

Message = Union[str, bytes]


def encode_char(byte: int) -> list[int]:
    """Return the eight bits of ``byte``, most significant first."""
    value = operator.index(byte)
    if not 0 <= value <= 0xFF:
        raise ValueError(f"byte out of range: {value}")
    return [(value >> shift) & 1 for shift in reversed(range(BITS_PER_CHAR))]


def _message_bytes(message: Message) -> bytes:
    data = message.encode("utf-8") if isinstance(message, str) else bytes(message)
    if TERMINATOR in data:
        raise ValueError("message must not contain a NUL byte")
    return data


def encode_message(message: Message) -> list[int]:
    """Return the bits of ``message`` followed by those of the terminator."""
    data = _message_bytes(message)
    return [bit for byte in (*data, TERMINATOR) for bit in encode_char(byte)]


class BitDecoder:
    """Collects bits into bytes, most significant bit first."""

    def __init__(self) -> None:
        self._value = 0
        self._count = 0

    @property
    def pending(self) -> int:
        """Number of bits received towards the current byte."""
        return self._count

    def feed(self, bit: Union[int, bool]) -> Optional[int]:
        """Add one bit; return the byte once eight bits are in, else None."""
        if bit not in (0, 1):
            raise ValueError(f"a bit must be 0 or 1, got {bit!r}")
        self._value = (self._value << 1) | int(bit)
        self._count += 1
        if self._count < BITS_PER_CHAR:
            return None
        byte = self._value
        self.reset()
        return byte

    def reset(self) -> None:
        """Discard any partly received byte."""
        self._value = 0
        self._count = 0
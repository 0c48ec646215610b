"""Signal client: sends a message to a server one bit at a time."""

from __future__ import annotations

import contextlib
import os
import signal
import sys
import time
from typing import Callable, Iterator, Optional, Sequence, TextIO

from sigtalk.protocol import (
    ACK_SIGNAL,
    ONE_SIGNAL,
    RECEIPT_NOTICE,
    RECEIPT_SIGNAL,
    Message,
    encode_char,
    encode_message,
)
from sigtalk.strings import atoi

ACK_DELAY = 100e-6

_WATCHED = {ACK_SIGNAL, RECEIPT_SIGNAL}


@contextlib.contextmanager
def _signals_blocked() -> Iterator[None]:
    previous = signal.pthread_sigmask(signal.SIG_BLOCK, _WATCHED)
    try:
        yield
    finally:
        signal.pthread_sigmask(signal.SIG_SETMASK, previous)


class Client:
    """Sends bytes to the process ``pid``, waiting for an ack after each bit.

    ``wait`` returns the number of the next signal received; by default the
    client blocks on the real signals. In bonus mode a receipt signal from
    the server prints a notice.
    """

    def __init__(
        self,
        pid: int,
        *,
        bonus: bool = False,
        kill: Callable[[int, int], None] = os.kill,
        wait: Optional[Callable[[], int]] = None,
        output: Optional[TextIO] = None,
        delay: float = ACK_DELAY,
    ) -> None:
        self.pid = pid
        self.bonus = bonus
        self._kill = kill
        self._wait = wait
        self._output = output
        self._delay = delay
        self.confirmed = False

    def _blocking(self) -> contextlib.AbstractContextManager:
        return _signals_blocked() if self._wait is None else contextlib.nullcontext()

    def _next_signal(self) -> int:
        if self._wait is not None:
            return self._wait()
        return signal.sigwaitinfo(_WATCHED).si_signo

    def _on_signal(self, signum: int) -> None:
        if signum == RECEIPT_SIGNAL and self.bonus:
            stream = self._output if self._output is not None else sys.stdout
            stream.write(RECEIPT_NOTICE)
            stream.flush()
            self.confirmed = True

    def _await_ack(self) -> None:
        while True:
            signum = self._next_signal()
            if signum == ACK_SIGNAL:
                return
            self._on_signal(signum)

    def _send_bit(self, bit: int) -> None:
        self._kill(self.pid, ONE_SIGNAL if bit else signal.SIGUSR1)
        if self._delay:
            time.sleep(self._delay)
        self._await_ack()

    def send_char(self, byte: int) -> None:
        """Send one byte, waiting for an acknowledgement after every bit."""
        with self._blocking():
            for bit in encode_char(byte):
                self._send_bit(bit)

    def send(self, message: Message) -> None:
        """Send ``message`` and its terminator; in bonus mode await the receipt."""
        bits = encode_message(message)
        with self._blocking():
            self.confirmed = False
            for bit in bits:
                self._send_bit(bit)
            while self.bonus and not self.confirmed:
                self._on_signal(self._next_signal())


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Send a message: ``client [--bonus] PID MESSAGE``."""
    args = list(sys.argv[1:] if argv is None else argv)
    bonus = bool(args) and args[0] == "--bonus"
    if bonus:
        args = args[1:]
    if len(args) != 2 or not args[1]:
        return 1
    Client(atoi(args[0]), bonus=bonus).send(args[1])
    return 0


if __name__ == "__main__":
    sys.exit(main())
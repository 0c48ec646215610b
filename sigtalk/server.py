"""Signal server: rebuilds messages sent bit by bit and prints them."""

from __future__ import annotations

import os
import signal
import sys
from typing import BinaryIO, Callable, Optional, Sequence

from sigtalk.printf import printf
from sigtalk.protocol import (
    ACK_SIGNAL,
    ONE_SIGNAL,
    RECEIPT_SIGNAL,
    TERMINATOR,
    ZERO_SIGNAL,
    BitDecoder,
)

_WATCHED = {ZERO_SIGNAL, ONE_SIGNAL}


class Server:
    """Decodes incoming bits, writes each byte and acknowledges the sender.

    The first sender of a message owns it until its terminator arrives; every
    bit is acknowledged to that sender. In bonus mode the sender also gets a
    receipt signal once the whole message is in.
    """

    def __init__(
        self,
        *,
        bonus: bool = False,
        output: Optional[BinaryIO] = None,
        kill: Callable[[int, int], None] = os.kill,
    ) -> None:
        self.bonus = bonus
        self._output = output
        self._kill = kill
        self._decoder = BitDecoder()
        self.client_pid: Optional[int] = None

    def _write(self, data: bytes) -> None:
        stream = self._output if self._output is not None else sys.stdout.buffer
        stream.write(data)
        stream.flush()

    def handle(self, signum: int, sender_pid: int) -> None:
        """Process one bit signal received from ``sender_pid``."""
        if signum not in _WATCHED:
            raise ValueError(f"unexpected signal: {signum}")
        if self.client_pid is None:
            self.client_pid = sender_pid
        client = self.client_pid
        byte = self._decoder.feed(signum == ONE_SIGNAL)
        if byte == TERMINATOR:
            self._write(b"\n")
            self._kill(client, ACK_SIGNAL)
            if self.bonus:
                self._kill(client, RECEIPT_SIGNAL)
            self.client_pid = None
            return
        if byte is not None:
            self._write(bytes([byte]))
        self._kill(client, ACK_SIGNAL)

    def serve_forever(self) -> None:
        """Wait for bit signals and handle them until interrupted."""
        previous = signal.pthread_sigmask(signal.SIG_BLOCK, _WATCHED)
        try:
            while True:
                info = signal.sigwaitinfo(_WATCHED)
                self.handle(info.si_signo, info.si_pid)
        finally:
            signal.pthread_sigmask(signal.SIG_SETMASK, previous)


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Print this process's PID and serve messages; ``--bonus`` sends receipts."""
    args = list(sys.argv[1:] if argv is None else argv)
    bonus = bool(args) and args[0] == "--bonus"
    if bonus:
        args = args[1:]
    if args:
        sys.stderr.write("usage: server [--bonus]\n")
        return 1
    printf("Server PID: %d\n", os.getpid())
    try:
        Server(bonus=bonus).serve_forever()
    except KeyboardInterrupt:
        return 0
    return 0


if __name__ == "__main__":
    sys.exit(main())
# sigtalk

sigtalk is a small message channel between two processes on the same POSIX
machine. It uses only two signals:

- `SIGUSR1` carries a 0 bit.
- `SIGUSR2` carries a 1 bit.

The client sends each byte most significant bit first. After every bit it
waits for the server to acknowledge with `SIGUSR1`, then pauses briefly
(100 µs by default) before the next bit. A zero byte ends the message.

Both commands wait for signals with `signal.sigwaitinfo`, so they need a
platform where Python provides it, such as Linux.

## Installing

```
pip install .
```

## Running

### Start the server

Start the server in one terminal. It prints its process id and then waits
until it is interrupted:

```
$ sigtalk-server
Server PID: 4242
```

### Send a message

Send a message from another terminal:

```
$ sigtalk-client 4242 "hello there"
```

The server writes each byte as it arrives, and a newline when the zero byte
arrives.

The first process that sends a bit owns the message until its zero byte
arrives. The server acknowledges every bit to that process.

### Receipt mode

Both commands accept `--bonus` as their first argument:

```
$ sigtalk-server --bonus
$ sigtalk-client --bonus 4242 "hello there"
```

In this mode:

- After the zero byte, the server also sends `SIGUSR2` to the client.
- The client prints `server >> message received.` and waits for that receipt before it exits.

Use the flag on both sides or on neither. A `--bonus` client talking to a
plain server waits for ever.

### Exit status

`sigtalk-client` exits with status 1 in either of these cases:

- It is not given exactly two arguments after the optional flag: a process id and a message.
- The message is empty.

The process id is read by `sigtalk.strings.atoi`. It skips leading
whitespace, accepts an optional sign, reads digits and ignores anything
after them.

`sigtalk-server` exits with status 1 if it is given any argument other
than `--bonus`. It exits with status 0 on Ctrl-C.

## Library use

### Encoding and decoding

`sigtalk.protocol` does no I/O:

```python
from sigtalk.protocol import BitDecoder, encode_message

bits = encode_message(b"hi")   # 24 bits: 'h', 'i', then the zero byte
decoder = BitDecoder()
received = [byte for bit in bits if (byte := decoder.feed(bit)) is not None]
# received == [104, 105, 0]
```

- `encode_char(byte)` returns the eight bits of one byte.
- `encode_message(message)` takes `str`, which is encoded as UTF-8, or `bytes`. It rejects messages that contain a zero byte.
- `BitDecoder.feed(bit)` returns a byte once eight bits are in, and `None` before that.
- `BitDecoder.reset()` drops a partly received byte.

### Server and client

`sigtalk.server.Server(bonus=False, output=None, kill=os.kill)` decodes
bits:

- `handle(signum, sender_pid)` processes one bit signal.
- `serve_forever()` blocks on the real signals.
- `output` is a binary stream. It defaults to standard output.

`sigtalk.client.Client(pid, bonus=False, kill=os.kill, wait=None, output=None, delay=...)`
sends data:

- `send_char(byte)` sends a single byte.
- `send(message)` sends a whole message followed by its terminator.
- `wait` is a callable that returns the next received signal number.
- `kill` and `wait` can be replaced to drive either side without real signals.

### Helpers

- `sigtalk.printf` is a minimal formatter for `%c %s %p %d %i %u %x %X %%`.
  - `render` returns the text.
  - `printf` writes the text to standard output and returns its length.
  - `format_decimal`, `format_unsigned`, `format_hex` and `format_pointer` format single values with 32-bit (64-bit for pointers) wrap-around.
- `sigtalk.strings` has C-style string helpers: `atoi`, `itoa`, `split`, `strtrim`, `substr`, `strnstr`, `strncmp`, `strchr`, `strrchr` and `strmapi`. The search functions return an index or `None`.
- `sigtalk.ctype` has ASCII character tests and case mapping: `isalpha`, `isdigit`, `isalnum`, `isascii`, `isprint`, `toupper`, `tolower`.

## What it does not do

The channel has:

- no queueing of concurrent senders beyond the single owner of the message in progress
- no timeouts
- no retransmission

A lost signal leaves the client waiting for an acknowledgement that never comes.

## Tests

```
pip install ".[test]"
pytest
```
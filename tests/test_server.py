import io
import signal

import pytest

from sigtalk.protocol import (
    ACK_SIGNAL,
    ONE_SIGNAL,
    RECEIPT_SIGNAL,
    ZERO_SIGNAL,
    encode_char,
    encode_message,
)
from sigtalk.server import Server, main


def _make_server(bonus=False):
    calls = []
    out = io.BytesIO()
    server = Server(bonus=bonus, output=out, kill=lambda pid, sig: calls.append((pid, sig)))
    return server, out, calls


def _send(server, bits, pid):
    for bit in bits:
        server.handle(ONE_SIGNAL if bit else ZERO_SIGNAL, pid)


def test_message_is_printed_with_newline():
    server, out, _ = _make_server()
    _send(server, encode_message("hi"), 77)
    assert out.getvalue() == b"hi\n"


def test_every_bit_is_acknowledged_to_sender():
    server, _, calls = _make_server()
    bits = encode_message("abc")
    _send(server, bits, 77)
    assert len(calls) == len(bits)
    assert set(calls) == {(77, ACK_SIGNAL)}


def test_bonus_sends_receipt_after_terminator():
    server, _, calls = _make_server(bonus=True)
    bits = encode_message("ok")
    _send(server, bits, 55)
    assert len(calls) == len(bits) + 1
    assert calls[-2] == (55, ACK_SIGNAL)
    assert calls[-1] == (55, RECEIPT_SIGNAL)


def test_plain_server_sends_no_receipt():
    server, _, calls = _make_server()
    _send(server, encode_message("ok"), 55)
    assert (55, RECEIPT_SIGNAL) not in calls or RECEIPT_SIGNAL == ACK_SIGNAL
    assert len(calls) == len(encode_message("ok"))


def test_client_is_released_after_message():
    server, out, calls = _make_server()
    _send(server, encode_message("a"), 10)
    assert server.client_pid is None
    _send(server, encode_message("b"), 20)
    assert out.getvalue() == b"a\nb\n"
    assert calls[-1] == (20, ACK_SIGNAL)


def test_acks_go_to_first_sender_mid_message():
    server, _, calls = _make_server()
    bits = encode_char(ord("x"))
    _send(server, bits[:4], 10)
    _send(server, bits[4:], 99)
    assert server.client_pid == 10
    assert {pid for pid, _ in calls} == {10}


def test_partial_byte_writes_nothing():
    server, out, _ = _make_server()
    _send(server, encode_char(ord("x"))[:7], 10)
    assert out.getvalue() == b""


def test_unexpected_signal_rejected():
    server, _, _ = _make_server()
    with pytest.raises(ValueError):
        server.handle(signal.SIGTERM, 10)


def test_main_rejects_extra_arguments():
    assert main(["unexpected"]) == 1
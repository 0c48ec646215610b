import pytest

from sigtalk.printf import (
    format_decimal,
    format_hex,
    format_pointer,
    format_unsigned,
    printf,
    render,
)

INT_MIN = -2147483648
INT_MAX = 2147483647


@pytest.mark.parametrize("n", [0, 1, -1, 42, -42, 1000, INT_MAX, INT_MIN])
def test_format_decimal_round_trip(n):
    assert int(format_decimal(n)) == n


def test_format_decimal_fixed_values():
    assert format_decimal(0) == "0"
    assert format_decimal(INT_MIN) == "-2147483648"


def test_format_decimal_wraps_to_32_bits():
    assert int(format_decimal(INT_MAX + 1)) == INT_MIN


@pytest.mark.parametrize("n", [0, 7, 10, 4294967295, INT_MAX])
def test_format_unsigned_round_trip(n):
    assert int(format_unsigned(n)) == n


def test_format_unsigned_of_negative_wraps():
    assert int(format_unsigned(-1)) == 2**32 - 1
    assert format_unsigned(-1) == format_unsigned(2**32 - 1)


@pytest.mark.parametrize("n", [0, 9, 10, 15, 16, 255, 48879, 2**32 - 1])
def test_format_hex_round_trip(n):
    lower = format_hex(n, False)
    upper = format_hex(n, True)
    assert int(lower, 16) == n
    assert upper == lower.upper()
    assert lower == lower.lower()


def test_format_hex_has_no_leading_zeros():
    assert format_hex(0, False) == "0"
    for n in (1, 16, 4096):
        assert not format_hex(n, False).startswith("0")


def test_format_pointer_null():
    assert format_pointer(0) == "(nil)"
    assert format_pointer(None) == "(nil)"


@pytest.mark.parametrize("address", [1, 255, 0x7FFDEADBEEF, 2**64 - 1])
def test_format_pointer_round_trip(address):
    text = format_pointer(address)
    assert text.startswith("0x")
    assert int(text[2:], 16) == address
    assert text == text.lower()


def test_render_plain_text_passes_through():
    assert render("Server PID: ") == "Server PID: "


def test_render_conversions_match_formatters():
    assert render("%d", -17) == format_decimal(-17)
    assert render("%i", 99) == format_decimal(99)
    assert render("%u", -3) == format_unsigned(-3)
    assert render("%x", 3054) == format_hex(3054, False)
    assert render("%X", 3054) == format_hex(3054, True)
    assert render("%p", 4096) == format_pointer(4096)


def test_render_string_and_char():
    assert render("[%s|%c]", "abc", "z") == "[abc|z]"
    assert render("%c", ord("Q")) == "Q"
    assert render("%s", None) == "(null)"


def test_render_percent_literal():
    assert render("%%") == "%"


def test_render_unknown_conversion_consumes_nothing():
    assert render("%y%d", 5) == format_decimal(5)


def test_render_trailing_percent_is_dropped():
    assert render("abc%") == "abc"


def test_render_ignores_surplus_arguments():
    assert render("%d", 1, 2, 3) == format_decimal(1)


def test_render_missing_argument_raises():
    with pytest.raises(TypeError):
        render("%d %d", 1)


def test_render_wrong_argument_type_raises():
    with pytest.raises(TypeError):
        render("%s", 12)
    with pytest.raises(TypeError):
        render("%d", "12")


def test_printf_writes_and_returns_length(capsys):
    count = printf("Server PID: %d\n", 4242)
    out = capsys.readouterr().out
    assert out == "Server PID: " + format_decimal(4242) + "\n"
    assert count == len(out)


def test_printf_null_string_length(capsys):
    count = printf("%s", None)
    assert capsys.readouterr().out == "(null)"
    assert count == len("(null)")
import pytest
from hypothesis import given
from hypothesis import strategies as st

from numlit.digits import (
    NumKind,
    numkind,
    parse_bin,
    parse_dec,
    parse_hex,
    parse_integer,
    parse_oct,
    start_diagnostics,
    starts_with,
)

U64 = st.integers(min_value=0, max_value=(1 << 64) - 1)
I63 = st.integers(min_value=0, max_value=(1 << 63) - 1)


def test_starts_with():
    assert starts_with("0x10", "0x")
    assert not starts_with("0", "0x")


@pytest.mark.parametrize(
    "text, kind",
    [
        ("0x1", NumKind.HEX),
        ("0X1", NumKind.HEX),
        ("0o7", NumKind.OCTAL),
        ("0O7", NumKind.OCTAL),
        ("0b1", NumKind.BINARY),
        ("0B1", NumKind.BINARY),
        ("123", NumKind.DECIMAL),
        (".5", NumKind.DECIMAL),
        ("abc", NumKind.DECIMAL),
    ],
)
def test_numkind(text, kind):
    assert numkind(text) is kind


def test_numkind_base_is_radix():
    assert [numkind(text).base for text in ("0xff", "0o7", "0b1")] == [16, 8, 2]


def test_start_diagnostics_empty():
    assert start_diagnostics("") == ["Invalid argument: empty string"]


def test_start_diagnostics_bad_start():
    assert start_diagnostics("abc") == ["Invalid number start in: abc"]


@pytest.mark.parametrize("text", ["12", ".5", "0xff", "0b1"])
def test_start_diagnostics_clean(text):
    assert start_diagnostics(text) == []


@given(U64)
def test_hex_round_trip(n):
    assert parse_hex(format(n, "x")) == n
    assert parse_hex(format(n, "X")) == n


@given(U64)
def test_dec_round_trip(n):
    assert parse_dec(str(n)) == n


@given(U64)
def test_oct_round_trip(n):
    assert parse_oct(format(n, "o")) == n


@given(U64)
def test_bin_round_trip(n):
    assert parse_bin(format(n, "b")) == n


@given(U64)
def test_separators_are_ignored(n):
    digits = str(n)
    assert parse_dec("'".join(digits)) == parse_dec(digits)


def test_max_value_parses():
    assert parse_hex("f" * 16) == (1 << 64) - 1


@pytest.mark.parametrize(
    "func, text",
    [
        (parse_dec, str(1 << 64)),
        (parse_hex, "1" + "0" * 16),
        (parse_oct, format(1 << 64, "o")),
        (parse_bin, "1" + "0" * 64),
    ],
)
def test_overflow(func, text):
    with pytest.raises(OverflowError, match="literal overflow"):
        func(text)


@pytest.mark.parametrize(
    "func, text, message",
    [
        (parse_hex, "1g", "Invalid hex digit 'g'"),
        (parse_dec, "1a", "Invalid decimal digit 'a'"),
        (parse_oct, "18", "Invalid octal digit '8'"),
        (parse_bin, "12", "Invalid binary digit '2'"),
    ],
)
def test_invalid_digit(func, text, message):
    with pytest.raises(ValueError, match=message):
        func(text)


@pytest.mark.parametrize(
    "func, message",
    [
        (parse_hex, "Invalid hex literal"),
        (parse_dec, "Invalid decimal literal"),
        (parse_oct, "Invalid octal literal"),
        (parse_bin, "Invalid binary literal"),
    ],
)
def test_only_separators_is_invalid(func, message):
    with pytest.raises(ValueError, match=message):
        func("''")


def test_end_beyond_length():
    with pytest.raises(ValueError, match="end argument is bigger"):
        parse_dec("12", 0, 5)


def test_range_is_respected():
    assert parse_dec("12345", 1, 3) == parse_dec("23")
    assert parse_hex("0xff", 2, 4) == parse_hex("ff")


def test_parse_integer_prefixes():
    assert parse_integer("0x1F") == int("1F", 16)
    assert parse_integer("0o17") == int("17", 8)
    assert parse_integer("0b101") == int("101", 2)
    assert parse_integer("1'000") == parse_integer("1000")


@given(I63)
def test_parse_integer_round_trip(n):
    assert parse_integer(str(n)) == n
    assert parse_integer(hex(n)) == n
    assert parse_integer(bin(n)) == n


@given(st.integers(min_value=1 << 63, max_value=(1 << 64) - 1))
def test_parse_integer_wraps_to_signed(n):
    result = parse_integer(hex(n))
    assert result < 0
    assert result % (1 << 64) == n


def test_parse_integer_all_ones_is_minus_one():
    assert parse_integer("0xFFFFFFFFFFFFFFFF") == -1


def test_parse_integer_empty():
    with pytest.raises(ValueError, match="empty string"):
        parse_integer("")


@pytest.mark.parametrize("text", ["0x", "0o", "0b"])
def test_parse_integer_prefix_only(text):
    with pytest.raises(ValueError, match="invalid integer"):
        parse_integer(text)


def test_parse_integer_rejects_sign():
    with pytest.raises(ValueError, match="Invalid decimal digit '-'"):
        parse_integer("-5")
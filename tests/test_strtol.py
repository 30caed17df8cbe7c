import pytest

from strkit.strtol import (
    LLONG_MAX,
    LLONG_MIN,
    ULLONG_MAX,
    ConversionError,
    str_to_integer,
    str_to_unsigned,
    strtol,
    strtoll,
    strtoul,
    strtoull,
)


@pytest.mark.parametrize("n", [0, 1, -1, 42, -1983, 2**31 - 1, -(2**31), LLONG_MAX, LLONG_MIN])
def test_decimal_round_trip(n):
    text = str(n)
    result = strtoll(text, 10)
    assert result.value == n
    assert result.end == len(text)
    assert not result.out_of_range


@pytest.mark.parametrize("base", [2, 8, 10, 16, 36])
def test_round_trip_in_bases(base):
    text = "zz1"[: 0] + "101" if base == 2 else "7" * 5
    result = strtoll(text, base)
    assert result.value == int(text, base)


def test_whitespace_sign_and_trailing_text():
    text = "  \t-42abc"
    result = strtoll(text, 10)
    assert result.value == int("-42")
    assert result.end == text.index("a")


def test_base_zero_detects_hex_and_octal():
    assert strtoll("0x1f", 0).value == int("1f", 16)
    assert strtoll("0X1F", 0).value == int("1f", 16)
    assert strtoll("017", 0).value == int("17", 8)
    assert strtoll("17", 0).value == int("17")


def test_hex_prefix_without_digits_consumes_prefix():
    result = strtoll("0xg", 16)
    assert result.value == 0
    assert result.end == len("0x")


def test_no_digits_marks_invalid():
    result = strtoll("  abc", 10)
    assert result.value == 0
    assert result.invalid
    assert result.end == len("  ")


def test_positive_overflow_saturates():
    text = str(2**63) + "9"
    result = strtoll(text, 10)
    assert result.value == LLONG_MAX
    assert result.out_of_range
    assert result.end == len(text)


def test_negative_overflow_saturates():
    text = str(-(2**63) - 1)
    result = strtoll(text, 10)
    assert result.value == LLONG_MIN
    assert result.out_of_range


def test_strtol_matches_strtoll_on_64_bit_range():
    for text in ["123", "-99", str(LLONG_MAX), str(LLONG_MIN)]:
        assert strtol(text, 10) == strtoll(text, 10)


def test_width_limits_consumed_characters():
    result = str_to_integer("12345", 3, 10)
    assert result.value == int("123")
    assert result.end == len("123")


def test_width_prevents_overflow():
    result = str_to_integer("9" * 30, 5, 10)
    assert result.value == int("9" * 5)
    assert not result.out_of_range


@pytest.mark.parametrize("base", [-1, 1, 37])
@pytest.mark.parametrize("func", [strtoll, strtol, strtoull, strtoul])
def test_invalid_base_raises(func, base):
    with pytest.raises(ConversionError):
        func("10", base)


def test_unsigned_negative_wraps():
    assert strtoull("-1", 10).value == ULLONG_MAX
    assert strtoull("-5", 10).value == 2**64 - 5


def test_unsigned_overflow_drops_sign():
    result = strtoull("-" + str(2**64), 10)
    assert result.value == ULLONG_MAX
    assert result.out_of_range


def test_unsigned_max_round_trip():
    result = strtoull(str(ULLONG_MAX), 10)
    assert result.value == ULLONG_MAX
    assert not result.out_of_range


def test_unsigned_width_and_hex():
    assert str_to_unsigned("ffffff", 4, 16).value == int("ffff", 16)
    assert strtoul("0xff", 0) == strtoull("0xff", 0)
import pytest

from strkit.digits import ullitoa_base


@pytest.mark.parametrize("base", [2, 3, 8, 10, 16, 36])
@pytest.mark.parametrize("n", [1, 7, 255, 65535, 123456789, 2**64 - 1])
def test_round_trip(base, n):
    assert int(ullitoa_base(n, base), base) == n


def test_zero_is_first_digit():
    assert ullitoa_base(0, 10) == "0"
    assert ullitoa_base(0, 16, "ABCDEF") == "A"


def test_base_zero_is_empty():
    assert ullitoa_base(12345, 0) == ""


def test_custom_digits():
    assert ullitoa_base(255, 16, "0123456789ABCDEF") == format(255, "X")


def test_max_value_hex():
    assert ullitoa_base(2**64 - 1, 16) == format(2**64 - 1, "x")


def test_base_one_repeats_first_digit():
    assert ullitoa_base(3, 1, "a") == "a" * 3


@pytest.mark.parametrize("n", [-1, 2**64])
def test_out_of_range_raises(n):
    with pytest.raises(ValueError):
        ullitoa_base(n, 10)
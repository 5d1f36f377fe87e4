import pytest

from libft.numbers import atoi, itoa


@pytest.mark.parametrize(
    "text, expected",
    [
        ("42", 42),
        ("  -123abc", -123),
        ("\t\n\v\f\r +7", 7),
        ("0042", 42),
    ],
)
def test_atoi_basic(text, expected):
    assert atoi(text) == expected


@pytest.mark.parametrize("text", ["", "abc", "+", "-", "--5", "+-5", " x12"])
def test_atoi_without_digits_is_zero(text):
    assert atoi(text) == 0


def test_atoi_stops_at_first_non_digit():
    assert atoi("12 34") == atoi("12")
    assert atoi("99z99") == atoi("99")


def test_atoi_int32_limits():
    assert atoi("2147483647") == 2147483647
    assert atoi("-2147483648") == -2147483648


def test_atoi_wraps_to_32_bits():
    assert atoi("2147483648") == -2147483648
    for x in (0, 1, 12345, 2147483647):
        assert atoi(str(x + (1 << 32))) == x


def test_atoi_long_overflow():
    assert atoi("9223372036854775808") == -1
    assert atoi("99999999999999999999") == -1
    assert atoi("-9223372036854775808") == 0
    assert atoi("-99999999999999999999") == 0


@pytest.mark.parametrize("n", [0, 1, -1, 9, 10, -10, 12345, 2147483647, -2147483648])
def test_itoa_atoi_round_trip(n):
    assert atoi(itoa(n)) == n


def test_itoa_values():
    assert itoa(-2147483648) == "-2147483648"
    assert itoa(0) == "0"


def test_itoa_rejects_non_integers():
    with pytest.raises(TypeError):
        itoa(1.5)
    with pytest.raises(TypeError):
        itoa("12")
import pytest

from algobox.conversions import (
    add_binary,
    decimal_to_binary,
    octal_to_binary,
    roman_to_int,
    to_base,
    to_lower_ascii,
)


def _to_roman(number):
    table = [
        (1000, "M"), (900, "CM"), (500, "D"), (400, "CD"), (100, "C"), (90, "XC"),
        (50, "L"), (40, "XL"), (10, "X"), (9, "IX"), (5, "V"), (4, "IV"), (1, "I"),
    ]
    parts = []
    for value, symbol in table:
        count, number = divmod(number, value)
        parts.append(symbol * count)
    return "".join(parts)


def _bits_to_int(bits):
    return int("".join(map(str, bits)), 2)


def test_decimal_to_binary_example():
    assert decimal_to_binary(9) == "1001"


def test_decimal_to_binary_zero():
    assert decimal_to_binary(0) == "0"


@pytest.mark.parametrize("n", [1, 2, 7, 64, 1023, 123456])
def test_decimal_to_binary_round_trip(n):
    assert int(decimal_to_binary(n), 2) == n


def test_decimal_to_binary_negative():
    with pytest.raises(ValueError):
        decimal_to_binary(-1)


@pytest.mark.parametrize("base", [2, 8, 16])
@pytest.mark.parametrize("n", [0, 1, 15, 255, 4096, 65535])
def test_to_base_round_trip(n, base):
    assert int(to_base(n, base), base) == n


def test_to_base_hex_uppercase():
    assert to_base(255, 16) == "FF"


def test_to_base_invalid_base():
    with pytest.raises(ValueError):
        to_base(10, 1)


@pytest.mark.parametrize("octal", [0, 1, 7, 17, 377, 1234])
def test_octal_to_binary_round_trip(octal):
    assert int(str(octal_to_binary(octal)), 2) == int(str(octal), 8)


def test_octal_to_binary_rejects_invalid_digit():
    with pytest.raises(ValueError):
        octal_to_binary(18)


@pytest.mark.parametrize("n", range(1, 4000))
def test_roman_round_trip(n):
    assert roman_to_int(_to_roman(n)) == n


def test_roman_empty_is_zero():
    assert roman_to_int("") == 0


def test_roman_invalid_character():
    with pytest.raises(ValueError):
        roman_to_int("XIZ")


@pytest.mark.parametrize(
    "first,second",
    [([0, 0, 0], [0, 0, 0]), ([1, 0, 1], [0, 1, 1]), ([1, 1, 1, 1], [1, 1, 1, 1]), ([1], [0])],
)
def test_add_binary_matches_integer_sum(first, second):
    result = add_binary(first, second)
    assert len(result) == len(first) + 1
    assert _bits_to_int(result) == _bits_to_int(first) + _bits_to_int(second)


def test_add_binary_length_mismatch():
    with pytest.raises(ValueError):
        add_binary([1, 0], [1])


def test_add_binary_non_bit():
    with pytest.raises(ValueError):
        add_binary([2], [1])


def test_to_lower_ascii_matches_lower_for_ascii():
    text = "Hello WORLD 123 ABCxyz"
    assert to_lower_ascii(text) == text.lower()


def test_to_lower_ascii_leaves_non_ascii():
    assert to_lower_ascii("ÄB") == "Äb"
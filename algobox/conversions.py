"""Conversions between number bases, Roman numerals and letter case."""

from __future__ import annotations

from typing import Sequence

_DIGITS = "0123456789ABCDEFGHIJKLMNOPQRSTUVWXYZ"

_ROMAN_PAIRS = {"IV": 4, "IX": 9, "XL": 40, "XC": 90, "CD": 400, "CM": 900}
_ROMAN_SINGLES = {"I": 1, "V": 5, "X": 10, "L": 50, "C": 100, "D": 500, "M": 1000}

_UPPER_TO_LOWER = str.maketrans(
    "ABCDEFGHIJKLMNOPQRSTUVWXYZ", "abcdefghijklmnopqrstuvwxyz"
)


def to_base(number: int, base: int) -> str:
    """Write a non-negative integer in ``base`` (2 to 36), upper-case letters above 9."""
    if not 2 <= base <= len(_DIGITS):
        raise ValueError(f"unsupported base: {base}")
    if number < 0:
        raise ValueError("number must not be negative")
    digits = []
    while True:
        number, digit = divmod(number, base)
        digits.append(_DIGITS[digit])
        if number == 0:
            break
    return "".join(reversed(digits))


def decimal_to_binary(number: int) -> str:
    """Return the binary digits of a non-negative integer."""
    return to_base(number, 2)


def octal_to_binary(octal: int) -> int:
    """Read the decimal digits of ``octal`` as octal and return the binary digits as an int."""
    if octal < 0:
        raise ValueError("octal must not be negative")
    try:
        value = int(str(octal), 8)
    except ValueError as exc:
        raise ValueError(f"not an octal number: {octal}") from exc
    return int(to_base(value, 2))


def roman_to_int(text: str) -> int:
    """Convert a Roman numeral to an integer, reading subtractive pairs left to right."""
    total = 0
    position = 0
    while position < len(text):
        pair = text[position : position + 2]
        if pair in _ROMAN_PAIRS:
            total += _ROMAN_PAIRS[pair]
            position += 2
            continue
        letter = text[position]
        if letter not in _ROMAN_SINGLES:
            raise ValueError(f"invalid Roman numeral character: {letter!r}")
        total += _ROMAN_SINGLES[letter]
        position += 1
    return total


def add_binary(first: Sequence[int], second: Sequence[int]) -> list[int]:
    """Add two equal-length bit sequences, most significant bit first.

    The result is one bit longer than the inputs.
    """
    if len(first) != len(second):
        raise ValueError("bit sequences must have the same length")
    if any(bit not in (0, 1) for bit in (*first, *second)):
        raise ValueError("bits must be 0 or 1")
    result = []
    carry = 0
    for x, y in zip(reversed(first), reversed(second)):
        carry, bit = divmod(x + y + carry, 2)
        result.append(bit)
    result.append(carry)
    return result[::-1]


def to_lower_ascii(text: str) -> str:
    """Lower-case the ASCII letters A-Z and leave everything else untouched."""
    return text.translate(_UPPER_TO_LOWER)
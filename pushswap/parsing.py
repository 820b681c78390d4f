"""Reading the numbers to sort from command-line arguments."""

from __future__ import annotations

from collections.abc import Iterable

INT_MIN = -(2**31)
INT_MAX = 2**31 - 1

_WHITESPACE = frozenset(" \t\n\v\f\r")
_STRING_CHARS = frozenset("0123456789+- ")


class InputError(ValueError):
    """Raised for any malformed, out-of-range or duplicated input."""

    def __init__(self, message: str = "Error") -> None:
        super().__init__(message)


def parse_long(text: str) -> int:
    """Parse a leading decimal integer: whitespace, one optional sign, digits.

    Parsing stops at the first non-digit; text with no digits gives 0.
    """
    position = 0
    length = len(text)
    while position < length and text[position] in _WHITESPACE:
        position += 1
    sign = 1
    if position < length and text[position] in "+-":
        if text[position] == "-":
            sign = -1
        position += 1
    start = position
    while position < length and "0" <= text[position] <= "9":
        position += 1
    digits = text[start:position]
    return sign * int(digits) if digits else 0


def split_numbers(text: str) -> list[str]:
    """Split a space-separated string of numbers into its words.

    Only digits, signs and spaces are allowed.
    """
    if any(char not in _STRING_CHARS for char in text):
        raise InputError()
    return [word for word in text.split(" ") if word]


def _validate(word: str) -> None:
    if not word or not (word[0].isdigit() and word[0].isascii() or word[0] in "+-"):
        raise InputError()
    if any(not ("0" <= char <= "9") for char in word[1:]):
        raise InputError()


def parse_arguments(args: Iterable[str]) -> list[int]:
    """Turn words into distinct 32-bit integers, in order.

    Each word is an optional sign followed by digits; anything else,
    a value outside the 32-bit range or a repeated value raises InputError.
    """
    words = list(args)
    for word in words:
        _validate(word)
    values: list[int] = []
    seen: set[int] = set()
    for word in words:
        value = parse_long(word)
        if not INT_MIN <= value <= INT_MAX:
            raise InputError()
        if value in seen:
            raise InputError()
        seen.add(value)
        values.append(value)
    return values


def parse_string(text: str) -> list[int]:
    """Parse a single space-separated argument holding all the numbers."""
    return parse_arguments(word for word in text.split(" ") if word)
"""Reading the puzzle's numbers from command-line arguments."""

from __future__ import annotations

from collections.abc import Iterable

from pushswap.textutils import split

INT_MIN = -(2**31)
INT_MAX = 2**31 - 1

_ATOL_WHITESPACE = " \t\n\v\f\r"


class ParseError(ValueError):
    """Raised when an argument is not an acceptable list of numbers."""


def _is_digit(char: str) -> bool:
    return "0" <= char <= "9"


def is_number(text: str) -> bool:
    """Tell whether ``text`` is accepted as a number.

    Every character must be a decimal digit. A leading sign must be
    followed by a digit, and the sign itself is still checked as a digit,
    so signed numbers are not accepted.
    """
    if not text:
        return False
    if text[0] in "+-" and not (len(text) > 1 and _is_digit(text[1])):
        return False
    return all(_is_digit(char) for char in text)


def parse_long(text: str) -> int:
    """Read a leading integer after whitespace and one optional sign."""
    rest = text.lstrip(_ATOL_WHITESPACE)
    sign = 1
    if rest[:1] in ("-", "+"):
        if rest[0] == "-":
            sign = -1
        rest = rest[1:]
    result = 0
    for char in rest:
        if not _is_digit(char):
            break
        result = result * 10 + (ord(char) - ord("0"))
    return result * sign


def parse_arguments(args: Iterable[str]) -> list[int]:
    """Turn arguments into the values of stack ``a``, top first.

    Each argument may hold several numbers separated by spaces. Raises
    ParseError for an empty argument, an argument without numbers, a word
    that is not a number, a value outside the 32-bit signed range, or a
    value given twice.
    """
    values: list[int] = []
    seen: set[int] = set()
    for arg in args:
        if not arg:
            raise ParseError("empty argument")
        words = split(arg, " ")
        if not words:
            raise ParseError("argument holds no numbers")
        for word in words:
            if not is_number(word):
                raise ParseError(f"not a number: {word!r}")
            value = parse_long(word)
            if value < INT_MIN or value > INT_MAX:
                raise ParseError(f"out of range: {word!r}")
            if value in seen:
                raise ParseError(f"duplicate value: {value}")
            seen.add(value)
            values.append(value)
    return values
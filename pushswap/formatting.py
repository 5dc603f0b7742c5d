"""A small printf: %c %s %d %i %u %x %X %p and %%.

Numbers are treated as C would see them: ``%d`` and ``%i`` as 32-bit signed
integers, ``%u``, ``%x`` and ``%X`` as 32-bit unsigned ones, and ``%p`` as a
64-bit address. A conversion character that is not recognised consumes
itself and prints nothing. A lone ``%`` at the very end is printed as is.
"""

from __future__ import annotations

import sys
from collections.abc import Iterator
from typing import Any, TextIO

_DIGITS_LOWER = "0123456789abcdef"
_DIGITS_UPPER = "0123456789ABCDEF"
_UINT32 = 0xFFFFFFFF
_ULONG = 0xFFFFFFFFFFFFFFFF


def _to_int32(value: int) -> int:
    value &= _UINT32
    return value - (1 << 32) if value & 0x80000000 else value


def _hex(value: int, digits: str) -> str:
    if value == 0:
        return "0"
    out = []
    while value:
        value, rem = divmod(value, 16)
        out.append(digits[rem])
    return "".join(reversed(out))


def _char(value: Any) -> str:
    if isinstance(value, str):
        if len(value) != 1:
            raise ValueError("%c needs a single character")
        return value
    if isinstance(value, int):
        return chr(value & 0xFF)
    raise TypeError(f"%c needs a character or an int, not {type(value).__name__}")


def _integer(value: Any, spec: str) -> int:
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(f"%{spec} needs an int, not {type(value).__name__}")
    return value


def _pointer(value: Any) -> str:
    if value is None:
        address = 0
    elif isinstance(value, int) and not isinstance(value, bool):
        address = value & _ULONG
    else:
        address = id(value) & _ULONG
    return "0x" + _hex(address, _DIGITS_LOWER)


def _convert(spec: str, args: Iterator[Any]) -> str:
    if spec == "%":
        return "%"
    if spec not in "csdiuxXp":
        return ""
    try:
        value = next(args)
    except StopIteration:
        raise TypeError(f"not enough arguments for %{spec}") from None
    if spec == "c":
        return _char(value)
    if spec == "s":
        return "(null)" if value is None else str(value)
    if spec in "di":
        return str(_to_int32(_integer(value, spec)))
    if spec == "u":
        return str(_integer(value, spec) & _UINT32)
    if spec == "x":
        return _hex(_integer(value, spec) & _UINT32, _DIGITS_LOWER)
    if spec == "X":
        return _hex(_integer(value, spec) & _UINT32, _DIGITS_UPPER)
    return _pointer(value)


def _pieces(fmt: str, args: tuple[Any, ...]) -> Iterator[str]:
    remaining = iter(args)
    position = 0
    length = len(fmt)
    while position < length:
        char = fmt[position]
        if char == "%" and position + 1 < length:
            yield _convert(fmt[position + 1], remaining)
            position += 2
        else:
            yield char
            position += 1


def sprintf(fmt: str, *args: Any) -> str:
    """Format ``args`` according to ``fmt`` and return the text."""
    return "".join(_pieces(fmt, args))


def printf(fmt: str, *args: Any, file: TextIO | None = None) -> int:
    """Write the formatted text to ``file`` (standard output by default).

    Returns the number of characters written.
    """
    text = sprintf(fmt, *args)
    stream = sys.stdout if file is None else file
    stream.write(text)
    return len(text)
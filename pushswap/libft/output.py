"""Formatted output and simple writers for characters, strings and numbers.

``format_printf`` understands the conversions ``%c``, ``%s``, ``%p``,
``%d``, ``%i``, ``%u``, ``%x``, ``%X`` and ``%%``.  An unknown conversion
produces no output and consumes no argument.
"""

from __future__ import annotations

import sys
from collections.abc import Iterator
from typing import Any, TextIO

from .chars import INT_MIN, itoa

_UINT32 = 2**32
_UINTPTR = 2**64


def _as_int32(value: Any) -> int:
    return (int(value) - INT_MIN) % _UINT32 + INT_MIN


def _as_uint32(value: Any) -> int:
    return int(value) % _UINT32


def _as_char(value: Any) -> str:
    if isinstance(value, str):
        if len(value) != 1:
            raise ValueError(f"expected a single character, got {value!r}")
        return value
    return chr(int(value) % 256)


def _as_pointer(value: Any) -> str:
    if value is None:
        return "(nil)"
    address = value if isinstance(value, int) else id(value)
    address %= _UINTPTR
    if address == 0:
        return "(nil)"
    return f"0x{address:x}"


def _next_arg(args: Iterator[Any], spec: str) -> Any:
    try:
        return next(args)
    except StopIteration:
        raise TypeError(f"not enough arguments for conversion %{spec}") from None


def _convert(spec: str, args: Iterator[Any]) -> str:
    if spec == "%":
        return "%"
    if spec == "c":
        return _as_char(_next_arg(args, spec))
    if spec == "s":
        value = _next_arg(args, spec)
        return "(null)" if value is None else str(value)
    if spec == "p":
        return _as_pointer(_next_arg(args, spec))
    if spec in ("d", "i"):
        return str(_as_int32(_next_arg(args, spec)))
    if spec == "u":
        return str(_as_uint32(_next_arg(args, spec)))
    if spec in ("x", "X"):
        return format(_as_uint32(_next_arg(args, spec)), spec)
    return ""


def format_printf(template: str, *args: Any) -> str:
    """Return the text ``printf`` would write for ``template`` and ``args``."""
    pieces: list[str] = []
    arguments = iter(args)
    characters = iter(template)
    for char in characters:
        if char != "%":
            pieces.append(char)
            continue
        spec = next(characters, "")
        pieces.append(_convert(spec, arguments))
    return "".join(pieces)


def printf(template: str, *args: Any) -> int:
    """Write the formatted text to standard output and return its length."""
    text = format_printf(template, *args)
    sys.stdout.write(text)
    return len(text)


def _target(stream: TextIO | None) -> TextIO:
    return sys.stdout if stream is None else stream


def put_char(c: str | int, stream: TextIO | None = None) -> None:
    """Write one character to ``stream`` (standard output by default)."""
    _target(stream).write(_as_char(c))


def put_str(s: str, stream: TextIO | None = None) -> None:
    """Write ``s`` to ``stream`` (standard output by default)."""
    _target(stream).write(s)


def put_endl(s: str, stream: TextIO | None = None) -> None:
    """Write ``s`` followed by a newline to ``stream``."""
    _target(stream).write(s + "\n")


def put_nbr(n: int, stream: TextIO | None = None) -> None:
    """Write the decimal text of a 32-bit signed integer to ``stream``."""
    _target(stream).write(itoa(n))
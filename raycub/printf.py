"""Small printf-style formatting for game messages.

Only the conversions ``%c %s %p %d %i %u %x %X`` and the ``%%`` escape
are understood. Integers follow C's 32-bit ``int`` and ``unsigned int``
rules, and pointers are 64-bit addresses.
"""

from __future__ import annotations

import operator
import sys
from collections.abc import Iterator
from typing import Any, TextIO

_CONVERSIONS = frozenset("cspdiuxX")
_UINT32_MASK = 0xFFFF_FFFF
_UINT64_MASK = 0xFFFF_FFFF_FFFF_FFFF


def _to_int(value: Any) -> int:
    try:
        return operator.index(value)
    except TypeError:
        raise TypeError(f"expected an integer, got {type(value).__name__}") from None


def _to_int32(value: Any) -> int:
    number = _to_int(value) & _UINT32_MASK
    return number - (1 << 32) if number >= 1 << 31 else number


def _convert(conversion: str, value: Any) -> str:
    if conversion == "c":
        if isinstance(value, str):
            if len(value) != 1:
                raise TypeError("%c needs a single character")
            return value
        return chr(_to_int(value) & 0xFF)
    if conversion == "s":
        return "(null)" if value is None else str(value)
    if conversion == "p":
        address = 0 if value is None else _to_int(value) & _UINT64_MASK
        return "(nil)" if address == 0 else f"0x{address:x}"
    if conversion in ("d", "i"):
        return str(_to_int32(value))
    if conversion == "u":
        return str(_to_int(value) & _UINT32_MASK)
    if conversion == "x":
        return f"{_to_int(value) & _UINT32_MASK:x}"
    return f"{_to_int(value) & _UINT32_MASK:X}"


def _next_argument(arguments: Iterator[Any]) -> Any:
    try:
        return next(arguments)
    except StopIteration:
        raise ValueError("not enough arguments for format string") from None


def _render(fmt: str, args: tuple[Any, ...], *, strict: bool) -> str:
    if fmt is None:
        raise ValueError("format string is missing")
    pieces: list[str] = []
    arguments = iter(args)
    index = 0
    while index < len(fmt):
        char = fmt[index]
        if char != "%":
            pieces.append(char)
            index += 1
            continue
        following = fmt[index + 1] if index + 1 < len(fmt) else ""
        if following and following in _CONVERSIONS:
            pieces.append(_convert(following, _next_argument(arguments)))
            index += 2
        elif following == "%":
            pieces.append("%")
            index += 2
        elif not following:
            if strict:
                raise ValueError("format string ends with a lone '%'")
            pieces.append("%")
            index += 1
        else:
            # The strict formatter echoes a newline that follows a stray '%'
            # before the '%' itself; the newline is then written again.
            if strict and following == "\n":
                pieces.append("\n")
            pieces.append("%")
            index += 1
    return "".join(pieces)


def format_message(fmt: str, *args: Any) -> str:
    """Format ``args`` into ``fmt``.

    An unknown conversion leaves the ``%`` in the output. A format ending
    in a lone ``%`` raises ValueError, as does running out of arguments.
    """
    return _render(fmt, args, strict=True)


def print_message(fmt: str, *args: Any, stream: TextIO | None = None) -> int:
    """Write the formatted message to ``stream`` (stdout by default).

    Returns the number of characters written.
    """
    text = format_message(fmt, *args)
    (sys.stdout if stream is None else stream).write(text)
    return len(text)


def print_error(fmt: str, *args: Any, stream: TextIO | None = None) -> int:
    """Write the formatted message to ``stream`` (stderr by default).

    Unlike :func:`format_message`, a trailing lone ``%`` is written as is.
    Returns the number of characters written.
    """
    text = _render(fmt, args, strict=False)
    (sys.stderr if stream is None else stream).write(text)
    return len(text)
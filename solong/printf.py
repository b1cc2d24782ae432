"""A small printf with the conversions c, s, p, d, i, u, x, X and %."""

from __future__ import annotations

import sys
from typing import Any

_LOWER_DIGITS = "0123456789abcdef"
_UPPER_DIGITS = "0123456789ABCDEF"


def _to_int32(number: int) -> int:
    number &= 0xFFFFFFFF
    return number - 0x100000000 if number >= 0x80000000 else number


def _to_base(number: int, digits: str) -> str:
    if number == 0:
        return digits[0]
    out = []
    while number:
        number, rest = divmod(number, 16)
        out.append(digits[rest])
    return "".join(reversed(out))


def format_signed(number: int) -> str:
    """Render a signed 32-bit integer in decimal."""
    return str(_to_int32(number))


def format_unsigned(number: int) -> str:
    """Render an unsigned 32-bit integer in decimal."""
    return str(number & 0xFFFFFFFF)


def format_hex(number: int, upper: bool = False) -> str:
    """Render an unsigned 32-bit integer in hexadecimal, without prefix."""
    return _to_base(number & 0xFFFFFFFF, _UPPER_DIGITS if upper else _LOWER_DIGITS)


def format_pointer(address: int) -> str:
    """Render an address as ``0x`` and lower-case hex, or ``(nil)`` for zero."""
    address &= 0xFFFFFFFFFFFFFFFF
    if address == 0:
        return "(nil)"
    return "0x" + _to_base(address, _LOWER_DIGITS)


def _format_char(value: Any) -> str:
    if isinstance(value, int):
        return chr(value & 0xFF)
    if isinstance(value, str) and len(value) == 1:
        return value
    raise TypeError(f"%c needs an int or a single character, got {value!r}")


def _format_string(value: Any) -> str:
    return "(null)" if value is None else str(value)


_CONVERSIONS = {
    "c": _format_char,
    "s": _format_string,
    "p": format_pointer,
    "d": format_signed,
    "i": format_signed,
    "u": format_unsigned,
    "x": lambda value: format_hex(value, False),
    "X": lambda value: format_hex(value, True),
}


def format_printf(fmt: str, *args: Any) -> str:
    """Expand ``fmt`` with ``args`` and return the text.

    Spaces between ``%`` and the conversion letter are skipped. An unknown
    conversion letter produces no output and takes no argument.
    """
    arguments = iter(args)
    out = []
    chars = iter(fmt)
    for char in chars:
        if char != "%":
            out.append(char)
            continue
        conversion = next(chars, None)
        while conversion == " ":
            conversion = next(chars, None)
        if conversion is None:
            break
        if conversion == "%":
            out.append("%")
            continue
        handler = _CONVERSIONS.get(conversion)
        if handler is None:
            continue
        try:
            value = next(arguments)
        except StopIteration:
            raise TypeError(f"not enough arguments for %{conversion}") from None
        out.append(handler(value))
    return "".join(out)


def ft_printf(fmt: str, *args: Any) -> int:
    """Write the expanded ``fmt`` to standard output; return its length."""
    text = format_printf(fmt, *args)
    sys.stdout.write(text)
    sys.stdout.flush()
    return len(text)
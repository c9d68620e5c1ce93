"""A small ``printf`` with the conversions ``c s p d i u x X`` and ``%%``.

Integers are treated as 32-bit C ``int`` values: ``%d`` and ``%i`` wrap to
signed, ``%u``, ``%x`` and ``%X`` wrap to unsigned. A ``%`` followed by
anything else is written as it stands.
"""

from __future__ import annotations

import sys
from typing import Any

_CONVERSIONS = "cspdiuxX"
_INT_MASK = 0xFFFFFFFF
_POINTER_MASK = 0xFFFFFFFFFFFFFFFF


def _signed32(value: int) -> int:
    value &= _INT_MASK
    return value - (1 << 32) if value & 0x80000000 else value


def hex_digits(n: int, upper: bool = False) -> str:
    """Write *n* as an unsigned 32-bit hexadecimal number."""
    return format(int(n) & _INT_MASK, "X" if upper else "x")


def pointer_text(address: int | None) -> str:
    """Write an address as ``0x`` and lower-case hex, or ``(nil)`` for none."""
    if not address:
        return "(nil)"
    return "0x" + format(int(address) & _POINTER_MASK, "x")


def _char(arg: Any) -> str:
    if isinstance(arg, str):
        if len(arg) != 1:
            raise ValueError(f"%c needs a single character, got {arg!r}")
        return arg
    return chr(int(arg) & 0xFF)


def _convert(spec: str, arg: Any) -> str:
    if spec == "s":
        return "(null)" if arg is None else str(arg)
    if spec == "c":
        return _char(arg)
    if spec in "di":
        return str(_signed32(int(arg)))
    if spec == "u":
        return str(int(arg) & _INT_MASK)
    if spec == "x":
        return hex_digits(arg)
    if spec == "X":
        return hex_digits(arg, upper=True)
    return pointer_text(arg)


def format_printf(fmt: str, *args: Any) -> str:
    """Return *fmt* with its conversions replaced by *args* in order.

    Extra arguments are ignored; too few raise :class:`TypeError`.
    """
    if fmt is None:
        raise TypeError("format string must not be None")
    values = iter(args)
    out: list[str] = []
    i = 0
    while i < len(fmt):
        char = fmt[i]
        following = fmt[i + 1] if i + 1 < len(fmt) else ""
        if char == "%" and following and following in _CONVERSIONS:
            try:
                arg = next(values)
            except StopIteration:
                raise TypeError(f"not enough arguments for format {fmt!r}") from None
            out.append(_convert(following, arg))
            i += 2
        elif char == "%" and following == "%":
            out.append("%")
            i += 2
        else:
            out.append(char)
            i += 1
    return "".join(out)


def print_formatted(fmt: str, *args: Any) -> int:
    """Write the formatted text to standard output; return its length."""
    text = format_printf(fmt, *args)
    sys.stdout.write(text)
    sys.stdout.flush()
    return len(text)
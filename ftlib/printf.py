"""A small printf supporting %c %s %p %d %i %u %x %X and %%."""

from __future__ import annotations

import sys
from collections.abc import Callable
from typing import Any

from .chars import itoa

_UINT_MASK = 0xFFFFFFFF
_PTR_MASK = 0xFFFFFFFFFFFFFFFF
_HEX_LOWER = "0123456789abcdef"
_HEX_UPPER = "0123456789ABCDEF"


def numlen_base(n: int, base: int) -> int:
    """Number of digits of the non-negative ``n`` written in ``base``."""
    if n < 0:
        raise ValueError(f"n must not be negative, got {n}")
    if base < 2:
        raise ValueError(f"base must be at least 2, got {base}")
    length = 1
    while n >= base:
        n //= base
        length += 1
    return length


def itoa_base(n: int, digits: str) -> str:
    """Render the non-negative ``n`` using ``digits`` as the digit alphabet."""
    base = len(digits)
    if base < 2:
        raise ValueError("digits must hold at least two symbols")
    if n < 0:
        raise ValueError(f"n must not be negative, got {n}")
    if n == 0:
        return digits[0]
    out = []
    while n:
        n, rem = divmod(n, base)
        out.append(digits[rem])
    return "".join(reversed(out))


def _require_int(value: Any, spec: str) -> int:
    if not isinstance(value, int):
        raise TypeError(f"%{spec} expects an int, got {type(value).__name__}")
    return value


def _to_int32(value: int) -> int:
    value &= _UINT_MASK
    return value - (1 << 32) if value >= 1 << 31 else value


def _render_char(arg: Any) -> str:
    if isinstance(arg, str):
        if len(arg) != 1:
            raise ValueError(f"%c expects a single character, got {arg!r}")
        return arg
    return chr(_require_int(arg, "c") & 0xFF)


def _render_str(arg: Any) -> str:
    if arg is None:
        return "(null)"
    if not isinstance(arg, str):
        raise TypeError(f"%s expects a str, got {type(arg).__name__}")
    return arg.split("\0", 1)[0]


def _render_pointer(arg: Any) -> str:
    if arg is None or arg == 0:
        return "(nil)"
    address = arg if isinstance(arg, int) else id(arg)
    return "0x" + itoa_base(address & _PTR_MASK, _HEX_LOWER)


def _render_signed(arg: Any) -> str:
    return itoa(_to_int32(_require_int(arg, "d")))


def _render_unsigned(arg: Any) -> str:
    return itoa_base(_require_int(arg, "u") & _UINT_MASK, "0123456789")


def _render_hex_lower(arg: Any) -> str:
    return itoa_base(_require_int(arg, "x") & _UINT_MASK, _HEX_LOWER)


def _render_hex_upper(arg: Any) -> str:
    return itoa_base(_require_int(arg, "X") & _UINT_MASK, _HEX_UPPER)


_CONVERSIONS: dict[str, Callable[[Any], str]] = {
    "c": _render_char,
    "s": _render_str,
    "p": _render_pointer,
    "d": _render_signed,
    "i": _render_signed,
    "u": _render_unsigned,
    "x": _render_hex_lower,
    "X": _render_hex_upper,
}


def sprintf(fmt: str, *args: Any) -> str:
    """Format ``args`` according to ``fmt`` and return the text.

    Integers are taken as 32-bit values, wrapping like C's ``int`` and
    ``unsigned int``. An unknown conversion and a trailing ``%`` produce
    nothing and consume no argument. Extra arguments are ignored.
    """
    if not isinstance(fmt, str):
        raise TypeError(f"fmt must be a str, got {type(fmt).__name__}")
    pieces: list[str] = []
    remaining = iter(args)
    pos = 0
    while pos < len(fmt):
        pct = fmt.find("%", pos)
        if pct < 0:
            pieces.append(fmt[pos:])
            break
        pieces.append(fmt[pos:pct])
        spec = fmt[pct + 1 : pct + 2]
        pos = pct + 2
        if spec == "%":
            pieces.append("%")
        elif spec in _CONVERSIONS:
            try:
                arg = next(remaining)
            except StopIteration:
                raise TypeError(f"not enough arguments for %{spec}") from None
            pieces.append(_CONVERSIONS[spec](arg))
    return "".join(pieces)


def printf(fmt: str, *args: Any) -> int:
    """Format like :func:`sprintf`, write to standard output, return the character count."""
    text = sprintf(fmt, *args)
    sys.stdout.write(text)
    sys.stdout.flush()
    return len(text)
"""Text rendering of 128-bit integers with stream-style formatting options.

Supports decimal, hexadecimal and octal output. It also supports a base
prefix, an explicit plus sign, upper-case hex digits, digit grouping with a
thousands separator, and padding to a field width with left, right or
internal adjustment.
"""

from __future__ import annotations

import enum
from collections.abc import Sequence

from .int128 import Int128Base

__all__ = ["Adjust", "format_int128"]

_BITS = 128
_MASK128 = (1 << _BITS) - 1
_SIGN_BIT = 1 << (_BITS - 1)


class Adjust(enum.Enum):
    """Where padding goes when the text is shorter than the field width."""

    LEFT = "left"
    RIGHT = "right"
    INTERNAL = "internal"


def _normalize(value: int | Int128Base) -> tuple[bool, int]:
    """Return whether *value* is signed and its 128-bit pattern."""
    if isinstance(value, Int128Base):
        return value.SIGNED, int(value) & _MASK128
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(f"cannot format {type(value).__name__} as a 128-bit integer")
    if -_SIGN_BIT <= value < _SIGN_BIT:
        return True, value & _MASK128
    if 0 <= value <= _MASK128:
        return False, value
    raise OverflowError(f"{value} does not fit in 128 bits")


def _group(digits: str, grouping: Sequence[int], separator: str) -> str:
    """Insert *separator* between digit groups, counting from the right.

    The last group size repeats; a size of zero or less stops grouping.
    """
    if not grouping:
        return digits
    pieces: list[str] = []
    last = len(grouping) - 1
    index = 0
    size = grouping[0]
    count = 0
    for char in reversed(digits):
        if size > 0 and count == size:
            pieces.append(separator)
            count = 0
            if index < last:
                index += 1
                size = grouping[index]
        pieces.append(char)
        count += 1
    return "".join(reversed(pieces))


def format_int128(
    value: int | Int128Base,
    base: int = 10,
    showbase: bool = False,
    showpos: bool = False,
    uppercase: bool = False,
    width: int = 0,
    fill: str = " ",
    adjust: Adjust = Adjust.RIGHT,
    grouping: Sequence[int] = (),
    thousands_sep: str = ",",
) -> str:
    """Render *value* as text.

    Hex and octal show the raw 128-bit pattern with no sign. In hex,
    *showbase* adds ``0x`` (``0X`` with *uppercase*) to nonzero values. In
    octal it adds a leading ``0`` digit to nonzero values. Decimal output of
    a signed value starts with ``-`` when it is negative, or with ``+`` when
    *showpos* is set. A plain ``int`` counts as signed when it fits the
    signed range, and as unsigned otherwise.
    """
    if len(fill) != 1:
        raise ValueError("fill must be a single character")
    if width < 0:
        raise ValueError("width must not be negative")
    if any(not isinstance(size, int) for size in grouping):
        raise TypeError("grouping sizes must be integers")

    signed, bits = _normalize(value)
    prefix = ""
    if base == 16:
        if showbase and bits:
            prefix = "0X" if uppercase else "0x"
        digits = format(bits, "X" if uppercase else "x")
    elif base == 8:
        digits = format(bits, "o")
        if showbase and bits:
            digits = "0" + digits
    elif base == 10:
        if signed:
            if bits & _SIGN_BIT:
                prefix = "-"
                bits = (-bits) & _MASK128
            elif showpos:
                prefix = "+"
        digits = str(bits)
    else:
        raise ValueError(f"unsupported base {base}; use 8, 10 or 16")

    body = _group(digits, grouping, thousands_sep)
    text = prefix + body
    missing = width - len(text)
    if missing <= 0:
        return text
    padding = fill * missing
    if adjust is Adjust.LEFT:
        return text + padding
    if adjust is Adjust.INTERNAL:
        return prefix + padding + body
    return padding + text
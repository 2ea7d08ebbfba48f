"""Fixed-width 128-bit signed and unsigned integers with wrap-around arithmetic.

Values behave like C integers of that width. Results wrap modulo 2**128.
Division truncates toward zero, and a remainder takes the sign of the
dividend. A shift count uses only its low seven bits, and right shifts of
signed values are arithmetic.
"""

from __future__ import annotations

import functools
from typing import ClassVar

__all__ = [
    "Int128",
    "Int128Base",
    "UInt128",
    "count_leading_zeros",
    "parse_int128",
    "parse_uint128",
]

_BITS = 128
_MASK64 = (1 << 64) - 1
_MASK128 = (1 << _BITS) - 1
_SHIFT_MASK = _BITS - 1


@functools.total_ordering
class Int128Base:
    """Common behaviour of :class:`Int128` and :class:`UInt128`."""

    __slots__ = ("_value",)

    BITS: ClassVar[int] = _BITS
    SIGNED: ClassVar[bool] = False
    MIN: ClassVar[Int128Base]
    MAX: ClassVar[Int128Base]

    def __init__(self, value: int | float | Int128Base = 0) -> None:
        if type(self) is Int128Base:
            raise TypeError("Int128Base is abstract; use Int128 or UInt128")
        if isinstance(value, Int128Base):
            raw = value._value
        elif isinstance(value, int):
            raw = value
        elif isinstance(value, float):
            raw = int(value)
        else:
            raise TypeError(f"cannot build a 128-bit integer from {type(value).__name__}")
        self._value = self._wrap(raw)

    @classmethod
    def _wrap(cls, raw: int) -> int:
        raw &= _MASK128
        if cls.SIGNED and raw >> (_BITS - 1):
            raw -= 1 << _BITS
        return raw

    @classmethod
    def _make(cls, raw: int) -> Int128Base:
        obj = object.__new__(cls)
        obj._value = cls._wrap(raw)
        return obj

    @classmethod
    def from_parts(cls, high: int, low: int) -> Int128Base:
        """Build a value from its high and low 64-bit halves."""
        return cls._make(((high & _MASK64) << 64) | (low & _MASK64))

    @property
    def high(self) -> int:
        """The upper 64 bits; signed for :class:`Int128`."""
        bits = (self._value & _MASK128) >> 64
        if self.SIGNED and bits >> 63:
            bits -= 1 << 64
        return bits

    @property
    def low(self) -> int:
        """The lower 64 bits, unsigned."""
        return self._value & _MASK64

    def _operand(self, other: object) -> int | None:
        if isinstance(other, Int128Base):
            return other._value if type(other) is type(self) else None
        if isinstance(other, int):
            return other
        return None

    def __int__(self) -> int:
        return self._value

    def __index__(self) -> int:
        return self._value

    def __bool__(self) -> bool:
        return self._value != 0

    def __float__(self) -> float:
        return float(self._value)

    def __hash__(self) -> int:
        return hash(self._value)

    def __str__(self) -> str:
        return str(self._value)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._value})"

    def __pos__(self) -> Int128Base:
        return self

    def __neg__(self) -> Int128Base:
        return self._make(-self._value)

    def __invert__(self) -> Int128Base:
        return self._make(~self._value)

    def __add__(self, other: object) -> Int128Base:
        rhs = self._operand(other)
        if rhs is None:
            return NotImplemented
        return self._make(self._value + rhs)

    def __radd__(self, other: object) -> Int128Base:
        return self.__add__(other)

    def __sub__(self, other: object) -> Int128Base:
        rhs = self._operand(other)
        if rhs is None:
            return NotImplemented
        return self._make(self._value - rhs)

    def __rsub__(self, other: object) -> Int128Base:
        lhs = self._operand(other)
        if lhs is None:
            return NotImplemented
        return self._make(lhs - self._value)

    def __mul__(self, other: object) -> Int128Base:
        rhs = self._operand(other)
        if rhs is None:
            return NotImplemented
        return self._make(self._value * rhs)

    def __rmul__(self, other: object) -> Int128Base:
        return self.__mul__(other)

    def _divmod(self, lhs: int, rhs: int) -> tuple[int, int]:
        lhs = self._wrap(lhs)
        rhs = self._wrap(rhs)
        if rhs == 0:
            raise ZeroDivisionError("128-bit integer division by zero")
        quotient = abs(lhs) // abs(rhs)
        remainder = abs(lhs) % abs(rhs)
        if (lhs < 0) != (rhs < 0):
            quotient = -quotient
        if lhs < 0:
            remainder = -remainder
        return quotient, remainder

    def __truediv__(self, other: object) -> Int128Base:
        rhs = self._operand(other)
        if rhs is None:
            return NotImplemented
        return self._make(self._divmod(self._value, rhs)[0])

    def __rtruediv__(self, other: object) -> Int128Base:
        lhs = self._operand(other)
        if lhs is None:
            return NotImplemented
        return self._make(self._divmod(lhs, self._value)[0])

    __floordiv__ = __truediv__
    __rfloordiv__ = __rtruediv__

    def __mod__(self, other: object) -> Int128Base:
        rhs = self._operand(other)
        if rhs is None:
            return NotImplemented
        return self._make(self._divmod(self._value, rhs)[1])

    def __rmod__(self, other: object) -> Int128Base:
        lhs = self._operand(other)
        if lhs is None:
            return NotImplemented
        return self._make(self._divmod(lhs, self._value)[1])

    def __and__(self, other: object) -> Int128Base:
        rhs = self._operand(other)
        if rhs is None:
            return NotImplemented
        return self._make(self._value & rhs)

    __rand__ = __and__

    def __or__(self, other: object) -> Int128Base:
        rhs = self._operand(other)
        if rhs is None:
            return NotImplemented
        return self._make(self._value | rhs)

    __ror__ = __or__

    def __xor__(self, other: object) -> Int128Base:
        rhs = self._operand(other)
        if rhs is None:
            return NotImplemented
        return self._make(self._value ^ rhs)

    __rxor__ = __xor__

    @staticmethod
    def _shift_count(other: object) -> int | None:
        if isinstance(other, Int128Base):
            return other.low & _SHIFT_MASK
        if isinstance(other, int):
            return other & _SHIFT_MASK
        return None

    def __lshift__(self, other: object) -> Int128Base:
        count = self._shift_count(other)
        if count is None:
            return NotImplemented
        return self._make(self._value << count)

    def __rshift__(self, other: object) -> Int128Base:
        count = self._shift_count(other)
        if count is None:
            return NotImplemented
        return self._make(self._value >> count)

    def __eq__(self, other: object) -> bool:
        rhs = self._operand(other)
        if rhs is None:
            return NotImplemented
        return self._value == rhs

    def __lt__(self, other: object) -> bool:
        rhs = self._operand(other)
        if rhs is None:
            return NotImplemented
        return self._value < rhs


class Int128(Int128Base):
    """Signed 128-bit integer in two's complement."""

    __slots__ = ()
    SIGNED: ClassVar[bool] = True


class UInt128(Int128Base):
    """Unsigned 128-bit integer."""

    __slots__ = ()
    SIGNED: ClassVar[bool] = False


Int128.MIN = Int128(-(1 << (_BITS - 1)))
Int128.MAX = Int128((1 << (_BITS - 1)) - 1)
UInt128.MIN = UInt128(0)
UInt128.MAX = UInt128(_MASK128)


def count_leading_zeros(value: int | Int128Base) -> int:
    """Number of leading zero bits in the 128-bit pattern of *value* (128 for zero)."""
    bits = int(value) & _MASK128
    return _BITS - bits.bit_length()


def _digit(char: str, radix: int) -> int:
    if "0" <= char <= "9":
        digit = ord(char) - ord("0")
    elif "a" <= char <= "z":
        digit = ord(char) - ord("a") + 10
    elif "A" <= char <= "Z":
        digit = ord(char) - ord("A") + 10
    else:
        digit = radix
    if digit >= radix:
        raise ValueError(f"character {char!r} is not a base-{radix} digit")
    return digit


def _parse_literal(text: str) -> int:
    if not text:
        raise ValueError("empty integer literal")
    if text == "0":
        return 0
    if text[:2] in ("0x", "0X"):
        radix, digits = 16, text[2:]
    elif text[:2] in ("0b", "0B"):
        radix, digits = 2, text[2:]
    elif text[0] == "0":
        radix, digits = 8, text[1:]
    else:
        radix, digits = 10, text
    if not digits:
        raise ValueError(f"integer literal {text!r} has no digits")
    result = 0
    for char in digits:
        result = (result * radix + _digit(char, radix)) & _MASK128
    return result


def parse_int128(text: str) -> Int128:
    """Parse an unsigned literal (decimal, ``0`` octal, ``0x`` hex, ``0b`` binary) as :class:`Int128`."""
    return Int128(_parse_literal(text))


def parse_uint128(text: str) -> UInt128:
    """Parse an unsigned literal (decimal, ``0`` octal, ``0x`` hex, ``0b`` binary) as :class:`UInt128`."""
    return UInt128(_parse_literal(text))
import pytest

from ttkcommon.int128 import (
    Int128,
    Int128Base,
    UInt128,
    count_leading_zeros,
    parse_int128,
    parse_uint128,
)


def test_base_is_abstract():
    with pytest.raises(TypeError):
        Int128Base(1)


def test_limits():
    assert Int128((1 << 127) - 1) == Int128.MAX
    assert Int128(1 << 127) == Int128.MIN
    assert int(Int128(1 << 127)) == -(1 << 127)
    assert int(UInt128((1 << 128) - 1)) == (1 << 128) - 1
    assert UInt128(1 << 128) == UInt128.MIN
    assert int(UInt128(1 << 128)) == 0


def test_unsigned_wraps_negative_input():
    assert UInt128(-1) == UInt128.MAX


def test_signed_from_unsigned_keeps_bits():
    assert Int128(UInt128.MAX) == Int128(-1)
    assert UInt128(Int128.MIN) == UInt128(1 << 127)


def test_from_parts_round_trip():
    value = Int128.from_parts(-2, 12345)
    assert value.high == -2
    assert value.low == 12345
    again = Int128.from_parts(value.high, value.low)
    assert again == value


def test_from_parts_unsigned_high_is_unsigned():
    value = UInt128.from_parts(-1, 0)
    assert value.high == (1 << 64) - 1
    assert value.low == 0


def test_float_construction_truncates():
    assert Int128(-5.9) == Int128(-5)
    assert float(Int128(-5)) == -5.0


def test_bool():
    assert not Int128(0)
    assert UInt128(1 << 100)


def test_add_overflow_wraps():
    assert Int128.MAX + 1 == Int128.MIN
    assert UInt128.MAX + 1 == UInt128(0)


def test_sub_underflow_wraps():
    assert UInt128(0) - 1 == UInt128.MAX
    assert Int128.MIN - 1 == Int128.MAX


def test_reverse_operands():
    assert 10 - Int128(3) == Int128(7)
    assert 2 * UInt128(4) == UInt128(8)


def test_negate_and_invert():
    assert -UInt128(1) == UInt128.MAX
    assert -Int128.MIN == Int128.MIN
    assert ~Int128(0) == Int128(-1)
    assert ~UInt128(0) == UInt128.MAX


def test_mul_wraps():
    assert UInt128.MAX * UInt128.MAX == UInt128(1)


def test_mul_matches_small_values():
    a, b = 123456789, 987654321
    assert Int128(a) * Int128(b) == Int128(a * b)


def test_division_truncates_toward_zero():
    assert Int128(-7) / 2 == Int128(-3)
    assert Int128(-7) % 2 == Int128(-1)


@pytest.mark.parametrize("a,b", [(7, 2), (-7, 2), (7, -2), (-7, -2), (100, 7), (-(1 << 100), 3)])
def test_division_identity(a, b):
    x, y = Int128(a), Int128(b)
    q, r = x / y, x % y
    assert q * y + r == x
    assert abs(int(r)) < abs(b)
    assert int(r) == 0 or (int(r) < 0) == (a < 0)


def test_min_divided_by_minus_one_wraps():
    smallest = Int128(-(1 << 127))
    assert smallest / Int128(-1) == Int128(-(1 << 127))


def test_unsigned_division_identity():
    x, y = UInt128.MAX, UInt128(12345)
    assert (x / y) * y + (x % y) == x


@pytest.mark.parametrize("value", [Int128(5), UInt128(5)])
def test_division_by_zero(value):
    assert int(value / 1) == 5
    assert int(value % 3) == 2
    with pytest.raises(ZeroDivisionError):
        value / 0
    with pytest.raises(ZeroDivisionError):
        value % 0


def test_bitwise():
    a, b = UInt128(0b1100), UInt128(0b1010)
    assert a & b == UInt128(0b1100 & 0b1010)
    assert a | b == UInt128(0b1100 | 0b1010)
    assert a ^ b == UInt128(0b1100 ^ 0b1010)


def test_shift_round_trip_unsigned():
    assert (UInt128(1) << 127) >> 127 == UInt128(1)


def test_shift_into_sign_bit():
    assert Int128(1) << 127 == Int128.MIN


def test_signed_right_shift_is_arithmetic():
    assert Int128.MIN >> 127 == Int128(-1)
    assert (UInt128(1) << 127) >> 127 == UInt128(1)


def test_shift_count_uses_low_bits():
    value = UInt128(0xABC)
    assert value << 128 == value
    assert value >> UInt128(128) == value


def test_comparisons():
    assert Int128(-1) < Int128(0)
    assert UInt128(-1) > UInt128(0)
    assert Int128(3) <= 3
    assert Int128.MAX > Int128.MIN


def test_mixed_types_rejected():
    with pytest.raises(TypeError):
        Int128(1) + UInt128(1)
    with pytest.raises(TypeError):
        Int128(1) < UInt128(1)


@pytest.mark.parametrize("shift", [0, 1, 31, 63, 64, 100, 127])
def test_count_leading_zeros(shift):
    assert count_leading_zeros(UInt128(1) << shift) + shift == 127


def test_count_leading_zeros_extremes():
    assert count_leading_zeros(UInt128.MAX) == 0
    assert count_leading_zeros(Int128(-1)) == 0
    assert count_leading_zeros(UInt128(0)) == 128


@pytest.mark.parametrize("value", [0, 1, 255, (1 << 64) + 7, (1 << 128) - 1])
def test_parse_round_trips(value):
    assert parse_uint128(str(value)) == UInt128(value)
    assert parse_uint128("0x" + format(value, "x")) == UInt128(value)
    assert parse_uint128("0X" + format(value, "X")) == UInt128(value)
    assert parse_uint128("0b" + format(value, "b")) == UInt128(value)


def test_parse_octal():
    assert parse_uint128("017") == UInt128(0o17)


def test_parse_signed_wraps():
    assert parse_int128(str((1 << 128) - 1)) == Int128(-1)
    assert parse_int128("0x" + "f" * 32) == Int128(-1)


@pytest.mark.parametrize("text", ["", "0x", "0b", "09", "12a", "0b102", "-5"])
def test_parse_invalid(text):
    with pytest.raises(ValueError):
        parse_int128(text)
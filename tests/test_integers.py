import math

import pytest

from akrt.integers import (
    IntKind,
    align_up_to,
    arithmetic_shift_right,
    ceil_div,
    checked_add,
    checked_div,
    checked_mod,
    checked_mul,
    checked_sub,
    clamp,
    explode_byte,
    fallible_integer_cast,
    infallible_integer_cast,
    is_power_of_two,
    mix,
    round_up_to_power_of_two,
    saturating_integer_cast,
    truncating_integer_cast,
)
from akrt.runtime import Panic, VerificationError


def test_kind_limits_and_contains():
    assert IntKind.I8.contains(IntKind.I8.min)
    assert not IntKind.I8.contains(IntKind.I8.max + 1)
    assert IntKind.U64.max == 2**64 - 1
    assert not IntKind.U8.contains(-1)


def test_checked_add_within_range():
    assert checked_add(100, 27, IntKind.I8) == IntKind.I8.max


def test_checked_add_overflow_panics(capsys):
    with pytest.raises(Panic, match=r"Overflow in checked addition '127 \+ 1'"):
        checked_add(127, 1, IntKind.I8)
    assert capsys.readouterr().out.startswith("Panic: ")


def test_checked_sub_underflow_unsigned():
    with pytest.raises(Panic, match="Overflow in checked subtraction"):
        checked_sub(0, 1, IntKind.U32)


def test_checked_mul_overflow():
    with pytest.raises(Panic, match="Overflow in checked multiplication"):
        checked_mul(2**32, 2**32, IntKind.U64)
    assert checked_mul(3, 5, IntKind.I16) == 3 * 5


def test_checked_div_by_zero():
    with pytest.raises(Panic, match="Division by zero in checked division '5 / 0'"):
        checked_div(5, 0, IntKind.I32)


def test_checked_div_min_by_minus_one_overflows():
    with pytest.raises(Panic, match="Overflow in checked division"):
        checked_div(IntKind.I8.min, -1, IntKind.I8)


@pytest.mark.parametrize("a,b", [(-7, 2), (7, -2), (-7, -2), (7, 2), (-128, 3)])
def test_div_and_mod_identity(a, b):
    q = checked_div(a, b, IntKind.I32)
    r = checked_mod(a, b, IntKind.I32)
    assert q * b + r == a
    assert abs(r) < abs(b)
    assert r == 0 or (r < 0) == (a < 0)
    assert q == math.trunc(a / b)


def test_checked_mod_by_zero():
    with pytest.raises(Panic, match="Division by zero in checked modulo"):
        checked_mod(3, 0, IntKind.U8)


def test_out_of_range_operand_rejected():
    with pytest.raises(ValueError):
        checked_add(300, 1, IntKind.U8)


@pytest.mark.parametrize("kind", [IntKind.I8, IntKind.I16, IntKind.I32, IntKind.I64])
@pytest.mark.parametrize("steps", [0, 1, 3])
def test_arithmetic_shift_right_signed_floors(kind, steps):
    for value in (kind.min, -9, -1, 0, 9, kind.max):
        assert arithmetic_shift_right(value, steps, kind) == value // 2**steps


def test_arithmetic_shift_right_unsigned_zero_fills():
    kind = IntKind.U8
    assert arithmetic_shift_right(kind.max, 1, kind) == kind.max // 2


def test_fallible_integer_cast():
    assert fallible_integer_cast(200, IntKind.U8) == 200
    assert fallible_integer_cast(300, IntKind.U8) is None


def test_infallible_integer_cast():
    assert infallible_integer_cast(-5, IntKind.I16) == -5
    with pytest.raises(VerificationError):
        infallible_integer_cast(300, IntKind.U8)


def test_saturating_integer_cast():
    assert saturating_integer_cast(300, IntKind.U8) == IntKind.U8.max
    assert saturating_integer_cast(-5, IntKind.U8) == IntKind.U8.min
    assert saturating_integer_cast(-200, IntKind.I8) == IntKind.I8.min
    assert saturating_integer_cast(42, IntKind.I8) == 42


def test_truncating_integer_cast():
    assert truncating_integer_cast(-1, IntKind.U32) == IntKind.U32.max
    assert truncating_integer_cast(IntKind.U8.max, IntKind.I8) == -1
    assert truncating_integer_cast(1 << 16, IntKind.U16) == 0


@pytest.mark.parametrize("value", [1, 7, 8, 9, 100, 4095])
@pytest.mark.parametrize("power", [1, 2, 8, 64])
def test_round_up_to_power_of_two(value, power):
    result = round_up_to_power_of_two(value, power)
    assert result % power == 0
    assert value <= result < value + power


def test_is_power_of_two():
    assert all(is_power_of_two(2**k) for k in range(40))
    assert not is_power_of_two(0)
    assert not is_power_of_two(6)


@pytest.mark.parametrize("a,b", [(7, 2), (8, 2), (1, 5), (0, 3), (100, 7)])
def test_ceil_div_positive(a, b):
    assert ceil_div(a, b) == math.ceil(a / b)


def test_ceil_div_by_zero():
    with pytest.raises(ZeroDivisionError):
        ceil_div(1, 0)


def test_clamp():
    assert clamp(5, 1, 10) == 5
    assert clamp(-3, 1, 10) == 1
    assert clamp(30, 1, 10) == 10
    with pytest.raises(VerificationError):
        clamp(5, 10, 1)


def test_mix_endpoints():
    assert mix(3.0, 9.0, 0) == 3.0
    assert mix(3.0, 9.0, 1) == 9.0


@pytest.mark.parametrize(
    "byte,expected",
    [
        (0xFF, 0xFFFFFFFFFFFFFFFF),
        (0x80, 0x8080808080808080),
        (0x7F, 0x7F7F7F7F7F7F7F7F),
        (0, 0),
    ],
)
def test_explode_byte(byte, expected):
    assert explode_byte(byte) == expected


@pytest.mark.parametrize("value", [0, 1, 15, 16, 17, 1000])
@pytest.mark.parametrize("alignment", [1, 4, 16])
def test_align_up_to(value, alignment):
    result = align_up_to(value, alignment)
    assert result % alignment == 0
    assert value <= result < value + alignment
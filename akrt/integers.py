"""Fixed-width integer arithmetic with checked operations and casts."""

from __future__ import annotations

from enum import Enum
from typing import Callable, Optional, TypeVar

from akrt.runtime import panic, verify

T = TypeVar("T")


class IntKind(Enum):
    """A fixed-width integer type: its width in bits and its signedness."""

    I8 = (8, True)
    I16 = (16, True)
    I32 = (32, True)
    I64 = (64, True)
    U8 = (8, False)
    U16 = (16, False)
    U32 = (32, False)
    U64 = (64, False)

    def __init__(self, bits: int, signed: bool) -> None:
        self.bits = bits
        self.signed = signed

    @property
    def min(self) -> int:
        return -(1 << (self.bits - 1)) if self.signed else 0

    @property
    def max(self) -> int:
        return (1 << (self.bits - 1)) - 1 if self.signed else (1 << self.bits) - 1

    def contains(self, value: int) -> bool:
        """Whether value is representable in this type."""
        return self.min <= value <= self.max


class TriState(Enum):
    FALSE = 0
    TRUE = 1
    UNKNOWN = 2


def _wrap(value: int, kind: IntKind) -> int:
    value &= (1 << kind.bits) - 1
    if kind.signed and value > kind.max:
        value -= 1 << kind.bits
    return value


def _require(kind: IntKind, *values: int) -> None:
    for value in values:
        if not kind.contains(value):
            raise ValueError(f"{value} is out of range for {kind.name}")


def _trunc_div(a: int, b: int) -> int:
    quotient = abs(a) // abs(b)
    return quotient if (a < 0) == (b < 0) else -quotient


def _checked(
    value: int,
    other: int,
    kind: IntKind,
    compute: Callable[[int, int], int],
    description: str,
    symbol: str,
) -> int:
    _require(kind, value, other)
    result = compute(value, other)
    if not kind.contains(result):
        panic(f"Overflow in checked {description} '{value} {symbol} {other}'")
    return result


def checked_add(value: int, other: int, kind: IntKind) -> int:
    """Add, panicking on overflow."""
    return _checked(value, other, kind, lambda a, b: a + b, "addition", "+")


def checked_sub(value: int, other: int, kind: IntKind) -> int:
    """Subtract, panicking on overflow."""
    return _checked(value, other, kind, lambda a, b: a - b, "subtraction", "-")


def checked_mul(value: int, other: int, kind: IntKind) -> int:
    """Multiply, panicking on overflow."""
    return _checked(value, other, kind, lambda a, b: a * b, "multiplication", "*")


def checked_div(value: int, other: int, kind: IntKind) -> int:
    """Divide, truncating toward zero; panic on division by zero or overflow."""
    _require(kind, value, other)
    if other == 0:
        panic(f"Division by zero in checked division '{value} / {other}'")
    return _checked(value, other, kind, _trunc_div, "division", "/")


def checked_mod(value: int, other: int, kind: IntKind) -> int:
    """Remainder with the sign of the dividend; panic on division by zero."""
    _require(kind, value, other)
    if other == 0:
        panic(f"Division by zero in checked modulo '{value} % {other}'")
    return _checked(
        value, other, kind, lambda a, b: a - b * _trunc_div(a, b), "modulo", "%"
    )


def arithmetic_shift_right(value: int, steps: int, kind: IntKind) -> int:
    """Shift right, keeping the sign for signed types and zero-filling otherwise."""
    _require(kind, value)
    if steps < 0:
        raise ValueError("shift steps must not be negative")
    return _wrap(value >> steps, kind)


def fallible_integer_cast(value: int, kind: IntKind) -> Optional[int]:
    """Return value if it fits in kind, otherwise None."""
    return value if kind.contains(value) else None


def infallible_integer_cast(value: int, kind: IntKind) -> int:
    """Return value, verifying that it fits in kind."""
    verify(kind.contains(value), f"integer cast of {value} to {kind.name} out of range")
    return value


def saturating_integer_cast(value: int, kind: IntKind) -> int:
    """Clamp value to the range of kind."""
    if value < kind.min:
        return kind.min
    if value > kind.max:
        return kind.max
    return value


def truncating_integer_cast(value: int, kind: IntKind) -> int:
    """Keep the low bits of value, reinterpreted as kind."""
    return _wrap(value, kind)


def round_up_to_power_of_two(value: int, power_of_two: int) -> int:
    """Round value up to a multiple of power_of_two."""
    return ((value - 1) & ~(power_of_two - 1)) + power_of_two


def is_power_of_two(value: int) -> bool:
    return bool(value) and not (value & (value - 1))


def ceil_div(a: int, b: int) -> int:
    """Truncating division, incremented when there is a remainder."""
    if b == 0:
        raise ZeroDivisionError("ceil_div by zero")
    result = _trunc_div(a, b)
    if a - b * result != 0:
        result += 1
    return result


def clamp(value: T, low: T, high: T) -> T:
    """Limit value to [low, high]; high must not be below low."""
    verify(high >= low, "clamp bounds are reversed")  # type: ignore[operator]
    if value > high:  # type: ignore[operator]
        return high
    if value < low:  # type: ignore[operator]
        return low
    return value


def mix(v1, v2, interpolation):
    """Linear interpolation between v1 and v2."""
    return v1 + (v2 - v1) * interpolation


def explode_byte(b: int) -> int:
    """Repeat a byte across all eight bytes of a 64-bit word."""
    verify(0 <= b <= 0xFF, "byte out of range")
    return int.from_bytes(bytes([b]) * 8, "big")


def align_up_to(value: int, alignment: int) -> int:
    """Round value up to a multiple of a power-of-two alignment."""
    return (value + (alignment - 1)) & ~(alignment - 1)
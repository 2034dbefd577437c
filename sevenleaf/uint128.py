"""Unsigned 128-bit integer arithmetic with wrap-around semantics."""

from __future__ import annotations

_MASK64 = (1 << 64) - 1
_MASK128 = (1 << 128) - 1


def _check128(value: int) -> int:
    if not 0 <= value <= _MASK128:
        raise ValueError(f"{value} is not an unsigned 128-bit value")
    return value


def _check64(value: int) -> int:
    if not 0 <= value <= _MASK64:
        raise ValueError(f"{value} is not an unsigned 64-bit value")
    return value


def join128(low: int, high: int) -> int:
    """Build a 128-bit value from its low and high 64-bit halves."""
    return (_check64(high) << 64) | _check64(low)


def split128(value: int) -> tuple[int, int]:
    """Split a 128-bit value into ``(low, high)`` 64-bit halves."""
    _check128(value)
    return value & _MASK64, value >> 64


def uadd128(x: int, y: int) -> int:
    """Add two 128-bit values modulo 2**128."""
    return (_check128(x) + _check128(y)) & _MASK128


def usub128(x: int, y: int) -> int:
    """Subtract ``y`` from ``x`` modulo 2**128."""
    return (_check128(x) - _check128(y)) & _MASK128


def umul64x64(multiplier: int, multiplicand: int) -> int:
    """Multiply two 64-bit values into a full 128-bit product."""
    return _check64(multiplier) * _check64(multiplicand)


def udiv128(dividend: int, divisor: int) -> int:
    """Divide a 128-bit value by a 64-bit divisor, keeping the low 64 bits of the quotient."""
    _check128(dividend)
    _check64(divisor)
    if divisor == 0:
        raise ZeroDivisionError("udiv128 by zero")
    return (dividend // divisor) & _MASK64


def uand128(x: int, y: int) -> int:
    """Bitwise ``x & y``."""
    return _check128(x) & _check128(y)


def uandnot128(x: int, y: int) -> int:
    """Bitwise ``~x & y``."""
    return ~_check128(x) & _check128(y) & _MASK128


def uor128(x: int, y: int) -> int:
    """Bitwise ``x | y``."""
    return _check128(x) | _check128(y)


def uxor128(x: int, y: int) -> int:
    """Bitwise ``x ^ y``."""
    return _check128(x) ^ _check128(y)
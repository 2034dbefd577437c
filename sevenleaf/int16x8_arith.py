"""Lane-wise shifts, arithmetic, comparisons and range limits for Int16x8 vectors."""

from __future__ import annotations

from collections.abc import Callable
from typing import Union

from sevenleaf.int16x8 import INT16_MAX, INT16_MIN, Int16x8

Operand = Union[Int16x8, int]

_TRUE_LANE = -1  # all sixteen bits set
_FALSE_LANE = 0
_MAX_SHIFT = 15


def _vector(value: Operand) -> Int16x8:
    if isinstance(value, Int16x8):
        return value
    if isinstance(value, int):
        return Int16x8.splat(value)
    raise TypeError(f"expected Int16x8 or int, got {type(value).__name__}")


def _check_shift(n: int) -> int:
    if not 0 <= n <= _MAX_SHIFT:
        raise ValueError(f"shift count {n} out of range 0..{_MAX_SHIFT}")
    return n


def _saturate(value: int) -> int:
    return max(INT16_MIN, min(INT16_MAX, value))


def _lanewise(a: Operand, b: Operand, op: Callable[[int, int], int]) -> Int16x8:
    return Int16x8(*(op(x, y) for x, y in zip(_vector(a), _vector(b))))


def _compare(a: Operand, b: Operand, predicate: Callable[[int, int], bool]) -> Int16x8:
    return _lanewise(a, b, lambda x, y: _TRUE_LANE if predicate(x, y) else _FALSE_LANE)


# --- Shifts ---

def shr(a: Int16x8, n: int) -> Int16x8:
    """Shift every lane right by ``n`` bits, filling with zeros."""
    _check_shift(n)
    return Int16x8(*((x & 0xFFFF) >> n for x in a))


def shl(a: Int16x8, n: int) -> Int16x8:
    """Shift every lane left by ``n`` bits, dropping bits beyond sixteen."""
    _check_shift(n)
    return Int16x8(*(x << n for x in a))


def shra(a: Int16x8, n: int) -> Int16x8:
    """Shift every lane right by ``n`` bits, copying the sign bit."""
    _check_shift(n)
    return Int16x8(*(x >> n for x in a))


# --- Arithmetic ---

def neg(a: Int16x8) -> Int16x8:
    """Negate every lane; the most negative value stays as it is."""
    return Int16x8(*(-x for x in a))


def add(a: Operand, b: Operand) -> Int16x8:
    """Add lane by lane, wrapping around on overflow."""
    return _lanewise(a, b, lambda x, y: x + y)


def adds(a: Operand, b: Operand) -> Int16x8:
    """Add lane by lane, saturating to the 16-bit signed range."""
    return _lanewise(a, b, lambda x, y: _saturate(x + y))


def sub(a: Operand, b: Operand) -> Int16x8:
    """Subtract lane by lane, wrapping around on overflow."""
    return _lanewise(a, b, lambda x, y: x - y)


def subs(a: Operand, b: Operand) -> Int16x8:
    """Subtract lane by lane, saturating to the 16-bit signed range."""
    return _lanewise(a, b, lambda x, y: _saturate(x - y))


def mul(a: Operand, b: Operand) -> Int16x8:
    """Multiply lane by lane, keeping the low sixteen bits of each product."""
    return _lanewise(a, b, lambda x, y: x * y)


# --- Comparisons (each lane becomes all ones when true, zero when false) ---

def cmpeq(a: Operand, b: Operand) -> Int16x8:
    """Lane mask of ``a == b``."""
    return _compare(a, b, lambda x, y: x == y)


def cmpne(a: Operand, b: Operand) -> Int16x8:
    """Lane mask of ``a != b``."""
    return _compare(a, b, lambda x, y: x != y)


def cmpgt(a: Operand, b: Operand) -> Int16x8:
    """Lane mask of ``a > b``."""
    return _compare(a, b, lambda x, y: x > y)


def cmpge(a: Operand, b: Operand) -> Int16x8:
    """Lane mask of ``a >= b``."""
    return _compare(a, b, lambda x, y: x >= y)


def cmplt(a: Operand, b: Operand) -> Int16x8:
    """Lane mask of ``a < b``."""
    return _compare(a, b, lambda x, y: x < y)


def cmple(a: Operand, b: Operand) -> Int16x8:
    """Lane mask of ``a <= b``."""
    return _compare(a, b, lambda x, y: x <= y)


# --- Range limits ---

def minimum(a: Operand, b: Operand) -> Int16x8:
    """Lane-wise minimum; ``b`` may be a scalar applied to every lane."""
    return _lanewise(a, b, min)


def maximum(a: Operand, b: Operand) -> Int16x8:
    """Lane-wise maximum; ``b`` may be a scalar applied to every lane."""
    return _lanewise(a, b, max)


def clamp(a: Operand, low: Operand, high: Operand) -> Int16x8:
    """Return ``min(max(a, low), high)`` lane by lane; bounds may be scalars."""
    return minimum(maximum(a, low), high)
import pytest

from sevenleaf.int16x8 import INT16_MAX, INT16_MIN, Int16x8
from sevenleaf.int16x8_arith import (
    add,
    adds,
    clamp,
    cmpeq,
    cmpge,
    cmpgt,
    cmple,
    cmplt,
    cmpne,
    maximum,
    minimum,
    mul,
    neg,
    shl,
    shr,
    shra,
    sub,
    subs,
)

A = Int16x8(-7, 3, 0, 120, -300, 5, 9, -1)
B = Int16x8(4, 3, -2, 100, 250, -5, 9, 7)
ALL_TRUE = Int16x8.splat(-1)
ZERO = Int16x8()


def test_add_sub_round_trip():
    assert sub(add(A, B), B) == A


def test_add_negation_gives_zero():
    assert add(A, neg(A)) == ZERO


def test_sub_self_is_zero():
    assert sub(A, A) == ZERO


def test_add_wraps_at_max():
    assert add(Int16x8.splat(INT16_MAX), 1) == Int16x8.splat(INT16_MIN)


def test_adds_saturates_both_ways():
    assert adds(Int16x8.splat(INT16_MAX), 1) == Int16x8.splat(INT16_MAX)
    assert adds(Int16x8.splat(INT16_MIN), -1) == Int16x8.splat(INT16_MIN)


def test_subs_saturates_both_ways():
    assert subs(Int16x8.splat(INT16_MIN), 1) == Int16x8.splat(INT16_MIN)
    assert subs(Int16x8.splat(INT16_MAX), -1) == Int16x8.splat(INT16_MAX)


def test_adds_matches_add_without_overflow():
    assert adds(A, B) == add(A, B)
    assert subs(A, B) == sub(A, B)


def test_neg_of_minimum_stays_minimum():
    assert neg(Int16x8.splat(INT16_MIN)) == Int16x8.splat(INT16_MIN)


def test_neg_twice_is_identity():
    assert neg(neg(A)) == A


def test_mul_identity_and_zero():
    assert mul(A, 1) == A
    assert mul(A, 0) == ZERO


def test_mul_by_minus_one_is_negation():
    assert mul(A, -1) == neg(A)


def test_shl_then_shra_round_trip_for_small_values():
    assert shra(shl(A, 4), 4) == A


def test_shr_fills_with_zero():
    result = shr(Int16x8.splat(-1), 15)
    assert result == Int16x8.splat(1)


def test_shr_result_is_non_negative_for_nonzero_shift():
    assert all(lane >= 0 for lane in shr(A, 1))


def test_shra_keeps_sign():
    assert shra(Int16x8.splat(-1), 15) == Int16x8.splat(-1)


def test_shift_zero_is_identity():
    assert shl(A, 0) == A
    assert shr(A, 0) == A
    assert shra(A, 0) == A


@pytest.mark.parametrize("shift", [shl, shr, shra])
@pytest.mark.parametrize("n", [-1, 16])
def test_shift_count_out_of_range(shift, n):
    with pytest.raises(ValueError):
        shift(A, n)


def test_cmpeq_self_is_all_true():
    assert cmpeq(A, A) == ALL_TRUE
    assert cmpne(A, A) == ZERO


def test_cmpne_is_inverse_of_cmpeq():
    assert cmpne(A, B) == ~cmpeq(A, B)


def test_cmpge_is_inverse_of_cmplt():
    assert cmpge(A, B) == ~cmplt(A, B)
    assert cmple(A, B) == ~cmpgt(A, B)


def test_cmpgt_and_cmplt_swap():
    assert cmpgt(A, B) == cmplt(B, A)


def test_comparison_lanes_are_masks():
    for mask in (cmpeq(A, B), cmpgt(A, B), cmplt(A, B)):
        assert set(mask) <= {-1, 0}


def test_cmpeq_marks_equal_lanes():
    mask = cmpeq(A, B)
    for a, b, m in zip(A, B, mask):
        assert (m == -1) == (a == b)


def test_minimum_maximum_bounds():
    low = minimum(A, B)
    high = maximum(A, B)
    for a, b, lo, hi in zip(A, B, low, high):
        assert lo <= a and lo <= b
        assert hi >= a and hi >= b
        assert {lo, hi} == {a, b}


def test_minimum_with_scalar():
    assert all(lane <= 0 for lane in minimum(A, 0))
    assert all(lane >= 0 for lane in maximum(A, 0))


def test_clamp_keeps_lanes_in_range():
    result = clamp(A, -10, 10)
    for original, lane in zip(A, result):
        assert -10 <= lane <= 10
        if -10 <= original <= 10:
            assert lane == original


def test_clamp_with_vector_bounds_matches_scalar_bounds():
    assert clamp(A, Int16x8.splat(-5), Int16x8.splat(5)) == clamp(A, -5, 5)


def test_rejects_non_vector_operand():
    with pytest.raises(TypeError):
        add(A, "x")
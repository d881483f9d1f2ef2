"""Unit tests for core-preserving and single-digit reduction."""
import pytest

from numerocalc.reduction import MASTER_NUMBERS, digit_sum, reduce_core, reduce_single


# ── reduce_core ──────────────────────────────────────────────────────

def test_reduce_core_single_digit_unchanged():
    for n in range(0, 10):
        assert reduce_core(n) == n


def test_reduce_core_master_numbers_preserved():
    assert reduce_core(11) == 11
    assert reduce_core(22) == 22
    assert reduce_core(33) == 33


def test_reduce_core_finds_master_on_the_way():
    assert reduce_core(29) == 11    # 2+9=11 → master
    assert reduce_core(38) == 11    # 3+8=11 → master
    assert reduce_core(1993) == 22  # 1+9+9+3=22 → master


def test_reduce_core_multi_step():
    assert reduce_core(99) == 9     # 9+9=18 → 1+8=9
    assert reduce_core(1990) == 1   # 19 → 10 → 1
    assert reduce_core(44) == 8


# ── reduce_single ────────────────────────────────────────────────────

def test_reduce_single_ignores_masters():
    assert reduce_single(11) == 2
    assert reduce_single(22) == 4
    assert reduce_single(33) == 6
    assert reduce_single(29) == 2   # 11 → 2


def test_reduce_single_zero_is_boundary():
    assert reduce_single(0) == 0
    assert reduce_core(0) == 0


# ── properties ───────────────────────────────────────────────────────

def test_both_reductions_idempotent():
    for n in range(0, 5000):
        core = reduce_core(n)
        single = reduce_single(n)
        assert reduce_core(core) == core
        assert reduce_single(single) == single


def test_output_ranges():
    core_range = set(range(1, 10)) | MASTER_NUMBERS
    for n in range(1, 5000):
        assert reduce_core(n) in core_range
        assert 1 <= reduce_single(n) <= 9


def test_digit_sum():
    assert digit_sum(0) == 0
    assert digit_sum(1990) == 19


def test_negative_input_rejected():
    with pytest.raises(ValueError):
        reduce_core(-1)
    with pytest.raises(ValueError):
        reduce_single(-5)

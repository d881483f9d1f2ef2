"""Digit reduction in two modes: master-preserving and plain digital root."""
from __future__ import annotations

MASTER_NUMBERS: frozenset[int] = frozenset({11, 22, 33})


def digit_sum(n: int) -> int:
    return sum(int(d) for d in str(n))


def _check_non_negative(n: int) -> None:
    if n < 0:
        raise ValueError(f"cannot reduce a negative number: {n}")


def reduce_core(n: int) -> int:
    """Reduce n to 1-9, stopping early at master numbers 11, 22, 33."""
    _check_non_negative(n)
    while n > 9 and n not in MASTER_NUMBERS:
        n = digit_sum(n)
    return n


def reduce_single(n: int) -> int:
    """Reduce n to 1-9 with no master-number exception (0 stays 0)."""
    _check_non_negative(n)
    while n > 9:
        n = digit_sum(n)
    return n

"""Elementary row operations, applied in place to a work matrix.

Type I   swap_rows(M, a, b)              R_a <-> R_b
Type II  scale_row(M, r, alpha)          R_r <- alpha * R_r        (alpha != 0)
Type III replace_row(M, i, p, factor)    R_i <- R_i - factor * R_p
"""
from __future__ import annotations

from rreftools.arith.rational import Rational
from rreftools.elim.matrix import WorkMatrix


def swap_rows(M: WorkMatrix, a: int, b: int) -> None:
    M[a], M[b] = M[b], M[a]


def scale_row(M: WorkMatrix, r: int, alpha: Rational) -> None:
    if alpha.is_zero():
        raise ArithmeticError(f"cannot scale row {r} by zero")
    M[r] = [c * alpha for c in M[r]]


def replace_row(M: WorkMatrix, i: int, p: int, factor: Rational) -> None:
    pivot = M[p]
    M[i] = [c - factor * pc for c, pc in zip(M[i], pivot)]

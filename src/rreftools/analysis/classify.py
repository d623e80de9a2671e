"""Interpret a reduced augmented matrix as a linear system."""
from __future__ import annotations

import logging
from typing import List, Optional, Sequence, Tuple

from rreftools.analysis.result import SolutionType
from rreftools.arith.rational import Rational

logger = logging.getLogger(__name__)

_SUBSCRIPT_DIGITS = str.maketrans("0123456789", "₀₁₂₃₄₅₆₇₈₉")


def subscript(num: int) -> str:
    """Unicode subscript digits, e.g. 12 -> '₁₂'."""
    return str(num).translate(_SUBSCRIPT_DIGITS)


def format_variable(index: int, prefix: str = "x", subscripts: bool = False) -> str:
    """Name of the 0-based *index*-th variable: x1, x2, ... (or x₁, x₂, ...)."""
    label = subscript(index + 1) if subscripts else str(index + 1)
    return f"{prefix}{label}"


def is_inconsistent(M: Sequence[Sequence[Rational]]) -> bool:
    """True iff some row reads 0 = c with c != 0."""
    for row in M:
        if all(c.is_zero() for c in row[:-1]) and not row[-1].is_zero():
            return True
    return False


def free_columns(n_vars: int, pivot_cols: Sequence[int]) -> List[int]:
    pivots = set(pivot_cols)
    return [j for j in range(n_vars) if j not in pivots]


def _parametric_expression(
    row: Sequence[Rational],
    free_vars: Sequence[int],
    param_prefix: str,
    subscripts: bool,
) -> str:
    expr = row[-1].to_display_string()
    for k, fv in enumerate(free_vars):
        coef = row[fv]
        if coef.is_zero():
            continue
        # moved to the right-hand side
        moved = coef.negate()
        param = format_variable(k, param_prefix, subscripts)
        mag = moved.abs().to_display_string()
        term = param if mag == "1" else f"{mag}{param}"
        sign = "-" if moved < 0 else "+"
        expr += f" {sign} {term}"
    return expr


def classify(
    M: Sequence[Sequence[Rational]],
    pivot_cols: Sequence[int],
    *,
    var_prefix: str = "x",
    param_prefix: str = "t",
    subscripts: bool = False,
) -> Tuple[SolutionType, Optional[Tuple[str, ...]], Tuple[int, ...], int]:
    """
    Classify the system described by the final matrix *M*.

    pivot_cols: strictly increasing pivot columns found during elimination.

    Returns (solution_type, solution, free_variables, rank).
    """
    n_vars = len(M[0]) - 1
    rank = sum(1 for c in pivot_cols if c < n_vars)
    free_vars = free_columns(n_vars, pivot_cols)

    def name(j: int) -> str:
        return format_variable(j, var_prefix, subscripts)

    if is_inconsistent(M):
        logger.debug("inconsistent system (rank %d, %d variables)", rank, n_vars)
        return SolutionType.INCONSISTENT, None, tuple(free_vars), rank

    solution: List[str] = []
    if rank < n_vars:
        logger.debug("infinite solutions, free columns %s", free_vars)
        for j in range(n_vars):
            if j in free_vars:
                param = format_variable(free_vars.index(j), param_prefix, subscripts)
                solution.append(f"{name(j)} = {param} (free)")
            else:
                row = M[pivot_cols.index(j)]
                expr = _parametric_expression(row, free_vars, param_prefix, subscripts)
                solution.append(f"{name(j)} = {expr}")
        return SolutionType.INFINITE, tuple(solution), tuple(free_vars), rank

    # rank == n_vars: pivot row of variable j is row j
    for j in range(n_vars):
        solution.append(f"{name(j)} = {M[j][-1].to_display_string()}")
    return SolutionType.UNIQUE, tuple(solution), (), rank

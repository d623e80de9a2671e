"""Gauss-Jordan elimination over the rationals with a recorded step log."""
from __future__ import annotations

import logging
from typing import List, Optional, Sequence, Tuple

from rreftools.analysis.classify import classify
from rreftools.analysis.result import SolverResult
from rreftools.elim.matrix import Matrix, WorkMatrix, snapshot, to_matrix, working_copy
from rreftools.elim.rowops import replace_row, scale_row, swap_rows
from rreftools.elim.steps import StepRecorder

logger = logging.getLogger(__name__)


def _eliminate(M: WorkMatrix, recorder: Optional[StepRecorder] = None) -> List[int]:
    """
    Reduce work matrix *M* to RREF in place, column by column.

    The pivot is the first non-zero entry at or below the current pivot row.
    Every column is processed, the augmented one included.

    Returns the pivot columns in increasing order.
    """
    n_rows, n_cols = len(M), len(M[0])
    pivot_cols: List[int] = []
    rp = 0

    for col in range(n_cols):
        if rp >= n_rows:
            break

        # Find pivot
        piv = None
        for r in range(rp, n_rows):
            if not M[r][col].is_zero():
                piv = r
                break
        if piv is None:
            continue

        # Swap pivot row into position
        if piv != rp:
            swap_rows(M, rp, piv)
            if recorder is not None:
                recorder.swap(M, rp, piv)

        # Scale pivot row
        pivot = M[rp][col]
        if not pivot.is_one():
            alpha = pivot.reciprocal()
            scale_row(M, rp, alpha)
            if recorder is not None:
                recorder.scale(M, rp, alpha)

        # Eliminate column in all other rows
        for r in range(n_rows):
            if r != rp and not M[r][col].is_zero():
                factor = M[r][col]
                replace_row(M, r, rp, factor)
                if recorder is not None:
                    recorder.replace(M, r, rp, factor)

        logger.debug("pivot at (%d, %d)", rp, col)
        pivot_cols.append(col)
        rp += 1

    return pivot_cols


def row_reduce(
    M: Sequence[Sequence[object]],
) -> Tuple[Matrix, List[int], int]:
    """Reduced row echelon form over the rationals, without a step log.

    Returns (rref_matrix, pivot_columns, rank) where rank counts every
    column, the last one included.
    """
    work = working_copy(to_matrix(M))
    pivot_cols = _eliminate(work)
    return snapshot(work), pivot_cols, len(pivot_cols)


def exact_rank(M: Sequence[Sequence[object]]) -> int:
    """Exact rank of a rational matrix via Gaussian elimination.

    Every column counts, the last one included. SolverResult.rank differs:
    it ignores a pivot in the augmented column, so for an inconsistent
    system exact_rank(M) == solve_rref(M).rank + 1.
    """
    _, _, rank = row_reduce(M)
    return rank


def solve_rref(
    input_matrix: Sequence[Sequence[object]],
    *,
    var_prefix: str = "x",
    param_prefix: str = "t",
    subscripts: bool = False,
) -> SolverResult:
    """
    Solve the augmented system *input_matrix* (last column = constants).

    Cells may be text ("3", "-1.5", "2/7", "" ...) or numbers. The shape is
    validated before any arithmetic (ValidationError); the input itself is
    never modified.

    var_prefix / param_prefix / subscripts control how the solution
    expressions name variables and free parameters.
    """
    initial = to_matrix(input_matrix)
    work = working_copy(initial)
    recorder = StepRecorder(initial)

    pivot_cols = _eliminate(work, recorder)
    rref = snapshot(work)

    solution_type, solution, free_vars, rank = classify(
        rref,
        pivot_cols,
        var_prefix=var_prefix,
        param_prefix=param_prefix,
        subscripts=subscripts,
    )
    logger.debug(
        "solved %dx%d system: %s, rank %d, %d steps",
        len(rref), len(rref[0]), solution_type.value, rank, len(recorder),
    )

    return SolverResult(
        rref=rref,
        steps=recorder.steps,
        solution_type=solution_type,
        solution=solution,
        free_variables=free_vars,
        rank=rank,
        pivot_columns=tuple(pivot_cols),
        var_prefix=var_prefix,
        subscripts=subscripts,
    )

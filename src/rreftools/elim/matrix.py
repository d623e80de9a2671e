"""Matrix shape validation, cell conversion and snapshots.

A *Matrix* is an immutable tuple of equal-length rows of Rational values.
The engine works on a *WorkMatrix* (list of lists) that it owns privately.
"""
from __future__ import annotations

from collections.abc import Sequence
from typing import List, Tuple

from rreftools.arith.rational import Rational
from rreftools.errors import ValidationError

Matrix = Tuple[Tuple[Rational, ...], ...]
WorkMatrix = List[List[Rational]]


def validate_shape(cells: object) -> tuple[int, int]:
    """
    Check that *cells* is a rectangular sequence of rows with
    rows >= 1 and cols >= 2.

    Returns (n_rows, n_cols).
    """
    if isinstance(cells, (str, bytes)) or not isinstance(cells, Sequence):
        raise ValidationError("matrix must be a sequence of rows")
    n_rows = len(cells)
    if n_rows < 1:
        raise ValidationError("matrix must have at least one row")

    n_cols = None
    for i, row in enumerate(cells):
        if isinstance(row, (str, bytes)) or not isinstance(row, Sequence):
            raise ValidationError(f"row {i} is not a sequence of cells")
        if n_cols is None:
            n_cols = len(row)
        elif len(row) != n_cols:
            raise ValidationError(
                f"ragged matrix: row {i} has {len(row)} cells, expected {n_cols}"
            )

    if n_cols < 2:
        raise ValidationError(
            f"matrix needs at least 2 columns (coefficients + constants), got {n_cols}"
        )
    return n_rows, n_cols


def to_matrix(cells: Sequence[Sequence[object]]) -> Matrix:
    """Validate *cells* and parse every entry with Rational.parse."""
    validate_shape(cells)
    return tuple(tuple(Rational.parse(c) for c in row) for row in cells)


def working_copy(M: Sequence[Sequence[Rational]]) -> WorkMatrix:
    """Fresh list-of-lists copy; never shares row objects with *M*."""
    return [list(row) for row in M]


def snapshot(M: Sequence[Sequence[Rational]]) -> Matrix:
    """Independent immutable copy of the current state of *M*."""
    return tuple(tuple(row) for row in M)


def matrix_to_strings(M: Sequence[Sequence[Rational]]) -> list[list[str]]:
    return [[c.to_display_string() for c in row] for row in M]

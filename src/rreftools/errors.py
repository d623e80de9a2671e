from __future__ import annotations


class ValidationError(ValueError):
    """Raised when an input matrix has the wrong shape.

    The matrix must have at least one row, at least two columns (one
    coefficient column plus the augmented column) and rows of equal length.
    """

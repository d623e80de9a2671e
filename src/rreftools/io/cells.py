"""Cell-level input handling and plain-text export of matrices and results."""
from __future__ import annotations

import re
from typing import List, Sequence

from rreftools.analysis.result import SolverResult
from rreftools.arith.rational import Rational
from rreftools.elim.matrix import Matrix, matrix_to_strings, to_matrix
from rreftools.viz.labels import describe_solution, describe_step

_DISALLOWED = re.compile(r"[^0-9/.\-]")


def sanitize_cell(text: str) -> str:
    """Drop every character other than digits, '/', '.' and '-'."""
    return _DISALLOWED.sub("", text)


def parse_matrix(cells: Sequence[Sequence[object]]) -> Matrix:
    """Validated Rational matrix from raw cells (text or numbers)."""
    return to_matrix(cells)


def parse_matrix_text(text: str) -> List[List[str]]:
    """
    Split a block of text into a cell matrix.

    One row per non-empty line; cells separated by whitespace, ',' or ';'.
    A lone '|' (augmented bar) is ignored. Cells are returned as text, so
    shape validation and parsing still happen in the solver.
    """
    rows: List[List[str]] = []
    for line in text.splitlines():
        line = line.strip()
        if not line or line.startswith("#"):
            continue
        cells = [c for c in re.split(r"[\s,;]+", line.replace("|", " ")) if c]
        rows.append(cells)
    return rows


def format_matrix(M: Sequence[Sequence[Rational]], *, augmented: bool = True) -> str:
    """
    Right-aligned text grid; with *augmented* a '|' separates the
    constants column.

      [ 1  0 | 2 ]
      [ 0  1 | 3 ]
    """
    cells = matrix_to_strings(M)
    n_cols = len(cells[0])
    widths = [max(len(row[j]) for row in cells) for j in range(n_cols)]

    lines = []
    for row in cells:
        parts = [row[j].rjust(widths[j]) for j in range(n_cols)]
        if augmented:
            body = "  ".join(parts[:-1]) + " | " + parts[-1]
        else:
            body = "  ".join(parts)
        lines.append(f"[ {body} ]")
    return "\n".join(lines)


def result_to_text(result: SolverResult) -> str:
    """Plain-text report: every step, the final RREF and the solution."""
    out: List[str] = []
    for i, step in enumerate(result.steps):
        out.append(f"Step {i}: {describe_step(step)}")
        out.append(format_matrix(step.matrix))
        out.append("")

    out.append("RREF:")
    out.append(format_matrix(result.rref))
    out.append("")
    out.append(describe_solution(result))
    out.append(f"Rank: {result.rank}")
    if result.solution is not None:
        out.extend(result.solution)
    return "\n".join(out)

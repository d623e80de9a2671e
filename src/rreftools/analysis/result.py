from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Optional, Tuple

from rreftools.elim.matrix import Matrix, matrix_to_strings
from rreftools.elim.steps import Step


class SolutionType(str, Enum):
    UNIQUE = "unique"
    INFINITE = "infinite"
    INCONSISTENT = "inconsistent"


@dataclass(frozen=True)
class SolverResult:
    """
    Outcome of one solve call.

    rref:           final matrix
    steps:          Initial step followed by every Swap/Scale/Replace applied
    solution_type:  UNIQUE | INFINITE | INCONSISTENT
    solution:       one expression per variable, None when INCONSISTENT
    free_variables: coefficient columns without a pivot, ascending
    rank:           number of pivots among the coefficient columns
    pivot_columns:  every pivot column found, augmented column included
    var_prefix, subscripts: naming used for variables in the solution lines
    """

    rref: Matrix
    steps: Tuple[Step, ...]
    solution_type: SolutionType
    solution: Optional[Tuple[str, ...]]
    free_variables: Tuple[int, ...]
    rank: int
    pivot_columns: Tuple[int, ...]
    var_prefix: str = "x"
    subscripts: bool = False

    @property
    def num_variables(self) -> int:
        return len(self.rref[0]) - 1

    def to_dict(self) -> dict:
        """Plain dict with display strings, keyed the way UI consumers expect."""
        return {
            "rref": matrix_to_strings(self.rref),
            "steps": [_step_to_dict(s) for s in self.steps],
            "solutionType": self.solution_type.value,
            "solution": list(self.solution) if self.solution is not None else None,
            "freeVariables": list(self.free_variables),
            "rank": self.rank,
        }


def _step_to_dict(step: Step) -> dict:
    return {
        "operation": step.kind.value,
        "rows": list(step.rows),
        "scalar": step.scalar.to_display_string() if step.scalar is not None else None,
        "matrix": matrix_to_strings(step.matrix),
        "highlightRows": list(step.highlight_rows),
    }

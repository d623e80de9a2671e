"""Structured, replayable log of elementary row operations."""
from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Iterable, List, Optional, Sequence, Tuple

from rreftools.arith.rational import Rational
from rreftools.elim.matrix import Matrix, snapshot, working_copy
from rreftools.elim.rowops import replace_row, scale_row, swap_rows


class StepKind(str, Enum):
    INITIAL = "initial"
    SWAP = "swap"
    SCALE = "scale"
    REPLACE = "replace"


@dataclass(frozen=True)
class Step:
    """
    One recorded operation and the matrix immediately after it.

    rows:   ()              for INITIAL
            (a, b)          for SWAP       R_a <-> R_b
            (r,)            for SCALE      R_r <- scalar * R_r
            (target, pivot) for REPLACE    R_target <- R_target - scalar * R_pivot
    scalar: Rational for SCALE and REPLACE, otherwise None.
    """

    kind: StepKind
    rows: Tuple[int, ...]
    scalar: Optional[Rational]
    matrix: Matrix

    @property
    def highlight_rows(self) -> Tuple[int, ...]:
        return self.rows


class StepRecorder:
    """Append-only step log; each record call snapshots the matrix."""

    def __init__(self, initial: Sequence[Sequence[Rational]]):
        self._steps: List[Step] = [
            Step(kind=StepKind.INITIAL, rows=(), scalar=None, matrix=snapshot(initial))
        ]

    def swap(self, M, a: int, b: int) -> None:
        self._steps.append(Step(StepKind.SWAP, (a, b), None, snapshot(M)))

    def scale(self, M, r: int, alpha: Rational) -> None:
        self._steps.append(Step(StepKind.SCALE, (r,), alpha, snapshot(M)))

    def replace(self, M, target: int, pivot: int, factor: Rational) -> None:
        self._steps.append(Step(StepKind.REPLACE, (target, pivot), factor, snapshot(M)))

    @property
    def steps(self) -> Tuple[Step, ...]:
        return tuple(self._steps)

    def __len__(self) -> int:
        return len(self._steps)


def apply_step(M, step: Step) -> None:
    """Apply the operation described by *step* to work matrix *M* in place."""
    if step.kind is StepKind.INITIAL:
        return
    if step.kind is StepKind.SWAP:
        a, b = step.rows
        swap_rows(M, a, b)
    elif step.kind is StepKind.SCALE:
        (r,) = step.rows
        scale_row(M, r, step.scalar)
    elif step.kind is StepKind.REPLACE:
        target, pivot = step.rows
        replace_row(M, target, pivot, step.scalar)
    else:
        raise ValueError(f"unknown step kind {step.kind!r}")


def replay(initial: Sequence[Sequence[Rational]], steps: Iterable[Step]) -> Matrix:
    """
    Re-apply the recorded operations to *initial*.

    Only kind/rows/scalar are used; the stored snapshots are ignored, so the
    result can be compared against them (or against the final RREF).
    """
    M = working_copy(initial)
    for step in steps:
        apply_step(M, step)
    return snapshot(M)

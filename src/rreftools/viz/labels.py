"""Human-readable labels for recorded steps and solve verdicts."""
from __future__ import annotations

from rreftools.analysis.classify import format_variable, subscript
from rreftools.analysis.result import SolutionType, SolverResult
from rreftools.elim.steps import Step, StepKind


def describe_step(step: Step) -> str:
    """Elementary-matrix label for *step*; rows are shown 1-based.

    The Type III label shows the multiple that is added, i.e. the negated
    stored factor: R_i + (-f) x R_p.
    """
    if step.kind is StepKind.INITIAL:
        return "Initial augmented matrix"

    if step.kind is StepKind.SWAP:
        a, b = (r + 1 for r in step.rows)
        return f"[Type I] E{subscript(a)}{subscript(b)} : Swap R{a} ↔ R{b}"

    if step.kind is StepKind.SCALE:
        r = step.rows[0] + 1
        s = step.scalar.to_display_string()
        return f"[Type II] E{subscript(r)}({s}) : Multiply R{r} by {s}"

    i, p = (r + 1 for r in step.rows)
    s = step.scalar.negate().to_display_string()
    return f"[Type III] E{subscript(i)}{subscript(p)}({s}) : R{i} + ({s}) × R{p}"


def describe_solution(result: SolverResult) -> str:
    """One-line verdict for a finished solve."""
    if result.solution_type is SolutionType.INCONSISTENT:
        return "⚠ System is INCONSISTENT (0 = non-zero detected)"
    if result.solution_type is SolutionType.INFINITE:
        names = ", ".join(
            format_variable(j, result.var_prefix, result.subscripts)
            for j in result.free_variables
        )
        return f"∞ Infinite solutions (Free variables: {names})"
    return "✓ Unique solution found"

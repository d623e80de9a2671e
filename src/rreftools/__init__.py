"""
rreftools: exact Gauss-Jordan elimination over the rationals with a
replayable step log and solution classification for augmented systems.
"""

from .errors import ValidationError
from .arith.rational import Rational

# Elimination
from .elim.matrix import Matrix, to_matrix, matrix_to_strings
from .elim.steps import StepKind, Step, StepRecorder, replay
from .elim.engine import solve_rref, row_reduce, exact_rank

# Analysis
from .analysis.result import SolutionType, SolverResult
from .analysis.classify import classify, format_variable

# Presentation
from .io.cells import sanitize_cell, parse_matrix, parse_matrix_text, format_matrix, result_to_text
from .viz.labels import describe_step, describe_solution
from .viz.draw import draw_step, draw_steps

# Checks
from .utils.checks import is_rref

__all__ = [
    "ValidationError",
    "Rational",
    # Elimination
    "Matrix",
    "to_matrix",
    "matrix_to_strings",
    "StepKind",
    "Step",
    "StepRecorder",
    "replay",
    "solve_rref",
    "row_reduce",
    "exact_rank",
    # Analysis
    "SolutionType",
    "SolverResult",
    "classify",
    "format_variable",
    # Presentation
    "sanitize_cell",
    "parse_matrix",
    "parse_matrix_text",
    "format_matrix",
    "result_to_text",
    "describe_step",
    "describe_solution",
    "draw_step",
    "draw_steps",
    # Checks
    "is_rref",
]

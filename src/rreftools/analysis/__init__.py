from .result import SolutionType, SolverResult
from .classify import classify, format_variable, free_columns, is_inconsistent

__all__ = [
    "SolutionType",
    "SolverResult",
    "classify",
    "format_variable",
    "free_columns",
    "is_inconsistent",
]

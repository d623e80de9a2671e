from .matrix import Matrix, validate_shape, to_matrix, working_copy, snapshot, matrix_to_strings
from .rowops import swap_rows, scale_row, replace_row
from .steps import StepKind, Step, StepRecorder, apply_step, replay

__all__ = [
    "Matrix",
    "validate_shape",
    "to_matrix",
    "working_copy",
    "snapshot",
    "matrix_to_strings",
    "swap_rows",
    "scale_row",
    "replace_row",
    "StepKind",
    "Step",
    "StepRecorder",
    "apply_step",
    "replay",
]

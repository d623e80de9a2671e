from .checks import is_rref, leading_column

__all__ = [
    "is_rref",
    "leading_column",
]

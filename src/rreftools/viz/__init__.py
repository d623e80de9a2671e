from .labels import describe_step, describe_solution
from .draw import draw_step, draw_steps

__all__ = [
    "describe_step",
    "describe_solution",
    "draw_step",
    "draw_steps",
]

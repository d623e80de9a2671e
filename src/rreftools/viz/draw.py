from __future__ import annotations

import matplotlib.pyplot as plt

from rreftools.analysis.classify import format_variable
from rreftools.analysis.result import SolverResult
from rreftools.elim.matrix import matrix_to_strings
from rreftools.elim.steps import Step
from .labels import describe_solution, describe_step


def draw_step(
    step: Step,
    *,
    ax=None,
    title: str | None = None,
    var_prefix: str = "x",
    highlight_color: str = "#ffe08a",
    augmented_color: str = "#e8eef7",
    font_size: int = 12,
):
    """
    Render one step snapshot as a table on *ax* (a new figure if None).

    Rows touched by the step are filled with *highlight_color*; the
    constants column is shaded with *augmented_color*.
    Coefficient columns are headed with *var_prefix* names (x1, x2, ...).
    Returns the matplotlib Axes.
    """
    if ax is None:
        n_rows = len(step.matrix)
        n_cols = len(step.matrix[0])
        _, ax = plt.subplots(figsize=(1.1 * n_cols + 1, 0.6 * n_rows + 1))

    cells = matrix_to_strings(step.matrix)
    n_cols = len(cells[0])
    col_labels = [format_variable(j, var_prefix) for j in range(n_cols - 1)] + ["b"]
    row_labels = [f"R{i + 1}" for i in range(len(cells))]

    ax.set_axis_off()
    ax.set_title(title if title is not None else describe_step(step), fontsize=font_size)

    table = ax.table(
        cellText=cells,
        rowLabels=row_labels,
        colLabels=col_labels,
        loc="center",
        cellLoc="center",
    )
    table.auto_set_font_size(False)
    table.set_fontsize(font_size)

    for i in range(len(cells)):
        for j in range(n_cols):
            cell = table[i + 1, j]
            if i in step.highlight_rows:
                cell.set_facecolor(highlight_color)
            elif j == n_cols - 1:
                cell.set_facecolor(augmented_color)

    return ax


def draw_steps(
    result: SolverResult,
    *,
    save_prefix: str | None = None,
    dpi: int = 200,
):
    """
    Draw every recorded step of *result*, one figure per step.

    If save_prefix is set, saves PNG files:
      {save_prefix}_step0.png, ..., {save_prefix}_step{n-1}.png
    and returns their paths; otherwise shows each figure and returns [].
    """
    saved: list[str] = []
    last = len(result.steps) - 1

    for i, step in enumerate(result.steps):
        fig, ax = plt.subplots(
            figsize=(1.1 * len(step.matrix[0]) + 1, 0.6 * len(step.matrix) + 1.5)
        )
        title = f"Step {i}: {describe_step(step)}"
        if i == last:
            title += f"\n{describe_solution(result)}"
        draw_step(step, ax=ax, title=title, var_prefix=result.var_prefix)

        plt.tight_layout()

        if save_prefix:
            path = f"{save_prefix}_step{i}.png"
            plt.savefig(path, dpi=dpi)
            plt.close(fig)
            saved.append(path)
        else:
            plt.show()

    return saved

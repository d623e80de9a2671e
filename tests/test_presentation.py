"""Tests for rreftools.viz.labels and rreftools.io.cells."""
import re

from rreftools import Rational, solve_rref, to_matrix
from rreftools.io.cells import (
    format_matrix,
    parse_matrix,
    parse_matrix_text,
    result_to_text,
    sanitize_cell,
)
from rreftools.viz.labels import describe_solution, describe_step, subscript

SYSTEM_A = [[2, 1, -1, 8], [-3, -1, 2, -11], [-2, 1, 2, -3]]
SYSTEM_B = [[1, 2, 1, 0, 5], [2, 4, 0, 1, 8], [3, 6, 1, 1, 13]]
SYSTEM_C = [[1, 1, 1, 6], [1, 1, 1, 8], [0, 0, 1, 3]]


# --- labels ---

def test_subscript():
    assert subscript(3) == "₃"
    assert subscript(12) == "₁₂"


def test_describe_initial():
    step = solve_rref(SYSTEM_A).steps[0]
    assert describe_step(step) == "Initial augmented matrix"


def test_describe_each_kind():
    steps = solve_rref(SYSTEM_C).steps
    labels = [describe_step(s) for s in steps]
    assert labels[1] == "[Type III] E₂₁(-1) : R2 + (-1) × R1"
    assert labels[2] == "[Type I] E₂₃ : Swap R2 ↔ R3"
    assert labels[4] == "[Type II] E₃(1/2) : Multiply R3 by 1/2"


def test_describe_scale_fraction():
    step = solve_rref(SYSTEM_A).steps[1]
    assert describe_step(step) == "[Type II] E₁(1/2) : Multiply R1 by 1/2"


def test_describe_solution():
    assert describe_solution(solve_rref(SYSTEM_A)) == "✓ Unique solution found"
    assert describe_solution(solve_rref(SYSTEM_B)) == "∞ Infinite solutions (Free variables: x2, x4)"
    assert describe_solution(solve_rref(SYSTEM_C)) == "⚠ System is INCONSISTENT (0 = non-zero detected)"


# --- cells ---

def test_sanitize_cell():
    assert sanitize_cell("1a/3b") == "1/3"
    assert sanitize_cell(" -2.5 ") == "-2.5"
    assert sanitize_cell("x") == ""


def test_parse_matrix():
    M = parse_matrix([["1/2", ""], [3, "-"]])
    assert M == ((Rational(1, 2), Rational(0)), (Rational(3), Rational(0)))


def test_parse_matrix_text():
    text = "2 1 | 3\n\n# comment\n4, 5; 6\n"
    assert parse_matrix_text(text) == [["2", "1", "3"], ["4", "5", "6"]]


def test_parse_matrix_text_empty():
    assert parse_matrix_text("  \n") == []


# --- text export ---

def test_format_matrix_augmented():
    M = to_matrix([[1, 0, 2], [0, 1, -3]])
    assert format_matrix(M) == "[ 1  0 |  2 ]\n[ 0  1 | -3 ]"


def test_format_matrix_plain():
    M = to_matrix([["1/2", 10]])
    assert format_matrix(M, augmented=False) == "[ 1/2  10 ]"


def test_result_to_text():
    text = result_to_text(solve_rref(SYSTEM_A))
    assert text.startswith("Step 0: Initial augmented matrix")
    assert "RREF:" in text
    assert "✓ Unique solution found" in text
    assert "Rank: 3" in text
    assert text.endswith("x3 = -1")


def test_result_to_text_inconsistent_has_no_solution_lines():
    text = result_to_text(solve_rref(SYSTEM_C))
    assert "x1 =" not in text
    assert text.endswith("Rank: 2")


def test_describe_solution_uses_result_naming():
    result = solve_rref(SYSTEM_B, var_prefix="y", subscripts=True)
    assert describe_solution(result) == "∞ Infinite solutions (Free variables: y₂, y₄)"


def test_result_to_text_uses_var_prefix():
    text = result_to_text(solve_rref(SYSTEM_B, var_prefix="y"))
    assert "Free variables: y2, y4" in text
    assert "y1 = 4 - 2t1 - 1/2t2" in text
    assert re.search(r"\bx\d", text) is None
    assert "x₂" not in text

"""Tests for rreftools.arith.rational."""
from fractions import Fraction

import pytest

from rreftools.arith.rational import Rational


# --- normalisation ---

def test_lowest_terms():
    r = Rational(6, 8)
    assert (r.numerator, r.denominator) == (3, 4)


def test_sign_moves_to_numerator():
    r = Rational(2, -4)
    assert (r.numerator, r.denominator) == (-1, 2)


def test_zero_has_unit_denominator():
    r = Rational(0, -5)
    assert (r.numerator, r.denominator) == (0, 1)


def test_zero_denominator_rejected():
    with pytest.raises(ZeroDivisionError):
        Rational(1, 0)


def test_bool_arguments_become_ints():
    r = Rational(True)
    assert (r.numerator, r.denominator) == (1, 1)
    assert type(r.numerator) is int
    assert str(r) == "1"


def test_big_integers_stay_exact():
    big = 10 ** 40 + 1
    r = Rational(big, 3 * big)
    assert r == Rational(1, 3)


# --- parse: text ---

@pytest.mark.parametrize("text", ["", "   ", "-"])
def test_parse_blank_is_zero(text):
    assert Rational.parse(text) == Rational(0)


@pytest.mark.parametrize(
    "text, expected",
    [
        ("42", Rational(42)),
        ("-7", Rational(-7)),
        (" 5 ", Rational(5)),
        ("1.25", Rational(5, 4)),
        ("-0.5", Rational(-1, 2)),
        (".5", Rational(1, 2)),
        ("3/6", Rational(1, 2)),
        ("-2/4", Rational(-1, 2)),
        ("2/-4", Rational(-1, 2)),
        ("1 / 3", Rational(1, 3)),
    ],
)
def test_parse_text(text, expected):
    assert Rational.parse(text) == expected


@pytest.mark.parametrize("text", ["abc", "1.2.3", "1/0", "1/2/3", "--1", "/", "1.5/2"])
def test_parse_malformed_is_zero(text):
    assert Rational.parse(text) == Rational(0)


# --- parse: numbers ---

def test_parse_int():
    assert Rational.parse(3) == Rational(3)


def test_parse_fraction():
    assert Rational.parse(Fraction(2, 4)) == Rational(1, 2)


def test_parse_float_uses_shortest_repr():
    assert Rational.parse(0.1) == Rational(1, 10)
    assert Rational.parse(-2.5) == Rational(-5, 2)


def test_parse_nan_is_zero():
    assert Rational.parse(float("nan")) == Rational(0)


def test_parse_rational_passthrough():
    r = Rational(1, 3)
    assert Rational.parse(r) is r


def test_parse_unknown_type_is_zero():
    assert Rational.parse(None) == Rational(0)


# --- arithmetic ---

def test_add():
    assert Rational(1, 2).add(Rational(1, 3)) == Rational(5, 6)


def test_subtract():
    assert Rational(1, 2) - Rational(1, 3) == Rational(1, 6)


def test_multiply():
    assert Rational(2, 3) * Rational(3, 4) == Rational(1, 2)


def test_divide():
    assert Rational(1, 2) / Rational(1, 4) == Rational(2)


def test_divide_by_zero_is_arithmetic_error():
    with pytest.raises(ArithmeticError):
        Rational(1, 2).divide(Rational(0))


def test_reciprocal():
    assert Rational(-3, 7).reciprocal() == Rational(-7, 3)
    with pytest.raises(ZeroDivisionError):
        Rational(0).reciprocal()


def test_negate_and_abs():
    assert -Rational(1, 2) == Rational(-1, 2)
    assert abs(Rational(-1, 2)) == Rational(1, 2)


def test_int_operands():
    assert Rational(1, 2) + 1 == Rational(3, 2)
    assert 1 - Rational(1, 2) == Rational(1, 2)
    assert 2 * Rational(1, 4) == Rational(1, 2)
    assert 1 / Rational(1, 4) == Rational(4)


def test_operations_return_new_instances():
    a = Rational(1, 2)
    b = a + Rational(0)
    assert a == b
    assert (a.numerator, a.denominator) == (1, 2)


# --- predicates and comparison ---

def test_is_zero():
    assert Rational(0).is_zero()
    assert not Rational(1, 9).is_zero()


def test_is_one():
    assert Rational(1).is_one()
    assert Rational(2, 2).is_one()
    assert not Rational(-1).is_one()
    assert not Rational(1, 2).is_one()


def test_compare():
    assert Rational(1, 3).compare(Rational(1, 2)) == -1
    assert Rational(2, 4).compare(Rational(1, 2)) == 0
    assert Rational(-1, 3).compare(Rational(-1, 2)) == 1


def test_ordering():
    values = [Rational(1, 2), Rational(-3), Rational(1, 3), Rational(0)]
    assert sorted(values) == [Rational(-3), Rational(0), Rational(1, 3), Rational(1, 2)]


def test_hashable():
    assert len({Rational(1, 2), Rational(2, 4), Rational(3, 6)}) == 1


def test_equal_to_int():
    r = Rational(1)
    assert r.compare(1) == 0
    assert r <= 1 and r >= 1
    assert r == 1
    assert 1 == r
    assert Rational(1, 2) != 0
    assert Rational(-4, 2) == -2


def test_hash_agrees_with_int():
    assert hash(Rational(3)) == hash(3)
    assert {Rational(3): "a"}[3] == "a"


def test_not_equal_to_other_types():
    assert Rational(1, 2) != "1/2"
    assert Rational(1) != None  # noqa: E711


# --- display ---

@pytest.mark.parametrize(
    "value, text",
    [
        (Rational(0), "0"),
        (Rational(0, 7), "0"),
        (Rational(-3), "-3"),
        (Rational(5, 4), "5/4"),
        (Rational(1, -2), "-1/2"),
    ],
)
def test_display_string(value, text):
    assert value.to_display_string() == text
    assert str(value) == text

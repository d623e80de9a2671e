"""Exact rational numbers stored as a reduced numerator/denominator pair."""
from __future__ import annotations

import logging
import math
import numbers
import re
from dataclasses import dataclass
from decimal import Decimal
from typing import Union

logger = logging.getLogger(__name__)

_FRACTION_RE = re.compile(r"^([+-]?\d+)\s*/\s*([+-]?\d+)$")
_DECIMAL_RE = re.compile(r"^([+-]?)(\d*)(?:\.(\d*))?$")

RationalLike = Union["Rational", int]


@dataclass(frozen=True, eq=False)
class Rational:
    """
    Signed exact fraction.

    Invariants: denominator > 0 and gcd(|numerator|, denominator) == 1.
    Zero is always 0/1. Instances are immutable; arithmetic returns new ones.
    """

    numerator: int
    denominator: int = 1

    def __post_init__(self) -> None:
        n, d = int(self.numerator), int(self.denominator)
        if d == 0:
            raise ZeroDivisionError(f"Rational({n}, 0)")
        if d < 0:
            n, d = -n, -d
        g = math.gcd(n, d)
        if g > 1:
            n, d = n // g, d // g
        if n == 0:
            d = 1
        object.__setattr__(self, "numerator", n)
        object.__setattr__(self, "denominator", d)

    # ------------------------------------------------------------------
    # Construction
    # ------------------------------------------------------------------

    @classmethod
    def zero(cls) -> Rational:
        return cls(0, 1)

    @classmethod
    def one(cls) -> Rational:
        return cls(1, 1)

    @classmethod
    def parse(cls, value: object) -> Rational:
        """
        Lenient conversion of a cell value.

        Accepts Rational, int, bool, any numbers.Rational (e.g. Fraction),
        finite floats, and text: "", "-", integers, decimals and "p/d".
        Anything that cannot be read (including "p/0") becomes zero.
        """
        if isinstance(value, Rational):
            return value
        if isinstance(value, numbers.Rational):
            return cls(int(value.numerator), int(value.denominator))
        if isinstance(value, float):
            if not math.isfinite(value):
                logger.debug("non-finite cell %r treated as 0", value)
                return cls.zero()
            n, d = Decimal(repr(value)).as_integer_ratio()
            return cls(n, d)
        if isinstance(value, str):
            return cls._parse_text(value)

        logger.debug("unsupported cell type %s treated as 0", type(value).__name__)
        return cls.zero()

    @classmethod
    def _parse_text(cls, text: str) -> Rational:
        s = text.strip()
        if s in ("", "-", "+"):
            return cls.zero()

        m = _FRACTION_RE.match(s)
        if m:
            p, d = int(m.group(1)), int(m.group(2))
            if d == 0:
                logger.debug("zero denominator in %r treated as 0", text)
                return cls.zero()
            return cls(p, d)

        m = _DECIMAL_RE.match(s)
        if m and (m.group(2) or m.group(3)):
            sign, whole, frac = m.group(1), m.group(2) or "0", m.group(3) or ""
            n = int(whole + frac)
            if sign == "-":
                n = -n
            return cls(n, 10 ** len(frac))

        logger.debug("unparseable cell %r treated as 0", text)
        return cls.zero()

    # ------------------------------------------------------------------
    # Predicates and comparison
    # ------------------------------------------------------------------

    def is_zero(self) -> bool:
        return self.numerator == 0

    def is_one(self) -> bool:
        return self.numerator == 1 and self.denominator == 1

    def compare(self, other: RationalLike) -> int:
        """Return -1, 0 or 1 as self is less than, equal to or greater than other."""
        o = _coerce(other)
        lhs = self.numerator * o.denominator
        rhs = o.numerator * self.denominator
        return (lhs > rhs) - (lhs < rhs)

    def __lt__(self, other: RationalLike) -> bool:
        return self.compare(other) < 0

    def __le__(self, other: RationalLike) -> bool:
        return self.compare(other) <= 0

    def __gt__(self, other: RationalLike) -> bool:
        return self.compare(other) > 0

    def __ge__(self, other: RationalLike) -> bool:
        return self.compare(other) >= 0

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, (Rational, int)):
            return NotImplemented
        o = _coerce(other)
        return self.numerator == o.numerator and self.denominator == o.denominator

    def __hash__(self) -> int:
        if self.denominator == 1:
            return hash(self.numerator)
        return hash((self.numerator, self.denominator))

    def __bool__(self) -> bool:
        return self.numerator != 0

    # ------------------------------------------------------------------
    # Arithmetic
    # ------------------------------------------------------------------

    def add(self, other: RationalLike) -> Rational:
        o = _coerce(other)
        return Rational(
            self.numerator * o.denominator + o.numerator * self.denominator,
            self.denominator * o.denominator,
        )

    def subtract(self, other: RationalLike) -> Rational:
        return self.add(_coerce(other).negate())

    def multiply(self, other: RationalLike) -> Rational:
        o = _coerce(other)
        return Rational(self.numerator * o.numerator, self.denominator * o.denominator)

    def divide(self, other: RationalLike) -> Rational:
        o = _coerce(other)
        if o.is_zero():
            raise ZeroDivisionError(f"division of {self} by zero")
        return Rational(self.numerator * o.denominator, self.denominator * o.numerator)

    def reciprocal(self) -> Rational:
        return Rational.one().divide(self)

    def negate(self) -> Rational:
        return Rational(-self.numerator, self.denominator)

    def abs(self) -> Rational:
        return Rational(abs(self.numerator), self.denominator)

    __add__ = add
    __sub__ = subtract
    __mul__ = multiply
    __truediv__ = divide
    __neg__ = negate
    __abs__ = abs

    def __radd__(self, other: int) -> Rational:
        return _coerce(other).add(self)

    def __rsub__(self, other: int) -> Rational:
        return _coerce(other).subtract(self)

    def __rmul__(self, other: int) -> Rational:
        return _coerce(other).multiply(self)

    def __rtruediv__(self, other: int) -> Rational:
        return _coerce(other).divide(self)

    # ------------------------------------------------------------------
    # Display
    # ------------------------------------------------------------------

    def to_display_string(self) -> str:
        if self.denominator == 1:
            return str(self.numerator)
        return f"{self.numerator}/{self.denominator}"

    def __str__(self) -> str:
        return self.to_display_string()

    def __repr__(self) -> str:
        return f"Rational({self.numerator}, {self.denominator})"


def _coerce(value: RationalLike) -> Rational:
    if isinstance(value, Rational):
        return value
    if isinstance(value, int):
        return Rational(value, 1)
    raise TypeError(f"cannot combine Rational with {type(value).__name__}")

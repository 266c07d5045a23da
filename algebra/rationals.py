"""The field QQ of rational numbers, backed by fractions.Fraction."""

from fractions import Fraction

from algebra.errors import DomainError, NotInvertibleError
from algebra.ring import Field


class Rationals(Field):
    """Fractions kept in lowest terms with a positive denominator."""

    def add(self, x, y):
        return x + y

    def sub(self, x, y):
        return x - y

    def mul(self, x, y):
        return x * y

    def div(self, x, y):
        if y == 0:
            raise NotInvertibleError(f"cannot divide {x} by zero")
        return Fraction(x) / y

    def neg(self, e):
        return -e

    def zero(self):
        return Fraction(0)

    def one(self):
        return Fraction(1)

    def equal(self, x, y) -> bool:
        return x == y

    def from_int(self, n: int):
        return Fraction(n)

    def scale(self, k: int, e):
        return k * e

    def parse(self, text: str):
        """Accepts integers and "a/b" literals."""
        try:
            return Fraction(text)
        except (ValueError, ZeroDivisionError):
            raise DomainError(f"not a rational literal: {text!r}") from None

    def __call__(self, numerator, denominator=1):
        if denominator == 0:
            raise NotInvertibleError("zero denominator")
        return Fraction(numerator, denominator)

    def __repr__(self):
        return "QQ"


QQ = Rationals()

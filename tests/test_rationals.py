"""Tests for the rational field."""

from fractions import Fraction

import pytest

from algebra.errors import DomainError, NotInvertibleError
from algebra.rationals import QQ


def test_lowest_terms():
    x = QQ(6, -4)
    assert x.numerator == -3 and x.denominator == 2


def test_arithmetic():
    half, third = QQ(1, 2), QQ(1, 3)
    assert QQ.add(half, third) == QQ(5, 6)
    assert QQ.sub(half, third) == QQ(1, 6)
    assert QQ.mul(half, third) == QQ(1, 6)
    assert QQ.div(half, third) == QQ(3, 2)
    assert QQ.scale(4, half) == 2


def test_field_capabilities():
    assert QQ.inv(QQ(-2, 3)) == QQ(-3, 2)
    assert QQ.exact_div(QQ(1), QQ(4)) == Fraction(1, 4)
    assert QQ.is_unit(QQ(1, 9))
    assert not QQ.is_unit(QQ.zero())


def test_division_by_zero():
    with pytest.raises(NotInvertibleError):
        QQ.div(QQ(1), QQ(0))
    with pytest.raises(NotInvertibleError):
        QQ.inv(QQ.zero())
    with pytest.raises(NotInvertibleError):
        QQ(1, 0)


def test_parse():
    assert QQ.parse("3/6") == Fraction(1, 2)
    assert QQ.parse("-7") == -7
    with pytest.raises(DomainError):
        QQ.parse("x")
    with pytest.raises(DomainError):
        QQ.parse("1/0")

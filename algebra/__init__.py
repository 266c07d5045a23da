"""Exact algebra: number theory, generic polynomials and matrices."""

from algebra.errors import (AlgebraError, DimensionError, DomainError,
                            NotInvertibleError, RankDeficientError,
                            UnsupportedOperationError)
from algebra.ring import Ring, Domain, Field
from algebra.integers import Integers, ZZ
from algebra.rationals import Rationals, QQ
from algebra.field import FieldElement, PrimeField, GF, PRIME
from algebra.polynomial import Polynomials
from algebra.matrix import Matrices, LUDecomposition
from algebra import rng

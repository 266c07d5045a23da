"""Square matrices over any coefficient domain.

Matrices(ring, n) is the ring M_n(ring). Determinants use cofactor
expansion, so they stay division-free and work over any commutative ring,
including polynomial rings: the characteristic polynomial is the
determinant of xI - A computed by a Matrices engine over Polynomials(ring).
"""

import logging
from typing import NamedTuple

from algebra.errors import DimensionError, NotInvertibleError, RankDeficientError
from algebra.polynomial import Polynomials
from algebra.ring import Domain

_logger = logging.getLogger(__name__)


class LUDecomposition(NamedTuple):
    """P*A == L * D^-1 * U with every entry kept inside the ring."""

    P: list
    L: list
    D: list
    U: list


class Matrices(Domain):
    """n x n matrices over `ring`, stored as lists of rows."""

    def __init__(self, ring: Domain, n: int):
        if n < 1:
            raise DimensionError(f"dimension must be at least 1, got {n}")
        self.ring = ring
        self.n = n
        self.polynomials = Polynomials(ring)

    def __repr__(self):
        return f"M_{self.n}({self.ring!r})"

    def _check(self, *matrices):
        n = self.n
        for A in matrices:
            if len(A) != n or any(len(row) != n for row in A):
                raise DimensionError(
                    f"expected {n}x{n} got {len(A)}x{[len(row) for row in A]}")

    # -- construction -------------------------------------------------

    def zero(self) -> list[list]:
        zero = self.ring.zero
        return [[zero() for _ in range(self.n)] for _ in range(self.n)]

    def one(self) -> list[list]:
        return self.from_int(1)

    def from_int(self, k: int) -> list[list]:
        """k times the identity."""
        A = self.zero()
        for i in range(self.n):
            A[i][i] = self.ring.from_int(k)
        return A

    def copy(self, A) -> list[list]:
        return [list(row) for row in A]

    # -- ring operations ----------------------------------------------

    def add(self, A, B) -> list[list]:
        self._check(A, B)
        add = self.ring.add
        return [[add(a, b) for a, b in zip(ra, rb)] for ra, rb in zip(A, B)]

    def sub(self, A, B) -> list[list]:
        self._check(A, B)
        sub = self.ring.sub
        return [[sub(a, b) for a, b in zip(ra, rb)] for ra, rb in zip(A, B)]

    def neg(self, A) -> list[list]:
        self._check(A)
        return [[self.ring.neg(a) for a in row] for row in A]

    def mul(self, A, B) -> list[list]:
        self._check(A, B)
        ring = self.ring
        C = self.zero()
        for i in range(self.n):
            for j in range(self.n):
                for k in range(self.n):
                    C[i][j] = ring.add(C[i][j], ring.mul(A[i][k], B[k][j]))
        return C

    def scale(self, r, A) -> list[list]:
        """r*A for r a Python int or a ring element."""
        self._check(A)
        if isinstance(r, int):
            return [[self.ring.scale(r, a) for a in row] for row in A]
        return [[self.ring.mul(r, a) for a in row] for row in A]

    def transpose(self, A) -> list[list]:
        self._check(A)
        return [list(col) for col in zip(*A)]

    def equal(self, A, B) -> bool:
        self._check(A, B)
        return all(self.ring.equal(a, b)
                   for ra, rb in zip(A, B) for a, b in zip(ra, rb))

    def trace(self, A):
        self._check(A)
        return self.ring.sum(*(A[i][i] for i in range(self.n)))

    def is_unit(self, A) -> bool:
        return self.ring.is_unit(self.det(A))

    def inv(self, A) -> list[list]:
        return self.inverse(A)

    # -- determinants -------------------------------------------------

    def _minor(self, A, i: int, j: int) -> list[list]:
        return [row[:j] + row[j + 1:] for r, row in enumerate(A) if r != i]

    def minor(self, A, i: int, j: int) -> list[list]:
        """A without row i and column j."""
        self._check(A)
        if not (0 <= i < self.n and 0 <= j < self.n):
            raise DimensionError(f"minor ({i}, {j}) outside {self.n}x{self.n}")
        return self._minor(A, i, j)

    def _det(self, A):
        ring = self.ring
        if len(A) == 1:
            return A[0][0]
        total = ring.zero()
        for i, row in enumerate(A):
            a = row[0]
            if ring.is_zero(a):
                continue
            c = self._det(self._minor(A, i, 0))
            total = ring.add(total, ring.mul(a, ring.scale((-1) ** i, c)))
        return total

    def det(self, A):
        """Cofactor expansion along column 0; O(n!), meant for small n."""
        self._check(A)
        return self._det(A)

    def cofactor(self, A) -> list[list]:
        """C[i][j] = (-1)^(i+j) * det(minor(A, i, j))."""
        self._check(A)
        if self.n == 1:
            return self.one()
        ring = self.ring
        return [[ring.scale((-1) ** (i + j), self._det(self._minor(A, i, j)))
                 for j in range(self.n)]
                for i in range(self.n)]

    def adjugate(self, A) -> list[list]:
        return self.transpose(self.cofactor(A))

    def inverse(self, A) -> list[list]:
        """adj(A) / det(A); the determinant must be a unit of the ring."""
        d = self.det(A)
        if not self.ring.is_unit(d):
            raise NotInvertibleError(
                f"determinant {d} is not a unit in {self.ring!r}")
        return self.scale(self.ring.inv(d), self.adjugate(A))

    def lu_decomposition(self, A) -> LUDecomposition:
        """Fraction-free (Bareiss) LU with row pivoting.

        Every division by the previous pivot is exact, so integer input keeps
        integer entries throughout.
        """
        self._check(A)
        ring = self.ring
        n = self.n
        U = self.copy(A)
        P = self.one()
        L = self.one()
        D = self.zero()
        oldpivot = ring.one()
        for k in range(n - 1):
            if ring.is_zero(U[k][k]):
                for kpivot in range(k + 1, n):
                    if not ring.is_zero(U[kpivot][k]):
                        break
                else:
                    raise RankDeficientError(f"no pivot in column {k}")
                _logger.debug("LU pivot: swapping rows %d and %d", k, kpivot)
                U[k], U[kpivot] = U[kpivot], U[k]
                P[k], P[kpivot] = P[kpivot], P[k]
                L[k][:k], L[kpivot][:k] = L[kpivot][:k], L[k][:k]
            pivot = U[k][k]
            L[k][k] = pivot
            D[k][k] = ring.mul(oldpivot, pivot)
            for i in range(k + 1, n):
                L[i][k] = U[i][k]
                for j in range(k + 1, n):
                    U[i][j] = ring.exact_div(
                        ring.sub(ring.mul(pivot, U[i][j]),
                                 ring.mul(U[k][j], U[i][k])),
                        oldpivot)
                U[i][k] = ring.zero()
            oldpivot = pivot
        D[n - 1][n - 1] = oldpivot
        return LUDecomposition(P, L, D, U)

    def characteristic_polynomial(self, A) -> list:
        """det(xI - A) as a coefficient list; monic of degree n."""
        self._check(A)
        polys = self.polynomials
        B = [[polys.sub(polys.x(1) if i == j else polys.zero(),
                        polys.from_element(A[i][j]))
              for j in range(self.n)]
             for i in range(self.n)]
        _logger.debug("characteristic polynomial of a %dx%d matrix", self.n, self.n)
        return Matrices(polys, self.n).det(B)

    def to_string(self, A) -> str:
        return "[" + ",".join(
            "[" + ",".join(str(a) for a in row) + "]" for row in A) + "]"

"""Dense polynomial arithmetic over any coefficient domain."""

import logging
import re

from algebra.errors import DomainError, NotInvertibleError, UnsupportedOperationError
from algebra.ring import Domain, Field

_logger = logging.getLogger(__name__)

_TERM_SPLIT = re.compile(r"\s(?=[+-])")


class Polynomials(Domain):
    """Polynomials over `ring` as coefficient lists; f[i] multiplies x^i.

    The zero polynomial is []. Results are always fresh lists and may carry
    trailing zero coefficients; equal() and trim() see through them. The
    engine is itself a Domain, so it can be the entry ring of a matrix engine.
    """

    def __init__(self, ring: Domain):
        self.ring = ring

    def __repr__(self):
        return f"{self.ring!r}[x]"

    # -- construction -------------------------------------------------

    def zero(self) -> list:
        return []

    def one(self) -> list:
        return [self.ring.one()]

    def x(self, n: int = 1) -> list:
        """The monomial x^n."""
        if n < 0:
            raise DomainError(f"negative exponent {n}")
        f = [self.ring.zero() for _ in range(n)]
        f.append(self.ring.one())
        return f

    def from_element(self, a) -> list:
        return [a]

    def from_int(self, n: int) -> list:
        return [self.ring.from_int(n)]

    def deg(self, f) -> int:
        return len(f) - 1

    def trim(self, f) -> list:
        """f without trailing zero coefficients."""
        n = len(f)
        while n and self.ring.is_zero(f[n - 1]):
            n -= 1
        return list(f[:n])

    def leading(self, f):
        t = self.trim(f)
        return t[-1] if t else self.ring.zero()

    # -- ring operations ----------------------------------------------

    def add(self, f, g) -> list:
        if len(f) < len(g):
            f, g = g, f
        h = [self.ring.add(a, b) for a, b in zip(f, g)]
        h.extend(f[len(g):])
        return h

    def sub(self, f, g) -> list:
        ring = self.ring
        h = [ring.sub(a, b) for a, b in zip(f, g)]
        h.extend(f[len(g):])
        h.extend(ring.neg(b) for b in g[len(f):])
        return h

    def neg(self, f) -> list:
        return [self.ring.neg(a) for a in f]

    def mul(self, f, g) -> list:
        """Schoolbook product; result has deg(f) + deg(g) + 1 coefficients."""
        if not f or not g:
            return []
        ring = self.ring
        h = [ring.zero() for _ in range(len(f) + len(g) - 1)]
        for i, a in enumerate(f):
            if ring.is_zero(a):
                continue
            for j, b in enumerate(g):
                h[i + j] = ring.add(h[i + j], ring.mul(a, b))
        return h

    def scale(self, k, f) -> list:
        """Multiply every coefficient by k (a Python int or a ring element)."""
        if isinstance(k, int):
            return [self.ring.scale(k, a) for a in f]
        return [self.ring.mul(k, a) for a in f]

    def equal(self, f, g) -> bool:
        f, g = self.trim(f), self.trim(g)
        return len(f) == len(g) and all(
            self.ring.equal(a, b) for a, b in zip(f, g))

    def is_zero(self, f) -> bool:
        return not self.trim(f)

    def is_unit(self, f) -> bool:
        """Unit constants only.

        Exact when the coefficient ring is an integral domain. Over rings
        with nilpotents, such as Z/12, a unit plus a nilpotent tail like
        1 + 6x is invertible but reported as not a unit.
        """
        t = self.trim(f)
        return len(t) == 1 and self.ring.is_unit(t[0])

    def inv(self, f) -> list:
        if not self.is_unit(f):
            raise NotInvertibleError(f"{self.to_string(f)} is not a unit")
        return [self.ring.inv(self.trim(f)[0])]

    # -- calculus and evaluation --------------------------------------

    def derivative(self, f) -> list:
        ring = self.ring
        return [ring.mul(ring.from_int(i + 1), f[i + 1])
                for i in range(len(f) - 1)]

    def evaluate(self, f, x):
        """Evaluate f at x using Horner's method."""
        ring = self.ring
        result = ring.zero()
        for coeff in reversed(f):
            result = ring.add(ring.mul(result, x), coeff)
        return result

    # -- division -----------------------------------------------------

    def _long_division(self, f, g):
        g = self.trim(g)
        if not g:
            raise NotInvertibleError("polynomial division by zero")
        ring = self.ring
        r = self.trim(f)
        dg = len(g) - 1
        q = [ring.zero() for _ in range(max(len(r) - dg, 0))]
        while r and len(r) > dg:
            k = len(r) - 1 - dg
            c = ring.exact_div(r[-1], g[-1])
            q[k] = c
            for i, b in enumerate(g):
                r[k + i] = ring.sub(r[k + i], ring.mul(c, b))
            r = self.trim(r)
        return self.trim(q), r

    def _require_field(self, operation: str):
        if not isinstance(self.ring, Field):
            raise UnsupportedOperationError(
                f"{operation} needs field coefficients, got {self.ring!r}")

    def divmod(self, f, g) -> tuple[list, list]:
        """(q, r) with f == q*g + r and deg(r) < deg(g)."""
        self._require_field("divmod")
        return self._long_division(f, g)

    def exact_div(self, f, g) -> list:
        """f / g when g divides f; needs exact division of coefficients."""
        q, r = self._long_division(f, g)
        if r:
            raise DomainError(
                f"{self.to_string(g)} does not divide {self.to_string(f)}")
        return q

    def gcd(self, f, g) -> list:
        """Monic greatest common divisor; gcd(0, 0) is 0."""
        self._require_field("gcd")
        a, b = self.trim(f), self.trim(g)
        while b:
            a, b = b, self._long_division(a, b)[1]
        if not a:
            return []
        return self.scale(self.ring.inv(a[-1]), a)

    def coprime(self, f, g) -> bool:
        """True if the ideals (f) and (g) sum to (1)."""
        return self.deg(self.gcd(f, g)) == 0

    # -- invariants ---------------------------------------------------

    def sylvester(self, f, g) -> list[list]:
        """Sylvester matrix: deg(g) shifted rows of f, then deg(f) of g."""
        ring = self.ring
        n, m = self.deg(f), self.deg(g)
        size = n + m
        A = [[ring.zero() for _ in range(size)] for _ in range(size)]
        for i in range(n + 1):
            for j in range(m + 1):
                if j < m:
                    A[j][i + j] = f[n - i]
                if i < n:
                    A[m + i][i + j] = g[m - j]
        return A

    def resultant(self, f, g):
        from algebra.matrix import Matrices

        f, g = self.trim(f), self.trim(g)
        if not f or not g:
            return self.ring.zero()
        size = self.deg(f) + self.deg(g)
        if size == 0:
            return self.ring.one()
        _logger.debug("resultant via %dx%d Sylvester matrix", size, size)
        return Matrices(self.ring, size).det(self.sylvester(f, g))

    def discriminant(self, f):
        """(-1)^(n(n-1)/2) * resultant(f, f') / lc(f)."""
        f = self.trim(f)
        n = self.deg(f)
        if n < 1:
            raise DomainError("discriminant needs degree at least 1")
        r = self.resultant(f, self.derivative(f))
        s = -1 if (n * (n - 1) // 2) % 2 else 1
        return self.ring.exact_div(self.ring.scale(s, r), f[n])

    # -- notation -----------------------------------------------------

    def to_string(self, f, var: str = "x") -> str:
        """Descending "a_n*x^n + ... + a_1*x + a_0"; zero terms omitted."""
        terms = []
        for i in range(len(f) - 1, -1, -1):
            a = f[i]
            if self.ring.is_zero(a):
                continue
            text = str(a)
            negative = text.startswith("-")
            if negative:
                text = text[1:]
            if i > 0:
                monomial = var if i == 1 else f"{var}^{i}"
                text = monomial if text == "1" else f"{text}*{monomial}"
            terms.append((negative, text))
        if not terms:
            return "0"
        negative, text = terms[0]
        parts = ["-" + text if negative else text]
        for negative, text in terms[1:]:
            parts.append(f"- {text}" if negative else f"+ {text}")
        return " ".join(parts)

    def from_string(self, s: str, var: str = "x") -> list:
        """Parse the notation written by to_string (any spacing of terms)."""
        ring = self.ring
        monomial = re.compile(
            rf"^(?:(?P<coef>[^*]+)\*)?{re.escape(var)}(?:\^(?P<exp>\d+))?$")
        coeffs = {}
        for term in _TERM_SPLIT.split(s.strip()):
            term = "".join(term.split())
            sign = ""
            if term[:1] in ("+", "-"):
                sign, term = term[0], term[1:]
            if not term:
                raise DomainError(f"empty term in {s!r}")
            match = monomial.match(term)
            if match:
                coef = match.group("coef")
                c = ring.parse(coef) if coef else ring.one()
                degree = int(match.group("exp") or 1)
            else:
                c = ring.parse(term)
                degree = 0
            if sign == "-":
                c = ring.neg(c)
            coeffs[degree] = ring.add(coeffs.get(degree, ring.zero()), c)
        f = [coeffs.get(i, ring.zero()) for i in range(max(coeffs) + 1)]
        return self.trim(f)

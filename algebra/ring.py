"""Capability contract every coefficient domain implements.

The polynomial and matrix engines only ever touch elements through these
methods, so any class implementing them (integers, rationals, prime fields,
and the engines themselves) can serve as a coefficient domain.
"""

from abc import ABC, abstractmethod

from algebra.errors import DomainError, UnsupportedOperationError


class Ring(ABC):
    """Commutative ring: additive group with associative multiplication."""

    @abstractmethod
    def add(self, x, y):
        ...

    @abstractmethod
    def sub(self, x, y):
        ...

    @abstractmethod
    def mul(self, x, y):
        ...

    @abstractmethod
    def zero(self):
        ...

    @abstractmethod
    def equal(self, x, y) -> bool:
        ...

    @abstractmethod
    def is_unit(self, e) -> bool:
        """True iff e has a multiplicative inverse in this ring."""

    def neg(self, e):
        return self.sub(self.zero(), e)

    def is_zero(self, e) -> bool:
        return self.equal(e, self.zero())

    def scale(self, k: int, e):
        """Integer multiple k*e, computed by doubling so any ring gets it."""
        if k < 0:
            return self.neg(self.scale(-k, e))
        result = self.zero()
        while k:
            if k & 1:
                result = self.add(result, e)
            e = self.add(e, e)
            k >>= 1
        return result

    def sum(self, *values):
        result = self.zero()
        for v in values:
            result = self.add(result, v)
        return result

    def inv(self, e):
        raise UnsupportedOperationError(
            f"{type(self).__name__} cannot invert elements")

    def exact_div(self, x, y):
        raise UnsupportedOperationError(
            f"{type(self).__name__} has no exact division")


class Domain(Ring):
    """Ring with a multiplicative identity and an embedding of the integers."""

    @abstractmethod
    def one(self):
        ...

    def from_int(self, n: int):
        return self.scale(n, self.one())

    def prod(self, *values):
        result = self.one()
        for v in values:
            result = self.mul(result, v)
        return result

    def parse(self, text: str):
        """Element from its textual form; integer literals by default."""
        try:
            n = int(text)
        except ValueError:
            raise DomainError(
                f"{type(self).__name__} cannot parse {text!r}") from None
        return self.from_int(n)


class Field(Domain):
    """Domain in which every non-zero element is a unit."""

    @abstractmethod
    def div(self, x, y):
        ...

    def is_unit(self, e) -> bool:
        return not self.is_zero(e)

    def inv(self, e):
        return self.div(self.one(), e)

    def exact_div(self, x, y):
        return self.div(x, y)

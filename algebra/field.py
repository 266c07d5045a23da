"""Prime fields F_p; the default prime is the Mersenne prime 2^127 - 1."""

from algebra import rng
from algebra.errors import DomainError, NotInvertibleError
from algebra.integers import is_probable_prime
from algebra.ring import Field

PRIME = (1 << 127) - 1  # 2^127 - 1


class FieldElement:
    """Element of the finite field F_p."""

    __slots__ = ('value', 'prime')

    def __init__(self, value: int, prime: int = PRIME):
        self.prime = prime
        self.value = value % prime

    def _coerce(self, other):
        if isinstance(other, int):
            return FieldElement(other, self.prime)
        if isinstance(other, FieldElement):
            if other.prime != self.prime:
                raise DomainError(
                    f"cannot mix F_{self.prime} and F_{other.prime} elements")
            return other
        return None

    def __add__(self, other):
        other = self._coerce(other)
        if other is None:
            return NotImplemented
        return FieldElement(self.value + other.value, self.prime)

    def __radd__(self, other):
        return self.__add__(other)

    def __sub__(self, other):
        other = self._coerce(other)
        if other is None:
            return NotImplemented
        return FieldElement(self.value - other.value, self.prime)

    def __rsub__(self, other):
        other = self._coerce(other)
        if other is None:
            return NotImplemented
        return FieldElement(other.value - self.value, self.prime)

    def __mul__(self, other):
        other = self._coerce(other)
        if other is None:
            return NotImplemented
        return FieldElement(self.value * other.value, self.prime)

    def __rmul__(self, other):
        return self.__mul__(other)

    def __truediv__(self, other):
        other = self._coerce(other)
        if other is None:
            return NotImplemented
        return self * other.inverse()

    def __rtruediv__(self, other):
        other = self._coerce(other)
        if other is None:
            return NotImplemented
        return other * self.inverse()

    def __neg__(self):
        return FieldElement(-self.value, self.prime)

    def __pow__(self, exp):
        if isinstance(exp, FieldElement):
            exp = exp.value
        if exp < 0:
            return self.inverse() ** -exp
        return FieldElement(pow(self.value, exp, self.prime), self.prime)

    def __eq__(self, other):
        if isinstance(other, int):
            return self.value == (other % self.prime)
        if isinstance(other, FieldElement):
            return self.prime == other.prime and self.value == other.value
        return NotImplemented

    def __hash__(self):
        return hash((self.value, self.prime))

    def __repr__(self):
        return f"F({self.value})"

    def __str__(self):
        return str(self.value)

    def __bool__(self):
        return self.value != 0

    def inverse(self):
        """Multiplicative inverse via Fermat's little theorem: a^{p-2} mod p."""
        if self.value == 0:
            raise NotInvertibleError("Cannot invert zero")
        return FieldElement(pow(self.value, self.prime - 2, self.prime), self.prime)

    @staticmethod
    def random(prime: int = PRIME):
        """Return a random non-zero field element."""
        return FieldElement(rng.randbelow(prime - 1) + 1, prime)


class PrimeField(Field):
    """F_p as a coefficient domain; calling it builds elements."""

    def __init__(self, prime: int = PRIME):
        if not is_probable_prime(prime):
            raise DomainError(f"{prime} is not prime")
        self.prime = prime

    def __call__(self, value: int) -> FieldElement:
        return FieldElement(value, self.prime)

    def add(self, x, y):
        return x + y

    def sub(self, x, y):
        return x - y

    def mul(self, x, y):
        return x * y

    def div(self, x, y):
        return x / y

    def neg(self, e):
        return -e

    def zero(self):
        return FieldElement(0, self.prime)

    def one(self):
        return FieldElement(1, self.prime)

    def equal(self, x, y) -> bool:
        return x == y

    def is_unit(self, e) -> bool:
        return bool(e)

    def inv(self, e):
        return e.inverse()

    def from_int(self, n: int):
        return FieldElement(n, self.prime)

    def scale(self, k: int, e):
        return e * k

    def random(self) -> FieldElement:
        return FieldElement.random(self.prime)

    def __eq__(self, other):
        return isinstance(other, PrimeField) and other.prime == self.prime

    def __hash__(self):
        return hash(self.prime)

    def __repr__(self):
        return f"GF({self.prime})"


def GF(prime: int = PRIME) -> PrimeField:
    return PrimeField(prime)

"""Number theory over Python integers, and the integer domain ZZ."""

import logging
import math
from functools import reduce

from algebra import rng
from algebra.errors import DomainError, NotInvertibleError
from algebra.ring import Domain

_logger = logging.getLogger(__name__)

SMALL_PRIMES = (2, 3, 5, 7, 11, 13, 17, 19, 23, 29, 31, 37, 41)
# Miller-Rabin with every base in SMALL_PRIMES is exact below this bound.
DETERMINISTIC_LIMIT = 3317044064679887385961981
MILLER_RABIN_ROUNDS = 20


def sign(n: int) -> int:
    return (n > 0) - (n < 0)


def abs_(n: int) -> int:
    return -n if n < 0 else n


def sum_(*values: int) -> int:
    return reduce(lambda acc, v: acc + v, values, 0)


def prod(*values: int) -> int:
    return reduce(lambda acc, v: acc * v, values, 1)


def max_(*values: int) -> int:
    if not values:
        raise DomainError("max_ needs at least one value")
    return max(values)


def min_(*values: int) -> int:
    if not values:
        raise DomainError("min_ needs at least one value")
    return min(values)


def gcd(*values: int) -> int:
    """Non-negative gcd of all values; 0 when every value is 0."""
    return reduce(math.gcd, values, 0)


def lcm(*values: int) -> int:
    result = 1
    for v in values:
        if v == 0:
            return 0
        result = abs_(result * v) // math.gcd(result, v)
    return result


def _xgcd_pair(a: int, b: int) -> tuple[int, int, int]:
    old_r, r = a, b
    old_s, s = 1, 0
    old_t, t = 0, 1
    while r:
        q = old_r // r
        old_r, r = r, old_r - q * r
        old_s, s = s, old_s - q * s
        old_t, t = t, old_t - q * t
    return old_r, old_s, old_t


def xgcd(*values: int) -> tuple[int, list[int]]:
    """Extended gcd: (d, [c_1..c_n]) with sum(c_i * a_i) == d == gcd(a_i).

    Folds pairwise extended Euclid from the left; each fold rewrites the
    coefficients found so far in terms of the new combined remainder.
    """
    if not values:
        return 0, []
    d, coeffs = values[0], [1]
    for a in values[1:]:
        d, u, v = _xgcd_pair(d, a)
        coeffs = [u * c for c in coeffs] + [v]
        if d < 0:
            d, coeffs = -d, [-c for c in coeffs]
    if d < 0:
        d, coeffs = -d, [-c for c in coeffs]
    return d, coeffs


def modinv(a: int, modulus: int) -> int:
    """Inverse of a modulo modulus, in [0, modulus)."""
    if modulus < 1:
        raise DomainError(f"modulus must be positive, got {modulus}")
    d, (u, _) = xgcd(a, modulus)
    if d != 1:
        raise NotInvertibleError(f"unable to invert {a} mod {modulus}")
    return u % modulus


def modpow(base: int, exp: int, modulus: int = 0) -> int:
    """base**exp reduced mod modulus; modulus 0 means no reduction."""
    if modulus < 0:
        raise DomainError(f"modulus must be non-negative, got {modulus}")
    if exp < 0:
        if modulus == 0:
            raise DomainError("negative exponent needs a modulus")
        base, exp = modinv(base, modulus), -exp
    if modulus == 0:
        return base ** exp
    return pow(base, exp, modulus)


def bit_length(n: int) -> int:
    if n < 0:
        raise DomainError(f"bit_length of negative integer {n}")
    return n.bit_length()


def random(bound: int) -> int:
    """Uniform integer in [0, bound)."""
    if bound <= 0:
        raise DomainError(f"bound must be positive, got {bound}")
    return rng.randbelow(bound)


def valuation(n: int, p: int) -> int:
    """Largest k such that p**k divides n."""
    if n == 0:
        raise DomainError("valuation of zero is unbounded")
    if p < 2:
        raise DomainError(f"base must be at least 2, got {p}")
    k = 0
    while n % p == 0:
        n //= p
        k += 1
    return k


def isqrt(n: int) -> int:
    if n < 0:
        raise DomainError(f"square root of negative integer {n}")
    return math.isqrt(n)


def iroot(n: int, k: int) -> int:
    """Floor of the k-th root of n >= 0 by integer Newton iteration."""
    if n < 0:
        raise DomainError(f"root of negative integer {n}")
    if k < 1:
        raise DomainError(f"root index must be positive, got {k}")
    if n < 2 or k == 1:
        return n
    x = 1 << -(-n.bit_length() // k)
    while True:
        y = ((k - 1) * x + n // x ** (k - 1)) // k
        if y >= x:
            return x
        x = y


def is_perfect_power(n: int) -> tuple[int, int]:
    """(base, exponent) with base**exponent == n and exponent maximal.

    Numbers that are no proper power come back as (n, 1).
    """
    if n < 0:
        base, exp = is_perfect_power(-n)
        odd = exp
        while odd % 2 == 0:
            odd //= 2
        return -(base ** (exp // odd)), odd
    if n <= 1:
        return n, 1
    for k in range(n.bit_length(), 1, -1):
        r = iroot(n, k)
        if r ** k == n:
            return r, k
    return n, 1


def _is_witness(a: int, d: int, s: int, n: int) -> bool:
    """True if a proves n composite (n - 1 == d * 2**s, d odd)."""
    x = pow(a, d, n)
    if x == 1 or x == n - 1:
        return False
    for _ in range(s - 1):
        x = x * x % n
        if x == n - 1:
            return False
    return True


def is_probable_prime(n: int) -> bool:
    """Miller-Rabin test; exact below DETERMINISTIC_LIMIT."""
    if n < 2:
        return False
    for p in SMALL_PRIMES:
        if n % p == 0:
            return n == p
    s = valuation(n - 1, 2)
    d = (n - 1) >> s
    witnesses = list(SMALL_PRIMES)
    if n >= DETERMINISTIC_LIMIT:
        witnesses += [2 + rng.randbelow(n - 3) for _ in range(MILLER_RABIN_ROUNDS)]
    for a in witnesses:
        if _is_witness(a, d, s, n):
            _logger.debug("%d is composite, witness %d", n, a)
            return False
    return True


class Integers(Domain):
    """The ring ZZ of Python integers."""

    def add(self, x, y):
        return x + y

    def sub(self, x, y):
        return x - y

    def mul(self, x, y):
        return x * y

    def neg(self, e):
        return -e

    def zero(self):
        return 0

    def one(self):
        return 1

    def equal(self, x, y) -> bool:
        return x == y

    def is_unit(self, e) -> bool:
        return e * e == 1

    def inv(self, e):
        if not self.is_unit(e):
            raise NotInvertibleError(f"{e} is not a unit in ZZ")
        return e

    def exact_div(self, x, y):
        if y == 0:
            raise NotInvertibleError("division by zero")
        q, r = divmod(x, y)
        if r:
            raise DomainError(f"{x} is not divisible by {y}")
        return q

    def from_int(self, n: int):
        return int(n)

    def scale(self, k: int, e):
        return k * e

    def __repr__(self):
        return "ZZ"


ZZ = Integers()

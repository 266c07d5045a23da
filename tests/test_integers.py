"""Tests for the number-theory kernel and the integer domain."""

import pytest

from algebra.errors import DomainError, NotInvertibleError
from algebra.integers import (ZZ, abs_, bit_length, gcd, iroot, is_perfect_power,
                              is_probable_prime, isqrt, lcm, max_, min_, modinv,
                              modpow, prod, random, sign, sum_, valuation, xgcd)


def test_perfect_power():
    assert is_perfect_power(81) == (3, 4)
    assert is_perfect_power(82) == (82, 1)
    assert is_perfect_power(64) == (2, 6)
    assert is_perfect_power(36) == (6, 2)
    assert is_perfect_power(2 ** 100) == (2, 100)
    assert is_perfect_power(1) == (1, 1)
    assert is_perfect_power(0) == (0, 1)

def test_perfect_power_negative():
    assert is_perfect_power(-8) == (-2, 3)
    assert is_perfect_power(-4) == (-4, 1)
    assert is_perfect_power(-64) == (-4, 3)

def test_bit_length():
    with pytest.raises(DomainError):
        bit_length(-1)
    assert [bit_length(n) for n in range(6)] == [0, 1, 2, 2, 3, 3]

def test_max_min():
    assert max_(1, 2) == 2
    assert max_(-1, 2, 100) == 100
    assert min_(1, 2) == 1
    assert min_(-1, 2, 100) == -1
    with pytest.raises(DomainError):
        max_()

def test_sign_abs():
    assert [sign(-5), sign(0), sign(5)] == [-1, 0, 1]
    assert [abs_(-5), abs_(0), abs_(5)] == [5, 0, 5]

def test_gcd():
    assert gcd(6, 10) == 2
    assert gcd(6, 10, 14) == 2
    assert gcd(6, -10, 14) == 2
    assert gcd(6, -10, 14, 5) == 1
    assert gcd() == 0
    assert gcd(0, 0) == 0
    assert gcd(-4) == 4

def test_xgcd():
    assert xgcd(6, 10) == (2, [2, -1])
    assert xgcd(6, 10, 14) == (2, [2, -1, 0])
    assert xgcd(6, -10, 14) == (2, [2, 1, 0])
    assert xgcd(6, -10, 14, 5) == (1, [-4, -2, 0, 1])

def test_xgcd_edge_cases():
    assert xgcd() == (0, [])
    assert xgcd(-5) == (5, [-1])
    d, coeffs = xgcd(0, 0)
    assert d == 0 and len(coeffs) == 2

@pytest.mark.parametrize("values", [
    (6, 10), (35, 15, 21), (-12, 18, -27), (0, 7), (2 ** 64 + 1, 3 ** 40, 5 ** 27),
    (1071, 462, 0, -99, 121),
])
def test_xgcd_bezout_identity(values):
    d, coeffs = xgcd(*values)
    assert d == gcd(*values)
    assert sum(c * a for c, a in zip(coeffs, values)) == d

def test_sum_prod():
    assert sum_(1, 2, 3, 4) == 10
    assert prod(1, 2, 3, 4) == 24
    assert sum_() == 0
    assert prod() == 1

def test_lcm():
    assert lcm(1, 2, 3, 4) == 12
    assert lcm(5, 7) == 35
    assert lcm(-4, 6) == 12
    assert lcm(0, 3) == 0
    assert lcm() == 1

def test_isqrt():
    assert [isqrt(n) for n in (0, 1, 100, 120, 121)] == [0, 1, 10, 10, 11]
    assert isqrt(10 ** 40) == 10 ** 20
    with pytest.raises(DomainError):
        isqrt(-1)

def test_iroot():
    assert iroot(27, 3) == 3
    assert iroot(26, 3) == 2
    assert iroot(10 ** 30, 3) == 10 ** 10
    assert iroot(10 ** 30 - 1, 3) == 10 ** 10 - 1
    assert iroot(5, 1) == 5

def test_modpow():
    assert modpow(2, 100, 3) == 1
    assert modpow(2, 100) == 2 ** 100
    assert modpow(2, 100, 0) == 2 ** 100
    assert modpow(3, -1, 7) == 5
    with pytest.raises(DomainError):
        modpow(2, -1)

def test_modinv():
    assert modinv(3, 7) == 5
    assert modinv(-3, 7) == 2
    with pytest.raises(NotInvertibleError):
        modinv(4, 8)

def test_valuation():
    assert valuation(2 ** 100, 2) == 100
    assert valuation(15 * 2 ** 100, 2) == 100
    assert valuation(15, 2) == 0
    with pytest.raises(DomainError):
        valuation(0, 2)

def test_random_bounds():
    for _ in range(100):
        x = random(5)
        assert 0 <= x < 5
    with pytest.raises(DomainError):
        random(0)

def test_random_reproducible_with_seed(seed):
    seed(7)
    first = [random(10 ** 30) for _ in range(5)]
    seed(7)
    second = [random(10 ** 30) for _ in range(5)]
    assert first == second

def test_probable_prime():
    assert is_probable_prime(2)
    assert is_probable_prime(3)
    assert not is_probable_prime(1)
    assert not is_probable_prime(6)
    assert not is_probable_prime(10000000004)
    assert not is_probable_prime(10000000005)
    assert not is_probable_prime(10000000006)
    assert is_probable_prime(10000000019)

def test_probable_prime_hard_cases():
    assert not is_probable_prime(0)
    assert not is_probable_prime(-7)
    assert not is_probable_prime(561)  # Carmichael
    assert not is_probable_prime(3215031751)  # strong pseudoprime to 2, 3, 5, 7
    assert is_probable_prime(41)
    assert is_probable_prime(43)

def test_probable_prime_large(seed):
    seed(1)
    assert is_probable_prime((1 << 127) - 1)
    assert not is_probable_prime(((1 << 61) - 1) * ((1 << 89) - 1))

def test_integer_domain():
    assert ZZ.add(2, 3) == 5
    assert ZZ.sub(2, 3) == -1
    assert ZZ.mul(2, 3) == 6
    assert ZZ.zero() == 0 and ZZ.one() == 1
    assert ZZ.scale(-3, 4) == -12
    assert ZZ.from_int(10 ** 30) == 10 ** 30
    assert ZZ.parse("-17") == -17

def test_integer_units():
    assert ZZ.is_unit(1) and ZZ.is_unit(-1)
    assert not ZZ.is_unit(2) and not ZZ.is_unit(0)
    assert ZZ.inv(-1) == -1
    with pytest.raises(NotInvertibleError):
        ZZ.inv(2)

def test_integer_exact_div():
    assert ZZ.exact_div(6, 3) == 2
    assert ZZ.exact_div(-6, 3) == -2
    with pytest.raises(DomainError):
        ZZ.exact_div(7, 2)
    with pytest.raises(NotInvertibleError):
        ZZ.exact_div(1, 0)

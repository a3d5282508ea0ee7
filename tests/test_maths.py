import pytest

from ftssl.maths import mod_inverse, mulmod, powmod

BIG = (1 << 64) - 59


@pytest.mark.parametrize(
    "a, b, m",
    [
        (3, 4, 5),
        (BIG - 1, BIG - 2, BIG),
        ((1 << 64) - 1, (1 << 64) - 1, (1 << 63) + 7),
        (0, 12345, 97),
        (123456789, 987654321, 1),
    ],
)
def test_mulmod_matches_product(a, b, m):
    assert mulmod(a, b, m) == (a * b) % m


def test_mulmod_result_below_modulus():
    assert 0 <= mulmod(BIG - 3, BIG - 5, BIG) < BIG


def test_mulmod_zero_modulus():
    with pytest.raises(ZeroDivisionError):
        mulmod(2, 3, 0)


@pytest.mark.parametrize(
    "num, exp, mod",
    [(2, 10, 1000), (BIG - 1, BIG - 1, BIG), (7, 65537, (1 << 61) - 1), (12, 3, 5)],
)
def test_powmod_matches_pow(num, exp, mod):
    assert powmod(num, exp, mod) == pow(num, exp, mod)


def test_powmod_zero_exponent():
    assert powmod(5, 0, 7) == 1


def test_powmod_zero_base_wins_over_zero_exponent():
    assert powmod(0, 0, 7) == 0


def test_powmod_modulus_one():
    assert powmod(9, 4, 1) == 0


def test_powmod_zero_modulus():
    with pytest.raises(ZeroDivisionError):
        powmod(3, 2, 0)


@pytest.mark.parametrize("a, b", [(3, 11), (10, 7), (65537, BIG), (17, 3120)])
def test_mod_inverse_invariant(a, b):
    inverse = mod_inverse(a, b)
    assert 0 <= inverse < b
    assert (a * inverse) % b == 1


def test_mod_inverse_equal_arguments():
    assert mod_inverse(13, 13) == 0


def test_mod_inverse_of_one():
    assert mod_inverse(1, 9) == 1


@pytest.mark.parametrize("a, b", [(4, 6), (6, 4), (10, 15)])
def test_mod_inverse_not_coprime(a, b):
    with pytest.raises(ZeroDivisionError):
        mod_inverse(a, b)
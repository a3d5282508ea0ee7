"""Modular arithmetic helpers on unsigned 64-bit style integers."""

from __future__ import annotations

__all__ = ["mod_inverse", "mulmod", "powmod"]


def mod_inverse(a: int, b: int) -> int:
    """Return the inverse of ``a`` modulo ``b``.

    Returns 0 when ``a == b``.  Raises ZeroDivisionError when the extended
    Euclidean algorithm would divide by zero, i.e. when no inverse exists.
    """
    if a == b:
        return 0
    modulus = b
    x0, x1 = 0, 1
    while a > 1:
        if b == 0:
            raise ZeroDivisionError("Error divide by 0")
        q = a // b
        a, b = b, a % b
        x0, x1 = x1 - q * x0, x0
    return x1 + modulus if x1 < 0 else x1


def mulmod(a: int, b: int, m: int) -> int:
    """Return ``a * b`` modulo ``m``."""
    if m == 0:
        raise ZeroDivisionError("modulus is 0")
    return (a * b) % m


def powmod(num: int, exp: int, mod: int) -> int:
    """Return ``num ** exp`` modulo ``mod``.

    A zero base or a modulus of 1 gives 0; a zero exponent otherwise gives 1.
    A zero modulus raises ZeroDivisionError.
    """
    if mod == 0:
        raise ZeroDivisionError("Cannot take modpow with modulus 0")
    if mod < 2 or num == 0:
        return 0
    if exp == 0:
        return 1
    return pow(num, exp, mod)
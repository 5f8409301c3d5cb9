"""Modular arithmetic on integers."""

from __future__ import annotations

from .ring import modulo_inverse, normalized_extended_euclidean


def mod_pow(base: int, exponent: int, modulus: int) -> int:
    """Return ``base**exponent mod modulus``; the exponent must not be negative."""
    if exponent < 0:
        raise ValueError("exponent must be non-negative")
    if modulus == 0:
        raise ZeroDivisionError("modulus must not be zero")
    return pow(base, exponent, modulus)


def mod_mul(a: int, b: int, modulus: int) -> int:
    """Return ``a * b mod modulus``."""
    return (a % modulus) * (b % modulus) % modulus


def mod_sub(a: int, b: int, modulus: int) -> int:
    """Return ``a - b mod modulus``."""
    return ((a % modulus) - (b % modulus) + modulus) % modulus


def mod_add(a: int, b: int, modulus: int) -> int:
    """Return ``a + b mod modulus``."""
    return ((a % modulus) + (b % modulus)) % modulus


def modulo(n: int, modulus: int) -> int:
    """Return the truncated remainder of ``n`` by ``modulus``, shifted by ``modulus`` if negative."""
    if modulus == 0:
        raise ZeroDivisionError("modulus must not be zero")
    remainder = abs(n) % abs(modulus)
    if n < 0:
        remainder = -remainder
    return modulus + remainder if remainder < 0 else remainder


def mod_inv(a: int, modulus: int) -> int | None:
    """Return ``a**-1 mod modulus``, or None if ``a`` and ``modulus`` are not coprime."""
    inverse = modulo_inverse(a, modulus)
    if inverse is None:
        return None
    return modulo(inverse, modulus)


def egcd(a: int, b: int) -> tuple[int, int, int]:
    """Return ``(g, p, q)`` with ``g = gcd(a, b)`` and ``g == a*p + b*q``."""
    return normalized_extended_euclidean(a, b)
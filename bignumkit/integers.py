"""Integer utilities: primality, roots and truncated or floored division helpers."""

from __future__ import annotations

import math

from . import primes


def is_probable_prime(n: int, reps: int) -> bool:
    """Report whether ``n`` is probably prime.

    Primes always pass. A composite passes with probability at most ``4**-reps``.
    Zero and negative numbers are never prime.
    """
    if reps < 0:
        raise ValueError("number of rounds must be non-negative")
    if n <= 0:
        return False
    return primes.probably_prime(n, reps)


def next_prime(n: int) -> int:
    """Return the next probable prime greater than ``n``; 2 for ``n <= 0``."""
    if n <= 0:
        return 2
    return primes.next_prime(n)


def _floor_root(a: int, k: int) -> int:
    if a < 2 or k == 1:
        return a
    x = 1 << -(-a.bit_length() // k)
    while True:
        y = ((k - 1) * x + a // x ** (k - 1)) // k
        if y >= x:
            return x
        x = y


def nth_root(n: int, k: int) -> int:
    """Return the ``k``-th root of ``n``, truncated toward zero.

    Negative ``n`` is allowed only for odd ``k``.
    """
    if k <= 0:
        raise ValueError("root degree must be positive")
    if n < 0:
        if k % 2 == 0:
            raise ValueError("even root of a negative number")
        return -_floor_root(-n, k)
    return _floor_root(n, k)


def sqrt(n: int) -> int:
    """Return the integer square root of a non-negative ``n``."""
    if n < 0:
        raise ValueError("square root of a negative number")
    return math.isqrt(n)


def cbrt(n: int) -> int:
    """Return the integer cube root of ``n``, truncated toward zero."""
    return nth_root(n, 3)


def div_rem(a: int, b: int) -> tuple[int, int]:
    """Return quotient truncated toward zero and the remainder with the sign of ``a``."""
    if b == 0:
        raise ZeroDivisionError("division by zero")
    quotient = abs(a) // abs(b)
    if (a < 0) != (b < 0):
        quotient = -quotient
    return quotient, a - quotient * b


def next_multiple_of(a: int, b: int) -> int:
    """Return the nearest multiple of ``b`` reached from ``a`` in the direction of ``b``'s sign."""
    remainder = a % b
    return a if remainder == 0 else a + (b - remainder)


def prev_multiple_of(a: int, b: int) -> int:
    """Return the nearest multiple of ``b`` reached from ``a`` against the direction of ``b``'s sign."""
    return a - a % b
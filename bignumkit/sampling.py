"""Cryptographically secure random integers."""

from __future__ import annotations

import secrets

from .convert import from_bytes


def sample(bit_size: int) -> int:
    """Return a random integer in ``[0, 2**bit_size)``."""
    if bit_size < 0:
        raise ValueError("bit size must be non-negative")
    if bit_size == 0:
        return 0
    byte_count = (bit_size - 1) // 8 + 1
    return from_bytes(secrets.token_bytes(byte_count)) >> (byte_count * 8 - bit_size)


def strict_sample(bit_size: int) -> int:
    """Return a random integer of exactly ``bit_size`` bits, in ``[2**(bit_size-1), 2**bit_size)``."""
    if bit_size == 0:
        return 0
    while True:
        n = sample(bit_size)
        if n.bit_length() == bit_size:
            return n


def sample_below(upper: int) -> int:
    """Return a random integer in ``[0, upper)``; ``upper`` must be positive."""
    if upper <= 0:
        raise ValueError("upper bound must be positive")
    bits = upper.bit_length()
    while True:
        n = sample(bits)
        if n < upper:
            return n


def sample_range(lower: int, upper: int) -> int:
    """Return a random integer in ``[lower, upper)``; requires ``upper > lower``."""
    if upper <= lower:
        raise ValueError("upper bound must be greater than lower bound")
    return lower + sample_below(upper - lower)


def strict_sample_range(lower: int, upper: int) -> int:
    """Return a random integer in the open range ``(lower, upper)``.

    Raises ValueError when the range holds no integer.
    """
    if upper <= lower:
        raise ValueError("upper bound must be greater than lower bound")
    if upper - lower < 2:
        raise ValueError("open range contains no integers")
    while True:
        n = lower + sample_below(upper - lower)
        if lower < n < upper:
            return n
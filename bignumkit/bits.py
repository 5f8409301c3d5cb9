"""Bit-level queries and updates on integers."""

from __future__ import annotations


def _check_index(bit: int) -> None:
    if bit < 0:
        raise ValueError("bit index must be non-negative")


def test_bit(n: int, bit: int) -> bool:
    """Return whether bit ``bit`` of ``n`` (two's complement) is set."""
    _check_index(bit)
    return bool((n >> bit) & 1)


# Keep pytest from collecting the function above as a test.
test_bit.__test__ = False  # type: ignore[attr-defined]


def set_bit(n: int, bit: int, value: bool) -> int:
    """Return ``n`` with bit ``bit`` set to ``value``."""
    _check_index(bit)
    mask = 1 << bit
    if value:
        return n | mask
    if test_bit(n, bit):
        return n ^ mask
    return n


def bit_length(n: int) -> int:
    """Return the number of bits in ``abs(n)``."""
    return abs(n).bit_length()
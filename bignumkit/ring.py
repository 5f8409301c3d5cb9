"""Extended Euclidean algorithm and modular inverses."""

from __future__ import annotations


def normalized_extended_euclidean(x: int, y: int) -> tuple[int, int, int]:
    """Return ``(g, p, q)`` with ``g = gcd(x, y) >= 0`` and ``g == x*p + y*q``."""
    old = (abs(x), -1 if x < 0 else 1, 0)
    now = (abs(y), 0, -1 if y < 0 else 1)
    while now[0] != 0:
        q, r = divmod(old[0], now[0])
        unit = -1 if r < 0 else 1
        new = (
            abs(r),
            (old[1] - q * now[1]) * unit,
            (old[2] - q * now[2]) * unit,
        )
        old, now = now, new
    return old


def modulo_inverse(a: int, m: int) -> int | None:
    """Return some ``x`` with ``a*x ≡ 1 (mod m)``, or None if none exists.

    The result is not reduced into ``[0, m)``.
    """
    gcd, inv_a, _ = normalized_extended_euclidean(a, m)
    return inv_a if gcd == 1 else None
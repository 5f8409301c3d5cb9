"""Conversions between integers and bytes, strings and fixed-width integers."""

from __future__ import annotations

import string

from .errors import ParseBigIntError, TryFromBigIntError

_DIGITS = string.digits + string.ascii_lowercase
_U64_MAX = (1 << 64) - 1
_I64_MIN = -(1 << 63)
_I64_MAX = (1 << 63) - 1


def _check_radix(radix: int) -> None:
    if not 2 <= radix <= 36:
        raise ValueError(f"radix must be in range [2, 36], got {radix}")


def to_bytes(n: int) -> bytes:
    """Return the big-endian bytes of ``abs(n)``; zero encodes as a single zero byte."""
    magnitude = abs(n)
    length = max(1, (magnitude.bit_length() + 7) // 8)
    return magnitude.to_bytes(length, "big")


def from_bytes(data: bytes) -> int:
    """Read a non-negative integer from big-endian bytes."""
    return int.from_bytes(bytes(data), "big")


def to_bytes_array(n: int, size: int) -> bytes | None:
    """Return ``to_bytes(n)`` left-padded with zeros to ``size`` bytes, or None if it does not fit."""
    data = to_bytes(n)
    if len(data) > size:
        return None
    return data.rjust(size, b"\x00")


def to_str_radix(n: int, radix: int) -> str:
    """Format ``n`` in the given radix using lower-case digits and a leading minus if negative."""
    _check_radix(radix)
    magnitude = abs(n)
    if magnitude == 0:
        return "0"
    digits = []
    while magnitude:
        magnitude, digit = divmod(magnitude, radix)
        digits.append(_DIGITS[digit])
    if n < 0:
        digits.append("-")
    return "".join(reversed(digits))


def from_str_radix(text: str, radix: int) -> int:
    """Parse ``text`` in the given radix.

    An optional leading sign is accepted, and underscores may separate digits.
    Raises ParseBigIntError for a malformed string and ValueError for a bad radix.
    """
    _check_radix(radix)
    negative = False
    body = text
    if body.startswith("-"):
        negative = True
        body = body[1:]
    elif body.startswith("+"):
        body = body[1:]

    allowed = _DIGITS[:radix]
    if not body or body.startswith("_"):
        raise ParseBigIntError(radix)
    digits = body.replace("_", "").lower()
    if not digits or any(ch not in allowed for ch in digits):
        raise ParseBigIntError(radix)

    value = int(digits, radix)
    return -value if negative else value


def to_hex(n: int) -> str:
    """Format ``n`` in hexadecimal."""
    return to_str_radix(n, 16)


def from_hex(text: str) -> int:
    """Parse a hexadecimal string."""
    return from_str_radix(text, 16)


def to_u64(n: int) -> int:
    """Return ``n`` if it fits an unsigned 64-bit integer, else raise TryFromBigIntError."""
    if not 0 <= n <= _U64_MAX:
        raise TryFromBigIntError("u64")
    return n


def to_i64(n: int) -> int:
    """Return ``n`` if it fits a signed 64-bit integer, else raise TryFromBigIntError."""
    if not _I64_MIN <= n <= _I64_MAX:
        raise TryFromBigIntError("i64")
    return n
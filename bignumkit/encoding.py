"""Serialized forms of integers: raw big-endian bytes or a hex string."""

from __future__ import annotations

import binascii
from collections.abc import Iterable

from .convert import from_bytes, to_bytes


def serialize(n: int, human_readable: bool) -> bytes | str:
    """Encode the magnitude of ``n`` as big-endian bytes, or as their hex when human readable."""
    data = to_bytes(n)
    return data.hex() if human_readable else data


def deserialize(value: bytes | bytearray | memoryview | str | Iterable[int]) -> int:
    """Decode an integer from bytes, a hex string or a sequence of byte values."""
    if isinstance(value, str):
        try:
            data = binascii.unhexlify(value)
        except (binascii.Error, ValueError) as exc:
            raise ValueError("malformed hex encoding") from exc
        return from_bytes(data)
    if isinstance(value, (bytes, bytearray, memoryview)):
        return from_bytes(bytes(value))
    if isinstance(value, Iterable):
        items = list(value)
        if not all(isinstance(item, int) for item in items):
            raise TypeError("byte sequence must contain integers")
        return from_bytes(bytes(items))
    raise TypeError(f"cannot decode an integer from {type(value).__name__}")
"""Integer utilities for cryptographic code: conversions, modular arithmetic, bits, primes, sampling and encodings."""

__version__ = "0.1.0"
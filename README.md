# bignumkit

Integer helpers for cryptographic code. Every function works on Python's own
`int`; there is no wrapper type.

## Modules

- `bignumkit.convert`
  - `to_bytes(n)`: big-endian bytes of `abs(n)` (the sign is dropped); zero
    encodes as `b"\x00"`.
  - `from_bytes(data)`: non-negative integer from big-endian bytes.
  - `to_bytes_array(n, size)`: `to_bytes(n)` left-padded with zeros to `size`
    bytes, or `None` if it does not fit.
  - `to_str_radix(n, radix)` / `from_str_radix(text, radix)`: lower-case
    digits, a leading `-` for negatives; parsing accepts an optional sign and
    underscores between digits. The radix must be in `[2, 36]`.
  - `to_hex(n)` / `from_hex(text)`: the same with radix 16.
  - `to_u64(n)` / `to_i64(n)`: return `n` if it fits the 64-bit range.
- `bignumkit.modular`: `mod_pow` (non-negative exponent only), `mod_mul`,
  `mod_add`, `mod_sub`, `mod_inv` (result in `[0, modulus)` for a positive
  modulus, or `None` when no inverse exists), `modulo` and the extended GCD
  `egcd(a, b)` returning `(g, p, q)` with `g == a*p + b*q`.
- `bignumkit.ring`: `normalized_extended_euclidean(x, y)` and
  `modulo_inverse(a, m)`, whose result is not reduced into `[0, m)`.
- `bignumkit.bits`: `test_bit(n, bit)`, `set_bit(n, bit, value)` (returns a
  new integer) and `bit_length(n)` (bits of `abs(n)`).
- `bignumkit.primes`:
  - `probably_prime(x, n)`: trial division, Miller–Rabin with `n` bases plus
    base 2, and an almost extra strong Lucas test. Exact below 2**64.
  - `probably_prime_miller_rabin(n, reps, force2)`: bases are drawn from a
    generator seeded with `n`, so results are repeatable.
  - `probably_prime_lucas(n)`, `next_prime(n)` and the Jacobi symbol
    `jacobi(x, y)` (`y` must be odd).
- `bignumkit.integers`: `is_probable_prime(n, reps)` (zero and negatives are
  never prime), `next_prime(n)`, integer roots `sqrt`, `cbrt`, `nth_root`
  (truncated toward zero), `div_rem` (truncating division),
  `next_multiple_of` and `prev_multiple_of`.
- `bignumkit.sampling`: random integers from `secrets`: `sample(bits)` in
  `[0, 2**bits)`, `strict_sample(bits)` of exactly `bits` bits,
  `sample_below(upper)`, `sample_range(lower, upper)` and
  `strict_sample_range(lower, upper)` (open interval).
- `bignumkit.encoding`: `serialize(n, human_readable)` gives the big-endian
  bytes of `abs(n)`, or their hex string when `human_readable` is true;
  `deserialize(value)` accepts bytes, a hex string or an iterable of byte
  values.

## Errors

- `bignumkit.errors.ParseBigIntError` (a `ValueError`): text is not a valid
  number in the given radix.
- `bignumkit.errors.TryFromBigIntError` (an `OverflowError`): a value does not
  fit `u64` or `i64`.
- Other invalid arguments (bad radix, negative exponent, empty sampling range,
  malformed hex in `deserialize`, even `y` in `jacobi`) raise `ValueError`;
  a zero modulus or divisor raises `ZeroDivisionError`.

## Example

```python
from bignumkit.convert import to_hex, from_hex, to_bytes
from bignumkit.modular import mod_inv, mod_mul
from bignumkit.integers import is_probable_prime
from bignumkit.sampling import sample_below

assert to_hex(1_000_000) == "f4240"
assert from_hex("-1f") == -31
assert to_bytes(1_000_000) == b"\x0f\x42\x40"

inv = mod_inv(7, 15)
assert mod_mul(7, inv, 15) == 1

assert is_probable_prime(2**255 - 19, 20)
assert 0 <= sample_below(500) < 500
```

## What it does not do

This is a library of integer functions only. It has no elliptic-curve
arithmetic, commitments, proofs or secret sharing, and no command-line tool.

## Testing

Install with the `test` extra and run `pytest`.
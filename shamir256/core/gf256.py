"""Galois Field GF(2^8) arithmetic.

Operations are done modulo the irreducible polynomial
x^8 + x^4 + x^3 + x + 1 (0x11B), with 0x03 (x + 1) as the generator.

The exponent and logarithm tables are computed once at import and exposed
as immutable tuples, so they are safe to share between threads. Every other
implementation using the same field and generator produces identical tables,
which keeps shares interoperable.
"""

from typing import Tuple

# AES/Rijndael reduction polynomial
PRIME_POLYNOMIAL = 0x11B
GENERATOR = 0x03

# Order of the multiplicative group
GROUP_ORDER = 255


def _multiply_slow(a: int, b: int) -> int:
    """Carry-less multiplication (used only for table init)."""
    result = 0
    while b:
        if b & 1:
            result ^= a
        a <<= 1
        if a & 0x100:
            a ^= PRIME_POLYNOMIAL
        b >>= 1
    return result


def _build_tables() -> Tuple[Tuple[int, ...], Tuple[int, ...]]:
    """Build the exponent and logarithm tables."""
    exp_table = [0] * 256
    log_table = [0] * 256

    x = 1
    for i in range(GROUP_ORDER):
        exp_table[i] = x
        log_table[x] = i
        x = _multiply_slow(x, GENERATOR)

    # g^255 == g^0
    exp_table[GROUP_ORDER] = exp_table[0]

    return tuple(exp_table), tuple(log_table)


EXP_TABLE, LOG_TABLE = _build_tables()


def exp(e: int) -> int:
    """Return the generator raised to ``e``."""
    return EXP_TABLE[e % GROUP_ORDER]


def log(a: int) -> int:
    """Return the discrete logarithm of a non-zero element."""
    if a == 0:
        raise ValueError("Logarithm of zero is undefined in GF(256)")
    return LOG_TABLE[a]


def add(a: int, b: int) -> int:
    """Addition in GF(256) (same as XOR)."""
    return a ^ b


def subtract(a: int, b: int) -> int:
    """Subtraction in GF(256) (same as XOR)."""
    return a ^ b


def multiply(a: int, b: int) -> int:
    """Fast multiplication using lookup tables."""
    if a == 0 or b == 0:
        return 0
    return EXP_TABLE[(LOG_TABLE[a] + LOG_TABLE[b]) % GROUP_ORDER]


def divide(a: int, b: int) -> int:
    """Division in GF(256).

    Raises:
        ZeroDivisionError: If ``b`` is zero
    """
    if b == 0:
        raise ZeroDivisionError("Division by zero in GF(256)")
    if a == 0:
        return 0
    return EXP_TABLE[(LOG_TABLE[a] - LOG_TABLE[b]) % GROUP_ORDER]


def power(base: int, e: int) -> int:
    """Exponentiation in GF(256)."""
    if e == 0:
        return 1
    if base == 0:
        return 0
    return EXP_TABLE[(LOG_TABLE[base] * e) % GROUP_ORDER]

"""Random polynomial generation and evaluation over GF(256).

Each secret byte gets its own polynomial of degree k-1:

    f(x) = secret + a1*x + a2*x^2 + ... + a_{k-1}*x^{k-1}

Coefficients are stored lowest-degree first, so ``polynomial[0]`` is the
secret byte.
"""

import logging

from shamir256.core import gf256
from shamir256.core.entropy import EntropySource
from shamir256.core.metrics import metrics
from shamir256.exceptions import EntropyError

logger = logging.getLogger(__name__)

# Rejected draws allowed before the source is treated as broken
MAX_RESAMPLES = 256


def generate(secret_byte: int, k: int, entropy: EntropySource) -> bytes:
    """Generate a random polynomial with ``secret_byte`` as its constant term.

    The highest-degree coefficient is never zero: a draw ending in zero is
    discarded and redrawn, so the polynomial always has full degree k-1.

    Args:
        secret_byte: Constant term (0-255)
        k: Number of coefficients (the threshold)
        entropy: Source for the k-1 random coefficients

    Returns:
        The k coefficients, lowest degree first

    Raises:
        EntropyError: If the source returns the wrong number of bytes, or
            keeps ending draws in zero for MAX_RESAMPLES attempts
    """
    if k == 1:
        # Constant polynomial, every share is the secret itself
        return bytes([secret_byte])

    for _ in range(MAX_RESAMPLES + 1):
        coefficients = entropy.generate(k - 1)
        if len(coefficients) != k - 1:
            raise EntropyError(
                f"Entropy source returned {len(coefficients)} bytes, expected {k - 1}",
                requested=k - 1,
                received=len(coefficients),
            )
        if coefficients[-1] != 0:
            return bytes([secret_byte]) + bytes(coefficients)
        logger.debug("Highest coefficient was zero, resampling")
        metrics.record_resample()

    raise EntropyError(
        f"Highest coefficient was zero in {MAX_RESAMPLES + 1} consecutive draws",
        requested=k - 1,
        received=k - 1,
    )


def evaluate(polynomial: bytes, x: int) -> int:
    """Evaluate polynomial at point x using Horner's method."""
    result = 0
    for coefficient in reversed(polynomial):
        result = gf256.add(coefficient, gf256.multiply(result, x))
    return result

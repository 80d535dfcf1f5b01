"""Entropy sources for polynomial generation.

Splitting a secret is the only operation that consumes randomness, and the
scheme is only as strong as the source it is given. Sources are passed
explicitly into the engine so tests can substitute deterministic ones
without touching production code paths.

Usage:
    from shamir256.core.entropy import SystemEntropySource, FixedEntropySource

    engine = SecretSharingEngine(entropy=SystemEntropySource())

    # Deterministic output for tests and documentation
    engine = SecretSharingEngine(entropy=FixedEntropySource(b"A"))
"""

import random
import secrets
from abc import ABC, abstractmethod


class EntropySource(ABC):
    """Abstract base class for entropy sources.

    Implementations return ``length`` independently uniform random bytes.
    Errors raised by a source propagate unchanged to the caller of split.
    """

    @abstractmethod
    def generate(self, length: int) -> bytes:
        """Generate ``length`` random bytes."""
        pass


class SystemEntropySource(EntropySource):
    """Cryptographically secure source backed by the OS CSPRNG."""

    def generate(self, length: int) -> bytes:
        return secrets.token_bytes(length)


class FixedEntropySource(EntropySource):
    """Returns a fixed byte pattern, repeated as needed.

    Never use outside of tests: every polynomial gets the same coefficients.
    """

    def __init__(self, pattern: bytes):
        if not pattern:
            raise ValueError("Pattern must not be empty")
        if not any(pattern):
            raise ValueError("Pattern must contain a non-zero byte")
        self.pattern = bytes(pattern)

    def generate(self, length: int) -> bytes:
        repeats = -(-length // len(self.pattern))
        return (self.pattern * repeats)[:length]


class SeededEntropySource(EntropySource):
    """Reproducible pseudo-random source for tests.

    Backed by ``random.Random``, which is not cryptographically secure.
    """

    def __init__(self, seed: int | str | bytes | None = None):
        self._random = random.Random(seed)

    def generate(self, length: int) -> bytes:
        return self._random.randbytes(length)


# Default source used when an engine is not given one
system_entropy = SystemEntropySource()

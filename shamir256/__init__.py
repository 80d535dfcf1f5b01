"""shamir256 - Shamir's Secret Sharing over GF(256).

Usage:
    from shamir256 import split, combine

    shares = split(5, 3, b"hello world")
    subset = {i: shares[i] for i in (1, 2, 3)}
    assert combine(subset) == b"hello world"

Combining fewer shares than the threshold returns a wrong secret without
raising an error: shares carry no threshold metadata.

This package has not been audited by cryptography or security professionals.
"""

from shamir256.core.entropy import (
    EntropySource,
    FixedEntropySource,
    SeededEntropySource,
    SystemEntropySource,
)
from shamir256.core.secret_sharing_engine import (
    SecretSharingEngine,
    combine,
    recover_share,
    secret_sharing_engine,
    split,
)
from shamir256.exceptions import (
    EntropyError,
    InsufficientSharesError,
    InvalidParametersError,
    InvalidShareError,
    SecretSharingError,
)

__version__ = "0.1.0"
__all__ = [
    "split",
    "combine",
    "recover_share",
    "SecretSharingEngine",
    "secret_sharing_engine",
    "EntropySource",
    "SystemEntropySource",
    "FixedEntropySource",
    "SeededEntropySource",
    "SecretSharingError",
    "InvalidParametersError",
    "InvalidShareError",
    "InsufficientSharesError",
    "EntropyError",
]

"""Shamir Secret Sharing Engine.

Implements Shamir's Secret Sharing Scheme (SSSS) over GF(256), splitting
secrets into shares where a threshold number is required for reconstruction.

Every byte of the secret is shared independently: it becomes the constant
term of a random polynomial of degree k-1, and share ``x`` holds that
polynomial evaluated at ``x`` for every byte. Combining interpolates each
byte position back at x=0.

Security Properties:
- Information-theoretic security: k-1 shares reveal nothing about the secret
- Any k shares reconstruct the secret exactly
- No computational assumptions, but only as strong as the entropy source

Limitations:
- Shares carry no threshold metadata. Combining fewer than k shares returns
  a wrong secret without raising; the caller must supply enough shares.
- No integrity protection. Corrupted or forged shares are not detected.

References:
- Shamir, A. "How to share a secret." Communications of the ACM, 1979
"""

from collections.abc import Mapping
from concurrent.futures import ThreadPoolExecutor
from typing import Any, Callable, Dict, List, Optional, Sequence, Tuple, TypeVar

from shamir256.config import get_settings
from shamir256.core import polynomial
from shamir256.core.entropy import EntropySource, system_entropy
from shamir256.core.interpolation import intercept_at_zero, interpolate_at
from shamir256.core.logging import get_logger, log_operation
from shamir256.core.metrics import metrics
from shamir256.exceptions import (
    InsufficientSharesError,
    InvalidParametersError,
    InvalidShareError,
    SecretSharingError,
)

logger = get_logger(__name__)

T = TypeVar("T")

ShareSet = Mapping[int, bytes]

_BYTES_TYPES = (bytes, bytearray, memoryview)

# Marks limits that are read from settings at use time
_FROM_SETTINGS = object()


def _is_share_id(value) -> bool:
    return isinstance(value, int) and not isinstance(value, bool) and 1 <= value <= 255


def _is_int_at_least(value, minimum: int) -> bool:
    return isinstance(value, int) and not isinstance(value, bool) and value >= minimum


class SecretSharingEngine:
    """Shamir Secret Sharing implementation.

    Splits a secret into n shares where any k shares can reconstruct
    the original secret (k-of-n threshold scheme).

    Usage:
        engine = SecretSharingEngine()

        # Split a secret into 5 shares, 3 required to reconstruct
        secret = b"my secret key"
        shares = engine.split(5, 3, secret)

        # Reconstruct from any 3 shares
        recovered = engine.combine({i: shares[i] for i in (1, 3, 5)})
        assert recovered == secret
    """

    MAX_SHARES = 255  # Share IDs are single non-zero bytes

    def __init__(
        self,
        entropy: Optional[EntropySource] = None,
        max_workers: Optional[int] = None,
        parallel_min_bytes: Optional[int] = None,
        max_secret_size: Any = _FROM_SETTINGS,
    ):
        """Create an engine.

        Limits left unset are read from settings each time they are used,
        so environment changes after import are picked up. Pass
        ``max_secret_size=None`` to lift a configured size limit.

        Raises:
            InvalidParametersError: If a limit is out of range
        """
        if max_workers is not None and not _is_int_at_least(max_workers, 1):
            raise InvalidParametersError(f"max_workers must be >= 1, got {max_workers!r}")
        if parallel_min_bytes is not None and not _is_int_at_least(parallel_min_bytes, 1):
            raise InvalidParametersError(
                f"parallel_min_bytes must be >= 1, got {parallel_min_bytes!r}"
            )
        if max_secret_size not in (None, _FROM_SETTINGS) and not _is_int_at_least(
            max_secret_size, 0
        ):
            raise InvalidParametersError(
                f"max_secret_size must be >= 0 or None, got {max_secret_size!r}"
            )

        self.entropy = entropy or system_entropy
        self._max_workers = max_workers
        self._parallel_min_bytes = parallel_min_bytes
        self._max_secret_size = max_secret_size

    @property
    def max_workers(self) -> int:
        if self._max_workers is not None:
            return self._max_workers
        return get_settings().max_workers

    @property
    def parallel_min_bytes(self) -> int:
        if self._parallel_min_bytes is not None:
            return self._parallel_min_bytes
        return get_settings().parallel_min_bytes

    @property
    def max_secret_size(self) -> Optional[int]:
        if self._max_secret_size is not _FROM_SETTINGS:
            return self._max_secret_size
        return get_settings().max_secret_size

    @log_operation("split")
    def split(
        self,
        n: int,
        k: int,
        secret: bytes,
        entropy: Optional[EntropySource] = None,
    ) -> Dict[int, bytes]:
        """Split a secret into multiple shares.

        Args:
            n: Total number of shares to create (1-255)
            k: Minimum shares needed to reconstruct (1-n)
            secret: The secret to split, of any length
            entropy: Overrides the engine's entropy source for this call

        Returns:
            Mapping of share ID (1..n) to share value

        Raises:
            InvalidParametersError: If n, k or the secret size is invalid
        """
        self._validate_parameters(n, k)
        if not isinstance(secret, _BYTES_TYPES):
            raise InvalidParametersError(
                f"Secret must be bytes, got {type(secret).__name__}"
            )
        secret = bytes(secret)
        max_size = self.max_secret_size
        if max_size is not None and len(secret) > max_size:
            raise InvalidParametersError(
                f"Secret size {len(secret)} exceeds maximum {max_size} bytes"
            )

        source = entropy or self.entropy
        share_ids = range(1, n + 1)

        with metrics.track_operation("split", len(secret)):
            # Entropy is drawn sequentially so a deterministic source yields
            # the same shares with or without the thread pool
            polynomials = [polynomial.generate(byte_val, k, source) for byte_val in secret]

            def evaluate_chunk(start: int, stop: int) -> List[bytes]:
                chunk = polynomials[start:stop]
                return [
                    bytes(polynomial.evaluate(poly, x) for poly in chunk)
                    for x in share_ids
                ]

            chunks = self._map_chunks(len(polynomials), evaluate_chunk)
            shares = {
                x: b"".join(chunk[i] for chunk in chunks)
                for i, x in enumerate(share_ids)
            }

        logger.info("Secret split", shares=n, threshold=k, secret_length=len(secret))
        return shares

    @log_operation("combine")
    def combine(self, shares: ShareSet) -> bytes:
        """Combine shares to reconstruct the secret.

        At least the split threshold of shares must be supplied. Fewer
        shares cannot be detected and produce a wrong secret.

        Args:
            shares: Mapping of share ID to share value

        Returns:
            The reconstructed secret

        Raises:
            InsufficientSharesError: If no shares are provided
            InvalidShareError: If shares are malformed or of unequal length
        """
        share_ids, values, length = self._validate_shares(shares)

        with metrics.track_operation("combine", length):
            secret = self._interpolate_positions(
                share_ids, values, length, intercept_at_zero
            )

        logger.info("Secret combined", shares=len(share_ids), secret_length=length)
        return secret

    @log_operation("recover_share")
    def recover_share(self, shares: ShareSet, share_id: int) -> bytes:
        """Recover a missing share using existing shares.

        If you have k shares and need to reconstruct a lost one,
        Lagrange interpolation at the lost share's ID recomputes it.

        Args:
            shares: Mapping of existing share IDs to values (at least k)
            share_id: The ID of the share to recover (1-255)

        Returns:
            The recovered share value

        Raises:
            InvalidShareError: If share_id is invalid or already present,
                or the supplied shares are malformed
            InsufficientSharesError: If no shares are provided
        """
        if not _is_share_id(share_id):
            raise InvalidShareError(
                f"Share ID must be between 1 and {self.MAX_SHARES}, got {share_id!r}"
            )
        share_ids, values, length = self._validate_shares(shares)
        if share_id in share_ids:
            raise InvalidShareError(f"Share with ID {share_id} already exists")

        with metrics.track_operation("recover_share", length):
            value = self._interpolate_positions(
                share_ids,
                values,
                length,
                lambda points: interpolate_at(points, share_id),
            )

        logger.info("Share recovered", shares=len(share_ids), share_id=share_id)
        return value

    def verify_shares(self, shares: ShareSet) -> bool:
        """Check that shares are structurally compatible.

        Only IDs, types and lengths are checked. A share that was altered
        in transit still passes.

        Args:
            shares: Mapping of share ID to share value

        Returns:
            True if shares can be passed to combine
        """
        try:
            self._validate_shares(shares)
        except SecretSharingError:
            return False
        return True

    def _validate_parameters(self, n: int, k: int) -> None:
        for name, value in (("n", n), ("k", k)):
            if not _is_share_id(value):
                raise InvalidParametersError(
                    f"{name} must be an integer between 1 and {self.MAX_SHARES}, got {value!r}"
                )
        if k > n:
            raise InvalidParametersError(
                f"Threshold k={k} cannot exceed share count n={n}"
            )

    def _validate_shares(self, shares: ShareSet) -> Tuple[List[int], List[bytes], int]:
        """Validate a share set and return its IDs, values and common length."""
        if not isinstance(shares, Mapping):
            raise InvalidShareError(
                f"Shares must be a mapping of share ID to value, got {type(shares).__name__}"
            )
        if not shares:
            raise InsufficientSharesError("No shares provided")

        share_ids: List[int] = []
        values: List[bytes] = []
        for share_id, value in shares.items():
            if not _is_share_id(share_id):
                raise InvalidShareError(
                    f"Share ID must be between 1 and {self.MAX_SHARES}, got {share_id!r}"
                )
            if not isinstance(value, _BYTES_TYPES):
                raise InvalidShareError(
                    f"Share {share_id} value must be bytes, got {type(value).__name__}"
                )
            share_ids.append(share_id)
            values.append(bytes(value))

        length = len(values[0])
        if any(len(value) != length for value in values):
            raise InvalidShareError("Shares have different lengths")

        return share_ids, values, length

    def _interpolate_positions(
        self,
        share_ids: Sequence[int],
        values: Sequence[bytes],
        length: int,
        interpolate: Callable[[List[Tuple[int, int]]], int],
    ) -> bytes:
        """Interpolate every byte position across the supplied shares."""

        def interpolate_chunk(start: int, stop: int) -> bytes:
            return bytes(
                interpolate([(x, value[pos]) for x, value in zip(share_ids, values)])
                for pos in range(start, stop)
            )

        return b"".join(self._map_chunks(length, interpolate_chunk))

    def _map_chunks(self, length: int, func: Callable[[int, int], T]) -> List[T]:
        """Apply ``func(start, stop)`` over byte positions, preserving order.

        Runs on the calling thread for empty input, or unless more than one
        worker is configured and ``length`` reaches ``parallel_min_bytes``.
        """
        workers = self.max_workers
        if length == 0 or workers <= 1 or length < self.parallel_min_bytes:
            return [func(0, length)]

        chunk_size = -(-length // workers)
        bounds = [
            (start, min(start + chunk_size, length))
            for start in range(0, length, chunk_size)
        ]

        with ThreadPoolExecutor(max_workers=workers) as executor:
            return list(executor.map(lambda b: func(*b), bounds))


# Singleton instance
secret_sharing_engine = SecretSharingEngine()


def split(n: int, k: int, secret: bytes, entropy: Optional[EntropySource] = None) -> Dict[int, bytes]:
    """Split ``secret`` into ``n`` shares, any ``k`` of which recombine."""
    return secret_sharing_engine.split(n, k, secret, entropy=entropy)


def combine(shares: ShareSet) -> bytes:
    """Combine a mapping of share IDs to share values into the secret."""
    return secret_sharing_engine.combine(shares)


def recover_share(shares: ShareSet, share_id: int) -> bytes:
    """Recompute the value of share ``share_id`` from existing shares."""
    return secret_sharing_engine.recover_share(shares, share_id)

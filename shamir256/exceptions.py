"""
Exception classes for shamir256.
"""


class SecretSharingError(Exception):
    """Secret sharing operation failed."""
    pass


class InvalidParametersError(SecretSharingError):
    """Share count, threshold or secret size is out of range."""
    pass


class InsufficientSharesError(SecretSharingError):
    """No shares were supplied.

    Supplying fewer than the threshold is not detected: shares carry no
    threshold metadata, so the result is simply a wrong secret.
    """
    pass


class InvalidShareError(SecretSharingError):
    """Share set is malformed (bad ID, wrong type, mismatched lengths)."""
    pass


class EntropyError(SecretSharingError):
    """Entropy source returned data of the wrong length."""

    def __init__(self, message: str, requested: int | None = None, received: int | None = None):
        super().__init__(message)
        self.requested = requested
        self.received = received

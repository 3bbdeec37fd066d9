"""
Failure taxonomy for registration and decoding.

All failures are recoverable and reported as values (bool results,
DecodeResult.reason), never raised.
"""

from enum import Enum


class FailureReason(str, Enum):
    """Reason codes for failed register/decode calls."""

    SHORT_READ = "short_read"
    """Source exhausted before the expected byte count was available."""

    UNKNOWN_KIND = "unknown_kind"
    """Kind tag not present in the registry."""

    DUPLICATE_REGISTRATION = "duplicate_registration"
    """Attempt to register a kind that is already present."""

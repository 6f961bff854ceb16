"""Error taxonomy for hashing, salt generation and codec conversions."""

from __future__ import annotations


class HashManagerError(Exception):
    """Base class for every error raised by the hashing core."""


class InvalidConfiguration(HashManagerError, ValueError):
    """Engine configuration rejected at construction time."""


class UnknownAlgorithm(HashManagerError, LookupError):
    """Digest algorithm identifier could not be resolved."""


class InvalidArgument(HashManagerError, TypeError):
    """Required argument was absent or unusable."""


class EntropyUnavailable(HashManagerError, RuntimeError):
    """Secure random source failed to produce bytes."""


class InvalidEncoding(HashManagerError, ValueError):
    """Textual input could not be decoded by a codec conversion."""

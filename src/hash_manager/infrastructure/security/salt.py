"""Cryptographically secure salt generation."""

from __future__ import annotations

import secrets
from collections.abc import Callable

from hash_manager.domain.errors import EntropyUnavailable, InvalidArgument

DEFAULT_SALT_SIZE = 32


def generate_salt(
    size: int = DEFAULT_SALT_SIZE,
    *,
    random_bytes: Callable[[int], bytes] = secrets.token_bytes,
) -> bytes:
    """Return ``size`` bytes from the secure random source.

    Failures of the random source surface as ``EntropyUnavailable``; they are
    never replaced with weaker randomness.
    """

    if isinstance(size, bool) or not isinstance(size, int):
        raise InvalidArgument(f"salt size must be an integer, got {type(size).__name__}")
    if size < 0:
        raise InvalidArgument(f"salt size cannot be negative: {size}")

    try:
        salt = random_bytes(size)
    except (OSError, NotImplementedError) as exc:
        raise EntropyUnavailable("secure random source is unavailable") from exc

    if len(salt) != size:
        raise EntropyUnavailable(
            f"secure random source returned {len(salt)} bytes, expected {size}"
        )
    return salt

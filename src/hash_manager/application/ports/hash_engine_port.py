"""Ports for iterative salted hashing."""

from __future__ import annotations

from collections.abc import Callable
from typing import Protocol


class DigestObject(Protocol):
    """Minimal surface of a ``hashlib``-style hash object."""

    @property
    def name(self) -> str: ...

    @property
    def digest_size(self) -> int: ...

    def update(self, data: bytes, /) -> None: ...

    def digest(self) -> bytes: ...


DigestFactory = Callable[[], DigestObject]


class HashEnginePort(Protocol):
    """Salted, iterative hash derivation and verification contract."""

    @property
    def algorithm(self) -> str:
        """Canonical digest algorithm name."""

    @property
    def iterations(self) -> int:
        """Number of hashing rounds per encode."""

    @property
    def digest_size(self) -> int:
        """Native digest size in bytes."""

    def encode(self, plaintext: str | bytes, salt: bytes) -> bytes:
        """Derive the digest of plaintext mixed with salt."""

    def verify(self, plaintext: str | bytes, digest: bytes, salt: bytes) -> bool:
        """Return whether plaintext and salt reproduce digest."""

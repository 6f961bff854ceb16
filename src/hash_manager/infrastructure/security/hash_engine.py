"""Salted, iterative password hashing engine."""

from __future__ import annotations

import functools
import hashlib
import hmac
from dataclasses import dataclass, field

from hash_manager.application.ports.hash_engine_port import DigestFactory, DigestObject
from hash_manager.domain.errors import InvalidArgument, InvalidConfiguration, UnknownAlgorithm
from hash_manager.infrastructure.security.codec import string_to_bytes

DEFAULT_ALGORITHM = "SHA-256"
DEFAULT_ITERATIONS = 65536

_PLATFORM_PREFIX = "system.security.cryptography."
_PLATFORM_SUFFIXES = ("cryptoserviceprovider", "managed", "cng")


def _candidate_names(name: str) -> list[str]:
    normalized = name.strip().lower()
    if normalized.startswith(_PLATFORM_PREFIX):
        normalized = normalized[len(_PLATFORM_PREFIX) :]
    for suffix in _PLATFORM_SUFFIXES:
        if normalized.endswith(suffix) and normalized != suffix:
            normalized = normalized[: -len(suffix)]
            break

    candidates = [normalized.replace("-", ""), normalized.replace("-", "_"), normalized]
    return list(dict.fromkeys(candidates))


def resolve_algorithm(algorithm: str) -> DigestFactory:
    """Resolve a well-known digest name to a factory of fresh hash objects."""

    if not isinstance(algorithm, str) or not algorithm.strip():
        raise UnknownAlgorithm(f"unknown hash algorithm: {algorithm!r}")

    last_error: Exception | None = None
    for candidate in _candidate_names(algorithm):
        try:
            hashlib.new(candidate)
        except (ValueError, TypeError) as exc:
            last_error = exc
            continue
        return functools.partial(hashlib.new, candidate)

    raise UnknownAlgorithm(f"unknown hash algorithm: {algorithm!r}") from last_error


def _validate_iterations(iterations: object) -> int:
    if isinstance(iterations, bool) or not isinstance(iterations, int):
        raise InvalidConfiguration(
            f"iterations must be an integer, got {type(iterations).__name__}"
        )
    if iterations < 1:
        raise InvalidConfiguration(
            f"the number of iterations cannot be less than 1: {iterations}"
        )
    return int(iterations)


@dataclass(frozen=True)
class HashEngine:
    """Derive and verify digests by repeatedly hashing ``running || salt``.

    ``algorithm`` is either a well-known name (``"SHA-256"``, ``"sha512"``,
    ``"SHA3-256"``) or a zero-argument callable returning a fresh
    ``hashlib``-style object, such as ``hashlib.sha256``. After construction
    ``algorithm`` holds the canonical name reported by the digest object.

    Text plaintexts are encoded as UTF-16LE before hashing so that digests
    stay interchangeable with previously stored values.
    """

    algorithm: str | DigestFactory = DEFAULT_ALGORITHM
    iterations: int = DEFAULT_ITERATIONS
    digest_size: int = field(init=False)
    _factory: DigestFactory = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        iterations = _validate_iterations(self.iterations)

        if isinstance(self.algorithm, str):
            factory = resolve_algorithm(self.algorithm)
        elif callable(self.algorithm):
            factory = self.algorithm
        else:
            raise UnknownAlgorithm(f"unknown hash algorithm: {self.algorithm!r}")

        probe = self._new_digest(factory)
        if probe.digest_size < 1:
            raise UnknownAlgorithm(
                f"hash algorithm {self.algorithm!r} has no fixed digest size"
            )

        object.__setattr__(self, "iterations", iterations)
        name = getattr(probe, "name", None) or getattr(factory, "__name__", "custom")
        object.__setattr__(self, "algorithm", name)
        object.__setattr__(self, "digest_size", probe.digest_size)
        object.__setattr__(self, "_factory", factory)

    @staticmethod
    def _new_digest(factory: DigestFactory) -> DigestObject:
        try:
            digest = factory()
        except (ValueError, TypeError) as exc:
            raise UnknownAlgorithm("hash algorithm handle could not be instantiated") from exc
        if not all(hasattr(digest, attr) for attr in ("update", "digest", "digest_size")):
            raise UnknownAlgorithm(
                f"hash algorithm handle returned an unusable object: {digest!r}"
            )
        return digest

    def encode(self, plaintext: str | bytes, salt: bytes) -> bytes:
        """Return the digest after ``iterations`` rounds over plaintext and salt."""

        if plaintext is None:
            raise InvalidArgument("plaintext is required")
        if salt is None:
            raise InvalidArgument("salt is required")

        running = _plaintext_bytes(plaintext)
        salt = _byte_sequence(salt, name="salt")
        for _ in range(self.iterations):
            digest = self._factory()
            digest.update(running + salt)
            running = digest.digest()
        return running

    def verify(self, plaintext: str | bytes, digest: bytes, salt: bytes) -> bool:
        """Return whether ``plaintext`` and ``salt`` reproduce ``digest``.

        The comparison is constant-time over the full digest length; a length
        mismatch is simply a failed verification.
        """

        if plaintext is None:
            raise InvalidArgument("plaintext is required")
        if salt is None:
            raise InvalidArgument("salt is required")
        if digest is None:
            raise InvalidArgument("digest is required")

        expected = _byte_sequence(digest, name="digest")
        candidate = self.encode(plaintext, salt)
        if len(candidate) != len(expected):
            return False
        return hmac.compare_digest(candidate, expected)


def _byte_sequence(value: object, *, name: str) -> bytes:
    if isinstance(value, (bytes, bytearray, memoryview)):
        return bytes(value)
    raise InvalidArgument(f"{name} must be bytes, got {type(value).__name__}")


def _plaintext_bytes(plaintext: str | bytes) -> bytes:
    if isinstance(plaintext, str):
        return string_to_bytes(plaintext) or b""
    if isinstance(plaintext, (bytes, bytearray, memoryview)):
        return bytes(plaintext)
    raise InvalidArgument(
        f"plaintext must be text or bytes, got {type(plaintext).__name__}"
    )

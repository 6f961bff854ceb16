"""Application service for generating and verifying salted credentials."""

from __future__ import annotations

import logging

from hash_manager.application.dto.credential_models import (
    GeneratedCredential,
    VerificationRequest,
)
from hash_manager.application.ports.hash_engine_port import HashEnginePort
from hash_manager.application.ports.salt_source_port import SaltSourcePort
from hash_manager.domain.errors import InvalidArgument
from hash_manager.infrastructure.security.codec import from_hex_string, to_hex_string
from hash_manager.infrastructure.security.salt import DEFAULT_SALT_SIZE, generate_salt

logger = logging.getLogger(__name__)


class CredentialService:
    """Derive digests for new secrets and check secrets against stored digests."""

    def __init__(
        self,
        *,
        hash_engine: HashEnginePort,
        salt_source: SaltSourcePort = generate_salt,
        salt_size: int = DEFAULT_SALT_SIZE,
    ) -> None:
        if salt_size < 1:
            raise InvalidArgument(f"salt size must be positive: {salt_size}")
        self._hash_engine = hash_engine
        self._salt_source = salt_source
        self._salt_size = salt_size

    def generate(self, secret: str) -> GeneratedCredential:
        """Hash one secret with a freshly generated salt."""

        if secret is None:
            raise InvalidArgument("secret is required")

        salt = self._salt_source(self._salt_size)
        digest = self._hash_engine.encode(secret, salt)
        logger.info(
            "credential_generated algorithm=%s iterations=%s salt_bytes=%s",
            self._hash_engine.algorithm,
            self._hash_engine.iterations,
            len(salt),
        )
        return GeneratedCredential(
            algorithm=self._hash_engine.algorithm,
            iterations=self._hash_engine.iterations,
            digest_hex=to_hex_string(digest),
            salt_hex=to_hex_string(salt),
        )

    def verify(self, request: VerificationRequest) -> bool:
        """Return whether the request secret reproduces the stored digest."""

        is_valid = self._hash_engine.verify(
            request.secret.get_secret_value(),
            from_hex_string(request.digest_hex),
            from_hex_string(request.salt_hex),
        )
        logger.info(
            "credential_verified algorithm=%s iterations=%s outcome=%s",
            self._hash_engine.algorithm,
            self._hash_engine.iterations,
            "ok" if is_valid else "invalid",
        )
        return is_valid

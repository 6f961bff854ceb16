"""Pydantic models for generated credentials and verification requests."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field, SecretStr, field_validator

from hash_manager.infrastructure.security.codec import from_hex_string, to_hex_string


class StrictModel(BaseModel):
    """Base model with strict unknown-field rejection."""

    model_config = ConfigDict(extra="forbid", frozen=True)


def normalize_hex(value: str) -> str:
    """Canonicalize externally supplied hex to lowercase, even-length form."""

    return to_hex_string(from_hex_string(value))


class GeneratedCredential(StrictModel):
    """Digest and salt produced for one secret, with the engine settings used."""

    algorithm: str = Field(min_length=1)
    iterations: int = Field(gt=0)
    digest_hex: str
    salt_hex: str

    @field_validator("digest_hex", "salt_hex")
    @classmethod
    def _normalize_hex_fields(cls, value: str) -> str:
        return normalize_hex(value)


class VerificationRequest(StrictModel):
    """Secret to check against a stored hex digest and hex salt."""

    secret: SecretStr
    digest_hex: str
    salt_hex: str

    @field_validator("digest_hex", "salt_hex")
    @classmethod
    def _normalize_hex_fields(cls, value: str) -> str:
        return normalize_hex(value)

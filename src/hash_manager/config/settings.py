"""Runtime settings loaded from environment variables."""

from functools import lru_cache
from typing import Annotated

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

NonEmptyStr = Annotated[str, Field(min_length=1)]
NonNegativeInt = Annotated[int, Field(ge=0)]
PositiveInt = Annotated[int, Field(gt=0)]


class Settings(BaseSettings):
    """Environment-driven defaults for hashing and password generation."""

    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    hash_algorithm: NonEmptyStr = Field(default="SHA-256", validation_alias="HASH_ALGORITHM")
    hash_iterations: PositiveInt = Field(default=65536, validation_alias="HASH_ITERATIONS")
    hash_salt_bytes: PositiveInt = Field(default=32, validation_alias="HASH_SALT_BYTES")
    password_length: PositiveInt = Field(default=8, validation_alias="PASSWORD_LENGTH")
    password_count: NonNegativeInt = Field(default=5, validation_alias="PASSWORD_COUNT")
    log_level: str = Field(default="WARNING", validation_alias="LOG_LEVEL")


@lru_cache(maxsize=1)
def load_settings() -> Settings:
    """Load and cache application settings."""

    return Settings()

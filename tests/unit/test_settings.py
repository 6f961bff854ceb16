import pytest
from pydantic import ValidationError

from hash_manager.config.settings import Settings

SETTINGS_ENV = (
    "HASH_ALGORITHM",
    "HASH_ITERATIONS",
    "HASH_SALT_BYTES",
    "PASSWORD_LENGTH",
    "PASSWORD_COUNT",
    "LOG_LEVEL",
)


def _clear_env(monkeypatch: pytest.MonkeyPatch) -> None:
    for key in SETTINGS_ENV:
        monkeypatch.delenv(key, raising=False)


def test_defaults_are_deterministic(monkeypatch: pytest.MonkeyPatch) -> None:
    _clear_env(monkeypatch)

    settings = Settings(_env_file=None)

    assert settings.hash_algorithm == "SHA-256"
    assert settings.hash_iterations == 65536
    assert settings.hash_salt_bytes == 32
    assert settings.password_length == 8
    assert settings.password_count == 5
    assert settings.log_level == "WARNING"


def test_environment_overrides_defaults(monkeypatch: pytest.MonkeyPatch) -> None:
    _clear_env(monkeypatch)
    monkeypatch.setenv("HASH_ALGORITHM", "SHA-512")
    monkeypatch.setenv("HASH_ITERATIONS", "1000")
    monkeypatch.setenv("HASH_SALT_BYTES", "16")
    monkeypatch.setenv("LOG_LEVEL", "debug")

    settings = Settings(_env_file=None)

    assert settings.hash_algorithm == "SHA-512"
    assert settings.hash_iterations == 1000
    assert settings.hash_salt_bytes == 16
    assert settings.log_level == "debug"


@pytest.mark.parametrize(
    ("key", "value"),
    [
        ("HASH_ITERATIONS", "0"),
        ("HASH_ITERATIONS", "-5"),
        ("HASH_ITERATIONS", "many"),
        ("HASH_SALT_BYTES", "0"),
        ("HASH_ALGORITHM", ""),
        ("PASSWORD_LENGTH", "0"),
        ("PASSWORD_COUNT", "-1"),
    ],
)
def test_invalid_values_raise_validation_error(
    monkeypatch: pytest.MonkeyPatch,
    key: str,
    value: str,
) -> None:
    _clear_env(monkeypatch)
    monkeypatch.setenv(key, value)

    with pytest.raises(ValidationError):
        Settings(_env_file=None)

from __future__ import annotations

import pytest

from hash_manager.domain.errors import EntropyUnavailable, InvalidArgument
from hash_manager.infrastructure.security.salt import DEFAULT_SALT_SIZE, generate_salt


def test_default_salt_is_32_bytes() -> None:
    assert DEFAULT_SALT_SIZE == 32
    assert len(generate_salt()) == 32


@pytest.mark.parametrize("size", [0, 1, 16, 64])
def test_salt_has_requested_size(size: int) -> None:
    assert len(generate_salt(size)) == size


def test_consecutive_salts_differ() -> None:
    assert generate_salt() != generate_salt()


def test_negative_size_is_rejected() -> None:
    with pytest.raises(InvalidArgument):
        generate_salt(-1)


def test_random_source_failure_surfaces_as_entropy_unavailable() -> None:
    def broken_source(size: int) -> bytes:
        raise OSError("getrandom failed")

    with pytest.raises(EntropyUnavailable) as exc_info:
        generate_salt(8, random_bytes=broken_source)

    assert isinstance(exc_info.value.__cause__, OSError)


def test_short_read_from_random_source_is_not_accepted() -> None:
    with pytest.raises(EntropyUnavailable):
        generate_salt(8, random_bytes=lambda size: b"\x00" * (size - 1))

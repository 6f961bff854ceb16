"""Character classes and pools used by the password generator."""

from __future__ import annotations

import string
from enum import Flag

from hash_manager.domain.errors import InvalidArgument


class CharTypes(Flag):
    """Selectable character classes; members combine with ``|``."""

    LOWER = 0x01
    UPPER = 0x02
    DIGIT = 0x04
    SPECIAL = 0x08
    ALL = LOWER | UPPER | DIGIT | SPECIAL


CHAR_POOLS: dict[CharTypes, tuple[str, ...]] = {
    CharTypes.LOWER: tuple(string.ascii_lowercase),
    CharTypes.UPPER: tuple(string.ascii_uppercase),
    CharTypes.DIGIT: tuple(string.digits),
    CharTypes.SPECIAL: tuple(string.punctuation),
}


def _single_bit_members() -> list[CharTypes]:
    return [member for member in CharTypes if member.value & (member.value - 1) == 0]


def _validate_pools() -> None:
    missing = [member.name for member in _single_bit_members() if member not in CHAR_POOLS]
    if missing:
        raise RuntimeError(f"character pools missing for: {', '.join(missing)}")


_validate_pools()


def pool_for(char_types: CharTypes) -> tuple[str, ...]:
    """Return the concatenated pool for every class selected in ``char_types``."""

    pool: list[str] = []
    for member in _single_bit_members():
        if member in char_types:
            pool.extend(CHAR_POOLS[member])
    if not pool:
        raise InvalidArgument("at least one character type must be selected")
    return tuple(pool)

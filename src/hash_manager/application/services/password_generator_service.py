"""Application service producing random passwords."""

from __future__ import annotations

import logging
from collections.abc import Iterable
from itertools import islice

from hash_manager.domain.errors import InvalidArgument

logger = logging.getLogger(__name__)


class PasswordGeneratorService:
    """Slice fixed-length passwords off an endless character sequence."""

    def __init__(self, *, sequence: Iterable[str]) -> None:
        self._sequence = sequence

    def generate(self, *, length: int, count: int) -> list[str]:
        """Return ``count`` passwords of ``length`` characters each."""

        if length < 1:
            raise InvalidArgument(f"password length must be positive: {length}")
        if count < 0:
            raise InvalidArgument(f"password count cannot be negative: {count}")

        characters = iter(self._sequence)
        passwords = ["".join(islice(characters, length)) for _ in range(count)]
        logger.info("passwords_generated length=%s count=%s", length, count)
        return passwords

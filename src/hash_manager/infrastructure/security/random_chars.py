"""Infinite sequence of securely drawn password characters."""

from __future__ import annotations

import secrets
from collections.abc import Iterator, Sequence

from hash_manager.domain.char_types import CharTypes, pool_for


class RandomCharIterator(Iterator[str]):
    """Endless iterator drawing each character uniformly from a fixed pool."""

    def __init__(self, pool: Sequence[str]) -> None:
        self._pool = tuple(pool)

    def __next__(self) -> str:
        return secrets.choice(self._pool)


class RandomCharSequence:
    """Iterable over random characters from the selected character classes.

    Every ``iter()`` call builds the pool for the current ``char_types`` and
    returns a fresh, non-restartable iterator that never stops.
    """

    def __init__(self, char_types: CharTypes = CharTypes.ALL) -> None:
        self.char_types = char_types

    def __iter__(self) -> RandomCharIterator:
        return RandomCharIterator(pool_for(self.char_types))

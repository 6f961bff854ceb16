"""Port for secure salt generation."""

from __future__ import annotations

from typing import Protocol


class SaltSourcePort(Protocol):
    """Callable producing cryptographically random salt bytes."""

    def __call__(self, size: int) -> bytes:
        """Return exactly ``size`` random bytes."""

"""newpassword entrypoint: print a batch of random passwords."""

from __future__ import annotations

import logging
import sys
from collections.abc import Sequence

from hash_manager.application.services.password_generator_service import (
    PasswordGeneratorService,
)
from hash_manager.config.settings import Settings, load_settings
from hash_manager.domain.errors import HashManagerError
from hash_manager.infrastructure.logging import configure_logging
from hash_manager.infrastructure.security.random_chars import RandomCharSequence

logger = logging.getLogger(__name__)


def _parse_int(raw: str, *, default: int) -> int:
    try:
        return int(raw)
    except ValueError:
        logger.warning("newpassword_argument_ignored value=%r default=%s", raw, default)
        return default


def main(argv: Sequence[str] | None = None, *, settings: Settings | None = None) -> int:
    """Print ``count`` passwords of ``length`` characters, one per line."""

    settings = settings or load_settings()
    configure_logging(level=settings.log_level)
    args = list(sys.argv[1:] if argv is None else argv)

    length = (
        _parse_int(args[0], default=settings.password_length)
        if args
        else settings.password_length
    )
    count = (
        _parse_int(args[1], default=settings.password_count)
        if len(args) > 1
        else settings.password_count
    )

    service = PasswordGeneratorService(sequence=RandomCharSequence())
    try:
        passwords = service.generate(length=length, count=count)
    except HashManagerError as exc:
        logger.error("newpassword_failed error=%s", exc)
        print(f"error: {exc}", file=sys.stderr)
        return 1

    for password in passwords:
        print(password)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())

"""hashgen entrypoint: derive a salted digest for one secret."""

from __future__ import annotations

import argparse
import logging
import sys
from collections.abc import Sequence

from hash_manager.application.dto.credential_models import GeneratedCredential
from hash_manager.application.services.credential_service import CredentialService
from hash_manager.config.settings import Settings, load_settings
from hash_manager.domain.errors import HashManagerError, InvalidArgument
from hash_manager.infrastructure.logging import configure_logging
from hash_manager.infrastructure.security.hash_engine import HashEngine
from hash_manager.infrastructure.security.salt import generate_salt

logger = logging.getLogger(__name__)

USAGE = "Usage: hashgen password [algorithm] [iterations] [salt-byte-size]"


def build_parser() -> argparse.ArgumentParser:
    """Build the positional argument parser for hashgen."""

    parser = argparse.ArgumentParser(prog="hashgen", usage=USAGE, add_help=False)
    parser.add_argument("secret", nargs="?")
    parser.add_argument("algorithm", nargs="?")
    parser.add_argument("iterations", nargs="?")
    parser.add_argument("salt_size", nargs="?")
    return parser


def parse_arguments(argv: Sequence[str]) -> argparse.Namespace:
    """Read every argument as a positional, including ones that start with ``-``."""

    args, _ = build_parser().parse_known_args(["--", *argv])
    return args


def _parse_int(raw: str | None, *, name: str, default: int) -> int:
    if raw is None:
        return default
    try:
        return int(raw)
    except ValueError as exc:
        raise InvalidArgument(f"{name} must be an integer: {raw!r}") from exc


def generate_credential(
    *,
    secret: str,
    algorithm: str,
    iterations: int,
    salt_size: int,
) -> GeneratedCredential:
    """Hash ``secret`` with a fresh salt using the given engine settings."""

    service = CredentialService(
        hash_engine=HashEngine(algorithm.upper(), iterations),
        salt_source=generate_salt,
        salt_size=salt_size,
    )
    return service.generate(secret)


def main(argv: Sequence[str] | None = None, *, settings: Settings | None = None) -> int:
    """Print the hex digest and hex salt for the secret given on the command line."""

    settings = settings or load_settings()
    configure_logging(level=settings.log_level)
    args = parse_arguments(sys.argv[1:] if argv is None else argv)

    if args.secret is None:
        print(USAGE)
        return 0

    try:
        iterations = _parse_int(
            args.iterations, name="iterations", default=settings.hash_iterations
        )
        salt_size = _parse_int(args.salt_size, name="salt size", default=settings.hash_salt_bytes)
        credential = generate_credential(
            secret=args.secret,
            algorithm=args.algorithm or settings.hash_algorithm,
            iterations=iterations,
            salt_size=salt_size,
        )
    except HashManagerError as exc:
        logger.error("hashgen_failed error_type=%s error=%s", type(exc).__name__, exc)
        print(f"error: {exc}", file=sys.stderr)
        return 1

    print(f"hash: {credential.digest_hex}")
    print(f"salt: {credential.salt_hex}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())

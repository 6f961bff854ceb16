"""pwdverify entrypoint: check one secret against a stored digest and salt."""

from __future__ import annotations

import argparse
import logging
import sys
from collections.abc import Sequence

from pydantic import SecretStr, ValidationError

from hash_manager.application.dto.credential_models import VerificationRequest
from hash_manager.application.services.credential_service import CredentialService
from hash_manager.config.settings import Settings, load_settings
from hash_manager.domain.errors import HashManagerError, InvalidArgument
from hash_manager.infrastructure.logging import configure_logging
from hash_manager.infrastructure.security.hash_engine import HashEngine

logger = logging.getLogger(__name__)

USAGE = "Usage: pwdverify password hash salt [algorithm] [iterations]"


def build_parser() -> argparse.ArgumentParser:
    """Build the positional argument parser for pwdverify."""

    parser = argparse.ArgumentParser(prog="pwdverify", usage=USAGE, add_help=False)
    parser.add_argument("secret", nargs="?")
    parser.add_argument("digest", nargs="?")
    parser.add_argument("salt", nargs="?")
    parser.add_argument("algorithm", nargs="?")
    parser.add_argument("iterations", nargs="?")
    return parser


def parse_arguments(argv: Sequence[str]) -> argparse.Namespace:
    """Read every argument as a positional, including ones that start with ``-``."""

    args, _ = build_parser().parse_known_args(["--", *argv])
    return args


def _parse_iterations(raw: str | None, *, default: int) -> int:
    if raw is None:
        return default
    try:
        return int(raw)
    except ValueError as exc:
        raise InvalidArgument(f"iterations must be an integer: {raw!r}") from exc


def _report_error(exc: Exception, *, message: str) -> int:
    logger.error("pwdverify_failed error_type=%s error=%s", type(exc).__name__, message)
    print(f"error: {message}", file=sys.stderr)
    return 1


def main(argv: Sequence[str] | None = None, *, settings: Settings | None = None) -> int:
    """Print ``OK`` when the secret matches, ``INVALID PASSWORD`` otherwise."""

    settings = settings or load_settings()
    configure_logging(level=settings.log_level)
    args = parse_arguments(sys.argv[1:] if argv is None else argv)

    if args.secret is None or args.digest is None or args.salt is None:
        print(USAGE)
        return 0

    algorithm = args.algorithm or settings.hash_algorithm
    try:
        iterations = _parse_iterations(args.iterations, default=settings.hash_iterations)
        request = VerificationRequest(
            secret=SecretStr(args.secret),
            digest_hex=args.digest,
            salt_hex=args.salt,
        )
        service = CredentialService(hash_engine=HashEngine(algorithm.upper(), iterations))
        is_valid = service.verify(request)
    except HashManagerError as exc:
        return _report_error(exc, message=str(exc))
    except ValidationError as exc:
        return _report_error(exc, message="; ".join(error["msg"] for error in exc.errors()))

    print("OK" if is_valid else "INVALID PASSWORD")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())

"""Mint a bearer token for a caller identity.

Useful when exercising the API locally, for example::

    python -m postboard.scripts.tokens alice
    python -m postboard.scripts.tokens --admin
"""
from __future__ import annotations

import argparse
import sys

from postboard.core.security import create_access_token
from postboard.core.settings import settings


def main(argv: list[str] | None = None) -> None:
    parser = argparse.ArgumentParser(description="Issue a bearer token for an identity")
    parser.add_argument("identity", nargs="?", default=None, help="Caller identity (JWT subject)")
    parser.add_argument(
        "--admin",
        action="store_true",
        help="Issue the token for the configured administrator identity",
    )
    parser.add_argument(
        "--minutes",
        type=int,
        default=None,
        help="Token lifetime in minutes (defaults to ACCESS_TOKEN_EXPIRE_MINUTES)",
    )
    args = parser.parse_args(argv)

    identity = settings.admin_identity if args.admin else args.identity
    if not identity:
        parser.error("an identity or --admin is required")

    sys.stdout.write(create_access_token(identity, expires_minutes=args.minutes) + "\n")


if __name__ == "__main__":
    main()

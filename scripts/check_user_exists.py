#!/usr/bin/env python3
"""
Check whether a user row exists for an email in the configured database.
It packages the validator call so environment checks can be run the same way locally and in CI.
Run it directly; it prints a JSON result and exits non-zero when the database cannot be queried.
"""

from __future__ import annotations

import argparse
import json
import sys
from collections.abc import Sequence
from pathlib import Path

ROOT_DIR = Path(__file__).resolve().parents[1]
if str(ROOT_DIR) not in sys.path:
    sys.path.insert(0, str(ROOT_DIR))

from sqlalchemy.exc import SQLAlchemyError

from src.common.db import get_engine
from src.common.logging import configure_logging
from src.db.user_validator import UserDbValidator


def parse_args(argv: Sequence[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Check whether a user with the given email exists")
    parser.add_argument("--email", required=True)
    parser.add_argument("--log-level", default=None, help="Overrides LOG_LEVEL for this run")
    parser.add_argument("--debug-components", action="store_true", help="Log db/ui call details at DEBUG")
    return parser.parse_args(argv)


def main(argv: Sequence[str] | None = None) -> None:
    args = parse_args(argv)
    configure_logging(level=args.log_level, component_level="DEBUG" if args.debug_components else None)

    try:
        with get_engine().connect() as connection:
            exists = UserDbValidator(connection).user_exists(args.email)
    except SQLAlchemyError as exc:
        print(f"User lookup failed: {exc}", file=sys.stderr)
        sys.exit(1)

    print(json.dumps({"email": args.email, "exists": exists}, indent=2))


if __name__ == "__main__":
    main()

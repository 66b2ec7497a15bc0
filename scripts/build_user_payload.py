#!/usr/bin/env python3
"""
Print a user request payload built with the fluent builder.
Options that are not given keep the builder defaults.
"""

from __future__ import annotations

import argparse
import sys
from collections.abc import Sequence
from pathlib import Path

ROOT_DIR = Path(__file__).resolve().parents[1]
if str(ROOT_DIR) not in sys.path:
    sys.path.insert(0, str(ROOT_DIR))

from src.api.payload_builder import UserPayloadBuilder
from src.common.logging import configure_logging


def parse_args(argv: Sequence[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Build a user JSON payload")
    parser.add_argument("--name", default=None)
    parser.add_argument("--email", default=None)
    parser.add_argument("--log-level", default="WARNING")
    return parser.parse_args(argv)


def main(argv: Sequence[str] | None = None) -> None:
    args = parse_args(argv)
    configure_logging(level=args.log_level)
    builder = UserPayloadBuilder()
    if args.name is not None:
        builder.with_name(args.name)
    if args.email is not None:
        builder.with_email(args.email)
    print(builder.build())


if __name__ == "__main__":
    main()

"""Точка входа: python -m exchange_account [config.toml] [--mode MODE]."""

import argparse
import logging
import sys
from typing import Optional, Sequence

from exchange_account.parser import IdentifierMode, IdentifierParseError
from exchange_account.settings import SettingsError, load_settings

logger = logging.getLogger("exchange_account")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="exchange_account",
        description="Load config.toml and print the parsed exchange account identifier.",
    )
    parser.add_argument(
        "config",
        nargs="?",
        default=None,
        help="Path to config.toml (default: $EXCHANGE_ACCOUNT_CONFIG or ./config.toml)",
    )
    parser.add_argument(
        "--mode",
        choices=[mode.value for mode in IdentifierMode],
        default=IdentifierMode.PATTERN_SPLIT.value,
        help="Encoding of the exchange_id entry",
    )
    parser.add_argument(
        "--log-level",
        default="WARNING",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
    )
    return parser


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=getattr(logging, args.log_level),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )

    try:
        settings = load_settings(args.config, IdentifierMode(args.mode))
    except (SettingsError, IdentifierParseError) as exc:
        logger.error("Startup failed: %s", exc)
        print(f"error: {exc}", file=sys.stderr)
        return 1

    print(repr(settings))
    print("Hello, world!")
    return 0


if __name__ == "__main__":
    sys.exit(main())

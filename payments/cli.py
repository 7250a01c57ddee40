"""
Command line entry point.

Usage:
    payments transactions.csv > accounts.csv
    payments - --format json < transactions.csv
"""

import argparse
import sys
from contextlib import nullcontext

from .base import PaymentsError
from .config import get_settings
from .engine import process_transactions_csv
from .logs import configure_logging, get_logger

logger = get_logger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="payments",
        description="Apply transactions from CSV file and print client account balances.",
    )
    parser.add_argument("transactions", help="CSV file with transactions, '-' for stdin")
    parser.add_argument("--format", choices=["csv", "json"], help="output format")
    parser.add_argument("--log-level", help="log level, e.g. INFO or DEBUG")
    parser.add_argument(
        "--include-inactive",
        action="store_true",
        default=None,
        help="also list accounts with no applied deposit or withdrawal",
    )
    return parser


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    overrides = {
        key: value
        for key, value in [
            ("output_format", args.format),
            ("log_level", args.log_level),
            ("include_inactive", args.include_inactive),
        ]
        if value is not None
    }
    try:
        settings = get_settings().model_copy(update=overrides)
        configure_logging(settings.log_level, settings.log_format)
        source = (
            nullcontext(sys.stdin)
            if args.transactions == "-"
            else open(args.transactions, newline="", encoding="utf-8-sig")
        )
        with source as transactions:
            process_transactions_csv(transactions, sys.stdout, settings)
    except (OSError, ValueError, PaymentsError) as e:
        logger.error("run_aborted", error=str(e))
        print(f"error: {e}", file=sys.stderr)
        return 1
    return 0

# This file is a small command-line tool for working the quote moderation queue.
# It exists so moderators can list pending submissions and approve or reject them without a UI.
# The script resolves the store from the same configuration the web app uses.
# ruff: noqa: E402

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

ROOT_DIR = Path(__file__).resolve().parent.parent
if str(ROOT_DIR) not in sys.path:
    sys.path.insert(0, str(ROOT_DIR))

from src.common.logging import configure_logging
from src.qdb.base import ModerationStore, QuoteNotFoundError, StoreError
from src.qdb.factory import build_store
from src.quoteboard.board_config import get_board_config

logger = logging.getLogger(__name__)


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Manage the quote moderation queue")
    subparsers = parser.add_subparsers(dest="command", required=True)
    subparsers.add_parser("list", help="Show quotes awaiting moderation")
    approve = subparsers.add_parser("approve", help="Publish quotes on the board")
    approve.add_argument("quote_ids", nargs="+", type=int)
    reject = subparsers.add_parser("reject", help="Delete quotes from the queue")
    reject.add_argument("quote_ids", nargs="+", type=int)
    return parser.parse_args(argv)


def run(store: ModerationStore, args: argparse.Namespace) -> int:
    if args.command == "list":
        for quote in store.pending_quotes():
            print(f"{quote.quote_id}\t{quote.submitted.isoformat()}\t{quote.submitted_ip}\t{quote.text}")
        return 0

    action = store.approve_quote if args.command == "approve" else store.reject_quote
    failures = 0
    for quote_id in args.quote_ids:
        try:
            action(quote_id)
        except QuoteNotFoundError:
            logger.warning("Quote %s does not exist", quote_id)
            failures += 1
    return 1 if failures else 0


def main(argv: list[str] | None = None) -> int:
    args = parse_args(argv)
    configure_logging()
    config = get_board_config()
    try:
        store = build_store(config.store_url)
        return run(store, args)
    except StoreError as exc:
        logger.error("Moderation failed: %s", exc)
        return 2


if __name__ == "__main__":
    raise SystemExit(main())

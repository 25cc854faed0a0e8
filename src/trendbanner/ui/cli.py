# ruff: noqa: T201

from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path
from signal import SIGINT, signal
from typing import TYPE_CHECKING

from dotenv import load_dotenv

from trendbanner.app import fetch_banner_items, install_client_script
from trendbanner.config import configure_logging

if TYPE_CHECKING:
    from collections.abc import Sequence
    from types import FrameType

log = logging.getLogger(__name__)


def _positive_int(value: str) -> int:
    try:
        parsed = int(value)
    except ValueError as exc:
        raise argparse.ArgumentTypeError(f"Invalid integer: {value}") from exc
    if parsed <= 0:
        raise argparse.ArgumentTypeError(f"Expected a positive integer, got {parsed}")
    return parsed


def _parse_args(argv: Sequence[str]) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Trending movies banner for Jellyfin")
    parser.add_argument(
        "--verbose",
        action="store_true",
        help="Log debug output",
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    movies = subparsers.add_parser(
        "movies",
        help="Print the trending movies found in the library as JSON",
    )
    movies.add_argument(
        "--top-count",
        type=_positive_int,
        default=None,
        help="Number of movies to show in the banner (defaults to config)",
    )

    inject = subparsers.add_parser(
        "inject-script",
        help="Add the banner script tag to the Jellyfin web client",
    )
    inject.add_argument(
        "--web-path",
        type=Path,
        default=None,
        help="jellyfin-web directory (defaults to JELLYFIN_WEB_PATH or common locations)",
    )

    return parser.parse_args(list(argv))


def main(argv: Sequence[str] | None = None) -> None:
    """Main application entry point."""
    args_list = list(argv) if argv is not None else list(sys.argv[1:])
    parsed_args = _parse_args(args_list)
    configure_logging(level=logging.DEBUG if parsed_args.verbose else logging.INFO)

    try:
        if parsed_args.command == "movies":
            items = fetch_banner_items(parsed_args.top_count)
            records = [item.model_dump(by_alias=True) for item in items]
            print(json.dumps(records, indent=2))
        elif parsed_args.command == "inject-script":
            outcome = install_client_script(parsed_args.web_path)
            log.info("Client script injection finished: %s", outcome)
            if not outcome.succeeded:
                sys.exit(1)
        else:
            raise ValueError(f"Unsupported command: {parsed_args.command}")  # noqa: TRY301

    except Exception:
        log.exception("Fatal error")
        sys.exit(1)


def sigint_handler(_signal_received: int, _frame: FrameType | None) -> None:
    """Handle SIGINT (Ctrl+C) gracefully."""
    log.info("Closed by user (Ctrl+C)")
    sys.exit(0)


def run() -> None:
    load_dotenv()
    signal(SIGINT, sigint_handler)
    main()


if __name__ == "__main__":
    run()

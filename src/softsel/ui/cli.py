from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from signal import SIGINT, signal
from typing import TYPE_CHECKING

from dotenv import load_dotenv
from pydantic import ValidationError

from softsel.adapters.reporting import LoggingReporter
from softsel.app import (
    load_snapshot,
    open_resolver,
    product_release_notes,
    product_update,
    read_product_entries,
    select_system_patterns,
)
from softsel.config import ConfigurationError, configure_logging
from softsel.domain.model import Product, ReleaseNotesFormat
from softsel.domain.selection_log import log_software_selection

if TYPE_CHECKING:
    from collections.abc import Sequence
    from types import FrameType

    from softsel.adapters.sqlalchemy import SqlAlchemyResolver

log = logging.getLogger(__name__)


def _parse_args(argv: Sequence[str]) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description="Reconcile product and pattern selections with the resolver state"
    )
    parser.add_argument(
        "--database",
        type=str,
        help="SQLAlchemy URI of the resolvable store (defaults to config)",
    )
    parser.add_argument(
        "--verbose",
        action="store_true",
        help="Enable debug logging",
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    load = subparsers.add_parser("load", help="Load a resolver snapshot (JSON)")
    load.add_argument("snapshot", type=Path, help="Path to the snapshot file")

    products = subparsers.add_parser("products", help="Summarise the product update")
    products.add_argument(
        "--records",
        type=Path,
        help="JSON list of product records to classify instead of the stored state",
    )

    patterns = subparsers.add_parser("patterns", help="Select the system patterns")
    patterns.add_argument(
        "--reselect",
        action="store_true",
        help="Re-apply the previous selection after the resolver state was reset",
    )
    patterns.add_argument(
        "--pattern",
        dest="patterns",
        action="append",
        default=[],
        help="Additional mandatory pattern (repeatable)",
    )
    patterns.add_argument(
        "--optional",
        dest="optional_patterns",
        action="append",
        default=[],
        help="Additional optional pattern (repeatable)",
    )

    subparsers.add_parser("selection-log", help="Log resolvables changed by user or application")

    release_notes = subparsers.add_parser(
        "release-notes", help="Print the release notes of a product"
    )
    release_notes.add_argument("product", help="Product name")
    release_notes.add_argument(
        "--format",
        dest="fmt",
        type=ReleaseNotesFormat,
        choices=list(ReleaseNotesFormat),
        default=ReleaseNotesFormat.TXT,
        help="Release notes format (default: txt)",
    )
    release_notes.add_argument("--lang", help="Language, e.g. de_DE (defaults to config)")

    return parser.parse_args(list(argv))


def _run(parsed_args: argparse.Namespace, resolver: SqlAlchemyResolver) -> bool:
    """Run one command; return False when errors were reported to the user."""

    reporter = LoggingReporter()
    if parsed_args.command == "load":
        count = load_snapshot(resolver, parsed_args.snapshot)
        log.info("Loaded %s resolvables from %s", count, parsed_args.snapshot)
    elif parsed_args.command == "products":
        entries = read_product_entries(parsed_args.records) if parsed_args.records else None
        report = product_update(resolver, reporter, entries=entries)
        for line in report.summary:
            print(line)  # noqa: T201
        if report.warning is not None:
            print(f"[{report.warning.level}] {report.warning.message}")  # noqa: T201
        if report.classification.rejected:
            return False
    elif parsed_args.command == "patterns":
        result = select_system_patterns(
            resolver,
            reporter,
            reselect=parsed_args.reselect,
            patterns=parsed_args.patterns,
            optional_patterns=parsed_args.optional_patterns,
        )
        log.info(
            "Patterns: installed=%s, reinstated=%s, skipped=%s",
            result.installed_count,
            result.reinstated_count,
            result.skipped_count,
        )
    elif parsed_args.command == "selection-log":
        log_software_selection(resolver)
    elif parsed_args.command == "release-notes":
        notes = product_release_notes(
            resolver,
            Product(name=parsed_args.product),
            fmt=parsed_args.fmt,
            lang=parsed_args.lang,
        )
        if notes is None:
            reporter.error(f"No release notes for product {parsed_args.product}.")
        else:
            print(notes)  # noqa: T201
    else:
        raise ValueError(f"Unsupported command: {parsed_args.command}")
    return not reporter.has_errors


def main(argv: Sequence[str] | None = None) -> None:
    """Main application entry point."""
    args_list = list(argv) if argv is not None else list(sys.argv[1:])
    parsed_args = _parse_args(args_list)
    configure_logging(verbose=parsed_args.verbose)

    try:
        resolver = open_resolver(parsed_args.database)
    except ConfigurationError:
        log.exception("Invalid configuration")
        sys.exit(2)

    try:
        succeeded = _run(parsed_args, resolver)
    except ConfigurationError:
        log.exception("Invalid configuration")
        sys.exit(2)
    except (ValidationError, ValueError, OSError):
        log.exception("Invalid input")
        sys.exit(2)
    except Exception:
        log.exception("Fatal error")
        sys.exit(1)
    finally:
        resolver.dispose()

    if not succeeded:
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

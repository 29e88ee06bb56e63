"""Logging setup for the command line."""

from __future__ import annotations

import logging
from typing import Final

LOG_FORMAT: Final[str] = "%(asctime)s %(levelname)s [%(name)s] %(message)s"


def configure_logging(*, verbose: bool = False, force: bool = False) -> None:
    """Configure the root logger for CLI output.

    ``verbose`` switches softsel to debug output. SQLAlchemy stays at warning
    level either way, its engine would otherwise log every statement.
    ``force=True`` replaces handlers installed earlier, e.g. in tests.
    """

    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.INFO,
        format=LOG_FORMAT,
        datefmt="%H:%M:%S",
        force=force,
    )
    logging.getLogger("sqlalchemy").setLevel(logging.WARNING)

"""Reporter adapter writing user-visible messages to the log."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field

from softsel.domain.model import WarningLevel

log = logging.getLogger(__name__)


@dataclass(slots=True)
class LoggingReporter:
    """Log reported messages and keep them for the caller (exit status, summary)."""

    errors: list[str] = field(default_factory=list[str])
    warnings: list[tuple[WarningLevel, str]] = field(
        default_factory=list[tuple[WarningLevel, str]]
    )

    def error(self, message: str) -> None:
        log.error(message)
        self.errors.append(message)

    def warning(self, message: str, level: WarningLevel) -> None:
        if level is WarningLevel.ATTENTION:
            log.warning(message)
        else:
            log.info(message)
        self.warnings.append((level, message))

    @property
    def has_errors(self) -> bool:
        return bool(self.errors)

"""Port for user-visible error and warning reports."""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from softsel.domain.model import WarningLevel


@runtime_checkable
class Reporter(Protocol):
    """Sink for messages the user has to see; everything else goes to the log."""

    def error(self, message: str) -> None: ...

    def warning(self, message: str, level: WarningLevel) -> None: ...

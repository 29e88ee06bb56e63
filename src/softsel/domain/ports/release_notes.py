"""Port for product release notes."""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from softsel.domain.model import ReleaseNotesFormat


@runtime_checkable
class ReleaseNotesSource(Protocol):
    def release_notes(self, name: str, lang: str, fmt: ReleaseNotesFormat) -> str | None:
        """Return the release notes of product ``name``, ``None`` when there are none."""
        ...

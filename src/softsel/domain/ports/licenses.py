"""Port for product license texts and their confirmation state."""

from __future__ import annotations

from typing import Protocol, runtime_checkable


@runtime_checkable
class LicenseSource(Protocol):
    def license_to_confirm(self, name: str, lang: str) -> str | None:
        """Return the license text, ``""`` without a license, ``None`` for unknown products."""
        ...

    def needs_license_acceptance(self, name: str) -> bool: ...

    def mark_license_confirmed(self, name: str) -> None: ...

    def mark_license_not_confirmed(self, name: str) -> None: ...

    def has_license_confirmed(self, name: str) -> bool: ...

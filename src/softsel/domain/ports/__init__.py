"""Domain port definitions for adapters."""

from __future__ import annotations

from .licenses import LicenseSource
from .release_notes import ReleaseNotesSource
from .reporting import Reporter
from .resolver import Resolver

__all__ = [
    "LicenseSource",
    "ReleaseNotesSource",
    "Reporter",
    "Resolver",
]

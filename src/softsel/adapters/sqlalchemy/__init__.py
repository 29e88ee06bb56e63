"""SQLAlchemy adapter for the resolver ports."""

from __future__ import annotations

from .resolver import SqlAlchemyResolver
from .tables import (
    create_all_tables,
    license_table,
    metadata,
    release_notes_table,
    resolvable_table,
)

__all__ = [
    "SqlAlchemyResolver",
    "create_all_tables",
    "license_table",
    "metadata",
    "release_notes_table",
    "resolvable_table",
]

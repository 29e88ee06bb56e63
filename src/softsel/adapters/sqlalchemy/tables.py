"""SQLAlchemy table definitions for the resolvable state store."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from sqlalchemy import (
    Boolean,
    Column,
    Enum,
    Index,
    Integer,
    MetaData,
    String,
    Table,
    Text,
    UniqueConstraint,
)

from softsel.domain.model import ReleaseNotesFormat, ResolvableKind, ResolvableStatus, TransactBy

if TYPE_CHECKING:
    from sqlalchemy.engine import Engine

log = logging.getLogger(__name__)

metadata = MetaData(
    naming_convention={
        "ix": "ix_%(column_0_label)s",
        "uq": "uq_%(table_name)s_%(column_0_name)s",
        "ck": "ck_%(table_name)s_%(column_0_name)s_%(constraint_name)s",
        "fk": "fk_%(table_name)s_%(column_0_name)s_%(referred_table_name)s",
        "pk": "pk_%(table_name)s",
    }
)

resolvable_table = Table(
    "resolvables",
    metadata,
    Column("id", Integer, primary_key=True, autoincrement=True),
    Column("kind", Enum(ResolvableKind, native_enum=False), nullable=False),
    Column("name", String, nullable=False),
    Column("version", String),
    Column("arch", String),
    Column("vendor", String),
    Column("category", String),
    Column("display_name", String),
    Column("short_name", String),
    Column("source", Integer),
    Column("locked", Boolean, nullable=False, default=False),
    Column("status", Enum(ResolvableStatus, native_enum=False), nullable=False),
    Column("transact_by", Enum(TransactBy, native_enum=False), nullable=False),
    # state at load time, restored by set_neutral
    Column("initial_status", Enum(ResolvableStatus, native_enum=False), nullable=False),
    Column("initial_transact_by", Enum(TransactBy, native_enum=False), nullable=False),
    Index("ix_resolvables_kind_name", "kind", "name"),
)

license_table = Table(
    "licenses",
    metadata,
    Column("id", Integer, primary_key=True, autoincrement=True),
    Column("name", String, nullable=False),
    Column("lang", String, nullable=False),
    Column("text", Text, nullable=False, default=""),
    Column("needs_acceptance", Boolean, nullable=False, default=True),
    Column("confirmed", Boolean, nullable=False, default=False),
    UniqueConstraint("name", "lang"),
)

release_notes_table = Table(
    "release_notes",
    metadata,
    Column("id", Integer, primary_key=True, autoincrement=True),
    Column("name", String, nullable=False),
    Column("lang", String, nullable=False),
    Column("format", Enum(ReleaseNotesFormat, native_enum=False), nullable=False),
    Column("text", Text, nullable=False),
    UniqueConstraint("name", "lang", "format"),
)


def create_all_tables(engine: Engine) -> None:
    """Create all tables."""
    log.info("Creating all tables")
    metadata.create_all(engine)

"""Resolver and license source backed by a SQLAlchemy database.

The store keeps one row per resolvable with its current transaction status and
the actor that set it, plus the status captured when the snapshot was loaded so
that ``set_neutral`` can restore it.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from sqlalchemy import create_engine, delete, insert, select, update

from softsel.domain.model import ResolvableRecord, ResolvableStatus, TransactBy

from .tables import create_all_tables, license_table, release_notes_table, resolvable_table

if TYPE_CHECKING:
    from collections.abc import Mapping

    from sqlalchemy import ColumnElement
    from sqlalchemy.engine import Connection, Engine

    from softsel.adapters.snapshot import Snapshot
    from softsel.domain.model import ReleaseNotesFormat, ResolvableKind

log = logging.getLogger(__name__)

_RECORD_COLUMNS = tuple(ResolvableRecord.model_fields)
_FALLBACK_LANGUAGE = "en_US"


class SqlAlchemyResolver:
    """Implements the ``Resolver``, ``LicenseSource`` and ``ReleaseNotesSource`` ports.

    Commands are attributed to ``actor`` (the application by default).
    """

    def __init__(self, engine: Engine, *, actor: TransactBy = TransactBy.APP_HIGH) -> None:
        self.engine = engine
        self.actor = actor

    @classmethod
    def from_uri(
        cls,
        uri: str,
        *,
        actor: TransactBy = TransactBy.APP_HIGH,
    ) -> SqlAlchemyResolver:
        engine = create_engine(uri, future=True)
        create_all_tables(engine)
        return cls(engine, actor=actor)

    def dispose(self) -> None:
        self.engine.dispose()

    # -- snapshot ----------------------------------------------------------

    def load_snapshot(self, snapshot: Snapshot) -> int:
        """Replace the stored state with ``snapshot``; return the number of resolvables."""

        rows = [
            {
                **payload.to_record().model_dump(),
                "kind": payload.kind,
                "initial_status": payload.status,
                "initial_transact_by": payload.transact_by,
            }
            for payload in snapshot.resolvables
        ]
        licenses = [license_.model_dump() for license_ in snapshot.licenses]
        notes = [note.model_dump() for note in snapshot.release_notes]
        with self.engine.begin() as conn:
            conn.execute(delete(resolvable_table))
            conn.execute(delete(license_table))
            conn.execute(delete(release_notes_table))
            if rows:
                conn.execute(insert(resolvable_table), rows)
            if licenses:
                conn.execute(insert(license_table), licenses)
            if notes:
                conn.execute(insert(release_notes_table), notes)
        log.info(
            "Loaded snapshot: resolvables=%s, licenses=%s, release notes=%s",
            len(rows),
            len(licenses),
            len(notes),
        )
        return len(rows)

    # -- Resolver ----------------------------------------------------------

    def query(self, name: str, kind: ResolvableKind) -> list[ResolvableRecord]:
        columns = [resolvable_table.c[column] for column in _RECORD_COLUMNS]
        stmt = (
            select(*columns)
            .where(*self._matching(name, kind))
            .order_by(resolvable_table.c.id)
        )
        with self.engine.connect() as conn:
            rows = conn.execute(stmt).mappings().all()
        return [ResolvableRecord.model_validate(dict(row)) for row in rows]

    def select(self, name: str, kind: ResolvableKind) -> bool:
        if not name:
            return False
        with self.engine.begin() as conn:
            if not self._exists(conn, name, kind):
                log.warning("Cannot select unknown %s %s", kind, name)
                return False
            conn.execute(
                update(resolvable_table)
                .where(*self._matching(name, kind))
                .values(status=ResolvableStatus.SELECTED, transact_by=self.actor)
            )
        return True

    def remove(self, name: str, kind: ResolvableKind) -> bool:
        if not name:
            return False
        with self.engine.begin() as conn:
            rows = conn.execute(
                select(resolvable_table.c.id, resolvable_table.c.initial_status).where(
                    *self._matching(name, kind)
                )
            ).all()
            if not rows:
                log.warning("Cannot remove unknown %s %s", kind, name)
                return False
            for row_id, initial_status in rows:
                was_installed = initial_status in {
                    ResolvableStatus.INSTALLED,
                    ResolvableStatus.REMOVED,
                }
                status = ResolvableStatus.REMOVED if was_installed else ResolvableStatus.AVAILABLE
                conn.execute(
                    update(resolvable_table)
                    .where(resolvable_table.c.id == row_id)
                    .values(status=status, transact_by=self.actor)
                )
        return True

    def set_neutral(
        self,
        name: str,
        kind: ResolvableKind,
        *,
        keep_previous_soft: bool = True,
    ) -> bool:
        if not name:
            return False
        actor = resolvable_table.c.initial_transact_by if keep_previous_soft else TransactBy.NONE
        with self.engine.begin() as conn:
            if not self._exists(conn, name, kind):
                return False
            conn.execute(
                update(resolvable_table)
                .where(*self._matching(name, kind))
                .values(status=resolvable_table.c.initial_status, transact_by=actor)
            )
        return True

    # -- LicenseSource -----------------------------------------------------

    def license_to_confirm(self, name: str, lang: str) -> str | None:
        with self.engine.connect() as conn:
            if not self._exists_by_name(conn, name):
                return None
            texts = dict(
                conn.execute(
                    select(license_table.c.lang, license_table.c.text).where(
                        license_table.c.name == name
                    )
                ).all()
            )
        if not texts:
            return ""
        return _pick_language(texts, lang)

    def needs_license_acceptance(self, name: str) -> bool:
        return self._any_license_flag(name, license_table.c.needs_acceptance)

    def has_license_confirmed(self, name: str) -> bool:
        return self._any_license_flag(name, license_table.c.confirmed)

    def mark_license_confirmed(self, name: str) -> None:
        self._set_confirmed(name, confirmed=True)

    def mark_license_not_confirmed(self, name: str) -> None:
        self._set_confirmed(name, confirmed=False)

    # -- ReleaseNotesSource ------------------------------------------------

    def release_notes(self, name: str, lang: str, fmt: ReleaseNotesFormat) -> str | None:
        stmt = select(release_notes_table.c.lang, release_notes_table.c.text).where(
            release_notes_table.c.name == name, release_notes_table.c.format == fmt
        )
        with self.engine.connect() as conn:
            texts = dict(conn.execute(stmt).all())
        if not texts:
            log.debug("No %s release notes for %s", fmt, name)
            return None
        return _pick_language(texts, lang)

    # -- helpers -----------------------------------------------------------

    @staticmethod
    def _matching(name: str, kind: ResolvableKind) -> list[ColumnElement[bool]]:
        clauses = [resolvable_table.c.kind == kind]
        if name:
            clauses.append(resolvable_table.c.name == name)
        return clauses

    def _exists(self, conn: Connection, name: str, kind: ResolvableKind) -> bool:
        stmt = select(resolvable_table.c.id).where(*self._matching(name, kind)).limit(1)
        return conn.execute(stmt).first() is not None

    @staticmethod
    def _exists_by_name(conn: Connection, name: str) -> bool:
        stmt = select(resolvable_table.c.id).where(resolvable_table.c.name == name).limit(1)
        return conn.execute(stmt).first() is not None

    def _any_license_flag(self, name: str, column: ColumnElement[bool]) -> bool:
        stmt = select(license_table.c.id).where(license_table.c.name == name, column).limit(1)
        with self.engine.connect() as conn:
            return conn.execute(stmt).first() is not None

    def _set_confirmed(self, name: str, *, confirmed: bool) -> None:
        with self.engine.begin() as conn:
            conn.execute(
                update(license_table)
                .where(license_table.c.name == name)
                .values(confirmed=confirmed)
            )


def _pick_language(texts: Mapping[str, str], lang: str) -> str:
    """Exact language, then its prefix (de_DE -> de), then en_US, then any text."""

    for candidate in (lang, lang.split("_", 1)[0], _FALLBACK_LANGUAGE):
        if candidate in texts:
            return texts[candidate]
    return next(iter(texts.values()))

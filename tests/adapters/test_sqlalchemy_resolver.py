from __future__ import annotations

from typing import TYPE_CHECKING

import pytest

from softsel.adapters.snapshot import Snapshot
from softsel.domain.model import (
    Product,
    ReleaseNotesFormat,
    ResolvableKind,
    ResolvableStatus,
    TransactBy,
)
from softsel.domain.pattern_selection import select_patterns
from tests.helpers.resolver import RecordingReporter

if TYPE_CHECKING:
    from softsel.adapters.sqlalchemy import SqlAlchemyResolver


def _snapshot() -> Snapshot:
    return Snapshot.model_validate(
        {
            "resolvables": [
                {
                    "kind": "product",
                    "name": "SLES",
                    "version": "15",
                    "category": "base",
                    "display_name": "SUSE Linux Enterprise Server 15",
                    "source": 0,
                    "status": "installed",
                    "transact_by": "none",
                },
                {"kind": "pattern", "name": "base", "status": "available", "transact_by": "none"},
                {"kind": "pattern", "name": "x11", "status": "available", "transact_by": "user"},
                {"kind": "pattern", "name": "gnome", "status": "selected", "transact_by": "user"},
                {
                    "kind": "package",
                    "name": "kernel-default",
                    "status": "installed",
                    "locked": True,
                },
            ],
            "licenses": [
                {"name": "SLES", "lang": "en_US", "text": "EULA", "needs_acceptance": True},
                {"name": "SLES", "lang": "de", "text": "Lizenz"},
            ],
            "release_notes": [
                {"name": "SLES", "text": "Release Notes"},
                {"name": "SLES", "lang": "de_DE", "text": "Versionshinweise"},
                {"name": "SLES", "format": "rtf", "text": "{\\rtf1 Release Notes}"},
            ],
        }
    )


@pytest.fixture
def loaded_resolver(sqlite_resolver: SqlAlchemyResolver) -> SqlAlchemyResolver:
    sqlite_resolver.load_snapshot(_snapshot())
    return sqlite_resolver


def test_load_snapshot_replaces_previous_state(sqlite_resolver: SqlAlchemyResolver) -> None:
    assert sqlite_resolver.load_snapshot(_snapshot()) == 5
    assert sqlite_resolver.load_snapshot(Snapshot()) == 0

    assert sqlite_resolver.query("", ResolvableKind.PATTERN) == []


def test_query_filters_by_kind_and_name(loaded_resolver: SqlAlchemyResolver) -> None:
    patterns = loaded_resolver.query("", ResolvableKind.PATTERN)
    (product,) = loaded_resolver.query("SLES", ResolvableKind.PRODUCT)

    assert [record.name for record in patterns] == ["base", "x11", "gnome"]
    assert product.status is ResolvableStatus.INSTALLED
    assert product.label == "SUSE Linux Enterprise Server 15"
    assert loaded_resolver.query("SLES", ResolvableKind.PATTERN) == []


def test_select_marks_resolvable_as_selected_by_application(
    loaded_resolver: SqlAlchemyResolver,
) -> None:
    assert loaded_resolver.select("base", ResolvableKind.PATTERN)

    (record,) = loaded_resolver.query("base", ResolvableKind.PATTERN)
    assert record.status is ResolvableStatus.SELECTED
    assert record.transact_by is TransactBy.APP_HIGH


def test_commands_on_unknown_names_fail(loaded_resolver: SqlAlchemyResolver) -> None:
    assert not loaded_resolver.select("missing", ResolvableKind.PATTERN)
    assert not loaded_resolver.remove("missing", ResolvableKind.PATTERN)
    assert not loaded_resolver.set_neutral("missing", ResolvableKind.PATTERN)
    assert not loaded_resolver.select("", ResolvableKind.PATTERN)


def test_remove_and_set_neutral(loaded_resolver: SqlAlchemyResolver) -> None:
    assert loaded_resolver.remove("SLES", ResolvableKind.PRODUCT)
    (removed,) = loaded_resolver.query("SLES", ResolvableKind.PRODUCT)
    assert removed.status is ResolvableStatus.REMOVED

    assert loaded_resolver.remove("gnome", ResolvableKind.PATTERN)
    (deselected,) = loaded_resolver.query("gnome", ResolvableKind.PATTERN)
    assert deselected.status is ResolvableStatus.AVAILABLE

    assert loaded_resolver.set_neutral("gnome", ResolvableKind.PATTERN)
    (restored,) = loaded_resolver.query("gnome", ResolvableKind.PATTERN)
    assert restored.status is ResolvableStatus.SELECTED
    assert restored.transact_by is TransactBy.USER

    assert loaded_resolver.set_neutral("gnome", ResolvableKind.PATTERN, keep_previous_soft=False)
    (reset,) = loaded_resolver.query("gnome", ResolvableKind.PATTERN)
    assert reset.transact_by is TransactBy.NONE


def test_product_restore_goes_through_the_store(loaded_resolver: SqlAlchemyResolver) -> None:
    product = Product(name="SLES", version="15")

    assert product.select(loaded_resolver)
    assert product.is_selected(loaded_resolver)
    assert product.restore(loaded_resolver)
    assert product.is_installed(loaded_resolver)


def test_license_lookup_falls_back_by_language(loaded_resolver: SqlAlchemyResolver) -> None:
    assert loaded_resolver.license_to_confirm("SLES", "en_US") == "EULA"
    assert loaded_resolver.license_to_confirm("SLES", "de_DE") == "Lizenz"
    assert loaded_resolver.license_to_confirm("SLES", "cs_CZ") == "EULA"
    assert loaded_resolver.license_to_confirm("base", "en_US") == ""
    assert loaded_resolver.license_to_confirm("unknown", "en_US") is None


def test_license_confirmation_state(loaded_resolver: SqlAlchemyResolver) -> None:
    assert loaded_resolver.needs_license_acceptance("SLES")
    assert not loaded_resolver.has_license_confirmed("SLES")

    loaded_resolver.mark_license_confirmed("SLES")
    assert loaded_resolver.has_license_confirmed("SLES")

    loaded_resolver.mark_license_not_confirmed("SLES")
    assert not loaded_resolver.has_license_confirmed("SLES")


def test_pattern_selection_against_the_store(loaded_resolver: SqlAlchemyResolver) -> None:
    reporter = RecordingReporter()

    first = select_patterns(
        loaded_resolver, reporter, required=["base", "x11", "gnome"], optional=["kde"]
    )
    second = select_patterns(loaded_resolver, reporter, required=["base", "x11", "gnome"])

    assert first.installed == ["base"]
    assert first.skipped == ["x11", "gnome"]
    assert first.missing_optional == ["kde"]
    assert second.installed == []
    assert second.reinstated == ["base"]
    assert reporter.errors == []
    (x11,) = loaded_resolver.query("x11", ResolvableKind.PATTERN)
    assert x11.status is ResolvableStatus.AVAILABLE


def test_release_notes_by_language_and_format(loaded_resolver: SqlAlchemyResolver) -> None:
    txt = ReleaseNotesFormat.TXT

    assert loaded_resolver.release_notes("SLES", "en_US", txt) == "Release Notes"
    assert loaded_resolver.release_notes("SLES", "de_DE", txt) == "Versionshinweise"
    assert loaded_resolver.release_notes("SLES", "cs_CZ", txt) == "Release Notes"
    assert loaded_resolver.release_notes("SLES", "de_DE", ReleaseNotesFormat.RTF) == (
        "{\\rtf1 Release Notes}"
    )
    assert loaded_resolver.release_notes("base", "en_US", txt) is None


def test_locked_flag_is_stored(loaded_resolver: SqlAlchemyResolver) -> None:
    (kernel,) = loaded_resolver.query("kernel-default", ResolvableKind.PACKAGE)
    (base,) = loaded_resolver.query("base", ResolvableKind.PATTERN)

    assert kernel.locked
    assert not base.locked

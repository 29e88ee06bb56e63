"""Application orchestration entry points."""

from __future__ import annotations

import json
from logging import getLogger
from typing import TYPE_CHECKING

from softsel.adapters.snapshot import load_snapshot_file
from softsel.adapters.sqlalchemy import SqlAlchemyResolver
from softsel.config import (
    get_database_config,
    get_language,
    get_pattern_config,
    parse_database_uri,
)
from softsel.domain.model import ReleaseNotesFormat, ResolvableKind
from softsel.domain.pattern_selection import PatternSelectionReport, select_patterns
from softsel.domain.product_status import ProductUpdateReport, product_update_report

if TYPE_CHECKING:
    from collections.abc import Iterable, Sequence
    from pathlib import Path

    from softsel.config import PatternConfig
    from softsel.domain.model import Product
    from softsel.domain.ports import LicenseSource, ReleaseNotesSource, Reporter, Resolver
    from softsel.domain.product_status import ProductEntry


log = getLogger(__name__)


def open_resolver(database_uri: str | None = None) -> SqlAlchemyResolver:
    """Open the resolvable store, creating its tables when needed."""

    if database_uri:
        uri = parse_database_uri(database_uri, source="--database").uri
    else:
        uri = get_database_config().uri
    log.debug("Opening resolvable store at %s", uri)
    return SqlAlchemyResolver.from_uri(uri)


def load_snapshot(resolver: SqlAlchemyResolver, path: Path) -> int:
    snapshot = load_snapshot_file(path)
    return resolver.load_snapshot(snapshot)


def read_product_entries(path: Path) -> list[ProductEntry]:
    """Read a JSON list of raw product records; individual records are validated later."""

    payload = json.loads(path.read_text(encoding="utf-8"))
    if not isinstance(payload, list):
        raise ValueError(f"{path}: expected a JSON list of product records")
    return list(payload)


def product_update(
    resolver: Resolver,
    reporter: Reporter,
    *,
    entries: Iterable[ProductEntry] | None = None,
) -> ProductUpdateReport:
    """Describe the product changes of the current transaction.

    ``entries`` replaces the resolver's product records, e.g. records read from
    a file. The warning about automatically removed products goes to ``reporter``.
    """

    products = entries if entries is not None else resolver.query("", ResolvableKind.PRODUCT)
    report = product_update_report(products)
    for line in report.summary:
        log.info(line)
    for issue in report.classification.rejected:
        log.info("Skipped product record #%s: %s", issue.index, issue.message)
    if report.warning is not None:
        reporter.warning(report.warning.message, report.warning.level)
    return report


def select_system_patterns(
    resolver: Resolver,
    reporter: Reporter,
    *,
    reselect: bool = False,
    config: PatternConfig | None = None,
    patterns: Sequence[str] = (),
    optional_patterns: Sequence[str] = (),
) -> PatternSelectionReport:
    """Select the configured default patterns plus any explicitly requested ones."""

    effective_config = config or get_pattern_config()
    return select_patterns(
        resolver,
        reporter,
        required=[*effective_config.default_patterns, *patterns],
        optional=[*effective_config.optional_default_patterns, *optional_patterns],
        reselect=reselect,
    )


def product_license(
    licenses: LicenseSource,
    product: Product,
    *,
    lang: str | None = None,
) -> str | None:
    """License text of ``product`` in ``lang``, defaulting to the configured language."""

    return product.license(licenses, lang or get_language())


def product_release_notes(
    source: ReleaseNotesSource,
    product: Product,
    *,
    fmt: ReleaseNotesFormat = ReleaseNotesFormat.TXT,
    lang: str | None = None,
) -> str | None:
    """Release notes of ``product``; plain text in the configured language by default."""

    return product.release_notes(source, lang or get_language(), fmt)

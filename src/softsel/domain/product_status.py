"""Group the products of a transaction into new, kept, removed and updated.

The input is a snapshot of product records as reported by the resolver. A
product going away is paired with the product that replaces it when their
names match after normalization (only ASCII letters and digits, lowercased) or
when the successor is listed in the known renames. Malformed records are
rejected one by one; the rest of the snapshot is still classified.
"""

from __future__ import annotations

import logging
import re
from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Final, TypeAlias

from pydantic import ValidationError

from softsel.domain.model import ResolvableRecord, ResolvableStatus, TransactBy, WarningLevel

if TYPE_CHECKING:
    from collections.abc import Iterable, Sequence

log = logging.getLogger(__name__)

ProductEntry: TypeAlias = ResolvableRecord | Mapping[str, object]
UpdatedPair: TypeAlias = tuple[ResolvableRecord, ResolvableRecord]

DEFAULT_PRODUCT_RENAMES: Final[Mapping[str, tuple[str, ...]]] = {
    "SUSE_SLES": ("SLES",),
    "SUSE_SLED": ("SLED",),
    "sle-haegeo": ("sle-ha-geo",),
}

_STAYING_STATUSES: Final = frozenset({ResolvableStatus.SELECTED, ResolvableStatus.INSTALLED})
_NON_ALNUM: Final = re.compile(r"[^A-Za-z0-9]")


@dataclass(frozen=True, slots=True)
class RecordIssue:
    """A snapshot entry that could not be read as a product record."""

    index: int
    entry: object
    message: str


@dataclass(frozen=True, slots=True, kw_only=True)
class ProductClassification:
    new: tuple[ResolvableRecord, ...] = ()
    kept: tuple[ResolvableRecord, ...] = ()
    removed: tuple[ResolvableRecord, ...] = ()
    updated: tuple[UpdatedPair, ...] = ()
    rejected: tuple[RecordIssue, ...] = ()

    @property
    def automatically_removed(self) -> tuple[ResolvableRecord, ...]:
        """Lone removals the user did not ask for."""

        return tuple(record for record in self.removed if record.transact_by is not TransactBy.USER)


@dataclass(frozen=True, slots=True)
class ProductUpdateWarning:
    level: WarningLevel
    message: str
    products: tuple[str, ...]


@dataclass(frozen=True, slots=True)
class ProductUpdateReport:
    classification: ProductClassification
    summary: tuple[str, ...] = field(default_factory=tuple)
    warning: ProductUpdateWarning | None = None

    @property
    def level(self) -> WarningLevel:
        return self.warning.level if self.warning is not None else WarningLevel.INFO


def normalize_product_name(name: str) -> str:
    """Drop everything but ASCII letters and digits: ``sle_hpc`` == ``SLE-HPC``."""

    return _NON_ALNUM.sub("", name).lower()


def parse_product_records(
    entries: Iterable[ProductEntry],
) -> tuple[list[ResolvableRecord], list[RecordIssue]]:
    records: list[ResolvableRecord] = []
    issues: list[RecordIssue] = []
    for index, entry in enumerate(entries):
        if isinstance(entry, ResolvableRecord):
            records.append(entry)
            continue
        try:
            records.append(ResolvableRecord.model_validate(entry))
        except ValidationError as exc:
            message = "; ".join(
                f"{'.'.join(str(part) for part in error['loc']) or 'record'}: {error['msg']}"
                for error in exc.errors()
            )
            log.warning("Rejected product record #%s %r: %s", index, entry, message)
            issues.append(RecordIssue(index=index, entry=entry, message=message))
    return records, issues


def classify_products(
    entries: Iterable[ProductEntry],
    *,
    renames: Mapping[str, Sequence[str]] = DEFAULT_PRODUCT_RENAMES,
) -> ProductClassification:
    records, rejected = parse_product_records(entries)
    return _classify(records, rejected=rejected, renames=renames)


def product_update_summary(
    entries: Iterable[ProductEntry],
    *,
    renames: Mapping[str, Sequence[str]] = DEFAULT_PRODUCT_RENAMES,
) -> list[str]:
    return list(_summary(classify_products(entries, renames=renames)))


def product_update_warning(
    entries: Iterable[ProductEntry],
    *,
    renames: Mapping[str, Sequence[str]] = DEFAULT_PRODUCT_RENAMES,
) -> ProductUpdateWarning | None:
    return _warning(classify_products(entries, renames=renames))


def product_update_report(
    entries: Iterable[ProductEntry],
    *,
    renames: Mapping[str, Sequence[str]] = DEFAULT_PRODUCT_RENAMES,
) -> ProductUpdateReport:
    classification = classify_products(entries, renames=renames)
    return ProductUpdateReport(
        classification=classification,
        summary=_summary(classification),
        warning=_warning(classification),
    )


def _classify(
    records: Sequence[ResolvableRecord],
    *,
    rejected: Sequence[RecordIssue],
    renames: Mapping[str, Sequence[str]],
) -> ProductClassification:
    going_away = [record for record in records if record.is_removed]
    staying = [record for record in records if record.status in _STAYING_STATUSES]
    for record in records:
        if not record.is_removed and record.status not in _STAYING_STATUSES:
            log.debug("Product %s is not part of the transaction (%s)", record.name, record.status)

    paired: set[int] = set()
    updated: list[UpdatedPair] = []
    removed: list[ResolvableRecord] = []
    for old in going_away:
        index = _find_successor(old, staying, paired=paired, renames=renames)
        if index is None:
            removed.append(old)
            continue
        paired.add(index)
        updated.append((old, staying[index]))
        log.debug("Product %s is replaced by %s", old.name, staying[index].name)

    remaining = [record for index, record in enumerate(staying) if index not in paired]
    return ProductClassification(
        new=tuple(record for record in remaining if record.status is ResolvableStatus.SELECTED),
        kept=tuple(record for record in remaining if record.status is ResolvableStatus.INSTALLED),
        removed=tuple(removed),
        updated=tuple(updated),
        rejected=tuple(rejected),
    )


def _find_successor(
    old: ResolvableRecord,
    staying: Sequence[ResolvableRecord],
    *,
    paired: set[int],
    renames: Mapping[str, Sequence[str]],
) -> int | None:
    key = normalize_product_name(old.name)
    successors = {normalize_product_name(name) for name in renames.get(old.name, ())}
    candidates = [
        index
        for index, record in enumerate(staying)
        if index not in paired
        and (
            normalize_product_name(record.name) == key
            or normalize_product_name(record.name) in successors
        )
    ]
    if not candidates:
        return None
    if len(candidates) > 1:
        log.debug(
            "Several successors for %s: %s",
            old.name,
            [staying[index].name for index in candidates],
        )
        same_vendor = [
            index
            for index in candidates
            if old.vendor is not None and staying[index].vendor == old.vendor
        ]
        if same_vendor:
            return same_vendor[0]
    return candidates[0]


def _summary(classification: ProductClassification) -> tuple[str, ...]:
    lines = [
        f"{old.label} will be updated to {new.label}." for old, new in classification.updated
    ]
    lines.extend(f"{old.label} will be automatically removed." for old in classification.removed)
    return tuple(lines)


def _warning(classification: ProductClassification) -> ProductUpdateWarning | None:
    automatic = classification.automatically_removed
    if not automatic:
        return None
    labels = tuple(record.label for record in automatic)
    message = (
        "The following products will be removed automatically, they have no "
        f"replacement in the new release: {', '.join(labels)}"
    )
    return ProductUpdateWarning(level=WarningLevel.ATTENTION, message=message, products=labels)

"""Product value object and its live queries against the resolver.

A ``Product`` is a snapshot read from the resolver. It never changes in place:
state changes (select, restore) are requests sent to the resolver, and the
current status is queried again whenever it is needed. License and release
note reads take the language explicitly; the caller resolves the default.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, ClassVar

from .enums import ReleaseNotesFormat, ResolvableKind, ResolvableStatus, TransactBy

if TYPE_CHECKING:
    from softsel.domain.ports import LicenseSource, ReleaseNotesSource, Resolver

    from .records import ResolvableRecord


@dataclass(frozen=True, slots=True, kw_only=True)
class Product:
    """Known software product.

    Identity is ``name``, ``version``, ``arch`` and ``vendor``; the display
    attributes, the category and the source repository do not take part in
    equality.
    """

    name: str
    version: str | None = None
    arch: str | None = None
    vendor: str | None = None
    category: str | None = field(default=None, compare=False)
    display_name: str | None = field(default=None, compare=False)
    short_name: str | None = field(default=None, compare=False)
    source: int | None = field(default=None, compare=False)

    KIND: ClassVar[ResolvableKind] = ResolvableKind.PRODUCT

    @classmethod
    def from_record(cls, record: ResolvableRecord) -> Product:
        return cls(
            name=record.name,
            version=record.version,
            arch=record.arch,
            vendor=record.vendor,
            category=record.category,
            display_name=record.display_name,
            short_name=record.short_name,
            source=record.source,
        )

    def label(self) -> str:
        return self.display_name or self.short_name or self.name

    # -- transaction state -------------------------------------------------

    def records(self, resolver: Resolver) -> list[ResolvableRecord]:
        return resolver.query(self.name, self.KIND)

    def statuses(self, resolver: Resolver) -> tuple[ResolvableStatus, ...]:
        return tuple(record.status for record in self.records(resolver))

    def status(self, resolver: Resolver) -> ResolvableStatus:
        statuses = self.statuses(resolver)
        return statuses[0] if statuses else ResolvableStatus.NONE

    def transact_by(self, resolver: Resolver) -> TransactBy:
        records = self.records(resolver)
        return records[0].transact_by if records else TransactBy.NONE

    def has_status(self, resolver: Resolver, *statuses: ResolvableStatus) -> bool:
        """Return True if any record of this product has one of ``statuses``."""

        wanted = set(statuses)
        return any(status in wanted for status in self.statuses(resolver))

    def is_selected(self, resolver: Resolver) -> bool:
        return self.has_status(resolver, ResolvableStatus.SELECTED)

    def is_installed(self, resolver: Resolver) -> bool:
        return self.has_status(resolver, ResolvableStatus.INSTALLED)

    def select(self, resolver: Resolver) -> bool:
        return resolver.select(self.name, self.KIND)

    def restore(self, resolver: Resolver) -> bool:
        return resolver.set_neutral(self.name, self.KIND, keep_previous_soft=True)

    # -- license -----------------------------------------------------------

    def license(self, licenses: LicenseSource, lang: str) -> str | None:
        return licenses.license_to_confirm(self.name, lang)

    def has_license(self, licenses: LicenseSource, lang: str) -> bool:
        return bool(self.license(licenses, lang))

    def license_confirmation_required(self, licenses: LicenseSource) -> bool:
        return licenses.needs_license_acceptance(self.name)

    def set_license_confirmation(self, licenses: LicenseSource, confirmed: bool) -> None:
        if confirmed:
            licenses.mark_license_confirmed(self.name)
        else:
            licenses.mark_license_not_confirmed(self.name)

    def license_confirmed(self, licenses: LicenseSource) -> bool:
        return licenses.has_license_confirmed(self.name)

    def release_notes(
        self,
        source: ReleaseNotesSource,
        lang: str,
        fmt: ReleaseNotesFormat = ReleaseNotesFormat.TXT,
    ) -> str | None:
        return source.release_notes(self.name, lang, fmt)

"""Point-in-time resolvable records read from the resolver.

Records are validated with pydantic because they cross the boundary to the
external resolver: the status and actor vocabularies are closed enums and an
unknown value is rejected instead of being carried along as a free-form tag.
"""

from __future__ import annotations

from typing import Final

from pydantic import BaseModel, ConfigDict, field_validator

from .enums import ResolvableStatus, TransactBy

# status names some resolvers report for an unchanged installed resolvable
_STATUS_ALIASES: Final[dict[str, ResolvableStatus]] = {"kept": ResolvableStatus.INSTALLED}


def _blank_to_none(value: object) -> object:
    if isinstance(value, str):
        stripped = value.strip()
        return stripped or None
    return value


class ResolvableRecord(BaseModel):
    """One resolvable as reported by the resolver (product or pattern)."""

    model_config = ConfigDict(extra="ignore", frozen=True)

    name: str
    status: ResolvableStatus
    transact_by: TransactBy = TransactBy.NONE
    version: str | None = None
    arch: str | None = None
    vendor: str | None = None
    category: str | None = None
    display_name: str | None = None
    short_name: str | None = None
    source: int | None = None
    locked: bool = False

    _normalize_text = field_validator(
        "version",
        "arch",
        "vendor",
        "category",
        "display_name",
        "short_name",
        mode="before",
    )(_blank_to_none)

    @field_validator("status", mode="before")
    @classmethod
    def _resolve_status_alias(cls, value: object) -> object:
        if isinstance(value, str):
            return _STATUS_ALIASES.get(value, value)
        return value

    @field_validator("name", mode="before")
    @classmethod
    def _require_name(cls, value: object) -> object:
        if isinstance(value, str) and not value.strip():
            raise ValueError("name must not be blank")
        return value

    @property
    def label(self) -> str:
        """Human label: display name, else short name, else name."""

        return self.display_name or self.short_name or self.name

    @property
    def is_removed(self) -> bool:
        return self.status is ResolvableStatus.REMOVED

"""Pydantic models for resolver snapshot files.

A snapshot is a JSON document describing the transaction state to load into
the SQLAlchemy resolver::

    {
      "resolvables": [
        {"kind": "product", "name": "SLES", "status": "selected", "transact_by": "solver"}
      ],
      "licenses": [{"name": "SLES", "lang": "en_US", "text": "..."}],
      "release_notes": [{"name": "SLES", "lang": "en_US", "format": "txt", "text": "..."}]
    }
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from pydantic import BaseModel, ConfigDict, Field

from softsel.domain.model import ReleaseNotesFormat, ResolvableKind, ResolvableRecord

if TYPE_CHECKING:
    from pathlib import Path


class SnapshotBaseModel(BaseModel):
    model_config = ConfigDict(extra="ignore")


class ResolvablePayload(ResolvableRecord):
    kind: ResolvableKind = ResolvableKind.PACKAGE

    def to_record(self) -> ResolvableRecord:
        return ResolvableRecord.model_validate(self.model_dump(exclude={"kind"}))


class LicensePayload(SnapshotBaseModel):
    name: str
    lang: str = "en_US"
    text: str = ""
    needs_acceptance: bool = True
    confirmed: bool = False


class ReleaseNotesPayload(SnapshotBaseModel):
    name: str
    lang: str = "en_US"
    format: ReleaseNotesFormat = ReleaseNotesFormat.TXT
    text: str


class Snapshot(SnapshotBaseModel):
    resolvables: list[ResolvablePayload] = Field(default_factory=list["ResolvablePayload"])
    licenses: list[LicensePayload] = Field(default_factory=list["LicensePayload"])
    release_notes: list[ReleaseNotesPayload] = Field(
        default_factory=list["ReleaseNotesPayload"]
    )


def load_snapshot_file(path: Path) -> Snapshot:
    """Read and validate a snapshot file; raises ``pydantic.ValidationError``."""

    return Snapshot.model_validate_json(path.read_text(encoding="utf-8"))

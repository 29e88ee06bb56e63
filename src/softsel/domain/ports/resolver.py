"""Port for the external package resolver."""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from softsel.domain.model import ResolvableKind, ResolvableRecord


@runtime_checkable
class Resolver(Protocol):
    """Query and command interface of the resolver owning the transaction state.

    Every call is a blocking request/response against a single resolver session.
    """

    def query(self, name: str, kind: ResolvableKind) -> list[ResolvableRecord]:
        """Return every record of ``kind`` named ``name``; an empty name means all."""
        ...

    def select(self, name: str, kind: ResolvableKind) -> bool: ...

    def remove(self, name: str, kind: ResolvableKind) -> bool: ...

    def set_neutral(
        self,
        name: str,
        kind: ResolvableKind,
        *,
        keep_previous_soft: bool = True,
    ) -> bool: ...

"""Log the current software selection for later debugging."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Final

from softsel.domain.model import ResolvableKind, TransactBy

if TYPE_CHECKING:
    from collections.abc import Iterable

    from softsel.domain.model import ResolvableRecord
    from softsel.domain.ports import Resolver

log = logging.getLogger(__name__)

# solver changes are consequences, not decisions
_LOGGED_ACTORS: Final = (TransactBy.USER, TransactBy.APP_HIGH, TransactBy.APP_LOW)


def log_software_selection(
    resolver: Resolver,
    *,
    kinds: Iterable[ResolvableKind] = tuple(ResolvableKind),
) -> None:
    """Log every resolvable changed by the user or the application."""

    log.info("Transaction status begin")
    for kind in kinds:
        records = resolver.query("", kind)
        for actor in _LOGGED_ACTORS:
            changed = [record for record in records if record.transact_by is actor]
            unlocked = [_describe(record) for record in changed if not record.locked]
            locked = [_describe(record) for record in changed if record.locked]
            if unlocked:
                log.info("Resolvables of type %s set by %s: %s", kind, actor, unlocked)
            if locked:
                log.info("Locked resolvables of type %s set by %s: %s", kind, actor, locked)
    log.info("Transaction status end")


def _describe(record: ResolvableRecord) -> dict[str, str | None]:
    return {"name": record.name, "version": record.version, "status": str(record.status)}

"""Select patterns for installation without overriding the user's decisions.

Decision per pattern, based on the first record the resolver reports:

=====================  ===========  ======================  ==================
current state          reselect     action                  report bucket
=====================  ===========  ======================  ==================
no record              any          report / log            missing_*
selected, by user      False        none                    skipped
selected, by other     False        none                    reinstated
selected, any actor    True         select again            reinstated
not selected, by user  False        none                    skipped
not selected, other    any          select                  installed / failed
not selected, by user  True         select                  installed / failed
=====================  ===========  ======================  ==================

``reselect`` restores a previously confirmed selection after the resolver
state was reset: a user *selection* is re-applied, a user *deselection* is
not protected.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from enum import StrEnum
from typing import TYPE_CHECKING

from softsel.domain.model import ResolvableKind, ResolvableStatus, TransactBy

if TYPE_CHECKING:
    from collections.abc import Iterable

    from softsel.domain.model import ResolvableRecord
    from softsel.domain.ports import Reporter, Resolver

log = logging.getLogger(__name__)


class PatternAction(StrEnum):
    INSTALL = "install"
    REINSTATE = "reinstate"
    KEEP = "keep"
    SKIP = "skip"


@dataclass(slots=True)
class PatternSelectionReport:
    """Outcome of one pattern selection run."""

    installed: list[str] = field(default_factory=list[str])
    reinstated: list[str] = field(default_factory=list[str])
    skipped: list[str] = field(default_factory=list[str])
    missing_mandatory: list[str] = field(default_factory=list[str])
    missing_optional: list[str] = field(default_factory=list[str])
    failed: list[str] = field(default_factory=list[str])

    @property
    def installed_count(self) -> int:
        return len(self.installed)

    @property
    def reinstated_count(self) -> int:
        return len(self.reinstated)

    @property
    def skipped_count(self) -> int:
        return len(self.skipped)

    @property
    def ok(self) -> bool:
        """True when nothing was reported to the user."""

        return not self.missing_mandatory and not self.failed


def decide_pattern_action(record: ResolvableRecord, *, reselect: bool) -> PatternAction:
    by_user = record.transact_by is TransactBy.USER
    if record.status is ResolvableStatus.SELECTED:
        if reselect:
            return PatternAction.REINSTATE
        return PatternAction.SKIP if by_user else PatternAction.KEEP
    if by_user and not reselect:
        return PatternAction.SKIP
    return PatternAction.INSTALL


def select_patterns(
    resolver: Resolver,
    reporter: Reporter,
    *,
    required: Iterable[str],
    optional: Iterable[str] = (),
    reselect: bool = False,
) -> PatternSelectionReport:
    """Ensure the ``required`` and ``optional`` patterns end up selected.

    A failure for one pattern never stops the others and nothing is rolled back.
    """

    report = PatternSelectionReport()
    required_names = _unique(required)
    required_set = set(required_names)
    optional_names = [name for name in _unique(optional) if name not in required_set]
    log.info(
        "Selecting patterns: required=%s, optional=%s, reselect=%s",
        required_names,
        optional_names,
        reselect,
    )

    for name in required_names:
        _select_pattern(name, resolver, reporter, report, mandatory=True, reselect=reselect)
    for name in optional_names:
        _select_pattern(name, resolver, reporter, report, mandatory=False, reselect=reselect)

    log.info(
        "Pattern selection finished: installed=%s, reinstated=%s, skipped=%s, "
        "missing=%s, optional missing=%s, failed=%s",
        report.installed_count,
        report.reinstated_count,
        report.skipped_count,
        report.missing_mandatory,
        report.missing_optional,
        report.failed,
    )
    return report


def _select_pattern(
    name: str,
    resolver: Resolver,
    reporter: Reporter,
    report: PatternSelectionReport,
    *,
    mandatory: bool,
    reselect: bool,
) -> None:
    records = resolver.query(name, ResolvableKind.PATTERN)
    if not records:
        if mandatory:
            reporter.error(f"Pattern {name} does not exist.")
            report.missing_mandatory.append(name)
        else:
            log.info("Optional pattern %s does not exist, skipping", name)
            report.missing_optional.append(name)
        return

    record = records[0]
    action = decide_pattern_action(record, reselect=reselect)
    if action is PatternAction.SKIP:
        log.info(
            "Pattern %s was %s by the user, keeping that decision",
            name,
            "selected" if record.status is ResolvableStatus.SELECTED else "deselected",
        )
        report.skipped.append(name)
        return
    if action is PatternAction.KEEP:
        log.debug("Pattern %s is already selected by %s", name, record.transact_by)
        report.reinstated.append(name)
        return

    if not resolver.select(name, ResolvableKind.PATTERN):
        reporter.error(f"Cannot select pattern {name} for installation.")
        report.failed.append(name)
        return

    if action is PatternAction.REINSTATE:
        report.reinstated.append(name)
    else:
        report.installed.append(name)


def _unique(names: Iterable[str]) -> list[str]:
    return list(dict.fromkeys(names))

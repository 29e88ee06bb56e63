from __future__ import annotations

import logging

import pytest

from softsel.adapters.reporting import LoggingReporter
from softsel.domain.model import WarningLevel


def test_reporter_logs_and_keeps_messages(caplog: pytest.LogCaptureFixture) -> None:
    reporter = LoggingReporter()

    with caplog.at_level(logging.INFO, logger="softsel.adapters.reporting"):
        reporter.error("Pattern base does not exist.")
        reporter.warning("Product removed", WarningLevel.ATTENTION)
        reporter.warning("Product updated", WarningLevel.INFO)

    assert reporter.has_errors
    assert reporter.errors == ["Pattern base does not exist."]
    assert reporter.warnings == [
        (WarningLevel.ATTENTION, "Product removed"),
        (WarningLevel.INFO, "Product updated"),
    ]
    assert [record.levelno for record in caplog.records] == [
        logging.ERROR,
        logging.WARNING,
        logging.INFO,
    ]


def test_reporter_without_errors() -> None:
    assert not LoggingReporter().has_errors

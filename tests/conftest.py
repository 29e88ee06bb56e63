from __future__ import annotations

import json
from pathlib import Path
from typing import TYPE_CHECKING

import pytest

from softsel.adapters.sqlalchemy import SqlAlchemyResolver

if TYPE_CHECKING:
    from collections.abc import Iterator

DATA_DIR = Path(__file__).resolve().parent / "data"


@pytest.fixture
def products_update() -> list[dict[str, object]]:
    """Product records of an upgrade from SLES 11 SP3 (with SDK) to SLES 12."""

    with (DATA_DIR / "products_update.json").open(encoding="utf-8") as handle:
        return json.load(handle)


@pytest.fixture
def sqlite_resolver() -> Iterator[SqlAlchemyResolver]:
    resolver = SqlAlchemyResolver.from_uri("sqlite+pysqlite:///:memory:")
    try:
        yield resolver
    finally:
        resolver.dispose()

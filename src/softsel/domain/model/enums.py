"""Domain enums (pure, dependency-light)."""

from __future__ import annotations

from enum import StrEnum


class ResolvableKind(StrEnum):
    PRODUCT = "product"
    PATTERN = "pattern"
    PACKAGE = "package"


class ResolvableStatus(StrEnum):
    """Transaction status of a resolvable as reported by the resolver."""

    AVAILABLE = "available"
    SELECTED = "selected"
    REMOVED = "removed"
    INSTALLED = "installed"
    NONE = "none"


class TransactBy(StrEnum):
    """Actor that last changed the status of a resolvable."""

    USER = "user"
    APP_HIGH = "app_high"
    APP_LOW = "app_low"
    SOLVER = "solver"
    NONE = "none"


class WarningLevel(StrEnum):
    INFO = "info"
    ATTENTION = "attention"


class ProductCategory(StrEnum):
    BASE = "base"
    ADDON = "addon"


class ReleaseNotesFormat(StrEnum):
    TXT = "txt"
    RTF = "rtf"

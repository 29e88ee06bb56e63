"""Domain model for products and resolvable records."""

from __future__ import annotations

from .enums import (
    ProductCategory,
    ReleaseNotesFormat,
    ResolvableKind,
    ResolvableStatus,
    TransactBy,
    WarningLevel,
)
from .product import Product
from .records import ResolvableRecord

__all__ = [
    "Product",
    "ProductCategory",
    "ReleaseNotesFormat",
    "ResolvableKind",
    "ResolvableRecord",
    "ResolvableStatus",
    "TransactBy",
    "WarningLevel",
]

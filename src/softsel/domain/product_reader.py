"""Read product snapshots from the resolver."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from softsel.domain.model import Product, ProductCategory, ResolvableKind

if TYPE_CHECKING:
    from softsel.domain.model import ResolvableStatus
    from softsel.domain.ports import Resolver

log = logging.getLogger(__name__)


class ProductReader:
    """Build ``Product`` values from the resolver's product records."""

    def __init__(self, resolver: Resolver) -> None:
        self.resolver = resolver

    def all_products(self) -> list[Product]:
        products: list[Product] = []
        seen: set[Product] = set()
        for record in self.resolver.query("", ResolvableKind.PRODUCT):
            product = Product.from_record(record)
            if product in seen:
                continue
            seen.add(product)
            products.append(product)
        return products

    def with_status(self, *statuses: ResolvableStatus) -> list[Product]:
        return [
            product
            for product in self.all_products()
            if product.has_status(self.resolver, *statuses)
        ]

    def available_base_products(self) -> list[Product]:
        """Base products offered by the initial repository (lowest source id)."""

        base = [
            product for product in self.all_products() if product.category == ProductCategory.BASE
        ]
        sources = [product.source for product in base if product.source is not None]
        if not sources:
            return base
        initial_source = min(sources)
        products = [product for product in base if product.source == initial_source]
        log.debug("Available base products: %s", [product.name for product in products])
        return products

    def selected_base(self) -> Product | None:
        return next(
            (
                product
                for product in self.available_base_products()
                if product.is_selected(self.resolver)
            ),
            None,
        )

"""Application service: List Products use case (query)."""

from __future__ import annotations

from purplehaze.application.dto import CatalogDTO, ProductDTO
from purplehaze.domain.model.product import Product
from purplehaze.domain.ports.catalog_provider import CatalogProvider

ALL_CATEGORIES = "all"


class ListProductsHandler:

    def __init__(self, catalog: CatalogProvider) -> None:
        self._catalog = catalog

    def handle(self, category: str | None = None) -> CatalogDTO:
        """List the catalog, optionally narrowed to one category.

        The category list is always built from the full catalog so the
        shopper can switch filters.
        """
        products = self._catalog.list_products()

        categories = [ALL_CATEGORIES]
        for product in products:
            if product.category not in categories:
                categories.append(product.category)

        if category and category != ALL_CATEGORIES:
            products = [p for p in products if p.category == category]

        return CatalogDTO(
            products=[self._to_dto(p) for p in products],
            categories=categories,
        )

    @staticmethod
    def _to_dto(product: Product) -> ProductDTO:
        return ProductDTO(
            id=product.id,
            name=product.name,
            description=product.description,
            category=product.category,
            price=str(product.price),
            stock=product.stock,
            in_stock=product.in_stock,
        )

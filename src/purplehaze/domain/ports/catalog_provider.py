"""Abstract catalog collaborator.

Defined in the domain layer so the domain never depends on
infrastructure.  The concrete Supabase adapter lives in the
infrastructure layer.
"""

from __future__ import annotations

from abc import ABC, abstractmethod

from purplehaze.domain.model.product import Product


class CatalogProvider(ABC):

    @abstractmethod
    def list_products(self) -> list[Product]:
        """Return every product in the catalog, ordered by name."""

    def get_by_id(self, product_id: str) -> Product | None:
        """Return a product by its ID, or None if not found."""
        for product in self.list_products():
            if product.id == product_id:
                return product
        return None

"""Product record as served by the catalog.

Products belong to the catalog provider; the storefront only reads them.
The cart copies name, category and price out of a product at add-time.
"""

from __future__ import annotations

from dataclasses import dataclass

from purplehaze.domain.model.value_objects import Money


@dataclass(frozen=True)
class Product:

    id: str
    name: str
    price: Money
    category: str
    description: str = ""
    stock: int = 0

    @property
    def in_stock(self) -> bool:
        return self.stock > 0

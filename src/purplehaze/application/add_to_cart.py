"""Application service: Add To Cart use case.

Looks the product up in the catalog so the cart snapshots the price the
shopper is actually seeing.
"""

from __future__ import annotations

from purplehaze.domain.exceptions import EntityNotFoundError
from purplehaze.domain.model.product import Product
from purplehaze.domain.ports.catalog_provider import CatalogProvider
from purplehaze.domain.service.cart_store import CartStore


class AddToCartHandler:

    def __init__(self, catalog: CatalogProvider, cart_store: CartStore) -> None:
        self._catalog = catalog
        self._cart_store = cart_store

    def handle(self, product_id: str) -> Product:
        product = self._catalog.get_by_id(product_id)
        if product is None:
            raise EntityNotFoundError(f"Product with ID '{product_id}' not found")

        # Stock is not enforced here; the CLI refuses sold-out products before this.
        self._cart_store.add_to_cart(product)
        return product

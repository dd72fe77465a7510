"""Application services: Update Quantity, Remove From Cart, Clear Cart.

Unknown ids are not errors for the store.  The handlers report whether
the line was present so the CLI can tell the shopper.
"""

from __future__ import annotations

from purplehaze.domain.service.cart_store import CartStore


class UpdateQuantityHandler:

    def __init__(self, cart_store: CartStore) -> None:
        self._cart_store = cart_store

    def handle(self, item_id: str, quantity: int) -> bool:
        """Set a line's quantity; zero or below removes the line."""
        present = self._cart_store.contains(item_id)
        self._cart_store.update_quantity(item_id, quantity)
        return present


class RemoveFromCartHandler:

    def __init__(self, cart_store: CartStore) -> None:
        self._cart_store = cart_store

    def handle(self, item_id: str) -> bool:
        present = self._cart_store.contains(item_id)
        self._cart_store.remove_from_cart(item_id)
        return present


class ClearCartHandler:

    def __init__(self, cart_store: CartStore) -> None:
        self._cart_store = cart_store

    def handle(self) -> None:
        self._cart_store.clear_cart()

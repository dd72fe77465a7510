"""Domain service: Cart Store.

The store is the sole mutation surface for the shopper's cart.  It is
constructed explicitly with a SessionStorage and passed to whatever
needs it; there is one instance per running client.

Every applied mutation is written to session storage under a fixed key
and then published synchronously to subscribed observers (for example
an item-count badge).  Mutations that change nothing publish nothing.
"""

from __future__ import annotations

import logging
from decimal import Decimal, InvalidOperation
from typing import Callable

from purplehaze.domain.exceptions import ValidationError
from purplehaze.domain.model.cart import Cart, CartLineItem
from purplehaze.domain.model.product import Product
from purplehaze.domain.model.value_objects import DEFAULT_CURRENCY, Money
from purplehaze.domain.ports.session_storage import SessionStorage

logger = logging.getLogger(__name__)

CART_STORAGE_KEY = "purple-haze-cart"

CartObserver = Callable[["CartStore"], None]


class CartStore:

    def __init__(
        self,
        storage: SessionStorage,
        currency: str = DEFAULT_CURRENCY,
    ) -> None:
        self._storage = storage
        self._observers: list[CartObserver] = []
        self._cart = self._rehydrate(currency)

    # --- Mutations ------------------------------------------------------------

    def add_to_cart(self, product: Product) -> None:
        self._cart.add(product)
        self._commit()

    def remove_from_cart(self, item_id: str) -> None:
        if self._cart.remove(item_id):
            self._commit()

    def update_quantity(self, item_id: str, new_quantity: int) -> None:
        if self._cart.update_quantity(item_id, new_quantity):
            self._commit()

    def clear_cart(self) -> None:
        self._cart.clear()
        self._commit()

    # --- Derived accessors ----------------------------------------------------

    @property
    def items(self) -> list[CartLineItem]:
        """A copy of the current line items, in insertion order."""
        return [
            CartLineItem(
                id=item.id,
                name=item.name,
                category=item.category,
                price=item.price,
                quantity=item.quantity,
            )
            for item in self._cart.items
        ]

    @property
    def total_items(self) -> int:
        return self._cart.total_items

    @property
    def total_price(self) -> Money:
        return self._cart.total_price

    @property
    def is_empty(self) -> bool:
        return self._cart.is_empty

    def contains(self, item_id: str) -> bool:
        return self._cart.find(item_id) is not None

    # --- Observers ------------------------------------------------------------

    def subscribe(self, observer: CartObserver) -> Callable[[], None]:
        """Register *observer*; returns a callable that unsubscribes it."""
        self._observers.append(observer)

        def unsubscribe() -> None:
            if observer in self._observers:
                self._observers.remove(observer)

        return unsubscribe

    # --- Internal helpers -----------------------------------------------------

    def _commit(self) -> None:
        self._storage.set(CART_STORAGE_KEY, self._to_raw(self._cart))
        for observer in list(self._observers):
            observer(self)

    def _rehydrate(self, currency: str) -> Cart:
        raw = self._storage.get(CART_STORAGE_KEY)
        if raw is None:
            return Cart(currency=currency)
        try:
            return self._to_domain(raw, currency)
        except (KeyError, TypeError, ValueError, InvalidOperation, ValidationError) as exc:
            logger.warning("Discarding unreadable persisted cart: %s", exc)
            self._storage.remove(CART_STORAGE_KEY)
            return Cart(currency=currency)

    # --- Serialization --------------------------------------------------------

    @staticmethod
    def _to_raw(cart: Cart) -> list[dict]:
        return [
            {
                "id": item.id,
                "name": item.name,
                "category": item.category,
                "price": str(item.price.amount),
                "currency": item.price.currency,
                "quantity": item.quantity,
            }
            for item in cart.items
        ]

    @staticmethod
    def _to_domain(raw: list[dict], currency: str) -> Cart:
        cart = Cart(currency=currency)
        for entry in raw:
            item = CartLineItem(
                id=str(entry["id"]),
                name=entry["name"],
                category=entry["category"],
                price=Money(Decimal(entry["price"]), entry.get("currency", currency)),
                quantity=entry["quantity"],
            )
            if item.price.currency != currency:
                raise ValidationError(f"Cart entry '{item.id}' priced in {item.price.currency}")
            if cart.find(item.id) is not None:
                raise ValidationError(f"Duplicate cart entry for '{item.id}'")
            cart.items.append(item)
        return cart

"""Application service: Show Cart use case (query)."""

from __future__ import annotations

from purplehaze.application.dto import CartDTO, CartLineDTO
from purplehaze.domain.service.cart_store import CartStore


class ShowCartHandler:

    def __init__(self, cart_store: CartStore) -> None:
        self._cart_store = cart_store

    def handle(self) -> CartDTO:
        return to_cart_dto(self._cart_store)


def to_cart_dto(cart_store: CartStore) -> CartDTO:
    return CartDTO(
        items=[
            CartLineDTO(
                id=item.id,
                name=item.name,
                category=item.category,
                quantity=item.quantity,
                unit_price=str(item.price),
                line_total=str(item.line_total),
            )
            for item in cart_store.items
        ],
        total_items=cart_store.total_items,
        total_price=str(cart_store.total_price),
    )

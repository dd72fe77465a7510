"""Order records handed to, and returned by, the order sink.

The storefront never stores orders itself.  It derives OrderLines from
the cart at checkout and receives an OrderConfirmation back.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from purplehaze.domain.model.cart import CartLineItem
from purplehaze.domain.model.value_objects import Money


class OrderStatus(Enum):
    PENDING = "pending"
    PAID = "paid"


@dataclass(frozen=True)
class OrderLine:
    product_id: str
    quantity: int
    price: Money  # unit price snapshot from the cart

    @staticmethod
    def from_items(items: list[CartLineItem]) -> list[OrderLine]:
        return [
            OrderLine(product_id=item.id, quantity=item.quantity, price=item.price)
            for item in items
        ]


@dataclass(frozen=True)
class OrderConfirmation:
    id: str
    status: OrderStatus

    @property
    def short_id(self) -> str:
        return self.id[:8]

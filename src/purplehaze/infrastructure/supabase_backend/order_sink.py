"""Supabase-backed implementation of OrderSink.

Writes the order row, then its line items, then marks it paid with a
demo payment reference.  No payment gateway is called.
"""

from __future__ import annotations

import time

import httpx
from supabase import Client, PostgrestAPIError

from purplehaze.domain.exceptions import SinkFailure
from purplehaze.domain.model.identity import Identity
from purplehaze.domain.model.order import OrderConfirmation, OrderLine, OrderStatus
from purplehaze.domain.model.value_objects import Money
from purplehaze.domain.ports.order_sink import OrderSink
from purplehaze.infrastructure.logging import get_logger

logger = get_logger(__name__)

CHECKOUT_FAILED = "There was an error processing your order. Please try again."


class SupabaseOrderSink(OrderSink):

    def __init__(self, client: Client) -> None:
        self.client = client

    def submit_order(
        self,
        identity: Identity,
        line_items: list[OrderLine],
        total: Money,
    ) -> OrderConfirmation:
        try:
            result = self.client.table("orders").insert(
                {
                    "user_id": identity.id,
                    "total": float(total.amount),
                    "status": OrderStatus.PENDING.value,
                }
            ).execute()
            if not result.data:
                raise SinkFailure(CHECKOUT_FAILED)
            order_id = str(result.data[0]["id"])

            self.client.table("order_items").insert(
                [
                    {
                        "order_id": order_id,
                        "product_id": line.product_id,
                        "quantity": line.quantity,
                        "price": float(line.price.amount),
                    }
                    for line in line_items
                ]
            ).execute()

            self.client.table("orders").update(
                {
                    "status": OrderStatus.PAID.value,
                    "payment_reference": self._demo_reference(),
                }
            ).eq("id", order_id).execute()
        except PostgrestAPIError as exc:
            logger.error("Checkout error: %s", exc.message)
            raise SinkFailure(CHECKOUT_FAILED) from exc
        except httpx.HTTPError as exc:
            logger.error("Checkout error: backend unreachable (%s)", exc)
            raise SinkFailure(CHECKOUT_FAILED) from exc
        except (KeyError, TypeError) as exc:
            logger.error("Checkout error: malformed order response (%r)", exc)
            raise SinkFailure(CHECKOUT_FAILED) from exc

        return OrderConfirmation(id=order_id, status=OrderStatus.PAID)

    @staticmethod
    def _demo_reference() -> str:
        return f"DEMO-{int(time.time() * 1000)}"

"""Application service: Checkout use case.

Gates on identity and a non-empty cart, hands the order to the sink,
and clears the cart only once the sink has confirmed.  On any sink
failure the cart is left exactly as it was so the shopper can retry.

The handler is non-reentrant: while one checkout is outstanding a
second one is refused.
"""

from __future__ import annotations

import logging

from purplehaze.application.dto import OrderDTO
from purplehaze.domain.exceptions import (
    CheckoutInProgressError,
    EmptyCartError,
    SinkFailure,
    UnauthenticatedError,
)
from purplehaze.domain.model.order import OrderConfirmation, OrderLine
from purplehaze.domain.ports.identity_provider import IdentityProvider
from purplehaze.domain.ports.order_sink import OrderSink
from purplehaze.domain.service.cart_store import CartStore

logger = logging.getLogger(__name__)


class CheckoutHandler:

    def __init__(
        self,
        cart_store: CartStore,
        identity_provider: IdentityProvider,
        order_sink: OrderSink,
    ) -> None:
        self._cart_store = cart_store
        self._identity_provider = identity_provider
        self._order_sink = order_sink
        self._busy = False

    @property
    def busy(self) -> bool:
        return self._busy

    def handle(self) -> OrderDTO:
        """Place an order for the current cart.

        Steps:
        1. Refuse if a checkout is already outstanding.
        2. Require a signed-in identity.
        3. Require at least one line item.
        4. Submit lines + total to the order sink.
        5. Clear the cart on success.
        """
        if self._busy:
            raise CheckoutInProgressError("A checkout is already in progress")

        identity = self._identity_provider.current_identity()
        if identity is None:
            raise UnauthenticatedError("You need to be signed in to checkout.")

        if self._cart_store.is_empty:
            raise EmptyCartError("Cart is empty. Add some products to your cart first.")

        self._busy = True
        try:
            lines = OrderLine.from_items(self._cart_store.items)
            total = self._cart_store.total_price
            item_count = self._cart_store.total_items
            try:
                confirmation = self._order_sink.submit_order(identity, lines, total)
            except SinkFailure:
                logger.error("Checkout failed for user %s", identity.id, exc_info=True)
                raise
            self._cart_store.clear_cart()
        finally:
            self._busy = False

        logger.info(
            "Order %s placed for user %s (total %s)",
            confirmation.id, identity.id, total,
        )
        return self._to_dto(confirmation, str(total), item_count)

    # --- Mapping --------------------------------------------------------------

    @staticmethod
    def _to_dto(confirmation: OrderConfirmation, total: str, item_count: int) -> OrderDTO:
        return OrderDTO(
            id=confirmation.id,
            short_id=confirmation.short_id,
            status=confirmation.status.value,
            total=total,
            item_count=item_count,
        )

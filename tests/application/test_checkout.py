"""Integration tests for the Checkout use case.

Uses in-memory fakes only.
"""

import pytest

from purplehaze.application.checkout import CheckoutHandler
from purplehaze.domain.exceptions import (
    CheckoutInProgressError,
    EmptyCartError,
    SinkFailure,
    UnauthenticatedError,
)
from purplehaze.domain.model.identity import Identity
from purplehaze.domain.model.product import Product
from purplehaze.domain.model.value_objects import Money
from purplehaze.domain.service.cart_store import CartStore
from tests.fakes import FakeIdentityProvider, FakeOrderSink, InMemorySessionStorage

SHOPPER = Identity(id="user-1", email="shopper@example.com")


def _setup(
    identity: Identity | None = SHOPPER,
    fail: bool = False,
    products: list[Product] | None = None,
) -> tuple[CheckoutHandler, CartStore, FakeOrderSink]:
    if products is None:
        products = [
            Product(id="1", name="Northern Lights", price=Money.of("150.00"), category="Indica"),
            Product(id="2", name="Sour Diesel", price=Money.of("120.00"), category="Sativa"),
        ]
    store = CartStore(InMemorySessionStorage())
    for product in products:
        store.add_to_cart(product)
    sink = FakeOrderSink(fail=fail)
    handler = CheckoutHandler(store, FakeIdentityProvider(identity), sink)
    return handler, store, sink


class TestCheckoutHappyPath:

    def test_submits_order_and_clears_cart(self):
        handler, store, sink = _setup()
        clears: list[int] = []
        store.subscribe(lambda s: clears.append(s.total_items))

        dto = handler.handle()

        assert clears == [0]  # cleared exactly once
        assert store.items == []
        assert dto.status == "paid"
        assert dto.total == "R270.00"
        assert dto.item_count == 2
        assert len(sink.orders) == 1

    def test_order_carries_identity_lines_and_total(self):
        handler, store, sink = _setup()
        store.update_quantity("1", 3)

        handler.handle()

        identity, lines, total = sink.orders[0]
        assert identity == SHOPPER
        assert [(l.product_id, l.quantity) for l in lines] == [("1", 3), ("2", 1)]
        assert total == Money.of("570.00")

    def test_short_id_is_first_eight_chars(self):
        handler, _, _ = _setup()
        dto = handler.handle()
        assert dto.short_id == dto.id[:8]


class TestCheckoutGuards:

    def test_no_identity_rejected_and_cart_untouched(self):
        handler, store, sink = _setup(identity=None)
        before = [(i.id, i.quantity) for i in store.items]

        with pytest.raises(UnauthenticatedError, match="signed in"):
            handler.handle()

        assert [(i.id, i.quantity) for i in store.items] == before
        assert sink.orders == []

    def test_empty_cart_rejected(self):
        handler, _, sink = _setup(products=[])
        with pytest.raises(EmptyCartError, match="empty"):
            handler.handle()
        assert sink.orders == []

    def test_identity_checked_before_empty_cart(self):
        handler, _, _ = _setup(identity=None, products=[])
        with pytest.raises(UnauthenticatedError):
            handler.handle()


class TestCheckoutFailure:

    def test_sink_failure_keeps_cart(self):
        handler, store, _ = _setup(fail=True)
        before = [(i.id, i.quantity) for i in store.items]

        with pytest.raises(SinkFailure, match="try again"):
            handler.handle()

        assert [(i.id, i.quantity) for i in store.items] == before

    def test_retry_after_failure_succeeds(self):
        handler, store, sink = _setup(fail=True)
        with pytest.raises(SinkFailure):
            handler.handle()

        sink.fail = False
        handler.handle()
        assert store.items == []
        assert len(sink.orders) == 1

    def test_busy_flag_released_after_failure(self):
        handler, _, _ = _setup(fail=True)
        with pytest.raises(SinkFailure):
            handler.handle()
        assert handler.busy is False


class TestCheckoutReentrancy:

    def test_second_checkout_while_outstanding_rejected(self):
        handler, store, sink = _setup()
        reentrant_errors: list[Exception] = []

        def reenter() -> None:
            assert handler.busy is True
            try:
                handler.handle()
            except CheckoutInProgressError as exc:
                reentrant_errors.append(exc)

        sink.on_submit = reenter
        handler.handle()

        assert len(reentrant_errors) == 1
        assert len(sink.orders) == 1
        assert store.items == []
        assert handler.busy is False

"""Unit tests for deriving order lines from cart items."""

from purplehaze.domain.model.cart import Cart
from purplehaze.domain.model.order import OrderConfirmation, OrderLine, OrderStatus
from purplehaze.domain.model.product import Product
from purplehaze.domain.model.value_objects import Money


class TestOrderLine:

    def test_lines_mirror_cart(self):
        cart = Cart()
        cart.add(Product(id="a", name="A", price=Money.of("10"), category="x"))
        cart.add(Product(id="a", name="A", price=Money.of("10"), category="x"))
        cart.add(Product(id="b", name="B", price=Money.of("3.50"), category="y"))

        lines = OrderLine.from_items(cart.items)
        assert lines == [
            OrderLine(product_id="a", quantity=2, price=Money.of("10")),
            OrderLine(product_id="b", quantity=1, price=Money.of("3.50")),
        ]

    def test_empty_cart_has_no_lines(self):
        assert OrderLine.from_items([]) == []


class TestOrderConfirmation:

    def test_short_id(self):
        confirmation = OrderConfirmation(
            id="3f2a9c1e-7b44-4d1a-9e0f-1234567890ab", status=OrderStatus.PAID
        )
        assert confirmation.short_id == "3f2a9c1e"

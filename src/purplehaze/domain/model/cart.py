"""Cart aggregate: the shopper's selected line items.

The Cart owns its line items and enforces every cart invariant.  It has
no knowledge of persistence or observers; the CartStore wraps it for that.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from purplehaze.domain.exceptions import ValidationError
from purplehaze.domain.model.product import Product
from purplehaze.domain.model.value_objects import DEFAULT_CURRENCY, Money


@dataclass
class CartLineItem:
    """One product in the cart.

    ``name``, ``category`` and ``price`` are a snapshot taken when the
    product was first added.  A later catalog price change does not
    reach items already in the cart.
    """

    id: str
    name: str
    category: str
    price: Money  # locked at add-time
    quantity: int = 1

    def __post_init__(self) -> None:
        _check_quantity(self.quantity)

    @property
    def line_total(self) -> Money:
        return self.price * self.quantity

    def set_quantity(self, quantity: int) -> None:
        _check_quantity(quantity)
        self.quantity = quantity


def _check_quantity(quantity: int) -> None:
    if not isinstance(quantity, int) or isinstance(quantity, bool):
        raise ValidationError(
            f"Quantity must be an integer, got {type(quantity).__name__}"
        )
    if quantity < 1:
        raise ValidationError("Quantity must be at least 1")


@dataclass
class Cart:
    """Aggregate root for the shopping cart.

    Invariants:
    - every item has ``quantity >= 1``
    - no two items share an ``id``
    - ``total_items`` and ``total_price`` are recomputed from ``items``
      on every read

    Mutators return True when the cart actually changed so callers can
    skip notifications for no-ops.
    """

    items: list[CartLineItem] = field(default_factory=list)
    currency: str = DEFAULT_CURRENCY

    # --- Mutations ------------------------------------------------------------

    def add(self, product: Product) -> bool:
        """Add one unit of *product*, merging with an existing line."""
        existing = self.find(product.id)
        if existing is not None:
            existing.set_quantity(existing.quantity + 1)
            return True

        self.items.append(
            CartLineItem(
                id=product.id,
                name=product.name,
                category=product.category,
                price=product.price,  # <-- price snapshot
                quantity=1,
            )
        )
        return True

    def remove(self, item_id: str) -> bool:
        before = len(self.items)
        self.items = [item for item in self.items if item.id != item_id]
        return len(self.items) != before

    def update_quantity(self, item_id: str, quantity: int) -> bool:
        """Set a line's quantity exactly; zero or below removes the line."""
        if quantity <= 0:
            return self.remove(item_id)
        item = self.find(item_id)
        if item is None:
            return False
        item.set_quantity(quantity)
        return True

    def clear(self) -> None:
        self.items = []

    # --- Computed properties --------------------------------------------------

    @property
    def total_items(self) -> int:
        return sum(item.quantity for item in self.items)

    @property
    def total_price(self) -> Money:
        result = Money.zero(self.currency)
        for item in self.items:
            result = result + item.line_total
        return result

    @property
    def is_empty(self) -> bool:
        return not self.items

    def find(self, item_id: str) -> CartLineItem | None:
        for item in self.items:
            if item.id == item_id:
                return item
        return None

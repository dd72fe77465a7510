"""In-memory fakes for every domain port.

These implement the same abstract interfaces as the Supabase and JSON
adapters but keep everything in plain Python objects.  No network, no
file I/O.
"""

from __future__ import annotations

import copy
from typing import Any

from purplehaze.domain.exceptions import AuthenticationError, SinkFailure
from purplehaze.domain.model.identity import Identity
from purplehaze.domain.model.order import OrderConfirmation, OrderLine, OrderStatus
from purplehaze.domain.model.product import Product
from purplehaze.domain.model.value_objects import Credentials, Money
from purplehaze.domain.ports.catalog_provider import CatalogProvider
from purplehaze.domain.ports.identity_provider import IdentityProvider
from purplehaze.domain.ports.order_sink import OrderSink
from purplehaze.domain.ports.session_storage import SessionStorage


class InMemorySessionStorage(SessionStorage):

    def __init__(self, data: dict[str, Any] | None = None) -> None:
        self._store: dict[str, Any] = dict(data or {})

    def get(self, key: str) -> Any | None:
        # Copy so callers cannot mutate "persisted" state in place
        return copy.deepcopy(self._store.get(key))

    def set(self, key: str, value: Any) -> None:
        self._store[key] = copy.deepcopy(value)

    def remove(self, key: str) -> None:
        self._store.pop(key, None)

    def clear(self) -> None:
        self._store.clear()

    def keys(self) -> list[str]:
        return list(self._store)


class FakeCatalogProvider(CatalogProvider):

    def __init__(self, products: list[Product] | None = None) -> None:
        self._store: dict[str, Product] = {}
        for p in products or []:
            self._store[p.id] = p

    def list_products(self) -> list[Product]:
        return sorted(self._store.values(), key=lambda p: p.name)

    def save(self, product: Product) -> None:
        self._store[product.id] = product


class FakeIdentityProvider(IdentityProvider):

    def __init__(self, identity: Identity | None = None) -> None:
        self._identity = identity
        self.accounts: dict[str, str] = {}
        self.sign_in_calls = 0
        self.sign_out_calls = 0

    def current_identity(self) -> Identity | None:
        return self._identity

    def sign_in(self, credentials: Credentials) -> Identity:
        self.sign_in_calls += 1
        if self.accounts.get(credentials.email) != credentials.password:
            raise AuthenticationError("Invalid email or password. Please try again.")
        self._identity = Identity(id=f"user-{credentials.email}", email=credentials.email)
        return self._identity

    def sign_up(self, credentials: Credentials) -> Identity:
        if credentials.email in self.accounts:
            raise AuthenticationError(
                "This email is already registered. Please sign in instead."
            )
        self.accounts[credentials.email] = credentials.password
        self._identity = Identity(id=f"user-{credentials.email}", email=credentials.email)
        return self._identity

    def sign_out(self) -> None:
        self.sign_out_calls += 1
        self._identity = None


class FakeOrderSink(OrderSink):

    def __init__(self, fail: bool = False) -> None:
        self.fail = fail
        self.orders: list[tuple[Identity, list[OrderLine], Money]] = []
        self.on_submit = None

    def submit_order(
        self,
        identity: Identity,
        line_items: list[OrderLine],
        total: Money,
    ) -> OrderConfirmation:
        if self.on_submit is not None:
            self.on_submit()
        if self.fail:
            raise SinkFailure("There was an error processing your order. Please try again.")
        self.orders.append((identity, list(line_items), total))
        order_id = f"{len(self.orders):08d}-0000-4000-8000-000000000000"
        return OrderConfirmation(id=order_id, status=OrderStatus.PAID)

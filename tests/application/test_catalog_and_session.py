"""Integration tests for catalog listing and ending the session."""

from purplehaze.application.end_session import EndSessionHandler
from purplehaze.application.list_products import ListProductsHandler
from purplehaze.domain.model.identity import Identity
from purplehaze.domain.model.product import Product
from purplehaze.domain.model.value_objects import Money
from purplehaze.domain.service.age_gate import AgeGate
from purplehaze.domain.service.cart_store import CartStore
from tests.fakes import FakeCatalogProvider, FakeIdentityProvider, InMemorySessionStorage


def _catalog() -> FakeCatalogProvider:
    return FakeCatalogProvider([
        Product(id="3", name="Sour Diesel", price=Money.of("120"), category="Sativa", stock=5),
        Product(id="1", name="Northern Lights", price=Money.of("150"), category="Indica", stock=0),
        Product(id="2", name="Durban Poison", price=Money.of("130"), category="Sativa", stock=2),
    ])


class TestListProducts:

    def test_lists_everything_ordered_by_name(self):
        dto = ListProductsHandler(_catalog()).handle()
        assert [p.name for p in dto.products] == ["Durban Poison", "Northern Lights", "Sour Diesel"]

    def test_categories_all_first_then_distinct(self):
        dto = ListProductsHandler(_catalog()).handle()
        assert dto.categories == ["all", "Sativa", "Indica"]

    def test_category_filter(self):
        dto = ListProductsHandler(_catalog()).handle(category="Sativa")
        assert [p.id for p in dto.products] == ["2", "3"]
        # The full category list is still offered
        assert dto.categories == ["all", "Sativa", "Indica"]

    def test_all_means_no_filter(self):
        dto = ListProductsHandler(_catalog()).handle(category="all")
        assert len(dto.products) == 3

    def test_unknown_category_is_empty(self):
        dto = ListProductsHandler(_catalog()).handle(category="Edibles")
        assert dto.products == []

    def test_stock_and_price_formatting(self):
        dto = ListProductsHandler(_catalog()).handle()
        lights = next(p for p in dto.products if p.id == "1")
        assert lights.in_stock is False
        assert lights.price == "R150.00"


class TestEndSession:

    def test_wipes_cart_age_gate_and_identity(self):
        storage = InMemorySessionStorage()
        store = CartStore(storage)
        store.add_to_cart(Product(id="1", name="A", price=Money.of("1"), category="x"))
        AgeGate(storage).verify()
        provider = FakeIdentityProvider(Identity(id="u1", email="a@b.co"))

        EndSessionHandler(provider, storage).handle()

        assert provider.current_identity() is None
        assert provider.sign_out_calls == 1
        assert CartStore(storage).items == []
        assert AgeGate(storage).is_verified is False

    def test_anonymous_session_skips_sign_out(self):
        provider = FakeIdentityProvider()
        EndSessionHandler(provider, InMemorySessionStorage()).handle()
        assert provider.sign_out_calls == 0

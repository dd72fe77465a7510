"""Supabase-backed implementation of CatalogProvider."""

from __future__ import annotations

import httpx
from supabase import Client, PostgrestAPIError

from purplehaze.domain.exceptions import CatalogUnavailableError, ValidationError
from purplehaze.domain.model.product import Product
from purplehaze.domain.model.value_objects import DEFAULT_CURRENCY, Money
from purplehaze.domain.ports.catalog_provider import CatalogProvider
from purplehaze.infrastructure.logging import get_logger

logger = get_logger(__name__)

CATALOG_FAILED = "Could not load products. Please try again."


class SupabaseCatalogProvider(CatalogProvider):

    def __init__(self, client: Client, currency: str = DEFAULT_CURRENCY) -> None:
        self.client = client
        self._currency = currency

    def list_products(self) -> list[Product]:
        query = self.client.table("products").select("*").order("name")
        return self._fetch(query, "products")

    def get_by_id(self, product_id: str) -> Product | None:
        query = self.client.table("products").select("*").eq("id", product_id)
        products = self._fetch(query, f"product {product_id}")
        return products[0] if products else None

    # --- Internal helpers -----------------------------------------------------

    def _fetch(self, query, what: str) -> list[Product]:
        try:
            result = query.execute()
            return [self._to_domain(row) for row in result.data or []]
        except PostgrestAPIError as exc:
            logger.error("Error fetching %s: %s", what, exc.message)
            raise CatalogUnavailableError(CATALOG_FAILED) from exc
        except httpx.HTTPError as exc:
            logger.error("Error fetching %s: backend unreachable (%s)", what, exc)
            raise CatalogUnavailableError(CATALOG_FAILED) from exc
        except (KeyError, TypeError, ValueError, ValidationError) as exc:
            logger.error("Error fetching %s: malformed row (%r)", what, exc)
            raise CatalogUnavailableError(CATALOG_FAILED) from exc

    # --- Serialization --------------------------------------------------------

    def _to_domain(self, row: dict) -> Product:
        return Product(
            id=str(row["id"]),
            name=row["name"],
            description=row.get("description") or "",
            price=Money.of(row["price"], self._currency),
            category=row.get("category") or "",
            stock=int(row.get("stock") or 0),
        )

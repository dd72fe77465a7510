"""Data Transfer Objects: plain containers that cross layer boundaries.

DTOs carry data between the CLI and application layers without
exposing domain internals to the outside world.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class ProductDTO:
    """Output: a catalog entry as displayed to the shopper."""

    id: str
    name: str
    description: str
    category: str
    price: str  # formatted, e.g. "R150.00"
    stock: int
    in_stock: bool


@dataclass(frozen=True)
class CatalogDTO:
    products: list[ProductDTO]
    categories: list[str]  # "all" first, then distinct categories


@dataclass(frozen=True)
class CartLineDTO:
    id: str
    name: str
    category: str
    quantity: int
    unit_price: str
    line_total: str


@dataclass(frozen=True)
class CartDTO:
    items: list[CartLineDTO]
    total_items: int
    total_price: str


@dataclass(frozen=True)
class OrderDTO:
    """Output: the confirmation of a placed order."""

    id: str
    short_id: str
    status: str
    total: str
    item_count: int

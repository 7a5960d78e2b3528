"""Catalog domain entities used by the dashboard pipeline."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from decimal import Decimal
from types import MappingProxyType


@dataclass(frozen=True, slots=True)
class Product:
    """A product in the store catalog."""

    id: int
    name: str
    category: str
    price: Decimal
    in_stock: bool


@dataclass(frozen=True, slots=True)
class LineItem:
    """One (product, quantity) pair within an order."""

    product_id: int
    qty: int


@dataclass(frozen=True, slots=True)
class Order:
    """A customer order."""

    id: str
    items: tuple[LineItem, ...]
    created_at: str  # YYYY-MM-DD


@dataclass(frozen=True, slots=True)
class Card:
    """Display-ready view of a product."""

    id: int
    title: str
    price_label: str
    badge: str
    is_highlighted: bool
    category: str
    in_stock: bool
    price: Decimal


@dataclass(frozen=True, slots=True)
class Totals:
    """Aggregate revenue, units and per-category revenue across orders."""

    revenue: Decimal
    units: int
    # read-only view, in first-insertion order
    totals_by_category: Mapping[str, Decimal] = field(
        default_factory=lambda: MappingProxyType({})
    )
    revenue_with_tax: Decimal = Decimal("0")

"""Catalog domain types, sample data and file loading."""

from __future__ import annotations

from storelytics.catalog.loader import Catalog, CatalogLoadError, default_catalog, load_catalog
from storelytics.catalog.models import Card, LineItem, Order, Product, Totals

__all__ = [
    "Card",
    "Catalog",
    "CatalogLoadError",
    "LineItem",
    "Order",
    "Product",
    "Totals",
    "default_catalog",
    "load_catalog",
]

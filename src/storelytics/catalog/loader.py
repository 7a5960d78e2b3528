"""Catalog loader - reads products, orders and config from a YAML file.

The file is validated with pydantic and converted into the frozen domain
types the pipeline works with.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date
from decimal import Decimal
from pathlib import Path
from typing import Any

from pydantic import BaseModel, Field, ValidationError
import yaml

from storelytics.catalog.models import LineItem, Order, Product
from storelytics.catalog.sample import SAMPLE_ORDERS, SAMPLE_PRODUCTS
from storelytics.core.config import StoreConfig, load_store_config


class CatalogLoadError(Exception):
    """Raised when a catalog file cannot be read or does not validate."""


class RawProduct(BaseModel):
    id: int
    name: str
    category: str
    price: Decimal = Field(ge=0)
    in_stock: bool = True


class RawLineItem(BaseModel):
    product_id: int
    qty: int = Field(gt=0)


class RawOrder(BaseModel):
    id: str
    items: list[RawLineItem] = Field(default_factory=list)
    created_at: date


class RawCatalog(BaseModel):
    """Top-level shape of a catalog YAML file."""

    products: list[RawProduct] = Field(default_factory=list)
    orders: list[RawOrder] = Field(default_factory=list)
    config: dict[str, Any] | None = None


@dataclass(frozen=True)
class Catalog:
    """Products, orders and dashboard config ready for the pipeline."""

    products: tuple[Product, ...]
    orders: tuple[Order, ...]
    config: StoreConfig = field(default_factory=StoreConfig)


def default_catalog(config: StoreConfig | None = None) -> Catalog:
    """Return the built-in sample catalog."""
    return Catalog(
        products=SAMPLE_PRODUCTS,
        orders=SAMPLE_ORDERS,
        config=config or StoreConfig(),
    )


def load_catalog(path: Path, default_config: StoreConfig | None = None) -> Catalog:
    """Load a catalog from a YAML file.

    Args:
        path: Path to the catalog YAML file
        default_config: Config used when the file has no ``config`` section

    Returns:
        Catalog with domain products, orders and config

    Raises:
        CatalogLoadError: If the file is missing, is not valid YAML, or does
            not match the catalog schema.
    """
    try:
        text = path.read_text(encoding="utf-8")
    except OSError as e:
        raise CatalogLoadError(f"Cannot read catalog file {path}: {e}") from e

    try:
        data = yaml.safe_load(text) or {}
    except yaml.YAMLError as e:
        raise CatalogLoadError(f"Invalid YAML in {path}: {e}") from e

    try:
        raw = RawCatalog.model_validate(data)
    except ValidationError as e:
        raise CatalogLoadError(f"Invalid catalog {path}: {e}") from e

    if raw.config is not None:
        try:
            config = load_store_config(raw.config)
        except ValueError as e:
            raise CatalogLoadError(f"Invalid config in {path}: {e}") from e
    else:
        config = default_config or StoreConfig()

    return Catalog(
        products=tuple(_to_product(p) for p in raw.products),
        orders=tuple(_to_order(o) for o in raw.orders),
        config=config,
    )


def _to_product(raw: RawProduct) -> Product:
    return Product(
        id=raw.id,
        name=raw.name,
        category=raw.category,
        price=raw.price,
        in_stock=raw.in_stock,
    )


def _to_order(raw: RawOrder) -> Order:
    return Order(
        id=raw.id,
        items=tuple(LineItem(product_id=i.product_id, qty=i.qty) for i in raw.items),
        created_at=raw.created_at.isoformat(),
    )

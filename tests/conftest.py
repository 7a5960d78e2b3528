"""Shared test fixtures."""

from __future__ import annotations

from decimal import Decimal

import pytest

from storelytics.catalog.models import Order, Product
from storelytics.catalog.sample import SAMPLE_ORDERS, SAMPLE_PRODUCTS
from storelytics.core.config import StoreConfig


@pytest.fixture
def products() -> list[Product]:
    return list(SAMPLE_PRODUCTS)


@pytest.fixture
def orders() -> list[Order]:
    return list(SAMPLE_ORDERS)


@pytest.fixture
def store_config() -> StoreConfig:
    return StoreConfig(
        currency="€",
        show_out_of_stock=False,
        highlight_category="Electronics",
        tax_rate=Decimal("0.2"),
    )


@pytest.fixture(autouse=True)
def _clear_storelytics_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep a developer's STORELYTICS_* environment out of the tests."""
    for name in (
        "STORELYTICS_CURRENCY",
        "STORELYTICS_SHOW_OUT_OF_STOCK",
        "STORELYTICS_HIGHLIGHT_CATEGORY",
        "STORELYTICS_TAX_RATE",
        "STORELYTICS_PLAIN_TEXT",
    ):
        monkeypatch.delenv(name, raising=False)

"""Built-in sample catalog used when no catalog file is given."""

from __future__ import annotations

from decimal import Decimal

from storelytics.catalog.models import LineItem, Order, Product

SAMPLE_PRODUCTS: tuple[Product, ...] = (
    Product(1, "Laptop Pro 15", "Electronics", Decimal("1499.99"), True),
    Product(2, "Wireless Mouse", "Electronics", Decimal("24.5"), False),
    Product(3, "Mechanical Keyboard", "Electronics", Decimal("79"), True),
    Product(4, "Water Bottle", "Lifestyle", Decimal("12"), True),
    Product(5, "Notebook", "Stationery", Decimal("4.5"), True),
    Product(6, "Pencil", "Stationery", Decimal("1.2"), True),
)

SAMPLE_ORDERS: tuple[Order, ...] = (
    Order("A100", (LineItem(1, 1), LineItem(3, 1)), "2025-08-10"),
    Order("A101", (LineItem(5, 3), LineItem(6, 5)), "2025-08-11"),
    Order("A102", (LineItem(3, 1), LineItem(4, 2)), "2025-08-12"),
    # Wireless Mouse is out of stock but still counts toward totals
    Order("A103", (LineItem(2, 1),), "2025-08-12"),
)

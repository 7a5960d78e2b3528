"""Order aggregation: totals, date filtering and top seller."""

from __future__ import annotations

from collections.abc import Iterable, Mapping, Sequence
from datetime import date
from decimal import Decimal
from types import MappingProxyType

from storelytics.catalog.models import Order, Product, Totals
from storelytics.core.money import round_money
from storelytics.pipeline.logger import PipelineLogger


def index_products(products: Iterable[Product]) -> dict[int, Product]:
    """Index products by id. The first product with a given id wins."""
    by_id: dict[int, Product] = {}
    for product in products:
        by_id.setdefault(product.id, product)
    return by_id


def compute_totals(
    orders: Sequence[Order],
    products: Iterable[Product],
    *,
    tax_rate: Decimal,
    logger: PipelineLogger | None = None,
) -> Totals:
    """Fold every order line item into revenue, units and per-category revenue.

    Line items that reference an unknown product are skipped. Stock status is
    not checked. Sums are kept at full precision and rounded to 2 places only
    once, after all orders are processed; the tax-inclusive figure is derived
    from the already-rounded net revenue.

    Args:
        orders: Orders to aggregate, in declared order
        products: Catalog used to resolve line item product ids
        tax_rate: Tax as a fraction (0.2 = 20%)
        logger: Optional pipeline logger for skipped line items

    Returns:
        Totals with rounded revenue, units, category totals and revenue with tax
    """
    by_id = index_products(products)
    revenue = Decimal("0")
    units = 0
    by_category: dict[str, Decimal] = {}

    for order in orders:
        for item in order.items:
            product = by_id.get(item.product_id)
            if product is None:
                if logger is not None:
                    logger.line_item_skipped(order.id, item.product_id)
                continue

            line = product.price * item.qty
            revenue += line
            units += item.qty
            by_category[product.category] = (
                by_category.get(product.category, Decimal("0")) + line
            )

    net = round_money(revenue)
    return Totals(
        revenue=net,
        units=units,
        totals_by_category=MappingProxyType(
            {cat: round_money(amt) for cat, amt in by_category.items()}
        ),
        revenue_with_tax=round_money(net * (1 + Decimal(tax_rate))),
    )


def filter_orders_since(orders: Sequence[Order], since: str | date) -> list[Order]:
    """Keep orders created on or after ``since`` (ISO date), preserving order."""
    cutoff = since if isinstance(since, date) else date.fromisoformat(since)
    return [o for o in orders if date.fromisoformat(o.created_at) >= cutoff]


def top_seller(
    orders: Sequence[Order], products: Iterable[Product]
) -> tuple[Product, int] | None:
    """Return the product with the most units sold and its unit count.

    Ties go to the product that first appeared in the orders. Returns None if
    no line item references a known product.
    """
    by_id = index_products(products)
    units = units_by_product(orders, by_id)
    if not units:
        return None

    best_id = max(units, key=lambda pid: units[pid])
    return by_id[best_id], units[best_id]


def units_by_product(
    orders: Sequence[Order], products: Mapping[int, Product]
) -> dict[int, int]:
    """Sum units sold per known product id, in order of first appearance."""
    units: dict[int, int] = {}
    for order in orders:
        for item in order.items:
            if item.product_id in products:
                units[item.product_id] = units.get(item.product_id, 0) + item.qty
    return units

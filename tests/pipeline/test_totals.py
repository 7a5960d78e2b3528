from __future__ import annotations

from decimal import Decimal

import pytest

from storelytics.catalog.models import LineItem, Order, Product
from storelytics.pipeline.totals import (
    compute_totals,
    filter_orders_since,
    index_products,
    top_seller,
)


def test_compute_totals_single_order() -> None:
    # input
    products = [
        Product(1, "Laptop Pro 15", "Electronics", Decimal("1499.99"), True),
        Product(3, "Mechanical Keyboard", "Electronics", Decimal("79"), True),
    ]
    orders = [Order("A100", (LineItem(1, 1), LineItem(3, 1)), "2025-08-10")]

    # act
    totals = compute_totals(orders, products, tax_rate=Decimal("0.2"))

    # assert
    assert totals.revenue == Decimal("1578.99")
    assert totals.units == 2
    assert totals.totals_by_category == {"Electronics": Decimal("1578.99")}


def test_compute_totals_full_sample(products, orders) -> None:
    totals = compute_totals(orders, products, tax_rate=Decimal("0.2"))

    # expected
    expected_by_category = {
        "Electronics": Decimal("1682.49"),
        "Stationery": Decimal("19.50"),
        "Lifestyle": Decimal("24.00"),
    }

    # assert
    assert totals.units == 14
    assert totals.revenue == Decimal("1725.99")
    assert totals.revenue_with_tax == Decimal("2071.19")
    assert totals.totals_by_category == expected_by_category
    assert list(totals.totals_by_category) == ["Electronics", "Stationery", "Lifestyle"]


def test_compute_totals_counts_out_of_stock_products(products) -> None:
    orders = [Order("A103", (LineItem(2, 1),), "2025-08-12")]

    totals = compute_totals(orders, products, tax_rate=Decimal("0.2"))

    assert totals.revenue == Decimal("24.50")
    assert totals.units == 1


def test_compute_totals_empty_orders(products) -> None:
    totals = compute_totals([], products, tax_rate=Decimal("0.2"))

    assert totals.revenue == 0
    assert totals.units == 0
    assert totals.totals_by_category == {}
    assert totals.revenue_with_tax == 0


def test_compute_totals_skips_unknown_products(products) -> None:
    # input
    orders = [
        Order("X1", (LineItem(99, 4),), "2025-08-10"),
        Order("X2", (LineItem(99, 1), LineItem(4, 2)), "2025-08-11"),
    ]

    # act
    totals = compute_totals(orders, products, tax_rate=Decimal("0.2"))

    # assert
    assert totals.units == 2
    assert totals.revenue == Decimal("24.00")
    assert totals.totals_by_category == {"Lifestyle": Decimal("24.00")}


def test_compute_totals_reports_skipped_items_to_logger(products) -> None:
    class RecordingLogger:
        def __init__(self) -> None:
            self.skipped: list[tuple[str, int]] = []

        def line_item_skipped(self, order_id: str, product_id: int) -> None:
            self.skipped.append((order_id, product_id))

    recorder = RecordingLogger()
    orders = [Order("X1", (LineItem(1, 1), LineItem(42, 1)), "2025-08-10")]

    compute_totals(orders, products, tax_rate=Decimal("0"), logger=recorder)  # type: ignore[arg-type]

    assert recorder.skipped == [("X1", 42)]


def test_compute_totals_rounds_once_at_the_end() -> None:
    # three lines of 0.005 round to 0.02 only when summed first
    products = [Product(1, "Sticker", "Misc", Decimal("0.005"), True)]
    orders = [Order("R1", (LineItem(1, 1), LineItem(1, 1), LineItem(1, 1)), "2025-01-01")]

    totals = compute_totals(orders, products, tax_rate=Decimal("0"))

    assert totals.revenue == Decimal("0.02")
    assert totals.totals_by_category == {"Misc": Decimal("0.02")}


def test_compute_totals_applies_tax_to_rounded_revenue() -> None:
    products = [Product(1, "Widget", "Misc", Decimal("10.005"), True)]
    orders = [Order("T1", (LineItem(1, 1),), "2025-01-01")]

    totals = compute_totals(orders, products, tax_rate=Decimal("0.5"))

    # 10.005 -> 10.01 net, then 10.01 * 1.5 = 15.015 -> 15.02
    assert totals.revenue == Decimal("10.01")
    assert totals.revenue_with_tax == Decimal("15.02")


def test_compute_totals_is_idempotent(products, orders) -> None:
    first = compute_totals(orders, products, tax_rate=Decimal("0.2"))
    second = compute_totals(orders, products, tax_rate=Decimal("0.2"))

    assert first == second


def test_index_products_keeps_first_duplicate() -> None:
    first = Product(1, "First", "A", Decimal("1"), True)
    second = Product(1, "Second", "B", Decimal("2"), True)

    by_id = index_products([first, second])

    assert by_id == {1: first}


def test_filter_orders_since_is_inclusive(orders) -> None:
    kept = filter_orders_since(orders, "2025-08-11")

    assert [o.id for o in kept] == ["A101", "A102", "A103"]


def test_top_seller_by_units(products, orders) -> None:
    best = top_seller(orders, products)

    assert best is not None
    product, units = best
    assert product.name == "Pencil"
    assert units == 5


def test_top_seller_tie_goes_to_first_seen(products) -> None:
    orders = [Order("T1", (LineItem(4, 2), LineItem(5, 2)), "2025-08-10")]

    best = top_seller(orders, products)

    assert best is not None
    assert best[0].id == 4


def test_top_seller_none_without_valid_items(products) -> None:
    orders = [Order("X1", (LineItem(99, 3),), "2025-08-10")]

    assert top_seller(orders, products) is None


def test_compute_totals_category_mapping_is_read_only(products, orders) -> None:
    totals = compute_totals(orders, products, tax_rate=Decimal("0.2"))

    with pytest.raises(TypeError):
        totals.totals_by_category["Electronics"] = Decimal("0")  # type: ignore[index]

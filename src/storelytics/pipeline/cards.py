"""Card mapping, filtering and sorting."""

from __future__ import annotations

from collections.abc import Sequence
from typing import Literal

from storelytics.catalog.models import Card, Product
from storelytics.core.config import StoreConfig
from storelytics.core.money import format_money

SortKey = Literal["price", "name"]

IN_STOCK_BADGE = "In Stock"
OUT_OF_STOCK_BADGE = "Out of Stock"


def map_to_cards(products: Sequence[Product], config: StoreConfig) -> list[Card]:
    """Map each product to a display card, preserving order."""
    return [
        Card(
            id=p.id,
            title=p.name,
            price_label=format_money(p.price, config.currency),
            badge=IN_STOCK_BADGE if p.in_stock else OUT_OF_STOCK_BADGE,
            is_highlighted=p.category == config.highlight_category,
            category=p.category,
            in_stock=p.in_stock,
            price=p.price,
        )
        for p in products
    ]


def filter_cards(
    cards: Sequence[Card],
    *,
    query: str = "",
    show_out_of_stock: bool = False,
) -> list[Card]:
    """Narrow cards by stock visibility, then by a case-insensitive query.

    The query is matched as a substring of the title or category. An empty
    query (after trimming) matches every card.
    """
    q = query.strip().lower()
    visible = [c for c in cards if show_out_of_stock or c.in_stock]
    if not q:
        return visible
    return [c for c in visible if q in c.title.lower() or q in c.category.lower()]


def sort_cards(
    cards: Sequence[Card], by: SortKey = "price", *, descending: bool = False
) -> list[Card]:
    """Return cards sorted by price or name. Ties keep their input order."""
    if by == "price":
        return sorted(cards, key=lambda c: c.price, reverse=descending)
    if by == "name":
        return sorted(cards, key=lambda c: c.title.lower(), reverse=descending)
    raise ValueError(f"Unsupported sort key: {by!r} (expected 'price' or 'name')")

"""Plain-text rendering of the dashboard sections."""

from __future__ import annotations

from collections.abc import Sequence

from storelytics.catalog.models import Card, Product, Totals
from storelytics.core.money import format_money

STAR = "⭐"
SEPARATOR = " • "


def section_header(name: str) -> str:
    return f"— {name} —"


def card_line(card: Card, *, with_star: bool = True) -> str:
    """Format a card as ``title • price • badge`` plus a star if highlighted."""
    line = SEPARATOR.join((card.title, card.price_label, card.badge))
    if with_star and card.is_highlighted:
        line += f"{SEPARATOR}{STAR}"
    return line


def category_summary(totals: Totals, currency: str) -> str:
    return ", ".join(
        f"{cat}: {format_money(amount, currency)}"
        for cat, amount in totals.totals_by_category.items()
    )


def totals_lines(totals: Totals, currency: str) -> list[str]:
    return [
        f"Units: {totals.units}",
        f"Revenue: {format_money(totals.revenue, currency)}",
        f"Revenue (with tax): {format_money(totals.revenue_with_tax, currency)}",
        f"By Category: {category_summary(totals, currency)}",
    ]


def report_lines(cards: Sequence[Card], totals: Totals, currency: str) -> list[str]:
    """Render the summary report for the given (usually filtered) cards.

    Categories are listed in the order they were first seen during
    aggregation.
    """
    lines = [
        f"Products shown: {len(cards)}",
        f"Total units sold: {totals.units}",
        f"Revenue (net): {format_money(totals.revenue, currency)}",
        f"Revenue (tax incl.): {format_money(totals.revenue_with_tax, currency)}",
        "Categories:",
    ]
    for cat, amount in totals.totals_by_category.items():
        lines.append(f"  - {cat}: {format_money(amount, currency)}")

    lines.append("")
    lines.append("Featured Products:")
    for card in cards:
        star = f"{STAR} " if card.is_highlighted else ""
        lines.append(f"  {star}{card.title} — {card.price_label} ({card.badge})")
    return lines


def top_seller_line(best: tuple[Product, int] | None) -> str:
    if best is None:
        return "Top seller: none"
    product, units = best
    return f"Top seller: {product.name} ({units} units)"

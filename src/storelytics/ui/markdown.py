from __future__ import annotations

from collections.abc import Sequence
import os

from rich.console import Console
from rich.markdown import Markdown

from storelytics.catalog.models import Card, Totals
from storelytics.core.money import format_money
from storelytics.ui.report import STAR


def report_markdown(cards: Sequence[Card], totals: Totals, currency: str) -> str:
    """Render the summary report as a Markdown document."""
    lines = [
        "# Store Report",
        "",
        f"- **Products shown:** {len(cards)}",
        f"- **Total units sold:** {totals.units}",
        f"- **Revenue (net):** {format_money(totals.revenue, currency)}",
        f"- **Revenue (tax incl.):** {format_money(totals.revenue_with_tax, currency)}",
        "",
        "## Categories",
        "",
        "| Category | Revenue |",
        "| --- | ---: |",
    ]
    for cat, amount in totals.totals_by_category.items():
        lines.append(f"| {cat} | {format_money(amount, currency)} |")

    lines.extend(["", "## Featured Products", ""])
    for card in cards:
        star = f"{STAR} " if card.is_highlighted else ""
        lines.append(f"- {star}**{card.title}**: {card.price_label} ({card.badge})")
    return "\n".join(lines) + "\n"


def should_use_rich(console: Console) -> bool:
    """Check if Rich rendering is supported/desired.

    Returns:
        False if not TTY, NO_COLOR set, or STORELYTICS_PLAIN_TEXT set
    """
    return (
        console.is_terminal
        and not os.getenv("NO_COLOR")
        and not os.getenv("STORELYTICS_PLAIN_TEXT")
    )


def print_markdown(text: str, console: Console | None = None) -> None:
    """Print Markdown with Rich formatting, or as plain text when unsupported."""
    console = console or Console()
    if should_use_rich(console):
        console.print(Markdown(text))
    else:
        console.print(text, markup=False, highlight=False, soft_wrap=True, end="")

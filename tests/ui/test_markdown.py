from __future__ import annotations

from decimal import Decimal
import io

import pytest
from rich.console import Console

from storelytics.catalog.models import Totals
from storelytics.pipeline.cards import map_to_cards
from storelytics.ui.markdown import print_markdown, report_markdown, should_use_rich


def test_report_markdown_lists_categories_and_cards(products, store_config) -> None:
    cards = map_to_cards(products[:1], store_config)
    totals = Totals(
        revenue=Decimal("1499.99"),
        units=1,
        totals_by_category={"Electronics": Decimal("1499.99")},
        revenue_with_tax=Decimal("1799.99"),
    )

    text = report_markdown(cards, totals, "€")

    assert "# Store Report" in text
    assert "- **Revenue (tax incl.):** €1799.99" in text
    assert "| Electronics | €1499.99 |" in text
    assert "- ⭐ **Laptop Pro 15**: €1499.99 (In Stock)" in text


def test_print_markdown_plain_when_not_terminal() -> None:
    buffer = io.StringIO()
    console = Console(file=buffer, force_terminal=False)

    print_markdown("# Title\n", console)

    assert buffer.getvalue() == "# Title\n"


def test_should_use_rich_respects_plain_text_env(monkeypatch: pytest.MonkeyPatch) -> None:
    console = Console(file=io.StringIO(), force_terminal=True)
    monkeypatch.delenv("NO_COLOR", raising=False)

    assert should_use_rich(console) is True

    monkeypatch.setenv("STORELYTICS_PLAIN_TEXT", "1")

    assert should_use_rich(console) is False

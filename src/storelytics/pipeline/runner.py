"""Dashboard runner: config, map, filter, aggregate, render."""

from __future__ import annotations

from collections.abc import Callable, Sequence
from dataclasses import dataclass, field
from typing import Any

import typer

from storelytics.catalog.models import Card, Order, Product, Totals
from storelytics.core.config import StoreConfig, config_lines
from storelytics.pipeline.cards import SortKey, filter_cards, map_to_cards, sort_cards
from storelytics.pipeline.logger import PipelineLogger
from storelytics.pipeline.totals import compute_totals, filter_orders_since, top_seller
from storelytics.ui.report import card_line, report_lines, section_header, totals_lines

DEFAULT_QUERY = "electronics"


@dataclass
class DashboardResult:
    """Everything a dashboard run produced."""

    cards: list[Card]
    visible_cards: list[Card]
    totals: Totals
    top_seller: tuple[Product, int] | None
    lines: list[str] = field(default_factory=list)


class DashboardRunner:
    """Runs the dashboard pipeline and emits each section line by line."""

    def __init__(
        self,
        config: StoreConfig,
        products: Sequence[Product],
        orders: Sequence[Order],
        emit: Callable[[str], Any] = typer.echo,
        logger: PipelineLogger | None = None,
    ) -> None:
        """Initialize dashboard runner.

        Args:
            config: Dashboard options (currency, stock visibility, highlight, tax)
            products: Product catalog
            orders: Orders to aggregate
            emit: Called once per output line, in order
            logger: Pipeline logger; a default one is created when omitted
        """
        self._config = config
        self._products = products
        self._orders = orders
        self._emit = emit
        self._logger = logger or PipelineLogger()

    def run(
        self,
        *,
        query: str = DEFAULT_QUERY,
        show_out_of_stock: bool | None = None,
        since: str | None = None,
        sort_by: SortKey | None = None,
        descending: bool = False,
    ) -> DashboardResult:
        """Run every stage in order and emit the five dashboard sections.

        Args:
            query: Search text for the visible cards
            show_out_of_stock: Overrides config.show_out_of_stock when given
            since: Only aggregate orders created on or after this ISO date
            sort_by: Optional sort applied to the visible cards
            descending: Reverse the sort order

        Returns:
            DashboardResult with derived cards, totals and the emitted lines
        """
        config = self._config
        lines: list[str] = []

        def out(line: str) -> None:
            lines.append(line)
            self._emit(line)

        self._logger.run_started(len(self._products), len(self._orders))

        out(section_header("CONFIG"))
        for line in config_lines(config):
            out(line)

        cards = map_to_cards(self._products, config)
        self._logger.cards_mapped(len(cards), sum(c.is_highlighted for c in cards))
        out("")
        out(section_header("CARDS (mapped)"))
        for card in cards:
            out(card_line(card))

        if show_out_of_stock is None:
            show_out_of_stock = config.show_out_of_stock
        visible = filter_cards(cards, query=query, show_out_of_stock=show_out_of_stock)
        if sort_by is not None:
            visible = sort_cards(visible, sort_by, descending=descending)
        self._logger.cards_filtered(len(visible), len(cards), query, show_out_of_stock)
        out("")
        out(section_header("VISIBLE CARDS (filtered)"))
        for card in visible:
            out(card_line(card, with_star=False))

        orders: Sequence[Order] = self._orders
        if since is not None:
            orders = filter_orders_since(orders, since)
            self._logger.orders_filtered(len(orders), len(self._orders), since)
        totals = compute_totals(
            orders, self._products, tax_rate=config.tax_rate, logger=self._logger
        )
        self._logger.totals_computed(totals)
        out("")
        out(section_header("TOTALS (reduced)"))
        for line in totals_lines(totals, config.currency):
            out(line)

        out("")
        out(section_header("REPORT"))
        for line in report_lines(visible, totals, config.currency):
            out(line)

        return DashboardResult(
            cards=cards,
            visible_cards=visible,
            totals=totals,
            top_seller=top_seller(orders, self._products),
            lines=lines,
        )

"""Logging for dashboard pipeline stages.

Keeps log formatting out of the mapping, filtering and aggregation code.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import loguru
from loguru import logger

if TYPE_CHECKING:
    from storelytics.catalog.models import Totals


class PipelineLogger:
    """Handles all logging for the dashboard pipeline."""

    def __init__(self, logger_instance: loguru.Logger = logger) -> None:
        """Initialize logger.

        Args:
            logger_instance: Logger instance to use (defaults to loguru.logger)
        """
        self._logger = logger_instance

    def run_started(self, product_count: int, order_count: int) -> None:
        """Log start of a dashboard run."""
        self._logger.bind(products=product_count, orders=order_count).info(
            "Dashboard run: {} products, {} orders", product_count, order_count
        )

    def cards_mapped(self, card_count: int, highlighted_count: int) -> None:
        self._logger.bind(cards=card_count, highlighted=highlighted_count).debug(
            "Mapped {} cards ({} highlighted)", card_count, highlighted_count
        )

    def cards_filtered(
        self, kept: int, total: int, query: str, show_out_of_stock: bool
    ) -> None:
        """Log card filter outcome."""
        self._logger.bind(
            kept=kept, total=total, query=query, show_out_of_stock=show_out_of_stock
        ).debug("Filter kept {}/{} cards (query={!r})", kept, total, query)

    def orders_filtered(self, kept: int, total: int, since: str) -> None:
        self._logger.bind(kept=kept, total=total, since=since).debug(
            "Date filter kept {}/{} orders since {}", kept, total, since
        )

    def line_item_skipped(self, order_id: str, product_id: int) -> None:
        """Log a line item whose product is not in the catalog."""
        self._logger.bind(order_id=order_id, product_id=product_id).debug(
            "Skipping line item in order {}: unknown product {}",
            order_id,
            product_id,
        )

    def totals_computed(self, totals: Totals) -> None:
        """Log aggregation summary."""
        self._logger.bind(
            revenue=str(totals.revenue),
            units=totals.units,
            categories=len(totals.totals_by_category),
        ).info(
            "Totals: {} units, revenue {} across {} categories",
            totals.units,
            totals.revenue,
            len(totals.totals_by_category),
        )

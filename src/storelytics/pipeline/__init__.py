"""Dashboard pipeline stages: map, filter, aggregate, run."""

from __future__ import annotations

from storelytics.pipeline.cards import filter_cards, map_to_cards, sort_cards
from storelytics.pipeline.runner import DashboardResult, DashboardRunner
from storelytics.pipeline.totals import compute_totals, filter_orders_since, top_seller

__all__ = [
    "DashboardResult",
    "DashboardRunner",
    "compute_totals",
    "filter_cards",
    "filter_orders_since",
    "map_to_cards",
    "sort_cards",
    "top_seller",
]

"""Storelytics: a small store analytics dashboard."""

from __future__ import annotations

__version__ = "0.1.0"

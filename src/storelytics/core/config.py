from __future__ import annotations

from collections.abc import Callable, Mapping
from dataclasses import dataclass, fields
from decimal import Decimal, InvalidOperation
import os
from typing import Any

from loguru import logger

_TRUE_VALUES = {"1", "true", "yes", "on"}


@dataclass(frozen=True, slots=True)
class StoreConfig:
    """Dashboard options passed explicitly to every pipeline stage."""

    currency: str = "€"
    show_out_of_stock: bool = False
    highlight_category: str = "Electronics"
    tax_rate: Decimal = Decimal("0.2")


CONFIG_KEYS: tuple[str, ...] = tuple(f.name for f in fields(StoreConfig))


def config_lines(config: StoreConfig) -> list[str]:
    """Return ``"<key>: <value>"`` for each declared field, in order."""
    return [f"{key}: {getattr(config, key)}" for key in CONFIG_KEYS]


def log_config(config: StoreConfig, emit: Callable[[str], Any]) -> None:
    for line in config_lines(config):
        emit(line)


def validate_config(raw: Mapping[str, Any]) -> list[str]:
    """Return a warning message for each missing or unknown config key."""
    warnings = [
        f"Missing config key '{key}', using default {getattr(StoreConfig(), key)!r}"
        for key in CONFIG_KEYS
        if key not in raw
    ]
    warnings.extend(
        f"Unknown config key '{key}' ignored" for key in raw if key not in CONFIG_KEYS
    )
    return warnings


def _parse_bool(value: Any) -> bool:
    if isinstance(value, bool):
        return value
    return str(value).strip().lower() in _TRUE_VALUES


def _parse_tax_rate(value: Any) -> Decimal:
    try:
        rate = Decimal(str(value).strip())
    except InvalidOperation:
        raise ValueError(f"tax_rate must be a decimal fraction, got {value!r}") from None
    if not rate.is_finite():
        raise ValueError(f"tax_rate must be finite, got {value!r}")
    return rate


def load_store_config(raw: Mapping[str, Any]) -> StoreConfig:
    """Build a StoreConfig from a mapping, warning about missing keys."""
    for message in validate_config(raw):
        logger.warning(message)

    defaults = StoreConfig()
    return StoreConfig(
        currency=str(raw.get("currency", defaults.currency)),
        show_out_of_stock=_parse_bool(
            raw.get("show_out_of_stock", defaults.show_out_of_stock)
        ),
        highlight_category=str(
            raw.get("highlight_category", defaults.highlight_category)
        ),
        tax_rate=_parse_tax_rate(raw.get("tax_rate", defaults.tax_rate)),
    )


def load_store_config_from_env() -> StoreConfig:
    """Load dashboard config from STORELYTICS_* environment variables."""
    defaults = StoreConfig()

    currency = os.environ.get("STORELYTICS_CURRENCY", defaults.currency).strip()
    if not currency:
        raise ValueError("STORELYTICS_CURRENCY must not be empty")

    show_out_of_stock = os.environ.get(
        "STORELYTICS_SHOW_OUT_OF_STOCK", "false"
    ).strip().lower() in _TRUE_VALUES

    highlight_category = os.environ.get(
        "STORELYTICS_HIGHLIGHT_CATEGORY", defaults.highlight_category
    ).strip()

    tax_rate = _parse_tax_rate(
        os.environ.get("STORELYTICS_TAX_RATE", str(defaults.tax_rate))
    )

    return StoreConfig(
        currency=currency,
        show_out_of_stock=show_out_of_stock,
        highlight_category=highlight_category,
        tax_rate=tax_rate,
    )

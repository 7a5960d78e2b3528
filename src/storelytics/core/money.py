from __future__ import annotations

from decimal import ROUND_HALF_UP, Decimal

_CENTS = Decimal("0.01")


def round_money(amount: Decimal) -> Decimal:
    """Round an amount to 2 decimal places, half away from zero."""
    return Decimal(amount).quantize(_CENTS, rounding=ROUND_HALF_UP)


def format_money(amount: Decimal, currency: str) -> str:
    """Format an amount as ``<currency><amount fixed to 2 decimals>``."""
    return f"{currency}{round_money(amount)}"

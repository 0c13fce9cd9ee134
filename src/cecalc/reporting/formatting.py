from __future__ import annotations

import math
from decimal import ROUND_HALF_UP, Decimal, localcontext

NOT_AVAILABLE = "n/a"


def to_fixed(value: float, digits: int) -> str:
    """
    Fixed-point text with ties rounded away from zero.
    - Rounds the exact binary value, so 2.5 -> "3" but 1.005 -> "1.00"
      (1.005 is stored slightly below the tie).
    """
    with localcontext() as ctx:
        ctx.prec = 400
        quantum = Decimal(1).scaleb(-digits)
        return str(Decimal(value).quantize(quantum, rounding=ROUND_HALF_UP))


def format_currency(amount: float) -> str:
    """
    Compact dollar display used on cards, axes and tooltips:
    - >= 1,000,000 -> "$1.5M"
    - >= 1,000     -> "$45K"
    - otherwise    -> "$500"
    """
    if not math.isfinite(amount):
        return NOT_AVAILABLE
    if amount >= 1_000_000:
        return f"${to_fixed(amount / 1_000_000, 1)}M"
    if amount >= 1_000:
        return f"${to_fixed(amount / 1_000, 0)}K"
    return f"${to_fixed(amount, 0)}"


def format_percent(value: float) -> str:
    if not math.isfinite(value):
        return NOT_AVAILABLE
    return f"{to_fixed(value, 0)}%"


def format_fte(value: float) -> str:
    if not math.isfinite(value):
        return NOT_AVAILABLE
    return f"{to_fixed(value, 1)} FTE"


def format_months(value: float) -> str:
    if not math.isfinite(value):
        return NOT_AVAILABLE
    return f"{to_fixed(value, 0)} months"

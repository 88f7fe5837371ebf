"""Formatting helpers for estimate output.

All rounding of money happens here, at display time; the calculators
carry unrounded values.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from homecost.numeric import round_half_up

if TYPE_CHECKING:
    from homecost.models.estimate import CostRange


def format_currency(amount: float) -> str:
    """Format a currency amount as a human-readable string.

    - Amounts >= $10,000: no cents, with comma separators (e.g., '$1,234,567')
    - Amounts < $10,000: with cents (e.g., '$9,876.54')
    """
    if amount >= 10_000:
        return f"${amount:,.0f}"
    return f"${amount:,.2f}"


def format_compact(amount: float) -> str:
    """Short form for headlines: '$1.2M', '$485K', '$950'."""
    if amount >= 1_000_000:
        return f"${amount / 1_000_000:.1f}M"
    if amount >= 1_000:
        return f"${round_half_up(amount / 1_000):.0f}K"
    return f"${round_half_up(amount):.0f}"


def format_cost_range(cr: CostRange) -> str:
    """Format a CostRange as a human-readable string.

    - Millions (>= $1M): '$X.XM - $X.XM'
    - Below $1M: '$XXX,XXX - $XXX,XXX'
    """
    if cr.high >= 1_000_000:
        return f"${cr.low / 1_000_000:.1f}M - ${cr.high / 1_000_000:.1f}M"
    return f"${cr.low:,.0f} - ${cr.high:,.0f}"


def format_sf_cost(cr: CostRange) -> str:
    """Format a per-SF CostRange as '$XXX - $XXX / SF'."""
    return f"${cr.low:,.0f} - ${cr.high:,.0f} / SF"


def format_monthly(amount: float) -> str:
    """Monthly payment figure as shown on upsell cards: '+$1,234/mo'."""
    return f"+${round_half_up(amount):,.0f}/mo"


def format_weeks(weeks: float) -> str:
    if weeks == int(weeks):
        return f"{int(weeks)} wk"
    return f"{weeks:.1f} wk"

"""Display formatting for prices and changes."""

import math


def format_number(num: float) -> str:
    """Format a dollar amount with a T/B/M/K suffix."""
    if num >= 1e12:
        return f"${num / 1e12:.2f}T"
    if num >= 1e9:
        return f"${num / 1e9:.2f}B"
    if num >= 1e6:
        return f"${num / 1e6:.2f}M"
    if num >= 1e3:
        return f"${num / 1e3:.2f}K"
    return f"${num:.2f}"


def format_percent(num: float) -> str:
    """Format a percentage with an explicit sign, e.g. +1.23%."""
    sign = "+" if num >= 0 else ""
    return f"{sign}{num:.2f}%"


def percent_change(current: float, previous: float) -> float:
    """Percentage change from previous to current; NaN when previous is 0."""
    if previous == 0:
        return math.nan
    return ((current - previous) / previous) * 100

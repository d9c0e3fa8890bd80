"""Currency and percentage text for terminal output."""

import math
from typing import Optional


def _round_half_up(value: float) -> int:
    return int(math.floor(value + 0.5))


def format_currency(value: Optional[float]) -> str:
    """Whole pounds with thousands separators, e.g. £19,118.

    Negative amounts are written -£1,136. Returns "–" for None or non-finite
    values.
    """
    if value is None or not math.isfinite(value):
        return "–"
    pounds = _round_half_up(abs(value))
    sign = "-" if value < 0 and pounds else ""
    return f"{sign}£{pounds:,}"


def format_percentage(value: Optional[float], places: int = 1) -> str:
    """Rate as a percentage, e.g. 0.2215 -> 22.2%.

    Returns "n/a" for None (rate not available) and "–" for non-finite values.
    """
    if value is None:
        return "n/a"
    if not math.isfinite(value):
        return "–"
    return f"{value * 100:.{places}f}%"


def format_thousands(value: float) -> str:
    """Compact thousands, e.g. 36294.5 -> £36.3k."""
    return f"£{value / 1000:.1f}k"

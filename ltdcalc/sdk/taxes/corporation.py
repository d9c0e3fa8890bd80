"""Corporation tax with marginal relief.

Profits up to the lower limit pay the small profits rate, profits at or
above the upper limit pay the main rate. Between the two, tax at the main
rate is reduced by marginal relief:

    relief = 3/200 * (upper_limit - profit)

which makes the tax curve continuous at both limits (9,500 at 50,000 and
62,500 at 250,000).
"""

from .rates import (
    CT_LOWER_LIMIT,
    CT_MAIN_RATE,
    CT_MARGINAL_RELIEF_FRACTION,
    CT_MARGINAL_RELIEF_RATE,
    CT_SMALL_PROFITS_RATE,
    CT_UPPER_LIMIT,
)

SMALL_PROFITS = "small_profits"
MARGINAL_RELIEF = "marginal_relief"
MAIN_RATE = "main_rate"


def calculate_corporation_tax(profit: float) -> float:
    """Calculate corporation tax on taxable company profit.

    Args:
        profit: Taxable profit (may be negative)

    Returns:
        Corporation tax due (0 for a loss)
    """
    if profit <= 0:
        return 0
    if profit <= CT_LOWER_LIMIT:
        return profit * CT_SMALL_PROFITS_RATE
    if profit >= CT_UPPER_LIMIT:
        return profit * CT_MAIN_RATE

    tax_at_main_rate = profit * CT_MAIN_RATE
    marginal_relief = CT_MARGINAL_RELIEF_FRACTION * (CT_UPPER_LIMIT - profit)
    return tax_at_main_rate - marginal_relief


def corporation_tax_effective_rate(profit: float) -> float:
    """Corporation tax as a share of profit (0.0 when there is no profit)."""
    if profit <= 0:
        return 0.0
    return calculate_corporation_tax(profit) / profit


def corporation_tax_band(profit: float) -> str:
    """Classify profit into small_profits, marginal_relief or main_rate."""
    if profit <= CT_LOWER_LIMIT:
        return SMALL_PROFITS
    if profit >= CT_UPPER_LIMIT:
        return MAIN_RATE
    return MARGINAL_RELIEF


MARGINAL_RATES = {
    SMALL_PROFITS: CT_SMALL_PROFITS_RATE,
    MARGINAL_RELIEF: CT_MARGINAL_RELIEF_RATE,
    MAIN_RATE: CT_MAIN_RATE,
}


def marginal_corporation_tax_rate(profit: float) -> float:
    """Rate paid on the next pound of profit.

    19% at or below the lower limit, 26.5% strictly inside the marginal
    relief band, 25% at or above the upper limit.
    """
    return MARGINAL_RATES[corporation_tax_band(profit)]

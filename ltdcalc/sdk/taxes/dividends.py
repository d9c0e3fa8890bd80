"""Dividend tax for a director drawing a salary plus dividends.

The basic band is whatever remains of the basic rate threshold after the
salary; everything above it is taxed at the higher dividend rate. The
dividend allowance is set against the basic band only.
"""

from .rates import BASIC_RATE_THRESHOLD, DIRECTOR_SALARY, DIVIDEND_ALLOWANCE
from .schemas import DividendBreakdown, TaxYearRates


def basic_band_capacity(salary: float = DIRECTOR_SALARY) -> float:
    """Dividends that fit in the basic band after the salary."""
    return max(0, BASIC_RATE_THRESHOLD - salary)


def calculate_dividend_tax(
    after_tax_profit: float,
    rates: TaxYearRates,
    salary: float = DIRECTOR_SALARY,
) -> DividendBreakdown:
    """Split after-tax profit into dividend bands and tax each band.

    Args:
        after_tax_profit: Profit after corporation tax, all paid as dividend
        rates: Dividend rates for the tax year
        salary: Salary already using the basic rate threshold

    Returns:
        DividendBreakdown with per-band dividend and tax
    """
    basic_dividend = min(after_tax_profit, basic_band_capacity(salary))
    basic_taxable = max(0, basic_dividend - DIVIDEND_ALLOWANCE)
    basic_tax = basic_taxable * rates.basic_dividend_rate

    # A loss stays in the basic band as a negative amount, untaxed
    higher_dividend = after_tax_profit - basic_dividend
    higher_tax = higher_dividend * rates.higher_dividend_rate

    return DividendBreakdown(
        basic_band_dividend=basic_dividend,
        basic_band_tax=basic_tax,
        higher_band_dividend=higher_dividend,
        higher_band_tax=higher_tax,
    )

"""taxes - UK company and dividend tax calculations.

Scope:
- Employer National Insurance on the director's salary
- Corporation tax with marginal relief banding
- Dividend tax across the basic and higher bands

Constraints:
- Pure calculation - no config or profile access
- Rates are built-in constants keyed by tax year (rates.py)

Usage:
    from ltdcalc.sdk.taxes import calculate_corporation_tax, get_tax_year_rates

    ct = calculate_corporation_tax(86294.5)
    rates = get_tax_year_rates("2026")
"""

from .rates import (
    BASIC_RATE_THRESHOLD,
    CT_LOWER_LIMIT,
    CT_MAIN_RATE,
    CT_UPPER_LIMIT,
    DEFAULT_TAX_YEAR,
    DIRECTOR_SALARY,
    DIVIDEND_ALLOWANCE,
    TOTAL_WORKING_DAYS,
    available_tax_years,
    get_tax_year_rates,
)

from .schemas import TaxYearRates, DividendBreakdown

from .national_insurance import calculate_employer_ni

from .corporation import (
    calculate_corporation_tax,
    corporation_tax_effective_rate,
    corporation_tax_band,
    marginal_corporation_tax_rate,
)

from .dividends import basic_band_capacity, calculate_dividend_tax

__all__ = [
    # Constants
    "BASIC_RATE_THRESHOLD",
    "CT_LOWER_LIMIT",
    "CT_MAIN_RATE",
    "CT_UPPER_LIMIT",
    "DEFAULT_TAX_YEAR",
    "DIRECTOR_SALARY",
    "DIVIDEND_ALLOWANCE",
    "TOTAL_WORKING_DAYS",
    # Rates
    "TaxYearRates",
    "available_tax_years",
    "get_tax_year_rates",
    # Calculators
    "DividendBreakdown",
    "calculate_employer_ni",
    "calculate_corporation_tax",
    "corporation_tax_effective_rate",
    "corporation_tax_band",
    "marginal_corporation_tax_rate",
    "basic_band_capacity",
    "calculate_dividend_tax",
]

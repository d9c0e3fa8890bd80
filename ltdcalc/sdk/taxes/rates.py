"""UK statutory constants for a one-person limited company.

All monetary values in GBP. "2025" means the 2025/26 tax year.

Thresholds and rates are fixed for the supported tax years. Adding a tax
year is a data change: add an entry to DIVIDEND_RATES.
"""

import logging
from typing import Optional

from .schemas import TaxYearRates

logger = logging.getLogger(__name__)


# ── Director pay ─────────────────────────────────────────────────────
DIRECTOR_SALARY = 12_570          # salary at the personal allowance

# ── Employer National Insurance ──────────────────────────────────────
EMPLOYER_NI_THRESHOLD = 5_000     # secondary threshold
EMPLOYER_NI_RATE = 0.15

# ── Corporation Tax ──────────────────────────────────────────────────
CT_LOWER_LIMIT = 50_000
CT_UPPER_LIMIT = 250_000
CT_SMALL_PROFITS_RATE = 0.19
CT_MAIN_RATE = 0.25
CT_MARGINAL_RELIEF_FRACTION = 3 / 200
CT_MARGINAL_RELIEF_RATE = 0.265   # effective marginal rate inside the relief band

# ── Dividends ────────────────────────────────────────────────────────
BASIC_RATE_THRESHOLD = 50_270
DIVIDEND_ALLOWANCE = 500

# Format: tax year -> (basic rate, higher rate)
DIVIDEND_RATES = {
    "2025": (0.0875, 0.3375),
    "2026": (0.1075, 0.3575),
}
DEFAULT_TAX_YEAR = "2025"

# ── Working time ─────────────────────────────────────────────────────
TOTAL_WORKING_DAYS = 253          # 261 weekdays less 8 bank holidays


def available_tax_years() -> list:
    """Tax year identifiers with built-in rate sets, oldest first."""
    return sorted(DIVIDEND_RATES)


def get_tax_year_rates(tax_year: Optional[str] = None) -> TaxYearRates:
    """Get the dividend rate set for a tax year.

    Unrecognised identifiers fall back to DEFAULT_TAX_YEAR.

    Args:
        tax_year: Tax year identifier (e.g., "2025")

    Returns:
        TaxYearRates for the year (or the default year)
    """
    key = str(tax_year) if tax_year is not None else DEFAULT_TAX_YEAR
    if key not in DIVIDEND_RATES:
        logger.debug(f"tax year {tax_year!r} not recognised, using {DEFAULT_TAX_YEAR}")
        key = DEFAULT_TAX_YEAR

    basic, higher = DIVIDEND_RATES[key]
    return TaxYearRates(tax_year=key, basic_dividend_rate=basic, higher_dividend_rate=higher)

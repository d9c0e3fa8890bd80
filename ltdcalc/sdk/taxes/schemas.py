"""Pydantic schemas for tax-year rates and intermediate tax breakdowns.

Rate sets are built-in constants (see rates.py); these schemas give them
typed, immutable access.
"""

from pydantic import BaseModel, ConfigDict, Field


class TaxYearRates(BaseModel):
    """Dividend rates for a single tax year."""
    model_config = ConfigDict(extra="forbid", frozen=True)

    tax_year: str = Field(..., description="Tax year identifier (e.g., '2025' for 2025/26)")
    basic_dividend_rate: float = Field(..., ge=0, le=1, description="Dividend rate in the basic band")
    higher_dividend_rate: float = Field(..., ge=0, le=1, description="Dividend rate in the higher band")


class DividendBreakdown(BaseModel):
    """Split of after-tax profit across the dividend bands.

    Amounts are not clamped: a negative after-tax profit flows through
    as a negative basic band dividend.
    """
    model_config = ConfigDict(extra="forbid", frozen=True)

    basic_band_dividend: float
    basic_band_tax: float
    higher_band_dividend: float
    higher_band_tax: float

    @property
    def total_tax(self) -> float:
        """Total dividend tax across both bands."""
        return self.basic_band_tax + self.higher_band_tax

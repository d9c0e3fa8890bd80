"""Pydantic schemas for ltd-calc data.

Results are frozen: every calculation builds a fresh record and nothing
mutates it afterwards. Profile schemas use extra='forbid' so typos in
profile.yaml cause clear errors rather than silent ignoring.
"""

from typing import Iterator, List, Literal, Optional, Tuple

from pydantic import BaseModel, ConfigDict, Field, field_validator

from .taxes.rates import DEFAULT_TAX_YEAR


IncomeMode = Literal["day_rate", "annual"]


# =============================================================================
# Scenario Schemas
# =============================================================================


class ScenarioInput(BaseModel):
    """Canonical input for one scenario calculation.

    Built by ltdcalc.sdk.inputs from either a day rate or an annual
    turnover. Only turnover, annual_pension, yearly_expenses and tax_year
    reach the engine; the remaining fields record how they were derived.
    """

    model_config = ConfigDict(extra="forbid", frozen=True)

    turnover: float = Field(default=0, description="Annual company turnover")
    annual_pension: float = Field(default=0, description="Employer pension contribution per year")
    yearly_expenses: float = Field(default=0, description="Allowable company expenses per year")
    tax_year: str = Field(default=DEFAULT_TAX_YEAR, description="Tax year identifier")

    income_mode: IncomeMode = Field(default="annual", description="How turnover was entered")
    daily_rate: Optional[float] = Field(default=None, description="Day rate (day_rate mode)")
    holidays_taken: Optional[float] = Field(default=None, description="Personal holidays (day_rate mode)")
    working_days: Optional[float] = Field(default=None, description="Days billed (day_rate mode)")
    monthly_pension: Optional[float] = Field(default=None, description="Pension per month")


class ScenarioResult(BaseModel):
    """Fully derived financial breakdown for one scenario."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    tax_year: str
    salary: float

    # Company
    turnover: float
    pension: float
    employer_ni: float
    yearly_expenses: float
    profit: float
    corporation_tax: float
    after_tax_profit: float

    # Dividends
    basic_band_dividend: float
    basic_band_tax: float
    higher_band_dividend: float
    higher_band_tax: float
    total_dividend_tax: float
    net_dividend: float

    # Personal
    annual_net_cash: float
    monthly_net_cash: float
    total_annual_value: float = Field(..., description="Net cash plus pension")

    # Aggregates
    total_tax_and_ni: float
    effective_tax_rate: Optional[float] = Field(
        default=None, description="Total tax / turnover; None when turnover is not positive",
    )
    corporation_tax_effective_rate: float
    marginal_corporation_tax_rate: float
    corporation_tax_band: Literal["small_profits", "marginal_relief", "main_rate"]
    basic_dividend_rate: float
    higher_dividend_rate: float


class ScenarioSet(BaseModel):
    """Preset pension scenarios plus the caller's custom pension."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    no_pension: ScenarioResult
    pension_18k: ScenarioResult
    pension_21k: ScenarioResult
    pension_24k: ScenarioResult
    custom: ScenarioResult

    def rows(self) -> Iterator[Tuple[str, ScenarioResult]]:
        """Yield (key, result) pairs in display order."""
        for key in ("no_pension", "pension_18k", "pension_21k", "pension_24k", "custom"):
            yield key, getattr(self, key)


# =============================================================================
# Pension Projection Schemas
# =============================================================================


class ProjectionRow(BaseModel):
    """One year of pension pot growth."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    year: int = Field(..., ge=1)
    age: float
    contribution: float
    start_balance: float
    growth: float
    end_balance: float
    is_milestone_row: bool = False


class PensionProjection(BaseModel):
    """Complete pension projection run."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    rows: List[ProjectionRow]
    milestone: float = Field(..., description="Balance that flags the milestone row")
    milestone_year: Optional[int] = None
    milestone_age: Optional[float] = None

    @property
    def final_balance(self) -> float:
        """Pot balance at the end of the last projected year."""
        return self.rows[-1].end_balance if self.rows else 0.0


# =============================================================================
# Optimisation Schemas
# =============================================================================


class Strategy(BaseModel):
    """Estimated annual saving for one tax-efficiency strategy."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    id: str
    title: str
    description: str
    saving_label: str
    estimated_annual_saving: float
    applicable: bool = Field(default=False, description="Can be applied to the calculator inputs")
    applied_pension_target: Optional[float] = Field(
        default=None, description="Total annual pension once applied",
    )


# =============================================================================
# Profile Schemas
# =============================================================================


class PensionDefaults(BaseModel):
    """Pension projection defaults from profile.yaml."""

    model_config = ConfigDict(extra="forbid")

    start_balance: float = Field(default=0, description="Current pension pot")
    current_age: float = Field(default=0, ge=0, description="Age at the start of year 1")
    growth_rate_percent: float = Field(default=5, description="Annual growth, percent")


class ProfileDefaults(BaseModel):
    """Default calculator inputs stored in profile.yaml."""

    model_config = ConfigDict(extra="forbid")

    income_mode: IncomeMode = "day_rate"
    tax_year: str = DEFAULT_TAX_YEAR

    daily_rate: float = 0
    holidays_taken: float = 0
    monthly_pension: float = 0

    annual_turnover: float = 0
    annual_pension: float = 0

    yearly_expenses: float = 0

    pension: PensionDefaults = Field(default_factory=PensionDefaults)

    @field_validator("tax_year", mode="before")
    @classmethod
    def tax_year_as_string(cls, value):
        """YAML reads `tax_year: 2026` as an int and a blank `tax_year:` as None."""
        if value is None:
            return DEFAULT_TAX_YEAR
        return str(value)

"""Build ScenarioInput records from raw calculator inputs.

A scenario can be entered two ways: as a day rate with holidays and a
monthly pension, or as an annual turnover with an annual pension. Both
constructors converge on the same ScenarioInput. Raw values may come from
a form, a CLI option or a YAML profile, so every money value passes
through coerce_amount() first.
"""

import logging
import math
from typing import Any

from .schemas import ScenarioInput
from .taxes.rates import DEFAULT_TAX_YEAR, TOTAL_WORKING_DAYS

logger = logging.getLogger(__name__)


def coerce_amount(value: Any) -> float:
    """Convert a raw input to a number, treating anything unusable as 0.

    Examples:
        coerce_amount("450")   # -> 450.0
        coerce_amount("")      # -> 0.0
        coerce_amount(None)    # -> 0.0
        coerce_amount("abc")   # -> 0.0
    """
    if value is None or isinstance(value, bool):
        return 0.0
    if isinstance(value, str):
        value = value.strip().replace(",", "").lstrip("£")
        if not value:
            return 0.0
    try:
        amount = float(value)
    except (TypeError, ValueError):
        logger.debug(f"non-numeric input {value!r} treated as 0")
        return 0.0
    if not math.isfinite(amount):
        return 0.0
    return amount


def round_pounds(amount: float) -> int:
    """Round to whole pounds with halves rounded up (36294.5 -> 36295)."""
    return int(math.floor(amount + 0.5))


def working_days(holidays_taken: Any) -> float:
    """Billable days in the year after personal holidays."""
    return max(0, TOTAL_WORKING_DAYS - coerce_amount(holidays_taken))


def from_day_rate(
    daily_rate: Any,
    holidays_taken: Any = 0,
    monthly_pension: Any = 0,
    yearly_expenses: Any = 0,
    tax_year: str = DEFAULT_TAX_YEAR,
) -> ScenarioInput:
    """Build a scenario from a contractor day rate.

    Args:
        daily_rate: Rate charged per working day
        holidays_taken: Personal holidays on top of bank holidays
        monthly_pension: Employer pension contribution per month
        yearly_expenses: Company expenses per year
        tax_year: Tax year identifier

    Returns:
        ScenarioInput with turnover = daily_rate * working days
    """
    rate = coerce_amount(daily_rate)
    holidays = coerce_amount(holidays_taken)
    days = working_days(holidays)
    monthly = coerce_amount(monthly_pension)

    return ScenarioInput(
        turnover=rate * days,
        annual_pension=monthly * 12,
        yearly_expenses=coerce_amount(yearly_expenses),
        tax_year=str(tax_year or DEFAULT_TAX_YEAR),
        income_mode="day_rate",
        daily_rate=rate,
        holidays_taken=holidays,
        working_days=days,
        monthly_pension=monthly,
    )


def from_annual_turnover(
    annual_turnover: Any,
    annual_pension: Any = 0,
    yearly_expenses: Any = 0,
    tax_year: str = DEFAULT_TAX_YEAR,
) -> ScenarioInput:
    """Build a scenario from an annual turnover figure."""
    pension = coerce_amount(annual_pension)

    return ScenarioInput(
        turnover=coerce_amount(annual_turnover),
        annual_pension=pension,
        yearly_expenses=coerce_amount(yearly_expenses),
        tax_year=str(tax_year or DEFAULT_TAX_YEAR),
        income_mode="annual",
        monthly_pension=round_pounds(pension / 12),
    )


def apply_pension_target(scenario_input: ScenarioInput, target: float) -> ScenarioInput:
    """Return a copy of the input with a strategy's pension target applied.

    Day-rate inputs hold the pension per month, so the target is rounded
    to whole pounds per month; annual inputs round the annual figure.
    """
    if scenario_input.income_mode == "day_rate":
        monthly = round_pounds(target / 12)
        return scenario_input.model_copy(update={
            "monthly_pension": monthly,
            "annual_pension": monthly * 12,
        })

    annual = round_pounds(target)
    return scenario_input.model_copy(update={
        "annual_pension": annual,
        "monthly_pension": round_pounds(annual / 12),
    })

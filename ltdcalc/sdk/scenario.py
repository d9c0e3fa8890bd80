"""Scenario engine: turnover to take-home for a one-person company.

The director takes a fixed salary at the personal allowance; the company
pays employer NI on it, an employer pension contribution and expenses,
then corporation tax on what is left. All after-tax profit is paid out as
dividends.

Order of calculation:
    employer NI -> profit -> corporation tax -> after-tax profit
    -> dividend split -> net cash -> aggregate rates
"""

import logging

from .schemas import ScenarioInput, ScenarioResult, ScenarioSet
from .taxes import (
    DIRECTOR_SALARY,
    calculate_corporation_tax,
    calculate_dividend_tax,
    calculate_employer_ni,
    corporation_tax_band,
    corporation_tax_effective_rate,
    get_tax_year_rates,
    marginal_corporation_tax_rate,
)

logger = logging.getLogger(__name__)

# Annual pension figures compared against the custom value
PENSION_PRESETS = {
    "no_pension": 0,
    "pension_18k": 18_000,
    "pension_21k": 21_000,
    "pension_24k": 24_000,
}


def run_scenario(
    turnover: float,
    annual_pension: float,
    yearly_expenses: float,
    tax_year: str,
) -> ScenarioResult:
    """Calculate the full financial breakdown for one scenario.

    Args:
        turnover: Annual company turnover
        annual_pension: Employer pension contribution
        yearly_expenses: Company expenses
        tax_year: Tax year identifier (unknown years use the default rates)

    Returns:
        ScenarioResult with company, dividend and personal figures
    """
    salary = DIRECTOR_SALARY
    rates = get_tax_year_rates(tax_year)

    employer_ni = calculate_employer_ni(salary)
    profit = turnover - salary - employer_ni - annual_pension - yearly_expenses
    corporation_tax = calculate_corporation_tax(profit)
    after_tax_profit = profit - corporation_tax

    dividends = calculate_dividend_tax(after_tax_profit, rates, salary=salary)
    total_dividend_tax = dividends.total_tax
    net_dividend = after_tax_profit - total_dividend_tax

    annual_net_cash = salary + net_dividend
    total_tax_and_ni = corporation_tax + employer_ni + total_dividend_tax
    effective_tax_rate = total_tax_and_ni / turnover if turnover > 0 else None

    band = corporation_tax_band(profit)
    logger.debug(
        f"scenario turnover={turnover:.2f} pension={annual_pension:.2f}: "
        f"profit={profit:.2f} band={band} ct={corporation_tax:.2f}"
    )

    return ScenarioResult(
        tax_year=rates.tax_year,
        salary=salary,
        turnover=turnover,
        pension=annual_pension,
        employer_ni=employer_ni,
        yearly_expenses=yearly_expenses,
        profit=profit,
        corporation_tax=corporation_tax,
        after_tax_profit=after_tax_profit,
        basic_band_dividend=dividends.basic_band_dividend,
        basic_band_tax=dividends.basic_band_tax,
        higher_band_dividend=dividends.higher_band_dividend,
        higher_band_tax=dividends.higher_band_tax,
        total_dividend_tax=total_dividend_tax,
        net_dividend=net_dividend,
        annual_net_cash=annual_net_cash,
        monthly_net_cash=annual_net_cash / 12,
        total_annual_value=annual_net_cash + annual_pension,
        total_tax_and_ni=total_tax_and_ni,
        effective_tax_rate=effective_tax_rate,
        corporation_tax_effective_rate=corporation_tax_effective_rate(profit),
        marginal_corporation_tax_rate=marginal_corporation_tax_rate(profit),
        corporation_tax_band=band,
        basic_dividend_rate=rates.basic_dividend_rate,
        higher_dividend_rate=rates.higher_dividend_rate,
    )


def run_scenario_set(
    turnover: float,
    custom_pension: float,
    yearly_expenses: float,
    tax_year: str,
) -> ScenarioSet:
    """Run the preset pension scenarios and the custom one.

    All five share turnover, expenses and tax year; only the pension
    differs. No scenario depends on another.
    """
    results = {
        key: run_scenario(turnover, pension, yearly_expenses, tax_year)
        for key, pension in PENSION_PRESETS.items()
    }
    results["custom"] = run_scenario(turnover, custom_pension, yearly_expenses, tax_year)
    return ScenarioSet(**results)


def run_scenario_input(scenario_input: ScenarioInput) -> ScenarioResult:
    """Run a single scenario from a ScenarioInput."""
    return run_scenario(
        scenario_input.turnover,
        scenario_input.annual_pension,
        scenario_input.yearly_expenses,
        scenario_input.tax_year,
    )


def run_scenario_set_for(scenario_input: ScenarioInput) -> ScenarioSet:
    """Run the preset comparison using the input's pension as the custom value."""
    return run_scenario_set(
        scenario_input.turnover,
        scenario_input.annual_pension,
        scenario_input.yearly_expenses,
        scenario_input.tax_year,
    )

"""ltd-calc MCP Server - FastMCP implementation for the calculation engine."""

import logging
from typing import Any

from mcp.server.fastmcp import FastMCP
from pydantic import Field

from ltdcalc.sdk import (
    from_annual_turnover,
    from_day_rate,
    optimise,
    project_pension as sdk_project_pension,
    run_scenario_input,
    run_scenario_set_for,
)

logger = logging.getLogger(__name__)

# Initialize FastMCP server
mcp = FastMCP("ltd-calc")


def _build_input(
    annual_turnover: float | None,
    annual_pension: float | None,
    daily_rate: float | None,
    holidays_taken: float | None,
    monthly_pension: float | None,
    yearly_expenses: float | None,
    tax_year: str,
):
    """Pick the input constructor from which figures were supplied."""
    if daily_rate is not None:
        return from_day_rate(daily_rate, holidays_taken, monthly_pension, yearly_expenses, tax_year)
    return from_annual_turnover(annual_turnover, annual_pension, yearly_expenses, tax_year)


# --- Tools ---

@mcp.tool()
async def calculate_scenario(
    annual_turnover: float | None = Field(default=None, description="Annual turnover (annual mode)"),
    annual_pension: float | None = Field(default=None, description="Employer pension per year (annual mode)"),
    daily_rate: float | None = Field(default=None, description="Day rate; if given, day-rate mode is used"),
    holidays_taken: float | None = Field(default=None, description="Personal holidays (day-rate mode)"),
    monthly_pension: float | None = Field(default=None, description="Employer pension per month (day-rate mode)"),
    yearly_expenses: float | None = Field(default=None, description="Company expenses per year"),
    tax_year: str = Field(default="2025", description="Tax year ('2025' or '2026')"),
) -> dict[str, Any]:
    """Calculate profit, corporation tax, dividend tax and net cash for one scenario."""
    try:
        scenario_input = _build_input(
            annual_turnover, annual_pension, daily_rate, holidays_taken,
            monthly_pension, yearly_expenses, tax_year,
        )
        return {
            "input": scenario_input.model_dump(),
            "result": run_scenario_input(scenario_input).model_dump(),
        }
    except Exception as e:
        logger.error(f"Error calculating scenario: {e}")
        return {"error": str(e), "result": None}


@mcp.tool()
async def compare_scenarios(
    annual_turnover: float | None = Field(default=None, description="Annual turnover (annual mode)"),
    annual_pension: float | None = Field(default=None, description="Custom pension per year (annual mode)"),
    daily_rate: float | None = Field(default=None, description="Day rate; if given, day-rate mode is used"),
    holidays_taken: float | None = Field(default=None, description="Personal holidays (day-rate mode)"),
    monthly_pension: float | None = Field(default=None, description="Custom pension per month (day-rate mode)"),
    yearly_expenses: float | None = Field(default=None, description="Company expenses per year"),
    tax_year: str = Field(default="2025", description="Tax year ('2025' or '2026')"),
) -> dict[str, Any]:
    """Compare no pension, £18k, £21k and £24k pension against the custom pension."""
    try:
        scenario_input = _build_input(
            annual_turnover, annual_pension, daily_rate, holidays_taken,
            monthly_pension, yearly_expenses, tax_year,
        )
        return {
            "input": scenario_input.model_dump(),
            "scenarios": run_scenario_set_for(scenario_input).model_dump(),
        }
    except Exception as e:
        logger.error(f"Error comparing scenarios: {e}")
        return {"error": str(e), "scenarios": None}


@mcp.tool()
async def project_pension(
    annual_contribution: float = Field(description="Pension contribution added each year"),
    start_balance: float = Field(default=0, description="Current pension pot"),
    growth_rate_percent: float = Field(default=5, description="Annual growth in percent"),
    start_age: float = Field(default=0, description="Current age"),
) -> dict[str, Any]:
    """Project the pension pot over 25 years and report when it first reaches £1m."""
    try:
        projection = sdk_project_pension(start_balance, annual_contribution, growth_rate_percent, start_age)
        payload = projection.model_dump()
        payload["final_balance"] = projection.final_balance
        return payload
    except Exception as e:
        logger.error(f"Error projecting pension: {e}")
        return {"error": str(e), "rows": []}


@mcp.tool()
async def optimise_tax(
    annual_turnover: float | None = Field(default=None, description="Annual turnover (annual mode)"),
    annual_pension: float | None = Field(default=None, description="Employer pension per year (annual mode)"),
    daily_rate: float | None = Field(default=None, description="Day rate; if given, day-rate mode is used"),
    holidays_taken: float | None = Field(default=None, description="Personal holidays (day-rate mode)"),
    monthly_pension: float | None = Field(default=None, description="Employer pension per month (day-rate mode)"),
    yearly_expenses: float | None = Field(default=None, description="Company expenses per year"),
    tax_year: str = Field(default="2025", description="Tax year ('2025' or '2026')"),
) -> dict[str, Any]:
    """Estimate annual savings from five tax-efficiency strategies for one scenario."""
    try:
        scenario_input = _build_input(
            annual_turnover, annual_pension, daily_rate, holidays_taken,
            monthly_pension, yearly_expenses, tax_year,
        )
        result = run_scenario_input(scenario_input)
        return {
            "marginal_corporation_tax_rate": result.marginal_corporation_tax_rate,
            "strategies": [s.model_dump() for s in optimise(result)],
        }
    except Exception as e:
        logger.error(f"Error estimating strategies: {e}")
        return {"error": str(e), "strategies": []}


# --- Server Entry Point ---

def run_server():
    """Run the MCP server in stdio mode."""
    mcp.run(transport="stdio")


if __name__ == "__main__":
    run_server()

"""Tests for the MCP tool functions.

Tools are called directly as coroutines; every argument is passed
explicitly because the declared defaults are pydantic Field objects.
"""

import asyncio

import pytest

pytest.importorskip("mcp")

from ltdcalc.mcp import server  # noqa: E402


def run(coro):
    return asyncio.run(coro)


def scenario_args(**overrides):
    args = {
        "annual_turnover": None,
        "annual_pension": None,
        "daily_rate": None,
        "holidays_taken": None,
        "monthly_pension": None,
        "yearly_expenses": None,
        "tax_year": "2025",
    }
    args.update(overrides)
    return args


class TestScenarioTools:
    def test_calculate_scenario(self):
        payload = run(server.calculate_scenario(**scenario_args(annual_turnover=100_000)))
        assert payload["result"]["profit"] == pytest.approx(86_294.5)
        assert payload["input"]["income_mode"] == "annual"

    def test_day_rate_takes_precedence(self):
        payload = run(server.calculate_scenario(**scenario_args(annual_turnover=1, daily_rate=500)))
        assert payload["input"]["income_mode"] == "day_rate"
        assert payload["result"]["turnover"] == 126_500

    def test_compare_scenarios(self):
        payload = run(server.compare_scenarios(**scenario_args(annual_turnover=100_000, annual_pension=30_000)))
        assert payload["scenarios"]["custom"]["pension"] == 30_000

    def test_optimise_tax(self):
        payload = run(server.optimise_tax(**scenario_args(annual_turnover=100_000)))
        assert payload["marginal_corporation_tax_rate"] == 0.265
        assert payload["strategies"][0]["applied_pension_target"] == pytest.approx(36_294.5)


class TestProjectionTool:
    def test_project_pension(self):
        payload = run(server.project_pension(
            annual_contribution=24_000, start_balance=0, growth_rate_percent=5, start_age=30,
        ))
        assert payload["milestone_year"] == 24
        assert payload["final_balance"] == payload["rows"][-1]["end_balance"]

"""Unit tests for building scenario inputs from raw values."""

import math

import pytest

from ltdcalc.sdk import (
    apply_pension_target,
    coerce_amount,
    from_annual_turnover,
    from_day_rate,
    working_days,
)
from ltdcalc.sdk.inputs import round_pounds


class TestCoerceAmount:
    """Unusable values become 0 instead of raising."""

    @pytest.mark.parametrize("raw,expected", [
        ("450", 450.0),
        (" 450 ", 450.0),
        ("1,250.50", 1_250.5),
        ("£1,250.50", 1_250.5),
        (12, 12.0),
        (-3.5, -3.5),
        ("-200", -200.0),
    ])
    def test_numeric(self, raw, expected):
        assert coerce_amount(raw) == expected

    @pytest.mark.parametrize("raw", [None, "", "   ", "abc", "12abc", [], {}, True, False])
    def test_unusable_is_zero(self, raw):
        assert coerce_amount(raw) == 0.0

    @pytest.mark.parametrize("raw", [math.inf, -math.inf, math.nan, "inf", "nan"])
    def test_non_finite_is_zero(self, raw):
        assert coerce_amount(raw) == 0.0


class TestRoundPounds:
    @pytest.mark.parametrize("amount,expected", [
        (36_294.5, 36_295),
        (36_294.49, 36_294),
        (3_024.5, 3_025),
        (0.5, 1),
        (0, 0),
        (-0.5, 0),
    ])
    def test_halves_round_up(self, amount, expected):
        assert round_pounds(amount) == expected


class TestWorkingDays:
    def test_no_holidays(self):
        assert working_days(0) == 253
        assert working_days("") == 253

    def test_holidays_subtracted(self):
        assert working_days(23) == 230

    def test_never_negative(self):
        assert working_days(300) == 0


class TestDayRateInput:
    """Day-rate mode: turnover from rate x billable days."""

    def test_turnover(self):
        scenario_input = from_day_rate(500, 23, 0, 0, "2025")
        assert scenario_input.income_mode == "day_rate"
        assert scenario_input.working_days == 230
        assert scenario_input.turnover == 115_000

    def test_monthly_pension_annualised(self):
        scenario_input = from_day_rate(500, 23, 1_500, 2_000, "2026")
        assert scenario_input.annual_pension == 18_000
        assert scenario_input.monthly_pension == 1_500
        assert scenario_input.yearly_expenses == 2_000
        assert scenario_input.tax_year == "2026"

    def test_blank_form_values(self):
        scenario_input = from_day_rate("", "", "", "")
        assert scenario_input.turnover == 0
        assert scenario_input.working_days == 253
        assert scenario_input.annual_pension == 0
        assert scenario_input.tax_year == "2025"

    def test_too_many_holidays(self):
        assert from_day_rate(600, 400).turnover == 0


class TestAnnualInput:
    """Annual mode: turnover and pension entered directly."""

    def test_values(self):
        scenario_input = from_annual_turnover("100,000", 18_000, 500, "2025")
        assert scenario_input.income_mode == "annual"
        assert scenario_input.turnover == 100_000
        assert scenario_input.annual_pension == 18_000
        assert scenario_input.monthly_pension == 1_500
        assert scenario_input.daily_rate is None
        assert scenario_input.working_days is None

    def test_integer_tax_year(self):
        assert from_annual_turnover(1, tax_year=2026).tax_year == "2026"


class TestApplyPensionTarget:
    """Writing a strategy's pension target back into the inputs."""

    def test_annual_mode_rounds_annual_figure(self):
        scenario_input = from_annual_turnover(100_000, 0, 0, "2025")
        applied = apply_pension_target(scenario_input, 36_294.5)
        assert applied.annual_pension == 36_295
        assert applied.monthly_pension == 3_025
        assert applied.turnover == 100_000

    def test_day_rate_mode_rounds_monthly_figure(self):
        scenario_input = from_day_rate(500, 23, 0, 0, "2025")
        applied = apply_pension_target(scenario_input, 36_294.5)
        assert applied.monthly_pension == 3_025
        assert applied.annual_pension == 36_300
        assert applied.daily_rate == 500
        assert applied.income_mode == "day_rate"

    def test_input_not_mutated(self):
        scenario_input = from_annual_turnover(100_000, 1_000, 0, "2025")
        apply_pension_target(scenario_input, 20_000)
        assert scenario_input.annual_pension == 1_000

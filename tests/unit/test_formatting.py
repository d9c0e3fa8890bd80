"""Unit tests for terminal number formatting and strategy card text."""

import io
import math

import pytest
from rich.console import Console

from ltdcalc.cli.renderers.formatting import format_currency, format_percentage, format_thousands
from ltdcalc.cli.renderers.report_renderer import corporation_tax_label, render_strategies
from ltdcalc.sdk import optimise, run_scenario


class TestFormatCurrency:
    @pytest.mark.parametrize("value,expected", [
        (0, "£0"),
        (19_118.0425, "£19,118"),
        (36_294.5, "£36,295"),
        (1_000_000, "£1,000,000"),
        (-3_705.5, "-£3,706"),
        (-0.4, "£0"),
    ])
    def test_whole_pounds(self, value, expected):
        assert format_currency(value) == expected

    @pytest.mark.parametrize("value", [None, math.nan, math.inf])
    def test_unavailable(self, value):
        assert format_currency(value) == "–"


class TestFormatPercentage:
    def test_one_place(self):
        assert format_percentage(0.3345684690625) == "33.5%"

    def test_two_places(self):
        assert format_percentage(0.0875, places=2) == "8.75%"

    def test_not_available(self):
        assert format_percentage(None) == "n/a"


def test_format_thousands():
    assert format_thousands(36_294.5) == "£36.3k"


class TestCorporationTaxLabel:
    """Label follows the band the profit falls in."""

    def test_small_profits(self):
        assert corporation_tax_label(run_scenario(60_000, 0, 0, "2025")) == "Corporation Tax @ 19.0%"

    def test_marginal_relief(self):
        label = corporation_tax_label(run_scenario(100_000, 0, 0, "2025"))
        assert label == "Corporation Tax (Marginal Relief) @ 22.15%"

    def test_main_rate(self):
        assert corporation_tax_label(run_scenario(500_000, 0, 0, "2025")) == "Corporation Tax @ 25%"


class TestStrategyText:
    """Strategy cards built from the scenario's marginal rate."""

    def render(self, turnover):
        result = run_scenario(turnover, 0, 0, "2025")
        console = Console(file=io.StringIO(), record=True, width=200)
        render_strategies(console, result, optimise(result))
        return console.export_text()

    def test_home_rent_quotes_flat_rate_saving(self):
        """£312 flat rate at 26.5% saves £83 a year."""
        assert "(saves £83/yr)" in self.render(100_000)

    def test_home_rent_saving_at_small_profits_rate(self):
        """£312 at 19% saves £59 a year."""
        assert "(saves £59/yr)" in self.render(60_000)

    def test_pension_text_quotes_marginal_rate(self):
        assert "avoids the 26.5% marginal tax" in self.render(100_000)

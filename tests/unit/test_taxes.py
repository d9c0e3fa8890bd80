"""Unit tests for the company tax calculators.

Covers employer NI, corporation tax banding with marginal relief,
the marginal rate classifier, dividend band splitting, and tax-year
rate lookup.
"""

import pytest

from ltdcalc.sdk.taxes import (
    DIRECTOR_SALARY,
    TaxYearRates,
    available_tax_years,
    basic_band_capacity,
    calculate_corporation_tax,
    calculate_dividend_tax,
    calculate_employer_ni,
    corporation_tax_band,
    corporation_tax_effective_rate,
    get_tax_year_rates,
    marginal_corporation_tax_rate,
)


class TestEmployerNI:
    """Employer NI on the director's salary."""

    @pytest.mark.parametrize("salary", [0, 1, 4_999.99, 5_000])
    def test_zero_at_or_below_threshold(self, salary):
        assert calculate_employer_ni(salary) == 0

    def test_above_threshold(self):
        """£20,000 salary: (20,000 - 5,000) x 15% = £2,250."""
        assert calculate_employer_ni(20_000) == pytest.approx(2_250)

    def test_director_salary(self):
        """Standard £12,570 salary costs £1,135.50."""
        assert calculate_employer_ni(DIRECTOR_SALARY) == pytest.approx(1_135.5)


class TestCorporationTax:
    """Corporation tax bands and marginal relief."""

    @pytest.mark.parametrize("profit", [-10_000, -0.01, 0])
    def test_no_tax_on_loss(self, profit):
        assert calculate_corporation_tax(profit) == 0

    @pytest.mark.parametrize("profit", [1, 10_000, 37_500.5, 50_000])
    def test_small_profits_rate(self, profit):
        assert calculate_corporation_tax(profit) == pytest.approx(profit * 0.19)

    @pytest.mark.parametrize("profit", [250_000, 250_000.01, 1_000_000])
    def test_main_rate(self, profit):
        assert calculate_corporation_tax(profit) == pytest.approx(profit * 0.25)

    def test_marginal_relief_formula(self):
        """£100,000: 25,000 - 3/200 x 150,000 = £22,750."""
        assert calculate_corporation_tax(100_000) == pytest.approx(22_750)

    def test_continuous_at_lower_limit(self):
        """Both sides of £50,000 meet at £9,500."""
        assert calculate_corporation_tax(50_000) == pytest.approx(9_500)
        assert calculate_corporation_tax(50_000.0001) == pytest.approx(9_500, abs=0.01)

    def test_continuous_at_upper_limit(self):
        """Both sides of £250,000 meet at £62,500."""
        assert calculate_corporation_tax(250_000) == 62_500
        assert calculate_corporation_tax(249_999.9999) == pytest.approx(62_500, abs=0.01)

    def test_monotonic_across_bands(self):
        """More profit never means less tax."""
        profits = range(0, 300_001, 2_500)
        taxes = [calculate_corporation_tax(p) for p in profits]
        assert taxes == sorted(taxes)


class TestCorporationTaxRates:
    """Effective rate, band classification and marginal rate."""

    def test_effective_rate_zero_without_profit(self):
        assert corporation_tax_effective_rate(0) == 0.0
        assert corporation_tax_effective_rate(-500) == 0.0

    def test_effective_rate_inside_relief_band(self):
        assert corporation_tax_effective_rate(100_000) == pytest.approx(0.2275)

    @pytest.mark.parametrize("profit,band,rate", [
        (-1, "small_profits", 0.19),
        (0, "small_profits", 0.19),
        (50_000, "small_profits", 0.19),
        (50_000.01, "marginal_relief", 0.265),
        (150_000, "marginal_relief", 0.265),
        (249_999.99, "marginal_relief", 0.265),
        (250_000, "main_rate", 0.25),
        (400_000, "main_rate", 0.25),
    ])
    def test_band_and_marginal_rate(self, profit, band, rate):
        assert corporation_tax_band(profit) == band
        assert marginal_corporation_tax_rate(profit) == rate


class TestTaxYearRates:
    """Dividend rate table lookup."""

    def test_available_years(self):
        assert available_tax_years() == ["2025", "2026"]

    def test_2025_rates(self):
        rates = get_tax_year_rates("2025")
        assert rates.basic_dividend_rate == 0.0875
        assert rates.higher_dividend_rate == 0.3375

    def test_2026_rates(self):
        rates = get_tax_year_rates("2026")
        assert rates.tax_year == "2026"
        assert rates.basic_dividend_rate == 0.1075
        assert rates.higher_dividend_rate == 0.3575

    @pytest.mark.parametrize("tax_year", ["2019", "", "next year", None])
    def test_unknown_year_falls_back_to_default(self, tax_year):
        assert get_tax_year_rates(tax_year) == get_tax_year_rates("2025")

    def test_integer_year_accepted(self):
        assert get_tax_year_rates(2026).tax_year == "2026"


class TestDividendTax:
    """Dividend split across basic and higher bands."""

    @pytest.fixture
    def rates(self):
        return TaxYearRates(tax_year="2025", basic_dividend_rate=0.0875, higher_dividend_rate=0.3375)

    def test_basic_capacity_from_constants(self):
        assert basic_band_capacity() == 37_700
        assert basic_band_capacity(60_000) == 0

    def test_all_in_basic_band(self, rates):
        result = calculate_dividend_tax(20_000, rates)
        assert result.basic_band_dividend == 20_000
        assert result.basic_band_tax == pytest.approx(19_500 * 0.0875)
        assert result.higher_band_dividend == 0
        assert result.higher_band_tax == 0

    def test_allowance_covers_small_dividend(self, rates):
        result = calculate_dividend_tax(400, rates)
        assert result.basic_band_tax == 0
        assert result.total_tax == 0

    def test_spills_into_higher_band(self, rates):
        result = calculate_dividend_tax(67_176.4575, rates)
        assert result.basic_band_dividend == 37_700
        assert result.basic_band_tax == pytest.approx(3_255)
        assert result.higher_band_dividend == pytest.approx(29_476.4575)
        assert result.higher_band_tax == pytest.approx(29_476.4575 * 0.3375)
        assert result.total_tax == pytest.approx(result.basic_band_tax + result.higher_band_tax)

    @pytest.mark.parametrize("after_tax_profit", [0, 1, 500, 37_700, 37_700.01, 90_000, 1e6])
    def test_bands_sum_to_after_tax_profit(self, rates, after_tax_profit):
        result = calculate_dividend_tax(after_tax_profit, rates)
        total = result.basic_band_dividend + result.higher_band_dividend
        assert total == pytest.approx(after_tax_profit)

    def test_negative_profit_not_clamped(self, rates):
        """A loss flows through the basic band with no tax and no higher band."""
        result = calculate_dividend_tax(-3_705.5, rates)
        assert result.basic_band_dividend == -3_705.5
        assert result.basic_band_tax == 0
        assert result.higher_band_dividend == 0
        assert result.higher_band_tax == 0

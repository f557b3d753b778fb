"""
Unit Tests for Display Formatting
"""

import pytest

from comp_engine.calculators.simple import calculate_sdr_commission, calculate_simple_commission
from comp_engine.formatting import FormatConfig, format_currency, format_percent, to_money


class TestToMoney:
    """Test the cents rounding utility."""

    def test_preserves_exact_cents(self):
        assert to_money(123.45) == 123.45

    def test_truncates_extra_precision(self):
        assert to_money(123.456789) == 123.46


class TestFormatCurrency:
    """Whole-dollar USD strings."""

    @pytest.mark.parametrize(
        "amount, expected",
        [
            (0, "$0"),
            (18750, "$18,750"),
            (1000000, "$1,000,000"),
            (1234.5, "$1,235"),
            (1234.49, "$1,234"),
            (-80.4, "-$80"),
            (-2500, "-$2,500"),
        ],
    )
    def test_whole_dollars(self, amount, expected):
        assert format_currency(amount) == expected

    def test_beyond_decimal_context_precision(self):
        """Values with more than 28 digits still round to whole dollars."""
        assert format_currency(1e30) == "$1," + ",".join(["000"] * 10)

    def test_non_finite_amounts(self):
        assert format_currency(float("inf")) == "$inf"
        assert format_currency(float("-inf")) == "-$inf"
        assert format_currency(float("nan")) == "$nan"

    def test_custom_symbol(self):
        assert format_currency(1500, FormatConfig(currency_symbol="€")) == "€1,500"


class TestFormatPercent:
    """Percent strings with configurable decimals."""

    def test_default_one_decimal(self):
        assert format_percent(112.5) == "112.5%"
        assert format_percent(150) == "150.0%"

    def test_explicit_decimals(self):
        assert format_percent(87.456, 2) == "87.46%"
        assert format_percent(87.456, 0) == "87%"

    def test_decimals_from_config(self):
        assert format_percent(99.25, config=FormatConfig(percent_decimals=2)) == "99.25%"

    def test_explicit_decimals_override_config(self):
        assert format_percent(99.25, 0, FormatConfig(percent_decimals=3)) == "99%"


class TestSimpleCommission:
    """Flat-rate and SDR plans."""

    def test_simple_commission(self):
        assert calculate_simple_commission(150000, 8) == pytest.approx(12000)

    def test_simple_commission_zero_rate(self):
        assert calculate_simple_commission(150000, 0) == 0

    def test_sdr_commission(self):
        assert calculate_sdr_commission(12, 250) == 3000

    def test_sdr_commission_no_opportunities(self):
        assert calculate_sdr_commission(0, 250) == 0

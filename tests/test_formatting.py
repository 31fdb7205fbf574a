"""Tests for formatting utilities."""

import pytest

from utils.formatting import format_decimal, format_kda, format_percent, format_whole


class TestNumbers:
    """Whole and decimal numbers."""

    def test_format_whole_adds_separators(self):
        assert format_whole(42_100) == "42,100"

    def test_format_whole_rounds(self):
        assert format_whole(999.6) == "1,000"
        assert format_whole(0) == "0"

    @pytest.mark.parametrize(
        "value,places,expected", [(4.25, 1, "4.2"), (4.26, 1, "4.3"), (3, 2, "3.00"), (7.4, 0, "7")]
    )
    def test_format_decimal(self, value, places, expected):
        assert format_decimal(value, places) == expected


class TestRates:
    """Percentages and K/D/A lines."""

    @pytest.mark.parametrize("rate,expected", [(0.0, "0%"), (0.5, "50%"), (1.0, "100%")])
    def test_format_percent(self, rate, expected):
        assert format_percent(rate) == expected

    def test_format_kda(self):
        assert format_kda(8, 2, 7.5) == "8.0 / 2.0 / 7.5"

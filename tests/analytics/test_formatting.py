"""Tests for display formatting helpers."""

import pytest

from src.analytics.formatting import format_currency, format_date_range


@pytest.mark.parametrize(
    "amount,currency,places,expected",
    [
        (1234.5, "USD", 2, "$1,234.50"),
        (165, "usd", 2, "$165.00"),
        (1851.85, "EUR", 0, "€1,852"),
        (-5, "EUR", 0, "-€5"),
        (12.5, "CAD", 2, "CAD 12.50"),
        (0, "GBP", 0, "£0"),
    ],
)
def test_format_currency(amount, currency, places, expected):
    assert format_currency(amount, currency, places=places) == expected


def test_format_date_range():
    assert format_date_range("last-month") == "last month"
    assert format_date_range("last-quarter") == "last quarter"

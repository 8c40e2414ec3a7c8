"""
Tests for price formatting on product cards (en-IN rupees).
"""

from decimal import Decimal

import pytest

from recommender.utils.formatting import format_inr, group_en_in
from recommender.utils.logging import truncate_query


@pytest.mark.parametrize("price,expected", [
    (0, "₹0"),
    (999, "₹999"),
    (1999, "₹1,999"),
    (54990, "₹54,990"),
    (124990, "₹1,24,990"),
    (12345678, "₹1,23,45,678"),
    (499.5, "₹499.5"),
    (1499.99, "₹1,499.99"),
    (10.0, "₹10"),
    (2.12345, "₹2.123"),
    (Decimal("60000.00"), "₹60,000"),
])
def test_format_inr(price, expected):
    assert format_inr(price) == expected


def test_group_en_in_short_values_untouched():
    assert group_en_in("123") == "123"


def test_group_en_in_odd_head():
    assert group_en_in("1234567") == "12,34,567"


def test_truncate_query():
    assert truncate_query("short") == "short"
    assert truncate_query("x" * 60) == "x" * 50 + "..."

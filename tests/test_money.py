"""Tests for money helpers"""
from decimal import Decimal

import pytest

from stitches.services.money import format_amount, format_money, round_display, to_decimal, to_float


@pytest.mark.parametrize(
    "value,expected",
    [
        (0, "Ksh 0"),
        (750, "Ksh 750"),
        (7500, "Ksh 7,500"),
        (Decimal("1234567"), "Ksh 1,234,567"),
        ("1500.5", "Ksh 1,501"),
        (999.4, "Ksh 999"),
    ],
)
def test_format_money(value, expected):
    assert format_money(value) == expected


def test_format_money_custom_label():
    assert format_money(1500, label="KES") == "KES 1,500"


def test_format_amount_has_no_label():
    assert format_amount(12000) == "12,000"


def test_round_display_half_up():
    assert round_display(Decimal("2.5")) == 3
    assert round_display(Decimal("3.5")) == 4


def test_to_decimal():
    assert to_decimal(None) == Decimal("0")
    assert to_decimal("abc") == Decimal("0")
    assert to_decimal(0.1) == Decimal("0.1")
    assert to_decimal(Decimal("5")) == Decimal("5")


def test_to_float():
    assert to_float(Decimal("1500")) == 1500.0

"""Tests for Brazilian display formatters."""

from datetime import date
from decimal import Decimal

from portfolio_tracker.utils.formatters import (
    format_currency_brl,
    format_date_br,
    format_date_long_br,
    format_number_br,
    format_percent_br,
)


def test_format_currency_brl() -> None:
    assert format_currency_brl(Decimal("1234.56")) == "R$ 1.234,56"
    assert format_currency_brl(Decimal("-0.5")) == "-R$ 0,50"
    assert format_currency_brl(Decimal("275000")) == "R$ 275.000,00"


def test_format_number_br_with_custom_decimals() -> None:
    assert format_number_br(Decimal("0.5"), decimals=4) == "0,5000"
    assert format_number_br(Decimal("1234567.891")) == "1.234.567,89"


def test_format_percent_br_is_signed() -> None:
    assert format_percent_br(Decimal("1.234")) == "+1,23%"
    assert format_percent_br(Decimal("-2.5")) == "-2,50%"
    assert format_percent_br(Decimal("0")) == "+0,00%"


def test_format_dates() -> None:
    assert format_date_br(date(2026, 1, 5)) == "05/01/2026"
    assert format_date_long_br(date(2026, 1, 5)) == "05 de janeiro de 2026"

"""Tests for Decimal helpers."""

from decimal import Decimal

from portfolio_tracker.utils.decimal_utils import (
    coerce_decimal,
    safe_divide,
    to_decimal_or_none,
)


def test_coerce_decimal_handles_none_and_floats() -> None:
    assert coerce_decimal(None) == Decimal("0")
    assert coerce_decimal(0.1) == Decimal("0.1")
    assert coerce_decimal("2.50") == Decimal("2.50")


def test_to_decimal_or_none_rejects_blanks_bools_and_garbage() -> None:
    assert to_decimal_or_none(" 3 ") == Decimal("3")
    assert to_decimal_or_none("") is None
    assert to_decimal_or_none(True) is None
    assert to_decimal_or_none("abc") is None


def test_safe_divide_returns_zero_for_zero_denominator() -> None:
    assert safe_divide(Decimal("1"), Decimal("0")) == Decimal("0")
    assert safe_divide(Decimal("1"), Decimal("4")) == Decimal("0.25")

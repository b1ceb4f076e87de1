"""Tests for transaction and asset class validation."""

from datetime import date
from decimal import Decimal

import pytest

from portfolio_tracker.domain.errors import ValidationError
from portfolio_tracker.domain.models import (
    AssetClass,
    AssetClassDraft,
    TransactionDraft,
    TransactionType,
)
from portfolio_tracker.domain.policies.asset_class_policy import (
    can_delete_asset_class,
    is_selectable,
)
from portfolio_tracker.domain.services.validation import (
    validate_asset_class,
    validate_transaction,
)


def _draft(**overrides) -> TransactionDraft:
    values = {
        "ticker": " petr4 ",
        "asset_name": "Petrobras",
        "asset_class_id": "class-1",
        "transaction_type": "buy",
        "transaction_date": date(2026, 1, 5),
        "quantity": "10",
        "price_per_unit": "30.5",
        "fees": "4.90",
    }
    values.update(overrides)
    return TransactionDraft(**values)


def test_buy_is_normalized_and_total_computed() -> None:
    validated = validate_transaction(_draft(), {"class-1"})

    assert validated.ticker == "PETR4"
    assert validated.transaction_type == TransactionType.BUY
    assert validated.total_value == Decimal("309.90")


def test_fees_default_to_zero() -> None:
    validated = validate_transaction(_draft(fees=None))

    assert validated.fees == Decimal("0")
    assert validated.total_value == Decimal("305.0")


def test_dividend_keeps_amount_and_zeroes_the_rest() -> None:
    validated = validate_transaction(
        _draft(transaction_type="dividend", total_value="12.34")
    )

    assert validated.total_value == Decimal("12.34")
    assert validated.quantity == Decimal("0")
    assert validated.price_per_unit == Decimal("0")
    assert validated.fees == Decimal("0")


def test_all_field_errors_are_reported_together() -> None:
    draft = _draft(
        ticker="PETR-4",
        asset_name="",
        quantity="0",
        price_per_unit="abc",
        fees="-1",
        transaction_date=None,
    )

    with pytest.raises(ValidationError) as excinfo:
        validate_transaction(draft)

    assert set(excinfo.value.field_errors) == {
        "ticker",
        "asset_name",
        "quantity",
        "price_per_unit",
        "fees",
        "transaction_date",
    }


def test_unknown_type_and_inactive_class_are_rejected() -> None:
    with pytest.raises(ValidationError) as excinfo:
        validate_transaction(
            _draft(transaction_type="split", asset_class_id="class-2"),
            {"class-1"},
        )

    assert "transaction_type" in excinfo.value.field_errors
    assert "asset_class_id" in excinfo.value.field_errors


def test_ticker_longer_than_ten_characters_is_rejected() -> None:
    with pytest.raises(ValidationError) as excinfo:
        validate_transaction(_draft(ticker="ABCDEFGHIJK"))

    assert "ticker" in excinfo.value.field_errors


def test_non_finite_numbers_are_rejected() -> None:
    with pytest.raises(ValidationError) as excinfo:
        validate_transaction(_draft(quantity="NaN", price_per_unit="Infinity"))

    assert "quantity" in excinfo.value.field_errors
    assert "price_per_unit" in excinfo.value.field_errors


def test_dividend_requires_positive_amount() -> None:
    with pytest.raises(ValidationError) as excinfo:
        validate_transaction(
            _draft(transaction_type="dividend", total_value="0")
        )

    assert list(excinfo.value.field_errors) == ["total_value"]


def test_asset_class_defaults_color_and_trims() -> None:
    validated = validate_asset_class(
        AssetClassDraft(name="  Stocks ", description="  ", color=None)
    )

    assert validated.name == "Stocks"
    assert validated.description is None
    assert validated.color == "#6366f1"


def test_asset_class_rejects_bad_color_and_long_name() -> None:
    with pytest.raises(ValidationError) as excinfo:
        validate_asset_class(AssetClassDraft(name="x" * 51, color="red"))

    assert set(excinfo.value.field_errors) == {"name", "color"}


def test_asset_class_policies() -> None:
    inactive = AssetClass(id="1", name="Old", color="#000000", is_active=False)

    assert is_selectable(inactive) is False
    assert can_delete_asset_class(0) is True
    assert can_delete_asset_class(2) is False

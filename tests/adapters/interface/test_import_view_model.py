"""Tests for the import dialog view-model."""

from datetime import date
from decimal import Decimal
from unittest.mock import MagicMock

from portfolio_tracker.adapters.interface.import_view_model import (
    ImportViewState,
)
from portfolio_tracker.application.use_cases.import_transaction import (
    ImportTransactionUseCase,
)
from portfolio_tracker.domain.models import Transaction, TransactionType

CONFIRMATION = "Compra de 0.5 BTC\nTotal: R$ 275.000,00"


def test_parse_success_enables_confirmation() -> None:
    state = ImportViewState().with_text(CONFIRMATION).parse()

    assert state.can_confirm
    assert state.result.candidate.ticker == "BTC"
    assert state.notification.level == "success"


def test_parse_failure_disables_confirmation() -> None:
    state = ImportViewState().with_text("hello there").parse()

    assert not state.can_confirm
    assert state.notification.level == "error"


def test_parse_without_text_warns() -> None:
    state = ImportViewState().parse()

    assert state.result is None
    assert state.notification.level == "warning"


def test_csv_with_several_rows_mentions_skipped_rows() -> None:
    text = (
        "Date,Pair,Side,Price,Quantity\n"
        "2026-01-05,BTCBRL,BUY,200000,0.01\n"
        "2026-01-06,ETHBRL,BUY,10000,1\n"
    )

    state = ImportViewState().with_text(text).parse()

    assert state.can_confirm
    assert "1 more transaction(s)" in state.notification.message


def test_new_text_clears_previous_result() -> None:
    parsed = ImportViewState().with_text(CONFIRMATION).parse()

    edited = parsed.with_text("something else")

    assert edited.result is None
    assert edited.notification is None
    assert not edited.can_confirm


def test_confirmed_and_cleared_reset_the_dialog() -> None:
    parsed = ImportViewState().with_text(CONFIRMATION).parse()
    stored = Transaction(
        id="tx-1",
        owner="user-1",
        ticker="BTC",
        asset_name="BTC",
        asset_class_id="class-1",
        transaction_type=TransactionType.BUY,
        transaction_date=date(2026, 1, 5),
        quantity=Decimal("0.5"),
        price_per_unit=Decimal("550000"),
        fees=Decimal("0"),
        total_value=Decimal("275000"),
    )

    confirmed = parsed.confirmed(stored)

    assert confirmed.text == ""
    assert confirmed.result is None
    assert "BTC" in confirmed.notification.message
    assert parsed.cleared() == ImportViewState()


def test_parse_through_import_use_case_logs_usage() -> None:
    usage_logger = MagicMock()
    use_case = ImportTransactionUseCase(
        MagicMock(),
        MagicMock(),
        logger=MagicMock(),
        usage_logger=usage_logger,
    )

    state = ImportViewState().with_text(CONFIRMATION).parse(use_case.parse)

    assert state.can_confirm
    usage_logger.info.assert_called_once()
    assert "mode=text" in usage_logger.info.call_args.args[0]

"""Tests for the overview, dividends and quote use cases."""

from datetime import date, datetime, timezone
from decimal import Decimal
from unittest.mock import MagicMock

import pytest

from portfolio_tracker.application.use_cases.get_monthly_dividends import (
    GetMonthlyDividendsUseCase,
)
from portfolio_tracker.application.use_cases.get_portfolio_overview import (
    GetPortfolioOverviewUseCase,
)
from portfolio_tracker.application.use_cases.update_quotes import (
    UpdateQuotesUseCase,
    merge_quotes,
)
from portfolio_tracker.domain.errors import ValidationError
from portfolio_tracker.domain.models import (
    AssetClassRef,
    QuoteFetchResult,
    Transaction,
    TransactionType,
)


def _tx(tx_type, day, ticker="PETR4", quantity="0", price="0", total="0"):
    return Transaction(
        id=f"{ticker}-{day}",
        owner="user-1",
        ticker=ticker,
        asset_name=ticker,
        asset_class_id="class-1",
        transaction_type=tx_type,
        transaction_date=day,
        quantity=Decimal(quantity),
        price_per_unit=Decimal(price),
        fees=Decimal("0"),
        total_value=Decimal(total),
        asset_class=AssetClassRef(name="Stocks", color="#22c55e"),
    )


def _store(transactions):
    store = MagicMock()
    store.list_transactions.return_value = transactions
    return store


def test_overview_values_holdings_with_quotes() -> None:
    store = _store(
        [
            _tx(TransactionType.BUY, date(2026, 1, 2), quantity="10",
                price="20", total="200"),
            _tx(TransactionType.DIVIDEND, date(2026, 2, 2), total="7"),
        ]
    )
    logger = MagicMock()
    use_case = GetPortfolioOverviewUseCase(store, logger=logger)

    overview = use_case.execute("user-1", {"PETR4": Decimal("30")})

    store.list_transactions.assert_called_once_with("user-1")
    assert overview.summary.total_value == Decimal("300")
    assert overview.summary.total_return_percent == Decimal("50")
    assert overview.allocation[0].percent == Decimal("100")
    logger.info.assert_called_once()


def test_overview_without_quotes_uses_average_price() -> None:
    store = _store(
        [
            _tx(TransactionType.BUY, date(2026, 1, 2), quantity="2",
                price="5", total="10"),
        ]
    )

    overview = GetPortfolioOverviewUseCase(store, logger=MagicMock()).execute(
        "user-1"
    )

    assert overview.holdings[0].current_price == Decimal("5")


def test_monthly_dividends_use_the_given_day() -> None:
    store = _store(
        [
            _tx(TransactionType.DIVIDEND, date(2025, 12, 2), total="99"),
            _tx(TransactionType.DIVIDEND, date(2026, 2, 2), total="7"),
        ]
    )
    use_case = GetMonthlyDividendsUseCase(store, logger=MagicMock())

    summary = use_case.execute("user-1", today=date(2026, 3, 1))

    assert summary.year == 2026
    assert summary.total == Decimal("7")
    assert summary.max_month_label == "Feb"


def test_update_quotes_normalizes_and_logs_errors() -> None:
    provider = MagicMock()
    provider.fetch_quotes.return_value = QuoteFetchResult(
        prices={"PETR4": Decimal("38.5")},
        updated_at=datetime(2026, 1, 5, tzinfo=timezone.utc),
        errors=["VALE3: HTTP 404"],
    )
    logger = MagicMock()
    use_case = UpdateQuotesUseCase(provider, logger=logger)

    result = use_case.execute([" petr4", "PETR4", "vale3"])

    provider.fetch_quotes.assert_called_once_with(["PETR4", "VALE3"])
    assert result.count == 1
    logger.warning.assert_called_once_with("Quote error: VALE3: HTTP 404")


@pytest.mark.parametrize(
    "tickers",
    [
        [],
        ["  "],
        [f"T{index}" for index in range(51)],
        ["PETR-4"],
        ["ABCDEFGHIJK"],
    ],
)
def test_update_quotes_rejects_invalid_batches(tickers) -> None:
    provider = MagicMock()
    use_case = UpdateQuotesUseCase(provider, logger=MagicMock())

    with pytest.raises(ValidationError):
        use_case.execute(tickers)

    provider.fetch_quotes.assert_not_called()


def test_merge_quotes_keeps_previous_prices_for_failures() -> None:
    previous = {"PETR4": Decimal("30"), "VALE3": Decimal("60")}

    merged = merge_quotes(previous, {"PETR4": Decimal("31")})

    assert merged == {"PETR4": Decimal("31"), "VALE3": Decimal("60")}
    assert previous["PETR4"] == Decimal("30")

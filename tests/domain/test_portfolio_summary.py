"""Tests for portfolio totals and allocation."""

from decimal import Decimal

from portfolio_tracker.domain.models import Holding
from portfolio_tracker.domain.services.portfolio import (
    compute_asset_allocation,
    compute_portfolio_summary,
)


def _holding(
    ticker: str,
    asset_class: str,
    color: str,
    cost: str,
    value: str,
) -> Holding:
    total_cost = Decimal(cost)
    current_value = Decimal(value)
    return Holding(
        ticker=ticker,
        asset_name=ticker,
        asset_class=asset_class,
        asset_class_color=color,
        quantity=Decimal("1"),
        avg_price=total_cost,
        total_cost=total_cost,
        current_price=current_value,
        current_value=current_value,
        profit_loss=current_value - total_cost,
        profit_loss_percent=Decimal("0"),
    )


def test_summary_totals_and_return_percent() -> None:
    """Totals add up and the return is relative to cost."""
    holdings = [
        _holding("PETR4", "Stocks", "#111111", "100", "150"),
        _holding("BTC", "Crypto", "#222222", "300", "250"),
    ]

    summary = compute_portfolio_summary(holdings)

    assert summary.total_value == Decimal("400")
    assert summary.total_cost == Decimal("400")
    assert summary.total_return == Decimal("0")
    assert summary.total_return_percent == Decimal("0")
    assert summary.day_gain is None
    assert summary.day_gain_percent is None
    assert summary.cash_balance is None


def test_summary_of_empty_portfolio_is_zero() -> None:
    summary = compute_portfolio_summary([])

    assert summary.total_value == Decimal("0")
    assert summary.total_return_percent == Decimal("0")


def test_allocation_groups_by_class_in_first_seen_order() -> None:
    """Slices keep the first color seen and sum to one hundred percent."""
    holdings = [
        _holding("PETR4", "Stocks", "#111111", "100", "100"),
        _holding("BTC", "Crypto", "#222222", "100", "200"),
        _holding("VALE3", "Stocks", "#999999", "100", "100"),
    ]

    allocation = compute_asset_allocation(holdings)

    assert [item.name for item in allocation] == ["Stocks", "Crypto"]
    assert allocation[0].color == "#111111"
    assert allocation[0].value == Decimal("200")
    assert allocation[0].percent == Decimal("50")
    assert sum(item.percent for item in allocation) == Decimal("100")


def test_allocation_with_zero_total_reports_zero_percent() -> None:
    holdings = [_holding("XPTO3", "Stocks", "#111111", "0", "0")]

    [slice_] = compute_asset_allocation(holdings)

    assert slice_.percent == Decimal("0")

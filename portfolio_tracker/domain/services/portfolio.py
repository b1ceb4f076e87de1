"""Domain services for portfolio totals and asset allocation."""

from collections.abc import Iterable, Mapping
from decimal import Decimal

from portfolio_tracker.domain.models import (
    AllocationSlice,
    Holding,
    PortfolioOverview,
    PortfolioSummary,
    Transaction,
)
from portfolio_tracker.domain.services.holdings import aggregate_holdings
from portfolio_tracker.utils.decimal_utils import safe_divide


def compute_portfolio_summary(holdings: list[Holding]) -> PortfolioSummary:
    """Compute portfolio totals from holdings.

    Args:
        holdings: Open positions.

    Returns:
        PortfolioSummary: Value, cost and return figures. The return
        percentage is zero when there is no cost basis.
    """
    total_value = sum((h.current_value for h in holdings), start=Decimal("0"))
    total_cost = sum((h.total_cost for h in holdings), start=Decimal("0"))
    total_return = total_value - total_cost
    total_return_percent = (
        safe_divide(total_return, total_cost) * Decimal("100")
        if total_cost > 0
        else Decimal("0")
    )
    return PortfolioSummary(
        total_value=total_value,
        total_cost=total_cost,
        total_return=total_return,
        total_return_percent=total_return_percent,
    )


def compute_asset_allocation(holdings: list[Holding]) -> list[AllocationSlice]:
    """Group current value by asset class.

    The first color seen for a class wins when holdings disagree.

    Args:
        holdings: Open positions.

    Returns:
        list[AllocationSlice]: One slice per class in first-seen order.
    """
    totals: dict[str, Decimal] = {}
    colors: dict[str, str] = {}
    for holding in holdings:
        name = holding.asset_class
        if name not in totals:
            totals[name] = Decimal("0")
            colors[name] = holding.asset_class_color
        totals[name] += holding.current_value

    grand_total = sum(totals.values(), start=Decimal("0"))
    return [
        AllocationSlice(
            name=name,
            value=value,
            color=colors[name],
            percent=safe_divide(value, grand_total) * Decimal("100"),
        )
        for name, value in totals.items()
    ]


def build_portfolio_overview(
    transactions: Iterable[Transaction],
    quotes: Mapping[str, Decimal] | None = None,
) -> PortfolioOverview:
    """Derive holdings, summary and allocation in one pass."""
    holdings = aggregate_holdings(transactions, quotes)
    return PortfolioOverview(
        holdings=holdings,
        summary=compute_portfolio_summary(holdings),
        allocation=compute_asset_allocation(holdings),
    )


__all__ = [
    "compute_portfolio_summary",
    "compute_asset_allocation",
    "build_portfolio_overview",
]

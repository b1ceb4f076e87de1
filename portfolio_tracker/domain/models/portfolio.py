"""Domain models for derived portfolio aggregates."""

from dataclasses import dataclass
from decimal import Decimal


@dataclass(frozen=True)
class Holding:
    """Current position in one ticker under weighted-average cost.

    Attributes:
        ticker: Asset symbol.
        asset_name: Asset display name.
        asset_class: Asset class name.
        asset_class_color: Asset class chart color.
        quantity: Units held (always positive).
        avg_price: Average acquisition cost per unit.
        total_cost: Remaining cost basis.
        current_price: Latest quote, or avg_price when none is known.
        current_value: quantity * current_price.
        profit_loss: current_value - total_cost.
        profit_loss_percent: profit_loss relative to total_cost, in percent.
    """

    ticker: str
    asset_name: str
    asset_class: str
    asset_class_color: str
    quantity: Decimal
    avg_price: Decimal
    total_cost: Decimal
    current_price: Decimal
    current_value: Decimal
    profit_loss: Decimal
    profit_loss_percent: Decimal


@dataclass(frozen=True)
class PortfolioSummary:
    """Portfolio totals derived from holdings.

    Day gain and cash balance have no data source and stay None.
    """

    total_value: Decimal
    total_cost: Decimal
    total_return: Decimal
    total_return_percent: Decimal
    day_gain: Decimal | None = None
    day_gain_percent: Decimal | None = None
    cash_balance: Decimal | None = None


@dataclass(frozen=True)
class AllocationSlice:
    """Current value attributed to one asset class."""

    name: str
    value: Decimal
    color: str
    percent: Decimal


@dataclass(frozen=True)
class PortfolioOverview:
    """Holdings with their summary and allocation."""

    holdings: list[Holding]
    summary: PortfolioSummary
    allocation: list[AllocationSlice]


__all__ = [
    "Holding",
    "PortfolioSummary",
    "AllocationSlice",
    "PortfolioOverview",
]

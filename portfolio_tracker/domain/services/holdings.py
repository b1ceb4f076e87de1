"""Fold transactions into holdings under weighted-average cost."""

from collections.abc import Iterable, Mapping
from dataclasses import dataclass
from decimal import Decimal

from portfolio_tracker.domain.constants import (
    UNKNOWN_ASSET_CLASS_COLOR,
    UNKNOWN_ASSET_CLASS_NAME,
)
from portfolio_tracker.domain.errors import OversoldPositionError
from portfolio_tracker.domain.models import (
    Holding,
    Transaction,
    TransactionType,
)
from portfolio_tracker.utils.decimal_utils import coerce_decimal, safe_divide


@dataclass
class PositionState:
    """Running quantity and cost basis of one ticker during the fold."""

    ticker: str
    asset_name: str
    asset_class: str
    asset_class_color: str
    total_quantity: Decimal = Decimal("0")
    total_cost: Decimal = Decimal("0")

    def apply_buy(self, quantity: Decimal, total_value: Decimal) -> None:
        self.total_quantity += quantity
        self.total_cost += total_value

    def apply_sell(self, tx: Transaction) -> Decimal:
        """Remove units at the pre-sale average cost.

        Returns:
            Decimal: Cost basis released by the sale.

        Raises:
            OversoldPositionError: If more units are sold than held.
        """
        quantity = coerce_decimal(tx.quantity)
        held = self.total_quantity
        if held <= 0 or quantity > held:
            raise OversoldPositionError(
                self.ticker,
                tx.transaction_date,
                held,
                quantity,
            )
        released = quantity * (self.total_cost / held)
        self.total_quantity = held - quantity
        if self.total_quantity == 0:
            released = self.total_cost
            self.total_cost = Decimal("0")
        else:
            self.total_cost -= released
        return released


def sort_chronologically(
    transactions: Iterable[Transaction],
) -> list[Transaction]:
    """Return transactions in ascending date order.

    The sort is stable, so same-day rows keep the order they arrived in.
    """
    return sorted(transactions, key=lambda tx: tx.transaction_date)


def fold_positions(
    transactions: Iterable[Transaction],
) -> dict[str, PositionState]:
    """Fold buy and sell transactions into per-ticker running state.

    Dividends are ignored. Transactions are sorted chronologically first
    because the average-cost decrement depends on the quantity held at the
    time of each sale.

    Args:
        transactions: Transactions of a single owner, in any order.

    Returns:
        dict[str, PositionState]: State per ticker in first-seen order.

    Raises:
        OversoldPositionError: If a sale exceeds the position held.
    """
    positions: dict[str, PositionState] = {}
    for tx in sort_chronologically(transactions):
        if tx.transaction_type not in (TransactionType.BUY, TransactionType.SELL):
            continue
        state = positions.get(tx.ticker)
        if state is None:
            label = tx.asset_class
            state = PositionState(
                ticker=tx.ticker,
                asset_name=tx.asset_name,
                asset_class=label.name if label else UNKNOWN_ASSET_CLASS_NAME,
                asset_class_color=(
                    label.color if label else UNKNOWN_ASSET_CLASS_COLOR
                ),
            )
            positions[tx.ticker] = state
        if tx.transaction_type == TransactionType.BUY:
            state.apply_buy(
                coerce_decimal(tx.quantity),
                coerce_decimal(tx.total_value),
            )
        else:
            state.apply_sell(tx)
    return positions


def aggregate_holdings(
    transactions: Iterable[Transaction],
    quotes: Mapping[str, Decimal] | None = None,
) -> list[Holding]:
    """Derive open holdings from a transaction history.

    Args:
        transactions: Transactions of a single owner, in any order.
        quotes: Optional, possibly partial map of ticker to latest price.
            Tickers without a quote are valued at their average cost.

    Returns:
        list[Holding]: Positions with a positive quantity.
    """
    prices = quotes or {}
    holdings: list[Holding] = []
    for state in fold_positions(transactions).values():
        if state.total_quantity <= 0:
            continue
        avg_price = state.total_cost / state.total_quantity
        quote = prices.get(state.ticker)
        current_price = coerce_decimal(quote) if quote is not None else avg_price
        current_value = state.total_quantity * current_price
        profit_loss = current_value - state.total_cost
        profit_loss_percent = (
            safe_divide(profit_loss, state.total_cost) * Decimal("100")
            if state.total_cost > 0
            else Decimal("0")
        )
        holdings.append(
            Holding(
                ticker=state.ticker,
                asset_name=state.asset_name,
                asset_class=state.asset_class,
                asset_class_color=state.asset_class_color,
                quantity=state.total_quantity,
                avg_price=avg_price,
                total_cost=state.total_cost,
                current_price=current_price,
                current_value=current_value,
                profit_loss=profit_loss,
                profit_loss_percent=profit_loss_percent,
            )
        )
    return holdings


__all__ = [
    "PositionState",
    "sort_chronologically",
    "fold_positions",
    "aggregate_holdings",
]

"""Use case to compute holdings, summary and allocation for one owner."""

from collections.abc import Mapping
from decimal import Decimal

from portfolio_tracker.application.ports.transaction_store import (
    TransactionStorePort,
)
from portfolio_tracker.domain.models import PortfolioOverview
from portfolio_tracker.domain.services.portfolio import (
    build_portfolio_overview,
)
from portfolio_tracker.infrastructure.logging.logger import get_app_logger


class GetPortfolioOverviewUseCase:
    """Fold an owner's transactions into the dashboard overview."""

    def __init__(self, transaction_store: TransactionStorePort, logger=None):
        """Initialize the use case.

        Args:
            transaction_store: Port reading the owner's transactions.
            logger: Optional logger compatible with logging.Logger-like API.
        """
        self._store = transaction_store
        self._logger = logger or get_app_logger()

    def execute(
        self,
        owner: str,
        quotes: Mapping[str, Decimal] | None = None,
    ) -> PortfolioOverview:
        """Return holdings, totals and allocation for the owner.

        Args:
            owner: Identifier of the signed-in user.
            quotes: Latest price per ticker. Tickers without a quote are
                valued at their average price.

        Returns:
            PortfolioOverview: Holdings, summary and allocation slices.

        Raises:
            OversoldPositionError: When a sell exceeds the quantity held.
        """
        transactions = self._store.list_transactions(owner)
        overview = build_portfolio_overview(transactions, quotes or {})
        self._logger.info(
            f"Portfolio overview computed for {owner}: "
            f"{len(overview.holdings)} holdings, "
            f"total={overview.summary.total_value}"
        )
        return overview


__all__ = ["GetPortfolioOverviewUseCase"]

"""Use case to bucket the current year's dividends by month."""

from datetime import date

from portfolio_tracker.application.ports.transaction_store import (
    TransactionStorePort,
)
from portfolio_tracker.domain.models import DividendSummary
from portfolio_tracker.domain.services.dividends import (
    compute_monthly_dividends,
)
from portfolio_tracker.infrastructure.logging.logger import get_app_logger


class GetMonthlyDividendsUseCase:
    """Build the twelve monthly dividend buckets for one owner."""

    def __init__(self, transaction_store: TransactionStorePort, logger=None):
        self._store = transaction_store
        self._logger = logger or get_app_logger()

    def execute(self, owner: str, today: date | None = None) -> DividendSummary:
        """Return dividend buckets for the year containing ``today``.

        Args:
            owner: Identifier of the signed-in user.
            today: Reference date; defaults to the current date.

        Returns:
            DividendSummary: Monthly amounts with total, max and average.
        """
        reference = today or date.today()
        transactions = self._store.list_transactions(owner)
        summary = compute_monthly_dividends(transactions, reference)
        self._logger.info(
            f"Dividends for {owner} in {summary.year}: total={summary.total}"
        )
        return summary


__all__ = ["GetMonthlyDividendsUseCase"]

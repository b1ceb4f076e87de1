"""Application port for best-effort market quotes."""

from typing import Protocol

from portfolio_tracker.domain.models import QuoteFetchResult


class QuoteProviderPort(Protocol):
    """Port fetching the latest price of a batch of tickers.

    Implementations return partial results with one error message per
    failing ticker. Only conditions that affect the whole batch raise:
    QuoteAuthenticationError and QuoteConfigurationError.
    """

    def fetch_quotes(self, tickers: list[str]) -> QuoteFetchResult:
        """Return prices for the tickers that could be priced."""


__all__ = ["QuoteProviderPort"]

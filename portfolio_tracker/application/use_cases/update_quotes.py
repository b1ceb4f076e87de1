"""Use case to refresh market quotes for a batch of tickers."""

import re
from collections.abc import Iterable, Mapping
from decimal import Decimal

from portfolio_tracker.application.ports.quote_provider import (
    QuoteProviderPort,
)
from portfolio_tracker.domain.constants import MAX_QUOTE_TICKERS, TICKER_PATTERN
from portfolio_tracker.domain.errors import ValidationError
from portfolio_tracker.domain.models import QuoteFetchResult
from portfolio_tracker.domain.services.normalization import normalize_tickers
from portfolio_tracker.infrastructure.logging.logger import get_app_logger

_TICKER_RE = re.compile(TICKER_PATTERN)


def merge_quotes(
    previous: Mapping[str, Decimal],
    new: Mapping[str, Decimal],
) -> dict[str, Decimal]:
    """Overlay fresh prices on earlier ones.

    Tickers that failed in the latest refresh keep their previous price.
    """
    merged = dict(previous)
    merged.update(new)
    return merged


class UpdateQuotesUseCase:
    """Validate a ticker batch and fetch its latest prices."""

    def __init__(self, quote_provider: QuoteProviderPort, logger=None):
        """Initialize the use case.

        Args:
            quote_provider: Port fetching prices from the market data service.
            logger: Optional logger compatible with logging.Logger-like API.
        """
        self._provider = quote_provider
        self._logger = logger or get_app_logger()

    def execute(self, tickers: Iterable[str]) -> QuoteFetchResult:
        """Fetch prices for the given tickers.

        Args:
            tickers: Tickers to refresh; normalized to upper case and
                de-duplicated.

        Returns:
            QuoteFetchResult: Prices for the tickers that succeeded and one
            error message per ticker that failed.

        Raises:
            ValidationError: When the batch is empty, too large, or holds a
                malformed ticker.
            QuoteAuthenticationError: When the service rejects credentials.
            QuoteConfigurationError: When the service is not configured.
        """
        normalized = normalize_tickers(tickers)
        self._validate(normalized)
        result = self._provider.fetch_quotes(normalized)
        self._logger.info(
            f"Quotes updated: {result.count}/{len(normalized)} tickers, "
            f"{len(result.errors)} errors"
        )
        for error in result.errors:
            self._logger.warning(f"Quote error: {error}")
        return result

    @staticmethod
    def _validate(tickers: list[str]) -> None:
        if not tickers:
            raise ValidationError({"tickers": "at least one ticker is required"})
        if len(tickers) > MAX_QUOTE_TICKERS:
            raise ValidationError(
                {"tickers": f"at most {MAX_QUOTE_TICKERS} tickers per request"}
            )
        invalid = [ticker for ticker in tickers if not _TICKER_RE.match(ticker)]
        if invalid:
            raise ValidationError(
                {"tickers": f"invalid tickers: {', '.join(invalid)}"}
            )


__all__ = ["UpdateQuotesUseCase", "merge_quotes"]

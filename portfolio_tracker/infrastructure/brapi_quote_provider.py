"""Quote provider backed by the brapi.dev HTTP API."""

import time
from datetime import datetime, timezone
from decimal import Decimal, InvalidOperation
from typing import Callable

import requests

from portfolio_tracker.application.errors import (
    QuoteAuthenticationError,
    QuoteConfigurationError,
)
from portfolio_tracker.application.ports.quote_provider import (
    QuoteProviderPort,
)
from portfolio_tracker.domain.models import QuoteFetchResult
from portfolio_tracker.infrastructure.logging.logger import get_app_logger
from portfolio_tracker.infrastructure.settings import TrackerSettings

AUTH_FAILURE_STATUSES = (401, 403)


class QuoteLookupError(Exception):
    """A single ticker could not be priced."""


class BrapiQuoteProvider(QuoteProviderPort):
    """Fetch the latest market price of each ticker, one request at a time.

    Requests are spaced by ``quote_request_delay`` seconds to respect the
    service rate limit. Failures for one ticker are reported in the result
    and do not stop the batch; rejected credentials abort it.
    """

    def __init__(
        self,
        settings: TrackerSettings,
        session: requests.Session | None = None,
        sleep: Callable[[float], None] = time.sleep,
        logger=None,
    ) -> None:
        """Initialize the provider.

        Args:
            settings: Base URL, token, delay and timeout for the service.
            session: Optional HTTP session, mainly for tests.
            sleep: Function used to wait between requests.
            logger: Optional logger compatible with logging.Logger-like API.
        """
        self._settings = settings
        self._session = session or requests.Session()
        self._sleep = sleep
        self._logger = logger or get_app_logger()

    def fetch_quotes(self, tickers: list[str]) -> QuoteFetchResult:
        """Return prices for the tickers that could be priced.

        Raises:
            QuoteConfigurationError: When no API token is configured.
            QuoteAuthenticationError: When the service rejects the token.
        """
        if not self._settings.brapi_token:
            raise QuoteConfigurationError("BRAPI_TOKEN is not configured")

        prices: dict[str, Decimal] = {}
        errors: list[str] = []
        for index, ticker in enumerate(tickers):
            if index > 0 and self._settings.quote_request_delay > 0:
                self._sleep(self._settings.quote_request_delay)
            try:
                prices[ticker] = self._fetch_price(ticker)
            except QuoteLookupError as exc:
                self._logger.warning(f"Quote lookup failed for {ticker}: {exc}")
                errors.append(f"{ticker}: {exc}")
        return QuoteFetchResult(
            prices=prices,
            updated_at=datetime.now(timezone.utc),
            errors=errors,
        )

    def _fetch_price(self, ticker: str) -> Decimal:
        url = f"{self._settings.brapi_base_url}/quote/{ticker}"
        try:
            response = self._session.get(
                url,
                params={"token": self._settings.brapi_token},
                timeout=self._settings.quote_timeout,
            )
        except requests.RequestException as exc:
            raise QuoteLookupError(f"request failed ({exc})") from exc

        if response.status_code in AUTH_FAILURE_STATUSES:
            raise QuoteAuthenticationError(
                f"Quote service rejected the credentials "
                f"(HTTP {response.status_code})"
            )
        if response.status_code != 200:
            raise QuoteLookupError(f"HTTP {response.status_code}")

        try:
            payload = response.json()
        except ValueError as exc:
            raise QuoteLookupError("invalid JSON response") from exc
        return self._extract_price(payload)

    @staticmethod
    def _extract_price(payload) -> Decimal:
        results = payload.get("results") if isinstance(payload, dict) else None
        if not results:
            raise QuoteLookupError("no results")
        if not isinstance(results, list) or not isinstance(results[0], dict):
            raise QuoteLookupError("malformed results")
        raw_price = results[0].get("regularMarketPrice")
        if raw_price is None or isinstance(raw_price, bool):
            raise QuoteLookupError("missing regularMarketPrice")
        try:
            price = Decimal(str(raw_price))
        except InvalidOperation as exc:
            raise QuoteLookupError("invalid regularMarketPrice") from exc
        if not price.is_finite() or price <= 0:
            raise QuoteLookupError("non-positive regularMarketPrice")
        return price


__all__ = ["BrapiQuoteProvider"]

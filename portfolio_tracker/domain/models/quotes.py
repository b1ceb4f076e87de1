"""Domain models for market quotes."""

from dataclasses import dataclass, field
from datetime import datetime
from decimal import Decimal


@dataclass(frozen=True)
class QuoteFetchResult:
    """Possibly partial quote batch returned by a quote provider.

    Attributes:
        prices: Latest price per ticker for the tickers that succeeded.
        errors: One message per ticker that failed.
        updated_at: When the batch was fetched.
    """

    prices: dict[str, Decimal]
    updated_at: datetime
    errors: list[str] = field(default_factory=list)

    @property
    def count(self) -> int:
        """Return how many tickers were priced."""
        return len(self.prices)


__all__ = ["QuoteFetchResult"]

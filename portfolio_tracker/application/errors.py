"""Errors raised across application ports."""

from portfolio_tracker.domain.errors import PortfolioError


class StoreError(PortfolioError):
    """An external store operation failed; nothing was changed."""


class AssetClassInUseError(PortfolioError):
    """An asset class cannot be deleted while transactions reference it."""

    def __init__(self, asset_class_id: str, reference_count: int) -> None:
        self.asset_class_id = asset_class_id
        self.reference_count = reference_count
        super().__init__(
            f"Asset class {asset_class_id} is used by "
            f"{reference_count} transaction(s); deactivate it instead"
        )


class QuoteServiceError(PortfolioError):
    """The quote service could not serve the request at all."""


class QuoteAuthenticationError(QuoteServiceError):
    """The session or API credentials were rejected; log in again."""


class QuoteConfigurationError(QuoteServiceError):
    """The quote service is not configured, e.g. its API token is missing."""


__all__ = [
    "StoreError",
    "AssetClassInUseError",
    "QuoteServiceError",
    "QuoteAuthenticationError",
    "QuoteConfigurationError",
]

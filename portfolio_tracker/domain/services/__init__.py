"""Domain services package."""

from .dividends import compute_monthly_dividends
from .holdings import aggregate_holdings, fold_positions, sort_chronologically
from .normalization import normalize_text, normalize_ticker, normalize_tickers
from .portfolio import (
    build_portfolio_overview,
    compute_asset_allocation,
    compute_portfolio_summary,
)
from .validation import (
    validate_asset_class,
    validate_positions,
    validate_transaction,
)

__all__ = [
    "aggregate_holdings",
    "build_portfolio_overview",
    "compute_asset_allocation",
    "compute_monthly_dividends",
    "compute_portfolio_summary",
    "fold_positions",
    "normalize_text",
    "normalize_ticker",
    "normalize_tickers",
    "sort_chronologically",
    "validate_asset_class",
    "validate_positions",
    "validate_transaction",
]

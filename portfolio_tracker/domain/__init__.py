"""Domain package for portfolio rules and core models."""

from .errors import OversoldPositionError, PortfolioError, ValidationError
from .models import (
    AllocationSlice,
    AssetClass,
    DividendSummary,
    Holding,
    ImportResult,
    ParsedTransaction,
    PortfolioOverview,
    PortfolioSummary,
    Transaction,
    TransactionType,
)
from .parsing import parse_import, parse_number
from .services import (
    aggregate_holdings,
    build_portfolio_overview,
    compute_asset_allocation,
    compute_monthly_dividends,
    compute_portfolio_summary,
    validate_transaction,
)

__all__ = [
    "AllocationSlice",
    "AssetClass",
    "DividendSummary",
    "Holding",
    "ImportResult",
    "OversoldPositionError",
    "ParsedTransaction",
    "PortfolioError",
    "PortfolioOverview",
    "PortfolioSummary",
    "Transaction",
    "TransactionType",
    "ValidationError",
    "aggregate_holdings",
    "build_portfolio_overview",
    "compute_asset_allocation",
    "compute_monthly_dividends",
    "compute_portfolio_summary",
    "parse_import",
    "parse_number",
    "validate_transaction",
]

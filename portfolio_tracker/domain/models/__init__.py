"""Domain models package."""

from .dividends import DividendSummary, MonthlyDividend
from .imports import ImportMode, ImportResult, ParsedTransaction
from .portfolio import (
    AllocationSlice,
    Holding,
    PortfolioOverview,
    PortfolioSummary,
)
from .quotes import QuoteFetchResult
from .transactions import (
    AssetClass,
    AssetClassDraft,
    AssetClassRef,
    NewTransaction,
    PlatformSetting,
    Transaction,
    TransactionDraft,
    TransactionType,
)

__all__ = [
    "AllocationSlice",
    "AssetClass",
    "AssetClassDraft",
    "AssetClassRef",
    "DividendSummary",
    "Holding",
    "ImportMode",
    "ImportResult",
    "MonthlyDividend",
    "NewTransaction",
    "ParsedTransaction",
    "PlatformSetting",
    "PortfolioOverview",
    "PortfolioSummary",
    "QuoteFetchResult",
    "Transaction",
    "TransactionDraft",
    "TransactionType",
]

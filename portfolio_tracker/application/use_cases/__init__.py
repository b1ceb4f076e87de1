"""Application use cases package."""

from .get_monthly_dividends import GetMonthlyDividendsUseCase
from .get_portfolio_overview import GetPortfolioOverviewUseCase
from .import_transaction import ImportTransactionUseCase
from .manage_asset_classes import ManageAssetClassesUseCase
from .manage_platform_settings import ManagePlatformSettingsUseCase
from .record_transaction import RecordTransactionUseCase
from .update_quotes import UpdateQuotesUseCase, merge_quotes

__all__ = [
    "GetMonthlyDividendsUseCase",
    "GetPortfolioOverviewUseCase",
    "ImportTransactionUseCase",
    "ManageAssetClassesUseCase",
    "ManagePlatformSettingsUseCase",
    "RecordTransactionUseCase",
    "UpdateQuotesUseCase",
    "merge_quotes",
]

"""Composition root for wiring infrastructure adapters."""

from portfolio_tracker.application.ports.asset_class_store import (
    AssetClassStorePort,
)
from portfolio_tracker.application.ports.database import DatabaseEnginePort
from portfolio_tracker.application.ports.platform_settings_store import (
    PlatformSettingsStorePort,
)
from portfolio_tracker.application.ports.quote_provider import (
    QuoteProviderPort,
)
from portfolio_tracker.application.ports.transaction_store import (
    TransactionStorePort,
)
from portfolio_tracker.infrastructure.asset_class_repository import (
    SqlAlchemyAssetClassRepository,
)
from portfolio_tracker.infrastructure.brapi_quote_provider import (
    BrapiQuoteProvider,
)
from portfolio_tracker.infrastructure.db import SqlAlchemyDatabaseEngineAdapter
from portfolio_tracker.infrastructure.logging.logger import get_app_logger
from portfolio_tracker.infrastructure.platform_settings_repository import (
    SqlAlchemyPlatformSettingsRepository,
)
from portfolio_tracker.infrastructure.settings import TrackerSettings
from portfolio_tracker.infrastructure.transaction_repository import (
    SqlAlchemyTransactionRepository,
)


def build_database_adapter() -> DatabaseEnginePort:
    """Return the database adapter instance."""
    return SqlAlchemyDatabaseEngineAdapter()


def build_transaction_store(
    db_port: DatabaseEnginePort | None = None,
) -> TransactionStorePort:
    """Return the transaction repository."""
    resolved_db = db_port or build_database_adapter()
    return SqlAlchemyTransactionRepository(resolved_db)


def build_asset_class_store(
    db_port: DatabaseEnginePort | None = None,
) -> AssetClassStorePort:
    """Return the asset class repository."""
    resolved_db = db_port or build_database_adapter()
    return SqlAlchemyAssetClassRepository(resolved_db)


def build_platform_settings_store(
    db_port: DatabaseEnginePort | None = None,
) -> PlatformSettingsStorePort:
    """Return the platform settings repository."""
    resolved_db = db_port or build_database_adapter()
    return SqlAlchemyPlatformSettingsRepository(resolved_db)


def build_quote_provider(
    settings: TrackerSettings | None = None,
) -> QuoteProviderPort:
    """Return the quote provider configured from the environment."""
    resolved_settings = settings or TrackerSettings.from_env()
    return BrapiQuoteProvider(resolved_settings, logger=get_app_logger())


__all__ = [
    "build_database_adapter",
    "build_transaction_store",
    "build_asset_class_store",
    "build_platform_settings_store",
    "build_quote_provider",
]

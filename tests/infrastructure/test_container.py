"""Tests for the composition root."""

from unittest.mock import MagicMock

from portfolio_tracker.infrastructure import container
from portfolio_tracker.infrastructure.asset_class_repository import (
    SqlAlchemyAssetClassRepository,
)
from portfolio_tracker.infrastructure.brapi_quote_provider import (
    BrapiQuoteProvider,
)
from portfolio_tracker.infrastructure.platform_settings_repository import (
    SqlAlchemyPlatformSettingsRepository,
)
from portfolio_tracker.infrastructure.settings import TrackerSettings
from portfolio_tracker.infrastructure.transaction_repository import (
    SqlAlchemyTransactionRepository,
)


def test_builders_share_the_given_database_port() -> None:
    db_port = MagicMock()

    transactions = container.build_transaction_store(db_port)
    asset_classes = container.build_asset_class_store(db_port)
    settings = container.build_platform_settings_store(db_port)

    assert isinstance(transactions, SqlAlchemyTransactionRepository)
    assert isinstance(asset_classes, SqlAlchemyAssetClassRepository)
    assert isinstance(settings, SqlAlchemyPlatformSettingsRepository)
    assert transactions._db_port is db_port


def test_build_quote_provider_uses_given_settings(monkeypatch) -> None:
    monkeypatch.setattr(container, "get_app_logger", lambda: MagicMock())

    provider = container.build_quote_provider(
        TrackerSettings(brapi_token="token")
    )

    assert isinstance(provider, BrapiQuoteProvider)

"""Application ports package."""

from .asset_class_store import AssetClassStorePort
from .database import DatabaseEnginePort
from .platform_settings_store import PlatformSettingsStorePort
from .quote_provider import QuoteProviderPort
from .transaction_store import TransactionStorePort

__all__ = [
    "AssetClassStorePort",
    "DatabaseEnginePort",
    "PlatformSettingsStorePort",
    "QuoteProviderPort",
    "TransactionStorePort",
]

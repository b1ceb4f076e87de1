"""Application port for process-wide platform settings."""

from typing import Protocol

from portfolio_tracker.domain.models import PlatformSetting


class PlatformSettingsStorePort(Protocol):
    """Port exposing the platform settings table."""

    def list_settings(self) -> list[PlatformSetting]:
        """Return every setting ordered by key."""

    def set_value(self, key: str, value: str) -> bool:
        """Update a setting; False when the key does not exist."""


__all__ = ["PlatformSettingsStorePort"]

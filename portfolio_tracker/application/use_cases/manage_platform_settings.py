"""Use case for process-wide platform flags."""

from portfolio_tracker.application.ports.platform_settings_store import (
    PlatformSettingsStorePort,
)
from portfolio_tracker.domain.models import PlatformSetting
from portfolio_tracker.infrastructure.logging.logger import get_app_logger


class ManagePlatformSettingsUseCase:
    """List platform settings and flip boolean flags."""

    def __init__(
        self,
        settings_store: PlatformSettingsStorePort,
        logger=None,
    ) -> None:
        self._store = settings_store
        self._logger = logger or get_app_logger()

    def list(self) -> list[PlatformSetting]:
        return self._store.list_settings()

    def toggle(self, key: str) -> PlatformSetting | None:
        """Flip a boolean setting.

        Args:
            key: Setting key such as ``maintenance_mode``.

        Returns:
            PlatformSetting | None: The setting with its new value, or None
            when the key does not exist.
        """
        current = next(
            (item for item in self._store.list_settings() if item.key == key),
            None,
        )
        if current is None:
            self._logger.warning(f"Unknown platform setting: {key}")
            return None
        new_value = "false" if current.enabled else "true"
        self._store.set_value(key, new_value)
        self._logger.info(f"Platform setting {key} set to {new_value}")
        return PlatformSetting(
            key=current.key,
            value=new_value,
            description=current.description,
        )


__all__ = ["ManagePlatformSettingsUseCase"]

"""SQLAlchemy-backed repository for platform settings."""

from sqlalchemy import text
from sqlalchemy.exc import SQLAlchemyError

from portfolio_tracker.application.errors import StoreError
from portfolio_tracker.application.ports.database import DatabaseEnginePort
from portfolio_tracker.application.ports.platform_settings_store import (
    PlatformSettingsStorePort,
)
from portfolio_tracker.domain.models import PlatformSetting

LIST_SQL = text(
    "SELECT key, value, description FROM platform_settings ORDER BY key"
)
UPDATE_SQL = text("UPDATE platform_settings SET value = :value WHERE key = :key")


class SqlAlchemyPlatformSettingsRepository(PlatformSettingsStorePort):
    """Repository backed by SQLAlchemy for platform settings."""

    def __init__(self, db_port: DatabaseEnginePort) -> None:
        self._db_port = db_port

    def list_settings(self) -> list[PlatformSetting]:
        """Return every setting ordered by key."""
        engine = self._db_port.get_portfolio_engine()
        try:
            with engine.connect() as conn:
                rows = conn.execute(LIST_SQL).all()
        except SQLAlchemyError as exc:
            raise StoreError(f"Could not read platform settings: {exc}") from exc
        return [
            PlatformSetting(
                key=row.key,
                value=row.value,
                description=row.description,
            )
            for row in rows
        ]

    def set_value(self, key: str, value: str) -> bool:
        engine = self._db_port.get_portfolio_engine()
        try:
            with engine.begin() as conn:
                result = conn.execute(UPDATE_SQL, {"key": key, "value": value})
        except SQLAlchemyError as exc:
            raise StoreError(f"Could not update setting {key}: {exc}") from exc
        return result.rowcount > 0


__all__ = ["SqlAlchemyPlatformSettingsRepository"]

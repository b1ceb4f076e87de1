"""SQLAlchemy-backed repository for the asset class catalogue."""

import uuid

from sqlalchemy import text
from sqlalchemy.exc import SQLAlchemyError

from portfolio_tracker.application.errors import StoreError
from portfolio_tracker.application.ports.asset_class_store import (
    AssetClassStorePort,
)
from portfolio_tracker.application.ports.database import DatabaseEnginePort
from portfolio_tracker.domain.constants import DEFAULT_ASSET_CLASS_COLOR
from portfolio_tracker.domain.models import AssetClass, AssetClassDraft

LIST_SQL = text(
    """
    SELECT id, name, description, color, is_active
    FROM asset_classes
    ORDER BY name
    """
)
GET_SQL = text(
    """
    SELECT id, name, description, color, is_active
    FROM asset_classes
    WHERE id = :id
    """
)
INSERT_SQL = text(
    """
    INSERT INTO asset_classes (id, name, description, color, is_active)
    VALUES (:id, :name, :description, :color, :is_active)
    """
)
UPDATE_SQL = text(
    """
    UPDATE asset_classes
    SET name = :name,
        description = :description,
        color = :color,
        is_active = :is_active
    WHERE id = :id
    """
)
SET_ACTIVE_SQL = text(
    "UPDATE asset_classes SET is_active = :is_active WHERE id = :id"
)
DELETE_SQL = text("DELETE FROM asset_classes WHERE id = :id")


def _to_asset_class(row) -> AssetClass:
    return AssetClass(
        id=row.id,
        name=row.name,
        description=row.description,
        color=row.color,
        is_active=bool(row.is_active),
    )


def _to_params(asset_class_id: str, draft: AssetClassDraft) -> dict:
    return {
        "id": asset_class_id,
        "name": draft.name,
        "description": draft.description,
        "color": draft.color or DEFAULT_ASSET_CLASS_COLOR,
        "is_active": bool(draft.is_active),
    }


class SqlAlchemyAssetClassRepository(AssetClassStorePort):
    """Repository backed by SQLAlchemy for asset classes."""

    def __init__(self, db_port: DatabaseEnginePort) -> None:
        """Initialize the repository.

        Args:
            db_port: Port providing access to the portfolio engine.
        """
        self._db_port = db_port

    def list_asset_classes(self, active_only: bool = False) -> list[AssetClass]:
        """Return asset classes ordered by name."""
        engine = self._db_port.get_portfolio_engine()
        try:
            with engine.connect() as conn:
                rows = conn.execute(LIST_SQL).all()
        except SQLAlchemyError as exc:
            raise StoreError(f"Could not read asset classes: {exc}") from exc
        classes = [_to_asset_class(row) for row in rows]
        if active_only:
            return [item for item in classes if item.is_active]
        return classes

    def get_asset_class(self, asset_class_id: str) -> AssetClass | None:
        engine = self._db_port.get_portfolio_engine()
        try:
            with engine.connect() as conn:
                row = conn.execute(GET_SQL, {"id": asset_class_id}).first()
        except SQLAlchemyError as exc:
            raise StoreError(f"Could not read asset class: {exc}") from exc
        return _to_asset_class(row) if row is not None else None

    def insert_asset_class(self, draft: AssetClassDraft) -> AssetClass:
        asset_class_id = str(uuid.uuid4())
        self._write(INSERT_SQL, _to_params(asset_class_id, draft))
        return AssetClass(
            id=asset_class_id,
            name=draft.name,
            description=draft.description,
            color=draft.color or DEFAULT_ASSET_CLASS_COLOR,
            is_active=draft.is_active,
        )

    def update_asset_class(
        self,
        asset_class_id: str,
        draft: AssetClassDraft,
    ) -> AssetClass | None:
        if not self._write(UPDATE_SQL, _to_params(asset_class_id, draft)):
            return None
        return self.get_asset_class(asset_class_id)

    def set_active(self, asset_class_id: str, is_active: bool) -> bool:
        params = {"id": asset_class_id, "is_active": bool(is_active)}
        return self._write(SET_ACTIVE_SQL, params) > 0

    def delete_asset_class(self, asset_class_id: str) -> bool:
        return self._write(DELETE_SQL, {"id": asset_class_id}) > 0

    def _write(self, query, params: dict) -> int:
        engine = self._db_port.get_portfolio_engine()
        try:
            with engine.begin() as conn:
                return conn.execute(query, params).rowcount
        except SQLAlchemyError as exc:
            raise StoreError(f"Could not write asset class: {exc}") from exc


__all__ = ["SqlAlchemyAssetClassRepository"]

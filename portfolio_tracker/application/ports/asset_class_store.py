"""Application port for the global asset class catalogue."""

from typing import Protocol

from portfolio_tracker.domain.models import AssetClass, AssetClassDraft


class AssetClassStorePort(Protocol):
    """Port exposing admin CRUD over asset classes."""

    def list_asset_classes(self, active_only: bool = False) -> list[AssetClass]:
        """Return asset classes ordered by name."""

    def get_asset_class(self, asset_class_id: str) -> AssetClass | None:
        """Return one asset class, if it exists."""

    def insert_asset_class(self, draft: AssetClassDraft) -> AssetClass:
        """Persist a new asset class and return it with its id."""

    def update_asset_class(
        self,
        asset_class_id: str,
        draft: AssetClassDraft,
    ) -> AssetClass | None:
        """Replace an asset class; None when it does not exist."""

    def set_active(self, asset_class_id: str, is_active: bool) -> bool:
        """Toggle availability for new transactions."""

    def delete_asset_class(self, asset_class_id: str) -> bool:
        """Delete an asset class; False when it does not exist."""


__all__ = ["AssetClassStorePort"]

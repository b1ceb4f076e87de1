"""Use case for the admin-managed asset class catalogue."""

from portfolio_tracker.application.errors import AssetClassInUseError
from portfolio_tracker.application.ports.asset_class_store import (
    AssetClassStorePort,
)
from portfolio_tracker.application.ports.transaction_store import (
    TransactionStorePort,
)
from portfolio_tracker.domain.models import AssetClass, AssetClassDraft
from portfolio_tracker.domain.policies.asset_class_policy import (
    can_delete_asset_class,
)
from portfolio_tracker.domain.services.validation import validate_asset_class
from portfolio_tracker.infrastructure.logging.logger import get_app_logger


class ManageAssetClassesUseCase:
    """List, create, update, toggle and delete asset classes."""

    def __init__(
        self,
        asset_class_store: AssetClassStorePort,
        transaction_store: TransactionStorePort,
        logger=None,
    ) -> None:
        self._asset_classes = asset_class_store
        self._transactions = transaction_store
        self._logger = logger or get_app_logger()

    def list(self, active_only: bool = False) -> list[AssetClass]:
        return self._asset_classes.list_asset_classes(active_only=active_only)

    def create(self, draft: AssetClassDraft) -> AssetClass:
        """Validate and store a new asset class.

        Raises:
            ValidationError: When name, description or color are invalid.
        """
        created = self._asset_classes.insert_asset_class(
            validate_asset_class(draft)
        )
        self._logger.info(f"Asset class created: {created.name} ({created.id})")
        return created

    def update(
        self,
        asset_class_id: str,
        draft: AssetClassDraft,
    ) -> AssetClass | None:
        updated = self._asset_classes.update_asset_class(
            asset_class_id, validate_asset_class(draft)
        )
        if updated is not None:
            self._logger.info(f"Asset class updated: {asset_class_id}")
        return updated

    def set_active(self, asset_class_id: str, is_active: bool) -> bool:
        changed = self._asset_classes.set_active(asset_class_id, is_active)
        if changed:
            state = "activated" if is_active else "deactivated"
            self._logger.info(f"Asset class {asset_class_id} {state}")
        return changed

    def delete(self, asset_class_id: str) -> bool:
        """Delete an asset class no transaction refers to.

        Returns:
            bool: False when the class does not exist.

        Raises:
            AssetClassInUseError: When transactions still reference it.
        """
        references = self._transactions.count_by_asset_class(asset_class_id)
        if not can_delete_asset_class(references):
            self._logger.warning(
                f"Refusing to delete asset class {asset_class_id}: "
                f"{references} transaction(s) reference it"
            )
            raise AssetClassInUseError(asset_class_id, references)
        deleted = self._asset_classes.delete_asset_class(asset_class_id)
        if deleted:
            self._logger.info(f"Asset class deleted: {asset_class_id}")
        return deleted


__all__ = ["ManageAssetClassesUseCase"]

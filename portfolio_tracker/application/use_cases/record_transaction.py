"""Use case to add, edit and delete an owner's transactions."""

from portfolio_tracker.application.ports.asset_class_store import (
    AssetClassStorePort,
)
from portfolio_tracker.application.ports.transaction_store import (
    TransactionStorePort,
)
from portfolio_tracker.domain.models import Transaction, TransactionDraft
from portfolio_tracker.domain.policies.asset_class_policy import is_selectable
from portfolio_tracker.domain.services.validation import (
    validate_positions,
    validate_transaction,
)
from portfolio_tracker.infrastructure.logging.logger import get_app_logger


class RecordTransactionUseCase:
    """Validate transaction forms and forward them to the store.

    Add and edit share the same validation. New transactions may only use
    active asset classes; an edit may keep the class the transaction
    already has even after that class was deactivated.
    """

    def __init__(
        self,
        transaction_store: TransactionStorePort,
        asset_class_store: AssetClassStorePort,
        logger=None,
    ) -> None:
        self._transactions = transaction_store
        self._asset_classes = asset_class_store
        self._logger = logger or get_app_logger()

    def list(self, owner: str) -> list[Transaction]:
        """Return the owner's transactions, oldest first."""
        return self._transactions.list_transactions(owner)

    def add(self, owner: str, draft: TransactionDraft) -> Transaction:
        """Validate and persist a new transaction.

        Args:
            owner: Identifier of the signed-in user.
            draft: Raw form values.

        Returns:
            Transaction: Stored row with its id.

        Raises:
            ValidationError: When any field is invalid or a sale exceeds
                the quantity held.
            StoreError: When the store rejects the write.
        """
        validated = validate_transaction(draft, self._selectable_ids())
        validate_positions(
            owner,
            self._transactions.list_transactions(owner),
            replacement=validated,
        )
        stored = self._transactions.insert_transaction(owner, validated)
        self._logger.info(
            f"Transaction {stored.id} added for {owner}: "
            f"{stored.transaction_type.value} {stored.ticker} "
            f"total={stored.total_value}"
        )
        return stored

    def edit(
        self,
        owner: str,
        transaction_id: str,
        draft: TransactionDraft,
    ) -> Transaction | None:
        """Validate and replace an existing transaction.

        Returns:
            Transaction | None: Updated row, or None when the owner has no
            transaction with that id.
        """
        current = self._transactions.get_transaction(owner, transaction_id)
        if current is None:
            self._logger.warning(
                f"Transaction {transaction_id} not found for {owner}"
            )
            return None
        allowed = self._selectable_ids() | {current.asset_class_id}
        validated = validate_transaction(draft, allowed)
        validate_positions(
            owner,
            self._transactions.list_transactions(owner),
            changed_id=transaction_id,
            replacement=validated,
        )
        updated = self._transactions.update_transaction(
            owner, transaction_id, validated
        )
        self._logger.info(f"Transaction {transaction_id} updated for {owner}")
        return updated

    def delete(self, owner: str, transaction_id: str) -> bool:
        """Delete a transaction unless a later sale depends on it.

        Raises:
            ValidationError: When removing the row would oversell a
                position.
        """
        validate_positions(
            owner,
            self._transactions.list_transactions(owner),
            changed_id=transaction_id,
        )
        deleted = self._transactions.delete_transaction(owner, transaction_id)
        if deleted:
            self._logger.info(
                f"Transaction {transaction_id} deleted for {owner}"
            )
        return deleted

    def _selectable_ids(self) -> set[str]:
        return {
            asset_class.id
            for asset_class in self._asset_classes.list_asset_classes()
            if is_selectable(asset_class)
        }


__all__ = ["RecordTransactionUseCase"]

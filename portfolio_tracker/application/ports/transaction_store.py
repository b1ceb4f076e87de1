"""Application port for the per-user transaction store."""

from typing import Protocol

from portfolio_tracker.domain.models import NewTransaction, Transaction


class TransactionStorePort(Protocol):
    """Port exposing CRUD on transactions scoped to one owner."""

    def list_transactions(self, owner: str) -> list[Transaction]:
        """Return the owner's transactions, oldest first."""

    def get_transaction(
        self,
        owner: str,
        transaction_id: str,
    ) -> Transaction | None:
        """Return one transaction of the owner, if it exists."""

    def insert_transaction(
        self,
        owner: str,
        transaction: NewTransaction,
    ) -> Transaction:
        """Persist a new transaction and return it with its id."""

    def update_transaction(
        self,
        owner: str,
        transaction_id: str,
        transaction: NewTransaction,
    ) -> Transaction | None:
        """Replace a transaction's values; None when it does not exist."""

    def delete_transaction(self, owner: str, transaction_id: str) -> bool:
        """Delete a transaction; False when it does not exist."""

    def count_by_asset_class(self, asset_class_id: str) -> int:
        """Return how many transactions of any owner use the class."""


__all__ = ["TransactionStorePort"]

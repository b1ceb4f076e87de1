"""SQLAlchemy-backed repository for user transactions."""

import uuid
from datetime import date, datetime, timezone

from sqlalchemy import text
from sqlalchemy.exc import SQLAlchemyError

from portfolio_tracker.application.errors import StoreError
from portfolio_tracker.application.ports.database import DatabaseEnginePort
from portfolio_tracker.application.ports.transaction_store import (
    TransactionStorePort,
)
from portfolio_tracker.domain.models import (
    AssetClassRef,
    NewTransaction,
    Transaction,
    TransactionType,
)
from portfolio_tracker.utils.decimal_utils import coerce_decimal

SELECT_COLUMNS = """
    SELECT t.id, t.user_id, t.ticker, t.asset_name, t.asset_class_id,
           t.transaction_type, t.transaction_date, t.quantity,
           t.price_per_unit, t.fees, t.total_value,
           c.name AS class_name, c.color AS class_color
    FROM transactions t
    LEFT JOIN asset_classes c ON c.id = t.asset_class_id
"""

LIST_SQL = text(
    SELECT_COLUMNS
    + """
    WHERE t.user_id = :owner
    ORDER BY t.transaction_date, t.created_at
    """
)
GET_SQL = text(SELECT_COLUMNS + " WHERE t.user_id = :owner AND t.id = :id")
INSERT_SQL = text(
    """
    INSERT INTO transactions (
        id, user_id, ticker, asset_name, asset_class_id, transaction_type,
        transaction_date, quantity, price_per_unit, fees, total_value,
        created_at
    ) VALUES (
        :id, :owner, :ticker, :asset_name, :asset_class_id,
        :transaction_type, :transaction_date, :quantity, :price_per_unit,
        :fees, :total_value, :created_at
    )
    """
)
UPDATE_SQL = text(
    """
    UPDATE transactions
    SET ticker = :ticker,
        asset_name = :asset_name,
        asset_class_id = :asset_class_id,
        transaction_type = :transaction_type,
        transaction_date = :transaction_date,
        quantity = :quantity,
        price_per_unit = :price_per_unit,
        fees = :fees,
        total_value = :total_value
    WHERE user_id = :owner AND id = :id
    """
)
DELETE_SQL = text("DELETE FROM transactions WHERE user_id = :owner AND id = :id")
COUNT_BY_CLASS_SQL = text(
    "SELECT COUNT(*) FROM transactions WHERE asset_class_id = :asset_class_id"
)


def _to_params(owner: str, transaction_id: str, tx: NewTransaction) -> dict:
    return {
        "id": transaction_id,
        "owner": owner,
        "ticker": tx.ticker,
        "asset_name": tx.asset_name,
        "asset_class_id": tx.asset_class_id,
        "transaction_type": tx.transaction_type.value,
        "transaction_date": tx.transaction_date.isoformat(),
        "quantity": str(tx.quantity),
        "price_per_unit": str(tx.price_per_unit),
        "fees": str(tx.fees),
        "total_value": str(tx.total_value),
    }


def _parse_date(value) -> date:
    if isinstance(value, date):
        return value
    return date.fromisoformat(str(value)[:10])


def _to_transaction(row) -> Transaction:
    asset_class = None
    if row.class_name is not None:
        asset_class = AssetClassRef(name=row.class_name, color=row.class_color)
    return Transaction(
        id=row.id,
        owner=row.user_id,
        ticker=row.ticker,
        asset_name=row.asset_name,
        asset_class_id=row.asset_class_id,
        transaction_type=TransactionType(row.transaction_type),
        transaction_date=_parse_date(row.transaction_date),
        quantity=coerce_decimal(row.quantity),
        price_per_unit=coerce_decimal(row.price_per_unit),
        fees=coerce_decimal(row.fees),
        total_value=coerce_decimal(row.total_value),
        asset_class=asset_class,
    )


class SqlAlchemyTransactionRepository(TransactionStorePort):
    """Repository backed by SQLAlchemy for per-user transactions.

    Every query is scoped by owner except the reference count used when
    deleting asset classes.
    """

    def __init__(self, db_port: DatabaseEnginePort) -> None:
        """Initialize the repository.

        Args:
            db_port: Port providing access to the portfolio engine.
        """
        self._db_port = db_port

    def list_transactions(self, owner: str) -> list[Transaction]:
        """Return the owner's transactions ordered by date, oldest first."""
        rows = self._fetch(LIST_SQL, {"owner": owner})
        return [_to_transaction(row) for row in rows]

    def get_transaction(
        self,
        owner: str,
        transaction_id: str,
    ) -> Transaction | None:
        rows = self._fetch(GET_SQL, {"owner": owner, "id": transaction_id})
        return _to_transaction(rows[0]) if rows else None

    def insert_transaction(
        self,
        owner: str,
        transaction: NewTransaction,
    ) -> Transaction:
        """Insert a validated transaction under a fresh id.

        Raises:
            StoreError: When the database rejects the write.
        """
        transaction_id = str(uuid.uuid4())
        params = _to_params(owner, transaction_id, transaction)
        params["created_at"] = datetime.now(timezone.utc).isoformat()
        self._write(INSERT_SQL, params)
        stored = self.get_transaction(owner, transaction_id)
        if stored is None:
            raise StoreError(f"Transaction {transaction_id} was not stored")
        return stored

    def update_transaction(
        self,
        owner: str,
        transaction_id: str,
        transaction: NewTransaction,
    ) -> Transaction | None:
        updated = self._write(
            UPDATE_SQL,
            _to_params(owner, transaction_id, transaction),
        )
        if not updated:
            return None
        return self.get_transaction(owner, transaction_id)

    def delete_transaction(self, owner: str, transaction_id: str) -> bool:
        return self._write(DELETE_SQL, {"owner": owner, "id": transaction_id}) > 0

    def count_by_asset_class(self, asset_class_id: str) -> int:
        engine = self._db_port.get_portfolio_engine()
        try:
            with engine.connect() as conn:
                count = conn.execute(
                    COUNT_BY_CLASS_SQL,
                    {"asset_class_id": asset_class_id},
                ).scalar_one()
        except SQLAlchemyError as exc:
            raise StoreError(f"Could not count transactions: {exc}") from exc
        return int(count)

    def _fetch(self, query, params: dict) -> list:
        engine = self._db_port.get_portfolio_engine()
        try:
            with engine.connect() as conn:
                return conn.execute(query, params).all()
        except SQLAlchemyError as exc:
            raise StoreError(f"Could not read transactions: {exc}") from exc

    def _write(self, query, params: dict) -> int:
        engine = self._db_port.get_portfolio_engine()
        try:
            with engine.begin() as conn:
                return conn.execute(query, params).rowcount
        except SQLAlchemyError as exc:
            raise StoreError(f"Could not write transaction: {exc}") from exc


__all__ = ["SqlAlchemyTransactionRepository"]

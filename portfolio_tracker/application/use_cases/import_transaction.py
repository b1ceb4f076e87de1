"""Use case turning pasted confirmations into stored transactions."""

from datetime import date
from decimal import Decimal

from portfolio_tracker.application.ports.asset_class_store import (
    AssetClassStorePort,
)
from portfolio_tracker.application.ports.transaction_store import (
    TransactionStorePort,
)
from portfolio_tracker.domain.models import (
    ImportResult,
    ParsedTransaction,
    Transaction,
    TransactionDraft,
    TransactionType,
)
from portfolio_tracker.domain.parsing.import_parser import parse_import
from portfolio_tracker.domain.policies.asset_class_policy import is_selectable
from portfolio_tracker.domain.services.validation import (
    validate_positions,
    validate_transaction,
)
from portfolio_tracker.infrastructure.logging.logger import (
    get_app_logger,
    get_usage_logger,
)


class ImportTransactionUseCase:
    """Parse exchange text or CSV and confirm the extracted transaction."""

    def __init__(
        self,
        transaction_store: TransactionStorePort,
        asset_class_store: AssetClassStorePort,
        logger=None,
        usage_logger=None,
    ) -> None:
        self._transactions = transaction_store
        self._asset_classes = asset_class_store
        self._logger = logger or get_app_logger()
        self._usage_logger = usage_logger or get_usage_logger()

    def parse(self, text: str | None) -> ImportResult:
        """Extract a transaction candidate without persisting anything."""
        result = parse_import(text)
        self._usage_logger.info(
            f"Import parsed: mode={result.mode.value}, found={result.found}, "
            f"skipped={result.skipped_count}, rejected={result.rejected_count}"
        )
        return result

    def confirm(
        self,
        owner: str,
        parsed: ParsedTransaction,
        asset_class_id: str,
        fees: Decimal | int | str = 0,
        today: date | None = None,
    ) -> Transaction:
        """Validate a reviewed candidate and store it.

        Missing values fall back to the ticker for the asset name, today for
        the date and buy for the type. The total is recomputed from
        quantity, price and fees.

        Args:
            owner: Identifier of the signed-in user.
            parsed: Candidate returned by ``parse``.
            asset_class_id: Active asset class chosen by the user.
            fees: Optional fees added to the total.
            today: Date used when the candidate has none.

        Returns:
            Transaction: Stored row with its id.

        Raises:
            ValidationError: When the completed candidate is invalid.
        """
        draft = TransactionDraft(
            ticker=parsed.ticker or "",
            asset_name=parsed.asset_name or parsed.ticker or "",
            asset_class_id=asset_class_id,
            transaction_type=(
                parsed.transaction_type or TransactionType.BUY.value
            ),
            transaction_date=parsed.date or today or date.today(),
            quantity=parsed.quantity,
            price_per_unit=parsed.price_per_unit,
            fees=fees,
            total_value=parsed.total_value,
        )
        selectable = {
            asset_class.id
            for asset_class in self._asset_classes.list_asset_classes()
            if is_selectable(asset_class)
        }
        validated = validate_transaction(draft, selectable)
        validate_positions(
            owner,
            self._transactions.list_transactions(owner),
            replacement=validated,
        )
        stored = self._transactions.insert_transaction(owner, validated)
        self._usage_logger.info(
            f"Imported transaction {stored.id} for {owner}: "
            f"{stored.transaction_type.value} {stored.quantity} {stored.ticker}"
        )
        return stored


__all__ = ["ImportTransactionUseCase"]

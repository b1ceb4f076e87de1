"""CLI adapter to import one transaction from a confirmation text or CSV.

Environment variables:
    IMPORT_FILE: Path of the text or CSV file to parse.
    IMPORT_CONFIRM: Set to ``1`` to store the extracted transaction.
    IMPORT_ASSET_CLASS_ID: Asset class used when storing.
    IMPORT_FEES: Optional fees added to the total.
"""

import os
from pathlib import Path

from portfolio_tracker.application.use_cases.import_transaction import (
    ImportTransactionUseCase,
)
from portfolio_tracker.domain.errors import ValidationError
from portfolio_tracker.domain.models import ImportResult
from portfolio_tracker.infrastructure.container import (
    build_asset_class_store,
    build_database_adapter,
    build_transaction_store,
)
from portfolio_tracker.infrastructure.logging.logger import get_app_logger
from portfolio_tracker.infrastructure.settings import TrackerSettings
from portfolio_tracker.utils.formatters import (
    format_currency_brl,
    format_date_br,
    format_number_br,
)


def _describe(result: ImportResult) -> list[str]:
    """Return printable lines describing the extracted candidate."""
    candidate = result.candidate
    lines = [
        f"Mode: {result.mode.value}",
        f"Ticker: {candidate.ticker}",
        f"Type: {candidate.transaction_type or 'buy'}",
    ]
    if candidate.quantity is not None:
        lines.append(
            f"Quantity: {format_number_br(candidate.quantity, decimals=8)}"
        )
    if candidate.price_per_unit is not None:
        lines.append(f"Price: {format_currency_brl(candidate.price_per_unit)}")
    if candidate.total_value is not None:
        lines.append(f"Total: {format_currency_brl(candidate.total_value)}")
    if candidate.date is not None:
        lines.append(f"Date: {format_date_br(candidate.date)}")
    if result.skipped_count:
        lines.append(
            f"{result.skipped_count} more transaction(s) in the file "
            "were not imported."
        )
    return lines


def main() -> None:
    """Parse IMPORT_FILE and optionally store the extracted transaction."""
    logger = get_app_logger()
    raw_path = os.getenv("IMPORT_FILE")
    if not raw_path:
        logger.warning("IMPORT_FILE is required to import a transaction.")
        return
    path = Path(raw_path).expanduser()
    if not path.exists():
        logger.error(f"Import file not found: {path}")
        return

    db_adapter = build_database_adapter()
    use_case = ImportTransactionUseCase(
        transaction_store=build_transaction_store(db_adapter),
        asset_class_store=build_asset_class_store(db_adapter),
        logger=logger,
    )
    text = path.read_text(encoding="utf-8-sig", errors="replace")
    result = use_case.parse(text)
    if not result.found:
        print(
            "No transaction found. The text needs a symbol and a "
            "quantity or total."
        )
        return
    for line in _describe(result):
        print(line)

    if os.getenv("IMPORT_CONFIRM") != "1":
        print("Set IMPORT_CONFIRM=1 to store this transaction.")
        return
    asset_class_id = os.getenv("IMPORT_ASSET_CLASS_ID")
    if not asset_class_id:
        logger.warning("IMPORT_ASSET_CLASS_ID is required to confirm.")
        return

    settings = TrackerSettings.from_env()
    try:
        stored = use_case.confirm(
            settings.user_id,
            result.candidate,
            asset_class_id,
            fees=os.getenv("IMPORT_FEES", "0"),
        )
    except ValidationError as exc:
        logger.error(str(exc))
        for field, message in sorted(exc.field_errors.items()):
            print(f"{field}: {message}")
        return
    print(f"Stored transaction {stored.id}.")


if __name__ == "__main__":  # pragma: no cover
    main()

"""Validation of transaction and asset class form input."""

import re
from collections.abc import Collection, Iterable
from dataclasses import asdict
from decimal import Decimal

from portfolio_tracker.domain.constants import (
    DEFAULT_ASSET_CLASS_COLOR,
    HEX_COLOR_PATTERN,
    MAX_ASSET_CLASS_DESCRIPTION_LENGTH,
    MAX_ASSET_CLASS_NAME_LENGTH,
    MAX_ASSET_NAME_LENGTH,
    MAX_TICKER_LENGTH,
    TICKER_PATTERN,
)
from portfolio_tracker.domain.errors import (
    OversoldPositionError,
    ValidationError,
)
from portfolio_tracker.domain.models import (
    AssetClassDraft,
    NewTransaction,
    Transaction,
    TransactionDraft,
    TransactionType,
)
from portfolio_tracker.domain.services.holdings import fold_positions
from portfolio_tracker.domain.services.normalization import (
    normalize_text,
    normalize_ticker,
)
from portfolio_tracker.utils.decimal_utils import to_decimal_or_none

_TICKER_RE = re.compile(TICKER_PATTERN)
_COLOR_RE = re.compile(HEX_COLOR_PATTERN)


def _finite_number(
    value,
    field: str,
    errors: dict[str, str],
    *,
    allow_zero: bool,
    default: Decimal | None = None,
) -> Decimal | None:
    number = to_decimal_or_none(value)
    if number is None:
        if default is not None:
            return default
        errors[field] = f"{field} must be a number"
        return None
    if not number.is_finite():
        errors[field] = f"{field} must be finite"
        return None
    if number < 0 or (number == 0 and not allow_zero):
        qualifier = "non-negative" if allow_zero else "positive"
        errors[field] = f"{field} must be {qualifier}"
        return None
    return number


def _validate_ticker(raw: str | None, errors: dict[str, str]) -> str | None:
    ticker = normalize_ticker(raw)
    if not ticker:
        errors["ticker"] = "ticker is required"
        return None
    if len(ticker) > MAX_TICKER_LENGTH:
        errors["ticker"] = (
            f"ticker must have at most {MAX_TICKER_LENGTH} characters"
        )
        return None
    if not _TICKER_RE.match(ticker):
        errors["ticker"] = "ticker must contain only letters and digits"
        return None
    return ticker


def _validate_type(raw: str | None, errors: dict[str, str]):
    try:
        return TransactionType((raw or "").strip().lower())
    except ValueError:
        errors["transaction_type"] = (
            "transaction_type must be buy, sell or dividend"
        )
        return None


def validate_transaction(
    draft: TransactionDraft,
    valid_asset_class_ids: Collection[str] | None = None,
) -> NewTransaction:
    """Validate a transaction draft shared by the add and edit paths.

    Args:
        draft: Raw form values.
        valid_asset_class_ids: Asset class ids that may be referenced. When
            None only presence of the id is checked.

    Returns:
        NewTransaction: Normalized values with total_value computed for buy
        and sell rows.

    Raises:
        ValidationError: With one message per failing field.
    """
    errors: dict[str, str] = {}
    ticker = _validate_ticker(draft.ticker, errors)

    asset_name = normalize_text(draft.asset_name)
    if not asset_name:
        errors["asset_name"] = "asset_name is required"
    elif len(asset_name) > MAX_ASSET_NAME_LENGTH:
        errors["asset_name"] = (
            f"asset_name must have at most {MAX_ASSET_NAME_LENGTH} characters"
        )

    asset_class_id = normalize_text(draft.asset_class_id)
    if not asset_class_id:
        errors["asset_class_id"] = "asset_class_id is required"
    elif (
        valid_asset_class_ids is not None
        and asset_class_id not in valid_asset_class_ids
    ):
        errors["asset_class_id"] = "asset_class_id is not a valid asset class"

    transaction_type = _validate_type(draft.transaction_type, errors)

    if draft.transaction_date is None:
        errors["transaction_date"] = "transaction_date is required"

    zero = Decimal("0")
    quantity = price = fees = total_value = zero
    if transaction_type == TransactionType.DIVIDEND:
        total_value = _finite_number(
            draft.total_value,
            "total_value",
            errors,
            allow_zero=False,
        )
    elif transaction_type is not None:
        quantity = _finite_number(
            draft.quantity, "quantity", errors, allow_zero=False
        )
        price = _finite_number(
            draft.price_per_unit, "price_per_unit", errors, allow_zero=False
        )
        fees = _finite_number(
            draft.fees, "fees", errors, allow_zero=True, default=zero
        )
        if quantity is not None and price is not None and fees is not None:
            total_value = quantity * price + fees

    if errors:
        raise ValidationError(errors)

    return NewTransaction(
        ticker=ticker,
        asset_name=asset_name,
        asset_class_id=asset_class_id,
        transaction_type=transaction_type,
        transaction_date=draft.transaction_date,
        quantity=quantity,
        price_per_unit=price,
        fees=fees,
        total_value=total_value,
    )


def validate_asset_class(draft: AssetClassDraft) -> AssetClassDraft:
    """Validate and normalize admin asset class input.

    Args:
        draft: Raw form values.

    Returns:
        AssetClassDraft: Trimmed values with the default color applied.

    Raises:
        ValidationError: With one message per failing field.
    """
    errors: dict[str, str] = {}
    name = normalize_text(draft.name)
    if not name:
        errors["name"] = "name is required"
    elif len(name) > MAX_ASSET_CLASS_NAME_LENGTH:
        errors["name"] = (
            f"name must have at most {MAX_ASSET_CLASS_NAME_LENGTH} characters"
        )

    description = normalize_text(draft.description)
    if description and len(description) > MAX_ASSET_CLASS_DESCRIPTION_LENGTH:
        errors["description"] = (
            "description must have at most "
            f"{MAX_ASSET_CLASS_DESCRIPTION_LENGTH} characters"
        )

    color = normalize_text(draft.color) or DEFAULT_ASSET_CLASS_COLOR
    if not _COLOR_RE.match(color):
        errors["color"] = "color must be a hex code such as #FF0000"

    if errors:
        raise ValidationError(errors)
    return AssetClassDraft(
        name=name,
        description=description,
        color=color,
        is_active=draft.is_active,
    )


def validate_positions(
    owner: str,
    transactions: Iterable[Transaction],
    changed_id: str | None = None,
    replacement: NewTransaction | None = None,
) -> None:
    """Check that a write keeps every affected position non-negative.

    The owner's history is replayed with the change applied: the row
    ``changed_id`` is replaced by ``replacement`` (or dropped when there is
    no replacement), and a replacement without ``changed_id`` is appended.
    Only tickers touched by the change are folded, so an unrelated broken
    position does not block the write.

    Args:
        owner: Identifier of the signed-in user.
        transactions: The owner's stored transactions.
        changed_id: Id of the transaction being edited or deleted.
        replacement: Validated values being inserted or written.

    Raises:
        ValidationError: On ``quantity`` when a sale would exceed the
            quantity held at that date.
    """
    tickers: set[str] = set()
    replayed: list[Transaction] = []
    for tx in transactions:
        if changed_id is not None and tx.id == changed_id:
            tickers.add(tx.ticker)
            if replacement is not None:
                replayed.append(
                    Transaction(id=tx.id, owner=owner, **asdict(replacement))
                )
            continue
        replayed.append(tx)
    if replacement is not None:
        tickers.add(replacement.ticker)
        if changed_id is None:
            replayed.append(
                Transaction(id="", owner=owner, **asdict(replacement))
            )

    try:
        fold_positions(tx for tx in replayed if tx.ticker in tickers)
    except OversoldPositionError as exc:
        raise ValidationError(
            {
                "quantity": (
                    f"sells more {exc.ticker} than held on "
                    f"{exc.transaction_date.isoformat()} "
                    f"({exc.held_quantity} held)"
                )
            }
        ) from exc


__all__ = [
    "validate_transaction",
    "validate_asset_class",
    "validate_positions",
]

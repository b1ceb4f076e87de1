"""Domain models for recorded transactions and asset classes."""

from dataclasses import dataclass
from datetime import date
from decimal import Decimal
from enum import Enum


class TransactionType(str, Enum):
    """Kinds of transactions a user can record."""

    BUY = "buy"
    SELL = "sell"
    DIVIDEND = "dividend"


@dataclass(frozen=True)
class AssetClassRef:
    """Label information of an asset class attached to a transaction."""

    name: str
    color: str


@dataclass(frozen=True)
class AssetClass:
    """Admin-managed category used to group holdings.

    Attributes:
        id: Opaque identifier.
        name: Display name, unique by convention.
        description: Optional free text.
        color: Hex RGB color used by charts.
        is_active: Whether the class can be chosen for new transactions.
    """

    id: str
    name: str
    color: str
    description: str | None = None
    is_active: bool = True

    @property
    def ref(self) -> AssetClassRef:
        """Return the label pair used by holdings."""
        return AssetClassRef(name=self.name, color=self.color)


@dataclass(frozen=True)
class AssetClassDraft:
    """Unvalidated asset class form values."""

    name: str
    description: str | None = None
    color: str | None = None
    is_active: bool = True


@dataclass(frozen=True)
class NewTransaction:
    """Validated transaction values ready to be persisted."""

    ticker: str
    asset_name: str
    asset_class_id: str
    transaction_type: TransactionType
    transaction_date: date
    quantity: Decimal
    price_per_unit: Decimal
    fees: Decimal
    total_value: Decimal


@dataclass(frozen=True)
class Transaction:
    """Persisted transaction owned by a single user.

    For buy and sell rows ``total_value`` equals
    ``quantity * price_per_unit + fees``. For dividends it is the amount
    received and quantity, price and fees are zero.
    """

    id: str
    owner: str
    ticker: str
    asset_name: str
    asset_class_id: str
    transaction_type: TransactionType
    transaction_date: date
    quantity: Decimal
    price_per_unit: Decimal
    fees: Decimal
    total_value: Decimal
    asset_class: AssetClassRef | None = None


@dataclass(frozen=True)
class TransactionDraft:
    """Raw transaction form values shared by the add and edit paths.

    Numeric fields accept Decimal, int, float or text so forms and the
    import flow can hand values over without pre-conversion.
    """

    ticker: str
    asset_name: str
    asset_class_id: str
    transaction_type: str
    transaction_date: date | None
    quantity: object = None
    price_per_unit: object = None
    fees: object = None
    total_value: object = None


@dataclass(frozen=True)
class PlatformSetting:
    """Process-wide key/value flag managed by administrators."""

    key: str
    value: str
    description: str | None = None

    @property
    def enabled(self) -> bool:
        """Return the setting interpreted as a boolean flag."""
        return self.value.strip().lower() == "true"


__all__ = [
    "TransactionType",
    "AssetClassRef",
    "AssetClass",
    "AssetClassDraft",
    "NewTransaction",
    "Transaction",
    "TransactionDraft",
    "PlatformSetting",
]

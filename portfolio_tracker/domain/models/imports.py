"""Domain models for transactions extracted from imported text."""

from dataclasses import dataclass, replace
import datetime
from decimal import Decimal
from enum import Enum


class ImportMode(str, Enum):
    """Parser used for a given input."""

    TEXT = "text"
    CSV = "csv"


@dataclass(frozen=True)
class ParsedTransaction:
    """Best-effort transaction candidate; every field may be missing."""

    ticker: str | None = None
    asset_name: str | None = None
    quantity: Decimal | None = None
    price_per_unit: Decimal | None = None
    total_value: Decimal | None = None
    date: datetime.date | None = None
    transaction_type: str | None = None

    @property
    def is_acceptable(self) -> bool:
        """Return True when ticker and quantity or total are present."""
        return bool(self.ticker) and bool(self.quantity or self.total_value)

    def with_values(self, **changes) -> "ParsedTransaction":
        """Return a copy with the given fields replaced."""
        return replace(self, **changes)


@dataclass(frozen=True)
class ImportResult:
    """Outcome of parsing pasted text or an uploaded file.

    Attributes:
        mode: Parser that handled the input.
        candidate: First acceptable transaction, if any.
        skipped_count: Further acceptable rows not surfaced.
        rejected_count: Data rows that failed the acceptance gate.
    """

    mode: ImportMode
    candidate: ParsedTransaction | None = None
    skipped_count: int = 0
    rejected_count: int = 0

    @property
    def found(self) -> bool:
        """Return True when a candidate can be offered for confirmation."""
        return self.candidate is not None and self.candidate.is_acceptable


__all__ = ["ImportMode", "ParsedTransaction", "ImportResult"]

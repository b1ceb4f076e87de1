"""Domain models for dividend aggregates."""

from dataclasses import dataclass
from decimal import Decimal


@dataclass(frozen=True)
class MonthlyDividend:
    """Dividends received in one calendar month."""

    month: int
    label: str
    amount: Decimal


@dataclass(frozen=True)
class DividendSummary:
    """Dividends of a calendar year bucketed by month.

    Attributes:
        year: Calendar year covered.
        months: Exactly twelve buckets, January first.
        total: Sum of all buckets.
        max_amount: Largest monthly amount.
        max_month_label: Label of the largest month, or "no data".
        average_per_month: Mean over months with dividends only.
        has_dividends: True when total is positive.
    """

    year: int
    months: list[MonthlyDividend]
    total: Decimal
    max_amount: Decimal
    max_month_label: str
    average_per_month: Decimal
    has_dividends: bool


__all__ = ["MonthlyDividend", "DividendSummary"]

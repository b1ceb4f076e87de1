"""Bucket dividend transactions by calendar month."""

from collections.abc import Iterable
from datetime import date
from decimal import Decimal

from portfolio_tracker.domain.constants import MONTH_LABELS, NO_DATA_LABEL
from portfolio_tracker.domain.models import (
    DividendSummary,
    MonthlyDividend,
    Transaction,
    TransactionType,
)
from portfolio_tracker.utils.decimal_utils import coerce_decimal


def compute_monthly_dividends(
    transactions: Iterable[Transaction],
    today: date,
) -> DividendSummary:
    """Sum dividends received in each month of the current year.

    Months without dividends are kept as zero buckets so charts always get
    twelve points. The monthly average only counts months that paid.

    Args:
        transactions: Transactions of a single owner; non-dividend rows
            and rows from other years are ignored.
        today: Reference date deciding the current year.

    Returns:
        DividendSummary: Twelve buckets with total, max and average.
    """
    buckets = [Decimal("0")] * 12
    for tx in transactions:
        if tx.transaction_type != TransactionType.DIVIDEND:
            continue
        if tx.transaction_date.year != today.year:
            continue
        buckets[tx.transaction_date.month - 1] += coerce_decimal(tx.total_value)

    months = [
        MonthlyDividend(month=index + 1, label=MONTH_LABELS[index], amount=amount)
        for index, amount in enumerate(buckets)
    ]
    total = sum(buckets, start=Decimal("0"))
    max_amount = max(buckets)
    max_month_label = (
        MONTH_LABELS[buckets.index(max_amount)]
        if max_amount > 0
        else NO_DATA_LABEL
    )
    paying_months = [amount for amount in buckets if amount != 0]
    average_per_month = (
        sum(paying_months, start=Decimal("0")) / len(paying_months)
        if paying_months
        else Decimal("0")
    )
    return DividendSummary(
        year=today.year,
        months=months,
        total=total,
        max_amount=max_amount,
        max_month_label=max_month_label,
        average_per_month=average_per_month,
        has_dividends=total > 0,
    )


__all__ = ["compute_monthly_dividends"]

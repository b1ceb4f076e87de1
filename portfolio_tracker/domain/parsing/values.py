"""Tolerant number and date parsing for imported text."""

import re
from datetime import date, datetime
from decimal import Decimal, InvalidOperation

from portfolio_tracker.domain.models import ParsedTransaction

_NON_NUMERIC_RE = re.compile(r"[^\d.,\-]")

_DATE_TIME_RE = re.compile(
    r"^(\d{4})[/\-](\d{1,2})[/\-](\d{1,2})[ T]+\d{1,2}:\d{2}"
)
_ISO_DATE_RE = re.compile(r"^(\d{4})[/\-](\d{1,2})[/\-](\d{1,2})")
_DAY_FIRST_RE = re.compile(r"^(\d{1,2})[/\-](\d{1,2})[/\-](\d{4})")
_DAY_FIRST_SHORT_RE = re.compile(r"^(\d{1,2})[/\-](\d{1,2})[/\-](\d{2})$")
_DAY_MONTH_NAME_RE = re.compile(
    r"^(\d{1,2})\s+([^\W\d_]{3})[^\W\d_]*\.?\s+(\d{4})"
)

# English and Portuguese month abbreviations.
_MONTH_ABBREVIATIONS = {
    "jan": 1,
    "feb": 2,
    "fev": 2,
    "mar": 3,
    "apr": 4,
    "abr": 4,
    "may": 5,
    "mai": 5,
    "jun": 6,
    "jul": 7,
    "aug": 8,
    "ago": 8,
    "sep": 9,
    "set": 9,
    "oct": 10,
    "out": 10,
    "nov": 11,
    "dec": 12,
    "dez": 12,
}


def parse_number(value: str | None) -> Decimal | None:
    """Parse a number written with either decimal convention.

    When both separators appear, the one that comes last is the decimal
    separator (``1.234,56`` and ``1,234.56`` are both 1234.56). A single
    comma is a decimal comma (``38,50``) and a single dot a decimal point.
    Repeated occurrences of the same separator are thousands separators.

    Args:
        value: Raw text, possibly with currency symbols or spaces.

    Returns:
        Decimal | None: Parsed value, or None when nothing numeric remains.
    """
    if not value:
        return None
    cleaned = _NON_NUMERIC_RE.sub("", value)
    last_comma = cleaned.rfind(",")
    last_dot = cleaned.rfind(".")
    if last_comma >= 0 and last_dot >= 0:
        if last_comma > last_dot:
            normalized = cleaned.replace(".", "").replace(",", ".")
        else:
            normalized = cleaned.replace(",", "")
    elif last_comma >= 0:
        if cleaned.count(",") == 1:
            normalized = cleaned.replace(",", ".")
        else:
            normalized = cleaned.replace(",", "")
    elif cleaned.count(".") > 1:
        normalized = cleaned.replace(".", "")
    else:
        normalized = cleaned
    try:
        number = Decimal(normalized)
    except InvalidOperation:
        return None
    return number if number.is_finite() else None


def _build_date(year: int, month: int, day: int) -> date | None:
    try:
        return date(year, month, day)
    except ValueError:
        return None


def _parse_generic_date(text: str) -> date | None:
    match = _DAY_MONTH_NAME_RE.match(text)
    if match:
        month = _MONTH_ABBREVIATIONS.get(match.group(2).lower())
        if month is None:
            return None
        return _build_date(int(match.group(3)), month, int(match.group(1)))
    try:
        return datetime.fromisoformat(text).date()
    except ValueError:
        return None


def parse_date(value: str | None) -> date | None:
    """Parse a date from exchange exports or confirmation emails.

    Formats are tried in order: date with time, ISO ``YYYY-MM-DD`` (zero
    padding optional), ``DD/MM/YYYY``, ``DD/MM/YY`` (years 2000+), and
    finally day + month name or any ISO 8601 string.

    Args:
        value: Raw date text.

    Returns:
        date | None: Parsed date, or None when no format fits.
    """
    if not value:
        return None
    text = value.strip()
    for pattern in (_DATE_TIME_RE, _ISO_DATE_RE):
        match = pattern.match(text)
        if match:
            year, month, day = (int(part) for part in match.groups())
            return _build_date(year, month, day)
    for pattern in (_DAY_FIRST_RE, _DAY_FIRST_SHORT_RE):
        match = pattern.match(text)
        if match:
            day, month, year = (int(part) for part in match.groups())
            if year < 100:
                year += 2000
            return _build_date(year, month, day)
    return _parse_generic_date(text)


def complete_amounts(parsed: ParsedTransaction) -> ParsedTransaction:
    """Derive the missing one of quantity, price and total.

    Uses ``total = quantity * price`` when exactly two of the three values
    are present and non-zero.
    """
    quantity = parsed.quantity
    price = parsed.price_per_unit
    total = parsed.total_value
    if quantity and total and not price:
        return parsed.with_values(price_per_unit=total / quantity)
    if quantity and price and not total:
        return parsed.with_values(total_value=quantity * price)
    if price and total and not quantity:
        return parsed.with_values(quantity=total / price)
    return parsed


__all__ = ["parse_number", "parse_date", "complete_amounts"]

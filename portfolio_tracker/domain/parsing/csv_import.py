"""Extract transactions from exchange CSV exports."""

import csv
import io
import re

from portfolio_tracker.domain.models import ParsedTransaction
from portfolio_tracker.domain.parsing.values import (
    complete_amounts,
    parse_date,
    parse_number,
)

# Canonical field -> header synonyms, matched case-insensitively in order.
CSV_COLUMNS: dict[str, tuple[str, ...]] = {
    "date": ("Date(UTC)", "Date", "Time", "UTC_Time", "Create Time"),
    "type": ("Side", "Type", "Operation", "Order Type"),
    "pair": ("Pair", "Market", "Symbol", "Trading Pair"),
    "quantity": ("Amount", "Quantity", "Executed", "Filled", "Order Amount"),
    "price": ("Price", "Avg. Price", "Average Price", "Order Price"),
    "total": ("Total", "Quote Qty", "Total Amount", "Executed Total"),
    "asset": ("Coin", "Asset", "Currency"),
}

QUOTE_CURRENCIES = ("FDUSD", "BUSD", "USDT", "USDC", "BRL", "USD", "EUR")

CSV_HEADER_RE = re.compile(
    r"date|time|pair|symbol|amount|quantity|price",
    re.IGNORECASE,
)
PAIR_RE = re.compile(
    r"^([A-Z0-9]{2,10}?)[/_\-]?(" + "|".join(QUOTE_CURRENCIES) + r")$",
    re.IGNORECASE,
)
SELL_KEYWORDS = ("sell", "venda")
BYTE_ORDER_MARK = "\ufeff"
MIN_ROW_FIELDS = 3


def looks_like_csv(text: str) -> bool:
    """Return True when the first line reads like a delimited header.

    The header needs at least two non-empty comma-separated names, one of
    which mentions a known column keyword, and a line must follow it.
    """
    lines = text.lstrip(BYTE_ORDER_MARK).strip().splitlines()
    if len(lines) < 2:
        return False
    header = lines[0]
    names = [name.strip() for name in header.split(",")]
    if len(names) < 2 or not all(names):
        return False
    return bool(CSV_HEADER_RE.search(header))


def split_trading_pair(pair: str | None) -> tuple[str, str] | None:
    """Split a pair such as ``BTCBRL`` or ``ETH/USDT`` into base and quote.

    The base is kept as short as possible so the longest recognized quote
    currency wins (``BTCBUSD`` is BTC/BUSD, not BTCB/USD).
    """
    if not pair:
        return None
    match = PAIR_RE.match(pair.strip())
    if not match:
        return None
    return match.group(1).upper(), match.group(2).upper()


def _find_column(header: list[str], names: tuple[str, ...]) -> int | None:
    lowered = [column.lower() for column in header]
    for name in names:
        if name.lower() in lowered:
            return lowered.index(name.lower())
    return None


def _cell(values: list[str], index: int | None) -> str | None:
    if index is None or index >= len(values):
        return None
    cleaned = values[index].strip().strip('"')
    return cleaned or None


def _parse_row(
    values: list[str],
    columns: dict[str, int | None],
) -> ParsedTransaction:
    ticker = None
    asset = _cell(values, columns["asset"])
    if asset:
        ticker = asset.upper()
    else:
        split = split_trading_pair(_cell(values, columns["pair"]))
        if split:
            ticker = split[0]

    side = (_cell(values, columns["type"]) or "").lower()
    transaction_type = (
        "sell" if any(word in side for word in SELL_KEYWORDS) else "buy"
    )

    parsed = ParsedTransaction(
        ticker=ticker,
        asset_name=ticker,
        quantity=parse_number(_cell(values, columns["quantity"])),
        price_per_unit=parse_number(_cell(values, columns["price"])),
        total_value=parse_number(_cell(values, columns["total"])),
        date=parse_date(_cell(values, columns["date"])),
        transaction_type=transaction_type,
    )
    return complete_amounts(parsed)


def parse_csv_rows(text: str) -> tuple[list[ParsedTransaction], int]:
    """Parse every data row of a CSV export.

    Args:
        text: Full CSV content, header first.

    Returns:
        tuple[list[ParsedTransaction], int]: Accepted rows in file order and
        the number of non-blank data rows that were rejected.
    """
    rows = list(
        csv.reader(io.StringIO(text.lstrip(BYTE_ORDER_MARK).strip()))
    )
    if len(rows) < 2:
        return [], 0
    header = [name.strip().strip('"') for name in rows[0]]
    columns = {
        field: _find_column(header, names)
        for field, names in CSV_COLUMNS.items()
    }

    accepted: list[ParsedTransaction] = []
    rejected = 0
    for values in rows[1:]:
        if not any(value.strip() for value in values):
            continue
        if len(values) < MIN_ROW_FIELDS:
            rejected += 1
            continue
        parsed = _parse_row(values, columns)
        if parsed.is_acceptable:
            accepted.append(parsed)
        else:
            rejected += 1
    return accepted, rejected


__all__ = [
    "BYTE_ORDER_MARK",
    "CSV_COLUMNS",
    "QUOTE_CURRENCIES",
    "looks_like_csv",
    "split_trading_pair",
    "parse_csv_rows",
]

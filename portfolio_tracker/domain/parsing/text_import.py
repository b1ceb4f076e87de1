"""Extract a transaction from free-form confirmation text.

The extractor is an ordered pipeline of stages. Each stage looks at the
raw text and the record built so far and returns an updated record. Order
matters: the allow-listed symbol wins over the symbol in the order phrase,
and a date followed by a time wins over a labelled date.
"""

import re
from collections.abc import Callable

from portfolio_tracker.domain.models import ParsedTransaction
from portfolio_tracker.domain.parsing.values import (
    complete_amounts,
    parse_date,
    parse_number,
)

Stage = Callable[[str, ParsedTransaction], ParsedTransaction]

KNOWN_SYMBOLS = (
    "BTC", "ETH", "BNB", "SOL", "XRP", "ADA", "DOGE", "DOT", "AVAX", "MATIC",
    "LTC", "LINK", "UNI", "ATOM", "FTM", "NEAR", "ALGO", "VET", "ICP", "FIL",
    "SAND", "MANA", "AXS", "GALA", "ENJ", "CHZ", "SHIB", "APE", "OP", "ARB",
    "SUI", "SEI", "TIA", "JUP", "PYTH", "WIF", "PEPE", "BONK", "FLOKI",
    "RENDER", "INJ", "TRX", "XLM", "ETC", "BCH", "LEO", "TON", "MKR", "AAVE",
    "CRV", "GRT", "SNX", "COMP", "YFI", "SUSHI", "CAKE", "LUNC", "USTC",
)

SELL_RE = re.compile(r"venda|sell", re.IGNORECASE)
# Upper case only, so words like "link" or "near" in prose are not symbols.
KNOWN_SYMBOL_RE = re.compile(r"\b(" + "|".join(KNOWN_SYMBOLS) + r")\b")
ORDER_RE = re.compile(
    r"(?:compra|venda|buy|sell)\s+(?:de\s+)?(\d+(?:[.,]\d+)?)\s*([A-Z]{2,10})",
    re.IGNORECASE,
)
QUANTITY_RE = re.compile(
    r"(?:quantidade|qty|amount)[:\s]*(\d+(?:[.,]\d+)*)",
    re.IGNORECASE,
)
PRICE_RE = re.compile(
    r"(?:pre[çc]o|price)[:\s]*(?:R\$?\s*)?(\d+(?:[.,]\d+)*)",
    re.IGNORECASE,
)
TOTAL_RE = re.compile(
    r"(?:total|amount|valor)[:\s]*(?:R\$?\s*)?(\d+(?:[.,]\d+)*)",
    re.IGNORECASE,
)
DATE_TIME_RE = re.compile(r"(\d{4}[/\-]\d{1,2}[/\-]\d{1,2})\s+\d{1,2}:\d{2}")
DATE_RE = re.compile(
    r"(?:data|date|em)[:\s]*("
    r"\d{1,2}[/\-]\d{1,2}[/\-]\d{2,4}"
    r"|\d{4}[/\-]\d{1,2}[/\-]\d{1,2}"
    r"|\d{1,2}\s+\w{3}\s+\d{4})",
    re.IGNORECASE,
)


def extract_side(text: str, parsed: ParsedTransaction) -> ParsedTransaction:
    side = "sell" if SELL_RE.search(text) else "buy"
    return parsed.with_values(transaction_type=side)


def extract_known_symbol(
    text: str,
    parsed: ParsedTransaction,
) -> ParsedTransaction:
    match = KNOWN_SYMBOL_RE.search(text)
    if not match:
        return parsed
    symbol = match.group(1).upper()
    return parsed.with_values(ticker=symbol, asset_name=symbol)


def extract_order_phrase(
    text: str,
    parsed: ParsedTransaction,
) -> ParsedTransaction:
    """Read "Compra de 0.5 BTC" style phrases for quantity and symbol."""
    match = ORDER_RE.search(text)
    if not match:
        return parsed
    parsed = parsed.with_values(quantity=parse_number(match.group(1)))
    if not parsed.ticker:
        symbol = match.group(2).upper()
        parsed = parsed.with_values(ticker=symbol, asset_name=symbol)
    return parsed


def extract_quantity(text: str, parsed: ParsedTransaction) -> ParsedTransaction:
    if parsed.quantity:
        return parsed
    match = QUANTITY_RE.search(text)
    if not match:
        return parsed
    return parsed.with_values(quantity=parse_number(match.group(1)))


def extract_price(text: str, parsed: ParsedTransaction) -> ParsedTransaction:
    match = PRICE_RE.search(text)
    if not match:
        return parsed
    return parsed.with_values(price_per_unit=parse_number(match.group(1)))


def extract_total(text: str, parsed: ParsedTransaction) -> ParsedTransaction:
    match = TOTAL_RE.search(text)
    if not match:
        return parsed
    return parsed.with_values(total_value=parse_number(match.group(1)))


def derive_amounts(_text: str, parsed: ParsedTransaction) -> ParsedTransaction:
    return complete_amounts(parsed)


def extract_date_time(
    text: str,
    parsed: ParsedTransaction,
) -> ParsedTransaction:
    match = DATE_TIME_RE.search(text)
    if not match:
        return parsed
    return parsed.with_values(date=parse_date(match.group(1)))


def extract_date(text: str, parsed: ParsedTransaction) -> ParsedTransaction:
    if parsed.date is not None or DATE_TIME_RE.search(text):
        return parsed
    match = DATE_RE.search(text)
    if not match:
        return parsed
    return parsed.with_values(date=parse_date(match.group(1)))


TEXT_STAGES: tuple[tuple[str, Stage], ...] = (
    ("side", extract_side),
    ("known_symbol", extract_known_symbol),
    ("order_phrase", extract_order_phrase),
    ("quantity", extract_quantity),
    ("price", extract_price),
    ("total", extract_total),
    ("derive_amounts", derive_amounts),
    ("date_time", extract_date_time),
    ("date", extract_date),
)


def extract_text_fields(text: str) -> ParsedTransaction:
    """Run every stage and return the partial record, accepted or not."""
    parsed = ParsedTransaction()
    for _name, stage in TEXT_STAGES:
        parsed = stage(text, parsed)
    return parsed


def parse_transaction_text(text: str) -> ParsedTransaction | None:
    """Extract a transaction candidate from confirmation text.

    Args:
        text: Pasted email or notification text.

    Returns:
        ParsedTransaction | None: Candidate with a ticker and a quantity or
        total, or None when the text does not carry enough data.
    """
    if not text or not text.strip():
        return None
    parsed = extract_text_fields(text)
    return parsed if parsed.is_acceptable else None


__all__ = [
    "KNOWN_SYMBOLS",
    "TEXT_STAGES",
    "extract_text_fields",
    "parse_transaction_text",
]

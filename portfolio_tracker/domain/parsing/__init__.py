"""Heuristic parsers for imported transactions."""

from .csv_import import looks_like_csv, parse_csv_rows, split_trading_pair
from .import_parser import detect_import_mode, parse_import
from .text_import import TEXT_STAGES, parse_transaction_text
from .values import complete_amounts, parse_date, parse_number

__all__ = [
    "TEXT_STAGES",
    "complete_amounts",
    "detect_import_mode",
    "looks_like_csv",
    "parse_csv_rows",
    "parse_date",
    "parse_import",
    "parse_number",
    "parse_transaction_text",
    "split_trading_pair",
]

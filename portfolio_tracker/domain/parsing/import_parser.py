"""Entry point choosing between CSV and free-text extraction."""

from portfolio_tracker.domain.models import ImportMode, ImportResult
from portfolio_tracker.domain.parsing.csv_import import (
    BYTE_ORDER_MARK,
    looks_like_csv,
    parse_csv_rows,
)
from portfolio_tracker.domain.parsing.text_import import parse_transaction_text


def detect_import_mode(text: str) -> ImportMode:
    """Return CSV when the input starts with a recognizable header."""
    return ImportMode.CSV if looks_like_csv(text) else ImportMode.TEXT


def parse_import(text: str | None) -> ImportResult:
    """Parse pasted text or file content into a transaction candidate.

    Never raises for malformed input. For CSV files only the first accepted
    row becomes the candidate; the remaining accepted rows are counted as
    skipped.

    Args:
        text: Raw pasted text or uploaded file content.

    Returns:
        ImportResult: Mode used, candidate (if any) and row counters.
    """
    text = (text or "").lstrip(BYTE_ORDER_MARK)
    if not text or not text.strip():
        return ImportResult(mode=ImportMode.TEXT)
    mode = detect_import_mode(text)
    if mode == ImportMode.CSV:
        rows, rejected = parse_csv_rows(text)
        return ImportResult(
            mode=mode,
            candidate=rows[0] if rows else None,
            skipped_count=max(len(rows) - 1, 0),
            rejected_count=rejected,
        )
    return ImportResult(mode=mode, candidate=parse_transaction_text(text))


__all__ = ["detect_import_mode", "parse_import"]

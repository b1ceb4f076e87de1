"""Domain normalization helpers."""

from collections.abc import Iterable


def normalize_ticker(ticker: str | None) -> str | None:
    """Normalize ticker symbols.

    Args:
        ticker: Raw ticker typed by a user or read from a repository.

    Returns:
        str | None: Stripped, upper-cased ticker.
    """
    if not ticker:
        return None
    cleaned = ticker.strip()
    return cleaned.upper() if cleaned else None


def normalize_text(value: str | None) -> str | None:
    """Normalize free text fields.

    Args:
        value: Raw text value.

    Returns:
        str | None: Stripped text, None when blank.
    """
    if value is None:
        return None
    cleaned = value.strip()
    return cleaned or None


def normalize_tickers(tickers: Iterable[str | None]) -> list[str]:
    """Normalize and de-duplicate tickers, keeping first-seen order."""
    seen: dict[str, None] = {}
    for raw in tickers:
        ticker = normalize_ticker(raw)
        if ticker:
            seen.setdefault(ticker, None)
    return list(seen)


__all__ = ["normalize_ticker", "normalize_text", "normalize_tickers"]

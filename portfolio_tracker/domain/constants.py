"""Domain constants for portfolio tracking."""

UNKNOWN_ASSET_CLASS_NAME = "Unknown"
UNKNOWN_ASSET_CLASS_COLOR = "#6b7280"
DEFAULT_ASSET_CLASS_COLOR = "#6366f1"

TICKER_PATTERN = r"^[A-Z0-9]{1,10}$"
HEX_COLOR_PATTERN = r"^#[0-9A-Fa-f]{6}$"

MAX_TICKER_LENGTH = 10
MAX_ASSET_NAME_LENGTH = 100
MAX_ASSET_CLASS_NAME_LENGTH = 50
MAX_ASSET_CLASS_DESCRIPTION_LENGTH = 200
MAX_QUOTE_TICKERS = 50

MONTH_LABELS = (
    "Jan",
    "Feb",
    "Mar",
    "Apr",
    "May",
    "Jun",
    "Jul",
    "Aug",
    "Sep",
    "Oct",
    "Nov",
    "Dec",
)
NO_DATA_LABEL = "no data"


__all__ = [
    "UNKNOWN_ASSET_CLASS_NAME",
    "UNKNOWN_ASSET_CLASS_COLOR",
    "DEFAULT_ASSET_CLASS_COLOR",
    "TICKER_PATTERN",
    "HEX_COLOR_PATTERN",
    "MAX_TICKER_LENGTH",
    "MAX_ASSET_NAME_LENGTH",
    "MAX_ASSET_CLASS_NAME_LENGTH",
    "MAX_ASSET_CLASS_DESCRIPTION_LENGTH",
    "MAX_QUOTE_TICKERS",
    "MONTH_LABELS",
    "NO_DATA_LABEL",
]

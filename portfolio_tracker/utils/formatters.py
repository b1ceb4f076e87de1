"""Display formatters using Brazilian conventions."""

from datetime import date
from decimal import Decimal

MONTH_NAMES_PT = (
    "janeiro",
    "fevereiro",
    "março",
    "abril",
    "maio",
    "junho",
    "julho",
    "agosto",
    "setembro",
    "outubro",
    "novembro",
    "dezembro",
)


def format_number_br(value: Decimal, decimals: int = 2) -> str:
    """Format a number with dot thousands and comma decimals.

    Args:
        value: Number to format.
        decimals: Fixed number of decimal places.

    Returns:
        str: Formatted number, e.g. ``1.234,56``.
    """
    us_style = f"{Decimal(value):,.{decimals}f}"
    return us_style.replace(",", "_").replace(".", ",").replace("_", ".")


def format_currency_brl(value: Decimal) -> str:
    """Format a value as Brazilian reais."""
    amount = Decimal(value)
    sign = "-" if amount < 0 else ""
    return f"{sign}R$ {format_number_br(abs(amount))}"


def format_percent_br(value: Decimal) -> str:
    """Format a signed percentage, e.g. ``+1,23%``."""
    sign = "+" if value >= 0 else ""
    return f"{sign}{format_number_br(value)}%"


def format_date_br(value: date) -> str:
    """Format a date as ``dd/MM/yyyy``."""
    return value.strftime("%d/%m/%Y")


def format_date_long_br(value: date) -> str:
    """Format a date as ``05 de janeiro de 2026``."""
    month = MONTH_NAMES_PT[value.month - 1]
    return f"{value.day:02d} de {month} de {value.year}"


__all__ = [
    "format_number_br",
    "format_currency_brl",
    "format_percent_br",
    "format_date_br",
    "format_date_long_br",
]

"""Domain error types."""

from datetime import date
from decimal import Decimal


class PortfolioError(Exception):
    """Base class for recoverable portfolio errors."""


class ValidationError(PortfolioError):
    """Raised when user input breaks the validation contract.

    Attributes:
        field_errors: Mapping of field name to a human readable message.
    """

    def __init__(self, field_errors: dict[str, str]) -> None:
        self.field_errors = dict(field_errors)
        fields = ", ".join(sorted(self.field_errors))
        super().__init__(f"Invalid fields: {fields}")


class OversoldPositionError(PortfolioError):
    """Raised when a sell exceeds the quantity held at that point in time."""

    def __init__(
        self,
        ticker: str,
        transaction_date: date,
        held_quantity: Decimal,
        sell_quantity: Decimal,
    ) -> None:
        self.ticker = ticker
        self.transaction_date = transaction_date
        self.held_quantity = held_quantity
        self.sell_quantity = sell_quantity
        super().__init__(
            f"Oversold position for {ticker} on {transaction_date}: "
            f"selling {sell_quantity} with {held_quantity} held"
        )


__all__ = ["PortfolioError", "ValidationError", "OversoldPositionError"]

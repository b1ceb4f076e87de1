"""Presentation state for the transaction import dialog.

The dialog is modelled as an immutable value with pure transitions so the
Streamlit page only stores the current state and renders it.
"""

from collections.abc import Callable
from dataclasses import dataclass, replace

from portfolio_tracker.domain.models import ImportResult, Transaction
from portfolio_tracker.domain.parsing.import_parser import parse_import
from portfolio_tracker.utils.formatters import format_number_br

EMPTY_INPUT_MESSAGE = "Paste the confirmation text or upload a CSV file first."
NOT_FOUND_MESSAGE = (
    "Could not extract a transaction. Make sure the text shows the symbol "
    "and a quantity or total."
)
EXTRACTED_MESSAGE = "Data extracted! Review the values before confirming."


@dataclass(frozen=True)
class Notification:
    """Message shown to the user after a transition.

    Attributes:
        level: One of ``success``, ``info``, ``warning`` or ``error``.
        message: Text to display.
    """

    level: str
    message: str


@dataclass(frozen=True)
class ImportViewState:
    """Current text, parse result and pending notification of the dialog."""

    text: str = ""
    result: ImportResult | None = None
    notification: Notification | None = None

    @property
    def can_confirm(self) -> bool:
        """Return True when the parsed candidate passes the acceptance gate."""
        return self.result is not None and self.result.found

    def with_text(self, text: str) -> "ImportViewState":
        """Replace the input and drop any previous result."""
        return ImportViewState(text=text or "")

    def parse(
        self,
        parser: Callable[[str], ImportResult] = parse_import,
    ) -> "ImportViewState":
        """Run the import parser over the current text.

        Args:
            parser: Parsing entry point, usually
                ``ImportTransactionUseCase.parse`` so usage is logged.
        """
        if not self.text.strip():
            return replace(
                self,
                result=None,
                notification=Notification("warning", EMPTY_INPUT_MESSAGE),
            )
        result = parser(self.text)
        if not result.found:
            return replace(
                self,
                result=result,
                notification=Notification("error", NOT_FOUND_MESSAGE),
            )
        message = EXTRACTED_MESSAGE
        if result.skipped_count:
            message += (
                f" {result.skipped_count} more transaction(s) were found in "
                "the file; only the first one is shown."
            )
        return replace(
            self,
            result=result,
            notification=Notification("success", message),
        )

    def confirmed(self, transaction: Transaction) -> "ImportViewState":
        """Reset the dialog after the candidate was stored."""
        message = (
            f"Transaction imported: {transaction.transaction_type.value} "
            f"{format_number_br(transaction.quantity, decimals=8)} "
            f"{transaction.ticker}"
        )
        return ImportViewState(notification=Notification("success", message))

    def cleared(self) -> "ImportViewState":
        """Return an empty dialog."""
        return ImportViewState()


__all__ = ["Notification", "ImportViewState"]

"""CLI adapter refreshing quotes for current holdings.

Prints the holdings valued at the fresh prices followed by the totals.
"""

from portfolio_tracker.application.errors import QuoteServiceError
from portfolio_tracker.application.use_cases.get_portfolio_overview import (
    GetPortfolioOverviewUseCase,
)
from portfolio_tracker.application.use_cases.update_quotes import (
    UpdateQuotesUseCase,
)
from portfolio_tracker.domain.errors import ValidationError
from portfolio_tracker.infrastructure.container import (
    build_database_adapter,
    build_quote_provider,
    build_transaction_store,
)
from portfolio_tracker.infrastructure.logging.logger import get_app_logger
from portfolio_tracker.infrastructure.settings import TrackerSettings
from portfolio_tracker.utils.formatters import (
    format_currency_brl,
    format_percent_br,
)

MAX_ERRORS_SHOWN = 3


def _summarize_errors(errors: list[str]) -> str:
    """Return a one-line summary showing the first few errors."""
    shown = ", ".join(errors[:MAX_ERRORS_SHOWN])
    hidden = len(errors) - MAX_ERRORS_SHOWN
    if hidden > 0:
        shown += f" and {hidden} more"
    return shown


def main() -> None:
    """Fetch quotes for every held ticker and print the valued portfolio."""
    logger = get_app_logger()
    settings = TrackerSettings.from_env()
    db_adapter = build_database_adapter()
    overview_use_case = GetPortfolioOverviewUseCase(
        build_transaction_store(db_adapter),
        logger=logger,
    )

    holdings = overview_use_case.execute(settings.user_id).holdings
    if not holdings:
        print("No holdings to update.")
        return

    quotes_use_case = UpdateQuotesUseCase(
        build_quote_provider(settings),
        logger=logger,
    )
    try:
        result = quotes_use_case.execute(h.ticker for h in holdings)
    except (QuoteServiceError, ValidationError) as exc:
        logger.error(f"Quote refresh failed: {exc}")
        print(f"Quote refresh failed: {exc}")
        return

    print(f"{result.count} quote(s) updated.")
    if result.errors:
        print(f"Errors: {_summarize_errors(result.errors)}")

    overview = overview_use_case.execute(settings.user_id, result.prices)
    for holding in overview.holdings:
        print(
            f"{holding.ticker}: {format_currency_brl(holding.current_value)} "
            f"({format_percent_br(holding.profit_loss_percent)})"
        )
    summary = overview.summary
    print(
        f"Total: {format_currency_brl(summary.total_value)} | "
        f"Return: {format_currency_brl(summary.total_return)} "
        f"({format_percent_br(summary.total_return_percent)})"
    )


if __name__ == "__main__":  # pragma: no cover
    main()

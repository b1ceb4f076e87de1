"""CLI adapter creating the portfolio tables and default settings."""

from portfolio_tracker.infrastructure.container import build_database_adapter
from portfolio_tracker.infrastructure.logging.logger import get_app_logger
from portfolio_tracker.infrastructure.schema import ensure_schema


def main() -> None:
    """Create missing tables in the database named by TRACKER_DB_URL."""
    logger = get_app_logger()
    db_adapter = build_database_adapter()
    ensure_schema(db_adapter.get_portfolio_engine())
    logger.info("Portfolio schema ensured")
    print("Portfolio database is ready.")


if __name__ == "__main__":  # pragma: no cover
    main()

"""Schema bootstrap for the portfolio database."""

from sqlalchemy import text
from sqlalchemy.engine import Engine
from sqlalchemy.exc import SQLAlchemyError

from portfolio_tracker.application.errors import StoreError

CREATE_STATEMENTS = (
    """
    CREATE TABLE IF NOT EXISTS asset_classes (
        id VARCHAR(36) PRIMARY KEY,
        name VARCHAR(50) NOT NULL,
        description VARCHAR(200),
        color VARCHAR(7) NOT NULL,
        is_active BOOLEAN NOT NULL DEFAULT TRUE
    )
    """,
    """
    CREATE TABLE IF NOT EXISTS transactions (
        id VARCHAR(36) PRIMARY KEY,
        user_id VARCHAR(100) NOT NULL,
        ticker VARCHAR(10) NOT NULL,
        asset_name VARCHAR(100) NOT NULL,
        asset_class_id VARCHAR(36) NOT NULL REFERENCES asset_classes (id),
        transaction_type VARCHAR(10) NOT NULL,
        transaction_date VARCHAR(10) NOT NULL,
        quantity NUMERIC(28, 10) NOT NULL,
        price_per_unit NUMERIC(28, 10) NOT NULL,
        fees NUMERIC(28, 10) NOT NULL,
        total_value NUMERIC(28, 10) NOT NULL,
        created_at VARCHAR(32) NOT NULL
    )
    """,
    """
    CREATE INDEX IF NOT EXISTS ix_transactions_user_date
    ON transactions (user_id, transaction_date)
    """,
    """
    CREATE TABLE IF NOT EXISTS platform_settings (
        key VARCHAR(50) PRIMARY KEY,
        value VARCHAR(200) NOT NULL,
        description VARCHAR(200)
    )
    """,
)

DEFAULT_PLATFORM_SETTINGS = (
    ("maintenance_mode", "false", "Block regular users while enabled"),
    ("allow_signups", "true", "Allow new accounts to be created"),
)

SEED_SETTING_SQL = text(
    """
    INSERT INTO platform_settings (key, value, description)
    SELECT :key, :value, :description
    WHERE NOT EXISTS (SELECT 1 FROM platform_settings WHERE key = :key)
    """
)


def ensure_schema(engine: Engine) -> None:
    """Create missing tables and seed the default platform settings.

    Safe to run repeatedly; existing rows are left untouched.

    Raises:
        StoreError: When the database rejects a statement.
    """
    try:
        with engine.begin() as conn:
            for statement in CREATE_STATEMENTS:
                conn.execute(text(statement))
            for key, value, description in DEFAULT_PLATFORM_SETTINGS:
                conn.execute(
                    SEED_SETTING_SQL,
                    {"key": key, "value": value, "description": description},
                )
    except SQLAlchemyError as exc:
        raise StoreError(f"Could not create schema: {exc}") from exc


__all__ = ["ensure_schema", "DEFAULT_PLATFORM_SETTINGS"]

"""Settings helpers for infrastructure adapters."""

import os
from dataclasses import dataclass
from decimal import Decimal, InvalidOperation
from typing import Optional

import dotenv

from portfolio_tracker.infrastructure.logging.logger import get_app_logger

DEFAULT_USER_ID = "local"
DEFAULT_BRAPI_BASE_URL = "https://brapi.dev/api"
DEFAULT_QUOTE_REQUEST_DELAY = Decimal("0.2")
DEFAULT_QUOTE_TIMEOUT = Decimal("10")


@dataclass(frozen=True)
class TrackerSettings:
    """Runtime settings for the tracker adapters.

    Attributes:
        user_id: Owner used by the CLIs and the single-user Streamlit app.
        brapi_base_url: Base URL of the quote service.
        brapi_token: API token for the quote service, if configured.
        quote_request_delay: Seconds to wait between quote requests.
        quote_timeout: Seconds before a quote request times out.
    """

    user_id: str = DEFAULT_USER_ID
    brapi_base_url: str = DEFAULT_BRAPI_BASE_URL
    brapi_token: Optional[str] = None
    quote_request_delay: float = float(DEFAULT_QUOTE_REQUEST_DELAY)
    quote_timeout: float = float(DEFAULT_QUOTE_TIMEOUT)

    @classmethod
    def from_env(cls) -> "TrackerSettings":
        """Build settings from environment variables and a local .env file.

        Returns:
            TrackerSettings: Settings sourced from environment variables.
        """
        dotenv.load_dotenv()
        logger = get_app_logger()
        user_id = os.getenv("TRACKER_USER_ID", "").strip() or DEFAULT_USER_ID
        base_url = (
            os.getenv("BRAPI_BASE_URL", "").strip() or DEFAULT_BRAPI_BASE_URL
        )
        token = os.getenv("BRAPI_TOKEN", "").strip() or None
        return cls(
            user_id=user_id,
            brapi_base_url=base_url.rstrip("/"),
            brapi_token=token,
            quote_request_delay=cls._read_seconds(
                "QUOTE_REQUEST_DELAY",
                DEFAULT_QUOTE_REQUEST_DELAY,
                logger,
            ),
            quote_timeout=cls._read_seconds(
                "QUOTE_TIMEOUT",
                DEFAULT_QUOTE_TIMEOUT,
                logger,
            ),
        )

    @staticmethod
    def _read_seconds(name: str, default: Decimal, logger) -> float:
        """Read a non-negative number of seconds, falling back to default.

        Args:
            name: Environment variable name.
            default: Value used when the variable is unset or invalid.
            logger: Logger used for warnings.

        Returns:
            float: Number of seconds.
        """
        raw = os.getenv(name, "").strip()
        if not raw:
            return float(default)
        try:
            value = Decimal(raw)
        except InvalidOperation:
            logger.warning(f"Invalid {name}={raw!r}; using {default}")
            return float(default)
        if not value.is_finite() or value < 0:
            logger.warning(f"Invalid {name}={raw!r}; using {default}")
            return float(default)
        return float(value)


__all__ = ["TrackerSettings"]

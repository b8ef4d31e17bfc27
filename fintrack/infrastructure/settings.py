"""Settings helpers for infrastructure adapters."""

from dataclasses import dataclass
import os
from typing import Optional

import dotenv

from fintrack.domain.constants import CANONICAL_CURRENCY, CurrencyCode
from fintrack.domain.models import UserSession
from fintrack.domain.services.normalization import (
    normalize_currency_code,
    normalize_locale,
)
from fintrack.infrastructure.logging.logger import get_app_logger


@dataclass(frozen=True)
class FinTrackSettings:
    """User-facing settings.

    Attributes:
        display_currency: Currency amounts are shown in.
        locale: Language for canned advice.
        user_id: Id of the user whose data is read.
        api_token: Optional token attached to the session.
    """

    display_currency: CurrencyCode = CANONICAL_CURRENCY
    locale: str = "en"
    user_id: int = 1
    api_token: Optional[str] = None

    @classmethod
    def from_env(cls) -> "FinTrackSettings":
        """Build settings from environment variables.

        Returns:
            FinTrackSettings: Settings sourced from environment variables.
        """
        dotenv.load_dotenv()
        logger = get_app_logger()
        return cls(
            display_currency=cls._parse_currency(
                os.getenv("FINTRACK_DISPLAY_CURRENCY"),
                logger,
            ),
            locale=normalize_locale(os.getenv("FINTRACK_LOCALE")),
            user_id=cls._parse_user_id(os.getenv("FINTRACK_USER_ID"), logger),
            api_token=os.getenv("FINTRACK_API_TOKEN") or None,
        )

    def session(self) -> UserSession:
        """Return the session context passed to repositories."""
        return UserSession(user_id=self.user_id, token=self.api_token)

    @staticmethod
    def _parse_currency(raw: str | None, logger) -> CurrencyCode:
        if not raw:
            return CANONICAL_CURRENCY
        currency = normalize_currency_code(raw)
        if currency is None:
            logger.warning(
                f"Unsupported FINTRACK_DISPLAY_CURRENCY={raw!r}, "
                f"using {CANONICAL_CURRENCY.value}"
            )
            return CANONICAL_CURRENCY
        return currency

    @staticmethod
    def _parse_user_id(raw: str | None, logger) -> int:
        if not raw:
            return 1
        try:
            return int(raw)
        except ValueError:
            logger.warning(f"Invalid FINTRACK_USER_ID={raw!r}, using 1")
            return 1


__all__ = ["FinTrackSettings"]

"""Shared parsing helpers for the command-line adapters."""

from datetime import date

from fintrack.domain.models import Period


def parse_date(value: str | None, logger) -> date | None:
    """Parse an ISO date string into a date.

    Args:
        value: Date string in YYYY-MM-DD format.
        logger: Logger used for warnings.

    Returns:
        date | None: Parsed date or None when invalid.
    """
    if not value:
        return None
    try:
        return date.fromisoformat(value)
    except ValueError:
        logger.warning(
            f"Invalid date '{value}'. Expected format YYYY-MM-DD."
        )
        return None


def parse_month(value: str | None, logger) -> Period | None:
    """Parse a YYYY-MM string into the matching calendar month.

    Args:
        value: Month string such as ``2025-03``.
        logger: Logger used for warnings.

    Returns:
        Period | None: Month period or None when invalid.
    """
    if not value:
        return None
    try:
        year, month = (int(part) for part in value.split("-"))
        return Period.month_of(date(year, month, 1))
    except ValueError:
        logger.warning(f"Invalid month '{value}'. Expected format YYYY-MM.")
        return None


__all__ = ["parse_date", "parse_month"]

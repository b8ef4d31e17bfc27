"""Rules for transactions entered by hand."""

from datetime import date, datetime
from decimal import Decimal

from fintrack.domain.errors import InvalidNumericInput, InvalidTransactionError
from fintrack.domain.services.normalization import normalize_category
from fintrack.utils.decimal_utils import parse_decimal


def validate_transaction(
    amount,
    category: str | None,
    day,
) -> tuple[Decimal, str, date]:
    """Validate the required fields of a new income or expense.

    Args:
        amount: Raw amount in the canonical currency.
        category: Category name as typed by the user.
        day: Booking date, as a date or ``YYYY-MM-DD`` string.

    Returns:
        tuple[Decimal, str, date]: Parsed amount, normalized category and
            booking date.

    Raises:
        InvalidTransactionError: If a field is missing, the amount is not
            a positive number, or the date cannot be parsed.
    """
    if amount is None or amount == "":
        raise InvalidTransactionError("Amount is required")
    try:
        value = parse_decimal(amount)
    except InvalidNumericInput as exc:
        raise InvalidTransactionError(f"Invalid amount: {exc}") from exc
    if value <= 0:
        raise InvalidTransactionError("Amount must be positive")
    if not (category or "").strip():
        raise InvalidTransactionError("Category is required")
    return value, normalize_category(category), _parse_day(day)


def _parse_day(day) -> date:
    if isinstance(day, datetime):
        return day.date()
    if isinstance(day, date):
        return day
    if not day:
        raise InvalidTransactionError("Date is required")
    try:
        return date.fromisoformat(str(day).strip())
    except ValueError as exc:
        raise InvalidTransactionError(f"Invalid date: {day!r}") from exc


__all__ = ["validate_transaction"]

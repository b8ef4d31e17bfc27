"""Helpers for Decimal normalization."""

from decimal import Decimal, InvalidOperation, ROUND_HALF_UP

from fintrack.domain.errors import InvalidNumericInput


CENT = Decimal("0.01")
TENTH = Decimal("0.1")


def parse_decimal(value) -> Decimal:
    """Parse a raw amount into a finite Decimal.

    Args:
        value: Raw numeric value from SQL, adapters, or user input.

    Returns:
        Decimal: Parsed value.

    Raises:
        InvalidNumericInput: If the value is None, NaN, infinite, or not
            a number.
    """
    if value is None or isinstance(value, bool):
        raise InvalidNumericInput(f"Not a numeric amount: {value!r}")
    if isinstance(value, Decimal):
        parsed = value
    else:
        raw = value.strip() if isinstance(value, str) else str(value)
        try:
            parsed = Decimal(raw)
        except (InvalidOperation, ValueError) as exc:
            raise InvalidNumericInput(
                f"Not a numeric amount: {value!r}"
            ) from exc
    if not parsed.is_finite():
        raise InvalidNumericInput(f"Amount is not finite: {value!r}")
    return parsed


def coerce_decimal(value, logger=None) -> Decimal:
    """Normalize numeric values to Decimal, substituting zero when invalid.

    Args:
        value: Raw numeric value from SQL or adapters.
        logger: Optional logger used to report substituted values.

    Returns:
        Decimal: Normalized numeric value, or ``Decimal("0")``.
    """
    if value is None:
        return Decimal("0")
    try:
        return parse_decimal(value)
    except InvalidNumericInput as exc:
        if logger is not None:
            logger.warning(f"Substituting 0 for invalid amount: {exc}")
        return Decimal("0")


def round_money(value: Decimal) -> Decimal:
    """Round to cents, half away from zero."""
    return value.quantize(CENT, rounding=ROUND_HALF_UP)


def round_percentage(value: Decimal) -> Decimal:
    """Round to one decimal place, half away from zero."""
    return value.quantize(TENTH, rounding=ROUND_HALF_UP)


__all__ = [
    "coerce_decimal",
    "parse_decimal",
    "round_money",
    "round_percentage",
]

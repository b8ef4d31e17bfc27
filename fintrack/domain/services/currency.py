"""Currency conversion and display formatting.

Amounts are stored in the canonical currency (USD). Conversion goes through
the static rate table; it never raises, invalid amounts convert to zero.
"""

from decimal import Decimal, InvalidOperation, ROUND_HALF_UP
from logging import Logger

from fintrack.domain.constants import (
    CANONICAL_CURRENCY,
    CURRENCY_SYMBOLS,
    EXCHANGE_RATES,
    ZERO_DECIMAL_CURRENCIES,
    CurrencyCode,
)
from fintrack.domain.errors import InvalidNumericInput
from fintrack.domain.services.normalization import normalize_currency_code
from fintrack.utils.decimal_utils import (
    coerce_decimal,
    parse_decimal,
    round_money,
)


def resolve_currency(
    currency,
    logger: Logger | None = None,
) -> CurrencyCode:
    """Return a CurrencyCode, falling back to the canonical currency.

    Args:
        currency: CurrencyCode member or code string.
        logger: Optional logger used for warnings.

    Returns:
        CurrencyCode: Resolved currency.
    """
    resolved = normalize_currency_code(currency)
    if resolved is None:
        if logger is not None:
            logger.warning(
                f"Unsupported currency {currency!r}, "
                f"using {CANONICAL_CURRENCY.value}"
            )
        return CANONICAL_CURRENCY
    return resolved


def convert(
    amount,
    from_currency,
    to_currency,
    logger: Logger | None = None,
) -> Decimal:
    """Convert an amount between two currencies.

    Args:
        amount: Amount in ``from_currency``.
        from_currency: Source currency.
        to_currency: Target currency.
        logger: Optional logger used for warnings.

    Returns:
        Decimal: Converted amount rounded to cents, or 0 for invalid input.
    """
    value = coerce_decimal(amount, logger)
    source = resolve_currency(from_currency, logger)
    target = resolve_currency(to_currency, logger)
    if source == target:
        return value
    try:
        in_canonical = value / EXCHANGE_RATES[source]
        return round_money(in_canonical * EXCHANGE_RATES[target])
    except InvalidOperation:
        if logger is not None:
            logger.warning(
                f"Amount {value} is out of range for {source.value} to "
                f"{target.value}, substituting 0"
            )
        return Decimal("0")


def get_currency_symbol(currency) -> str:
    """Return the display symbol, ``$`` for unknown currencies."""
    resolved = normalize_currency_code(currency)
    if resolved is None:
        return "$"
    return CURRENCY_SYMBOLS[resolved]


def format_amount(amount, currency) -> str:
    """Format an amount already expressed in ``currency``.

    JPY and CNY are shown as grouped integers (``¥1,235``); the other
    currencies use two decimals without grouping (``$1234.50``).

    Args:
        amount: Amount in ``currency``.
        currency: Display currency.

    Returns:
        str: Symbol-prefixed amount, ``symbol + "0.00"`` for invalid input.
    """
    resolved = resolve_currency(currency)
    symbol = CURRENCY_SYMBOLS[resolved]
    try:
        value = parse_decimal(amount)
    except InvalidNumericInput:
        return f"{symbol}0.00"
    try:
        if resolved in ZERO_DECIMAL_CURRENCIES:
            whole = value.quantize(Decimal("1"), rounding=ROUND_HALF_UP)
            return f"{symbol}{whole:,}"
        return f"{symbol}{round_money(value):.2f}"
    except InvalidOperation:
        return f"{symbol}0.00"


def format_display_amount(
    amount,
    currency,
    logger: Logger | None = None,
) -> str:
    """Convert a canonical amount into ``currency`` and format it."""
    resolved = resolve_currency(currency, logger)
    try:
        parse_decimal(amount)
    except InvalidNumericInput as exc:
        if logger is not None:
            logger.warning(f"Showing 0 for invalid amount: {exc}")
        return f"{CURRENCY_SYMBOLS[resolved]}0.00"
    converted = convert(amount, CANONICAL_CURRENCY, resolved, logger)
    return format_amount(converted, resolved)


__all__ = [
    "resolve_currency",
    "convert",
    "get_currency_symbol",
    "format_amount",
    "format_display_amount",
]

"""Domain constants for currencies and transaction kinds."""

from decimal import Decimal
from enum import Enum


class CurrencyCode(str, Enum):
    """Supported display currencies."""

    USD = "USD"
    EUR = "EUR"
    GBP = "GBP"
    JPY = "JPY"
    CNY = "CNY"


class TransactionKind(str, Enum):
    """Direction of a transaction."""

    INCOME = "income"
    EXPENSE = "expense"


CANONICAL_CURRENCY = CurrencyCode.USD

# Units of each currency per 1 USD. Static on purpose: no live-rate fetch.
EXCHANGE_RATES: dict[CurrencyCode, Decimal] = {
    CurrencyCode.USD: Decimal("1"),
    CurrencyCode.EUR: Decimal("0.93"),
    CurrencyCode.GBP: Decimal("0.80"),
    CurrencyCode.JPY: Decimal("155.67"),
    CurrencyCode.CNY: Decimal("7.24"),
}

CURRENCY_SYMBOLS: dict[CurrencyCode, str] = {
    CurrencyCode.USD: "$",
    CurrencyCode.EUR: "€",
    CurrencyCode.GBP: "£",
    CurrencyCode.JPY: "¥",
    CurrencyCode.CNY: "¥",
}

ZERO_DECIMAL_CURRENCIES = frozenset({CurrencyCode.JPY, CurrencyCode.CNY})

DEFAULT_CATEGORY = "other"

ENTRY_CATEGORIES: dict[TransactionKind, tuple[str, ...]] = {
    TransactionKind.INCOME: (
        "salary",
        "bonus",
        "investment",
        "freelance",
        "other",
    ),
    TransactionKind.EXPENSE: (
        "food",
        "transport",
        "housing",
        "entertainment",
        "shopping",
        "utilities",
        "other",
    ),
}

SUPPORTED_LOCALES = ("en", "zh", "es")
DEFAULT_LOCALE = "en"


__all__ = [
    "CurrencyCode",
    "TransactionKind",
    "CANONICAL_CURRENCY",
    "EXCHANGE_RATES",
    "CURRENCY_SYMBOLS",
    "ZERO_DECIMAL_CURRENCIES",
    "DEFAULT_CATEGORY",
    "ENTRY_CATEGORIES",
    "SUPPORTED_LOCALES",
    "DEFAULT_LOCALE",
]

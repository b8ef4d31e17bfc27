"""Domain normalization helpers.

Categories and currency codes arrive from several places (database rows,
imports, user input, localized UI keys). They are normalized once at the
boundary so the aggregation code only ever sees one representation.
"""

import re

from fintrack.domain.constants import (
    DEFAULT_CATEGORY,
    DEFAULT_LOCALE,
    SUPPORTED_LOCALES,
    CurrencyCode,
)


_CATEGORY_KEY_PREFIX = re.compile(r"^(categories|category)\.")


def normalize_category(raw: str | None) -> str:
    """Normalize a category name or localization key.

    Args:
        raw: Raw category value, e.g. ``" Food "`` or ``"category.food"``.

    Returns:
        str: Lowercase category name, ``"other"`` when empty.
    """
    if not raw or not isinstance(raw, str):
        return DEFAULT_CATEGORY
    cleaned = " ".join(raw.strip().lower().split())
    cleaned = _CATEGORY_KEY_PREFIX.sub("", cleaned).strip()
    return cleaned or DEFAULT_CATEGORY


def normalize_currency_code(raw) -> CurrencyCode | None:
    """Normalize a currency code.

    Args:
        raw: CurrencyCode member or currency code string.

    Returns:
        CurrencyCode | None: Matching member, or None when unsupported.
    """
    if isinstance(raw, CurrencyCode):
        return raw
    if not raw or not isinstance(raw, str):
        return None
    try:
        return CurrencyCode(raw.strip().upper())
    except ValueError:
        return None


def normalize_locale(raw: str | None) -> str:
    """Reduce a locale tag such as ``zh-CN`` to a supported language."""
    if not raw:
        return DEFAULT_LOCALE
    language = raw.strip().lower().replace("_", "-").split("-")[0]
    return language if language in SUPPORTED_LOCALES else DEFAULT_LOCALE


__all__ = [
    "normalize_category",
    "normalize_currency_code",
    "normalize_locale",
]

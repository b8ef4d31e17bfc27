"""Tests for domain normalization helpers."""

from fintrack.domain.constants import CurrencyCode
from fintrack.domain.services.normalization import (
    normalize_category,
    normalize_currency_code,
    normalize_locale,
)


def test_normalize_category_cleans_names_and_keys() -> None:
    """Names and localization keys should map to one lowercase form."""
    assert normalize_category("  Eating   Out ") == "eating out"
    assert normalize_category("category.Transport") == "transport"
    assert normalize_category("categories.rent") == "rent"


def test_normalize_category_defaults_to_other() -> None:
    """Empty categories should fall back to other."""
    assert normalize_category(None) == "other"
    assert normalize_category("   ") == "other"
    assert normalize_category("category.") == "other"


def test_normalize_currency_code() -> None:
    """Codes should be matched case-insensitively."""
    assert normalize_currency_code(" cny ") == CurrencyCode.CNY
    assert normalize_currency_code(CurrencyCode.GBP) == CurrencyCode.GBP
    assert normalize_currency_code("BTC") is None
    assert normalize_currency_code(None) is None


def test_normalize_locale() -> None:
    """Locale tags should reduce to a supported language."""
    assert normalize_locale("zh-CN") == "zh"
    assert normalize_locale("es_ES") == "es"
    assert normalize_locale("fr") == "en"
    assert normalize_locale(None) == "en"

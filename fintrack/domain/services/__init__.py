"""Domain services package."""

from .advice import (
    extract_points,
    get_suggested_questions,
    get_suggestions,
    render_financial_summary,
)
from .aggregation import aggregate_by_category, top_category, total_of
from .bills import parse_bills
from .currency import (
    convert,
    format_amount,
    format_display_amount,
    get_currency_symbol,
    resolve_currency,
)
from .goals import calculate_progress, resolve_goal_status, validate_goal
from .normalization import (
    normalize_category,
    normalize_currency_code,
    normalize_locale,
)
from .summary import build_summary
from .transactions import validate_transaction

__all__ = [
    "aggregate_by_category",
    "build_summary",
    "calculate_progress",
    "convert",
    "extract_points",
    "format_amount",
    "format_display_amount",
    "get_currency_symbol",
    "get_suggested_questions",
    "get_suggestions",
    "normalize_category",
    "normalize_currency_code",
    "normalize_locale",
    "parse_bills",
    "render_financial_summary",
    "resolve_currency",
    "resolve_goal_status",
    "top_category",
    "total_of",
    "validate_goal",
    "validate_transaction",
]

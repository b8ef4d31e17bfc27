"""Tests for Decimal helpers."""

from decimal import Decimal
from unittest.mock import MagicMock

import pytest

from fintrack.domain.errors import InvalidNumericInput
from fintrack.utils.decimal_utils import (
    coerce_decimal,
    parse_decimal,
    round_money,
    round_percentage,
)


def test_parse_decimal_accepts_numbers_and_strings() -> None:
    """Numbers and numeric strings should parse exactly."""
    assert parse_decimal(12) == Decimal("12")
    assert parse_decimal(0.1) == Decimal("0.1")
    assert parse_decimal(" 3.50 ") == Decimal("3.50")
    assert parse_decimal(Decimal("7")) == Decimal("7")


@pytest.mark.parametrize(
    "value",
    [None, True, "abc", "", float("nan"), float("inf"), Decimal("NaN")],
)
def test_parse_decimal_rejects_invalid_values(value) -> None:
    """Missing, non-finite, and non-numeric values should raise."""
    with pytest.raises(InvalidNumericInput):
        parse_decimal(value)


def test_coerce_decimal_substitutes_zero_and_logs() -> None:
    """Invalid values should become zero with a warning."""
    logger = MagicMock()

    assert coerce_decimal("oops", logger) == Decimal("0")
    assert coerce_decimal(None, logger) == Decimal("0")
    assert coerce_decimal("4.20", logger) == Decimal("4.20")
    logger.warning.assert_called_once()


def test_rounding_helpers_round_half_up() -> None:
    """Rounding should go half away from zero."""
    assert round_money(Decimal("2.345")) == Decimal("2.35")
    assert round_money(Decimal("-2.345")) == Decimal("-2.35")
    assert round_percentage(Decimal("33.35")) == Decimal("33.4")

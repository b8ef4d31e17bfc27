"""Tests for the Period model."""

from datetime import date

import pytest

from fintrack.domain.models import Period


def test_month_of_covers_whole_month() -> None:
    """month_of should span the first to the last day of the month."""
    assert Period.month_of(date(2024, 2, 10)) == Period(
        start=date(2024, 2, 1),
        end=date(2024, 2, 29),
    )


def test_contains_is_inclusive() -> None:
    """Both boundaries should be inside the period."""
    period = Period(start=date(2025, 3, 1), end=date(2025, 3, 31))

    assert period.contains(date(2025, 3, 1))
    assert period.contains(date(2025, 3, 31))
    assert not period.contains(date(2025, 2, 28))
    assert not period.contains(date(2025, 4, 1))


def test_end_before_start_is_rejected() -> None:
    """An inverted range should raise ValueError."""
    with pytest.raises(ValueError):
        Period(start=date(2025, 3, 2), end=date(2025, 3, 1))

"""Tests for savings goal rules."""

from decimal import Decimal

import pytest

from fintrack.domain.errors import InvalidGoalError
from fintrack.domain.models import FinancialGoal, GoalStatus
from fintrack.domain.services.goals import (
    calculate_progress,
    resolve_goal_status,
    validate_goal,
)


def test_calculate_progress_percentage() -> None:
    """Progress should be a one-decimal percentage of the target."""
    assert calculate_progress(Decimal("50"), Decimal("200")) == Decimal("25.0")
    assert calculate_progress(1, 3) == Decimal("33.3")


def test_calculate_progress_is_capped() -> None:
    """Overshooting the target should cap at 100."""
    assert calculate_progress(Decimal("300"), Decimal("200")) == Decimal("100")


def test_calculate_progress_handles_invalid_targets() -> None:
    """Zero or invalid targets should give zero progress."""
    assert calculate_progress(Decimal("10"), Decimal("0")) == Decimal("0")
    assert calculate_progress("x", Decimal("100")) == Decimal("0")
    assert calculate_progress(Decimal("10"), None) == Decimal("0")


def test_resolve_goal_status_marks_reached_goals_completed() -> None:
    """Reaching the target should complete the goal."""
    reached = FinancialGoal(
        id=1,
        name="Trip",
        target_amount=Decimal("1000"),
        current_amount=Decimal("1000"),
    )
    pending = FinancialGoal(
        id=2,
        name="Car",
        target_amount=Decimal("5000"),
        current_amount=Decimal("10"),
    )

    assert resolve_goal_status(reached) == GoalStatus.COMPLETED
    assert resolve_goal_status(pending) == GoalStatus.ACTIVE


def test_validate_goal_returns_clean_values() -> None:
    """Valid input should be stripped and parsed."""
    assert validate_goal("  Emergency fund ", "1500.50") == (
        "Emergency fund",
        Decimal("1500.50"),
    )


@pytest.mark.parametrize(
    ("name", "target"),
    [
        ("", "100"),
        ("   ", "100"),
        ("Trip", "0"),
        ("Trip", "-5"),
        ("Trip", None),
    ],
)
def test_validate_goal_rejects_invalid_input(name, target) -> None:
    """Blank names and non-positive targets should be rejected."""
    with pytest.raises(InvalidGoalError):
        validate_goal(name, target)

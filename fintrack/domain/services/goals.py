"""Savings goal rules."""

from decimal import Decimal

from fintrack.domain.errors import InvalidGoalError, InvalidNumericInput
from fintrack.domain.models import FinancialGoal, GoalStatus
from fintrack.utils.decimal_utils import (
    coerce_decimal,
    parse_decimal,
    round_percentage,
)


def calculate_progress(current, target) -> Decimal:
    """Return progress towards a target as a 0-100 percentage.

    Args:
        current: Amount saved so far.
        target: Goal target amount.

    Returns:
        Decimal: Progress with one decimal, capped at 100; 0 when the
            target is zero or either value is invalid.
    """
    try:
        current_value = parse_decimal(current)
        target_value = parse_decimal(target)
    except InvalidNumericInput:
        return Decimal("0")
    if target_value <= 0:
        return Decimal("0")
    progress = current_value / target_value * Decimal("100")
    progress = min(max(progress, Decimal("0")), Decimal("100"))
    return round_percentage(progress)


def resolve_goal_status(goal: FinancialGoal) -> GoalStatus:
    """Mark a goal completed once the target is reached."""
    target = coerce_decimal(goal.target_amount)
    current = coerce_decimal(goal.current_amount)
    if target > 0 and current >= target:
        return GoalStatus.COMPLETED
    return goal.status


def validate_goal(name: str | None, target_amount) -> tuple[str, Decimal]:
    """Validate user input for a goal.

    Args:
        name: Goal name.
        target_amount: Raw target amount.

    Returns:
        tuple[str, Decimal]: Stripped name and parsed target.

    Raises:
        InvalidGoalError: If the name is blank or the target is not a
            positive number.
    """
    cleaned = (name or "").strip()
    if not cleaned:
        raise InvalidGoalError("Goal name is required")
    try:
        target = parse_decimal(target_amount)
    except InvalidNumericInput as exc:
        raise InvalidGoalError(f"Invalid goal target: {exc}") from exc
    if target <= 0:
        raise InvalidGoalError("Goal target must be positive")
    return cleaned, target


__all__ = ["calculate_progress", "resolve_goal_status", "validate_goal"]

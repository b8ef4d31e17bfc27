"""Domain models for savings goals."""

from dataclasses import dataclass, field
from datetime import date, datetime
from decimal import Decimal
from enum import Enum


class GoalStatus(str, Enum):
    ACTIVE = "active"
    COMPLETED = "completed"


@dataclass(frozen=True)
class FinancialGoal:
    """A savings target tracked by the user.

    Attributes:
        id: Backend identifier, None before the goal is stored.
        name: Short goal name.
        target_amount: Amount to reach, canonical currency.
        current_amount: Amount saved so far, canonical currency.
        deadline: Optional target date.
        description: Free-text description or imported suggestion.
        status: Active or completed.
        created_at: Creation timestamp.
    """

    id: int | None
    name: str
    target_amount: Decimal
    current_amount: Decimal = Decimal("0")
    deadline: date | None = None
    description: str = ""
    status: GoalStatus = GoalStatus.ACTIVE
    created_at: datetime = field(default_factory=datetime.now)


__all__ = ["GoalStatus", "FinancialGoal"]

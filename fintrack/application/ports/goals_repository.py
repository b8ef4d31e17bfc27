"""Port for savings goal persistence."""

from typing import Protocol

from fintrack.domain.models import FinancialGoal


class GoalsRepositoryPort(Protocol):
    """Port exposing CRUD over the user's savings goals."""

    def list_goals(self) -> list[FinancialGoal]:
        """Return all goals, newest first."""

    def get_goal(self, goal_id: int) -> FinancialGoal | None:
        """Return a goal by id, or None when missing."""

    def add_goal(self, goal: FinancialGoal) -> FinancialGoal:
        """Insert a goal and return it with its new id."""

    def update_goal(self, goal: FinancialGoal) -> FinancialGoal:
        """Replace a stored goal."""

    def delete_goal(self, goal_id: int) -> bool:
        """Delete a goal; return False when nothing was deleted."""


__all__ = ["GoalsRepositoryPort"]

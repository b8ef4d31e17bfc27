"""Use case for creating, editing, and deleting savings goals."""

from dataclasses import replace
from datetime import date
from decimal import Decimal

from fintrack.application.ports.goals_repository import GoalsRepositoryPort
from fintrack.domain.errors import GoalNotFoundError
from fintrack.domain.models import FinancialGoal, GoalStatus
from fintrack.domain.services.goals import resolve_goal_status, validate_goal
from fintrack.infrastructure.logging.logger import (
    get_app_logger,
    get_usage_logger,
)
from fintrack.utils.decimal_utils import coerce_decimal


class ManageGoalsUseCase:
    """CRUD over savings goals with validation and status tracking."""

    def __init__(
        self,
        goals_repository: GoalsRepositoryPort,
        logger=None,
        usage_logger=None,
    ) -> None:
        """Initialize the use case.

        Args:
            goals_repository: Port persisting the user's goals.
            logger: Optional logger compatible with logging.Logger-like API.
            usage_logger: Optional logger recording user actions.
        """
        self._goals_repository = goals_repository
        self._logger = logger or get_app_logger()
        self._usage_logger = usage_logger or get_usage_logger()

    def list_goals(self) -> list[FinancialGoal]:
        """Return stored goals with their status brought up to date."""
        goals = self._goals_repository.list_goals()
        return [
            replace(goal, status=resolve_goal_status(goal)) for goal in goals
        ]

    def create_goal(
        self,
        name: str,
        target_amount,
        current_amount=Decimal("0"),
        deadline: date | None = None,
        description: str = "",
    ) -> FinancialGoal:
        """Validate and store a new goal.

        Raises:
            InvalidGoalError: If the name is blank or the target invalid.
        """
        cleaned_name, target = validate_goal(name, target_amount)
        goal = FinancialGoal(
            id=None,
            name=cleaned_name,
            target_amount=target,
            current_amount=coerce_decimal(current_amount, self._logger),
            deadline=deadline,
            description=description or "",
        )
        goal = replace(goal, status=resolve_goal_status(goal))
        stored = self._goals_repository.add_goal(goal)
        self._usage_logger.info(f"Goal created: id={stored.id}")
        return stored

    def update_goal(
        self,
        goal_id: int,
        name: str,
        target_amount,
        current_amount,
        deadline: date | None = None,
        description: str = "",
        status: GoalStatus | None = None,
    ) -> FinancialGoal:
        """Replace an existing goal.

        Raises:
            GoalNotFoundError: If the goal does not exist.
            InvalidGoalError: If the name is blank or the target invalid.
        """
        existing = self._require_goal(goal_id)
        cleaned_name, target = validate_goal(name, target_amount)
        goal = replace(
            existing,
            name=cleaned_name,
            target_amount=target,
            current_amount=coerce_decimal(current_amount, self._logger),
            deadline=deadline,
            description=description or "",
            status=status or GoalStatus.ACTIVE,
        )
        goal = replace(goal, status=resolve_goal_status(goal))
        stored = self._goals_repository.update_goal(goal)
        self._usage_logger.info(
            f"Goal updated: id={goal_id}, status={stored.status.value}"
        )
        return stored

    def delete_goal(self, goal_id: int) -> None:
        """Delete a goal.

        Raises:
            GoalNotFoundError: If nothing was deleted.
        """
        if not self._goals_repository.delete_goal(goal_id):
            raise GoalNotFoundError(f"Goal {goal_id} not found")
        self._usage_logger.info(f"Goal deleted: id={goal_id}")

    def _require_goal(self, goal_id: int) -> FinancialGoal:
        goal = self._goals_repository.get_goal(goal_id)
        if goal is None:
            self._logger.warning(f"Goal {goal_id} not found")
            raise GoalNotFoundError(f"Goal {goal_id} not found")
        return goal


__all__ = ["ManageGoalsUseCase"]

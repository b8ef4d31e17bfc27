"""SQLAlchemy-backed repository for savings goals."""

from dataclasses import replace
from datetime import date, datetime

from sqlalchemy import text

from fintrack.application.ports.database import DatabaseEnginePort
from fintrack.application.ports.goals_repository import GoalsRepositoryPort
from fintrack.domain.models import FinancialGoal, GoalStatus, UserSession
from fintrack.utils.decimal_utils import coerce_decimal


GOAL_COLUMNS = """
    id, name, target_amount, current_amount, deadline, description,
    status, created_at
"""

SELECT_GOALS_SQL = text(
    f"""
    SELECT {GOAL_COLUMNS}
    FROM financial_goals
    WHERE user_id = :user_id
    ORDER BY created_at DESC, id DESC
    """
)

SELECT_GOAL_SQL = text(
    f"""
    SELECT {GOAL_COLUMNS}
    FROM financial_goals
    WHERE user_id = :user_id AND id = :goal_id
    """
)

INSERT_GOAL_SQL = text(
    """
    INSERT INTO financial_goals (
        user_id,
        name,
        target_amount,
        current_amount,
        deadline,
        description,
        status,
        created_at
    )
    VALUES (
        :user_id,
        :name,
        :target_amount,
        :current_amount,
        :deadline,
        :description,
        :status,
        :created_at
    )
    """
)

UPDATE_GOAL_SQL = text(
    """
    UPDATE financial_goals
    SET name = :name,
        target_amount = :target_amount,
        current_amount = :current_amount,
        deadline = :deadline,
        description = :description,
        status = :status
    WHERE user_id = :user_id AND id = :goal_id
    """
)

DELETE_GOAL_SQL = text(
    """
    DELETE FROM financial_goals
    WHERE user_id = :user_id AND id = :goal_id
    """
)


class SqlAlchemyGoalsRepository(GoalsRepositoryPort):
    """Goals repository scoped to one user session."""

    def __init__(
        self,
        db_port: DatabaseEnginePort,
        session: UserSession,
    ) -> None:
        """Initialize the repository.

        Args:
            db_port: Port providing access to the finance engine.
            session: User whose goals are read and written.
        """
        self._db_port = db_port
        self._session = session

    def list_goals(self) -> list[FinancialGoal]:
        engine = self._db_port.get_engine()
        with engine.connect() as conn:
            rows = conn.execute(
                SELECT_GOALS_SQL,
                {"user_id": self._session.user_id},
            ).all()
        return [self._to_goal(row) for row in rows]

    def get_goal(self, goal_id: int) -> FinancialGoal | None:
        engine = self._db_port.get_engine()
        with engine.connect() as conn:
            row = conn.execute(
                SELECT_GOAL_SQL,
                {"user_id": self._session.user_id, "goal_id": goal_id},
            ).first()
        if row is None:
            return None
        return self._to_goal(row)

    def add_goal(self, goal: FinancialGoal) -> FinancialGoal:
        params = self._to_params(goal)
        params["created_at"] = goal.created_at
        engine = self._db_port.get_engine()
        with engine.begin() as conn:
            result = conn.execute(INSERT_GOAL_SQL, params)
            goal_id = result.lastrowid
        return replace(goal, id=goal_id)

    def update_goal(self, goal: FinancialGoal) -> FinancialGoal:
        params = self._to_params(goal)
        params["goal_id"] = goal.id
        engine = self._db_port.get_engine()
        with engine.begin() as conn:
            conn.execute(UPDATE_GOAL_SQL, params)
        return goal

    def delete_goal(self, goal_id: int) -> bool:
        engine = self._db_port.get_engine()
        with engine.begin() as conn:
            result = conn.execute(
                DELETE_GOAL_SQL,
                {"user_id": self._session.user_id, "goal_id": goal_id},
            )
        return result.rowcount > 0

    def _to_params(self, goal: FinancialGoal) -> dict:
        return {
            "user_id": self._session.user_id,
            "name": goal.name,
            "target_amount": goal.target_amount,
            "current_amount": goal.current_amount,
            "deadline": goal.deadline,
            "description": goal.description,
            "status": goal.status.value,
        }

    @staticmethod
    def _to_goal(row) -> FinancialGoal:
        return FinancialGoal(
            id=row.id,
            name=row.name,
            target_amount=coerce_decimal(row.target_amount),
            current_amount=coerce_decimal(row.current_amount),
            deadline=_coerce_optional_date(row.deadline),
            description=row.description or "",
            status=GoalStatus(row.status or GoalStatus.ACTIVE.value),
            created_at=_coerce_datetime(row.created_at),
        )


def _coerce_optional_date(value) -> date | None:
    if not value:
        return None
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    return date.fromisoformat(str(value)[:10])


def _coerce_datetime(value) -> datetime:
    if isinstance(value, datetime):
        return value
    if isinstance(value, date):
        return datetime(value.year, value.month, value.day)
    if value:
        return datetime.fromisoformat(str(value))
    return datetime.now()


__all__ = ["SqlAlchemyGoalsRepository"]

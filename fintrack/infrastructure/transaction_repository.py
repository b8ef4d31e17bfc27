"""SQLAlchemy-backed store for income and expense transactions."""

from collections.abc import Sequence
from dataclasses import replace
from datetime import date, datetime

from sqlalchemy import text

from fintrack.application.ports.database import DatabaseEnginePort
from fintrack.application.ports.transaction_store import TransactionStorePort
from fintrack.domain.constants import TransactionKind
from fintrack.domain.models import (
    ImportedTransaction,
    Transaction,
    UserSession,
)
from fintrack.domain.services.normalization import normalize_category
from fintrack.infrastructure.logging.logger import get_app_logger
from fintrack.utils.decimal_utils import coerce_decimal


TABLES = {
    TransactionKind.INCOME: "income",
    TransactionKind.EXPENSE: "expenses",
}


def _insert_sql(table: str):
    return text(
        f"""
        INSERT INTO {table} (
            user_id,
            amount,
            category,
            date,
            description,
            notes
        )
        VALUES (
            :user_id,
            :amount,
            :category,
            :date,
            :description,
            :notes
        )
        """
    )


class SqlAlchemyTransactionStore(TransactionStorePort):
    """Transaction store scoped to one user session."""

    def __init__(
        self,
        db_port: DatabaseEnginePort,
        session: UserSession,
        logger=None,
    ) -> None:
        """Initialize the store.

        Args:
            db_port: Port providing access to the finance engine.
            session: User whose rows are read and written.
            logger: Optional logger compatible with logging.Logger-like API.
        """
        self._db_port = db_port
        self._session = session
        self._logger = logger or get_app_logger()

    def get_transactions(
        self,
        kind: TransactionKind,
        period_start: date | None,
        period_end: date | None,
    ) -> list[Transaction]:
        query = self._build_select_query(kind, period_start, period_end)
        params = self._build_params(period_start, period_end)
        engine = self._db_port.get_engine()
        with engine.connect() as conn:
            rows = conn.execute(query, params).all()
        return [self._to_transaction(row, kind) for row in rows]

    def add_transaction(self, transaction: Transaction) -> Transaction:
        params = {
            "user_id": self._session.user_id,
            "amount": transaction.amount,
            "category": normalize_category(transaction.category),
            "date": transaction.date,
            "description": transaction.description,
            "notes": transaction.notes,
        }
        engine = self._db_port.get_engine()
        with engine.begin() as conn:
            result = conn.execute(
                _insert_sql(TABLES[transaction.kind]),
                params,
            )
            transaction_id = result.lastrowid
        self._logger.info(
            f"Inserted {transaction.kind.value} {transaction_id} for user "
            f"{self._session.user_id}"
        )
        return replace(
            transaction,
            id=transaction_id,
            category=params["category"],
        )

    def add_transactions(
        self,
        transactions: Sequence[ImportedTransaction],
    ) -> int:
        batches: dict[TransactionKind, list[dict]] = {}
        for transaction in transactions:
            batches.setdefault(transaction.kind, []).append(
                {
                    "user_id": self._session.user_id,
                    "amount": transaction.amount,
                    "category": normalize_category(transaction.category),
                    "date": transaction.date,
                    "description": transaction.description,
                    "notes": f"Imported from {transaction.source}",
                }
            )
        engine = self._db_port.get_engine()
        with engine.begin() as conn:
            for kind, rows in batches.items():
                conn.execute(_insert_sql(TABLES[kind]), rows)
        inserted = sum(len(rows) for rows in batches.values())
        self._logger.info(
            f"Inserted {inserted} transactions for user "
            f"{self._session.user_id}"
        )
        return inserted

    def _to_transaction(self, row, kind: TransactionKind) -> Transaction:
        return Transaction(
            id=row.id,
            amount=coerce_decimal(row.amount, self._logger),
            category=normalize_category(row.category),
            date=self._coerce_date(row.date),
            description=row.description or "",
            kind=kind,
            notes=getattr(row, "notes", None),
        )

    @staticmethod
    def _coerce_date(value) -> date:
        if isinstance(value, datetime):
            return value.date()
        if isinstance(value, date):
            return value
        return date.fromisoformat(str(value)[:10])

    @staticmethod
    def _build_select_query(
        kind: TransactionKind,
        period_start: date | None,
        period_end: date | None,
    ):
        base_sql = f"""
        SELECT id, amount, category, date, description, notes
        FROM {TABLES[kind]}
        WHERE user_id = :user_id
        """
        if period_start:
            base_sql += " AND date >= :start_date"
        if period_end:
            base_sql += " AND date <= :end_date"
        base_sql += " ORDER BY date DESC, id DESC"
        return text(base_sql)

    def _build_params(
        self,
        period_start: date | None,
        period_end: date | None,
    ) -> dict:
        params: dict = {"user_id": self._session.user_id}
        if period_start:
            params["start_date"] = period_start
        if period_end:
            params["end_date"] = period_end
        return params


__all__ = ["SqlAlchemyTransactionStore", "TABLES"]

"""Domain models for raw transactions and periods."""

import calendar
from dataclasses import dataclass
from datetime import date
from decimal import Decimal

from fintrack.domain.constants import TransactionKind


@dataclass(frozen=True)
class Transaction:
    """A single income or expense entry.

    Attributes:
        id: Backend identifier.
        amount: Amount in the canonical currency (USD).
        category: Category name, normalized at the repository boundary.
        date: Calendar date of the transaction.
        description: Free-text description.
        kind: Income or expense.
        notes: Optional note, e.g. the import source.
    """

    id: int | str | None
    amount: Decimal
    category: str
    date: date
    description: str
    kind: TransactionKind
    notes: str | None = None


@dataclass(frozen=True)
class ImportedTransaction:
    """Transaction parsed from a payment platform export."""

    reference: str
    amount: Decimal
    category: str
    date: date
    description: str
    kind: TransactionKind
    source: str


@dataclass(frozen=True)
class Period:
    """Inclusive calendar date range."""

    start: date
    end: date

    def __post_init__(self) -> None:
        if self.end < self.start:
            raise ValueError(
                f"Period end {self.end} is before start {self.start}"
            )

    @classmethod
    def month_of(cls, day: date) -> "Period":
        """Return the calendar month containing ``day``."""
        last_day = calendar.monthrange(day.year, day.month)[1]
        return cls(
            start=date(day.year, day.month, 1),
            end=date(day.year, day.month, last_day),
        )

    def contains(self, day: date) -> bool:
        """Return whether ``day`` falls inside the range."""
        return self.start <= day <= self.end


@dataclass(frozen=True)
class UserSession:
    """Explicit per-user context passed to repositories."""

    user_id: int
    token: str | None = None


__all__ = ["Transaction", "ImportedTransaction", "Period", "UserSession"]

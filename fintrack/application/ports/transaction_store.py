"""Port for reading and writing income and expense transactions."""

from collections.abc import Sequence
from datetime import date
from typing import Protocol

from fintrack.domain.constants import TransactionKind
from fintrack.domain.models import ImportedTransaction, Transaction


class TransactionStorePort(Protocol):
    """Port exposing the user's transactions."""

    def get_transactions(
        self,
        kind: TransactionKind,
        period_start: date | None,
        period_end: date | None,
    ) -> list[Transaction]:
        """Return transactions of one kind inside the inclusive window."""

    def add_transaction(self, transaction: Transaction) -> Transaction:
        """Store one transaction and return it with its new id."""

    def add_transactions(
        self,
        transactions: Sequence[ImportedTransaction],
    ) -> int:
        """Store imported transactions and return how many were written."""


__all__ = ["TransactionStorePort"]

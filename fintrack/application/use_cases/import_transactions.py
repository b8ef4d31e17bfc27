"""Use case to import bills from payment platforms.

The bill source is mocked; this use case only parses the records, stores
them through the transaction store, and reports per-kind counts and totals.
"""

from collections.abc import Sequence
from decimal import Decimal

from fintrack.application.ports.bill_source import BillSourcePort
from fintrack.application.ports.transaction_store import TransactionStorePort
from fintrack.domain.constants import TransactionKind
from fintrack.domain.errors import InvalidImportError
from fintrack.domain.models import ImportedTransaction, ImportSummary, Period
from fintrack.domain.services.bills import parse_bills
from fintrack.infrastructure.logging.logger import (
    get_app_logger,
    get_usage_logger,
)


class ImportTransactionsUseCase:
    """Parse and store imported bills."""

    def __init__(
        self,
        transaction_store: TransactionStorePort,
        bill_source: BillSourcePort | None = None,
        logger=None,
        usage_logger=None,
    ) -> None:
        """Initialize the use case.

        Args:
            transaction_store: Port storing the imported transactions.
            bill_source: Optional port providing raw bill records.
            logger: Optional logger compatible with logging.Logger-like API.
            usage_logger: Optional logger recording user actions.
        """
        self._transaction_store = transaction_store
        self._bill_source = bill_source
        self._logger = logger or get_app_logger()
        self._usage_logger = usage_logger or get_usage_logger()

    def import_from_source(
        self,
        source: str,
        period: Period,
    ) -> ImportSummary:
        """Fetch, parse, and store bills from a payment platform.

        Args:
            source: ``"alipay"`` or ``"wechat"``.
            period: Inclusive window of bills to fetch.

        Returns:
            ImportSummary: Counts and totals of the stored batch.

        Raises:
            InvalidImportError: If no bill source is configured, the source
                is unknown, or no valid records were returned.
        """
        if self._bill_source is None:
            raise InvalidImportError("No bill source configured")
        records = self._bill_source.fetch_bills(
            source,
            period.start,
            period.end,
        )
        self._logger.info(f"Fetched {len(records)} bill records from {source}")
        transactions = parse_bills(records, source, self._logger)
        return self.execute(transactions)

    def execute(
        self,
        transactions: Sequence[ImportedTransaction],
    ) -> ImportSummary:
        """Store parsed transactions.

        Args:
            transactions: Parsed transactions of both kinds.

        Returns:
            ImportSummary: Counts and totals per kind.

        Raises:
            InvalidImportError: If the batch is empty.
        """
        if not transactions:
            raise InvalidImportError("No transactions to import")
        income = [
            t for t in transactions if t.kind == TransactionKind.INCOME
        ]
        expenses = [
            t for t in transactions if t.kind == TransactionKind.EXPENSE
        ]
        stored = self._transaction_store.add_transactions(transactions)
        summary = ImportSummary(
            income_count=len(income),
            income_total=sum((t.amount for t in income), Decimal("0")),
            expense_count=len(expenses),
            expense_total=sum((t.amount for t in expenses), Decimal("0")),
        )
        self._usage_logger.info(
            f"Imported {stored} transactions: "
            f"{summary.income_count} income, {summary.expense_count} expense"
        )
        return summary


__all__ = ["ImportTransactionsUseCase"]

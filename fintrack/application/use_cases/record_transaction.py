"""Use case to record a single income or expense entered by the user."""

from fintrack.application.ports.transaction_store import TransactionStorePort
from fintrack.domain.constants import TransactionKind
from fintrack.domain.errors import InvalidTransactionError
from fintrack.domain.models import Transaction
from fintrack.domain.services.transactions import validate_transaction
from fintrack.infrastructure.logging.logger import (
    get_app_logger,
    get_usage_logger,
)


class RecordTransactionUseCase:
    """Validate and store one transaction."""

    def __init__(
        self,
        transaction_store: TransactionStorePort,
        logger=None,
        usage_logger=None,
    ) -> None:
        """Initialize the use case.

        Args:
            transaction_store: Port storing the transaction.
            logger: Optional logger compatible with logging.Logger-like API.
            usage_logger: Optional logger recording user actions.
        """
        self._transaction_store = transaction_store
        self._logger = logger or get_app_logger()
        self._usage_logger = usage_logger or get_usage_logger()

    def execute(
        self,
        kind,
        amount,
        category: str | None,
        day,
        description: str = "",
        notes: str | None = None,
    ) -> Transaction:
        """Record an income or expense.

        Args:
            kind: ``TransactionKind`` or its value (``"income"``,
                ``"expense"``).
            amount: Amount in the canonical currency.
            category: Category name.
            day: Booking date, as a date or ``YYYY-MM-DD`` string.
            description: Optional free text.
            notes: Optional note stored with the row.

        Returns:
            Transaction: Stored transaction including its id.

        Raises:
            InvalidTransactionError: If the kind is unknown or a required
                field is missing or invalid.
        """
        try:
            resolved_kind = TransactionKind(kind)
        except ValueError as exc:
            raise InvalidTransactionError(
                f"Unknown transaction kind: {kind!r}"
            ) from exc
        try:
            value, cleaned_category, booked_on = validate_transaction(
                amount,
                category,
                day,
            )
        except InvalidTransactionError as exc:
            self._logger.warning(f"Rejected {resolved_kind.value}: {exc}")
            raise
        stored = self._transaction_store.add_transaction(
            Transaction(
                id=None,
                amount=value,
                category=cleaned_category,
                date=booked_on,
                description=(description or "").strip(),
                kind=resolved_kind,
                notes=notes,
            )
        )
        self._usage_logger.info(
            f"Recorded {resolved_kind.value}: id={stored.id}, "
            f"category={stored.category}"
        )
        return stored


__all__ = ["RecordTransactionUseCase"]

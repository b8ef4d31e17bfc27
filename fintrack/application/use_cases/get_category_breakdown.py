"""Use case to compute the per-category breakdown of one transaction kind."""

from fintrack.application.ports.transaction_store import TransactionStorePort
from fintrack.domain.constants import CANONICAL_CURRENCY, TransactionKind
from fintrack.domain.models import CategoryAggregate, Period
from fintrack.domain.services.aggregation import aggregate_by_category
from fintrack.domain.services.currency import convert, resolve_currency
from fintrack.infrastructure.logging.logger import get_app_logger


class GetCategoryBreakdownUseCase:
    """Aggregate income or expenses by category for a period."""

    def __init__(
        self,
        transaction_store: TransactionStorePort,
        logger=None,
    ) -> None:
        """Initialize the use case.

        Args:
            transaction_store: Port providing the user's transactions.
            logger: Optional logger compatible with logging.Logger-like API.
        """
        self._transaction_store = transaction_store
        self._logger = logger or get_app_logger()

    def execute(
        self,
        kind: TransactionKind,
        period: Period,
        target_currency=CANONICAL_CURRENCY,
    ) -> list[CategoryAggregate]:
        """Return category aggregates in the target currency.

        Args:
            kind: Income or expense.
            period: Inclusive date window.
            target_currency: Display currency for the totals.

        Returns:
            list[CategoryAggregate]: Aggregates sorted by total, descending.
        """
        transactions = self._transaction_store.get_transactions(
            kind,
            period.start,
            period.end,
        )
        self._logger.info(
            f"Fetched {len(transactions)} {kind.value} transactions "
            f"for {period.start}..{period.end}"
        )
        aggregates = aggregate_by_category(transactions, self._logger)
        currency = resolve_currency(target_currency, self._logger)
        return convert_aggregates(aggregates, currency, self._logger)


def convert_aggregates(
    aggregates: list[CategoryAggregate],
    currency,
    logger=None,
) -> list[CategoryAggregate]:
    """Express canonical aggregates in another currency.

    Shares are kept from the canonical computation so rounding in the
    conversion never changes them.
    """
    if resolve_currency(currency, logger) == CANONICAL_CURRENCY:
        return list(aggregates)
    return [
        CategoryAggregate(
            category=aggregate.category,
            total_amount=convert(
                aggregate.total_amount,
                CANONICAL_CURRENCY,
                currency,
                logger,
            ),
            percentage_of_total=aggregate.percentage_of_total,
        )
        for aggregate in aggregates
    ]


__all__ = ["GetCategoryBreakdownUseCase", "convert_aggregates"]

"""Category aggregation over transaction lists."""

from collections.abc import Iterable, Sequence
from decimal import Decimal
from logging import Logger

from fintrack.domain.models import CategoryAggregate, Transaction
from fintrack.domain.services.normalization import normalize_category
from fintrack.utils.decimal_utils import coerce_decimal, round_percentage


def aggregate_by_category(
    transactions: Iterable[Transaction],
    logger: Logger | None = None,
) -> list[CategoryAggregate]:
    """Group transactions by category and compute each category's share.

    Args:
        transactions: Transactions of a single kind, in fetch order.
        logger: Optional logger used for warnings.

    Returns:
        list[CategoryAggregate]: Aggregates sorted by total, descending.
            Equal totals keep the order in which categories first appeared.

    Raises:
        ValueError: If income and expense transactions are mixed.
    """
    totals: dict[str, Decimal] = {}
    kinds = set()
    for transaction in transactions:
        kinds.add(transaction.kind)
        category = normalize_category(transaction.category)
        amount = coerce_decimal(transaction.amount, logger)
        totals[category] = totals.get(category, Decimal("0")) + amount

    if len(kinds) > 1:
        raise ValueError(
            "Cannot aggregate income and expense transactions together"
        )

    grand_total = sum(totals.values(), Decimal("0"))
    aggregates = [
        CategoryAggregate(
            category=category,
            total_amount=amount,
            percentage_of_total=_share(amount, grand_total),
        )
        for category, amount in totals.items()
    ]
    return sorted(
        aggregates,
        key=lambda aggregate: aggregate.total_amount,
        reverse=True,
    )


def total_of(aggregates: Iterable[CategoryAggregate]) -> Decimal:
    """Return the sum of aggregate totals."""
    return sum(
        (aggregate.total_amount for aggregate in aggregates),
        Decimal("0"),
    )


def top_category(
    aggregates: Sequence[CategoryAggregate],
) -> CategoryAggregate | None:
    """Return the aggregate with the highest positive total."""
    if not aggregates:
        return None
    best = max(aggregates, key=lambda aggregate: aggregate.total_amount)
    if best.total_amount <= 0:
        return None
    return best


def _share(amount: Decimal, total: Decimal) -> Decimal:
    if total == 0:
        return Decimal("0.0")
    return round_percentage(amount / total * Decimal("100"))


__all__ = ["aggregate_by_category", "total_of", "top_category"]

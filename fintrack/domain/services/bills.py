"""Parsing of payment platform bill records.

Alipay and WeChat exports use different field names and category labels;
both are mapped onto ImportedTransaction with a normalized category.
"""

from collections.abc import Iterable, Mapping
from datetime import date, datetime
from logging import Logger

from fintrack.domain.constants import TransactionKind
from fintrack.domain.errors import InvalidImportError, InvalidNumericInput
from fintrack.domain.models import ImportedTransaction
from fintrack.domain.services.normalization import normalize_category
from fintrack.utils.decimal_utils import parse_decimal


ALIPAY = "alipay"
WECHAT = "wechat"

ALIPAY_CATEGORIES = {
    "Shopping": "shopping",
    "Food": "food",
    "Transport": "transportation",
    "Entertainment": "entertainment",
}

WECHAT_CATEGORIES = {
    "SHOPPING": "shopping",
    "RESTAURANT": "food",
    "TRANSPORT": "transportation",
    "ENTERTAINMENT": "entertainment",
}


def parse_alipay_bill(record: Mapping) -> ImportedTransaction:
    """Map an Alipay bill record onto an ImportedTransaction.

    Raises:
        InvalidImportError: If the amount or date cannot be parsed.
    """
    kind = (
        TransactionKind.INCOME
        if record.get("direction") == "in"
        else TransactionKind.EXPENSE
    )
    return ImportedTransaction(
        reference=str(record.get("tradeNo", "")),
        amount=_parse_amount(record.get("amount")),
        category=_map_category(
            record.get("category"),
            ALIPAY_CATEGORIES,
            kind,
        ),
        date=_parse_date(record.get("gmtCreate")),
        description=str(record.get("subject") or ""),
        kind=kind,
        source=ALIPAY,
    )


def parse_wechat_bill(record: Mapping) -> ImportedTransaction:
    """Map a WeChat bill record onto an ImportedTransaction.

    Raises:
        InvalidImportError: If the amount or date cannot be parsed.
    """
    kind = (
        TransactionKind.INCOME
        if record.get("income")
        else TransactionKind.EXPENSE
    )
    return ImportedTransaction(
        reference=str(record.get("transactionId", "")),
        amount=_parse_amount(record.get("fee")),
        category=_map_category(record.get("type"), WECHAT_CATEGORIES, kind),
        date=_parse_date(record.get("time")),
        description=str(record.get("description") or ""),
        kind=kind,
        source=WECHAT,
    )


def parse_bills(
    records: Iterable[Mapping],
    source: str,
    logger: Logger | None = None,
) -> list[ImportedTransaction]:
    """Parse bill records from a source, skipping malformed ones.

    Args:
        records: Raw bill records.
        source: ``"alipay"`` or ``"wechat"``.
        logger: Optional logger used to report skipped records.

    Returns:
        list[ImportedTransaction]: Parsed transactions in input order.

    Raises:
        InvalidImportError: If the source is unknown.
    """
    parsers = {ALIPAY: parse_alipay_bill, WECHAT: parse_wechat_bill}
    parser = parsers.get(source)
    if parser is None:
        raise InvalidImportError(f"Unknown bill source: {source}")
    parsed: list[ImportedTransaction] = []
    for record in records:
        try:
            parsed.append(parser(record))
        except InvalidImportError as exc:
            if logger is not None:
                logger.warning(f"Skipping {source} bill record: {exc}")
    return parsed


def _map_category(
    raw: str | None,
    mapping: Mapping[str, str],
    kind: TransactionKind,
) -> str:
    if raw in mapping:
        return mapping[raw]
    if kind == TransactionKind.INCOME:
        return "income"
    return normalize_category(None)


def _parse_amount(raw):
    try:
        amount = parse_decimal(raw)
    except InvalidNumericInput as exc:
        raise InvalidImportError(str(exc)) from exc
    return abs(amount)


def _parse_date(raw) -> date:
    if isinstance(raw, datetime):
        return raw.date()
    if isinstance(raw, date):
        return raw
    if not raw:
        raise InvalidImportError("Bill record has no date")
    try:
        return datetime.fromisoformat(str(raw).strip()).date()
    except ValueError as exc:
        raise InvalidImportError(f"Invalid bill date: {raw!r}") from exc


__all__ = [
    "ALIPAY",
    "WECHAT",
    "parse_alipay_bill",
    "parse_wechat_bill",
    "parse_bills",
]

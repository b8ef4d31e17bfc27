"""Tests for the mocked bill source."""

from datetime import date

import pytest

from fintrack.domain.errors import InvalidImportError
from fintrack.infrastructure.bill_source import MOCK_BILLS, MockBillSource


def test_fetch_bills_filters_by_window() -> None:
    """Only records inside the inclusive window should be returned."""
    records = MockBillSource().fetch_bills(
        "wechat",
        date(2025, 3, 14),
        date(2025, 3, 19),
    )

    assert [record["transactionId"] for record in records] == [
        "wechat123456",
        "wechat123457",
        "wechat123458",
    ]


def test_fetch_bills_returns_copies() -> None:
    """Callers must not be able to mutate the canned records."""
    records = MockBillSource().fetch_bills(
        "alipay",
        date(2025, 3, 1),
        date(2025, 3, 31),
    )
    records[0]["amount"] = 0

    assert MOCK_BILLS["alipay"][0]["amount"] == 25.8


def test_fetch_bills_rejects_unknown_source() -> None:
    """Unknown platforms should raise InvalidImportError."""
    with pytest.raises(InvalidImportError):
        MockBillSource().fetch_bills(
            "paypal",
            date(2025, 3, 1),
            date(2025, 3, 31),
        )

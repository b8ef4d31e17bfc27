"""Mocked payment platform bill exports.

No payment provider is contacted: the records below mimic the Alipay and
WeChat export formats and are filtered by date window.
"""

from datetime import date
from typing import Any

from fintrack.application.ports.bill_source import BillSourcePort
from fintrack.domain.errors import InvalidImportError
from fintrack.domain.models import Period
from fintrack.domain.services.bills import ALIPAY, WECHAT


MOCK_BILLS: dict[str, list[dict[str, Any]]] = {
    ALIPAY: [
        {
            "tradeNo": "alipay123456",
            "gmtCreate": "2025-03-20",
            "amount": 25.8,
            "subject": "超市购物",
            "category": "Shopping",
            "direction": "out",
        },
        {
            "tradeNo": "alipay123457",
            "gmtCreate": "2025-03-18",
            "amount": 35.5,
            "subject": "午餐",
            "category": "Food",
            "direction": "out",
        },
        {
            "tradeNo": "alipay123458",
            "gmtCreate": "2025-03-15",
            "amount": 99.0,
            "subject": "电影票",
            "category": "Entertainment",
            "direction": "out",
        },
        {
            "tradeNo": "alipay123459",
            "gmtCreate": "2025-03-10",
            "amount": 1000.0,
            "subject": "微信红包",
            "category": "Income",
            "direction": "in",
        },
    ],
    WECHAT: [
        {
            "transactionId": "wechat123456",
            "time": "2025-03-19",
            "fee": 30.0,
            "description": "网上购物",
            "type": "SHOPPING",
            "income": False,
        },
        {
            "transactionId": "wechat123457",
            "time": "2025-03-17",
            "fee": 45.5,
            "description": "晚餐",
            "type": "RESTAURANT",
            "income": False,
        },
        {
            "transactionId": "wechat123458",
            "time": "2025-03-14",
            "fee": 15.0,
            "description": "公交",
            "type": "TRANSPORT",
            "income": False,
        },
        {
            "transactionId": "wechat123459",
            "time": "2025-03-05",
            "fee": 500.0,
            "description": "工资",
            "type": "SALARY",
            "income": True,
        },
    ],
}

_DATE_FIELDS = {ALIPAY: "gmtCreate", WECHAT: "time"}


class MockBillSource(BillSourcePort):
    """Bill source returning canned records."""

    def fetch_bills(
        self,
        source: str,
        start_date: date,
        end_date: date,
    ) -> list[dict[str, Any]]:
        if source not in MOCK_BILLS:
            raise InvalidImportError(f"Unknown bill source: {source}")
        date_field = _DATE_FIELDS[source]
        window = Period(start=start_date, end=end_date)
        return [
            dict(record)
            for record in MOCK_BILLS[source]
            if window.contains(date.fromisoformat(record[date_field]))
        ]


__all__ = ["MockBillSource", "MOCK_BILLS"]

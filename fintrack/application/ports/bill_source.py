"""Port for payment platform bill exports."""

from datetime import date
from typing import Any, Protocol


class BillSourcePort(Protocol):
    """Port returning raw bill records from a payment platform."""

    def fetch_bills(
        self,
        source: str,
        start_date: date,
        end_date: date,
    ) -> list[dict[str, Any]]:
        """Return raw bill records for the inclusive window."""


__all__ = ["BillSourcePort"]

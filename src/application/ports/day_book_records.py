"""Port for reading the records summarized by the day book."""

from datetime import datetime
from typing import Protocol

from src.domain.models import BillRecord, ExpenseRecord, OrderRecord


class DayBookRecordsPort(Protocol):
    """Port exposing orders, expenses and bills.

    The optional window narrows the rows fetched from storage; callers still
    apply the local-day filter on the returned records.
    """

    def fetch_orders(
        self,
        start: datetime | None = None,
        end: datetime | None = None,
    ) -> list[OrderRecord]:
        """Return orders dated within the window (all when unbounded)."""

    def fetch_expenses(
        self,
        start: datetime | None = None,
        end: datetime | None = None,
    ) -> list[ExpenseRecord]:
        """Return expenses dated within the window (all when unbounded)."""

    def fetch_bills(
        self,
        start: datetime | None = None,
        end: datetime | None = None,
    ) -> list[BillRecord]:
        """Return bills dated within the window (all when unbounded)."""


__all__ = ["DayBookRecordsPort"]

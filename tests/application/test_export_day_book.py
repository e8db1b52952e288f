"""Tests for the day book CSV export."""

import csv
import io
from datetime import date
from decimal import Decimal

from src.application.use_cases.export_day_book import (
    CSV_HEADER,
    export_day_book_csv,
)
from src.domain.models import OrderRecord
from src.domain.services.day_book import build_day_book_report


def _rows(text: str) -> list[list[str]]:
    return list(csv.reader(io.StringIO(text)))


def test_export_lists_buckets_then_summary_rows() -> None:
    """CSV export should list the buckets followed by the summary rows."""
    orders = [
        OrderRecord(
            id=1,
            order_number="ORD-1",
            customer_name="Ana",
            status="completed",
            total_amount=Decimal("100"),
            order_date="2024-03-15T09:00:00",
        )
    ]
    report = build_day_book_report(date(2024, 3, 15), orders, [], [])

    rows = _rows(export_day_book_csv(report))

    assert rows[0] == ["Day Book", "2024-03-15"]
    assert rows[1] == CSV_HEADER
    assert rows[2] == ["Net Sales", "70.00", "30.00", "0.00", "100.00", "0.00"]
    assert [row[0] for row in rows[2:]] == [
        "Net Sales",
        "Purchase Return",
        "Payment In",
        "Income",
        "Total Receipts [A]",
        "Purchase",
        "Sales Return",
        "Payment Out",
        "Expenses",
        "Total Payments [B]",
        "Net Receipt [C = A - B]",
        "Opening balance (D)",
        "Closing Balance [E = C + D]",
    ]
    assert rows[-1] == [
        "Closing Balance [E = C + D]",
        "70.00",
        "5745.00",
        "645.00",
        "6460.00",
        "-",
    ]

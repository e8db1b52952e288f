"""Render a day book report as CSV for download."""

import csv
import io
from decimal import Decimal

from src.domain.models.day_book import AccountSplit, DayBookReport


CSV_HEADER = [
    "PMT Accounts",
    "Bank Account",
    "Counter",
    "Owner's Account",
    "Total",
    "Credit(Due)",
]


def _amount(value: Decimal) -> str:
    return f"{value.quantize(Decimal('0.01'))}"


def _summary_row(label: str, split: AccountSplit) -> list[str]:
    return [
        label,
        _amount(split.bank),
        _amount(split.counter),
        _amount(split.owner),
        _amount(split.total),
        "-",
    ]


def export_day_book_csv(report: DayBookReport) -> str:
    """Return the day book table as CSV text.

    Args:
        report: Report to export.

    Returns:
        str: CSV with bucket rows followed by receipts, payments, net
        receipt, opening and closing balance rows.
    """
    buffer = io.StringIO()
    writer = csv.writer(buffer, lineterminator="\n")
    writer.writerow(["Day Book", report.business_date.isoformat()])
    writer.writerow(CSV_HEADER)
    for entry in report.receipts:
        writer.writerow(_entry_row(entry))
    writer.writerow(_summary_row("Total Receipts [A]", report.total_receipts))
    for entry in report.payments:
        writer.writerow(_entry_row(entry))
    writer.writerow(_summary_row("Total Payments [B]", report.total_payments))
    writer.writerow(
        _summary_row("Net Receipt [C = A - B]", report.net_receipt)
    )
    writer.writerow(
        _summary_row("Opening balance (D)", report.opening_balance)
    )
    writer.writerow(
        _summary_row("Closing Balance [E = C + D]", report.closing_balance)
    )
    return buffer.getvalue()


def _entry_row(entry) -> list[str]:
    return [
        entry.category,
        _amount(entry.bank_account),
        _amount(entry.counter),
        _amount(entry.owner_account),
        _amount(entry.total),
        _amount(entry.credit_due),
    ]


__all__ = ["export_day_book_csv", "CSV_HEADER"]

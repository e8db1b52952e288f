"""Domain services computing the day book buckets and summary roll-up."""

from collections.abc import Iterable
from datetime import date
from decimal import Decimal
from logging import Logger

from src.domain.constants import (
    BILL_DATE_FIELDS,
    BILL_STATUS_PAID,
    EXPENSE_DATE_FIELDS,
    EXPENSES,
    INCOME,
    NET_SALES,
    ORDER_DATE_FIELDS,
    ORDER_STATUS_COMPLETED,
    PAYMENT_IN,
    PAYMENT_OUT,
    PURCHASE,
    PURCHASE_EXPENSE_CATEGORY,
    PURCHASE_RETURN,
    SALES_RETURN,
)
from src.domain.models.day_book import (
    AccountSplit,
    BucketingMode,
    DayBookEntry,
    DayBookReport,
    LedgerStatus,
)
from src.domain.policies.allocation import (
    DEFAULT_OPENING_BALANCE,
    AllocationPolicy,
)
from src.domain.services.date_filter import filter_records_for_day, read_field
from src.utils.decimal_utils import coerce_decimal


DOUBLE_COUNT_WARNING = (
    "Expenses bucket repeats amounts already counted in Purchase and "
    "Payment Out"
)


def _sum_field(records: Iterable, name: str) -> Decimal:
    return sum(
        (coerce_decimal(read_field(record, name)) for record in records),
        start=Decimal("0"),
    )


def _entry(category: str, split: AccountSplit) -> DayBookEntry:
    return DayBookEntry(
        category=category,
        bank_account=split.bank,
        counter=split.counter,
        owner_account=split.owner,
    )


def aggregate_day_book(
    orders: Iterable | None,
    expenses: Iterable | None,
    bills: Iterable | None,
    policy: AllocationPolicy | None = None,
) -> list[DayBookEntry]:
    """Group already-filtered records into the eight day book buckets.

    Args:
        orders: Orders of the day; only completed ones count as Net Sales.
        expenses: Expenses of the day.
        bills: Bills of the day; only paid ones count as Payment In.
        policy: Allocation ratios and bucketing mode.

    Returns:
        list[DayBookEntry]: Net Sales, Purchase Return, Payment In, Income,
        Purchase, Sales Return, Payment Out, Expenses, in that order.
    """
    policy = policy or AllocationPolicy()
    orders = list(orders or [])
    expenses = list(expenses or [])
    bills = list(bills or [])

    completed = [
        order
        for order in orders
        if read_field(order, "status") == ORDER_STATUS_COMPLETED
    ]
    paid = [
        bill
        for bill in bills
        if read_field(bill, "status") == BILL_STATUS_PAID
    ]
    purchases = [
        expense
        for expense in expenses
        if read_field(expense, "category") == PURCHASE_EXPENSE_CATEGORY
    ]
    other_expenses = [
        expense
        for expense in expenses
        if read_field(expense, "category") != PURCHASE_EXPENSE_CATEGORY
    ]

    net_sales = _sum_field(completed, "total_amount")
    payment_in = _sum_field(paid, "total_amount")
    purchase_total = _sum_field(purchases, "amount")
    payment_out = _sum_field(other_expenses, "amount")
    if policy.bucketing_mode is BucketingMode.DOUBLE_COUNT:
        expenses_total = _sum_field(expenses, "amount")
    else:
        expenses_total = Decimal("0")
    zero = AccountSplit()

    return [
        _entry(NET_SALES, policy.net_sales.apply(net_sales)),
        _entry(PURCHASE_RETURN, zero),
        _entry(PAYMENT_IN, policy.payment_in.apply(payment_in)),
        _entry(INCOME, zero),
        _entry(PURCHASE, policy.purchase.apply(purchase_total)),
        _entry(SALES_RETURN, zero),
        _entry(PAYMENT_OUT, policy.payment_out.apply(payment_out)),
        _entry(EXPENSES, policy.expenses.apply(expenses_total)),
    ]


def sum_entries(entries: Iterable[DayBookEntry]) -> AccountSplit:
    """Return the element-wise sum of entries over all account columns."""
    total = AccountSplit()
    for entry in entries:
        total = total + entry.split
    return total


def build_day_book_report(
    business_date: date,
    orders: Iterable | None,
    expenses: Iterable | None,
    bills: Iterable | None,
    *,
    policy: AllocationPolicy | None = None,
    opening_balance: AccountSplit | None = None,
    status: LedgerStatus = LedgerStatus.OPEN,
    logger: Logger | None = None,
) -> DayBookReport:
    """Filter, aggregate and roll up the day book for one business date.

    Args:
        business_date: Calendar day being summarized.
        orders: All known orders; ``None`` when not loaded yet.
        expenses: All known expenses; ``None`` when not loaded yet.
        bills: All known bills; ``None`` when not loaded yet.
        policy: Allocation ratios and bucketing mode.
        opening_balance: Balance carried into the day.
        status: Ledger status of the day.
        logger: Optional logger for flagged inconsistencies.

    Returns:
        DayBookReport: Buckets, totals, and opening/closing balances.
    """
    policy = policy or AllocationPolicy()
    opening = opening_balance or DEFAULT_OPENING_BALANCE

    day_orders = filter_records_for_day(
        orders,
        business_date,
        *ORDER_DATE_FIELDS,
    )
    day_expenses = filter_records_for_day(
        expenses,
        business_date,
        *EXPENSE_DATE_FIELDS,
    )
    day_bills = filter_records_for_day(
        bills,
        business_date,
        *BILL_DATE_FIELDS,
    )

    entries = aggregate_day_book(day_orders, day_expenses, day_bills, policy)
    total_receipts = sum_entries(entries[:4])
    total_payments = sum_entries(entries[4:8])
    net_receipt = total_receipts - total_payments

    warnings: list[str] = []
    expenses_entry = entries[7]
    if (
        policy.bucketing_mode is BucketingMode.DOUBLE_COUNT
        and expenses_entry.total != 0
    ):
        warnings.append(DOUBLE_COUNT_WARNING)
        if logger is not None:
            logger.warning(
                f"{DOUBLE_COUNT_WARNING} on {business_date.isoformat()}: "
                f"{expenses_entry.total}"
            )

    return DayBookReport(
        business_date=business_date,
        entries=entries,
        total_receipts=total_receipts,
        total_payments=total_payments,
        net_receipt=net_receipt,
        opening_balance=opening,
        closing_balance=net_receipt + opening,
        bucketing_mode=policy.bucketing_mode,
        status=status,
        warnings=warnings,
    )


__all__ = [
    "aggregate_day_book",
    "sum_entries",
    "build_day_book_report",
    "DOUBLE_COUNT_WARNING",
]

"""Source records read from the bakery store."""

from dataclasses import dataclass
from datetime import datetime
from decimal import Decimal


@dataclass(frozen=True)
class OrderRecord:
    """Customer order as stored in ``orders``."""

    id: int
    order_number: str
    customer_name: str
    status: str
    total_amount: Decimal
    order_date: datetime | None = None
    created_at: datetime | None = None


@dataclass(frozen=True)
class ExpenseRecord:
    """Expense as stored in ``expenses``."""

    id: int
    title: str
    category: str
    amount: Decimal
    date: datetime | None = None
    created_at: datetime | None = None


@dataclass(frozen=True)
class BillRecord:
    """Customer bill as stored in ``bills``."""

    id: int
    bill_number: str
    status: str
    total_amount: Decimal
    bill_date: datetime | None = None
    created_at: datetime | None = None


__all__ = ["OrderRecord", "ExpenseRecord", "BillRecord"]

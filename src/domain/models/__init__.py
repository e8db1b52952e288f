"""Domain models package."""

from .access import (
    OrderNotification,
    PermissionGrant,
    PushSubscription,
    UserRecord,
)
from .day_book import (
    AccountSplit,
    BucketingMode,
    DayBookEntry,
    DayBookReport,
    LedgerDay,
    LedgerStatus,
)
from .records import BillRecord, ExpenseRecord, OrderRecord

__all__ = [
    "AccountSplit",
    "BucketingMode",
    "DayBookEntry",
    "DayBookReport",
    "LedgerDay",
    "LedgerStatus",
    "OrderRecord",
    "ExpenseRecord",
    "BillRecord",
    "PermissionGrant",
    "UserRecord",
    "PushSubscription",
    "OrderNotification",
]

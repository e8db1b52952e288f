"""Domain package for business rules and core models."""

from .constants import DAY_BOOK_CATEGORIES, PERMISSION_ACTIONS
from .errors import (
    DayAlreadyClosedError,
    DayOutOfOrderError,
    NotificationAccessError,
    PermissionDeniedError,
    SubscriptionNotFoundError,
)
from .models import (
    AccountSplit,
    BillRecord,
    BucketingMode,
    DayBookEntry,
    DayBookReport,
    ExpenseRecord,
    LedgerDay,
    LedgerStatus,
    OrderNotification,
    OrderRecord,
    PermissionGrant,
    PushSubscription,
    UserRecord,
)
from .policies import DEFAULT_OPENING_BALANCE, AllocationPolicy, SplitRatio
from .services import (
    aggregate_day_book,
    build_day_book_report,
    filter_records_for_day,
    has_permission,
    sum_entries,
)

__all__ = [
    "AccountSplit",
    "BillRecord",
    "BucketingMode",
    "DayBookEntry",
    "DayBookReport",
    "ExpenseRecord",
    "LedgerDay",
    "LedgerStatus",
    "OrderNotification",
    "OrderRecord",
    "PermissionGrant",
    "PushSubscription",
    "UserRecord",
    "AllocationPolicy",
    "SplitRatio",
    "DEFAULT_OPENING_BALANCE",
    "DAY_BOOK_CATEGORIES",
    "PERMISSION_ACTIONS",
    "DayAlreadyClosedError",
    "DayOutOfOrderError",
    "NotificationAccessError",
    "PermissionDeniedError",
    "SubscriptionNotFoundError",
    "aggregate_day_book",
    "build_day_book_report",
    "filter_records_for_day",
    "has_permission",
    "sum_entries",
]

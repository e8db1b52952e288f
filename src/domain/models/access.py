"""Domain models for permissions and notification recipients."""

from dataclasses import dataclass
from decimal import Decimal
from typing import Any


@dataclass(frozen=True)
class PermissionGrant:
    """A ``(resource, action)`` capability granted to a session."""

    resource: str
    action: str


@dataclass(frozen=True)
class UserRecord:
    """Back-office user as stored in ``users``."""

    id: str
    email: str | None
    role: str
    first_name: str | None = None
    last_name: str | None = None


@dataclass(frozen=True)
class PushSubscription:
    """Push subscription payload stored per user."""

    user_id: str
    payload: dict[str, Any]


@dataclass(frozen=True)
class OrderNotification:
    """Summary of a newly received public order."""

    order_number: str
    customer_name: str
    customer_email: str
    customer_phone: str
    total_amount: Decimal
    delivery_date: str
    item_count: int


__all__ = [
    "PermissionGrant",
    "UserRecord",
    "PushSubscription",
    "OrderNotification",
]

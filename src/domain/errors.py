"""Domain errors raised by day book and access workflows."""

from datetime import date


class DayAlreadyClosedError(RuntimeError):
    """Raised when closing a business day that is already closed."""

    def __init__(self, business_date: date) -> None:
        super().__init__(
            f"Day book for {business_date.isoformat()} is already closed"
        )
        self.business_date = business_date


class DayOutOfOrderError(RuntimeError):
    """Raised when closing a day that precedes an already closed day."""

    def __init__(self, business_date: date, later_date: date) -> None:
        super().__init__(
            f"Cannot close {business_date.isoformat()}: "
            f"{later_date.isoformat()} is already closed"
        )
        self.business_date = business_date
        self.later_date = later_date


class PermissionDeniedError(PermissionError):
    """Raised when a session lacks the capability for an operation."""

    def __init__(self, resource: str, action: str) -> None:
        super().__init__(
            f"Insufficient permissions: {action} access to {resource}"
        )
        self.resource = resource
        self.action = action


class NotificationAccessError(PermissionError):
    """Raised when a role may not manage notifications."""


class SubscriptionNotFoundError(LookupError):
    """Raised when a user has no stored push subscription."""


__all__ = [
    "DayAlreadyClosedError",
    "DayOutOfOrderError",
    "PermissionDeniedError",
    "NotificationAccessError",
    "SubscriptionNotFoundError",
]

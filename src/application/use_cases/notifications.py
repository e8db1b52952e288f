"""Use cases for push subscriptions and new order notifications.

Delivery is a logging stub: notifications are written to the application
log and never block the workflow that triggered them.
"""

from typing import Any

from sqlalchemy.exc import SQLAlchemyError

from src.application.ports.access_repository import UsersRepositoryPort
from src.application.ports.subscription_store import SubscriptionStorePort
from src.domain.constants import NOTIFICATION_ROLES
from src.domain.errors import (
    NotificationAccessError,
    SubscriptionNotFoundError,
)
from src.domain.models.access import (
    OrderNotification,
    PushSubscription,
    UserRecord,
)
from src.infrastructure.logging.logger import get_app_logger


def _require_notification_access(role: str) -> None:
    if role not in NOTIFICATION_ROLES:
        raise NotificationAccessError(
            "Access denied. Admin, Supervisor, or Manager role required."
        )


class ManageSubscriptionUseCase:
    """Subscribe, unsubscribe and test push notifications for a user."""

    def __init__(self, store: SubscriptionStorePort, logger=None) -> None:
        """Initialize the use case.

        Args:
            store: Persistent subscription store keyed by user id.
            logger: Optional logger compatible with logging.Logger-like API.
        """
        self._store = store
        self._logger = logger or get_app_logger()

    def subscribe(
        self,
        user_id: str,
        role: str,
        payload: dict[str, Any],
    ) -> PushSubscription:
        """Store the push subscription of a user.

        Returns:
            PushSubscription: Stored subscription.

        Raises:
            NotificationAccessError: If the role may not use notifications.
        """
        _require_notification_access(role)
        self._store.set(user_id, payload)
        self._logger.info(f"Saved push subscription for user={user_id}")
        return PushSubscription(user_id=user_id, payload=payload)

    def unsubscribe(self, user_id: str, role: str) -> bool:
        """Remove the push subscription of a user.

        Returns:
            bool: True when a subscription was removed.
        """
        _require_notification_access(role)
        removed = self._store.delete(user_id)
        self._logger.info(
            f"Removed push subscription for user={user_id}: {removed}"
        )
        return removed

    def send_test(self, user_id: str, role: str) -> dict[str, Any]:
        """Send a test notification to the stored subscription.

        Returns:
            dict[str, Any]: Subscription the test was sent to.

        Raises:
            SubscriptionNotFoundError: If the user has no subscription.
        """
        _require_notification_access(role)
        subscription = self._store.get(user_id)
        if subscription is None:
            raise SubscriptionNotFoundError(
                f"No subscription found for user {user_id}"
            )
        self._logger.info(f"Test notification sent to user: {user_id}")
        return subscription


class NotifyNewOrderUseCase:
    """Announce a new public order to managers."""

    def __init__(self, users_repository: UsersRepositoryPort, logger=None):
        """Initialize the use case.

        Args:
            users_repository: Port providing back-office users.
            logger: Optional logger compatible with logging.Logger-like API.
        """
        self._users_repository = users_repository
        self._logger = logger or get_app_logger()

    def recipients(self) -> list[UserRecord]:
        """Return users with an admin, manager, or supervisor role."""
        try:
            users = self._users_repository.fetch_users()
        except SQLAlchemyError as exc:
            self._logger.error(
                f"Error getting notification recipients: {exc}"
            )
            return []
        return [user for user in users if user.role in NOTIFICATION_ROLES]

    def execute(self, notification: OrderNotification) -> list[UserRecord]:
        """Log the order notification for every recipient.

        Returns:
            list[UserRecord]: Users the notification was addressed to.
        """
        self._logger.info(
            "New public order notification: "
            f"order={notification.order_number}, "
            f"customer={notification.customer_name}, "
            f"email={notification.customer_email}, "
            f"phone={notification.customer_phone}, "
            f"total={notification.total_amount:.2f}, "
            f"delivery={notification.delivery_date}, "
            f"items={notification.item_count}"
        )
        recipients = self.recipients()
        for user in recipients:
            self._logger.info(
                f"Order {notification.order_number} notified to "
                f"{user.email or user.id} ({user.role})"
            )
        return recipients


__all__ = ["ManageSubscriptionUseCase", "NotifyNewOrderUseCase"]

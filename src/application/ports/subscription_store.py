"""Port for persisted push subscriptions keyed by user id."""

from typing import Any, Protocol


class SubscriptionStorePort(Protocol):
    """Key-value store of push subscription payloads."""

    def get(self, user_id: str) -> dict[str, Any] | None:
        """Return the subscription payload of a user, if any."""

    def set(self, user_id: str, payload: dict[str, Any]) -> None:
        """Store or replace the subscription payload of a user."""

    def delete(self, user_id: str) -> bool:
        """Remove a subscription; return True when one existed."""


__all__ = ["SubscriptionStorePort"]

"""Push subscription store persisted in the bakery database."""

import json
from typing import Any

from sqlalchemy import text

from src.application.ports.database import DatabaseEnginePort
from src.application.ports.subscription_store import SubscriptionStorePort


CREATE_PUSH_SUBSCRIPTIONS_SQL = """
CREATE TABLE IF NOT EXISTS push_subscriptions (
    user_id TEXT PRIMARY KEY,
    payload TEXT NOT NULL
)
"""

SELECT_SUBSCRIPTION_SQL = text(
    "SELECT payload FROM push_subscriptions WHERE user_id = :user_id"
)

DELETE_SUBSCRIPTION_SQL = text(
    "DELETE FROM push_subscriptions WHERE user_id = :user_id"
)

INSERT_SUBSCRIPTION_SQL = text(
    """
    INSERT INTO push_subscriptions (user_id, payload)
    VALUES (:user_id, :payload)
    """
)


class SqlAlchemySubscriptionStore(SubscriptionStorePort):
    """Subscription store surviving restarts and shared across instances."""

    def __init__(self, db_port: DatabaseEnginePort) -> None:
        """Initialize the store.

        Args:
            db_port: Port providing access to the bakery engine.
        """
        self._db_port = db_port
        self._prepared = False

    def _prepare(self) -> None:
        if self._prepared:
            return
        engine = self._db_port.get_engine()
        with engine.begin() as conn:
            conn.exec_driver_sql(CREATE_PUSH_SUBSCRIPTIONS_SQL)
        self._prepared = True

    def get(self, user_id: str) -> dict[str, Any] | None:
        self._prepare()
        engine = self._db_port.get_engine()
        with engine.connect() as conn:
            row = conn.execute(
                SELECT_SUBSCRIPTION_SQL,
                {"user_id": user_id},
            ).first()
        if row is None:
            return None
        return json.loads(row.payload)

    def set(self, user_id: str, payload: dict[str, Any]) -> None:
        self._prepare()
        params = {"user_id": user_id, "payload": json.dumps(payload)}
        engine = self._db_port.get_engine()
        with engine.begin() as conn:
            conn.execute(DELETE_SUBSCRIPTION_SQL, {"user_id": user_id})
            conn.execute(INSERT_SUBSCRIPTION_SQL, params)

    def delete(self, user_id: str) -> bool:
        self._prepare()
        engine = self._db_port.get_engine()
        with engine.begin() as conn:
            result = conn.execute(
                DELETE_SUBSCRIPTION_SQL,
                {"user_id": user_id},
            )
        return bool(result.rowcount)


__all__ = [
    "SqlAlchemySubscriptionStore",
    "CREATE_PUSH_SUBSCRIPTIONS_SQL",
]

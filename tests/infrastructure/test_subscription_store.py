"""Tests for the persistent push subscription store."""

from sqlalchemy import create_engine

from src.infrastructure.subscription_store import SqlAlchemySubscriptionStore


class _DbPort:
    def __init__(self, engine) -> None:
        self.engine = engine

    def get_engine(self):
        return self.engine


def _store(tmp_path):
    engine = create_engine(f"sqlite:///{tmp_path / 'bakery.db'}", future=True)
    return SqlAlchemySubscriptionStore(_DbPort(engine)), engine


def test_set_get_and_delete_round_trip(tmp_path) -> None:
    """The store should return what was set until it is deleted."""
    store, _ = _store(tmp_path)
    payload = {"endpoint": "https://push.example/1", "keys": {"auth": "x"}}

    assert store.get("u1") is None
    store.set("u1", payload)
    assert store.get("u1") == payload

    assert store.delete("u1") is True
    assert store.delete("u1") is False
    assert store.get("u1") is None


def test_set_replaces_existing_subscription(tmp_path) -> None:
    """Setting twice should keep only the latest subscription."""
    store, _ = _store(tmp_path)

    store.set("u1", {"endpoint": "old"})
    store.set("u1", {"endpoint": "new"})

    assert store.get("u1") == {"endpoint": "new"}


def test_subscriptions_survive_a_new_store_instance(tmp_path) -> None:
    """Subscriptions should persist across store instances."""
    store, engine = _store(tmp_path)
    store.set("u1", {"endpoint": "kept"})

    restarted = SqlAlchemySubscriptionStore(_DbPort(engine))

    assert restarted.get("u1") == {"endpoint": "kept"}

"""Tests for the permission check."""

import pytest

from src.domain.models import PermissionGrant
from src.domain.services.permissions import has_permission


def test_exact_action_grants_access() -> None:
    """A grant for the exact action should allow access."""
    grants = [PermissionGrant(resource="inventory", action="read")]

    assert has_permission(grants, "inventory", "read") is True
    assert has_permission(grants, "inventory", "write") is False


def test_read_write_grant_satisfies_every_action() -> None:
    """A read_write grant should satisfy every action."""
    grants = [PermissionGrant(resource="day_book", action="read_write")]

    assert has_permission(grants, "day_book", "read") is True
    assert has_permission(grants, "day_book", "write") is True
    assert has_permission(grants, "day_book", "read_write") is True


def test_grants_on_other_resources_do_not_match() -> None:
    """Grants on other resources should not allow access."""
    grants = [PermissionGrant(resource="orders", action="read_write")]

    assert has_permission(grants, "day_book", "read") is False


def test_empty_grants_deny() -> None:
    """No grants should mean no access."""
    assert has_permission([], "day_book", "read") is False


def test_unknown_action_is_rejected() -> None:
    """Unknown actions should raise ValueError."""
    with pytest.raises(ValueError):
        has_permission([], "day_book", "delete")

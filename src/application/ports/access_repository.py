"""Ports for users and permission grants."""

from typing import Protocol

from src.domain.models import PermissionGrant, UserRecord


class PermissionsRepositoryPort(Protocol):
    """Port exposing permission grants of a user."""

    def fetch_grants(self, user_id: str, role: str) -> list[PermissionGrant]:
        """Return grants from the user's role and direct user grants."""


class UsersRepositoryPort(Protocol):
    """Port exposing back-office users."""

    def fetch_users(self) -> list[UserRecord]:
        """Return every user."""


__all__ = ["PermissionsRepositoryPort", "UsersRepositoryPort"]

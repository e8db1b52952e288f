"""Capability resolution for back-office sessions.

Grants are fetched once per ``(user_id, role)`` and cached; callers receive
a read-only :class:`CapabilitySet` answering ``has_permission`` questions.
"""

from dataclasses import dataclass

from src.application.ports.access_repository import PermissionsRepositoryPort
from src.domain.constants import (
    ACTION_READ,
    ACTION_READ_WRITE,
    ACTION_WRITE,
    ROLE_ADMIN,
)
from src.domain.errors import PermissionDeniedError
from src.domain.models.access import PermissionGrant
from src.domain.services.permissions import has_permission
from src.infrastructure.logging.logger import get_app_logger


@dataclass(frozen=True)
class CapabilitySet:
    """Grants of one session.

    Attributes:
        grants: Capability grants resolved for the session.
        role: Role of the session user; ``admin`` is always allowed.
    """

    grants: tuple[PermissionGrant, ...] = ()
    role: str | None = None

    def has_permission(self, resource: str, action: str) -> bool:
        if self.role == ROLE_ADMIN:
            return True
        return has_permission(self.grants, resource, action)

    def can_read(self, resource: str) -> bool:
        return self.has_permission(resource, ACTION_READ)

    def can_write(self, resource: str) -> bool:
        return self.has_permission(resource, ACTION_WRITE)

    def can_read_write(self, resource: str) -> bool:
        return self.has_permission(resource, ACTION_READ_WRITE)

    def require(self, resource: str, action: str) -> None:
        """Raise unless the session may perform ``action`` on ``resource``.

        Raises:
            PermissionDeniedError: If no grant matches.
        """
        if not self.has_permission(resource, action):
            raise PermissionDeniedError(resource, action)


class ResolveCapabilitiesUseCase:
    """Resolve and cache the capability set of session users."""

    def __init__(
        self,
        permissions_repository: PermissionsRepositoryPort,
        logger=None,
    ) -> None:
        """Initialize the use case.

        Args:
            permissions_repository: Port providing permission grants.
            logger: Optional logger compatible with logging.Logger-like API.
        """
        self._permissions_repository = permissions_repository
        self._logger = logger or get_app_logger()
        self._cache: dict[tuple[str, str], CapabilitySet] = {}

    def execute(self, user_id: str, role: str) -> CapabilitySet:
        """Return the capability set of a user, querying storage once."""
        key = (user_id, role)
        cached = self._cache.get(key)
        if cached is not None:
            return cached
        if role == ROLE_ADMIN:
            grants: list[PermissionGrant] = []
        else:
            grants = self._permissions_repository.fetch_grants(user_id, role)
        capabilities = CapabilitySet(grants=tuple(grants), role=role)
        self._cache[key] = capabilities
        self._logger.info(
            f"Resolved {len(grants)} grants for user={user_id} role={role}"
        )
        return capabilities

    def invalidate(self, user_id: str | None = None) -> None:
        """Drop cached capability sets (all, or those of one user)."""
        if user_id is None:
            self._cache.clear()
            return
        for key in [key for key in self._cache if key[0] == user_id]:
            del self._cache[key]


__all__ = ["CapabilitySet", "ResolveCapabilitiesUseCase"]

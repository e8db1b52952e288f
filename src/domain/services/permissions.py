"""Permission checks over a session's capability grants."""

from collections.abc import Iterable

from src.domain.constants import ACTION_READ_WRITE, PERMISSION_ACTIONS
from src.domain.models.access import PermissionGrant


def has_permission(
    grants: Iterable[PermissionGrant],
    resource: str,
    action: str,
) -> bool:
    """Return True when a grant allows ``action`` on ``resource``.

    A grant matches when its resource is the required one and its action is
    either the required action or ``read_write``. Absence of a match denies.

    Raises:
        ValueError: If ``action`` is not read, write, or read_write.
    """
    if action not in PERMISSION_ACTIONS:
        raise ValueError(
            f"Unsupported permission action: {action}. "
            f"Expected one of {', '.join(PERMISSION_ACTIONS)}."
        )
    for grant in grants:
        if grant.resource != resource:
            continue
        if grant.action == action or grant.action == ACTION_READ_WRITE:
            return True
    return False


__all__ = ["has_permission"]

"""Streamlit helpers rendering content behind capability checks."""

from collections.abc import Callable

import streamlit as st

from src.application.use_cases.resolve_capabilities import CapabilitySet


def permission_gate(
    capabilities: CapabilitySet,
    resource: str,
    action: str,
    render: Callable[[], None],
) -> bool:
    """Render ``render`` only when the session may act on ``resource``.

    Args:
        capabilities: Capability set of the session.
        resource: Protected resource name.
        action: Required action (read, write or read_write).
        render: Callback drawing the protected content.

    Returns:
        bool: True when the content was rendered.
    """
    if not capabilities.has_permission(resource, action):
        st.error(
            "Insufficient permissions: "
            f"{action} access to {resource} is required."
        )
        return False
    render()
    return True


def read_only_gate(
    capabilities: CapabilitySet,
    resource: str,
    render: Callable[[], None],
    read_only_render: Callable[[], None] | None = None,
) -> bool:
    """Render write controls, or read-only content without write access.

    Args:
        capabilities: Capability set of the session.
        resource: Protected resource name.
        render: Callback drawing the write controls.
        read_only_render: Callback drawing the fallback; ``render`` is used
            when omitted.

    Returns:
        bool: True when the write controls were rendered.
    """
    if capabilities.can_write(resource) or capabilities.can_read_write(
        resource
    ):
        render()
        return True
    (read_only_render or render)()
    return False


__all__ = ["permission_gate", "read_only_gate"]

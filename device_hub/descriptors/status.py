"""Provider connectivity state machine."""

from __future__ import annotations

from enum import Enum

from device_hub.core.interfaces.provider import InvalidStatusTransitionError


class ProviderStatus(str, Enum):
    """Connectivity status of a provider descriptor."""

    UNINITIALIZED = "uninitialized"
    CONNECTING = "connecting"
    CONNECTED = "connected"
    ERROR = "error"
    DISCONNECTED = "disconnected"


_TRANSITIONS: dict[ProviderStatus, frozenset[ProviderStatus]] = {
    ProviderStatus.UNINITIALIZED: frozenset({ProviderStatus.CONNECTING, ProviderStatus.ERROR}),
    ProviderStatus.CONNECTING: frozenset(
        {ProviderStatus.CONNECTED, ProviderStatus.ERROR, ProviderStatus.DISCONNECTED}
    ),
    ProviderStatus.CONNECTED: frozenset({ProviderStatus.DISCONNECTED, ProviderStatus.ERROR}),
    ProviderStatus.ERROR: frozenset({ProviderStatus.CONNECTING, ProviderStatus.DISCONNECTED}),
    ProviderStatus.DISCONNECTED: frozenset({ProviderStatus.CONNECTING, ProviderStatus.ERROR}),
}


def can_transition(current: ProviderStatus, target: ProviderStatus) -> bool:
    """Check whether ``current -> target`` is a legal edge.

    Staying in the same status is always legal so the message can be
    updated without a state change.
    """
    return current == target or target in _TRANSITIONS[current]


def transition(current: ProviderStatus, target: ProviderStatus | str) -> ProviderStatus:
    """Apply a status transition.

    Args:
        current: Current status
        target: Requested status (enum member or its value)

    Returns:
        The new status

    Raises:
        ValueError: If target is not a known status
        InvalidStatusTransitionError: If the edge is not legal
    """
    target = ProviderStatus(target)
    if not can_transition(current, target):
        raise InvalidStatusTransitionError(current.value, target.value)
    return target

"""Device manager: provider aggregation, event fan-out and command routing."""

from device_hub.manager.device_manager import (
    CommandListener,
    DeviceManager,
    DuplicatePolicy,
    EventListener,
)
from device_hub.manager.event_bus import EventBus, Subscription

__all__ = [
    "DeviceManager",
    "DuplicatePolicy",
    "EventListener",
    "CommandListener",
    "EventBus",
    "Subscription",
]

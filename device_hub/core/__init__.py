"""Core abstractions for the device hub.

Modules:
    interfaces: DeviceProvider protocol and hub exceptions
    models: Provider-agnostic data models (Device, DeviceEvent, PropertyDomain, ...)
"""

from device_hub.core.interfaces import DeviceProvider, HubError
from device_hub.core.models import (
    CommandResult,
    Device,
    DeviceArea,
    DeviceEvent,
    PropertyDomain,
)

__all__ = [
    "DeviceProvider",
    "HubError",
    "CommandResult",
    "Device",
    "DeviceArea",
    "DeviceEvent",
    "PropertyDomain",
]

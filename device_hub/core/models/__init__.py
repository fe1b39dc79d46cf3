"""Provider-agnostic models for the device hub.

These models are the common language between the hub and device
providers, independent of any specific platform.
"""

from device_hub.core.models.command import CommandResult, QueryResult
from device_hub.core.models.device import (
    Device,
    DeviceArea,
    DeviceAvailability,
    DeviceEvent,
    DeviceMetadata,
)
from device_hub.core.models.domain import FieldDef, FieldType, PropertyDomain, QueryableDef
from device_hub.core.models.provider import ConfigField, ProviderInfo, ProviderOutcome

__all__ = [
    "CommandResult",
    "QueryResult",
    "Device",
    "DeviceArea",
    "DeviceAvailability",
    "DeviceEvent",
    "DeviceMetadata",
    "FieldDef",
    "FieldType",
    "PropertyDomain",
    "QueryableDef",
    "ConfigField",
    "ProviderInfo",
    "ProviderOutcome",
]

"""Provider-agnostic device models.

Defines Device for discovered devices and DeviceEvent for pushed
notifications. Providers translate their native representation into
these models so the hub never sees platform-specific shapes.
"""

from __future__ import annotations

import time
from typing import Any

from pydantic import BaseModel, Field


def _now_ms() -> int:
    """Current time as epoch milliseconds."""
    return int(time.time() * 1000)


class DeviceArea(BaseModel):
    """Room or zone a device belongs to.

    Examples:
        >>> DeviceArea(id="kitchen", name="Kitchen", floor="ground")
    """

    id: str = Field(..., description="Area identifier")

    name: str = Field(..., description="Human-readable area name")

    floor: str | None = Field(default=None, description="Floor the area is on")


class DeviceAvailability(BaseModel):
    """Reachability of a device as last reported by its provider."""

    online: bool = Field(default=True, description="Whether the device is reachable")

    last_seen: int = Field(
        default_factory=_now_ms,
        description="Last time the device was seen (epoch ms)",
    )

    source: str = Field(default="", description="Provider that reported availability")


class DeviceMetadata(BaseModel):
    """Hardware metadata, when the provider knows it."""

    manufacturer: str | None = None
    model: str | None = None
    sw_version: str | None = None
    via_device: str | None = None


class Device(BaseModel):
    """A device discovered by a provider.

    A device belongs to exactly one provider: the one that returned it
    from discovery. The hub never stores devices; every read is a fresh
    aggregation over the registered providers.

    Attributes:
        id: Globally unique device identifier
        name: Human-readable display name
        domain: Property domain name (water, schedule, ...)
        area: Room or zone the device is in
        state: Current state, keyed by the domain's state fields
        features: Capability tags drawn from the domain's features
        role: Semantic role drawn from the domain's roles
        availability: Reachability information
        metadata: Optional hardware metadata
        attributes: Additional provider-specific information

    Examples:
        >>> Device(
        ...     id="mock:main_valve",
        ...     name="Main Valve",
        ...     domain="water",
        ...     area=DeviceArea(id="utility", name="Utility Room"),
        ...     state={"valve_open": True, "flow_rate": 0.0},
        ...     features=["valve_control", "leak_detection"],
        ...     role="main_valve",
        ... )
    """

    id: str = Field(..., description="Globally unique device identifier")

    name: str = Field(..., description="Human-readable display name")

    domain: str = Field(..., description="Property domain name")

    area: DeviceArea | None = Field(default=None, description="Room or zone")

    state: dict[str, Any] = Field(
        default_factory=dict,
        description="Current state keyed by domain state fields",
    )

    features: list[str] = Field(
        default_factory=list,
        description="Capability tags advertised by the device",
    )

    role: str | None = Field(default=None, description="Semantic role of the device")

    availability: DeviceAvailability = Field(default_factory=DeviceAvailability)

    metadata: DeviceMetadata | None = None

    attributes: dict[str, Any] = Field(
        default_factory=dict,
        description="Additional provider-specific attributes",
    )

    @property
    def is_online(self) -> bool:
        """Check if the device is currently reachable."""
        return self.availability.online

    def has_feature(self, feature: str) -> bool:
        """Check if the device advertises a feature tag."""
        return feature in self.features


class DeviceEvent(BaseModel):
    """Event emitted by a provider for one of its devices.

    Examples:
        >>> DeviceEvent(
        ...     device_id="mock:leak_sensor",
        ...     type="state_changed",
        ...     data={"leak_detected": True},
        ... )
    """

    device_id: str = Field(..., description="Device the event concerns")

    type: str = Field(..., description="Event type (state_changed, motion_detected, ...)")

    data: dict[str, Any] = Field(default_factory=dict, description="Event payload")

    timestamp: int = Field(default_factory=_now_ms, description="Emission time (epoch ms)")

    domain: str | None = Field(default=None, description="Property domain of the device")

    area: str | None = Field(default=None, description="Area name of the device")

    previous_state: dict[str, Any] | None = Field(
        default=None,
        description="Device state before the change, if known",
    )

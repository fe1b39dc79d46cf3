"""Default fixtures for the mock provider.

Realistic devices across the property domains, for development and
tests without real hardware.
"""

from __future__ import annotations

import time
from typing import Any

from device_hub.core.models import Device, DeviceArea, DeviceMetadata

HOUR_MS = 3_600_000

# =============================================================================
# DEFAULT AREAS
# =============================================================================

DEFAULT_AREAS: list[DeviceArea] = [
    DeviceArea(id="living_room", name="Living Room", floor="ground"),
    DeviceArea(id="kitchen", name="Kitchen", floor="ground"),
    DeviceArea(id="utility", name="Utility Room", floor="basement"),
    DeviceArea(id="entrance", name="Entrance", floor="ground"),
    DeviceArea(id="garden", name="Garden"),
    DeviceArea(id="office", name="Office", floor="first"),
]

_AREAS = {area.id: area for area in DEFAULT_AREAS}


def default_devices(prefix: str = "mock") -> list[Device]:
    """Build a fresh copy of the default device set.

    Args:
        prefix: Prefix for device ids ('<prefix>:<slug>')

    Returns:
        List of Device fixtures
    """
    return [
        # Illumination
        Device(
            id=f"{prefix}:living_room_light",
            name="Living Room Light",
            domain="illumination",
            area=_AREAS["living_room"],
            state={"on": False, "brightness": 100, "color_temp": 300},
            features=["dimmable", "color_temp"],
            role="primary",
            metadata=DeviceMetadata(manufacturer="Mock", model="Bulb A19"),
        ),
        # Water
        Device(
            id=f"{prefix}:main_valve",
            name="Main Water Valve",
            domain="water",
            area=_AREAS["utility"],
            state={"valve_open": True, "flow_rate": 0.0, "total_consumption": 1523.4},
            features=["valve_control", "flow_sensing"],
            role="main_valve",
        ),
        Device(
            id=f"{prefix}:leak_sensor",
            name="Kitchen Leak Sensor",
            domain="water",
            area=_AREAS["kitchen"],
            state={"leak_detected": False, "temperature": 18.5},
            features=["leak_detection", "temp_sensing"],
            role="sensor",
        ),
        # Access
        Device(
            id=f"{prefix}:garden_gate",
            name="Garden Gate",
            domain="access",
            area=_AREAS["garden"],
            state={"open": False, "locked": True},
            features=["lock", "contact"],
            role="gate",
        ),
        # Safety
        Device(
            id=f"{prefix}:smoke_detector",
            name="Hallway Smoke Detector",
            domain="safety",
            area=_AREAS["entrance"],
            state={"triggered": False, "smoke_detected": False, "battery_level": 87},
            features=["smoke", "siren", "battery_monitoring"],
            role="smoke_detector",
        ),
        # Occupancy
        Device(
            id=f"{prefix}:entrance_motion",
            name="Entrance Motion Sensor",
            domain="occupancy",
            area=_AREAS["entrance"],
            state={"occupied": False, "last_motion": 0},
            features=["motion"],
            role="detector",
        ),
        # Schedule
        Device(
            id=f"{prefix}:family_calendar",
            name="Family Calendar",
            domain="schedule",
            area=_AREAS["office"],
            state={"active": False, "event_count": 0},
            features=["events", "create", "delete"],
            role="calendar",
        ),
    ]


def default_events(now_ms: int | None = None) -> list[dict[str, Any]]:
    """Build calendar event fixtures around the given time.

    Args:
        now_ms: Reference time in epoch ms (default: now)

    Returns:
        List of items shaped by the schedule domain's item fields
    """
    now_ms = now_ms if now_ms is not None else int(time.time() * 1000)
    return [
        {
            "uid": "evt-standup",
            "summary": "Standup",
            "start": now_ms + HOUR_MS,
            "end": now_ms + 2 * HOUR_MS,
            "all_day": False,
            "recurring": True,
        },
        {
            "uid": "evt-plumber",
            "summary": "Plumber visit",
            "location": "Utility Room",
            "start": now_ms + 24 * HOUR_MS,
            "end": now_ms + 26 * HOUR_MS,
            "all_day": False,
            "recurring": False,
        },
    ]

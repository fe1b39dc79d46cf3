"""Mock provider implementation.

An in-memory device provider for development and tests that needs no
real hardware.
"""

from __future__ import annotations

import asyncio
import logging
import random
from typing import Any

from device_hub.core.interfaces.provider import EventCallback, ProviderConnectionError
from device_hub.core.models import CommandResult, Device, DeviceArea, DeviceEvent
from device_hub.domains import get_domain, validate_command

from .fixtures import DEFAULT_AREAS, default_devices, default_events

logger = logging.getLogger(__name__)

CALENDAR_COMMANDS = ("create_event", "update_event", "delete_event")


class MockProvider:
    """Mock device provider for testing.

    Simulates a device backend with configurable behavior:
    - Latency simulation
    - Failure rate simulation for commands
    - Connection failure simulation
    - Pre-defined devices across property domains

    Supported commands:
        set: apply a payload of command fields to the device state
        toggle: flip the device's first boolean command field
        create_event / update_event / delete_event: calendar devices only

    Example:
        >>> provider = MockProvider(latency_ms=100, failure_rate=0.1)
        >>> await provider.connect()
        >>> await provider.execute_command("mock:main_valve", "set", {"valve_open": False})
    """

    def __init__(
        self,
        name: str = "mock",
        latency_ms: int = 0,
        failure_rate: float = 0.0,
        fail_connect: bool = False,
        devices: list[Device] | None = None,
        areas: list[DeviceArea] | None = None,
    ) -> None:
        """Initialize mock provider.

        Args:
            name: Provider name, also the device id prefix for fixtures
            latency_ms: Simulated latency per call in milliseconds
            failure_rate: Probability (0.0-1.0) that a command fails
            fail_connect: Make connect() raise ProviderConnectionError
            devices: Custom devices (default: fixtures)
            areas: Custom areas (default: fixtures)
        """
        self._name = name
        self.latency_ms = latency_ms
        self.failure_rate = failure_rate
        self.fail_connect = fail_connect

        self._seed_devices = devices
        self._devices: dict[str, Device] = {}
        self._areas = list(areas if areas is not None else DEFAULT_AREAS)
        self._events: dict[str, list[dict[str, Any]]] = {}
        self._callback: EventCallback | None = None
        self._seeded = False
        self._connected = False

        logger.info(
            f"MockProvider '{name}' initialized: latency={latency_ms}ms, "
            f"failure_rate={failure_rate}"
        )

    @property
    def name(self) -> str:
        """Provider identifier."""
        return self._name

    @property
    def connected(self) -> bool:
        """Whether connect() has completed."""
        return self._connected

    async def connect(self) -> None:
        """Load devices into the in-memory store.

        Devices are seeded on the first successful connect only; a
        reconnect keeps the state left by earlier commands.

        Raises:
            ProviderConnectionError: If fail_connect is set
        """
        await self._simulate_latency()
        if self.fail_connect:
            raise ProviderConnectionError("Simulated connection failure", self._name)

        if not self._seeded:
            self._seed()

        self._connected = True
        logger.info(f"MockProvider '{self._name}' connected with {len(self._devices)} devices")

    async def disconnect(self) -> None:
        """Disconnect from the simulated backend."""
        self._connected = False
        logger.info(f"MockProvider '{self._name}' disconnected")

    async def get_devices(self) -> list[Device]:
        """List devices (empty while disconnected)."""
        await self._simulate_latency()
        if not self._connected:
            return []
        return list(self._devices.values())

    async def get_areas(self) -> list[DeviceArea]:
        """List areas."""
        await self._simulate_latency()
        return list(self._areas)

    def on_event(self, callback: EventCallback) -> None:
        """Register the event callback."""
        self._callback = callback

    async def execute_command(
        self,
        device_id: str,
        command: str,
        params: dict[str, Any],
    ) -> CommandResult:
        """Execute a command against the in-memory state.

        Args:
            device_id: Target device
            command: Command name
            params: Command payload

        Returns:
            CommandResult indicating success/failure
        """
        await self._simulate_latency()

        if not self._connected:
            return CommandResult.failed(f"Provider {self._name} is not connected")

        device = self._devices.get(device_id)
        if device is None:
            return CommandResult.failed(f"Device {device_id} not found")

        if self._should_fail():
            logger.warning(f"Simulated failure for command {command} on {device_id}")
            return CommandResult.failed("Simulated failure")

        domain = get_domain(device.domain)
        if domain is None:
            return CommandResult.failed(f"Unknown property domain: {device.domain}")

        if command == "set":
            errors = validate_command(domain, params)
            if errors:
                return CommandResult.failed("; ".join(errors))
            changes = dict(params)
        elif command == "toggle":
            field = next(
                (k for k, f in domain.command_fields.items() if f.type == "boolean" and k in device.state),
                None,
            )
            if field is None:
                return CommandResult.failed(f"Device {device_id} has nothing to toggle")
            changes = {field: not device.state[field]}
        elif command in CALENDAR_COMMANDS and device_id in self._events:
            return self._apply_calendar_command(device, command, params)
        else:
            return CommandResult.failed(f"Unknown command: {command}")

        previous = dict(device.state)
        device.state.update(changes)
        logger.info(f"MockProvider executed: {command} on {device_id} -> {changes}")
        self.emit(
            DeviceEvent(
                device_id=device_id,
                type="state_changed",
                data={"command": command, "params": params, "new_state": dict(device.state)},
                domain=device.domain,
                area=device.area.name if device.area else None,
                previous_state=previous,
            )
        )
        return CommandResult.ok()

    async def query_items(self, device_id: str, params: dict[str, Any]) -> list[dict[str, Any]]:
        """Return calendar events overlapping the requested range.

        Args:
            device_id: Calendar device
            params: Optional 'from' and 'to' bounds in epoch ms

        Returns:
            Events sorted by start time
        """
        await self._simulate_latency()
        events = self._events.get(device_id, [])
        start = params.get("from", float("-inf"))
        end = params.get("to", float("inf"))
        matching = [e for e in events if e["end"] >= start and e["start"] <= end]
        return sorted(matching, key=lambda e: e["start"])

    def emit(self, event: DeviceEvent) -> None:
        """Push an event to the registered callback, if any."""
        if self._callback is not None:
            self._callback(event)

    def set_device_state(self, device_id: str, **state: Any) -> Device | None:
        """Manually update a device state and emit a change event (for testing).

        Returns:
            Updated Device or None if not found
        """
        device = self._devices.get(device_id)
        if device is None:
            logger.warning(f"Device not found: {device_id}")
            return None
        previous = dict(device.state)
        device.state.update(state)
        self.emit(
            DeviceEvent(
                device_id=device_id,
                type="state_changed",
                data=dict(state),
                domain=device.domain,
                previous_state=previous,
            )
        )
        return device

    def _seed(self) -> None:
        seed = self._seed_devices if self._seed_devices is not None else default_devices(self._name)
        self._devices = {d.id: d.model_copy(deep=True) for d in seed}
        self._events = {
            d.id: default_events() for d in self._devices.values() if d.domain == "schedule"
        }
        for device_id, events in self._events.items():
            self._devices[device_id].state["event_count"] = len(events)
        self._seeded = True

    def _apply_calendar_command(
        self,
        device: Device,
        command: str,
        params: dict[str, Any],
    ) -> CommandResult:
        events = self._events[device.id]
        if command == "create_event":
            missing = [k for k in ("summary", "start", "end") if k not in params]
            if missing:
                return CommandResult.failed(f"Missing event fields: {', '.join(missing)}")
            uid = params.get("uid") or f"evt-{len(events) + 1}"
            events.append({"all_day": False, "recurring": False, **params, "uid": uid})
        elif command == "update_event":
            event = next((e for e in events if e["uid"] == params.get("uid")), None)
            if event is None:
                return CommandResult.failed(f"Event not found: {params.get('uid')}")
            event.update(params)
        else:
            remaining = [e for e in events if e["uid"] != params.get("uid")]
            if len(remaining) == len(events):
                return CommandResult.failed(f"Event not found: {params.get('uid')}")
            events[:] = remaining

        device.state["event_count"] = len(events)
        self.emit(
            DeviceEvent(
                device_id=device.id,
                type=command,
                data=dict(params),
                domain=device.domain,
            )
        )
        return CommandResult.ok()

    async def _simulate_latency(self) -> None:
        """Simulate network latency."""
        if self.latency_ms > 0:
            await asyncio.sleep(self.latency_ms / 1000)

    def _should_fail(self) -> bool:
        """Check if this operation should fail based on failure_rate."""
        if self.failure_rate <= 0:
            return False
        return random.random() < self.failure_rate

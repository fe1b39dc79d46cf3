"""Pytest configuration and shared fixtures for device hub tests."""

from __future__ import annotations

import asyncio
from collections.abc import Callable, Iterator
from typing import Any

import pytest

from device_hub.core.models import CommandResult, Device, DeviceArea, DeviceEvent
from device_hub.descriptors import DescriptorRegistry
from device_hub.manager import DeviceManager


class FakeProvider:
    """Scriptable DeviceProvider double.

    Records every call in ``calls`` so tests can assert routing and
    ordering without a real backend.
    """

    def __init__(
        self,
        name: str,
        devices: list[Device] | None = None,
        areas: list[DeviceArea] | None = None,
        connect_error: Exception | None = None,
        devices_error: Exception | None = None,
        command_result: CommandResult | dict[str, Any] | None = None,
        command_error: Exception | None = None,
        delay: float = 0.0,
        command_delay: float = 0.0,
    ) -> None:
        self._name = name
        self.devices = devices or []
        self.areas = areas or []
        self.connect_error = connect_error
        self.devices_error = devices_error
        self.command_result = command_result if command_result is not None else CommandResult.ok()
        self.command_error = command_error
        self.delay = delay
        self.command_delay = command_delay
        self.connected = False
        self.callback: Callable[[DeviceEvent], None] | None = None
        self.calls: list[tuple[str, ...]] = []

    @property
    def name(self) -> str:
        return self._name

    async def connect(self) -> None:
        self.calls.append(("connect",))
        await self._wait()
        if self.connect_error is not None:
            raise self.connect_error
        self.connected = True

    async def disconnect(self) -> None:
        self.calls.append(("disconnect",))
        self.connected = False

    async def get_devices(self) -> list[Device]:
        self.calls.append(("get_devices",))
        await self._wait()
        if self.devices_error is not None:
            raise self.devices_error
        return list(self.devices)

    async def get_areas(self) -> list[DeviceArea]:
        self.calls.append(("get_areas",))
        await self._wait()
        return list(self.areas)

    def on_event(self, callback: Callable[[DeviceEvent], None]) -> None:
        self.callback = callback

    async def execute_command(
        self, device_id: str, command: str, params: dict[str, Any]
    ) -> CommandResult:
        self.calls.append(("execute_command", device_id, command))
        await self._wait()
        if self.command_delay:
            await asyncio.sleep(self.command_delay)
        if self.command_error is not None:
            raise self.command_error
        return self.command_result  # type: ignore[return-value]

    def emit(self, event: DeviceEvent) -> None:
        """Simulate an event pushed by the backend."""
        assert self.callback is not None
        self.callback(event)

    async def _wait(self) -> None:
        if self.delay:
            await asyncio.sleep(self.delay)


class QueryableFakeProvider(FakeProvider):
    """FakeProvider that also answers range queries."""

    def __init__(self, name: str, items: list[dict[str, Any]] | None = None, **kwargs: Any) -> None:
        super().__init__(name, **kwargs)
        self.items = items or []
        self.queries: list[tuple[str, dict[str, Any]]] = []

    async def query_items(self, device_id: str, params: dict[str, Any]) -> list[dict[str, Any]]:
        self.queries.append((device_id, params))
        return list(self.items)


def make_device(device_id: str, domain: str = "illumination", **kwargs: Any) -> Device:
    """Build a minimal Device."""
    return Device(id=device_id, name=kwargs.pop("name", device_id), domain=domain, **kwargs)


@pytest.fixture(autouse=True)
def reset_descriptor_registry() -> Iterator[None]:
    """Isolate the class-level descriptor registry between tests."""
    DescriptorRegistry.reset()
    yield
    DescriptorRegistry.reset()


@pytest.fixture
def manager() -> DeviceManager:
    """Fixture providing an empty DeviceManager.

    Returns:
        DeviceManager with a short provider timeout
    """
    return DeviceManager(provider_timeout=1.0)


@pytest.fixture
def provider_factory() -> Callable[..., FakeProvider]:
    """Fixture providing the FakeProvider class as a factory."""
    return FakeProvider


@pytest.fixture
def queryable_factory() -> Callable[..., QueryableFakeProvider]:
    """Fixture providing the QueryableFakeProvider class as a factory."""
    return QueryableFakeProvider


@pytest.fixture
def device_factory() -> Callable[..., Device]:
    """Fixture providing a minimal Device builder."""
    return make_device

"""Runtime registry of device providers.

The DeviceManager holds every active provider, aggregates their device
lists, fans out their events and routes commands to the provider that
owns the target device.
"""

from __future__ import annotations

import asyncio
import logging
from collections.abc import Awaitable, Callable
from dataclasses import dataclass
from typing import Any, Literal, TypeVar

from device_hub.core.interfaces.provider import (
    DeviceDiscoveryError,
    DeviceProvider,
    DuplicateDeviceError,
    ProviderAlreadyRegisteredError,
    ProviderLifecycleError,
    ProviderTimeoutError,
)
from device_hub.core.models import (
    CommandResult,
    Device,
    DeviceArea,
    DeviceEvent,
    ProviderOutcome,
    QueryResult,
)
from device_hub.domains import get_domain, validate_query
from device_hub.manager.event_bus import EventBus, Subscription

logger = logging.getLogger(__name__)

T = TypeVar("T")

EventListener = Callable[[DeviceEvent], None]
CommandListener = Callable[[str, str], None]
DuplicatePolicy = Literal["first_wins", "error"]


@dataclass(frozen=True)
class _Route:
    """Routing entry: the provider that owns a device id."""

    provider: DeviceProvider
    domain: str


class DeviceManager:
    """Aggregates devices and routes commands across providers.

    Providers are kept in registration order. That order decides the
    device listing order and which provider wins when two providers
    report the same device id (the first registered one).

    Commands and queries are routed to the first provider, in
    registration order, whose current device list contains the target
    id. The owners are resolved from a fresh concurrent discovery on
    every call, so a device that moves between providers is followed
    immediately. A device can still vanish between routing and
    execution; the provider's own result is authoritative.

    Attributes:
        provider_timeout: Seconds allowed per provider call (None = no limit)
        duplicate_policy: 'first_wins' logs colliding ids, 'error' raises

    Example:
        >>> manager = DeviceManager(provider_timeout=10.0)
        >>> manager.register_provider(MockProvider())
        >>> await manager.connect_all()
        >>> devices = await manager.get_all_devices()
        >>> result = await manager.execute_command("mock:main_valve", "set", {"valve_open": False})
    """

    def __init__(
        self,
        provider_timeout: float | None = None,
        duplicate_policy: DuplicatePolicy = "first_wins",
    ) -> None:
        """Initialize an empty manager.

        Args:
            provider_timeout: Per-provider timeout for concurrent calls
            duplicate_policy: How colliding device ids are reported
        """
        self.provider_timeout = provider_timeout
        self.duplicate_policy = duplicate_policy
        self._providers: tuple[DeviceProvider, ...] = ()
        self._event_bus: EventBus[EventListener] = EventBus("device_events")
        self._command_bus: EventBus[CommandListener] = EventBus("command_executed")

    @property
    def providers(self) -> list[DeviceProvider]:
        """Registered providers in registration order."""
        return list(self._providers)

    # =========================================================================
    # REGISTRATION
    # =========================================================================

    def register_provider(self, provider: DeviceProvider) -> None:
        """Register a provider and start forwarding its events.

        Args:
            provider: Provider instance

        Raises:
            ProviderAlreadyRegisteredError: If this exact object is
                already registered
        """
        if any(existing is provider for existing in self._providers):
            raise ProviderAlreadyRegisteredError("Provider already registered", provider.name)

        self._providers = (*self._providers, provider)
        provider.on_event(self._event_bus.publish)
        logger.info(f"Registered provider: {provider.name} (total: {len(self._providers)})")

    def on_event(self, listener: EventListener) -> Subscription:
        """Subscribe to device events from every provider.

        Args:
            listener: Called with each DeviceEvent, from now on

        Returns:
            Subscription handle; cancel() to stop receiving events
        """
        return self._event_bus.subscribe(listener)

    def on_command_executed(self, listener: CommandListener) -> Subscription:
        """Subscribe to successful command executions.

        Args:
            listener: Called with (device_id, command) after each
                successful execute_command()

        Returns:
            Subscription handle
        """
        return self._command_bus.subscribe(listener)

    # =========================================================================
    # LIFECYCLE
    # =========================================================================

    async def connect_each(self) -> list[ProviderOutcome]:
        """Connect every provider concurrently.

        Returns:
            One outcome per provider, in registration order
        """
        return await self._run_each("connect", lambda p: p.connect())

    async def disconnect_each(self) -> list[ProviderOutcome]:
        """Disconnect every provider concurrently.

        Returns:
            One outcome per provider, in registration order
        """
        return await self._run_each("disconnect", lambda p: p.disconnect())

    async def connect_all(self) -> None:
        """Connect every provider and fail if any of them failed.

        Every provider is attempted. Providers that connected stay
        connected when another one fails; nothing is rolled back.

        Raises:
            ProviderLifecycleError: If at least one provider failed
        """
        outcomes = await self.connect_each()
        if any(not o.success for o in outcomes):
            raise ProviderLifecycleError("connect", outcomes)
        names = ", ".join(p.name for p in self._providers) or "none"
        logger.info(f"All providers connected: {names}")

    async def disconnect_all(self) -> None:
        """Disconnect every provider and fail if any of them failed.

        Raises:
            ProviderLifecycleError: If at least one provider failed
        """
        outcomes = await self.disconnect_each()
        if any(not o.success for o in outcomes):
            raise ProviderLifecycleError("disconnect", outcomes)
        logger.info("All providers disconnected")

    # =========================================================================
    # DISCOVERY
    # =========================================================================

    async def get_all_devices(self) -> list[Device]:
        """Fetch and concatenate every provider's devices.

        Devices are ordered by provider registration order, then by each
        provider's own ordering. Nothing is de-duplicated.

        Returns:
            Flat device list

        Raises:
            DeviceDiscoveryError: If any provider failed or timed out
            DuplicateDeviceError: On colliding ids with duplicate_policy='error'
        """
        results = await self._discover()
        devices: list[Device] = []
        for provider, result in results:
            if isinstance(result, Exception):
                raise DeviceDiscoveryError(
                    f"Device discovery failed: {result}", provider.name
                ) from result
            devices.extend(result)

        # Reports colliding ids according to duplicate_policy
        self._build_routes(results)
        return devices

    async def get_all_areas(self) -> list[DeviceArea]:
        """Fetch and concatenate every provider's areas.

        Raises:
            DeviceDiscoveryError: If any provider failed or timed out
        """
        providers = self._providers
        results = await asyncio.gather(
            *(self._call(p, "list areas", p.get_areas()) for p in providers),
            return_exceptions=True,
        )
        areas: list[DeviceArea] = []
        for provider, result in zip(providers, results):
            if isinstance(result, BaseException):
                if not isinstance(result, Exception):
                    raise result
                raise DeviceDiscoveryError(f"Area listing failed: {result}", provider.name) from result
            areas.extend(result)
        return areas

    async def get_device(self, device_id: str) -> Device | None:
        """Find a device by id.

        Returns the first match in get_all_devices() order.

        Args:
            device_id: Device identifier

        Returns:
            Device, or None if no provider reports it
        """
        for device in await self.get_all_devices():
            if device.id == device_id:
                return device
        return None

    # =========================================================================
    # COMMANDS AND QUERIES
    # =========================================================================

    async def execute_command(
        self,
        device_id: str,
        command: str,
        params: dict[str, Any] | None = None,
    ) -> CommandResult:
        """Route a command to the provider that owns the device.

        Command listeners are notified with (device_id, command) only
        when the provider reports success.

        Args:
            device_id: Target device
            command: Command name
            params: Command payload

        Returns:
            The owning provider's CommandResult, or a failed result if no
            provider owns the device or the provider call raised
        """
        try:
            route = await self._resolve(device_id)
        except DuplicateDeviceError as e:
            return CommandResult.failed(str(e))
        if route is None:
            logger.warning(f"No provider found for device: {device_id}")
            return CommandResult.failed(f"No provider found for device: {device_id}")

        provider = route.provider
        try:
            result = await self._call(
                provider,
                "execute command",
                provider.execute_command(device_id, command, params or {}),
            )
        except Exception as e:
            logger.error(f"Provider '{provider.name}' failed executing {command} on {device_id}: {e}")
            return CommandResult.failed(str(e) or type(e).__name__)

        if isinstance(result, dict):
            result = CommandResult.model_validate(result)

        if result.success:
            logger.info(f"Executed {command} on {device_id} via {provider.name}")
            self._command_bus.publish(device_id, command)
        else:
            logger.warning(f"Command {command} on {device_id} failed: {result.error}")
        return result

    async def query_device(self, device_id: str, params: dict[str, Any] | None = None) -> QueryResult:
        """Run a range query against a device in a queryable domain.

        Args:
            device_id: Target device
            params: Query parameters, checked against the domain's
                queryable params

        Returns:
            QueryResult with the provider's items, or a failed result
        """
        params = params or {}
        try:
            route = await self._resolve(device_id)
        except DuplicateDeviceError as e:
            return QueryResult(success=False, error=str(e))
        if route is None:
            return QueryResult(success=False, error=f"No provider found for device: {device_id}")

        domain = get_domain(route.domain)
        if domain is None:
            return QueryResult(success=False, error=f"Unknown property domain: {route.domain}")
        errors = validate_query(domain, params)
        if errors:
            return QueryResult(success=False, error="; ".join(errors))

        query_items = getattr(route.provider, "query_items", None)
        if query_items is None:
            return QueryResult(
                success=False,
                error=f"Provider '{route.provider.name}' does not support range queries",
            )

        try:
            items = await self._call(route.provider, "query items", query_items(device_id, params))
        except Exception as e:
            logger.error(f"Query on {device_id} via {route.provider.name} failed: {e}")
            return QueryResult(success=False, error=str(e) or type(e).__name__)
        return QueryResult(success=True, items=list(items))

    # =========================================================================
    # INTERNALS
    # =========================================================================

    async def _call(self, provider: DeviceProvider, operation: str, awaitable: Awaitable[T]) -> T:
        """Await a provider call, applying the configured timeout."""
        if self.provider_timeout is None:
            return await awaitable
        try:
            return await asyncio.wait_for(awaitable, timeout=self.provider_timeout)
        except asyncio.TimeoutError as e:
            raise ProviderTimeoutError(
                f"{operation} timed out after {self.provider_timeout}s", provider.name
            ) from e

    async def _run_each(
        self,
        operation: str,
        call: Callable[[DeviceProvider], Awaitable[None]],
    ) -> list[ProviderOutcome]:
        """Run a lifecycle call on every provider and collect outcomes."""
        providers = self._providers
        results = await asyncio.gather(
            *(self._call(p, operation, call(p)) for p in providers),
            return_exceptions=True,
        )

        outcomes: list[ProviderOutcome] = []
        for provider, result in zip(providers, results):
            if isinstance(result, BaseException):
                if not isinstance(result, Exception):
                    raise result
                logger.error(f"Provider '{provider.name}' failed to {operation}: {result}")
                outcomes.append(
                    ProviderOutcome(
                        provider=provider.name,
                        success=False,
                        error=str(result) or type(result).__name__,
                        exception=result,
                    )
                )
            else:
                outcomes.append(ProviderOutcome(provider=provider.name, success=True))
        return outcomes

    async def _discover(self) -> list[tuple[DeviceProvider, list[Device] | Exception]]:
        """Fetch every provider's devices concurrently, keeping failures."""
        providers = self._providers
        results = await asyncio.gather(
            *(self._call(p, "discover devices", p.get_devices()) for p in providers),
            return_exceptions=True,
        )
        for result in results:
            if isinstance(result, BaseException) and not isinstance(result, Exception):
                raise result
        return list(zip(providers, results))

    def _build_routes(
        self,
        results: list[tuple[DeviceProvider, list[Device] | Exception]],
    ) -> dict[str, _Route]:
        """Map device ids to their owners, first registered provider wins.

        Raises:
            DuplicateDeviceError: On colliding ids with duplicate_policy='error'
        """
        routes: dict[str, _Route] = {}
        for provider, result in results:
            if isinstance(result, Exception):
                continue
            for device in result:
                existing = routes.get(device.id)
                if existing is None:
                    routes[device.id] = _Route(provider=provider, domain=device.domain)
                    continue
                if existing.provider is provider:
                    continue
                if self.duplicate_policy == "error":
                    raise DuplicateDeviceError(device.id, [existing.provider.name, provider.name])
                logger.warning(
                    f"Device id '{device.id}' reported by '{existing.provider.name}' and "
                    f"'{provider.name}'; routing to '{existing.provider.name}'"
                )
        return routes

    async def _resolve(self, device_id: str) -> _Route | None:
        """Find the first registered provider currently reporting the device.

        Providers that fail during discovery are skipped so one broken
        integration cannot block commands to the others.
        """
        results = await self._discover()
        for provider, result in results:
            if isinstance(result, Exception):
                logger.warning(f"Skipping provider '{provider.name}' while routing: {result}")
        return self._build_routes(results).get(device_id)

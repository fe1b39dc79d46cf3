"""Device provider protocol definition.

Defines the interface every device provider must implement. A provider
is a live connection to one device backend (a gate controller, a
calendar server, a water meter bridge, ...). The device manager only
talks to backends through this interface.
"""

from __future__ import annotations

from abc import abstractmethod
from collections.abc import Callable
from typing import TYPE_CHECKING, Any, Protocol, runtime_checkable

from device_hub.core.models.command import CommandResult
from device_hub.core.models.device import Device, DeviceArea, DeviceEvent

if TYPE_CHECKING:
    from device_hub.core.models.provider import ProviderOutcome

EventCallback = Callable[[DeviceEvent], None]


@runtime_checkable
class DeviceProvider(Protocol):
    """Protocol for device provider implementations.

    Using Protocol allows structural subtyping: any class that
    implements these methods is a valid provider, no inheritance needed.

    Lifecycle:
        1. Created by a ProviderDescriptor from validated configuration
        2. Registered with the DeviceManager
        3. connect() is awaited
        4. get_devices(), get_areas() and execute_command() are used
        5. disconnect() is awaited at shutdown

    Providers that serve queryable domains may also implement
    ``async def query_items(device_id, params) -> list[dict]``.
    """

    @property
    @abstractmethod
    def name(self) -> str:
        """Provider identifier used in logs and outcomes."""
        ...

    @abstractmethod
    async def connect(self) -> None:
        """Establish the connection to the backend.

        Raises:
            ProviderConnectionError: If the backend cannot be reached
        """
        ...

    @abstractmethod
    async def disconnect(self) -> None:
        """Close the connection and release resources."""
        ...

    @abstractmethod
    async def get_devices(self) -> list[Device]:
        """Discover the devices this provider owns."""
        ...

    @abstractmethod
    async def get_areas(self) -> list[DeviceArea]:
        """List the areas known to this provider."""
        ...

    @abstractmethod
    def on_event(self, callback: EventCallback) -> None:
        """Register the callback that receives this provider's events.

        The device manager calls this exactly once per provider.
        """
        ...

    @abstractmethod
    async def execute_command(
        self,
        device_id: str,
        command: str,
        params: dict[str, Any],
    ) -> CommandResult:
        """Execute a command on one of this provider's devices.

        Args:
            device_id: Target device
            command: Command name
            params: Command payload

        Returns:
            CommandResult; the provider is the authority on success
        """
        ...


class HubError(Exception):
    """Base exception for device hub errors."""


class ProviderError(HubError):
    """Error attributed to a single provider."""

    def __init__(self, message: str, provider: str | None = None) -> None:
        """Initialize provider error.

        Args:
            message: Error description
            provider: Provider name (optional)
        """
        self.provider = provider
        super().__init__(f"[{provider}] {message}" if provider else message)


class ProviderConnectionError(ProviderError):
    """Raised by providers when the backend connection fails."""


class ProviderTimeoutError(ProviderError):
    """Raised when a provider call exceeds the configured timeout."""


class ProviderAlreadyRegisteredError(ProviderError):
    """Raised when the same provider object is registered twice."""


class DeviceDiscoveryError(ProviderError):
    """Raised when a provider fails while listing its devices."""


class DuplicateDeviceError(HubError):
    """Raised when two providers report the same device id."""

    def __init__(self, device_id: str, providers: list[str]) -> None:
        self.device_id = device_id
        self.providers = providers
        super().__init__(
            f"Device id '{device_id}' reported by multiple providers: {', '.join(providers)}"
        )


class ProviderLifecycleError(HubError):
    """Raised when connect_all or disconnect_all has failed providers.

    Attributes:
        operation: The lifecycle operation (connect, disconnect)
        outcomes: Per-provider outcomes, in registration order
    """

    def __init__(self, operation: str, outcomes: list[ProviderOutcome]) -> None:
        self.operation = operation
        self.outcomes = outcomes
        failed = [o for o in outcomes if not o.success]
        details = "; ".join(f"{o.provider}: {o.error}" for o in failed)
        super().__init__(f"{operation} failed for {len(failed)} provider(s): {details}")

    @property
    def failed(self) -> list[ProviderOutcome]:
        """Outcomes of the providers that failed."""
        return [o for o in self.outcomes if not o.success]


class ConfigValidationError(HubError):
    """Raised when provider configuration does not validate."""

    def __init__(self, descriptor_id: str, errors: list[str]) -> None:
        self.descriptor_id = descriptor_id
        self.errors = errors
        super().__init__(f"Invalid configuration for '{descriptor_id}': {'; '.join(errors)}")


class InvalidStatusTransitionError(HubError):
    """Raised when a descriptor status change is not a legal edge."""

    def __init__(self, current: str, requested: str) -> None:
        self.current = current
        self.requested = requested
        super().__init__(f"Illegal status transition: {current} -> {requested}")


class DescriptorNotFoundError(HubError):
    """Raised when a descriptor id is not registered."""

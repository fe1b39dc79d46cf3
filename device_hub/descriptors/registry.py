"""Central registry of provider descriptors.

Holds every known descriptor (builtin and plugin), turns configuration
into providers registered with a DeviceManager, and drives descriptor
statuses while those providers connect and disconnect.
"""

from __future__ import annotations

import logging
from typing import Any

from device_hub.core.interfaces.provider import (
    ConfigValidationError,
    DescriptorNotFoundError,
    DeviceProvider,
)
from device_hub.core.models import ProviderInfo, ProviderOutcome
from device_hub.descriptors.base import ProviderDescriptor
from device_hub.descriptors.status import ProviderStatus, can_transition
from device_hub.manager import DeviceManager

logger = logging.getLogger(__name__)


class DescriptorRegistry:
    """Central registry for provider descriptors.

    Class Attributes:
        _descriptors: Mapping of descriptor ids to descriptor instances

    Example:
        >>> DescriptorRegistry.register(MockDescriptor())
        >>> manager = DeviceManager()
        >>> DescriptorRegistry.activate("mock", {"latency_ms": 0}, manager)
        >>> await DescriptorRegistry.connect(manager)
        >>> ...
        >>> await DescriptorRegistry.shutdown(manager)
    """

    _descriptors: dict[str, ProviderDescriptor] = {}

    @classmethod
    def register(cls, descriptor: ProviderDescriptor) -> None:
        """Register a descriptor instance.

        Args:
            descriptor: Descriptor to register

        Raises:
            TypeError: If descriptor is not a ProviderDescriptor
        """
        if not isinstance(descriptor, ProviderDescriptor):
            raise TypeError(f"descriptor must be a ProviderDescriptor, got {type(descriptor)}")

        if descriptor.id in cls._descriptors:
            logger.warning(f"Descriptor '{descriptor.id}' already registered, overwriting")

        cls._descriptors[descriptor.id] = descriptor
        logger.info(f"Registered provider descriptor: {descriptor.id} ({descriptor.origin})")

    @classmethod
    def unregister(cls, descriptor_id: str) -> bool:
        """Unregister a descriptor.

        Returns:
            True if the descriptor was removed, False if not found
        """
        if descriptor_id in cls._descriptors:
            del cls._descriptors[descriptor_id]
            logger.info(f"Unregistered provider descriptor: {descriptor_id}")
            return True
        return False

    @classmethod
    def get(cls, descriptor_id: str) -> ProviderDescriptor:
        """Get a descriptor by id.

        Raises:
            DescriptorNotFoundError: If no descriptor has that id
        """
        try:
            return cls._descriptors[descriptor_id]
        except KeyError:
            available = ", ".join(cls._descriptors) or "none"
            raise DescriptorNotFoundError(
                f"Unknown provider descriptor: '{descriptor_id}'. Available: {available}"
            ) from None

    @classmethod
    def is_registered(cls, descriptor_id: str) -> bool:
        """Check if a descriptor id is registered."""
        return descriptor_id in cls._descriptors

    @classmethod
    def list_descriptors(cls) -> list[ProviderDescriptor]:
        """List registered descriptors in registration order."""
        return list(cls._descriptors.values())

    @classmethod
    def describe_all(cls) -> list[ProviderInfo]:
        """Snapshot every descriptor for configuration surfaces."""
        return [d.describe() for d in cls._descriptors.values()]

    @classmethod
    def activate(
        cls,
        descriptor_id: str,
        config: dict[str, Any] | None,
        manager: DeviceManager,
    ) -> DeviceProvider:
        """Create a provider from configuration and register it.

        The provider is registered but not connected; call connect()
        once every provider is activated.

        Args:
            descriptor_id: Registered descriptor id
            config: Raw provider configuration
            manager: DeviceManager to register the provider with

        Returns:
            The new provider

        Raises:
            DescriptorNotFoundError: If the descriptor is unknown
            ConfigValidationError: If the configuration is invalid
        """
        descriptor = cls.get(descriptor_id)
        config = config if config is not None else {}

        errors = descriptor.validate_config(config)
        if errors:
            logger.error(f"Invalid configuration for '{descriptor_id}': {errors}")
            descriptor.set_status(ProviderStatus.ERROR, "; ".join(errors))
            raise ConfigValidationError(descriptor_id, errors)

        if descriptor.provider is not None and descriptor.provider in manager.providers:
            logger.warning(
                f"Descriptor '{descriptor_id}' already has a registered provider; "
                f"the previous instance stays registered"
            )

        provider = descriptor.create_provider(config)
        manager.register_provider(provider)
        return provider

    @classmethod
    async def connect(cls, manager: DeviceManager) -> list[ProviderOutcome]:
        """Connect every registered provider and update descriptor statuses.

        Descriptors move to 'connecting' first, then to 'connected' or
        'error' depending on their provider's outcome.

        Returns:
            Per-provider outcomes in registration order
        """
        owners = cls._owners(manager)
        for descriptor in owners.values():
            if can_transition(descriptor.get_status(), ProviderStatus.CONNECTING):
                descriptor.set_status(ProviderStatus.CONNECTING)

        outcomes = await manager.connect_each()
        for provider, outcome in zip(manager.providers, outcomes):
            descriptor = owners.get(id(provider))
            if descriptor is None:
                continue
            if outcome.success:
                descriptor.set_status(ProviderStatus.CONNECTED)
            else:
                descriptor.set_status(ProviderStatus.ERROR, outcome.error)
        return outcomes

    @classmethod
    async def shutdown(cls, manager: DeviceManager) -> list[ProviderOutcome]:
        """Disconnect every registered provider and update statuses.

        Returns:
            Per-provider outcomes in registration order
        """
        owners = cls._owners(manager)
        outcomes = await manager.disconnect_each()
        for provider, outcome in zip(manager.providers, outcomes):
            descriptor = owners.get(id(provider))
            if descriptor is None:
                continue
            if not outcome.success:
                descriptor.set_status(ProviderStatus.ERROR, outcome.error)
            elif can_transition(descriptor.get_status(), ProviderStatus.DISCONNECTED):
                descriptor.set_status(ProviderStatus.DISCONNECTED)
        return outcomes

    @classmethod
    def reset(cls) -> None:
        """Reset the registry (for testing).

        Clears all registered descriptors. Does NOT disconnect
        providers - use shutdown() first.
        """
        cls._descriptors.clear()
        logger.debug("Descriptor registry reset")

    @classmethod
    def _owners(cls, manager: DeviceManager) -> dict[int, ProviderDescriptor]:
        """Map registered provider objects to the descriptor that created them."""
        registered = {id(p) for p in manager.providers}
        return {
            id(d.provider): d
            for d in cls._descriptors.values()
            if d.provider is not None and id(d.provider) in registered
        }

"""Mock provider for testing and development.

Provides a fully-functional in-memory device provider that simulates
devices without requiring any real hardware.

Usage:
    >>> from device_hub.adapters.mock import register
    >>> from device_hub.descriptors import DescriptorRegistry
    >>>
    >>> register()
    >>> provider = DescriptorRegistry.activate("mock", {"latency_ms": 100}, manager)
"""

from device_hub.adapters.mock.adapter import MockProvider
from device_hub.adapters.mock.descriptor import MockConfig, MockDescriptor
from device_hub.adapters.mock.fixtures import DEFAULT_AREAS, default_devices, default_events
from device_hub.descriptors.registry import DescriptorRegistry


def register() -> None:
    """Register the mock descriptor with the registry."""
    DescriptorRegistry.register(MockDescriptor())


__all__ = [
    "MockProvider",
    "MockConfig",
    "MockDescriptor",
    "DEFAULT_AREAS",
    "default_devices",
    "default_events",
    "register",
]

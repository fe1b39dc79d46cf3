"""Protocol definitions and errors for device providers."""

from device_hub.core.interfaces.provider import (
    ConfigValidationError,
    DescriptorNotFoundError,
    DeviceDiscoveryError,
    DeviceProvider,
    DuplicateDeviceError,
    EventCallback,
    HubError,
    InvalidStatusTransitionError,
    ProviderAlreadyRegisteredError,
    ProviderConnectionError,
    ProviderError,
    ProviderLifecycleError,
    ProviderTimeoutError,
)

__all__ = [
    "DeviceProvider",
    "EventCallback",
    "HubError",
    "ProviderError",
    "ProviderConnectionError",
    "ProviderTimeoutError",
    "ProviderAlreadyRegisteredError",
    "DeviceDiscoveryError",
    "DuplicateDeviceError",
    "ProviderLifecycleError",
    "ConfigValidationError",
    "InvalidStatusTransitionError",
    "DescriptorNotFoundError",
]

"""Provider descriptors: the plugin contract that turns configuration into providers.

Modules:
    base: ProviderDescriptor base class
    status: ProviderStatus state machine
    registry: DescriptorRegistry for activation and status tracking
    loader: DescriptorLoader for builtin adapters and plugin packages
"""

from device_hub.descriptors.base import ProviderDescriptor
from device_hub.descriptors.loader import DescriptorLoader
from device_hub.descriptors.registry import DescriptorRegistry
from device_hub.descriptors.status import ProviderStatus, can_transition, transition

__all__ = [
    "ProviderDescriptor",
    "ProviderStatus",
    "can_transition",
    "transition",
    "DescriptorRegistry",
    "DescriptorLoader",
]

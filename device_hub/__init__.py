"""Device hub core.

Aggregates device providers behind one DeviceManager, describes devices
through a static catalog of property domains, and turns configuration
into providers through provider descriptors.
"""

from device_hub.config import HubConfig, ProviderConfig
from device_hub.hub import Hub
from device_hub.manager import DeviceManager

__version__ = "0.1.0"

__all__ = ["Hub", "HubConfig", "ProviderConfig", "DeviceManager", "__version__"]

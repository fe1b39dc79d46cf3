"""Hub bootstrap.

Wires configuration, descriptor loading, provider activation and the
DeviceManager together, and runs the connect/disconnect lifecycle.
"""

from __future__ import annotations

import logging
from types import TracebackType

from device_hub.config import HubConfig
from device_hub.core.interfaces.provider import HubError
from device_hub.core.models import ProviderOutcome
from device_hub.descriptors import DescriptorLoader, DescriptorRegistry
from device_hub.logging_setup import setup_logging
from device_hub.manager import DeviceManager

logger = logging.getLogger(__name__)


class Hub:
    """Owns a DeviceManager and the providers activated from configuration.

    A provider that fails to load, activate or connect is logged and the
    hub starts without it.

    Example:
        >>> async with Hub(HubConfig(providers=[{"id": "mock"}])) as hub:
        ...     devices = await hub.manager.get_all_devices()
    """

    def __init__(self, config: HubConfig | None = None, configure_logging: bool = True) -> None:
        """Initialize the hub.

        Args:
            config: Hub configuration (default: loaded from environment)
            configure_logging: Install the stdout log handler on start()
        """
        self.config = config if config is not None else HubConfig()
        self.configure_logging = configure_logging
        self.manager = DeviceManager(
            provider_timeout=self.config.provider_timeout,
            duplicate_policy=self.config.duplicate_policy,
        )
        self.activation_errors: dict[str, str] = {}
        self._activated = False
        self._started = False

    @property
    def started(self) -> bool:
        """Whether start() has run and stop() has not."""
        return self._started

    def load_descriptors(self) -> list[str]:
        """Load builtin adapters and plugin packages.

        Returns:
            Ids of the descriptors that were registered
        """
        loaded: list[str] = []
        for name in self.config.builtin_adapters:
            try:
                loaded.extend(DescriptorLoader.load_builtin(name))
            except ImportError as e:
                logger.error(f"Failed to load built-in adapter '{name}': {e}")

        for package in self.config.plugin_packages:
            try:
                loaded.extend(DescriptorLoader.load_from_package(package))
            except ImportError as e:
                logger.error(f"Failed to load plugin package '{package}': {e}")
        return loaded

    def activate_providers(self) -> int:
        """Activate every enabled provider entry.

        Returns:
            Number of providers activated
        """
        activated = 0
        for entry in self.config.providers:
            if not entry.enabled:
                logger.info(f"Provider '{entry.id}' disabled, skipping")
                continue
            try:
                DescriptorRegistry.activate(entry.id, entry.config, self.manager)
            except HubError as e:
                self.activation_errors[entry.id] = str(e)
                logger.error(f"Failed to activate provider '{entry.id}': {e}")
                continue
            activated += 1
        return activated

    async def start(self) -> list[ProviderOutcome]:
        """Load, activate and connect providers.

        Descriptors are loaded and providers activated once per hub; a
        restart after stop() only reconnects the providers already owned.

        Returns:
            Connection outcomes in registration order
        """
        if self._started:
            logger.warning("Hub already started")
            return []

        if self.configure_logging:
            setup_logging(self.config.log_level, self.config.log_json)

        logger.info("Device hub starting up")
        if not self._activated:
            self.load_descriptors()
            self.activate_providers()
            self._activated = True
        activated = len(self.manager.providers)
        outcomes = await DescriptorRegistry.connect(self.manager)
        self._started = True

        failed = [o.provider for o in outcomes if not o.success]
        if failed:
            logger.warning(f"Hub started degraded; failed providers: {', '.join(failed)}")
        else:
            logger.info(f"Hub started with {activated} provider(s)")
        return outcomes

    async def stop(self) -> list[ProviderOutcome]:
        """Disconnect every provider.

        Returns:
            Disconnection outcomes in registration order
        """
        if not self._started:
            return []
        logger.info("Device hub shutting down")
        outcomes = await DescriptorRegistry.shutdown(self.manager)
        self._started = False
        return outcomes

    async def __aenter__(self) -> Hub:
        await self.start()
        return self

    async def __aexit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        await self.stop()

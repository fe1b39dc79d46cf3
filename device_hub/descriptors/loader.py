"""Loading of provider descriptors from builtin adapters and plugin packages.

A loadable module either exposes a ``register()`` function that
registers its descriptors, or exports ProviderDescriptor subclasses
that are instantiated and registered automatically.
"""

from __future__ import annotations

import importlib
import inspect
import logging
from types import ModuleType

from device_hub.descriptors.base import ProviderDescriptor
from device_hub.descriptors.registry import DescriptorRegistry

logger = logging.getLogger(__name__)

BUILTIN_PACKAGE = "device_hub.adapters"


class DescriptorLoader:
    """Load provider descriptors into the DescriptorRegistry.

    Example:
        >>> DescriptorLoader.load_builtin("mock")
        >>> DescriptorLoader.load_from_package("hub_gate_plugin")
    """

    @classmethod
    def load_builtin(cls, adapter_name: str) -> list[str]:
        """Load a builtin adapter from device_hub.adapters.

        Args:
            adapter_name: Adapter module name (e.g., 'mock')

        Returns:
            Ids of the descriptors registered by the module

        Raises:
            ImportError: If the adapter module is not found
        """
        module_path = f"{BUILTIN_PACKAGE}.{adapter_name}"
        try:
            module = importlib.import_module(module_path)
        except ImportError as e:
            raise ImportError(f"Built-in adapter '{adapter_name}' not found: {e}") from e

        logger.info(f"Loaded built-in adapter module: {module_path}")
        return cls._register_module(module)

    @classmethod
    def load_from_package(cls, package_name: str) -> list[str]:
        """Load a plugin from an installed Python package.

        Descriptors registered automatically are expected to declare
        ``origin = "plugin"``.

        Args:
            package_name: Importable package name

        Returns:
            Ids of the descriptors registered by the package

        Raises:
            ImportError: If the package is not installed
        """
        try:
            module = importlib.import_module(package_name)
        except ImportError as e:
            raise ImportError(f"Plugin package '{package_name}' not found: {e}") from e

        ids = cls._register_module(module)
        for descriptor_id in ids:
            if DescriptorRegistry.get(descriptor_id).origin != "plugin":
                logger.warning(
                    f"Descriptor '{descriptor_id}' from package '{package_name}' "
                    f"does not declare origin='plugin'"
                )
        logger.info(f"Loaded plugin package: {package_name}")
        return ids

    @classmethod
    def _register_module(cls, module: ModuleType) -> list[str]:
        """Register a module's descriptors and report which ids are new."""
        before = {d.id for d in DescriptorRegistry.list_descriptors()}

        if hasattr(module, "register"):
            module.register()
            logger.debug(f"Called {module.__name__}.register()")
        else:
            cls._auto_register_from_module(module)

        return [
            d.id for d in DescriptorRegistry.list_descriptors() if d.id not in before
        ]

    @classmethod
    def _auto_register_from_module(cls, module: ModuleType) -> None:
        """Instantiate and register every concrete descriptor class in a module."""
        found = False
        for attr_name in dir(module):
            attr = getattr(module, attr_name)
            if (
                isinstance(attr, type)
                and issubclass(attr, ProviderDescriptor)
                and attr is not ProviderDescriptor
                and not inspect.isabstract(attr)
            ):
                DescriptorRegistry.register(attr())
                logger.info(f"Auto-registered descriptor {attr_name} from {module.__name__}")
                found = True

        if not found:
            logger.warning(f"No provider descriptors found in module {module.__name__}")

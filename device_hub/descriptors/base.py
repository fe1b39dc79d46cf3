"""Provider descriptor base class.

A descriptor is the plugin manifest of one integration. It declares a
configuration schema, validates raw configuration, builds live provider
instances and tracks their connectivity status.
"""

from __future__ import annotations

import logging
import re
import types
from abc import ABC, abstractmethod
from typing import Any, ClassVar, Literal, Union, get_args, get_origin

from pydantic import BaseModel, SecretStr, ValidationError

from device_hub.core.interfaces.provider import DeviceProvider
from device_hub.core.models.provider import ConfigField, ProviderInfo
from device_hub.descriptors.status import ProviderStatus, transition

logger = logging.getLogger(__name__)

_SECRET_KEY_HINTS = ("secret", "token", "password", "api_key", "apikey")


def _unwrap_optional(annotation: Any) -> Any:
    """Strip ``None`` from ``X | None`` annotations."""
    if get_origin(annotation) in (Union, types.UnionType):
        args = [a for a in get_args(annotation) if a is not type(None)]
        if len(args) == 1:
            return args[0]
    return annotation


def _key_to_label(key: str) -> str:
    """Turn a config key into a display label.

    Examples:
        >>> _key_to_label("access_token")
        'Access token'
        >>> _key_to_label("baseUrl")
        'Base Url'
    """
    label = " ".join(re.sub(r"([A-Z])", r" \1", key).replace("_", " ").split())
    return label[:1].upper() + label[1:]


class ProviderDescriptor(ABC):
    """Base class for provider descriptors.

    Subclasses declare their identity and configuration model as class
    attributes and implement build_provider().

    Class Attributes:
        id: Unique descriptor identifier
        display_name: Human-readable name
        description: One-line description of the integration
        origin: 'builtin' for bundled adapters, 'plugin' for packages
        config_model: pydantic model describing the configuration

    Example:
        >>> class GateConfig(BaseModel):
        ...     host: str = Field(..., description="Controller address")
        ...     api_token: str
        ...
        >>> class GateDescriptor(ProviderDescriptor):
        ...     id = "gate"
        ...     display_name = "Gate Controller"
        ...     description = "Sliding gate over the local API"
        ...     config_model = GateConfig
        ...
        ...     def build_provider(self, config: GateConfig) -> DeviceProvider:
        ...         return GateProvider(config.host, config.api_token)
    """

    id: ClassVar[str]
    display_name: ClassVar[str]
    description: ClassVar[str] = ""
    origin: ClassVar[Literal["builtin", "plugin"]] = "builtin"
    config_model: ClassVar[type[BaseModel]]

    def __init__(self) -> None:
        self._status = ProviderStatus.UNINITIALIZED
        self._status_message: str | None = None
        self._provider: DeviceProvider | None = None

    @property
    def provider(self) -> DeviceProvider | None:
        """The live provider created last, if any."""
        return self._provider

    def get_config_fields(self) -> list[ConfigField]:
        """Describe the configuration schema field by field.

        Returns:
            ConfigField list in declaration order
        """
        fields: list[ConfigField] = []
        for key, info in self.config_model.model_fields.items():
            annotation = _unwrap_optional(info.annotation)
            field_type: Literal["string", "password", "boolean", "number"] = "string"
            if annotation is bool:
                field_type = "boolean"
            elif annotation in (int, float):
                field_type = "number"
            elif annotation is SecretStr or any(hint in key.lower() for hint in _SECRET_KEY_HINTS):
                field_type = "password"

            required = info.is_required()
            fields.append(
                ConfigField(
                    key=key,
                    label=_key_to_label(key),
                    type=field_type,
                    required=required,
                    description=info.description,
                    default=None if required else info.get_default(call_default_factory=True),
                )
            )
        return fields

    def validate_config(self, config: Any) -> list[str] | None:
        """Validate raw configuration against the schema.

        Never raises: malformed input is reported as a validation failure.

        Args:
            config: Raw configuration (normally a dict)

        Returns:
            List of "<path>: <message>" problems, or None if valid
        """
        try:
            self.config_model.model_validate(config)
        except ValidationError as e:
            errors = []
            for err in e.errors():
                path = ".".join(str(part) for part in err["loc"]) or "config"
                errors.append(f"{path}: {err['msg']}")
            return errors
        return None

    def create_provider(self, config: Any) -> DeviceProvider:
        """Build a live provider bound to the given configuration.

        Replaces any provider this descriptor created before. Callers
        must run validate_config() first.

        Args:
            config: Raw configuration that passed validation

        Returns:
            New DeviceProvider instance
        """
        parsed = self.config_model.model_validate(config)
        if self._provider is not None:
            logger.info(f"Replacing existing provider for descriptor '{self.id}'")
        self._provider = self.build_provider(parsed)
        logger.info(f"Created provider '{self._provider.name}' from descriptor '{self.id}'")
        return self._provider

    @abstractmethod
    def build_provider(self, config: Any) -> DeviceProvider:
        """Instantiate the provider from parsed configuration.

        Args:
            config: Instance of config_model

        Returns:
            DeviceProvider instance
        """
        ...

    def get_status(self) -> ProviderStatus:
        """Current connectivity status."""
        return self._status

    def get_status_message(self) -> str | None:
        """Human-readable detail for the current status."""
        return self._status_message

    def set_status(self, status: ProviderStatus | str, message: str | None = None) -> None:
        """Move to a new status.

        Args:
            status: Target status
            message: Optional detail (replaces the previous message)

        Raises:
            InvalidStatusTransitionError: If the transition is not legal
        """
        new_status = transition(self._status, status)
        if new_status != self._status:
            logger.debug(f"Descriptor '{self.id}': {self._status.value} -> {new_status.value}")
        self._status = new_status
        self._status_message = message

    def describe(self) -> ProviderInfo:
        """Snapshot of this descriptor for configuration surfaces."""
        return ProviderInfo(
            id=self.id,
            display_name=self.display_name,
            description=self.description,
            origin=self.origin,
            status=self._status.value,
            status_message=self._status_message,
            config_fields=self.get_config_fields(),
            has_provider=self._provider is not None,
        )

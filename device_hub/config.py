"""Hub configuration.

Configuration is loaded from environment variables prefixed with
``HUB_``. Complex values (lists, provider entries) are read as JSON.

Examples:
    HUB_LOG_LEVEL=DEBUG
    HUB_PROVIDER_TIMEOUT=10
    HUB_PROVIDERS='[{"id": "mock", "config": {"latency_ms": 50}}]'
"""

from __future__ import annotations

from typing import Any, Literal

from pydantic import BaseModel, Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class ProviderConfig(BaseModel):
    """One provider to activate at startup.

    Attributes:
        id: Descriptor id (e.g. 'mock')
        enabled: Skip this entry when False
        config: Descriptor-specific configuration, validated by the descriptor

    Examples:
        >>> ProviderConfig(id="mock", config={"latency_ms": 100})
    """

    id: str = Field(..., min_length=1, description="Descriptor id", examples=["mock"])

    enabled: bool = Field(default=True, description="Whether to activate this provider")

    config: dict[str, Any] = Field(
        default_factory=dict,
        description="Descriptor-specific configuration",
    )


class HubConfig(BaseSettings):
    """Hub-wide settings."""

    model_config = SettingsConfigDict(
        env_prefix="HUB_",
        env_file=".env",
        extra="ignore",
    )

    log_level: str = Field(default="INFO", description="Logging level")

    log_json: bool = Field(default=True, description="Emit structured JSON logs")

    provider_timeout: float | None = Field(
        default=30.0,
        gt=0,
        description="Per-provider call timeout in seconds (None disables)",
    )

    duplicate_policy: Literal["first_wins", "error"] = Field(
        default="first_wins",
        description="How to handle a device id reported by two providers",
    )

    builtin_adapters: list[str] = Field(
        default_factory=lambda: ["mock"],
        description="Builtin adapter modules to load",
    )

    plugin_packages: list[str] = Field(
        default_factory=list,
        description="Installed packages providing extra descriptors",
    )

    providers: list[ProviderConfig] = Field(
        default_factory=list,
        description="Providers to activate at startup",
    )

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Normalize and check the log level name."""
        level = v.upper()
        if level not in ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"):
            raise ValueError(f"Invalid log level: {v}")
        return level

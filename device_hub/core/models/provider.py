"""Provider-facing models: configuration fields and lifecycle outcomes."""

from __future__ import annotations

from typing import Any, Literal

from pydantic import BaseModel, ConfigDict, Field


class ConfigField(BaseModel):
    """One configuration field of a provider descriptor.

    Used to drive configuration surfaces without knowing the
    provider's schema type.
    """

    key: str = Field(..., description="Configuration key")

    label: str = Field(..., description="Human-readable label derived from the key")

    type: Literal["string", "password", "boolean", "number"] = Field(
        default="string",
        description="Input type",
    )

    required: bool = Field(default=True, description="Whether the field must be set")

    description: str | None = None

    default: Any = None


class ProviderInfo(BaseModel):
    """Snapshot of a provider descriptor for display."""

    id: str
    display_name: str
    description: str
    origin: Literal["builtin", "plugin"]
    status: str
    status_message: str | None = None
    config_fields: list[ConfigField] = Field(default_factory=list)
    has_provider: bool = False


class ProviderOutcome(BaseModel):
    """Per-provider result of a concurrent lifecycle operation.

    Attributes:
        provider: Name of the provider
        success: Whether the operation completed
        error: Failure reason when it did not
    """

    model_config = ConfigDict(arbitrary_types_allowed=True)

    provider: str = Field(..., description="Provider name")

    success: bool = Field(..., description="Whether the operation completed")

    error: str | None = Field(default=None, description="Failure reason")

    exception: BaseException | None = Field(default=None, exclude=True, repr=False)

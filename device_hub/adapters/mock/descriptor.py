"""Descriptor for the builtin mock provider."""

from __future__ import annotations

from pydantic import BaseModel, Field

from device_hub.adapters.mock.adapter import MockProvider
from device_hub.descriptors.base import ProviderDescriptor


class MockConfig(BaseModel):
    """Configuration accepted by the mock provider."""

    name: str = Field(default="mock", min_length=1, description="Provider name and device id prefix")

    latency_ms: int = Field(default=0, ge=0, description="Simulated latency in milliseconds")

    failure_rate: float = Field(
        default=0.0,
        ge=0.0,
        le=1.0,
        description="Probability that a command fails (0.0-1.0)",
    )

    fail_connect: bool = Field(default=False, description="Simulate a connection failure")


class MockDescriptor(ProviderDescriptor):
    """Builtin descriptor producing in-memory MockProvider instances."""

    id = "mock"
    display_name = "Mock Devices"
    description = "Simulated devices for development and testing"
    origin = "builtin"
    config_model = MockConfig

    def build_provider(self, config: MockConfig) -> MockProvider:
        return MockProvider(
            name=config.name,
            latency_ms=config.latency_ms,
            failure_rate=config.failure_rate,
            fail_connect=config.fail_connect,
        )

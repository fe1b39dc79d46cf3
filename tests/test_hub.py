"""Tests for the Hub bootstrap."""

from __future__ import annotations

import pytest

from device_hub import Hub, HubConfig
from device_hub.config import ProviderConfig
from device_hub.descriptors import DescriptorRegistry, ProviderStatus


def make_hub(**overrides) -> Hub:
    """Build a hub that leaves logging configuration alone."""
    return Hub(HubConfig(**overrides), configure_logging=False)


class TestHub:
    """Test suite for Hub start/stop."""

    @pytest.mark.asyncio
    async def test_start_with_mock(self):
        hub = make_hub(providers=[ProviderConfig(id="mock")])

        outcomes = await hub.start()

        assert [o.success for o in outcomes] == [True]
        assert hub.started
        devices = await hub.manager.get_all_devices()
        assert any(d.id == "mock:main_valve" for d in devices)
        assert DescriptorRegistry.get("mock").get_status() == ProviderStatus.CONNECTED

        await hub.stop()
        assert not hub.started
        assert DescriptorRegistry.get("mock").get_status() == ProviderStatus.DISCONNECTED

    @pytest.mark.asyncio
    async def test_degraded_start(self):
        """Test bad entries are skipped and the rest still start."""
        hub = make_hub(
            providers=[
                ProviderConfig(id="unknown_adapter"),
                ProviderConfig(id="mock", config={"latency_ms": -5}),
                ProviderConfig(id="mock", config={"name": "lab"}),
            ]
        )

        outcomes = await hub.start()

        assert [o.provider for o in outcomes] == ["lab"]
        assert set(hub.activation_errors) == {"unknown_adapter", "mock"}
        await hub.stop()

    @pytest.mark.asyncio
    async def test_connect_failure_is_reported(self):
        hub = make_hub(providers=[ProviderConfig(id="mock", config={"fail_connect": True})])

        outcomes = await hub.start()

        assert outcomes[0].success is False
        assert hub.started
        assert DescriptorRegistry.get("mock").get_status() == ProviderStatus.ERROR
        await hub.stop()

    @pytest.mark.asyncio
    async def test_disabled_provider_skipped(self):
        hub = make_hub(providers=[ProviderConfig(id="mock", enabled=False)])

        assert await hub.start() == []
        assert hub.manager.providers == []
        await hub.stop()

    @pytest.mark.asyncio
    async def test_missing_builtin_adapter_logged(self, caplog):
        hub = make_hub(builtin_adapters=["mock", "zigbee"])

        await hub.start()

        assert "Failed to load built-in adapter 'zigbee'" in caplog.text
        assert DescriptorRegistry.is_registered("mock")
        await hub.stop()

    @pytest.mark.asyncio
    async def test_context_manager(self):
        async with make_hub(providers=[ProviderConfig(id="mock")]) as hub:
            result = await hub.manager.execute_command("mock:garden_gate", "toggle")
            assert result.success is True
        assert not hub.started

    @pytest.mark.asyncio
    async def test_start_twice(self):
        hub = make_hub(providers=[ProviderConfig(id="mock")])
        await hub.start()

        assert await hub.start() == []
        assert len(hub.manager.providers) == 1
        await hub.stop()

    @pytest.mark.asyncio
    async def test_restart_reuses_providers(self):
        """Test start after stop reconnects the same providers without re-activating."""
        hub = make_hub(providers=[ProviderConfig(id="mock")])
        await hub.start()
        provider = hub.manager.providers[0]
        await hub.stop()

        outcomes = await hub.start()

        assert [o.success for o in outcomes] == [True]
        assert hub.manager.providers == [provider]
        assert DescriptorRegistry.get("mock").get_status() == ProviderStatus.CONNECTED
        ids = [d.id for d in await hub.manager.get_all_devices()]
        assert len(ids) == len(set(ids))
        await hub.stop()

"""Tests for vendor dispatch and credential resolution."""

import pytest
from pydantic import SecretStr

from src.core.exceptions import ConfigurationError, VendorError
from src.modules.vendors import gateway as gateway_module
from src.modules.vendors.base import VendorType
from src.modules.vendors.gemini import GeminiVendor
from src.modules.vendors.gateway import VendorGateway
from src.modules.vendors.openai import OpenAIVendor
from tests.utils.vendor_stubs import FakeResponse, FakeSession, make_vendor_config


@pytest.fixture
def recorded_adapters(monkeypatch):
    """Route every adapter the gateway builds through a fake session."""
    sessions: dict[VendorType, FakeSession] = {
        VendorType.GEMINI: FakeSession(
            FakeResponse(
                payload={"candidates": [{"content": {"parts": [{"text": "g"}]}}]}
            )
        ),
        VendorType.OPENAI: FakeSession(
            FakeResponse(payload={"choices": [{"message": {"content": "o"}}]})
        ),
    }
    adapter_classes = {
        VendorType.GEMINI: GeminiVendor,
        VendorType.OPENAI: OpenAIVendor,
    }

    def fake_create_vendor(tag, config=None):
        vendor_type = VendorType(tag)
        return adapter_classes[vendor_type](session_factory=sessions[vendor_type])

    monkeypatch.setattr(gateway_module, "create_vendor", fake_create_vendor)
    return sessions


@pytest.mark.asyncio
async def test_ask_uses_default_vendor(recorded_adapters):
    gateway = VendorGateway(make_vendor_config(default_vendor="gemini"))

    assert await gateway.ask("prompt") == "g"
    headers = recorded_adapters[VendorType.GEMINI].requests[0]["headers"]
    assert headers["x-goog-api-key"] == "test-google-key"
    assert recorded_adapters[VendorType.OPENAI].requests == []


@pytest.mark.asyncio
async def test_ask_dispatches_to_requested_vendor(recorded_adapters):
    gateway = VendorGateway(make_vendor_config())

    assert await gateway.ask("prompt", vendor=VendorType.OPENAI) == "o"
    headers = recorded_adapters[VendorType.OPENAI].requests[0]["headers"]
    assert headers["Authorization"] == "Bearer test-openai-key"


@pytest.mark.asyncio
async def test_ask_without_key_raises_configuration_error(recorded_adapters):
    config = make_vendor_config(
        api_keys={"gemini": SecretStr("test-google-key"), "openai": SecretStr("")}
    )
    gateway = VendorGateway(config)

    with pytest.raises(ConfigurationError, match="OPENAI API key not configured"):
        await gateway.ask("prompt", vendor="openai")

    assert recorded_adapters[VendorType.OPENAI].requests == []


@pytest.mark.asyncio
async def test_ask_with_unknown_vendor_raises_configuration_error():
    gateway = VendorGateway(make_vendor_config())

    with pytest.raises(ConfigurationError):
        await gateway.ask("prompt", vendor="anthropic")


@pytest.mark.asyncio
async def test_vendor_errors_propagate(monkeypatch):
    session = FakeSession(FakeResponse(status=500, body="upstream down"))
    monkeypatch.setattr(
        gateway_module,
        "create_vendor",
        lambda tag, config=None: GeminiVendor(session_factory=session),
    )
    gateway = VendorGateway(make_vendor_config())

    with pytest.raises(VendorError) as exc_info:
        await gateway.ask("prompt")

    assert exc_info.value.status_code == 500


def test_configured_vendors_lists_only_vendors_with_keys():
    config = make_vendor_config(api_keys={"openai": SecretStr("o-key")})

    assert VendorGateway(config).configured_vendors() == ["openai"]

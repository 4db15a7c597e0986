"""Tests for the Gemini and OpenAI vendor adapters."""

import asyncio

import aiohttp
import pytest

from src.core.exceptions import ConfigurationError, VendorError
from src.modules.vendors import factory as vendor_factory
from src.modules.vendors.base import VendorType
from src.modules.vendors.factory import (
    VENDOR_REGISTRY,
    create_vendor,
    resolve_vendor_type,
)
from src.modules.vendors.gemini import GEMINI_DEFAULT_MODEL, GeminiVendor
from src.modules.vendors.openai import OPENAI_DEFAULT_MODEL, OpenAIVendor
from tests.utils.vendor_stubs import FakeResponse, FakeSession, make_vendor_config


def gemini_envelope(text: str) -> dict:
    return {"candidates": [{"content": {"parts": [{"text": text}]}}]}


def openai_envelope(text: str | None) -> dict:
    return {"choices": [{"message": {"role": "assistant", "content": text}}]}


# Registry


def test_every_vendor_type_is_registered():
    """Adding a VendorType member without an adapter must fail here."""
    assert set(VENDOR_REGISTRY) == set(VendorType)


@pytest.mark.parametrize(
    "tag,expected",
    [
        ("gemini", VendorType.GEMINI),
        (" OpenAI ", VendorType.OPENAI),
        (VendorType.GEMINI, VendorType.GEMINI),
    ],
)
def test_resolve_vendor_type(tag, expected):
    assert resolve_vendor_type(tag) is expected


def test_create_vendor_rejects_unknown_tag():
    with pytest.raises(ConfigurationError, match="Unsupported AI vendor type"):
        create_vendor("anthropic")


def test_create_vendor_applies_config():
    config = make_vendor_config(
        gemini_api_url="https://gemini.internal/models", timeout_seconds=5.0
    )
    adapter = create_vendor("gemini", config)

    assert isinstance(adapter, GeminiVendor)
    assert adapter.api_url == "https://gemini.internal/models"
    assert adapter.timeout_seconds == 5.0


def test_create_vendor_reports_missing_registration(monkeypatch):
    monkeypatch.delitem(vendor_factory.VENDOR_REGISTRY, VendorType.OPENAI)

    with pytest.raises(ConfigurationError, match="not registered"):
        create_vendor(VendorType.OPENAI)


# Gemini


@pytest.mark.asyncio
async def test_gemini_ask_returns_generated_text():
    session = FakeSession(FakeResponse(payload=gemini_envelope("hello")))
    adapter = GeminiVendor(session_factory=session, timeout_seconds=12)

    text = await adapter.ask("Say hello", api_key="g-key")

    assert text == "hello"
    request = session.requests[0]
    assert request["url"] == (
        "https://generativelanguage.googleapis.com/v1beta/models/"
        f"{GEMINI_DEFAULT_MODEL}:generateContent"
    )
    assert request["headers"]["x-goog-api-key"] == "g-key"
    assert request["json"] == {"contents": [{"parts": [{"text": "Say hello"}]}]}
    assert session.session_kwargs["timeout"].total == 12


@pytest.mark.asyncio
async def test_gemini_ask_uses_requested_model():
    session = FakeSession(FakeResponse(payload=gemini_envelope("ok")))
    adapter = GeminiVendor(session_factory=session)

    await adapter.ask("prompt", api_key="g-key", model="gemini-2.5-pro")

    assert session.requests[0]["url"].endswith("/gemini-2.5-pro:generateContent")


@pytest.mark.asyncio
@pytest.mark.parametrize(
    "envelope",
    [
        {},
        {"candidates": []},
        {"candidates": [{"content": {"parts": []}}]},
        {"candidates": [{"finishReason": "SAFETY"}]},
    ],
)
async def test_gemini_ask_returns_empty_string_without_text(envelope):
    adapter = GeminiVendor(session_factory=FakeSession(FakeResponse(payload=envelope)))

    assert await adapter.ask("prompt", api_key="g-key") == ""


# OpenAI


@pytest.mark.asyncio
async def test_openai_ask_returns_message_content():
    session = FakeSession(FakeResponse(payload=openai_envelope("hi there")))
    adapter = OpenAIVendor(session_factory=session)

    text = await adapter.ask("Say hi", api_key="o-key")

    assert text == "hi there"
    request = session.requests[0]
    assert request["url"] == "https://api.openai.com/v1/chat/completions"
    assert request["headers"]["Authorization"] == "Bearer o-key"
    assert request["json"]["model"] == OPENAI_DEFAULT_MODEL
    assert request["json"]["messages"] == [{"role": "user", "content": "Say hi"}]


@pytest.mark.asyncio
@pytest.mark.parametrize("envelope", [{}, {"choices": []}, openai_envelope(None)])
async def test_openai_ask_returns_empty_string_without_text(envelope):
    adapter = OpenAIVendor(session_factory=FakeSession(FakeResponse(payload=envelope)))

    assert await adapter.ask("prompt", api_key="o-key") == ""


# Failures shared by every adapter


@pytest.mark.asyncio
@pytest.mark.parametrize("adapter_cls", [GeminiVendor, OpenAIVendor])
async def test_missing_api_key_fails_before_network(adapter_cls):
    session = FakeSession()
    adapter = adapter_cls(session_factory=session)

    with pytest.raises(VendorError, match="API key is required"):
        await adapter.ask("prompt", api_key="")

    assert session.requests == []


@pytest.mark.asyncio
async def test_blank_prompt_fails_before_network():
    session = FakeSession()
    adapter = GeminiVendor(session_factory=session)

    with pytest.raises(VendorError):
        await adapter.ask("   ", api_key="g-key")

    assert session.requests == []


@pytest.mark.asyncio
@pytest.mark.parametrize("status_code", [400, 401, 429, 503])
async def test_error_status_raises_vendor_error(status_code):
    response = FakeResponse(status=status_code, body='{"error": "nope"}')
    adapter = OpenAIVendor(session_factory=FakeSession(response))

    with pytest.raises(VendorError) as exc_info:
        await adapter.ask("prompt", api_key="o-key")

    assert exc_info.value.vendor == "openai"
    assert exc_info.value.status_code == status_code


@pytest.mark.asyncio
@pytest.mark.parametrize(
    "error",
    [
        aiohttp.ClientConnectionError("connection refused"),
        asyncio.TimeoutError(),
    ],
)
async def test_transport_failures_raise_vendor_error(error):
    adapter = GeminiVendor(session_factory=FakeSession(error=error))

    with pytest.raises(VendorError) as exc_info:
        await adapter.ask("prompt", api_key="g-key")

    assert exc_info.value.vendor == "gemini"
    assert exc_info.value.status_code is None


@pytest.mark.asyncio
async def test_invalid_json_envelope_raises_vendor_error():
    response = FakeResponse(status=200, body="<html>gateway</html>")
    adapter = GeminiVendor(session_factory=FakeSession(response))

    with pytest.raises(VendorError, match="not valid JSON"):
        await adapter.ask("prompt", api_key="g-key")


@pytest.mark.asyncio
async def test_non_object_envelope_raises_vendor_error():
    adapter = GeminiVendor(session_factory=FakeSession(FakeResponse(payload=[1, 2])))

    with pytest.raises(VendorError, match="not a JSON object"):
        await adapter.ask("prompt", api_key="g-key")

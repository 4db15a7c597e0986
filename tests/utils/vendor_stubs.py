"""Stand-ins for AI vendor traffic."""

import json
from typing import Any

from pydantic import SecretStr

from src.core.config import VendorConfig
from src.modules.vendors.gateway import VendorGateway


def json_reply(payload: Any, preamble: str = "Here is the analysis:") -> str:
    """Wrap ``payload`` the way vendors reply: prose plus a fenced JSON block."""
    return f"{preamble}\n\n```json\n{json.dumps(payload, indent=2)}\n```\n"


def make_vendor_config(**overrides: Any) -> VendorConfig:
    values: dict[str, Any] = {
        "api_keys": {
            "gemini": SecretStr("test-google-key"),
            "openai": SecretStr("test-openai-key"),
        },
    }
    values.update(overrides)
    return VendorConfig(**values)


class StubVendorGateway(VendorGateway):
    """Gateway that records prompts and answers with a canned reply."""

    def __init__(self, config: VendorConfig | None = None):
        super().__init__(config or make_vendor_config())
        self.reply = ""
        self.error: Exception | None = None
        self.calls: list[dict[str, Any]] = []

    async def ask(self, prompt, vendor=None, model=None) -> str:
        self.calls.append({"prompt": prompt, "vendor": vendor, "model": model})
        if self.error is not None:
            raise self.error
        return self.reply


class FakeResponse:
    """Minimal ``aiohttp.ClientResponse`` used as an async context manager."""

    def __init__(self, status: int = 200, payload: Any = None, body: str = ""):
        self.status = status
        self.payload = payload
        self.body = body

    async def text(self) -> str:
        return self.body or json.dumps(self.payload)

    async def json(self, content_type: str | None = "application/json") -> Any:
        if self.payload is None:
            return json.loads(self.body)
        return self.payload

    async def __aenter__(self):
        return self

    async def __aexit__(self, *exc_info):
        return False


class FakeSession:
    """Minimal ``aiohttp.ClientSession`` recording every POST."""

    def __init__(self, response: FakeResponse | None = None, error=None):
        self.response = response or FakeResponse()
        self.error = error
        self.session_kwargs: dict[str, Any] = {}
        self.requests: list[dict[str, Any]] = []

    def __call__(self, **kwargs):
        # Used as the adapter's session factory
        self.session_kwargs = kwargs
        return self

    def post(self, url: str, json: Any = None, headers: dict | None = None):
        self.requests.append({"url": url, "json": json, "headers": headers or {}})
        if self.error is not None:
            raise self.error
        return self.response

    async def __aenter__(self):
        return self

    async def __aexit__(self, *exc_info):
        return False

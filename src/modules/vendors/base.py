"""Common contract for large-language-model vendor adapters."""

import asyncio
from abc import ABC, abstractmethod
from enum import Enum
from typing import Any, Callable

import aiohttp

from src.core.exceptions import VendorError
from src.utils.logger import get_logger

logger = get_logger(__name__)


class VendorType(str, Enum):
    GEMINI = "gemini"
    OPENAI = "openai"


class AIVendor(ABC):
    """Adapter that turns a prompt into the vendor's completion text.

    Subclasses only describe the vendor envelope: how to build the HTTP request
    and where the generated text lives in the reply. Transport, timeout and
    error mapping are shared here.
    """

    vendor_type: VendorType
    default_model: str
    default_api_url: str

    def __init__(
        self,
        api_url: str | None = None,
        timeout_seconds: float = 30.0,
        session_factory: Callable[..., aiohttp.ClientSession] = aiohttp.ClientSession,
    ):
        self.api_url = api_url or self.default_api_url
        self.timeout_seconds = timeout_seconds
        self._session_factory = session_factory

    @property
    def name(self) -> str:
        return self.vendor_type.value

    async def ask(self, prompt: str, api_key: str, model: str | None = None) -> str:
        """Send ``prompt`` and return the generated text, or "" if there is none."""
        if not api_key:
            raise VendorError(self.name, "API key is required")
        if not prompt or not prompt.strip():
            raise VendorError(self.name, "Prompt must not be empty")

        url, headers, payload = self.build_request(
            prompt, api_key, model or self.default_model
        )
        data = await self._post_json(url, headers, payload)
        return self.extract_text(data) or ""

    @abstractmethod
    def build_request(
        self, prompt: str, api_key: str, model: str
    ) -> tuple[str, dict[str, str], dict[str, Any]]:
        """Return ``(url, headers, json_body)`` for one completion request."""

    @abstractmethod
    def extract_text(self, data: dict[str, Any]) -> str:
        """Pull the completion text out of the vendor's reply envelope."""

    async def _post_json(
        self, url: str, headers: dict[str, str], payload: dict[str, Any]
    ) -> dict[str, Any]:
        timeout = aiohttp.ClientTimeout(total=self.timeout_seconds)
        try:
            async with self._session_factory(timeout=timeout) as session:
                async with session.post(url, json=payload, headers=headers) as response:
                    if response.status >= 400:
                        body = (await response.text())[:500]
                        logger.warning(
                            "Vendor returned error status",
                            vendor=self.name,
                            status_code=response.status,
                        )
                        raise VendorError(
                            self.name,
                            f"request failed with status {response.status}: {body}",
                            status_code=response.status,
                        )
                    data = await response.json(content_type=None)
        except aiohttp.ClientError as e:
            logger.error("Vendor request failed", vendor=self.name, error=str(e))
            raise VendorError(self.name, f"request failed: {e}") from e
        except asyncio.TimeoutError as e:
            logger.error(
                "Vendor request timed out",
                vendor=self.name,
                timeout_seconds=self.timeout_seconds,
            )
            raise VendorError(
                self.name, f"request timed out after {self.timeout_seconds}s"
            ) from e
        except ValueError as e:
            raise VendorError(self.name, f"reply was not valid JSON: {e}") from e

        if not isinstance(data, dict):
            raise VendorError(self.name, "reply envelope was not a JSON object")
        return data

"""OpenAI chat completions adapter."""

from typing import Any

from .base import AIVendor, VendorType

OPENAI_API_URL = "https://api.openai.com/v1/chat/completions"
OPENAI_DEFAULT_MODEL = "gpt-4o-mini"
OPENAI_MAX_TOKENS = 4000
OPENAI_TEMPERATURE = 0.7


class OpenAIVendor(AIVendor):
    vendor_type = VendorType.OPENAI
    default_model = OPENAI_DEFAULT_MODEL
    default_api_url = OPENAI_API_URL

    def build_request(
        self, prompt: str, api_key: str, model: str
    ) -> tuple[str, dict[str, str], dict[str, Any]]:
        headers = {
            "Content-Type": "application/json",
            "Authorization": f"Bearer {api_key}",
        }
        payload = {
            "model": model,
            "messages": [{"role": "user", "content": prompt}],
            "max_tokens": OPENAI_MAX_TOKENS,
            "temperature": OPENAI_TEMPERATURE,
        }
        return self.api_url, headers, payload

    def extract_text(self, data: dict[str, Any]) -> str:
        # choices[0].message.content
        choices = data.get("choices") or []
        if not choices:
            return ""
        message = choices[0].get("message") or {}
        return message.get("content") or ""

"""Google Gemini adapter."""

from typing import Any

from .base import AIVendor, VendorType

GEMINI_API_URL = "https://generativelanguage.googleapis.com/v1beta/models"
GEMINI_DEFAULT_MODEL = "gemini-2.5-flash"


class GeminiVendor(AIVendor):
    vendor_type = VendorType.GEMINI
    default_model = GEMINI_DEFAULT_MODEL
    default_api_url = GEMINI_API_URL

    def build_request(
        self, prompt: str, api_key: str, model: str
    ) -> tuple[str, dict[str, str], dict[str, Any]]:
        url = f"{self.api_url.rstrip('/')}/{model}:generateContent"
        headers = {
            "Content-Type": "application/json",
            "x-goog-api-key": api_key,
        }
        payload = {"contents": [{"parts": [{"text": prompt}]}]}
        return url, headers, payload

    def extract_text(self, data: dict[str, Any]) -> str:
        # candidates[0].content.parts[0].text
        candidates = data.get("candidates") or []
        if not candidates:
            return ""
        parts = (candidates[0].get("content") or {}).get("parts") or []
        if not parts:
            return ""
        return parts[0].get("text") or ""

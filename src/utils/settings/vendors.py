"""AI vendor credentials and transport settings."""

from pydantic import SecretStr
from pydantic_settings import BaseSettings, SettingsConfigDict


class VendorSettings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=".env", env_file_encoding="utf-8", extra="ignore"
    )

    GOOGLE_API_KEY: SecretStr = SecretStr("")
    OPENAI_API_KEY: SecretStr = SecretStr("")
    GEMINI_API_URL: str = "https://generativelanguage.googleapis.com/v1beta/models"
    OPENAI_API_URL: str = "https://api.openai.com/v1/chat/completions"
    DEFAULT_VENDOR: str = "gemini"
    VENDOR_TIMEOUT_SECONDS: float = 30.0

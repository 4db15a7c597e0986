"""Process-wide configuration assembled once at startup."""

from dataclasses import dataclass, field

from pydantic import SecretStr

from src.utils.settings.app import AppSettings
from src.utils.settings.auth import AuthSettings
from src.utils.settings.credits import CreditSettings
from src.utils.settings.vendors import VendorSettings


@dataclass(frozen=True)
class VendorConfig:
    """Credentials and endpoints for every supported AI vendor."""

    api_keys: dict[str, SecretStr] = field(default_factory=dict)
    gemini_api_url: str = "https://generativelanguage.googleapis.com/v1beta/models"
    openai_api_url: str = "https://api.openai.com/v1/chat/completions"
    default_vendor: str = "gemini"
    timeout_seconds: float = 30.0

    def api_key_for(self, vendor: str) -> str | None:
        secret = self.api_keys.get(vendor)
        if secret is None:
            return None
        return secret.get_secret_value() or None


@dataclass(frozen=True)
class AuthConfig:
    """Identity provider token verification."""

    jwt_secret: str = ""
    jwt_algorithm: str = "HS256"
    # Empty audience disables the audience check
    jwt_audience: str = ""


@dataclass(frozen=True)
class CreditConfig:
    charge_failed_attempts: bool = True


@dataclass(frozen=True)
class AppConfig:
    environment: str
    vendors: VendorConfig
    credits: CreditConfig
    auth: AuthConfig = field(default_factory=AuthConfig)

    @property
    def is_production(self) -> bool:
        return self.environment.upper() == "PROD"


def load_app_config() -> AppConfig:
    """Read every settings class once and freeze the result."""
    app_settings = AppSettings()
    vendor_settings = VendorSettings()
    credit_settings = CreditSettings()
    auth_settings = AuthSettings()

    return AppConfig(
        environment=app_settings.ENVIRONMENT,
        vendors=VendorConfig(
            api_keys={
                "gemini": vendor_settings.GOOGLE_API_KEY,
                "openai": vendor_settings.OPENAI_API_KEY,
            },
            gemini_api_url=vendor_settings.GEMINI_API_URL,
            openai_api_url=vendor_settings.OPENAI_API_URL,
            default_vendor=vendor_settings.DEFAULT_VENDOR,
            timeout_seconds=vendor_settings.VENDOR_TIMEOUT_SECONDS,
        ),
        credits=CreditConfig(
            charge_failed_attempts=credit_settings.CHARGE_FAILED_ATTEMPTS,
        ),
        auth=AuthConfig(
            jwt_secret=auth_settings.AUTH_JWT_SECRET,
            jwt_algorithm=auth_settings.AUTH_JWT_ALGORITHM,
            jwt_audience=auth_settings.AUTH_JWT_AUDIENCE,
        ),
    )

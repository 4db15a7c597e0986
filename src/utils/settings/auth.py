from pydantic_settings import BaseSettings, SettingsConfigDict


class AuthSettings(BaseSettings):
    """Identity provider token verification settings."""

    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    AUTH_JWT_SECRET: str = ""
    AUTH_JWT_ALGORITHM: str = "HS256"
    # Empty audience disables the audience check
    AUTH_JWT_AUDIENCE: str = ""

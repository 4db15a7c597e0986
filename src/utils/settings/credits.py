"""Credit metering policy settings."""

from pydantic_settings import BaseSettings, SettingsConfigDict


class CreditSettings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    # Failed tool attempts still consume allowance unless disabled
    CHARGE_FAILED_ATTEMPTS: bool = True

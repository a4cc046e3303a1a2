"""Configuration for payment-gateway."""

from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """
    Payment gateway configuration.

    All settings can be overridden via environment variables prefixed
    with PAYMENT_GATEWAY_ (e.g. PAYMENT_GATEWAY_LOG_LEVEL=DEBUG).
    """

    LOG_LEVEL: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = Field(
        default="INFO"
    )
    LOG_FORMAT: str = Field(default="%(asctime)s %(levelname)s %(name)s %(message)s")

    model_config = SettingsConfigDict(
        env_prefix="PAYMENT_GATEWAY_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=True,
        extra="ignore",
    )

# ietf_assistant/settings.py
import os
from typing import Literal, Optional

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    # core
    APP_NAME: str = Field(default="IETF AI Assistant")
    ENV: str = Field(default=os.getenv("APP_ENV", "dev"))
    DEBUG: bool = Field(default=True)
    LOG_LEVEL: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = Field(default="INFO")

    # upstream gateway
    OPENROUTER_API_KEY: Optional[str] = None
    OPENROUTER_MODEL: str = Field(default="openrouter/auto")
    OPENROUTER_SITE_URL: str = Field(default="http://localhost:3000")
    OPENROUTER_BASE_URL: str = Field(default="https://openrouter.ai/api/v1")
    # seconds; None keeps the transport default
    OPENROUTER_TIMEOUT: Optional[float] = None

    model_config = SettingsConfigDict(
        env_file=".env.dev",
        extra="ignore",
    )

    @field_validator("LOG_LEVEL", mode="before")
    @classmethod
    def _upper_log_level(cls, v):
        return v.strip().upper() if isinstance(v, str) else v

    @property
    def app_name(self) -> str:
        return self.APP_NAME

    @property
    def has_api_key(self) -> bool:
        return bool(self.OPENROUTER_API_KEY)


settings = Settings()

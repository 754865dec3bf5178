"""
Unkey Client Configuration

Defaults for the client, overridable through UNKEY_* environment variables
or a .env file. Values passed to Client explicitly always win.
The root key is never logged.
"""

from functools import lru_cache
from typing import Literal, Optional

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

SDK_VERSION = "0.1.0"
DEFAULT_BASE_URL = "https://api.unkey.dev/v1"


class Settings(BaseSettings):
    """Client settings with environment variable support."""

    model_config = SettingsConfigDict(
        env_prefix="UNKEY_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
        populate_by_name=True,
    )

    # Authentication
    root_key: str = ""

    # Transport
    base_url: str = DEFAULT_BASE_URL
    timeout: float = Field(default=30.0, gt=0)

    # Logging (UNKEY_LOG)
    log_level: Optional[Literal["DEBUG", "INFO", "WARNING", "ERROR"]] = Field(
        default=None,
        validation_alias="UNKEY_LOG",
    )

    @field_validator("base_url")
    @classmethod
    def strip_trailing_slash(cls, v: str) -> str:
        """Routes start with a slash, so the base url must not end with one."""
        return v.rstrip("/")

    @field_validator("log_level", mode="before")
    @classmethod
    def normalize_log_level(cls, v: Optional[str]) -> Optional[str]:
        if v is None or v == "":
            return None
        return v.upper()


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()

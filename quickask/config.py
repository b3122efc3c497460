"""
Runtime configuration.

Values come from the environment, or from a ``.env`` file in the working
directory. Settings are loaded once and handed to the invoker explicitly.
"""
from functools import lru_cache
from typing import Literal, Optional

from pydantic import AliasChoices, Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Settings for a single quickask run."""

    model_config = SettingsConfigDict(
        extra="ignore",
        case_sensitive=False,
        populate_by_name=True,
        env_file=".env",
    )

    # Credential; left empty when unset so the service reports the auth failure
    api_key: str = Field(default="", validation_alias=AliasChoices("API_KEY", "OPENAI_API_KEY"))

    # OpenAI-compatible endpoint, e.g. a Groq or local proxy base URL
    api_base: Optional[str] = Field(default=None, validation_alias="API_BASE")

    variant: str = Field(default="capital", validation_alias="QUICKASK_VARIANT")
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = Field(
        default="WARNING", validation_alias="LOG_LEVEL"
    )

    @field_validator("log_level", mode="before")
    @classmethod
    def _upper_log_level(cls, value):
        return value.upper() if isinstance(value, str) else value


@lru_cache()
def get_settings() -> Settings:
    """Get cached settings."""
    return Settings()

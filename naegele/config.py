"""Runtime configuration for naegele.

Settings are loaded in priority order:
  1. Environment variables (highest priority)
  2. .env file in the project root
  3. Field defaults, or a validation error if a required variable is missing

``settings`` covers the command-line entry point and has no required
fields, so the calculator always starts.  The assistant needs a Bedrock
model on top of that; its settings are built on first use by
``get_assistant_settings()`` so that a missing ``MODEL_ARN`` only fails the
assistant.

Usage::

    from naegele.config import get_assistant_settings, settings

    print(settings.log_format)
    print(get_assistant_settings().model_arn)
"""

import functools

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

LOG_FORMATS: frozenset[str] = frozenset({"text", "json"})


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        # One .env serves both classes; MODEL_ARN in it must not break Settings.
        extra="ignore",
    )

    log_format: str = Field(
        "text",
        alias="LOG_FORMAT",
        description="'json' for structured log lines, 'text' for plaintext.",
    )
    log_level: str = Field(
        "INFO",
        alias="LOG_LEVEL",
        description="Root logger level name.",
    )

    @field_validator("log_format")
    @classmethod
    def _normalise_log_format(cls, value: str) -> str:
        value = value.strip().lower()
        # Unknown formats fall back to plaintext rather than failing startup.
        return value if value in LOG_FORMATS else "text"

    @field_validator("log_level")
    @classmethod
    def _normalise_log_level(cls, value: str) -> str:
        return value.strip().upper()


class AssistantSettings(Settings):
    model_arn: str = Field(
        ...,
        alias="MODEL_ARN",
        description="AWS Bedrock model or inference profile ARN used by the assistant.",
    )


settings = Settings()


@functools.lru_cache(maxsize=1)
def get_assistant_settings() -> AssistantSettings:
    return AssistantSettings()

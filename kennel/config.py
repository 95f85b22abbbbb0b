"""Configuration loading for Kennel.

This module provides centralized configuration management:
- Load settings from environment variables and .env files
- Validate configuration using pydantic
- Provide typed access to all settings
"""

from typing import Literal

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application configuration loaded from environment.

    Uses pydantic-settings for environment variable handling with
    .env file support via python-dotenv.
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
    )

    # Output configuration
    output_backend: Literal["stdout", "null"] = Field(
        default="stdout",
        description="Output sink a dog echoes its name to",
    )
    echo_on_read: bool = Field(
        default=True,
        description="Echo the name to the output sink whenever it is read",
    )

    # Dog configuration
    dog_name: str = Field(
        default="",
        description="Name given to the dog built by the entry point",
    )

    # Logging configuration
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = Field(
        default="WARNING",
        description="Log level",
    )
    log_format: Literal["json", "text"] = Field(
        default="text",
        description="Log format",
    )

    @field_validator("dog_name")
    @classmethod
    def validate_dog_name(cls, v: str) -> str:
        """Ensure the name fits on a single output line."""
        if "\n" in v or "\r" in v:
            raise ValueError("dog_name must not contain line breaks")
        return v


def load_settings(env_file: str | None = None) -> Settings:
    """Load application settings from environment.

    Args:
        env_file: Optional path to .env file. If not provided,
                 uses the default .env in the current directory.

    Returns:
        Validated Settings instance.

    Raises:
        ValidationError: If settings validation fails.
    """
    if env_file:
        return Settings(_env_file=env_file)  # type: ignore[call-arg]
    return Settings()


__all__ = ["Settings", "load_settings"]

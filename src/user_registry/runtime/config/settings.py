from pathlib import Path
from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class EnvironmentVariables(BaseSettings):
    """Simple primitive values loaded from environment variables and .env files."""

    model_config = SettingsConfigDict(
        env_prefix="APP_",
        env_file=".env",
        env_file_encoding="utf-8",
        env_ignore_empty=True,
        extra="ignore",
    )

    # Selects the <ENVIRONMENT>_ prefixed overrides applied before substitution
    environment: Literal["development", "production", "test"] = Field(
        default="development"
    )
    config_file: Path = Field(default=Path("config.yaml"))

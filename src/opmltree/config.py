"""Application configuration.

Configuration is loaded from environment variables. For local development, you can provide a
`.env` file and set `OPMLTREE_ENV_FILE` to point to it.
"""

from __future__ import annotations

import os
from pathlib import Path

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """opmltree settings.

    All fields are environment-configurable. Prefix is `OPMLTREE_`.
    """

    model_config = SettingsConfigDict(
        env_prefix="OPMLTREE_",
        env_file=None,
        env_file_encoding="utf-8",
        extra="ignore",
    )

    log_level: str = Field(default="WARNING")

    # Files read and written by the CLI
    encoding: str = Field(default="utf-8")
    json_indent: int = Field(default=2, ge=0, le=8)


def load_settings() -> Settings:
    """Load settings from env.

    Returns:
        Settings: Parsed settings.
    """

    env_file_override = os.getenv("OPMLTREE_ENV_FILE")
    if env_file_override:
        return Settings(_env_file=Path(env_file_override))

    default_env = Path.cwd() / ".env"
    if default_env.exists():
        return Settings(_env_file=default_env)

    return Settings()

"""FiqhQA backend configuration.

Values are resolved in this order, first match wins:

1. process environment
2. the file named by ``FIQHQA_ENV_FILE``
3. ``config/.env.dev`` (local development)
4. ``config/.env`` (deployment)
5. field defaults

Only ``JWT_SECRET_KEY`` has no default; the service refuses to start
without it.
"""

from __future__ import annotations

import logging
import os
from functools import lru_cache
from pathlib import Path
from typing import Any

from pydantic import Field, SecretStr, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

PROJECT_ROOT = Path(__file__).resolve().parents[2]
CONFIG_DIR = PROJECT_ROOT / "config"

# bcrypt accepts cost factors 4..31
MIN_HASH_ROUNDS = 4
MAX_HASH_ROUNDS = 31


def _env_files() -> tuple[Path, ...]:
    """Candidate env files, lowest priority first. Missing files are skipped."""
    files = [CONFIG_DIR / ".env", CONFIG_DIR / ".env.dev"]

    explicit = os.environ.get("FIQHQA_ENV_FILE")
    if explicit:
        path = Path(explicit)
        files.append(path if path.is_absolute() else PROJECT_ROOT / path)

    return tuple(files)


class Settings(BaseSettings):
    """Runtime configuration for the API, storage and credentials."""

    model_config = SettingsConfigDict(
        env_file=_env_files(),
        env_file_encoding="utf-8",
        extra="ignore",
    )

    app_name: str = "FiqhQA"
    debug: bool = False

    # Tokens
    jwt_secret_key: SecretStr
    jwt_access_token_expire_minutes: int = Field(default=60, gt=0)

    # Credentials
    password_hash_rounds: int = Field(
        default=12,
        ge=MIN_HASH_ROUNDS,
        le=MAX_HASH_ROUNDS,
    )

    # Storage
    database_url: str = "sqlite+aiosqlite:///./data/fiqhqa.db"

    # HTTP
    api_host: str = "0.0.0.0"
    api_port: int = 8080
    api_debug: bool = False  # Serves /docs and /openapi.json
    api_detailed_errors: bool = False  # Error text instead of generic messages
    api_cors_origins: str = ""  # Comma separated, empty disables CORS

    log_level: str = "INFO"

    @field_validator("jwt_secret_key")
    @classmethod
    def _require_secret(cls, value: SecretStr) -> SecretStr:
        if not value.get_secret_value().strip():
            msg = "JWT_SECRET_KEY must not be blank"
            raise ValueError(msg)
        return value

    @field_validator("api_cors_origins", mode="before")
    @classmethod
    def _join_origins(cls, value: Any) -> str:
        if isinstance(value, (list, tuple)):
            return ",".join(value)
        return value or ""

    @field_validator("log_level")
    @classmethod
    def _known_log_level(cls, value: str) -> str:
        level = value.strip().upper()
        if not isinstance(logging.getLevelName(level), int):
            msg = f"Unknown log level: {value}"
            raise ValueError(msg)
        return level

    @property
    def cors_origins(self) -> list[str]:
        return [
            origin.strip()
            for origin in self.api_cors_origins.split(",")
            if origin.strip()
        ]

    @property
    def api_address(self) -> str:
        return f"{self.api_host}:{self.api_port}"


@lru_cache()
def get_settings() -> Settings:
    """Load settings once per process."""
    return Settings()  # type: ignore[call-arg]  # filled from the environment


def clear_settings_cache() -> None:
    """Forget the loaded settings so the next call re-reads the environment."""
    get_settings.cache_clear()

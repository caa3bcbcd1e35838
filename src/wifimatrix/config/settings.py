"""Configuration management for wifimatrix.

Loads settings from a YAML configuration file with environment variable
overrides and .env files. With no file and no environment the server
binds 0.0.0.0:3000 and serves the packaged control panel.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Literal

import yaml
from pydantic import BaseModel, Field, field_validator
from pydantic_settings import BaseSettings

logger = logging.getLogger(__name__)

DEFAULT_CONFIG_PATH = Path("config/wifimatrix.yaml")

# Control panel assets shipped inside the package
DEFAULT_ASSET_ROOT = Path(__file__).resolve().parent.parent / "public"


class ServerConfig(BaseModel):
    host: str = Field(default="0.0.0.0", description="Bind address")
    port: int = Field(default=3000, ge=1, le=65535)
    asset_root: Path = Field(
        default=DEFAULT_ASSET_ROOT,
        description="Directory whose files are served read-only",
    )


class LoggingConfig(BaseModel):
    level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = Field(default="INFO")
    format: str = Field(
        default="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    )
    file: str | None = Field(default=None)

    @field_validator("level", mode="before")
    @classmethod
    def _upper_level(cls, value: object) -> object:
        # Canonical names only: uvicorn has no WARN or FATAL alias
        return value.upper() if isinstance(value, str) else value


class Settings(BaseSettings):
    """Root configuration for wifimatrix.

    Loads from YAML file and supports environment variable overrides
    such as ``WIFIMATRIX_SERVER__PORT=8000``. Reads .env files
    automatically.
    """

    model_config = {
        "env_prefix": "WIFIMATRIX_",
        "env_nested_delimiter": "__",
        "env_file": ".env",
        "env_file_encoding": "utf-8",
        "extra": "ignore",
    }

    server: ServerConfig = Field(default_factory=ServerConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls,
        init_settings,
        env_settings,
        dotenv_settings,
        file_secret_settings,
    ):
        # YAML values arrive as init kwargs and rank below the environment
        return env_settings, dotenv_settings, init_settings, file_secret_settings


def load_settings(config_path: Path | str | None = None) -> Settings:
    """Load settings from YAML + .env + environment variables.

    Priority: env vars > .env file > YAML file > defaults
    """
    path = Path(config_path) if config_path else DEFAULT_CONFIG_PATH

    yaml_data = {}
    if path.exists():
        with open(path) as f:
            yaml_data = yaml.safe_load(f) or {}
        logger.info("Loaded configuration from %s", path)
    else:
        logger.debug("Config file %s not found, using defaults + env vars", path)

    return Settings(**yaml_data)


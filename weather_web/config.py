# ABOUTME: Startup configuration read from the process environment and an optional .env file.
# ABOUTME: Exits the process when the OpenWeatherMap API key is missing; parses host, port and log level.

import logging
import os

from dotenv import load_dotenv
from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

load_dotenv()

logger = logging.getLogger(__name__)

API_KEY_ENV = "API_KEY"
DEFAULT_PORT = 3000


class ServerSettings(BaseSettings):
    """Where the server listens and how verbosely it logs (HOST, PORT, LOG_LEVEL)."""

    model_config = SettingsConfigDict(
        case_sensitive=False,
        env_file=".env",
        env_file_encoding="utf-8",
        env_ignore_empty=True,
        extra="ignore",
    )

    host: str = "0.0.0.0"
    port: int = Field(default=DEFAULT_PORT, ge=1, le=65535)
    log_level: str = "INFO"

    @field_validator("log_level")
    @classmethod
    def _known_level(cls, value: str) -> str:
        level = value.upper()
        if level not in logging.getLevelNamesMapping():
            raise ValueError(f"Unknown log level: {value}")
        return level


def load_api_key() -> str:
    """Return the API key, or terminate the process if it is not configured."""
    api_key = os.environ.get(API_KEY_ENV, "")
    if not api_key:
        logger.critical("API key not found. Make sure to set the %s environment variable.", API_KEY_ENV)
        raise SystemExit(1)
    return api_key


def load_server_settings() -> ServerSettings:
    return ServerSettings()

"""
Process configuration.

Everything is read once from the environment (optionally seeded from a
.env file). The API key is validated here so a bad key stops the process
before any tool is registered.
"""

import os
import re
from dataclasses import dataclass, field
from typing import Mapping, Optional

from dotenv import load_dotenv

from .base import ConfigurationError

API_ENDPOINT = "https://api.chaosintelligenceinc.com/functions/v1/chaos-mcp-server"
API_KEY_ENV = "CHAOS_API_KEY"
API_KEY_URL = "https://chaosintelligence.com/settings/api"
API_KEY_PATTERN = re.compile(r"chaos_[a-zA-Z0-9]{32}")

SERVER_NAME = "chaos-intelligence"
SERVER_VERSION = "1.0.0"
LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


def validate_api_key(api_key: Optional[str]) -> str:
    """Return the key unchanged, or raise ConfigurationError with guidance."""
    if not api_key:
        raise ConfigurationError(
            f"{API_KEY_ENV} environment variable is required.",
            details={"hint": f"Get your API key at {API_KEY_URL}"},
        )
    if API_KEY_PATTERN.fullmatch(api_key) is None:
        raise ConfigurationError(
            f"{API_KEY_ENV} has invalid format. "
            "Expected: chaos_ followed by 32 alphanumeric characters."
        )
    return api_key


def validate_log_level(level: Optional[str]) -> str:
    """Normalize a logging level name, or raise ConfigurationError."""
    name = (level or "INFO").strip().upper()
    if name not in LOG_LEVELS:
        raise ConfigurationError(
            f"CHAOS_LOG_LEVEL has invalid value: {level!r}. "
            f"Expected one of: {', '.join(LOG_LEVELS)}."
        )
    return name


@dataclass(frozen=True)
class Settings:
    api_key: str = field(repr=False)
    api_url: str = API_ENDPOINT
    log_level: str = "INFO"

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "Settings":
        """
        Build settings from the process environment.

        When no mapping is given, a .env file in the working directory is
        loaded first (existing variables win).
        """
        if environ is None:
            load_dotenv()
            environ = os.environ

        return cls(
            api_key=validate_api_key(environ.get(API_KEY_ENV)),
            api_url=environ.get("CHAOS_API_URL") or API_ENDPOINT,
            log_level=validate_log_level(environ.get("CHAOS_LOG_LEVEL")),
        )

"""
Configuration for the helper server.

Values come from the environment, optionally seeded from a .env file.
Variables already present in the environment always win over the file.
"""

import logging
import os
from dataclasses import dataclass

from dotenv import find_dotenv, load_dotenv

DEFAULT_HOST: str = "0.0.0.0"
DEFAULT_PORT: int = 3000
DEFAULT_LOG_LEVEL: str = "INFO"

VALID_LOG_LEVELS = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


@dataclass(frozen=True)
class ServerConfig:
    """Runtime settings for the HTTP server."""
    host: str = DEFAULT_HOST
    port: int = DEFAULT_PORT
    log_level: str = DEFAULT_LOG_LEVEL
    log_file: str | None = None

    @property
    def log_level_number(self) -> int:
        return logging.getLevelName(self.log_level)


def load_server_config(env_file: str | None = None) -> ServerConfig:
    """Load and validate the server configuration.

    Args:
        env_file: Optional path to a .env file; by default a .env file in the
            working directory is used when present

    Returns:
        Validated configuration

    Raises:
        ValueError: If a variable has an invalid value
    """
    if env_file:
        load_dotenv(env_file, override=False)
    else:
        load_dotenv(find_dotenv(usecwd=True), override=False)

    config = ServerConfig(
        host=os.getenv("HOST", DEFAULT_HOST),
        port=parse_port(os.getenv("PORT", str(DEFAULT_PORT))),
        log_level=os.getenv("LOG_LEVEL", DEFAULT_LOG_LEVEL).upper(),
        log_file=os.getenv("LOG_FILE") or None,
    )
    validate_config(config)
    return config


def parse_port(value: str) -> int:
    try:
        return int(value)
    except ValueError:
        raise ValueError(f"PORT must be an integer, got '{value}'")


def validate_config(config: ServerConfig) -> None:
    """Validate configuration values."""
    if not config.host:
        raise ValueError("HOST must not be empty")
    if not 1 <= config.port <= 65535:
        raise ValueError("PORT must be between 1 and 65535")
    if config.log_level not in VALID_LOG_LEVELS:
        raise ValueError(f"LOG_LEVEL must be one of {VALID_LOG_LEVELS}")

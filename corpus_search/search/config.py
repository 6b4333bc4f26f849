"""
Configuration management for the search service.
"""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from typing import Optional

from dotenv import load_dotenv

from .exceptions import ConfigurationException

DEFAULT_ENDPOINT = "http://localhost:9200"
DEFAULT_MODEL_ID = "AbDZGo8BB3UUeZ_94CHA"


def _env_bool(name: str, default: str) -> bool:
    return os.getenv(name, default).lower() == "true"


def _env_int(name: str, default: str) -> int:
    raw = os.getenv(name, default)
    try:
        return int(raw)
    except ValueError as e:
        raise ConfigurationException(f"{name} must be an integer, got {raw!r}") from e


@dataclass
class OpenSearchConfig:
    """OpenSearch client configuration."""

    endpoint: str = DEFAULT_ENDPOINT
    username: Optional[str] = None
    password: Optional[str] = None
    verify_certs: bool = False
    timeout: int = 30

    @classmethod
    def from_environment(cls) -> "OpenSearchConfig":
        """Create configuration from environment variables."""
        timeout = _env_int("SEARCH_TIMEOUT_SECONDS", "30")
        if timeout <= 0:
            raise ConfigurationException("SEARCH_TIMEOUT_SECONDS must be positive")

        return cls(
            endpoint=os.getenv("ENDPOINT", DEFAULT_ENDPOINT),
            username=os.getenv("OUSER", "admin"),
            password=os.getenv("PASSWORD", "admin"),
            verify_certs=_env_bool("SEARCH_VERIFY_CERTS", "false"),
            timeout=timeout,
        )


@dataclass
class SearchServiceConfig:
    """Main search service configuration."""

    opensearch_config: OpenSearchConfig = field(default_factory=OpenSearchConfig)

    # Neural query configuration
    model_id: str = DEFAULT_MODEL_ID

    # Startup behaviour
    fail_fast: bool = True

    # Logging
    log_level: str = "INFO"
    json_logs: bool = True

    @classmethod
    def from_environment(cls, env_file: Optional[str] = ".env") -> "SearchServiceConfig":
        """Create configuration from environment variables, reading `env_file` first if it exists."""
        if env_file:
            # Values already in the environment win over the file.
            load_dotenv(env_file, override=False)

        model_id = os.getenv("SEARCH_NEURAL_MODEL_ID", DEFAULT_MODEL_ID)
        if not model_id:
            raise ConfigurationException("SEARCH_NEURAL_MODEL_ID must not be empty")

        return cls(
            opensearch_config=OpenSearchConfig.from_environment(),
            model_id=model_id,
            fail_fast=_env_bool("SEARCH_FAIL_FAST", "true"),
            log_level=os.getenv("SEARCH_LOG_LEVEL", "INFO"),
            json_logs=_env_bool("SEARCH_JSON_LOGS", "true"),
        )

"""Application settings loaded from the environment."""

import os
from dataclasses import dataclass

from dotenv import find_dotenv, load_dotenv

from domain.exceptions import ConfigurationError

from .leetcode_client import DEFAULT_ENDPOINT, DEFAULT_TIMEOUT_MS, DEFAULT_USER_AGENT

DEFAULT_USERNAME = "AmirMahdi-Tizchang"


@dataclass(frozen=True)
class Settings:
    endpoint: str = DEFAULT_ENDPOINT
    username: str = DEFAULT_USERNAME
    timeout_ms: int = DEFAULT_TIMEOUT_MS
    user_agent: str = DEFAULT_USER_AGENT
    log_level: str = "INFO"

    @classmethod
    def from_env(cls, load_env_file: bool = True) -> "Settings":
        """
        Build settings from environment variables.

        Args:
            load_env_file: Whether to load a `.env` file first

        Raises:
            ConfigurationError: If a value is present but invalid
        """
        if load_env_file:
            load_dotenv(find_dotenv(usecwd=True))

        username = os.getenv("LEETCODE_USERNAME", DEFAULT_USERNAME).strip()
        if not username:
            raise ConfigurationError("LEETCODE_USERNAME must not be empty")

        raw_timeout = os.getenv("LEETCODE_TIMEOUT_MS", str(DEFAULT_TIMEOUT_MS))
        try:
            timeout_ms = int(raw_timeout)
        except ValueError as e:
            raise ConfigurationError(f"LEETCODE_TIMEOUT_MS must be an integer, got {raw_timeout!r}") from e
        if timeout_ms <= 0:
            raise ConfigurationError(f"LEETCODE_TIMEOUT_MS must be positive, got {timeout_ms}")

        endpoint = os.getenv("LEETCODE_GRAPHQL_URL", DEFAULT_ENDPOINT).strip()
        if not endpoint:
            raise ConfigurationError("LEETCODE_GRAPHQL_URL must not be empty")

        return cls(
            endpoint=endpoint,
            username=username,
            timeout_ms=timeout_ms,
            user_agent=os.getenv("LEETCODE_USER_AGENT", DEFAULT_USER_AGENT),
            log_level=os.getenv("LOG_LEVEL", "INFO").upper(),
        )

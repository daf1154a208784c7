from dotenv import load_dotenv
from dataclasses import dataclass, field
from typing import Optional
import os

from webanalyse.constants import (
    DEFAULT_HOST,
    DEFAULT_PORT,
    DEFAULT_USER_AGENT,
    FETCH_TIMEOUT_SECONDS,
    PROBE_TIMEOUT_SECONDS,
)

load_dotenv()  # Loads variables from .env file


def default_worker_count() -> int:
    """Number of probe workers: one per available CPU, at least one."""
    return max(1, os.cpu_count() or 1)


def _env_number(name: str, default, cast):
    """Read a numeric environment variable, keeping the default if it is unset or invalid."""
    value = os.getenv(name)
    if value is None or not value.strip():
        return default
    try:
        return cast(value)
    except ValueError:
        return default


@dataclass
class Config:
    """Configuration for the page analyser and its web front-end."""
    host: str = DEFAULT_HOST
    port: int = DEFAULT_PORT
    user_agent: str = DEFAULT_USER_AGENT
    fetch_timeout: float = FETCH_TIMEOUT_SECONDS
    probe_timeout: float = PROBE_TIMEOUT_SECONDS
    max_workers: int = field(default_factory=default_worker_count)
    log_level: str = "INFO"
    log_file: Optional[str] = None

    def __post_init__(self):
        if self.max_workers < 1:
            self.max_workers = 1

    @classmethod
    def from_env(cls) -> "Config":
        """Load configuration from environment variables.

        Returns:
            Config: Configuration instance with values from environment
        """
        return cls(
            host=os.getenv("WEBANALYSE_HOST", DEFAULT_HOST),
            port=_env_number("WEBANALYSE_PORT", DEFAULT_PORT, int),
            user_agent=os.getenv("USER_AGENT", DEFAULT_USER_AGENT),
            fetch_timeout=_env_number("FETCH_TIMEOUT", FETCH_TIMEOUT_SECONDS, float),
            probe_timeout=_env_number("PROBE_TIMEOUT", PROBE_TIMEOUT_SECONDS, float),
            max_workers=_env_number("MAX_WORKERS", default_worker_count(), int),
            log_level=os.getenv("LOG_LEVEL", "INFO"),
            log_file=os.getenv("LOG_FILE") or None,
        )

    def to_dict(self) -> dict:
        """Convert configuration to dictionary."""
        return {
            field_name: getattr(self, field_name)
            for field_name in self.__dataclass_fields__
        }

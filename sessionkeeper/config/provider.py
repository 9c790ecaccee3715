"""Configuration provider following Black Box Design principles."""
import os
from typing import Protocol

from sessionkeeper.modules.api.models import SessionConfig


class ConfigProvider(Protocol):
    """Protocol for configuration providers."""

    def get_session_config(self) -> SessionConfig:
        """Get session registry configuration."""
        ...

    def get_log_level(self) -> str:
        """Get the log level name."""
        ...


def _int_env(name: str, default: int) -> int:
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return default
    try:
        return int(raw)
    except ValueError:
        raise ValueError(f"{name} must be an integer, got {raw!r}") from None


class EnvConfigProvider:
    """Environment-based configuration provider."""

    def get_session_config(self) -> SessionConfig:
        """Get session configuration from environment variables."""
        return SessionConfig(
            timeout_ms=_int_env("SESSION_TIMEOUT_MS", 300000),
            max_sessions=_int_env("SESSION_MAX_SESSIONS", 1000),
        )

    def get_log_level(self) -> str:
        """Get log level from environment variables."""
        return os.getenv("SESSIONKEEPER_LOG_LEVEL", "INFO").upper()

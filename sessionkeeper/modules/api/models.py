"""
Sessionkeeper shared data models.

These models define the structure of session records and registry
configuration passed between components.
"""

from datetime import datetime
from enum import Enum
from typing import Any, Mapping

from pydantic import BaseModel, ConfigDict, Field

# Enums


class SessionStatus(str, Enum):
    """Status of a tracked session."""

    ACTIVE = "active"
    IDLE = "idle"
    TERMINATED = "terminated"
    SUSPENDED = "suspended"


# Internal Models


class Session(BaseModel):
    """In-memory session record."""

    model_config = ConfigDict(validate_assignment=True)

    id: str
    status: SessionStatus = SessionStatus.ACTIVE
    created_at: datetime
    last_activity: datetime
    # Caller-defined, untyped; stored as the caller's own object.
    metadata: Any = None

    def idle_ms(self, now: datetime) -> float:
        """Milliseconds elapsed since the last recorded activity."""
        return (now - self.last_activity).total_seconds() * 1000


# Configuration Models


class SessionConfig(BaseModel):
    """Configuration for a session registry.

    Values are taken as given: zero or negative timeouts are not rejected.
    """

    timeout_ms: int = Field(default=300000, description="Idle threshold in milliseconds")
    max_sessions: int = Field(
        default=1000, description="Advisory capacity, logged but never enforced"
    )

    @classmethod
    def from_mapping(cls, mapping: Mapping[str, Any]) -> "SessionConfig":
        """
        Build a config from a partial mapping.

        Accepts snake_case keys or the camelCase ``timeoutMs``/``maxSessions``
        spelling. Missing or None values fall back to defaults.
        """
        aliases = {"timeoutMs": "timeout_ms", "maxSessions": "max_sessions"}
        values = {}
        for key, value in mapping.items():
            if value is None:
                continue
            values[aliases.get(key, key)] = value
        return cls(**values)

"""
Sessionkeeper - In-memory session registry

Tracks short-lived session records for a single process: creation,
lookup, mutation, termination and idle cleanup.

Modules:
- api: Session and configuration data models
- session: The session registry
"""

from sessionkeeper.modules.api.models import Session, SessionConfig, SessionStatus
from sessionkeeper.modules.session import SessionRegistry

__version__ = "1.0.0"

__all__ = ["Session", "SessionConfig", "SessionRegistry", "SessionStatus", "__version__"]

import logging
from datetime import UTC, datetime
from typing import Any, Callable, Dict, List, Mapping, Optional, Union

from sessionkeeper.config.provider import ConfigProvider, EnvConfigProvider
from sessionkeeper.modules.api.models import Session, SessionConfig, SessionStatus

logger = logging.getLogger(__name__)

Clock = Callable[[], datetime]

# Identity fields are fixed at creation; update() never rewrites them.
LOCKED_FIELDS = frozenset({"id", "created_at"})


def utc_now() -> datetime:
    return datetime.now(UTC)


class SessionRegistry:
    def __init__(
        self,
        config: Union[SessionConfig, Mapping[str, Any], None] = None,
        clock: Optional[Clock] = None,
    ):
        """
        Initialize an empty session registry.

        Args:
            config: SessionConfig, or a mapping with optional timeout_ms/max_sessions
            clock: Callable returning the current timezone-aware datetime
        """
        if config is None:
            config = SessionConfig()
        elif not isinstance(config, SessionConfig):
            config = SessionConfig.from_mapping(config)

        self._config = config
        self._clock = clock or utc_now
        self._sessions: Dict[str, Session] = {}

    @classmethod
    def from_env(
        cls, provider: Optional[ConfigProvider] = None, clock: Optional[Clock] = None
    ) -> "SessionRegistry":
        """Build a registry from a configuration provider (environment by default)."""
        provider = provider or EnvConfigProvider()
        return cls(provider.get_session_config(), clock=clock)

    @property
    def config(self) -> SessionConfig:
        return self._config

    def __len__(self) -> int:
        return len(self._sessions)

    def __contains__(self, session_id: object) -> bool:
        return session_id in self._sessions

    def create(self, session_id: str, metadata: Optional[Dict[Any, Any]] = None) -> Session:
        """
        Create (or replace) a session.

        Args:
            session_id: Caller-supplied identifier
            metadata: Optional caller-defined key/value data

        Returns:
            The stored session record (live, not a copy)

        Logic:
        1. Stamp created_at and last_activity with the same instant
        2. Store under session_id, discarding any previous record
        3. Warn when the advisory capacity is exceeded
        """
        now = self._clock()
        session = Session(
            id=session_id,
            status=SessionStatus.ACTIVE,
            created_at=now,
            last_activity=now,
            metadata=metadata,
        )

        replacing = session_id in self._sessions
        self._sessions[session_id] = session

        if replacing:
            logger.debug(f"Replaced existing session {session_id}")
        else:
            logger.debug(f"Created session {session_id}")
            if len(self._sessions) > self._config.max_sessions:
                logger.warning(
                    f"Session count {len(self._sessions)} exceeds max_sessions "
                    f"({self._config.max_sessions}); capacity is not enforced"
                )

        return session

    def get(self, session_id: str) -> Optional[Session]:
        """
        Get a session.

        Args:
            session_id: Session identifier

        Returns:
            Live session record or None if not found
        """
        return self._sessions.get(session_id)

    def update(
        self, session_id: str, updates: Optional[Mapping[str, Any]] = None, **fields: Any
    ) -> bool:
        """
        Merge fields onto an existing session and refresh its activity time.

        Fields may be passed as a mapping, as keyword arguments, or both
        (keywords win). Each provided field replaces the old value; id and
        created_at are never rewritten.

        Args:
            session_id: Session identifier
            updates: Mapping of field name to new value

        Returns:
            True if the session exists and was updated
        """
        session = self._sessions.get(session_id)
        if session is None:
            logger.debug(f"Update ignored for unknown session {session_id}")
            return False

        changes = dict(updates or {})
        changes.update(fields)

        accepted = {}
        for name, value in changes.items():
            if name in LOCKED_FIELDS:
                logger.warning(f"Refusing to change {name} of session {session_id}")
                continue
            if name not in Session.model_fields:
                logger.warning(f"Ignoring unknown session field {name!r} for {session_id}")
                continue
            accepted[name] = value

        accepted["last_activity"] = self._clock()
        # Validate the merged record before touching the stored one.
        candidate = Session.model_validate({**dict(session), **accepted})
        for name in accepted:
            setattr(session, name, getattr(candidate, name))
        return True

    def terminate(self, session_id: str) -> bool:
        """
        Mark a session terminated. The record stays in the registry.

        Returns:
            True if the session exists
        """
        session = self._sessions.get(session_id)
        if session is None:
            logger.debug(f"Terminate ignored for unknown session {session_id}")
            return False

        session.status = SessionStatus.TERMINATED
        return True

    def list(self) -> List[Session]:
        """Return all sessions in a new list. Elements are the live records."""
        return list(self._sessions.values())

    def list_active(self) -> List[Session]:
        """Return sessions whose status is active."""
        return [s for s in self._sessions.values() if s.status == SessionStatus.ACTIVE]

    def cleanup(self) -> int:
        """
        Flag sessions idle past the configured timeout.

        Should be called periodically by the owner of the registry.

        Returns:
            Number of sessions flagged idle in this pass

        Logic:
        1. Read the clock once for the whole pass
        2. Any session with more than timeout_ms since last_activity becomes idle,
           whatever its current status
        3. last_activity is left alone, so the same sessions are counted again
           on the next pass unless they are updated
        """
        now = self._clock()
        timeout_ms = self._config.timeout_ms
        cleaned = 0

        for session in self._sessions.values():
            if session.idle_ms(now) > timeout_ms:
                session.status = SessionStatus.IDLE
                cleaned += 1

        if cleaned:
            logger.info(f"Cleanup flagged {cleaned} idle session(s)")

        return cleaned

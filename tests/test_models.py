"""
Unit tests for Sessionkeeper data models.
"""

from datetime import UTC, datetime, timedelta

import pytest
from pydantic import ValidationError

from sessionkeeper.modules.api.models import Session, SessionConfig, SessionStatus


def make_session(**overrides):
    now = datetime(2024, 1, 1, tzinfo=UTC)
    fields = {"id": "s1", "created_at": now, "last_activity": now}
    fields.update(overrides)
    return Session(**fields)


class TestSessionStatus:
    """Test session status values."""

    def test_values(self):
        assert {s.value for s in SessionStatus} == {"active", "idle", "terminated", "suspended"}

    def test_compares_as_string(self):
        assert SessionStatus.IDLE == "idle"


class TestSession:
    """Test the session record model."""

    def test_defaults(self):
        session = make_session()
        assert session.status == SessionStatus.ACTIVE
        assert session.metadata is None

    def test_status_assignment_coerced(self):
        session = make_session()
        session.status = "terminated"
        assert session.status is SessionStatus.TERMINATED

    def test_invalid_status_rejected(self):
        session = make_session()
        with pytest.raises(ValidationError):
            session.status = "paused"

    def test_metadata_accepts_arbitrary_values(self):
        metadata = {"n": 1, "nested": {"ok": [1, 2]}, "flag": None}
        assert make_session(metadata=metadata).metadata == metadata

    def test_idle_ms(self):
        session = make_session()
        later = session.last_activity + timedelta(seconds=1, milliseconds=500)
        assert session.idle_ms(later) == 1500

    def test_json_dump_uses_iso_timestamps(self):
        data = make_session(metadata={"k": "v"}).model_dump(mode="json")
        assert data["status"] == "active"
        assert data["created_at"].startswith("2024-01-01T00:00:00")
        assert data["metadata"] == {"k": "v"}


class TestSessionConfig:
    """Test registry configuration model."""

    def test_defaults(self):
        config = SessionConfig()
        assert config.timeout_ms == 300000
        assert config.max_sessions == 1000

    def test_no_range_validation(self):
        config = SessionConfig(timeout_ms=-1, max_sessions=0)
        assert config.timeout_ms == -1
        assert config.max_sessions == 0

    def test_from_mapping_partial(self):
        config = SessionConfig.from_mapping({"max_sessions": 5})
        assert config.timeout_ms == 300000
        assert config.max_sessions == 5

    def test_from_mapping_camel_case(self):
        config = SessionConfig.from_mapping({"timeoutMs": 10})
        assert config.timeout_ms == 10

    def test_from_mapping_none_means_default(self):
        config = SessionConfig.from_mapping({"timeout_ms": None, "maxSessions": None})
        assert config == SessionConfig()

    def test_from_mapping_empty(self):
        assert SessionConfig.from_mapping({}) == SessionConfig()

"""
Shared pytest fixtures for Sessionkeeper tests.

This module provides:
- FakeClock: a manually advanced clock for idle-timeout tests
- Registry fixtures bound to that clock
"""

import os
import sys
from datetime import UTC, datetime, timedelta

import pytest

# Add parent directory to path for imports
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from sessionkeeper.modules.session import SessionRegistry


class FakeClock:
    """Clock that only moves when told to."""

    def __init__(self, start: datetime = None):
        self.now = start or datetime(2024, 1, 1, 12, 0, 0, tzinfo=UTC)

    def __call__(self) -> datetime:
        return self.now

    def advance(self, ms: float) -> None:
        self.now += timedelta(milliseconds=ms)


@pytest.fixture
def clock():
    """Create a fake clock starting at a fixed instant."""
    return FakeClock()


@pytest.fixture
def registry(clock):
    """Create a registry with default config and the fake clock."""
    return SessionRegistry(clock=clock)


@pytest.fixture
def short_registry(clock):
    """Create a registry with a 1 second idle timeout."""
    return SessionRegistry({"timeout_ms": 1000}, clock=clock)

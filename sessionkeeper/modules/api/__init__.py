"""
API Module - Shared data models

Purpose: Define the session record, its status values and registry configuration
Interface: Session, SessionStatus, SessionConfig
"""

from .models import Session, SessionConfig, SessionStatus

__all__ = ["Session", "SessionConfig", "SessionStatus"]

"""
Session Module - Black Box Interface

Purpose: Track short-lived session records in memory
Interface: create(), get(), update(), terminate(), list(), list_active(), cleanup()
Hidden: Storage mapping, clock source, idle threshold bookkeeping

No persistence and no locking: callers sharing a registry across threads
must guard it themselves.
"""

from .session import SessionRegistry

__all__ = ["SessionRegistry"]

"""Persistent state."""

from .sqlite_store import SqliteStateStore, CONNECTIVITY_NOTICE_OPTION

__all__ = ["SqliteStateStore", "CONNECTIVITY_NOTICE_OPTION"]

"""SQLite-backed state store.

Holds the connectivity flag raised when a Slack dispatch fails, so an admin
notice can surface it later.
"""

from __future__ import annotations

import sqlite3
from datetime import datetime, timezone
from typing import Optional

CONNECTIVITY_NOTICE_OPTION = "slack_notice_connectivity"


class SqliteStateStore:
    def __init__(self, path: str = "slack_state.db"):
        self.path = path
        self._init_db()

    def _connect(self) -> sqlite3.Connection:
        return sqlite3.connect(self.path, timeout=30)

    def _init_db(self) -> None:
        with self._connect() as conn:
            conn.execute(
                """
                CREATE TABLE IF NOT EXISTS options (
                    name TEXT PRIMARY KEY,
                    value TEXT NOT NULL,
                    updated_at TEXT NOT NULL
                );
                """
            )
            conn.commit()

    def get_option(self, name: str, default: Optional[str] = None) -> Optional[str]:
        with self._connect() as conn:
            row = conn.execute("SELECT value FROM options WHERE name = ?;", (name,)).fetchone()
        if not row:
            return default
        return row[0]

    def update_option(self, name: str, value: str) -> None:
        with self._connect() as conn:
            conn.execute(
                "INSERT OR REPLACE INTO options(name, value, updated_at) VALUES(?,?,?);",
                (name, str(value), datetime.now(timezone.utc).isoformat()),
            )
            conn.commit()

    def delete_option(self, name: str) -> None:
        with self._connect() as conn:
            conn.execute("DELETE FROM options WHERE name = ?;", (name,))
            conn.commit()

    # Failure flag sink

    def signal_connectivity_failure(self) -> None:
        self.update_option(CONNECTIVITY_NOTICE_OPTION, "1")

    def connectivity_failed(self) -> bool:
        return self.get_option(CONNECTIVITY_NOTICE_OPTION, "0") == "1"

    def clear_connectivity_failure(self) -> None:
        self.delete_option(CONNECTIVITY_NOTICE_OPTION)

"""Unit tests for the SQLite state store."""

from __future__ import annotations

import os
import tempfile
import threading

import pytest

from slack_notify.state import CONNECTIVITY_NOTICE_OPTION, SqliteStateStore


class TestSqliteStateStore:
    """Tests for options and the connectivity flag."""

    @pytest.fixture
    def store(self):
        with tempfile.TemporaryDirectory() as tmpdir:
            yield SqliteStateStore(os.path.join(tmpdir, "state.db"))

    def test_flag_not_set_initially(self, store):
        assert store.connectivity_failed() is False

    def test_signal_sets_flag(self, store):
        store.signal_connectivity_failure()

        assert store.connectivity_failed() is True
        assert store.get_option(CONNECTIVITY_NOTICE_OPTION) == "1"

    def test_signal_is_idempotent(self, store):
        store.signal_connectivity_failure()
        store.signal_connectivity_failure()

        assert store.connectivity_failed() is True

    def test_clear_flag(self, store):
        store.signal_connectivity_failure()
        store.clear_connectivity_failure()

        assert store.connectivity_failed() is False

    def test_flag_persists_across_instances(self, store):
        store.signal_connectivity_failure()

        reopened = SqliteStateStore(store.path)

        assert reopened.connectivity_failed() is True

    def test_options(self, store):
        assert store.get_option("missing") is None
        assert store.get_option("missing", "x") == "x"

        store.update_option("slack_bot_username", "Bot")
        store.update_option("slack_bot_username", "Other Bot")

        assert store.get_option("slack_bot_username") == "Other Bot"

    def test_concurrent_signals(self, store):
        threads = [threading.Thread(target=store.signal_connectivity_failure) for _ in range(8)]
        for t in threads:
            t.start()
        for t in threads:
            t.join()

        assert store.connectivity_failed() is True

"""
Tests for the InMemorySessionStore.
"""

import pytest

from portfolio_shell.adapters.sessions.in_memory_session_store import InMemorySessionStore
from portfolio_shell.entities.OutputLine import OUTPUT
from portfolio_shell.exceptions import SessionNotFoundError


class TestInMemorySessionStore:
    """Test cases for the InMemorySessionStore."""

    def test_create_and_get(self, mock_logger):
        store = InMemorySessionStore(logger=mock_logger)
        session = store.create()

        assert store.get(session.id) is session
        assert session.cwd == "/"
        assert store.list_ids() == [session.id]

    def test_sessions_are_independent(self, mock_logger):
        store = InMemorySessionStore(logger=mock_logger)
        first, second = store.create(), store.create()
        first.move_to("/projects")

        assert first.id != second.id
        assert second.cwd == "/"
        assert first.log is not second.log

    def test_banner_seeds_the_log(self, mock_logger):
        store = InMemorySessionStore(banner=("hello", "world"), logger=mock_logger)
        session = store.create()

        assert [(line.kind, line.text) for line in session.log] == [
            (OUTPUT, "hello"),
            (OUTPUT, "world"),
        ]

    def test_unknown_session(self, mock_logger):
        store = InMemorySessionStore(logger=mock_logger)

        with pytest.raises(SessionNotFoundError, match="Unknown session: nope"):
            store.get("nope")
        with pytest.raises(SessionNotFoundError):
            store.delete("nope")

    def test_delete(self, mock_logger):
        store = InMemorySessionStore(logger=mock_logger)
        session = store.create()
        store.delete(session.id)

        assert store.list_ids() == []
        mock_logger.info.assert_any_call(f"Deleted session {session.id}")

    def test_oldest_session_is_evicted(self, mock_logger):
        store = InMemorySessionStore(max_sessions=2, logger=mock_logger)
        first = store.create()
        second = store.create()
        third = store.create()

        assert store.list_ids() == [second.id, third.id]
        with pytest.raises(SessionNotFoundError):
            store.get(first.id)
        mock_logger.info.assert_any_call(f"Evicted session {first.id}")

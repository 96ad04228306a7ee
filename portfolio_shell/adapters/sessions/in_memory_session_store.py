"""
In-memory session store.
"""

import logging
import threading
import uuid
from collections import OrderedDict
from typing import Optional, Sequence

from typing_extensions import override

from portfolio_shell.entities.OutputLine import OutputLine
from portfolio_shell.entities.Session import SessionLog, ShellSession
from portfolio_shell.exceptions import SessionNotFoundError
from portfolio_shell.ports.sessions.session_store_port import SessionStorePort


class InMemorySessionStore(SessionStorePort):
    """
    Keeps sessions in process memory, evicting the oldest one past `max_sessions`.
    """

    def __init__(
        self,
        banner: Sequence[str] = (),
        max_sessions: int = 100,
        logger: Optional[logging.Logger] = None,
    ) -> None:
        self._banner = tuple(banner)
        self._max_sessions = max_sessions
        self._sessions: "OrderedDict[str, ShellSession]" = OrderedDict()
        self._lock = threading.Lock()
        self._logger = logger or logging.getLogger(__name__)

    @override
    def create(self) -> ShellSession:
        log = SessionLog(OutputLine.output(text) for text in self._banner)
        session = ShellSession(uuid.uuid4().hex, log=log)
        with self._lock:
            self._sessions[session.id] = session
            while len(self._sessions) > self._max_sessions:
                evicted, _ = self._sessions.popitem(last=False)
                self._logger.info(f"Evicted session {evicted}")
        self._logger.info(f"Created session {session.id}")
        return session

    @override
    def get(self, session_id: str) -> ShellSession:
        with self._lock:
            session = self._sessions.get(session_id)
        if session is None:
            raise SessionNotFoundError(f"Unknown session: {session_id}")
        return session

    @override
    def delete(self, session_id: str) -> None:
        with self._lock:
            if self._sessions.pop(session_id, None) is None:
                raise SessionNotFoundError(f"Unknown session: {session_id}")
        self._logger.info(f"Deleted session {session_id}")

    @override
    def list_ids(self) -> list[str]:
        with self._lock:
            return list(self._sessions)

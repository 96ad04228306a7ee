"""
Window manager adapter that queues effect requests for HTTP clients to drain.
"""

import logging
import threading
from collections import defaultdict
from typing import Optional

from typing_extensions import override

from portfolio_shell.entities.Command import EffectKind, EffectRequest
from portfolio_shell.ports.desktop.window_manager_port import WindowManagerPort


class QueuedWindowManager(WindowManagerPort):
    """
    Records requests per session; the browser desktop polls and applies them.
    """

    def __init__(self, logger: Optional[logging.Logger] = None) -> None:
        self._logger = logger or logging.getLogger(__name__)
        self._pending: dict[str, list[EffectRequest]] = defaultdict(list)
        self._lock = threading.Lock()

    def _push(self, session_id: str, effect: EffectRequest) -> None:
        with self._lock:
            self._pending[session_id].append(effect)
        self._logger.info(
            f"Queued {effect.kind.value} for session {session_id}"
            + (f": {effect.target}" if effect.target else "")
        )

    @override
    def open_file_manager(self, session_id: str, path: str) -> None:
        self._push(session_id, EffectRequest(EffectKind.OPEN_FILE_MANAGER, path))

    @override
    def open_external_url(self, session_id: str, url: str) -> None:
        self._push(session_id, EffectRequest(EffectKind.OPEN_EXTERNAL_URL, url))

    @override
    def open_file_viewer(self, session_id: str, path: str) -> None:
        self._push(session_id, EffectRequest(EffectKind.OPEN_FILE_VIEWER, path))

    @override
    def start_matrix_effect(self, session_id: str) -> None:
        self._push(session_id, EffectRequest(EffectKind.START_MATRIX_EFFECT))

    @override
    def close_terminal(self, session_id: str) -> None:
        self._push(session_id, EffectRequest(EffectKind.CLOSE_TERMINAL))

    def drain(self, session_id: str) -> list[EffectRequest]:
        """Remove and return the pending requests of a session, oldest first."""
        with self._lock:
            return self._pending.pop(session_id, [])

    def discard(self, session_id: str) -> None:
        with self._lock:
            self._pending.pop(session_id, None)

"""
Window manager adapter for the standalone terminal: links open in the local browser.
"""

import logging
import webbrowser
from typing import Optional

from typing_extensions import override

from portfolio_shell.exceptions import WindowManagerError
from portfolio_shell.ports.desktop.window_manager_port import WindowManagerPort


class BrowserWindowManager(WindowManagerPort):
    """
    There is no desktop around the standalone REPL, so only URL navigation has
    a real effect; the other requests are logged.
    """

    def __init__(self, logger: Optional[logging.Logger] = None) -> None:
        self._logger = logger or logging.getLogger(__name__)

    @override
    def open_file_manager(self, session_id: str, path: str) -> None:
        self._logger.info(f"File manager requested at {path} (session {session_id})")

    @override
    def open_external_url(self, session_id: str, url: str) -> None:
        try:
            opened = webbrowser.open_new_tab(url)
        except webbrowser.Error as e:
            raise WindowManagerError(f"Failed to open {url}: {e}")
        if not opened:
            raise WindowManagerError(f"No browser available to open {url}")
        self._logger.info(f"Opened {url} in the browser")

    @override
    def open_file_viewer(self, session_id: str, path: str) -> None:
        self._logger.info(f"Viewer requested for {path} (session {session_id})")

    @override
    def start_matrix_effect(self, session_id: str) -> None:
        self._logger.info(f"Matrix effect requested (session {session_id})")

    @override
    def close_terminal(self, session_id: str) -> None:
        self._logger.info(f"Terminal close requested (session {session_id})")

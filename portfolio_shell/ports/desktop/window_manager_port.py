"""
Window manager port interface for requests the shell hands off to the desktop.
"""

from abc import ABC, abstractmethod


class WindowManagerPort(ABC):
    """
    Port interface for fire-and-forget requests to the desktop window manager.

    Every request is scoped to the shell session that issued it.
    """

    @abstractmethod
    def open_file_manager(self, session_id: str, path: str) -> None:
        """
        Open (or focus) the file manager window at a folder.

        Args:
            session_id: Session that issued the request
            path: Normalized absolute path of an existing folder
        """
        pass

    @abstractmethod
    def open_external_url(self, session_id: str, url: str) -> None:
        """Navigate a new browser tab to a URL."""
        pass

    @abstractmethod
    def open_file_viewer(self, session_id: str, path: str) -> None:
        """Open the viewer bound to the node type at a path."""
        pass

    @abstractmethod
    def start_matrix_effect(self, session_id: str) -> None:
        pass

    @abstractmethod
    def close_terminal(self, session_id: str) -> None:
        pass

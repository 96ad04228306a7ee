"""
Session store port interface for terminal sessions.
"""

from abc import ABC, abstractmethod

from portfolio_shell.entities.Session import ShellSession


class SessionStorePort(ABC):
    """Port interface for creating and retrieving shell sessions."""

    @abstractmethod
    def create(self) -> ShellSession:
        """
        Create a new session with its cursor at '/'.

        Returns:
            The new ShellSession
        """
        pass

    @abstractmethod
    def get(self, session_id: str) -> ShellSession:
        """
        Get an existing session.

        Raises:
            SessionNotFoundError: If the id is unknown
        """
        pass

    @abstractmethod
    def delete(self, session_id: str) -> None:
        """
        Forget a session.

        Raises:
            SessionNotFoundError: If the id is unknown
        """
        pass

    @abstractmethod
    def list_ids(self) -> list[str]:
        pass

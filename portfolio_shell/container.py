"""
Dependency injection container for managing application dependencies.
"""

import logging
from typing import Optional

from portfolio_shell.adapters.contacts.in_memory_email_store import InMemoryEmailStore
from portfolio_shell.adapters.content.json_content_loader import JsonContentLoader
from portfolio_shell.adapters.desktop.queued_window_manager import QueuedWindowManager
from portfolio_shell.adapters.files.in_memory_tree_adapter import InMemoryFileTreeAdapter
from portfolio_shell.adapters.sessions.in_memory_session_store import InMemorySessionStore
from portfolio_shell.config.settings import Settings, settings
from portfolio_shell.entities.FileNode import FileNode
from portfolio_shell.ports.contacts.email_store_port import EmailStorePort
from portfolio_shell.ports.desktop.window_manager_port import WindowManagerPort
from portfolio_shell.ports.files.file_tree_port import FileTreePort
from portfolio_shell.ports.sessions.session_store_port import SessionStorePort
from portfolio_shell.use_cases.files.build_tree import BuildTreeUseCase
from portfolio_shell.use_cases.files.list_directory import ListDirectoryUseCase
from portfolio_shell.use_cases.files.search_nodes import SearchNodesUseCase
from portfolio_shell.use_cases.sessions.navigate_to_path import NavigateToPathUseCase
from portfolio_shell.use_cases.shell.interpreter import CommandInterpreter
from portfolio_shell.use_cases.shell.static_text import BANNER
from portfolio_shell.use_cases.shell.submit_command import SubmitCommandUseCase


class DependencyContainer:
    """
    Container for managing application dependencies using dependency injection.

    The content tree is built once, on first use, and shared read-only by
    every adapter and session created from this container.
    """

    def __init__(
        self,
        app_settings: Optional[Settings] = None,
        content_path: Optional[str] = None,
        window_manager: Optional[WindowManagerPort] = None,
    ):
        self._settings = app_settings or settings
        self._content_path = content_path
        self._window_manager_override = window_manager
        self._instances = {}
        self._logger = logging.getLogger(__name__)

    def get_content_root(self) -> FileNode:
        """
        Get the root of the static content tree, loading it on first use.

        Returns:
            Root FileNode

        Raises:
            ContentError: If the content document is invalid
        """
        if "content_root" not in self._instances:
            loader = JsonContentLoader(self._logger)
            path = self._content_path or self._settings.content_path
            self._instances["content_root"] = loader.load_file(path)
        return self._instances["content_root"]

    def get_file_tree(self) -> FileTreePort:
        """
        Get the file tree query adapter.

        Returns:
            FileTreePort implementation
        """
        if "file_tree" not in self._instances:
            self._instances["file_tree"] = InMemoryFileTreeAdapter(
                self.get_content_root(), self._logger
            )
        return self._instances["file_tree"]

    def get_email_store(self) -> EmailStorePort:
        if "email_store" not in self._instances:
            self._instances["email_store"] = InMemoryEmailStore(self._logger)
        return self._instances["email_store"]

    def get_session_store(self) -> SessionStorePort:
        """
        Get the session store.

        Returns:
            SessionStorePort implementation
        """
        if "session_store" not in self._instances:
            banner = BANNER if self._settings.show_banner else ()
            self._instances["session_store"] = InMemorySessionStore(
                banner=banner,
                max_sessions=self._settings.max_sessions,
                logger=self._logger,
            )
        return self._instances["session_store"]

    def get_window_manager(self) -> WindowManagerPort:
        """
        Get the window manager adapter.

        Returns:
            The override given to the container, else a QueuedWindowManager
        """
        if "window_manager" not in self._instances:
            self._instances["window_manager"] = (
                self._window_manager_override or QueuedWindowManager(self._logger)
            )
        return self._instances["window_manager"]

    def get_navigate_use_case(self) -> NavigateToPathUseCase:
        if "navigate_use_case" not in self._instances:
            self._instances["navigate_use_case"] = NavigateToPathUseCase(
                self.get_file_tree(), self._logger
            )
        return self._instances["navigate_use_case"]

    def get_interpreter(self) -> CommandInterpreter:
        if "interpreter" not in self._instances:
            self._instances["interpreter"] = CommandInterpreter(
                self.get_file_tree(), self.get_email_store(), logger=self._logger
            )
        return self._instances["interpreter"]

    def get_submit_command_use_case(self) -> SubmitCommandUseCase:
        """
        Get submit command use case with injected dependencies.

        Returns:
            Configured SubmitCommandUseCase
        """
        if "submit_command_use_case" not in self._instances:
            self._instances["submit_command_use_case"] = SubmitCommandUseCase(
                self.get_interpreter(),
                self.get_navigate_use_case(),
                self.get_window_manager(),
                self._logger,
            )
        return self._instances["submit_command_use_case"]

    def get_list_directory_use_case(self) -> ListDirectoryUseCase:
        if "list_directory_use_case" not in self._instances:
            self._instances["list_directory_use_case"] = ListDirectoryUseCase(
                self.get_file_tree()
            )
        return self._instances["list_directory_use_case"]

    def get_build_tree_use_case(self) -> BuildTreeUseCase:
        if "build_tree_use_case" not in self._instances:
            self._instances["build_tree_use_case"] = BuildTreeUseCase(
                self.get_file_tree()
            )
        return self._instances["build_tree_use_case"]

    def get_search_nodes_use_case(self) -> SearchNodesUseCase:
        if "search_nodes_use_case" not in self._instances:
            self._instances["search_nodes_use_case"] = SearchNodesUseCase(
                self.get_file_tree()
            )
        return self._instances["search_nodes_use_case"]

    def reset(self):
        """Reset all instances (useful for testing)."""
        self._instances.clear()


# Global container instance
container = DependencyContainer()

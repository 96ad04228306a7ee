"""
Dependency functions for retrieving use cases and adapters from the container.
"""

from portfolio_shell.container import container
from portfolio_shell.ports.contacts.email_store_port import EmailStorePort
from portfolio_shell.ports.desktop.window_manager_port import WindowManagerPort
from portfolio_shell.ports.sessions.session_store_port import SessionStorePort
from portfolio_shell.use_cases.files.build_tree import BuildTreeUseCase
from portfolio_shell.use_cases.files.list_directory import ListDirectoryUseCase
from portfolio_shell.use_cases.files.search_nodes import SearchNodesUseCase
from portfolio_shell.use_cases.sessions.navigate_to_path import NavigateToPathUseCase
from portfolio_shell.use_cases.shell.submit_command import SubmitCommandUseCase


def get_list_directory_uc() -> ListDirectoryUseCase:
    """
    Get the list directory use case from the container.

    Returns:
        ListDirectoryUseCase: The list directory use case instance
    """
    return container.get_list_directory_use_case()


def get_build_tree_uc() -> BuildTreeUseCase:
    return container.get_build_tree_use_case()


def get_search_nodes_uc() -> SearchNodesUseCase:
    return container.get_search_nodes_use_case()


def get_submit_command_uc() -> SubmitCommandUseCase:
    """
    Get the submit command use case from the container.

    Returns:
        SubmitCommandUseCase: The submit command use case instance
    """
    return container.get_submit_command_use_case()


def get_navigate_uc() -> NavigateToPathUseCase:
    return container.get_navigate_use_case()


def get_session_store() -> SessionStorePort:
    return container.get_session_store()


def get_window_manager() -> WindowManagerPort:
    return container.get_window_manager()


def get_email_store() -> EmailStorePort:
    return container.get_email_store()

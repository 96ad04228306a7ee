"""
Pytest configuration and shared fixtures.
"""

import json
from datetime import datetime, timezone
from unittest.mock import MagicMock

import pytest

from portfolio_shell.adapters.contacts.in_memory_email_store import InMemoryEmailStore
from portfolio_shell.adapters.content.json_content_loader import JsonContentLoader
from portfolio_shell.adapters.desktop.queued_window_manager import QueuedWindowManager
from portfolio_shell.adapters.files.in_memory_tree_adapter import InMemoryFileTreeAdapter
from portfolio_shell.config.settings import Settings
from portfolio_shell.container import DependencyContainer
from portfolio_shell.entities.Session import ShellSession
from portfolio_shell.use_cases.sessions.navigate_to_path import NavigateToPathUseCase
from portfolio_shell.use_cases.shell.interpreter import CommandInterpreter
from portfolio_shell.use_cases.shell.submit_command import SubmitCommandUseCase

FIXED_NOW = datetime(2024, 3, 9, 14, 30, 5, tzinfo=timezone.utc)


def _file(node_id, name, node_type, **content):
    return {"id": node_id, "name": name, "type": node_type, "content": content}


def _folder(node_id, name, *children):
    return {"id": node_id, "name": name, "type": "folder", "children": list(children)}


@pytest.fixture
def sample_tree_data():
    """
    Content document used across the test suite.

    Returns:
        Parsed JSON content tree (14 nodes including the root)
    """
    return _folder(
        "root",
        "",
        _folder(
            "projects",
            "projects",
            _file("readme", "readme.md", "markdown", markdown="Hello"),
            _folder(
                "portfolio-os",
                "portfolio-os",
                _file("overview", "overview.md", "markdown", markdown="# Portfolio OS\nBrowser desktop"),
                _file("source", "source", "link", url="https://example.com/portfolio-os"),
            ),
            _folder("empty", "empty"),
        ),
        _folder(
            "about",
            "about",
            _file("bio", "bio.md", "markdown", markdown="I build things."),
            _file("resume", "resume.pdf", "pdf", url="/assets/resume.pdf"),
        ),
        _folder(
            "contact",
            "contact",
            _file("contact-txt", "contact.txt", "text", text="Email: hello@example.com\nRemote"),
            _file("github", "github", "link", url="https://github.com/example"),
        ),
        _file("notes", "notes.txt", "text", text="root notes"),
    )


@pytest.fixture
def content_file(tmp_path, sample_tree_data):
    """Write the sample content document to a temporary JSON file."""
    path = tmp_path / "tree.json"
    path.write_text(json.dumps(sample_tree_data), encoding="utf-8")
    return str(path)


@pytest.fixture
def mock_logger():
    """
    Create a mock logger for testing.

    Returns:
        Mock logger instance
    """
    return MagicMock()


@pytest.fixture
def sample_root(sample_tree_data):
    return JsonContentLoader(MagicMock()).load_dict(sample_tree_data)


@pytest.fixture
def file_tree(sample_root):
    return InMemoryFileTreeAdapter(sample_root, MagicMock())


@pytest.fixture
def email_store():
    return InMemoryEmailStore(MagicMock())


@pytest.fixture
def window_manager():
    return QueuedWindowManager(MagicMock())


@pytest.fixture
def interpreter(file_tree, email_store):
    return CommandInterpreter(file_tree, email_store, clock=lambda: FIXED_NOW, logger=MagicMock())


@pytest.fixture
def submit(interpreter, file_tree, window_manager):
    """SubmitCommandUseCase wired to the sample tree and a queued window manager."""
    return SubmitCommandUseCase(
        interpreter,
        NavigateToPathUseCase(file_tree, MagicMock()),
        window_manager,
        MagicMock(),
    )


@pytest.fixture
def session():
    return ShellSession("test-session")


@pytest.fixture
def dependency_container(content_file, mock_logger, monkeypatch):
    """
    Create a dependency container serving the sample content tree.

    Returns:
        DependencyContainer instance with mocked logger
    """
    monkeypatch.delenv("PORTFOLIO_MAX_SESSIONS", raising=False)
    monkeypatch.delenv("PORTFOLIO_SHOW_BANNER", raising=False)
    container = DependencyContainer(Settings(), content_path=content_file)
    # Replace the logger with our mock
    container._logger = mock_logger
    return container

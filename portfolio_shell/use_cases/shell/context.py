"""
Per-invocation context handed to every command handler.
"""

from dataclasses import dataclass
from datetime import datetime
from typing import Callable

from portfolio_shell.entities.Command import CommandResult
from portfolio_shell.ports.contacts.email_store_port import EmailStorePort
from portfolio_shell.ports.files.file_tree_port import FileTreePort
from portfolio_shell.utils.paths import resolve


@dataclass(frozen=True)
class ShellContext:
    """Read-only view of the session and its collaborators for one command."""

    cwd: str
    file_tree: FileTreePort
    emails: EmailStorePort
    now: Callable[[], datetime]

    def resolve(self, token: str) -> str:
        return resolve(self.cwd, token)


Handler = Callable[[list[str], ShellContext], CommandResult]

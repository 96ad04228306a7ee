"""
Command domain types: the fixed command set, effect requests and handler results.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Optional

from portfolio_shell.entities.OutputLine import OutputLine


class CommandName(str, Enum):
    HELP = "help"
    CLEAR = "clear"
    DATE = "date"
    NEOFETCH = "neofetch"
    MATRIX = "matrix"
    EMAILS = "emails"
    PWD = "pwd"
    LS = "ls"
    CD = "cd"
    CAT = "cat"
    OPEN = "open"
    TREE = "tree"
    FIND = "find"
    PROJECTS = "projects"
    ABOUT = "about"
    CONTACT = "contact"

    @classmethod
    def parse(cls, name: str) -> Optional["CommandName"]:
        """Case-insensitive lookup; None for names outside the table."""
        try:
            return cls(name.lower())
        except ValueError:
            return None


class EffectKind(str, Enum):
    OPEN_FILE_MANAGER = "open_file_manager"
    OPEN_EXTERNAL_URL = "open_external_url"
    OPEN_FILE_VIEWER = "open_file_viewer"
    START_MATRIX_EFFECT = "start_matrix_effect"
    CLOSE_TERMINAL = "close_terminal"


@dataclass(frozen=True)
class EffectRequest:
    """Fire-and-forget request for the window manager."""

    kind: EffectKind
    target: Optional[str] = None


@dataclass(frozen=True)
class CommandResult:
    """
    Outcome of one handler call.

    ``cursor`` is a new working directory to write back and ``effects`` are
    forwarded to the window manager. ``bypass_log`` skips the input echo;
    ``clear_log`` truncates the session log first.
    """

    lines: tuple[OutputLine, ...] = field(default_factory=tuple)
    cursor: Optional[str] = None
    effects: tuple[EffectRequest, ...] = field(default_factory=tuple)
    bypass_log: bool = False
    clear_log: bool = False

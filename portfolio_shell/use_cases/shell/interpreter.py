"""
Command interpreter: tokenizes a command line and dispatches it to a handler.
"""

import logging
from datetime import datetime
from typing import Callable, Optional

from portfolio_shell.entities.Command import CommandName, CommandResult
from portfolio_shell.entities.OutputLine import OutputLine
from portfolio_shell.exceptions import ShellCommandError, UnrecognizedCommandError
from portfolio_shell.ports.contacts.email_store_port import EmailStorePort
from portfolio_shell.ports.files.file_tree_port import FileTreePort
from portfolio_shell.use_cases.shell import filesystem_commands as fs
from portfolio_shell.use_cases.shell import system_commands as system
from portfolio_shell.use_cases.shell.context import Handler, ShellContext

HANDLERS: dict[CommandName, Handler] = {
    CommandName.HELP: system.handle_help,
    CommandName.CLEAR: system.handle_clear,
    CommandName.DATE: system.handle_date,
    CommandName.NEOFETCH: system.handle_neofetch,
    CommandName.MATRIX: system.handle_matrix,
    CommandName.EMAILS: system.handle_emails,
    CommandName.PWD: fs.handle_pwd,
    CommandName.LS: fs.handle_ls,
    CommandName.CD: fs.handle_cd,
    CommandName.CAT: fs.handle_cat,
    CommandName.OPEN: fs.handle_open,
    CommandName.TREE: fs.handle_tree,
    CommandName.FIND: fs.handle_find,
    CommandName.PROJECTS: system.handle_projects,
    CommandName.ABOUT: system.handle_about,
    CommandName.CONTACT: system.handle_contact,
}


def tokenize(raw: str) -> tuple[str, list[str]]:
    """
    Split a command line on whitespace into the command and its arguments.

    There is no quoting, so a path containing a space cannot be expressed.
    """
    parts = raw.split()
    if not parts:
        return "", []
    return parts[0], parts[1:]


class CommandInterpreter:
    """
    Turns one command line into a CommandResult without touching any session.

    Writing the cursor, appending to the log and delivering effects are left
    to SubmitCommandUseCase, so the interpreter only reads the cursor it is
    given.
    """

    def __init__(
        self,
        file_tree: FileTreePort,
        emails: EmailStorePort,
        clock: Optional[Callable[[], datetime]] = None,
        logger: Optional[logging.Logger] = None,
    ):
        self._file_tree = file_tree
        self._emails = emails
        self._clock = clock or (lambda: datetime.now().astimezone())
        self._logger = logger or logging.getLogger(__name__)

    def interpret(self, raw: str, cwd: str) -> CommandResult:
        """
        Run one command line against a cursor.

        Args:
            raw: The command line as typed
            cwd: Current directory of the issuing session

        Returns:
            The handler's result; failures come back as a single error line
        """
        command, args = tokenize(raw)
        if not command:
            return CommandResult()

        ctx = ShellContext(
            cwd=cwd,
            file_tree=self._file_tree,
            emails=self._emails,
            now=self._clock,
        )
        try:
            name = CommandName.parse(command)
            if name is None:
                raise UnrecognizedCommandError(f"command not found: {command}")
            return HANDLERS[name](args, ctx)
        except ShellCommandError as e:
            self._logger.info(f"Command '{command}' failed: {e.message}")
            return CommandResult(lines=(OutputLine.error(e.message),))
        except Exception:
            self._logger.exception(f"Unexpected error while running '{raw}'")
            return CommandResult(lines=(OutputLine.error(f"{command}: internal error"),))

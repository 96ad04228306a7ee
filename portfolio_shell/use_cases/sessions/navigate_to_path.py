"""
Use case for writing a session cursor.
"""

import logging
from typing import Optional

from portfolio_shell.entities.Session import ShellSession
from portfolio_shell.exceptions import NavigationError
from portfolio_shell.ports.files.file_tree_port import FileTreePort
from portfolio_shell.utils.paths import ROOT, resolve


class NavigateToPathUseCase:
    """
    Moves a session cursor, refusing any target that is not an existing folder.

    This is the only writer of ShellSession.cwd, so the cursor always names a
    folder. It serves both shell navigation and navigation that starts outside
    the shell (e.g. clicking a folder in the file manager).
    """

    def __init__(
        self,
        file_tree: FileTreePort,
        logger: Optional[logging.Logger] = None,
    ):
        self._file_tree = file_tree
        self._logger = logger or logging.getLogger(__name__)

    def execute(self, session: ShellSession, path: str) -> str:
        """
        Move the cursor of a session.

        Args:
            session: Session whose cursor is written
            path: Absolute path, or a path relative to the root

        Returns:
            The new, normalized cursor

        Raises:
            NavigationError: If the path does not name an existing folder
        """
        target = resolve(ROOT, path)
        node = self._file_tree.lookup(target)
        if node is None:
            self._logger.warning(f"Rejected navigation to missing path: {target}")
            raise NavigationError(f"No such file or directory: {target}")
        if not node.is_folder:
            self._logger.warning(f"Rejected navigation to non-folder: {target}")
            raise NavigationError(f"Not a directory: {target}")
        session.move_to(target)
        self._logger.info(f"Session {session.id} moved to {target}")
        return target

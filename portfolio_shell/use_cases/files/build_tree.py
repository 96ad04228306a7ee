"""
Use case for rendering a subtree of the virtual filesystem.
"""

import logging
from typing import Optional

from portfolio_shell.exceptions import FileTreeError
from portfolio_shell.ports.files.file_tree_port import FileTreePort
from portfolio_shell.utils.paths import ROOT, resolve


class BuildTreeUseCase:
    """Use case for rendering the tree view of a path."""

    def __init__(
        self,
        file_tree: FileTreePort,
        logger: Optional[logging.Logger] = None,
    ):
        self._file_tree = file_tree
        self._logger = logger or logging.getLogger(__name__)

    def execute(self, path: str) -> tuple[str, list[str]]:
        """
        Render the subtree rooted at a path.

        Args:
            path: Absolute path, or a path relative to the root

        Returns:
            The normalized path and one display line per node

        Raises:
            FileTreeError: If the path does not exist
        """
        try:
            target = resolve(ROOT, path)
            self._logger.info(f"Building tree view of: {target}")
            lines = self._file_tree.build_tree(target)
            if lines is None:
                raise FileTreeError(f"No such file or directory: {target}")
            return target, lines
        except FileTreeError:
            raise
        except Exception as e:
            self._logger.error(f"Error building tree: {e}")
            raise FileTreeError(f"Failed to build tree of {path}: {str(e)}")

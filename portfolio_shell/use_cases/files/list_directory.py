"""
Use case for listing a folder of the virtual filesystem.
"""

import logging
from typing import Optional

from portfolio_shell.entities.FileNode import FileNode
from portfolio_shell.exceptions import FileTreeError
from portfolio_shell.ports.files.file_tree_port import FileTreePort
from portfolio_shell.utils.paths import ROOT, resolve


class ListDirectoryUseCase:
    """Use case for listing the children of a folder."""

    def __init__(
        self,
        file_tree: FileTreePort,
        logger: Optional[logging.Logger] = None,
    ):
        """
        Initialize the use case.

        Args:
            file_tree: Query port over the content tree
            logger: Logger instance to use for logging
        """
        self._file_tree = file_tree
        self._logger = logger or logging.getLogger(__name__)

    def execute(self, path: str) -> tuple[str, tuple[FileNode, ...]]:
        """
        List the children of a folder.

        Args:
            path: Absolute path, or a path relative to the root

        Returns:
            The normalized path and the children in display order

        Raises:
            FileTreeError: If the path does not exist or is not a folder
        """
        try:
            target = resolve(ROOT, path)
            self._logger.info(f"Listing directory: {target}")
            node = self._file_tree.lookup(target)
            if node is None:
                raise FileTreeError(f"No such file or directory: {target}")
            if not node.is_folder:
                raise FileTreeError(f"Not a directory: {target}")
            self._logger.info(f"Found {len(node.children)} entries")
            return target, node.children
        except FileTreeError:
            raise
        except Exception as e:
            self._logger.error(f"Error listing directory: {e}")
            raise FileTreeError(f"Failed to list directory {path}: {str(e)}")

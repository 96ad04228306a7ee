"""
Use case for searching the virtual filesystem by name.
"""

import logging
from typing import Optional

from portfolio_shell.exceptions import FileTreeError
from portfolio_shell.ports.files.file_tree_port import FileTreePort, SearchHit


class SearchNodesUseCase:
    """Use case for global, case-insensitive name search."""

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

    def execute(self, term: str) -> list[SearchHit]:
        """
        Search every node whose name contains a term.

        Args:
            term: Non-empty substring, matched case-insensitively

        Returns:
            Matches in tree traversal order

        Raises:
            FileTreeError: If the term is empty or the search fails
        """
        if not term or not term.strip():
            raise FileTreeError("Search term must be a non-empty string")
        try:
            self._logger.info(f"Searching for nodes matching '{term}'")
            hits = self._file_tree.search(term)
            self._logger.info(f"Found {len(hits)} nodes matching '{term}'")
            return hits
        except FileTreeError:
            raise
        except Exception as e:
            self._logger.error(f"Error searching nodes: {e}")
            raise FileTreeError(f"Failed to search for {term}: {str(e)}")

"""
File tree port interface defining the contract for virtual filesystem queries.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Optional

from portfolio_shell.entities.FileNode import FileNode


@dataclass(frozen=True)
class SearchHit:
    """A node matched by a search, together with its full path."""

    node: FileNode
    path: str


class FileTreePort(ABC):
    """
    Port interface for read-only queries over the virtual filesystem.

    All paths are expected to be normalized already (see utils.paths.resolve).
    Lookups signal not-found by returning None rather than raising.
    """

    @abstractmethod
    def root(self) -> FileNode:
        """
        Get the root folder of the tree.

        Returns:
            The FileNode at path '/'
        """
        pass

    @abstractmethod
    def lookup(self, path: str) -> Optional[FileNode]:
        """
        Find the node at a path.

        Args:
            path: Normalized absolute path

        Returns:
            The matching FileNode, or None if any segment is missing or an
            intermediate node is not a folder
        """
        pass

    @abstractmethod
    def list_children(self, path: str) -> Optional[tuple[FileNode, ...]]:
        """
        List the children of a folder in display order.

        Args:
            path: Normalized absolute path

        Returns:
            The children, or None if the path is missing or not a folder
        """
        pass

    @abstractmethod
    def build_tree(self, path: str) -> Optional[list[str]]:
        """
        Render the subtree rooted at a path, one line per node.

        Args:
            path: Normalized absolute path

        Returns:
            Display lines in pre-order, or None if the path is missing
        """
        pass

    @abstractmethod
    def search(self, term: str) -> list[SearchHit]:
        """
        Search the whole tree for names containing a term, case-insensitively.

        Args:
            term: Substring to look for; an empty term matches nothing

        Returns:
            Matches in pre-order traversal order
        """
        pass

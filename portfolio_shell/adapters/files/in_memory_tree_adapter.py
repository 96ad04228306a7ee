"""
In-memory adapter implementing the file tree port over a static FileNode tree.
"""

import logging
from typing import Iterator, Optional

from typing_extensions import override

from portfolio_shell.entities.FileNode import FileNode, glyph_for
from portfolio_shell.exceptions import FileTreeError
from portfolio_shell.ports.files.file_tree_port import FileTreePort, SearchHit
from portfolio_shell.utils.paths import ROOT, join, split_segments

INDENT = "  "


class InMemoryFileTreeAdapter(FileTreePort):
    """Read-only query engine over an immutable FileNode tree."""

    def __init__(self, root: FileNode, logger: logging.Logger | None = None):
        """
        Initialize the adapter with the tree it serves.

        Args:
            root: Root folder of the tree; held by reference, never copied
            logger: Logger instance to use for logging. If None, a default logger will be created.

        Raises:
            FileTreeError: If the root is not a folder
        """
        if not root.is_folder:
            raise FileTreeError(f"Root node must be a folder, got {root.type}")
        self._root = root
        self._logger: logging.Logger = logger or logging.getLogger(__name__)

    @override
    def root(self) -> FileNode:
        return self._root

    @override
    def lookup(self, path: str) -> Optional[FileNode]:
        node = self._root
        for segment in split_segments(path):
            if not node.is_folder:
                return None
            child = node.child(segment)
            if child is None:
                return None
            node = child
        return node

    @override
    def list_children(self, path: str) -> Optional[tuple[FileNode, ...]]:
        node = self.lookup(path)
        if node is None or not node.is_folder:
            return None
        return node.children

    @override
    def build_tree(self, path: str) -> Optional[list[str]]:
        node = self.lookup(path)
        if node is None:
            return None
        lines: list[str] = []
        for depth, current, _ in self._walk(node, path, 0):
            # The root folder has no name of its own.
            name = current.name or ROOT
            lines.append(f"{INDENT * depth}{glyph_for(current.type)} {name}")
        return lines

    @override
    def search(self, term: str) -> list[SearchHit]:
        if not term:
            return []
        needle = term.lower()
        hits = [
            SearchHit(node=node, path=node_path)
            for _, node, node_path in self._walk(self._root, ROOT, 0)
            if node is not self._root and needle in node.name.lower()
        ]
        self._logger.debug(f"Search for '{term}' matched {len(hits)} nodes")
        return hits

    def _walk(
        self, node: FileNode, path: str, depth: int
    ) -> Iterator[tuple[int, FileNode, str]]:
        """Depth-first pre-order traversal yielding (depth, node, path)."""
        yield depth, node, path
        for child in node.children:
            yield from self._walk(child, join(path, child.name), depth + 1)

"""
FileNode domain entity.
"""

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any, Mapping, Optional

FOLDER = "folder"
TEXT = "text"
MARKDOWN = "markdown"
LINK = "link"

_GLYPHS = {
    FOLDER: "📁",
    MARKDOWN: "📝",
    TEXT: "📄",
    LINK: "🔗",
}
DEFAULT_GLYPH = "📦"


def glyph_for(node_type: str) -> str:
    """Display glyph used by ls and tree for a node type."""
    return _GLYPHS.get(node_type, DEFAULT_GLYPH)


@dataclass(frozen=True, eq=False)
class FileNode:
    """
    One entry (file or folder) of the virtual filesystem.

    Nodes are immutable once built: ``content`` is wrapped in a read-only
    mapping and ``children`` is a tuple kept in display order.
    """

    id: str
    name: str
    type: str
    content: Optional[Mapping[str, str]] = None
    children: tuple["FileNode", ...] = field(default_factory=tuple)

    def __post_init__(self) -> None:
        if self.content is not None:
            object.__setattr__(self, "content", MappingProxyType(dict(self.content)))
        object.__setattr__(self, "children", tuple(self.children))

    @property
    def is_folder(self) -> bool:
        return self.type == FOLDER

    @property
    def url(self) -> Optional[str]:
        """URL payload of a link node, if any."""
        if self.content is None:
            return None
        return self.content.get("url") or None

    def text_payload(self) -> Optional[str]:
        """
        Get the displayable text of a markdown or text node.

        Returns:
            The payload keyed by the node type, or None when the node has no
            text body (folders, links, other kinds, or an empty payload)
        """
        if self.type not in (MARKDOWN, TEXT) or self.content is None:
            return None
        return self.content.get(self.type) or None

    def child(self, name: str) -> Optional["FileNode"]:
        """Find a direct child by exact (case-sensitive) name."""
        for node in self.children:
            if node.name == name:
                return node
        return None

    def get_details(self) -> dict[str, Any]:
        """
        Get a summary of the node.

        Returns:
            Dictionary with node information
        """
        return {
            "id": self.id,
            "name": self.name,
            "type": self.type,
            "is_folder": self.is_folder,
            "children": len(self.children),
        }

    def __str__(self) -> str:
        return f"FileNode(name='{self.name}', type='{self.type}')"

    def __repr__(self) -> str:
        return f"FileNode(id='{self.id}', name='{self.name}', type='{self.type}')"

"""
Loader building the immutable FileNode tree from a JSON content document.
"""

import json
import logging
import os
from typing import Any, List, Optional

from pydantic import BaseModel, Field, ValidationError, field_validator, model_validator

from portfolio_shell.entities.FileNode import FOLDER, FileNode
from portfolio_shell.exceptions import ContentError

DEFAULT_CONTENT_PATH = os.path.join(
    os.path.dirname(os.path.dirname(os.path.dirname(os.path.abspath(__file__)))),
    "content",
    "default_tree.json",
)


class FileNodeSchema(BaseModel):
    """Schema for one node of the content document."""

    id: str = Field(..., min_length=1, description="Stable unique identifier")
    name: str = Field(..., description="Leaf name, empty only for the root")
    type: str = Field(..., min_length=1, description="Node kind (folder, markdown, ...)")
    content: Optional[dict[str, str]] = Field(
        None, description="Payload keyed by kind: markdown, text or url"
    )
    children: Optional[List["FileNodeSchema"]] = Field(
        None, description="Ordered children, folders only"
    )

    @field_validator("name")
    @classmethod
    def _check_name(cls, value: str) -> str:
        if "/" in value:
            raise ValueError(f"name must not contain '/': {value!r}")
        if value in (".", ".."):
            raise ValueError(f"name is reserved: {value!r}")
        return value

    @model_validator(mode="after")
    def _check_children(self) -> "FileNodeSchema":
        if self.type != FOLDER:
            if self.children:
                raise ValueError(f"{self.type} node '{self.name}' cannot have children")
            return self
        seen: set[str] = set()
        for child in self.children or []:
            if not child.name:
                raise ValueError(f"folder '{self.name}' has a child without a name")
            if child.name in seen:
                raise ValueError(f"duplicate name '{child.name}' in folder '{self.name}'")
            seen.add(child.name)
        return self


FileNodeSchema.model_rebuild()


class JsonContentLoader:
    """Builds the FileNode tree once, from a JSON file or an already-parsed dict."""

    def __init__(self, logger: Optional[logging.Logger] = None):
        self._logger = logger or logging.getLogger(__name__)

    def load_file(self, path: Optional[str] = None) -> FileNode:
        """
        Load the content tree from a JSON file.

        Args:
            path: Path to the JSON document. Defaults to the bundled portfolio tree.

        Returns:
            The root FileNode

        Raises:
            ContentError: If the file cannot be read, parsed or validated
        """
        path = path or DEFAULT_CONTENT_PATH
        self._logger.info(f"Loading content tree from: {path}")
        try:
            with open(path, encoding="utf-8") as f:
                data = json.load(f)
        except FileNotFoundError:
            raise ContentError(f"Content file does not exist: {path}")
        except (OSError, json.JSONDecodeError) as e:
            raise ContentError(f"Cannot read content file {path}: {e}")
        return self.load_dict(data)

    def load_dict(self, data: Any) -> FileNode:
        """
        Validate a parsed content document and build the tree.

        Raises:
            ContentError: If the document violates the tree invariants
        """
        try:
            schema = FileNodeSchema.model_validate(data)
        except ValidationError as e:
            raise ContentError(f"Invalid content tree: {e}")

        if schema.type != FOLDER:
            raise ContentError(f"Root node must be a folder, got {schema.type}")
        if schema.name:
            raise ContentError(f"Root node must have an empty name, got '{schema.name}'")

        seen_ids: set[str] = set()
        root = self._build(schema, seen_ids)
        self._logger.info(f"Content tree loaded: {len(seen_ids)} nodes")
        return root

    def _build(self, schema: FileNodeSchema, seen_ids: set[str]) -> FileNode:
        if schema.id in seen_ids:
            raise ContentError(f"Duplicate node id: {schema.id}")
        seen_ids.add(schema.id)
        children = tuple(self._build(c, seen_ids) for c in schema.children or [])
        return FileNode(
            id=schema.id,
            name=schema.name,
            type=schema.type,
            content=None if schema.type == FOLDER else schema.content,
            children=children,
        )

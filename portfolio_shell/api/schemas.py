"""
Pydantic models for API requests and responses.
"""

from typing import List, Optional

from pydantic import BaseModel, Field

from portfolio_shell.entities.Command import EffectRequest
from portfolio_shell.entities.FileNode import FileNode
from portfolio_shell.entities.OutputLine import OutputLine


class NodeInfo(BaseModel):
    """Schema for one virtual filesystem entry."""

    id: str = Field(..., description="Stable node identifier")
    name: str = Field(..., description="Node name")
    path: str = Field(..., description="Full normalized path")
    type: str = Field(..., description="Node kind (folder, markdown, text, link, ...)")
    is_folder: bool = Field(..., description="Whether the node has children")

    @classmethod
    def from_entity(cls, node: FileNode, path: str):
        """Create a NodeInfo schema from a FileNode entity and its path."""
        details = node.get_details()
        return cls(
            id=details["id"],
            name=details["name"],
            path=path,
            type=details["type"],
            is_folder=details["is_folder"],
        )


class DirectoryListingResponse(BaseModel):
    """Schema for a folder listing."""

    path: str = Field(..., description="Normalized path of the folder")
    entries: List[NodeInfo] = Field(..., description="Children in display order")


class TreeResponse(BaseModel):
    path: str = Field(..., description="Normalized path of the subtree root")
    lines: List[str] = Field(..., description="Rendered tree, one line per node")


class SearchResponse(BaseModel):
    results: List[NodeInfo] = Field(..., description="Matches in traversal order")


class OutputLineInfo(BaseModel):
    """Schema for one terminal output line."""

    kind: str = Field(..., description="input, output or error")
    text: str = Field(..., description="Rendered text")
    is_directory_entry: bool = Field(
        False, description="Whether the line names a folder (display styling)"
    )

    @classmethod
    def from_entity(cls, line: OutputLine):
        return cls(**line.get_details())


class EffectInfo(BaseModel):
    """Schema for a request addressed to the desktop window manager."""

    kind: str = Field(..., description="Requested effect")
    target: Optional[str] = Field(None, description="Path or URL, when relevant")

    @classmethod
    def from_entity(cls, effect: EffectRequest):
        return cls(kind=effect.kind.value, target=effect.target)


class SessionResponse(BaseModel):
    session_id: str = Field(..., description="Identifier of the new session")
    cwd: str = Field(..., description="Current directory")
    lines: List[OutputLineInfo] = Field(..., description="Initial log contents")


class CwdResponse(BaseModel):
    cwd: str = Field(..., description="Current directory")


class NavigateRequest(BaseModel):
    path: str = Field(..., description="Folder to move the session cursor to")


class CommandRequest(BaseModel):
    command: str = Field(..., description="Command line as typed in the terminal")


class CommandResponse(BaseModel):
    """Schema for the outcome of one command."""

    cwd: str = Field(..., description="Current directory after the command")
    lines: List[OutputLineInfo] = Field(
        ..., description="Lines appended to the log by this command"
    )
    effects: List[EffectInfo] = Field(
        default_factory=list, description="Window manager requests raised by this command"
    )


class LogResponse(BaseModel):
    lines: List[OutputLineInfo] = Field(..., description="Full session log")


class EffectsResponse(BaseModel):
    effects: List[EffectInfo] = Field(..., description="Pending window manager requests")


class EmailRequest(BaseModel):
    email: str = Field(..., description="Visitor email address")


class EmailsResponse(BaseModel):
    emails: List[str] = Field(..., description="Collected addresses in submission order")


class ErrorResponse(BaseModel):
    """Schema for error responses."""

    detail: str = Field(..., description="Error message")

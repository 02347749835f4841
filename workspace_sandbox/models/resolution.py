"""Outcome models for sandbox path resolution."""
from __future__ import annotations

from enum import Enum
from pathlib import Path
from typing import Optional

from pydantic import BaseModel, Field


class RejectionKind(str, Enum):
    """Reasons a user-supplied path can be refused."""

    TRAVERSAL_DENIED = "traversal_denied"
    ROOT_RESOLUTION = "root_resolution"
    PARENT_RESOLUTION = "parent_resolution"
    INVALID_PATH = "invalid_path"
    PATH_RESOLUTION = "path_resolution"
    ACCESS_DENIED = "access_denied"

    @property
    def recoverable(self) -> bool:
        # A broken workspace root is an operator problem, not the caller's.
        return self is not RejectionKind.ROOT_RESOLUTION


class Rejection(BaseModel):
    kind: RejectionKind = Field(description="Category of the failure.")
    reason: str = Field(description="Human-readable explanation of the failure.")
    user_path: str = Field(default="", description="Path exactly as it was requested.")
    suggestion: Optional[str] = Field(
        default=None,
        description="Optional guidance towards an alternative way to reach the path.",
    )

    @property
    def message(self) -> str:
        if self.suggestion:
            return f"{self.reason} {self.suggestion}"
        return self.reason


class PathResolution(BaseModel):
    """Result of resolving a path: either ``path`` or ``rejection`` is set."""

    user_path: str = Field(description="Path exactly as it was requested.")
    path: Optional[Path] = Field(
        default=None, description="Canonical absolute path inside the workspace."
    )
    rejection: Optional[Rejection] = Field(
        default=None, description="Why the path was refused."
    )

    @property
    def ok(self) -> bool:
        return self.path is not None


__all__ = ["PathResolution", "Rejection", "RejectionKind"]

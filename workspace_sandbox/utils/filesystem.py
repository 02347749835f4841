"""Filesystem helpers constrained to the configured workspace."""
from __future__ import annotations

import asyncio
import logging
import os
from pathlib import Path
from typing import Optional, Union

from ..config import settings
from ..models.resolution import PathResolution, Rejection, RejectionKind

logger = logging.getLogger(__name__)

PathLike = Union[str, os.PathLike]


class WorkspacePathError(ValueError):
    """Raised when an attempted file access escapes the workspace."""

    kind = RejectionKind.ACCESS_DENIED

    def __init__(
        self,
        reason: str,
        *,
        user_path: str = "",
        suggestion: Optional[str] = None,
    ) -> None:
        self.reason = reason
        self.user_path = user_path
        self.suggestion = suggestion
        super().__init__(f"{reason} {suggestion}" if suggestion else reason)

    def to_rejection(self) -> Rejection:
        return Rejection(
            kind=self.kind,
            reason=self.reason,
            user_path=self.user_path,
            suggestion=self.suggestion,
        )


class PathTraversalError(WorkspacePathError):
    kind = RejectionKind.TRAVERSAL_DENIED


class WorkspaceRootError(WorkspacePathError):
    kind = RejectionKind.ROOT_RESOLUTION


class ParentResolutionError(WorkspacePathError):
    kind = RejectionKind.PARENT_RESOLUTION


class InvalidPathError(WorkspacePathError):
    kind = RejectionKind.INVALID_PATH


class PathResolutionError(WorkspacePathError):
    kind = RejectionKind.PATH_RESOLUTION


class AccessDeniedError(WorkspacePathError):
    kind = RejectionKind.ACCESS_DENIED


def external_access_hint() -> Optional[str]:
    """Describe the configured out-of-workspace tools, if any."""
    if not settings.suggest_external_access or not settings.external_fs_tools:
        return None
    examples = ", ".join(settings.external_fs_tools)
    return (
        "If you have an MCP filesystem server configured, use its tools "
        f"(e.g. {examples}) to access files outside the workspace."
    )


def _canonical_candidate(candidate: Path, user_path: str) -> Path:
    # lexists: a dangling symlink is judged by its target, not by its own name.
    if os.path.lexists(candidate):
        try:
            try:
                return candidate.resolve(strict=True)
            except FileNotFoundError:
                return candidate.resolve()
        except (OSError, RuntimeError, ValueError) as exc:
            raise PathResolutionError(
                f"Failed to resolve path: {exc}", user_path=user_path
            ) from exc

    parent = candidate.parent
    if not candidate.name:
        raise InvalidPathError("Invalid path: no filename", user_path=user_path)
    if parent == candidate:
        raise InvalidPathError("Invalid path: no parent directory", user_path=user_path)

    # Only the immediate parent is canonicalized; deeper missing trees are refused.
    try:
        canon_parent = parent.resolve(strict=True)
    except (OSError, RuntimeError, ValueError) as exc:
        raise ParentResolutionError(
            f"Failed to resolve parent directory: {exc}", user_path=user_path
        ) from exc
    return canon_parent / candidate.name


def resolve_sandbox_path(user_path: str, workspace_root: PathLike) -> Path:
    """Resolve ``user_path`` inside ``workspace_root``.

    Relative paths are joined with the workspace root, absolute paths are
    taken as given. Any ``..`` component is refused before the filesystem is
    consulted. Existing paths are canonicalized in full, so symlinks are
    followed to their real location; a path that does not exist yet resolves
    through its parent directory plus the literal filename.

    Args:
        user_path: Untrusted path supplied by an agent or a tool call.
        workspace_root: Existing directory all access must stay within.

    Returns:
        The canonical absolute :class:`~pathlib.Path`, equal to or below the
        canonical workspace root.

    Raises:
        WorkspacePathError: One of its subclasses, naming why the path was
            refused.
    """

    user_path = os.fspath(user_path)
    try:
        path = Path(user_path)
        if ".." in path.parts:
            raise PathTraversalError(
                "Path traversal denied: '..' components are forbidden",
                user_path=user_path,
            )

        if not os.fspath(workspace_root).strip():
            raise WorkspaceRootError(
                "Failed to resolve workspace root: path is empty", user_path=user_path
            )

        candidate = path if path.is_absolute() else Path(workspace_root) / path

        try:
            canon_root = Path(workspace_root).resolve(strict=True)
        except (OSError, RuntimeError, ValueError) as exc:
            raise WorkspaceRootError(
                f"Failed to resolve workspace root: {exc}", user_path=user_path
            ) from exc

        canon_candidate = _canonical_candidate(candidate, user_path)

        try:
            canon_candidate.relative_to(canon_root)
        except ValueError:
            raise AccessDeniedError(
                f"Access denied: path '{user_path}' resolves outside workspace.",
                user_path=user_path,
                suggestion=external_access_hint(),
            ) from None
    except WorkspaceRootError as exc:
        logger.error("Workspace root %s unusable: %s", workspace_root, exc.reason)
        raise
    except WorkspacePathError as exc:
        logger.warning("Rejected %r (%s): %s", user_path, exc.kind.value, exc.reason)
        raise

    logger.debug("Resolved %r to %s", user_path, canon_candidate)
    return canon_candidate


def check_sandbox_path(user_path: str, workspace_root: PathLike) -> PathResolution:
    """Resolve ``user_path`` and report the outcome instead of raising."""
    try:
        resolved = resolve_sandbox_path(user_path, workspace_root)
    except WorkspacePathError as exc:
        return PathResolution(user_path=str(user_path), rejection=exc.to_rejection())
    return PathResolution(user_path=str(user_path), path=resolved)


def is_within_workspace(user_path: str, workspace_root: PathLike) -> bool:
    return check_sandbox_path(user_path, workspace_root).ok


async def aresolve_sandbox_path(user_path: str, workspace_root: PathLike) -> Path:
    """Async variant of :func:`resolve_sandbox_path` run on a worker thread."""
    return await asyncio.to_thread(resolve_sandbox_path, user_path, workspace_root)


def safe_path(path_value: str) -> Path:
    """Resolve ``path_value`` inside the configured workspace.

    Args:
        path_value: Path provided by the user or a tool call.

    Returns:
        A canonical absolute :class:`~pathlib.Path` inside the workspace.
    """

    return resolve_sandbox_path(path_value, settings.workspace)


__all__ = [
    "AccessDeniedError",
    "InvalidPathError",
    "ParentResolutionError",
    "PathResolutionError",
    "PathTraversalError",
    "WorkspacePathError",
    "WorkspaceRootError",
    "aresolve_sandbox_path",
    "check_sandbox_path",
    "external_access_hint",
    "is_within_workspace",
    "resolve_sandbox_path",
    "safe_path",
]

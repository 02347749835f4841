"""Agent-facing tool for checking paths against the workspace sandbox."""
from __future__ import annotations

from langchain_core.tools import tool

from ..config import settings
from ..utils.console import tool_call_line, tool_result_line
from ..utils.filesystem import check_sandbox_path


@tool
def resolve_path(path: str) -> str:
    """Show where a path resolves inside the workspace, or why it is refused."""
    tool_call_line("Resolve", path)

    resolution = check_sandbox_path(path, settings.workspace)
    if resolution.ok:
        result = str(resolution.path)
    else:
        result = resolution.rejection.message

    tool_result_line(result)
    return result


SANDBOX_TOOLS = [resolve_path]


__all__ = ["SANDBOX_TOOLS", "resolve_path"]

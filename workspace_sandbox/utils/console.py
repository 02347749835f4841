"""Terminal rendering for sandbox checks."""
from __future__ import annotations

import sys
from pathlib import Path


RESET = "\x1b[0m"
TITLE_COLOR = "\x1b[38;2;120;200;255m"
TOOL_COLOR = "\x1b[38;2;150;140;255m\x1b[1m"
INFO_COLOR = "\x1b[38;2;110;110;110m"
ALLOWED_COLOR = "\x1b[38;2;34;139;34m"
DENIED_COLOR = "\x1b[38;2;220;80;80m"


def reset_terminal() -> None:
    if sys.stdout.isatty():
        sys.stdout.write("\033c")
        sys.stdout.flush()


def render_header(workspace: Path) -> None:
    """Print the checker title and the workspace every path is held to."""
    print(f"{TITLE_COLOR}Workspace Sandbox{RESET}")
    print(f"{INFO_COLOR}Workspace: {workspace}{RESET}")
    print(f"{INFO_COLOR}Type 'exit' to quit{RESET}\n")


def path_prompt() -> str:
    return f"{TITLE_COLOR}Path{RESET}{INFO_COLOR} >> {RESET}"


def tool_call_line(kind: str, path: str) -> None:
    print(f"{TOOL_COLOR}⏺ {kind}({path})…{RESET}")


def tool_result_line(text: str) -> None:
    for line in text.splitlines() or [""]:
        print(f"  ⎿ {line}")


def verdict_line(allowed: bool, text: str) -> str:
    """Colour ``text`` by whether the sandbox let the path through."""
    color = ALLOWED_COLOR if allowed else DENIED_COLOR
    mark = "✔" if allowed else "✘"
    return f"{color}{mark} {text}{RESET}"


__all__ = [
    "path_prompt",
    "render_header",
    "reset_terminal",
    "tool_call_line",
    "tool_result_line",
    "verdict_line",
]

"""Command-line interface entry point for the workspace sandbox."""
from __future__ import annotations

import logging
import sys
from typing import Sequence

from ..config import settings
from ..models.resolution import PathResolution
from ..utils.console import path_prompt, render_header, reset_terminal, verdict_line
from ..utils.filesystem import check_sandbox_path


def describe(resolution: PathResolution) -> str:
    """Render a single resolution outcome for the terminal."""
    if resolution.ok:
        return verdict_line(True, f"{resolution.user_path} -> {resolution.path}")
    rejection = resolution.rejection
    return verdict_line(False, f"[{rejection.kind.value}] {rejection.message}")


def check_paths(paths: Sequence[str]) -> int:
    """Resolve each of ``paths`` and return a process exit code."""
    rejected = 0
    for raw in paths:
        resolution = check_sandbox_path(raw, settings.workspace)
        print(describe(resolution))
        if not resolution.ok:
            rejected += 1
    return 1 if rejected else 0


def run_cli() -> None:
    """Run the interactive path checker."""
    reset_terminal()
    render_header(settings.workspace)

    while True:
        try:
            line = input(path_prompt())
        except (EOFError, KeyboardInterrupt):
            break

        if not line or line.strip().lower() in {"q", "quit", "exit"}:
            break

        print(describe(check_sandbox_path(line.strip(), settings.workspace)))
        print()


def main(argv: Sequence[str] | None = None) -> int:
    logging.basicConfig(
        level=settings.log_level.upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    args = list(sys.argv[1:] if argv is None else argv)
    if args:
        return check_paths(args)
    run_cli()
    return 0


if __name__ == "__main__":  # pragma: no cover - CLI execution
    sys.exit(main())

"""Shared fixtures for sandbox tests."""

from __future__ import annotations

from pathlib import Path

import pytest

from workspace_sandbox.config import settings


@pytest.fixture
def workspace(tmp_path: Path) -> Path:
    """Create a workspace with a ``data/test.txt`` file."""
    root = tmp_path / "ws"
    (root / "data").mkdir(parents=True)
    (root / "data" / "test.txt").write_text("hello", encoding="utf-8")
    return root


@pytest.fixture
def outside(tmp_path: Path) -> Path:
    """A directory next to the workspace holding a secret file."""
    other = tmp_path / "outside"
    other.mkdir()
    (other / "secret.txt").write_text("secret", encoding="utf-8")
    return other


@pytest.fixture
def configured_workspace(workspace: Path, monkeypatch) -> Path:
    """Point the global settings at the temporary workspace."""
    monkeypatch.setattr(settings, "workspace", workspace)
    monkeypatch.setattr(settings, "suggest_external_access", True)
    return workspace

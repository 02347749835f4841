"""Configuration objects and constants for the workspace sandbox."""
from __future__ import annotations

from pathlib import Path
from typing import Tuple

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Runtime configuration for the workspace sandbox.

    Values can be overridden through environment variables with the
    ``WORKSPACE_SANDBOX_`` prefix or via a local ``.env`` file.
    """

    model_config = SettingsConfigDict(
        env_prefix="WORKSPACE_SANDBOX_",
        env_file=".env",
        case_sensitive=False,
    )

    workspace: Path = Field(
        default_factory=lambda: Path.cwd(),
        description="Workspace root where all file operations should occur.",
    )
    external_fs_tools: Tuple[str, ...] = Field(
        default=("mcp_filesystem_read_file", "mcp_filesystem_list_directory"),
        description="Tools that can reach files outside the workspace.",
    )
    suggest_external_access: bool = Field(
        default=True,
        description="Point rejected callers at the external filesystem tools.",
    )
    log_level: str = Field(
        default="WARNING",
        description="Logging level used by the command-line interface.",
    )

    @field_validator("workspace", mode="before")
    @classmethod
    def _reject_empty_workspace(cls, value):
        # Path("") would silently mean the current directory.
        if isinstance(value, str) and not value.strip():
            raise ValueError("workspace must not be empty")
        return value


settings = Settings()

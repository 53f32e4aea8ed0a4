"""
Settings model — user-tunable paths and registry extensions.

Loaded from an optional YAML file by ``sectools.core.config.loader``.
Every field has a default, so an empty or absent file is valid.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any

from pydantic import BaseModel, Field, field_validator

from sectools.core.models.tool import ToolSpec


class Settings(BaseModel):
    """Installer settings."""

    install_dir: Path = Path("~/security-tools")
    wordlist_dir: Path = Path("/usr/share/wordlists")
    bin_dir: Path = Path("/usr/local/bin")
    report_path: Path = Path("~/security-tools-installation-report.txt")
    shell_profile: Path | None = None
    stream_output: bool = True

    # Extra or replacement registry entries, keyed by tool name
    tools: dict[str, ToolSpec] = Field(default_factory=dict)

    @field_validator("install_dir", "wordlist_dir", "bin_dir", "report_path", "shell_profile")
    @classmethod
    def _expand_user(cls, value: Path | None) -> Path | None:
        if value is None:
            return None
        return value.expanduser()

    @field_validator("tools", mode="before")
    @classmethod
    def _inject_tool_names(cls, value: Any) -> Any:
        if not isinstance(value, dict):
            return value
        return {
            name: ({**entry, "name": name} if isinstance(entry, dict) else entry)
            for name, entry in value.items()
        }

"""
Shell environment — Go paths in the user's shell profile.

Writes are idempotent: if the profile already mentions GOPATH, nothing
is appended.
"""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass, field
from pathlib import Path

from sectools.core.context import InstallContext
from sectools.core.data.constants import (
    GO_ENV_MARKER,
    GO_ENV_VARS,
    GO_PATH_APPEND,
    GO_WORKSPACE_DIRS,
)
from sectools.core.data.profile_maps import PROFILE_MAP

logger = logging.getLogger(__name__)


@dataclass
class ShellConfigResult:
    ok: bool
    skipped: bool = False
    profile: Path | None = None
    lines_added: list[str] = field(default_factory=list)
    note: str = ""


def detect_shell_type() -> str:
    return os.path.basename(os.environ.get("SHELL", "/bin/bash"))


def resolve_profile(override: Path | None = None, shell_type: str | None = None) -> Path:
    """Shell rc file to append to."""
    if override is not None:
        return override
    shell_type = shell_type or detect_shell_type()
    return Path(PROFILE_MAP.get(shell_type, PROFILE_MAP["sh"])).expanduser()


def shell_config_line(
    shell_type: str,
    *,
    path_entry: str | None = None,
    env_var: tuple[str, str] | None = None,
) -> str:
    """Generate a shell-specific PATH append or env export line."""
    if shell_type == "fish":
        if path_entry:
            return f"set -gx PATH $PATH {path_entry}"
        if env_var:
            return f"set -gx {env_var[0]} {env_var[1]}"
    else:
        if path_entry:
            return f"export PATH=$PATH:{path_entry}"
        if env_var:
            return f"export {env_var[0]}={env_var[1]}"
    return ""


def go_env_block(shell_type: str) -> list[str]:
    lines = ["# Go environment"]
    for name, value in GO_ENV_VARS.items():
        lines.append(shell_config_line(shell_type, env_var=(name, value)))
    lines.append(shell_config_line(shell_type, path_entry=GO_PATH_APPEND))
    return lines


def append_block_once(profile: Path, lines: list[str], marker: str) -> bool:
    """Append ``lines`` to ``profile`` unless ``marker`` already appears.

    Returns:
        True if the block was written.
    """
    existing = ""
    if profile.is_file():
        existing = profile.read_text(encoding="utf-8", errors="replace")
    if marker in existing:
        return False

    profile.parent.mkdir(parents=True, exist_ok=True)
    with profile.open("a", encoding="utf-8") as f:
        if existing and not existing.endswith("\n"):
            f.write("\n")
        f.write("\n")
        for line in lines:
            f.write(f"{line}\n")
    return True


def setup_go_environment(
    ctx: InstallContext,
    home: Path | None = None,
    shell_type: str | None = None,
) -> ShellConfigResult:
    """Add GOPATH exports to the shell profile and create the Go workspace."""
    if ctx.runner.which("go") is None:
        logger.warning("Go not installed, skipping Go setup")
        return ShellConfigResult(ok=True, skipped=True, note="go not installed")

    shell_type = shell_type or detect_shell_type()
    profile = resolve_profile(ctx.settings.shell_profile, shell_type)
    block = go_env_block(shell_type)

    try:
        written = append_block_once(profile, block, GO_ENV_MARKER)
    except OSError as e:
        logger.error("Failed to write %s: %s", profile, e)
        return ShellConfigResult(ok=False, profile=profile, note=str(e))

    if written:
        logger.info("Go environment added to %s", profile)
    else:
        logger.info("%s already configures %s", profile, GO_ENV_MARKER)

    go_root = (home or Path.home()) / "go"
    try:
        for sub in GO_WORKSPACE_DIRS:
            (go_root / sub).mkdir(parents=True, exist_ok=True)
    except OSError as e:
        logger.error("Cannot create Go workspace %s: %s", go_root, e)
        return ShellConfigResult(
            ok=False, profile=profile, lines_added=block if written else [], note=str(e),
        )

    return ShellConfigResult(
        ok=True,
        profile=profile,
        lines_added=block if written else [],
        note="" if written else "already configured",
    )

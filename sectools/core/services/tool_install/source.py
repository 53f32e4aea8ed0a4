"""
Source-repository strategy — clone (or pull) and build.

Each tool is cloned into ``<install_dir>/<tool name>``. A second install
of the same tool pulls the existing clone instead of cloning again.
After the checkout, the tool's entry in ``SOURCE_BUILDS`` runs; tools
without one get the generic Python path (requirements.txt, then a
package install of the checkout).

Build-step failures are logged and the remaining steps still run. The
final verdict is whether the binary resolves on PATH afterwards.
"""

from __future__ import annotations

import logging
from pathlib import Path

from sectools.core.context import InstallContext
from sectools.core.data.constants import PIP
from sectools.core.data.registry import SOURCE_BUILDS
from sectools.core.models.result import CommandResult
from sectools.core.models.tool import (
    BuildStep,
    ChmodStep,
    CommandStep,
    CopyStep,
    SourceDirective,
    SymlinkStep,
    ToolSpec,
)

logger = logging.getLogger(__name__)


def clone_or_update(spec: ToolSpec, ctx: InstallContext) -> tuple[Path, CommandResult]:
    """Clone the tool's repository, or pull if the clone already exists.

    Returns:
        ``(clone_dir, result)`` of the git command that ran.
    """
    directive = spec.directive
    if not isinstance(directive, SourceDirective):
        raise TypeError(f"{spec.name} has no SourceDirective")

    install_dir = ctx.settings.install_dir
    clone_dir = install_dir / spec.name
    install_dir.mkdir(parents=True, exist_ok=True)

    if clone_dir.is_dir():
        logger.info("%s already cloned, pulling latest changes", spec.name)
        return clone_dir, ctx.runner.run(["git", "pull"], cwd=str(clone_dir))

    logger.info("Cloning %s into %s", directive.clone_url, clone_dir)
    return clone_dir, ctx.runner.run(["git", "clone", directive.clone_url, str(clone_dir)])


def generic_build_steps(clone_dir: Path) -> list[BuildStep]:
    """Fallback for tools without a ``SOURCE_BUILDS`` entry."""
    steps: list[BuildStep] = []
    if (clone_dir / "requirements.txt").is_file():
        steps.append(CommandStep(argv=PIP + ["install", "-r", "requirements.txt"]))
    if (clone_dir / "setup.py").is_file() or (clone_dir / "pyproject.toml").is_file():
        steps.append(CommandStep(argv=PIP + ["install", "."]))
    return steps


def build_steps_for(spec: ToolSpec, clone_dir: Path) -> list[BuildStep]:
    if spec.name in SOURCE_BUILDS:
        return SOURCE_BUILDS[spec.name]
    return generic_build_steps(clone_dir)


def run_build_step(step: BuildStep, clone_dir: Path, ctx: InstallContext) -> CommandResult:
    """Translate one build step into a command and run it."""
    runner = ctx.runner
    bin_dir = ctx.settings.bin_dir

    if isinstance(step, CommandStep):
        cwd = clone_dir / step.cwd if step.cwd else clone_dir
        return runner.run(step.argv, cwd=str(cwd), needs_sudo=step.needs_sudo)
    if isinstance(step, CopyStep):
        return runner.run(
            ["cp", str(clone_dir / step.source), f"{bin_dir}/"],
            needs_sudo=step.needs_sudo,
        )
    if isinstance(step, SymlinkStep):
        return runner.run(
            ["ln", "-sf", str(clone_dir / step.source), str(bin_dir / step.link_name)],
            needs_sudo=step.needs_sudo,
        )
    if isinstance(step, ChmodStep):
        return runner.run(["chmod", "+x", str(clone_dir / step.path)])
    raise TypeError(f"Unknown build step: {step!r}")


def install_from_source(spec: ToolSpec, ctx: InstallContext) -> bool:
    """Install a tool whose directive is a ``SourceDirective``."""
    try:
        clone_dir, git_result = clone_or_update(spec, ctx)
    except OSError as e:
        logger.error("Cannot create install directory %s: %s", ctx.settings.install_dir, e)
        return False

    if git_result.failed:
        if git_result.command[:2] == ["git", "clone"]:
            logger.warning("git clone of %s failed (exit %d)", spec.name, git_result.return_code)
            return False
        # Stale checkout still builds
        logger.warning("git pull for %s failed, building existing checkout", spec.name)

    for step in build_steps_for(spec, clone_dir):
        result = run_build_step(step, clone_dir, ctx)
        if result.failed:
            logger.warning(
                "Build step for %s failed (exit %d): %s",
                spec.name, result.return_code, result.command_line,
            )

    if ctx.runner.which(spec.binary) is None:
        logger.warning("%s is not on PATH after installation", spec.binary)
        return False
    return True

"""
Installation dispatcher — route a tool to its install strategy.

``install_tool`` never raises for an install failure; it returns a
boolean and the caller records failures in the run state.
"""

from __future__ import annotations

import logging
from collections.abc import Callable

from sectools.core.context import InstallContext
from sectools.core.models.state import RunState
from sectools.core.models.tool import ToolSpec
from sectools.core.services.tool_install.language import install_from_pip
from sectools.core.services.tool_install.package import install_from_package
from sectools.core.services.tool_install.source import install_from_source
from sectools.core.services.tool_install.special import install_special

logger = logging.getLogger(__name__)

STRATEGIES: dict[str, Callable[[ToolSpec, InstallContext], bool]] = {
    "package": install_from_package,
    "source": install_from_source,
    "pip": install_from_pip,
    "special": install_special,
}

# Called before each install with (name, None) and after with (name, ok).
ProgressCallback = Callable[[str, bool | None], None]


def install_tool(name: str, ctx: InstallContext) -> bool:
    """Install one tool by registry name.

    Returns:
        True if the strategy reports success.
    """
    spec = ctx.registry.get(name)
    if spec is None:
        logger.info("No installation method defined for %s", name)
        return False

    strategy = STRATEGIES.get(spec.method)
    if strategy is None:
        logger.error("Unknown installation method: %s", spec.method)
        return False

    ok = strategy(spec, ctx)
    if ok:
        logger.info("%s installed successfully", name)
    else:
        logger.info("Failed to install %s", name)
    return ok


def install_missing(
    ctx: InstallContext,
    state: RunState,
    progress: ProgressCallback | None = None,
) -> list[str]:
    """Install every tool in ``state.missing``, one at a time.

    Failures are added to ``state.failed``; tools that install are moved
    to ``state.installed`` and cleared from ``state.failed``.

    Returns:
        Names that failed in this pass.
    """
    if not state.missing:
        logger.info("All tools are already installed")
        return []

    attempted = list(state.missing)
    failures: list[str] = []
    for name in attempted:
        if progress:
            progress(name, None)
        ok = install_tool(name, ctx)
        if ok:
            state.mark_installed(name)
            state.clear_failed(name)
        else:
            state.mark_failed(name)
            failures.append(name)
        if progress:
            progress(name, ok)

    logger.info(
        "Install pass complete: %d failed of %d attempted",
        len(failures), len(attempted),
    )
    return failures

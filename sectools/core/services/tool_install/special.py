"""
Special-case strategy — hardcoded multi-step installers.

Handlers are looked up by the ``SpecialDirective.handler`` name.
"""

from __future__ import annotations

import logging
import os
import tempfile
from collections.abc import Callable

from sectools.core.context import InstallContext
from sectools.core.data.registry import MSFINSTALL_URL
from sectools.core.models.tool import SpecialDirective, ToolSpec
from sectools.core.services.tool_install.package import install_packages

logger = logging.getLogger(__name__)


def install_metasploit(spec: ToolSpec, ctx: InstallContext) -> bool:
    """Install Metasploit Framework.

    Debian and Fedora families use Rapid7's official ``msfinstall``
    wrapper; Arch and macOS use their package managers.
    """
    family = ctx.facts.os_family
    runner = ctx.runner

    if family in ("arch", "macos"):
        result = install_packages(ctx, ["metasploit"])
        if result.failed:
            logger.warning("metasploit package install failed (exit %d)", result.return_code)
    else:
        fd, script = tempfile.mkstemp(prefix="msfinstall-")
        os.close(fd)
        try:
            steps = [
                (["curl", "-fsSL", MSFINSTALL_URL, "-o", script], False),
                (["chmod", "755", script], False),
                ([script], True),
            ]
            for cmd, sudo in steps:
                result = runner.run(cmd, needs_sudo=sudo)
                if result.failed:
                    logger.warning(
                        "Metasploit installer step failed (exit %d): %s",
                        result.return_code, result.command_line,
                    )
                    break
        finally:
            try:
                os.remove(script)
            except OSError:
                logger.debug("Installer script %s already removed", script)

    return runner.which(spec.binary) is not None


SPECIAL_HANDLERS: dict[str, Callable[[ToolSpec, InstallContext], bool]] = {
    "metasploit": install_metasploit,
}


def install_special(spec: ToolSpec, ctx: InstallContext) -> bool:
    """Install a tool whose directive is a ``SpecialDirective``."""
    directive = spec.directive
    if not isinstance(directive, SpecialDirective):
        raise TypeError(f"{spec.name} has no SpecialDirective")

    handler = SPECIAL_HANDLERS.get(directive.handler)
    if handler is None:
        logger.warning("Unknown special installer '%s' for %s", directive.handler, spec.name)
        return False
    logger.info("Running special installer '%s' for %s", directive.handler, spec.name)
    return handler(spec, ctx)

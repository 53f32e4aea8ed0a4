"""
Package strategy — install through the platform package manager.

Success is whatever the package manager's exit status says.
"""

from __future__ import annotations

import logging

from sectools.core.context import InstallContext
from sectools.core.models.result import CommandResult
from sectools.core.models.tool import PackageDirective, ToolSpec

logger = logging.getLogger(__name__)


def build_install_command(pm: str, packages: list[str]) -> list[str]:
    """Build a package-install command for a list of packages.

    Args:
        pm: Package manager ID.
        packages: Package names to install.

    Returns:
        Command list suitable for the process runner.
    """
    if pm == "apt":
        return ["apt-get", "install", "-y"] + packages
    if pm == "pacman":
        return ["pacman", "-S", "--noconfirm"] + packages
    if pm == "dnf":
        return ["dnf", "install", "-y"] + packages
    if pm == "brew":
        return ["brew", "install"] + packages
    raise ValueError(f"No install command for package manager '{pm}'")


def build_update_command(pm: str) -> list[str]:
    """Build the index refresh command for ``pm``."""
    if pm == "apt":
        return ["apt-get", "update", "-y"]
    if pm == "pacman":
        return ["pacman", "-Sy"]
    if pm == "dnf":
        return ["dnf", "check-update"]
    if pm == "brew":
        return ["brew", "update"]
    raise ValueError(f"No update command for package manager '{pm}'")


def needs_sudo(pm: str) -> bool:
    # Homebrew refuses to run as root
    return pm != "brew"


def install_packages(ctx: InstallContext, packages: list[str]) -> CommandResult:
    """Install ``packages`` with the detected package manager."""
    pm = ctx.package_manager
    return ctx.runner.run(build_install_command(pm, packages), needs_sudo=needs_sudo(pm))


def install_from_package(spec: ToolSpec, ctx: InstallContext) -> bool:
    """Install a tool whose directive is a ``PackageDirective``."""
    directive = spec.directive
    if not isinstance(directive, PackageDirective):
        raise TypeError(f"{spec.name} has no PackageDirective")

    package = directive.package_for(ctx.package_manager)
    logger.info("Installing %s from package manager (%s)", spec.name, package)

    result = install_packages(ctx, [package])
    if result.ok:
        return True

    logger.warning(
        "Package install of %s failed (exit %d)%s",
        package, result.return_code, f": {result.error}" if result.error else "",
    )
    return False


def update_package_manager(ctx: InstallContext) -> CommandResult:
    """Refresh the package index.

    The exit status is informational only: ``dnf check-update`` exits
    100 when updates are available.
    """
    pm = ctx.package_manager
    result = ctx.runner.run(build_update_command(pm), needs_sudo=needs_sudo(pm))
    if result.failed:
        logger.info("Package index update exited %d", result.return_code)
    return result

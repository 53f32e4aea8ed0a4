"""
Environment detection — which OS, which package manager.

One-shot classification at startup. Linux distributions are identified
from /etc/os-release; unknown distributions fall back to apt with a
warning; anything that is neither Linux nor macOS is fatal.
"""

from __future__ import annotations

import logging
import os
import platform
from pathlib import Path

from sectools.adapters.base import ProcessRunner
from sectools.core.data.constants import DEFAULT_LINUX, DISTRO_MAP, HOMEBREW_INSTALL_URL
from sectools.core.models.environment import EnvironmentFacts

logger = logging.getLogger(__name__)

OS_RELEASE_PATH = Path("/etc/os-release")


class UnsupportedPlatformError(Exception):
    """Raised when the host platform has no supported package manager."""


def parse_os_release(text: str) -> dict[str, str]:
    """Parse os-release ``KEY=value`` lines into a dict.

    Comments and blank lines are skipped; surrounding quotes are removed.
    """
    info: dict[str, str] = {}
    for line in text.splitlines():
        line = line.strip()
        if not line or line.startswith("#") or "=" not in line:
            continue
        key, value = line.split("=", 1)
        value = value.strip()
        if len(value) >= 2 and value[0] == value[-1] and value[0] in "\"'":
            value = value[1:-1]
        info[key.strip()] = value
    return info


def classify_linux(os_release: dict[str, str]) -> EnvironmentFacts:
    """Map os-release data to a package manager."""
    os_id = os_release.get("ID", "").lower() or "linux"
    pretty = os_release.get("PRETTY_NAME", os_id)

    if os_id in DISTRO_MAP:
        family, pm = DISTRO_MAP[os_id]
        return EnvironmentFacts(
            os_id=os_id, os_family=family, package_manager=pm, pretty_name=pretty,
        )

    family, pm = DEFAULT_LINUX
    logger.info(
        "Unknown Linux distribution: %s, attempting generic installation with %s",
        os_id, pm,
    )
    return EnvironmentFacts(
        os_id=os_id, os_family=family, package_manager=pm, pretty_name=pretty, known=False,
    )


def detect_environment(
    system: str | None = None,
    os_release_path: Path = OS_RELEASE_PATH,
) -> EnvironmentFacts:
    """Detect the host OS and its package manager.

    Args:
        system: Platform name as ``platform.system()`` reports it.
            Defaults to the running platform.
        os_release_path: Release metadata file (Linux only).

    Raises:
        UnsupportedPlatformError: On anything other than Linux or macOS.
    """
    system = system if system is not None else platform.system()

    if system == "Linux":
        try:
            text = os_release_path.read_text(encoding="utf-8")
        except OSError:
            logger.warning("Cannot read %s", os_release_path)
            text = ""
        facts = classify_linux(parse_os_release(text))
    elif system == "Darwin":
        facts = EnvironmentFacts(
            os_id="macos", os_family="macos", package_manager="brew", pretty_name="macOS",
        )
    else:
        raise UnsupportedPlatformError(f"Unsupported operating system: {system or 'unknown'}")

    logger.info("Detected %s (package manager: %s)", facts.label, facts.package_manager)
    return facts


def is_root() -> bool:
    return os.geteuid() == 0


def needs_privilege_warning(facts: EnvironmentFacts, root: bool | None = None) -> bool:
    """Whether to warn that installs need root (Homebrew runs unprivileged)."""
    if root is None:
        root = is_root()
    return not root and facts.package_manager != "brew"


def ensure_package_manager(facts: EnvironmentFacts, runner: ProcessRunner) -> bool:
    """Bootstrap Homebrew on macOS when ``brew`` is not on PATH.

    Returns:
        True if the package manager is available afterwards.
    """
    if facts.package_manager != "brew" or runner.which("brew"):
        return True

    logger.warning("Homebrew not found. Installing...")
    result = runner.run(
        ["/bin/bash", "-c", f'/bin/bash -c "$(curl -fsSL {HOMEBREW_INSTALL_URL})"'],
    )
    if result.failed:
        logger.error("Homebrew installation failed (exit %d)", result.return_code)
        return False
    return runner.which("brew") is not None

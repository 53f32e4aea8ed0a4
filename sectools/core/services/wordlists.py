"""
Wordlists — SecLists via the package manager, then via git if absent.

Kali ships its wordlists preinstalled, so the package step is skipped
there. The git fallback only runs when no SecLists directory exists.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path

from sectools.core.context import InstallContext
from sectools.core.data.registry import SECLISTS_REPO, WORDLIST_PACKAGES
from sectools.core.services.tool_install.package import install_packages

logger = logging.getLogger(__name__)

SYSTEM_SECLISTS_DIR = Path("/usr/share/seclists")


@dataclass
class WordlistResult:
    ok: bool
    packages_installed: bool | None = None   # None = package step skipped
    cloned: bool = False
    seclists_dir: Path | None = None


def find_seclists(wordlist_dir: Path) -> Path | None:
    """Existing SecLists directory, if any."""
    for candidate in (SYSTEM_SECLISTS_DIR, wordlist_dir / "seclists"):
        if candidate.is_dir():
            return candidate
    return None


def install_wordlists(ctx: InstallContext) -> WordlistResult:
    """Install wordlist packages and clone SecLists when missing."""
    result = WordlistResult(ok=True)
    facts = ctx.facts

    if facts.os_id == "kali":
        logger.info("Kali Linux comes with wordlists pre-installed")
    else:
        packages = WORDLIST_PACKAGES.get(facts.os_family, ["seclists"])
        pkg_result = install_packages(ctx, packages)
        result.packages_installed = pkg_result.ok
        if pkg_result.failed:
            logger.warning("Wordlist packages failed to install (exit %d)", pkg_result.return_code)

    wordlist_dir = ctx.settings.wordlist_dir
    existing = find_seclists(wordlist_dir)
    if existing is not None:
        result.seclists_dir = existing
        return result

    logger.info("Downloading SecLists into %s", wordlist_dir)
    target = wordlist_dir / "seclists"
    mkdir = ctx.runner.run(["mkdir", "-p", str(wordlist_dir)], needs_sudo=True)
    if mkdir.failed:
        logger.warning("Cannot create %s", wordlist_dir)
        result.ok = False
        return result

    clone = ctx.runner.run(
        ["git", "clone", "--depth", "1", SECLISTS_REPO, str(target)],
        needs_sudo=True,
    )
    result.cloned = clone.ok
    result.ok = clone.ok
    if clone.ok:
        result.seclists_dir = target
    else:
        logger.warning("SecLists clone failed (exit %d)", clone.return_code)
    return result

"""
CLI actions — thin terminal wrappers over the core services.

Shared by the interactive menu and the non-interactive subcommands.
Each action prints its own progress and returns a plain result.
"""

from __future__ import annotations

from pathlib import Path

import click

from sectools.core.context import InstallContext
from sectools.core.data.registry import CATEGORIES
from sectools.core.models.state import RunState
from sectools.core.services.tool_check import CheckResult, check_all_tools
from sectools.core.services.tool_install import (
    install_missing,
    install_tool,
    update_package_manager,
)

BANNER = """\
╔═══════════════════════════════════════════════════════════╗
║     Security Tools Checker & Installer                    ║
║     Automated Setup for Penetration Testing Tools         ║
╚═══════════════════════════════════════════════════════════╝"""


def show_banner() -> None:
    click.secho(BANNER, fg="blue")


def info(message: str) -> None:
    click.secho(f"[*] {message}", fg="cyan")


def ok(message: str) -> None:
    click.secho(f"[+] {message}", fg="green")


def warn(message: str) -> None:
    click.secho(f"[!] {message}", fg="yellow")


def fail(message: str) -> None:
    click.secho(f"[-] {message}", fg="red")


# ── Check ───────────────────────────────────────────────────────


def print_check(result: CheckResult) -> None:
    for category, statuses in result.by_category().items():
        click.secho(f"{CATEGORIES.get(category, category.title())}:", fg="blue")
        for status in statuses:
            if status.available:
                click.secho(f"  ✓ {status.name}", fg="green")
            else:
                click.secho(f"  ✗ {status.name}", fg="red")
        click.echo()

    click.secho("Summary:", fg="cyan")
    click.secho(f"  Installed: {len(result.installed)}", fg="green")
    click.secho(f"  Missing: {len(result.missing)}", fg="red")


def do_check(ictx: InstallContext, state: RunState, quiet: bool = False) -> CheckResult:
    if not quiet:
        info("Checking installed security tools...")
        click.echo()
    result = check_all_tools(ictx.registry, ictx.runner, state)
    if not quiet:
        print_check(result)
    return result


# ── Install ─────────────────────────────────────────────────────


def _progress(name: str, result: bool | None) -> None:
    if result is None:
        click.secho(f"Installing {name}...", fg="yellow")
    elif result:
        ok(f"{name} installed")
        click.echo()
    else:
        fail(f"Failed to install {name}")
        click.echo()


def do_install_missing(ictx: InstallContext, state: RunState) -> list[str]:
    if not state.missing:
        ok("All tools are already installed!")
        return []

    info(f"Installing {len(state.missing)} missing tools...")
    click.echo()
    return install_missing(ictx, state, progress=_progress)


def do_install_one(ictx: InstallContext, state: RunState, name: str) -> bool:
    if name not in ictx.registry:
        warn(f"No installation method defined for {name}")
        return False

    spec = ictx.registry[name]
    info(f"Installing {name} ({spec.method}: {spec.directive.target})...")
    if install_tool(name, ictx):
        state.mark_installed(name)
        state.clear_failed(name)
        ok("Installation completed")
        return True

    state.mark_failed(name)
    fail("Installation failed")
    return False


def do_update(ictx: InstallContext) -> None:
    info("Updating package manager...")
    update_package_manager(ictx)
    ok("Package manager updated")


# ── Wordlists / environment ─────────────────────────────────────


def do_wordlists(ictx: InstallContext) -> bool:
    from sectools.core.services.wordlists import install_wordlists

    info("Installing wordlists...")
    if ictx.facts.os_id == "kali":
        ok("Kali Linux comes with wordlists pre-installed")
    result = install_wordlists(ictx)
    if result.cloned:
        ok(f"SecLists downloaded to {result.seclists_dir}")
    if result.ok:
        ok("Wordlists installation completed")
    else:
        fail("Wordlists installation failed")
    return result.ok


def do_go_env(ictx: InstallContext) -> bool:
    from sectools.core.services.shell_env import setup_go_environment

    info("Setting up Go environment...")
    result = setup_go_environment(ictx)
    if result.skipped:
        warn("Go not installed, skipping Go setup")
    elif not result.ok:
        fail(f"Go environment setup failed: {result.note}")
    elif result.lines_added:
        ok(f"Go environment added to {result.profile}")
    else:
        ok(f"Go environment already present in {result.profile}")
    return result.ok


# ── Report ──────────────────────────────────────────────────────


def do_report(ictx: InstallContext, state: RunState) -> Path | None:
    from sectools.core.services.report import write_report

    try:
        path, text = write_report(ictx.facts, state, ictx.settings)
    except OSError as e:
        fail(f"Cannot write report to {ictx.settings.report_path}: {e}")
        return None
    ok(f"Installation report saved: {path}")
    click.echo(text)
    return path


# ── Composite flows ─────────────────────────────────────────────


def do_install_missing_flow(ictx: InstallContext, state: RunState) -> list[str]:
    """Install missing tools, recheck, report."""
    failures = do_install_missing(ictx, state)
    do_check(ictx, state)
    do_report(ictx, state)
    return failures


def do_full(ictx: InstallContext, state: RunState) -> list[str]:
    """Update index, install missing, wordlists, Go env, recheck, report."""
    do_update(ictx)
    failures = do_install_missing(ictx, state)
    do_wordlists(ictx)
    do_go_env(ictx)
    do_check(ictx, state)
    do_report(ictx, state)
    return failures

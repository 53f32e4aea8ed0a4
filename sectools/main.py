"""
Security Tools Installer — CLI entrypoint.

Usage:
    sectools                  # interactive menu
    sectools check
    sectools install nmap ffuf
    sectools full --help
"""

from __future__ import annotations

import json
import os
import sys
from pathlib import Path

import click

from sectools import __version__
from sectools.core.observability.logging_config import resolve_level, setup_logging


@click.group(invoke_without_command=True)
@click.version_option(version=__version__, prog_name="sectools")
@click.option("--verbose", "-v", is_flag=True, help="Enable verbose output.")
@click.option("--quiet", "-q", is_flag=True, help="Suppress non-essential output.")
@click.option("--debug", is_flag=True, help="Enable debug logging (very verbose).")
@click.option(
    "--config",
    "-c",
    "config_path",
    type=click.Path(exists=False),
    default=None,
    help="Path to settings YAML (default: ~/.config/sectools/config.yml).",
)
@click.option("--yes", "-y", "assume_yes", is_flag=True, help="Continue without root, no prompt.")
@click.pass_context
def cli(
    ctx: click.Context,
    verbose: bool,
    quiet: bool,
    debug: bool,
    config_path: str | None,
    assume_yes: bool,
) -> None:
    """Security Tools Installer — check and install pentest tooling."""
    ctx.ensure_object(dict)
    ctx.obj["verbose"] = verbose
    ctx.obj["quiet"] = quiet
    ctx.obj["config_path"] = Path(config_path) if config_path else None
    ctx.obj["assume_yes"] = assume_yes

    setup_logging(
        level=resolve_level(debug=debug, verbose=verbose, quiet=quiet),
        log_file=os.environ.get("SECTOOLS_LOG_FILE"),
        log_file_level=os.environ.get("SECTOOLS_LOG_FILE_LEVEL"),
    )

    if ctx.invoked_subcommand is None:
        ctx.invoke(menu)


def _bootstrap(ctx: click.Context, *, banner: bool = False, announce: bool = True):
    """Load settings, detect the host, and confirm privileges.

    Exits 1 on config errors, unsupported platforms, or a declined
    privilege prompt, before any installation command runs.
    """
    from sectools.adapters.shell.command import SubprocessRunner
    from sectools.core.config.loader import ConfigError, build_registry, load_settings
    from sectools.core.context import InstallContext
    from sectools.core.models.state import RunState
    from sectools.core.services import detection
    from sectools.ui.cli import actions

    if banner:
        actions.show_banner()

    try:
        settings = load_settings(ctx.obj.get("config_path"))
    except ConfigError as e:
        click.secho(f"❌ {e}", fg="red")
        sys.exit(1)

    if announce:
        actions.info("Detecting operating system...")
    try:
        facts = detection.detect_environment()
    except detection.UnsupportedPlatformError as e:
        actions.fail(str(e))
        sys.exit(1)

    if announce:
        if facts.known:
            actions.ok(f"Detected: {facts.label}")
        else:
            actions.warn(f"Unknown Linux distribution: {facts.os_id}")
            actions.warn("Attempting generic Linux installation...")

    if detection.needs_privilege_warning(facts) and not ctx.obj.get("assume_yes"):
        actions.warn("Some installations require root privileges")
        actions.warn("Please run with sudo for full functionality")
        if not click.confirm("Continue without root?", default=False):
            click.secho("Exiting. Please run with: sudo sectools", fg="red")
            sys.exit(1)

    runner = ctx.obj.get("runner") or SubprocessRunner(stream_output=settings.stream_output)
    if not detection.ensure_package_manager(facts, runner):
        actions.warn("Homebrew is unavailable; package installs will fail")

    ictx = InstallContext(
        facts=facts,
        runner=runner,
        settings=settings,
        registry=build_registry(settings),
    )
    return ictx, RunState()


@cli.command()
@click.pass_context
def menu(ctx: click.Context) -> None:
    """Interactive menu (the default when no command is given)."""
    from sectools.ui.cli import actions
    from sectools.ui.cli.menu import run_menu

    ictx, state = _bootstrap(ctx, banner=True)
    actions.do_check(ictx, state)
    run_menu(ictx, state)


@cli.command()
@click.option("--json-output", "--json", "as_json", is_flag=True, help="Output as JSON.")
@click.pass_context
def check(ctx: click.Context, as_json: bool) -> None:
    """Check which registry tools are on PATH."""
    from sectools.ui.cli import actions

    ictx, state = _bootstrap(ctx, announce=not as_json)
    result = actions.do_check(ictx, state, quiet=as_json)
    if as_json:
        click.echo(json.dumps(result.to_dict(), indent=2))


@cli.command("list")
@click.option("--json-output", "--json", "as_json", is_flag=True, help="Output as JSON.")
@click.pass_context
def list_tools(ctx: click.Context, as_json: bool) -> None:
    """List registry tools and how each is installed."""
    from sectools.core.config.loader import ConfigError, build_registry, load_settings

    try:
        registry = build_registry(load_settings(ctx.obj.get("config_path")))
    except ConfigError as e:
        click.secho(f"❌ {e}", fg="red")
        sys.exit(1)

    if as_json:
        click.echo(json.dumps(
            [
                {
                    "name": spec.name,
                    "category": spec.category,
                    "binary": spec.binary,
                    "method": spec.method,
                    "target": spec.directive.target,
                }
                for spec in registry.values()
            ],
            indent=2,
        ))
        return

    for name in sorted(registry):
        spec = registry[name]
        click.echo(f"  {name:<14} {spec.method:<8} {spec.directive.target}")


@cli.command()
@click.argument("tools", nargs=-1, required=True)
@click.pass_context
def install(ctx: click.Context, tools: tuple[str, ...]) -> None:
    """Install one or more tools by name."""
    from sectools.ui.cli import actions

    ictx, state = _bootstrap(ctx)
    failed = [name for name in tools if not actions.do_install_one(ictx, state, name)]
    if failed:
        actions.fail(f"Failed: {', '.join(failed)}")
        sys.exit(1)


@cli.command("install-missing")
@click.pass_context
def install_missing_cmd(ctx: click.Context) -> None:
    """Install every missing tool, recheck, and write the report."""
    from sectools.ui.cli import actions

    ictx, state = _bootstrap(ctx)
    actions.do_check(ictx, state, quiet=ctx.obj.get("quiet", False))
    if actions.do_install_missing_flow(ictx, state):
        sys.exit(1)


@cli.command()
@click.pass_context
def wordlists(ctx: click.Context) -> None:
    """Install SecLists and the distribution's wordlist packages."""
    from sectools.ui.cli import actions

    ictx, _state = _bootstrap(ctx)
    if not actions.do_wordlists(ictx):
        sys.exit(1)


@cli.command("go-env")
@click.pass_context
def go_env(ctx: click.Context) -> None:
    """Add GOPATH to the shell profile (once) and create ~/go."""
    from sectools.ui.cli import actions

    ictx, _state = _bootstrap(ctx)
    if not actions.do_go_env(ictx):
        sys.exit(1)


@cli.command()
@click.pass_context
def full(ctx: click.Context) -> None:
    """Update, install missing tools, wordlists, Go env, and report."""
    from sectools.ui.cli import actions

    ictx, state = _bootstrap(ctx)
    actions.do_check(ictx, state, quiet=ctx.obj.get("quiet", False))
    if actions.do_full(ictx, state):
        sys.exit(1)


@cli.command()
@click.pass_context
def report(ctx: click.Context) -> None:
    """Check all tools and write the installation report."""
    from sectools.ui.cli import actions

    ictx, state = _bootstrap(ctx)
    actions.do_check(ictx, state, quiet=True)
    if actions.do_report(ictx, state) is None:
        sys.exit(1)


if __name__ == "__main__":
    cli()

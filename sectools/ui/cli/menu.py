"""
Interactive menu — numbered actions, redisplayed until Exit.
"""

from __future__ import annotations

import click

from sectools.core.context import InstallContext
from sectools.core.models.state import RunState
from sectools.ui.cli import actions

MENU_OPTIONS: list[tuple[str, str]] = [
    ("1", "Check tool status only"),
    ("2", "Install missing tools"),
    ("3", "Install specific tool"),
    ("4", "Install wordlists"),
    ("5", "Setup Go environment"),
    ("6", "Full installation (all missing tools + wordlists)"),
    ("7", "Exit"),
]


def show_menu() -> None:
    click.echo()
    click.secho("What would you like to do?", fg="yellow")
    for key, label in MENU_OPTIONS:
        click.echo(f"{key}) {label}")
    click.echo()


def _install_specific(ictx: InstallContext, state: RunState) -> None:
    click.secho("Available tools:", fg="cyan")
    for name in sorted(ictx.registry):
        click.echo(name)
    click.echo()
    name = click.prompt("Enter tool name", type=str).strip()
    actions.do_install_one(ictx, state, name)


def run_menu(ictx: InstallContext, state: RunState) -> None:
    """Loop until the user picks Exit.

    End of input raises ``click.Abort``, which click turns into exit 1.
    """
    while True:
        show_menu()
        choice = click.prompt("Select option [1-7]", type=str, default="", show_default=False)
        choice = choice.strip()

        if choice == "1":
            actions.do_check(ictx, state)
        elif choice == "2":
            actions.do_install_missing_flow(ictx, state)
        elif choice == "3":
            _install_specific(ictx, state)
        elif choice == "4":
            actions.do_wordlists(ictx)
        elif choice == "5":
            actions.do_go_env(ictx)
        elif choice == "6":
            actions.do_full(ictx, state)
        elif choice == "7":
            click.secho("Exiting...", fg="green")
            return
        else:
            click.secho("Invalid option", fg="red")

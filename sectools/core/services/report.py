"""
Installation report — fixed-format text summary.

Pure formatting: environment facts, the run-state lists, install paths
and post-install instructions.
"""

from __future__ import annotations

import logging
from datetime import datetime
from pathlib import Path

from sectools.core.models.environment import EnvironmentFacts
from sectools.core.models.settings import Settings
from sectools.core.models.state import RunState

logger = logging.getLogger(__name__)

_RULE = "=" * 42

POST_INSTALL_STEPS = [
    "1. Restart your terminal or run: source ~/.bashrc",
    "2. Verify installations with: which <tool-name>",
    "3. Update tools regularly",
    "4. Read tool documentation before use",
]


def _section(title: str, lines: list[str]) -> list[str]:
    return [_RULE, title, _RULE, *lines, ""]


def render_report(
    facts: EnvironmentFacts,
    state: RunState,
    settings: Settings,
    now: datetime | None = None,
) -> str:
    """Render the report text."""
    now = now or datetime.now()

    lines = [
        _RULE,
        "SECURITY TOOLS INSTALLATION REPORT",
        _RULE,
        f"Date: {now.strftime('%a %b %d %H:%M:%S %Y')}",
        f"OS: {facts.os_id}",
        f"Package Manager: {facts.package_manager}",
        "",
    ]
    lines += _section(f"INSTALLED TOOLS ({len(state.installed)}):", state.installed)

    if state.missing:
        lines += _section(f"MISSING TOOLS ({len(state.missing)}):", state.missing)

    if state.failed:
        lines += _section(f"FAILED INSTALLATIONS ({len(state.failed)}):", state.failed)

    lines += _section(
        "INSTALLATION PATHS:",
        [
            f"GitHub tools: {settings.install_dir}",
            f"Wordlists: {settings.wordlist_dir}",
        ],
    )
    lines += _section("POST-INSTALLATION STEPS:", POST_INSTALL_STEPS)
    return "\n".join(lines)


def write_report(
    facts: EnvironmentFacts,
    state: RunState,
    settings: Settings,
    now: datetime | None = None,
) -> tuple[Path, str]:
    """Render the report and save it to ``settings.report_path``.

    Returns:
        ``(path, text)``.
    """
    text = render_report(facts, state, settings, now=now)
    path = settings.report_path
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(text, encoding="utf-8")
    logger.info("Installation report saved: %s", path)
    return path, text

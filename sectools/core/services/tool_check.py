"""
Tool status checker — is each registry tool resolvable on PATH?

Checking is a pure predicate; the only side effect is recording each
name into the run state's installed or missing list.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field

from sectools.adapters.base import ProcessRunner
from sectools.core.data.registry import CATEGORIES
from sectools.core.models.state import RunState
from sectools.core.models.tool import ToolSpec

logger = logging.getLogger(__name__)


@dataclass
class ToolStatus:
    name: str
    category: str
    binary: str
    available: bool
    path: str | None = None


@dataclass
class CheckResult:
    """Outcome of one full check pass, in registry order."""

    statuses: list[ToolStatus] = field(default_factory=list)

    @property
    def installed(self) -> list[str]:
        return [s.name for s in self.statuses if s.available]

    @property
    def missing(self) -> list[str]:
        return [s.name for s in self.statuses if not s.available]

    def by_category(self) -> dict[str, list[ToolStatus]]:
        """Statuses grouped by category: known categories first, then the rest."""
        groups: dict[str, list[ToolStatus]] = {cat: [] for cat in CATEGORIES}
        for status in self.statuses:
            groups.setdefault(status.category, []).append(status)
        return {cat: items for cat, items in groups.items() if items}

    def to_dict(self) -> dict:
        return {
            "tools": [
                {
                    "name": s.name,
                    "category": s.category,
                    "binary": s.binary,
                    "available": s.available,
                    "path": s.path,
                }
                for s in self.statuses
            ],
            "installed": len(self.installed),
            "missing": len(self.missing),
        }


def check_tool(spec: ToolSpec, runner: ProcessRunner) -> bool:
    """Whether the tool's executable is resolvable on the search path."""
    return runner.which(spec.binary) is not None


def check_all_tools(
    registry: dict[str, ToolSpec],
    runner: ProcessRunner,
    state: RunState,
) -> CheckResult:
    """Check every registry entry and rewrite ``state.installed`` / ``state.missing``.

    ``state.failed`` is left untouched.
    """
    result = CheckResult()
    state.reset_check()

    for spec in registry.values():
        path = runner.which(spec.binary)
        status = ToolStatus(
            name=spec.name,
            category=spec.category,
            binary=spec.binary,
            available=path is not None,
            path=path,
        )
        result.statuses.append(status)
        if status.available:
            state.mark_installed(spec.name)
        else:
            state.mark_missing(spec.name)

    logger.info(
        "Check complete: %d installed, %d missing",
        len(state.installed), len(state.missing),
    )
    return result

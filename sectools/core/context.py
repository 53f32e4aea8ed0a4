"""
Install context — everything an operation needs, passed explicitly.

Built once by the CLI after detection and config loading. Run state
(installed / missing / failed) is kept separate in ``RunState``.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from sectools.adapters.base import ProcessRunner
from sectools.core.data.registry import TOOL_REGISTRY
from sectools.core.models.environment import EnvironmentFacts
from sectools.core.models.settings import Settings
from sectools.core.models.tool import ToolSpec


@dataclass
class InstallContext:
    """Detected host, settings, registry and the process runner."""

    facts: EnvironmentFacts
    runner: ProcessRunner
    settings: Settings = field(default_factory=Settings)
    registry: dict[str, ToolSpec] = field(default_factory=lambda: dict(TOOL_REGISTRY))

    @property
    def package_manager(self) -> str:
        return self.facts.package_manager

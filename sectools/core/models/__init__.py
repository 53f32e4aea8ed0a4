"""
Domain models — Pydantic types for the installer.

    from sectools.core.models import ToolSpec, RunState, EnvironmentFacts
"""

from sectools.core.models.environment import EnvironmentFacts
from sectools.core.models.result import CommandResult
from sectools.core.models.settings import Settings
from sectools.core.models.state import RunState
from sectools.core.models.tool import (
    BuildStep,
    ChmodStep,
    CommandStep,
    CopyStep,
    InstallDirective,
    LanguagePackageDirective,
    PackageDirective,
    SourceDirective,
    SpecialDirective,
    SymlinkStep,
    ToolSpec,
)

__all__ = [
    "BuildStep",
    "ChmodStep",
    "CommandResult",
    "CommandStep",
    "CopyStep",
    "EnvironmentFacts",
    "InstallDirective",
    "LanguagePackageDirective",
    "PackageDirective",
    "RunState",
    "Settings",
    "SourceDirective",
    "SpecialDirective",
    "SymlinkStep",
    "ToolSpec",
]

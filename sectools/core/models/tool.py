"""
Tool models — registry entries and their installation directives.

A ``ToolSpec`` says what a tool is called, which executable proves it is
present, and *how* to install it. The "how" is a tagged union keyed on
``kind``, so the dispatcher never parses strings at install time:

    package  → system package manager (apt / pacman / dnf / brew)
    source   → git clone + per-tool build steps
    pip      → Python package installer
    special  → hardcoded multi-step installer (metasploit)
"""

from __future__ import annotations

from typing import Annotated, Literal, Union

from pydantic import BaseModel, Field, model_validator


# ── Installation directives ─────────────────────────────────────


class PackageDirective(BaseModel):
    """Install through the platform's package manager."""

    kind: Literal["package"] = "package"
    package: str
    # Per-manager name when it differs from ``package`` (e.g. golang-go on apt)
    overrides: dict[str, str] = Field(default_factory=dict)

    def package_for(self, package_manager: str) -> str:
        """Package name to request from ``package_manager``."""
        return self.overrides.get(package_manager, self.package)

    @property
    def target(self) -> str:
        return self.package


class SourceDirective(BaseModel):
    """Clone a source repository and build or link it."""

    kind: Literal["source"] = "source"
    repo: str                               # "owner/name"
    host: str = "https://github.com"

    @property
    def clone_url(self) -> str:
        return f"{self.host.rstrip('/')}/{self.repo}.git"

    @property
    def target(self) -> str:
        return self.repo


class LanguagePackageDirective(BaseModel):
    """Install through a language ecosystem package installer (pip)."""

    kind: Literal["pip"] = "pip"
    package: str

    @property
    def target(self) -> str:
        return self.package


class SpecialDirective(BaseModel):
    """Hardcoded installer, looked up by ``handler`` name."""

    kind: Literal["special"] = "special"
    handler: str

    @property
    def target(self) -> str:
        return self.handler


InstallDirective = Annotated[
    Union[PackageDirective, SourceDirective, LanguagePackageDirective, SpecialDirective],
    Field(discriminator="kind"),
]


class ToolSpec(BaseModel):
    """One entry in the tool registry."""

    name: str
    category: str = "utilities"
    binary: str = ""            # executable probed on PATH (default: name)
    directive: InstallDirective

    @model_validator(mode="after")
    def _default_binary(self) -> ToolSpec:
        if not self.binary:
            self.binary = self.name
        return self

    @property
    def method(self) -> str:
        """Directive kind, e.g. ``package`` or ``source``."""
        return self.directive.kind


# ── Post-clone build steps ──────────────────────────────────────


class CommandStep(BaseModel):
    """Run a command inside the clone (or a subdirectory of it)."""

    kind: Literal["command"] = "command"
    argv: list[str]
    cwd: str = ""               # relative to the clone directory
    needs_sudo: bool = False


class CopyStep(BaseModel):
    """Copy a built file from the clone into the bin directory."""

    kind: Literal["copy"] = "copy"
    source: str                 # relative to the clone directory
    needs_sudo: bool = True


class SymlinkStep(BaseModel):
    """Link a script in the clone into the bin directory."""

    kind: Literal["symlink"] = "symlink"
    source: str                 # relative to the clone directory
    link_name: str
    needs_sudo: bool = True


class ChmodStep(BaseModel):
    """Mark a file in the clone executable."""

    kind: Literal["chmod"] = "chmod"
    path: str


BuildStep = Annotated[
    Union[CommandStep, CopyStep, SymlinkStep, ChmodStep],
    Field(discriminator="kind"),
]

"""
Run state — the installed / missing / failed accumulators.

One ``RunState`` lives for one program execution and is passed
explicitly to every check and install operation.
"""

from __future__ import annotations

from pydantic import BaseModel, Field


class RunState(BaseModel):
    """Tool classification for the current session.

    ``installed`` and ``missing`` are rewritten by every check pass and
    never overlap. ``failed`` accumulates across the session; a tool
    leaves it only when a later install of it succeeds.
    """

    installed: list[str] = Field(default_factory=list)
    missing: list[str] = Field(default_factory=list)
    failed: list[str] = Field(default_factory=list)

    def reset_check(self) -> None:
        """Forget the last check pass (failures are kept)."""
        self.installed.clear()
        self.missing.clear()

    def mark_installed(self, name: str) -> None:
        if name in self.missing:
            self.missing.remove(name)
        if name not in self.installed:
            self.installed.append(name)

    def mark_missing(self, name: str) -> None:
        if name in self.installed:
            self.installed.remove(name)
        if name not in self.missing:
            self.missing.append(name)

    def mark_failed(self, name: str) -> None:
        if name not in self.failed:
            self.failed.append(name)

    def clear_failed(self, name: str) -> None:
        if name in self.failed:
            self.failed.remove(name)

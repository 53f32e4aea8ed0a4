"""
Runner base — the contract between install logic and external processes.

Installation strategies never call ``subprocess`` directly. They talk to
a ``ProcessRunner``, so tests can swap in ``MockRunner`` and script exit
codes without touching a real package manager.
"""

from __future__ import annotations

from abc import ABC, abstractmethod

from sectools.core.models.result import CommandResult


class ProcessRunner(ABC):
    """Abstract base class for process runners.

    Runners execute commands and return results.
    They NEVER raise for a failing command — failures are captured in
    the CommandResult.
    """

    @property
    @abstractmethod
    def name(self) -> str:
        """Runner identifier (e.g., 'subprocess', 'mock')."""

    @abstractmethod
    def run(
        self,
        cmd: list[str],
        *,
        cwd: str | None = None,
        needs_sudo: bool = False,
        env_overrides: dict[str, str] | None = None,
    ) -> CommandResult:
        """Run ``cmd`` to completion and return its result.

        Args:
            cmd: Command list (no shell interpolation).
            cwd: Working directory for the command.
            needs_sudo: Prefix with ``sudo`` unless already root.
            env_overrides: Extra environment variables.
        """

    @abstractmethod
    def which(self, executable: str) -> str | None:
        """Resolve ``executable`` on the search path, or None."""

    def __repr__(self) -> str:
        return f"<{self.__class__.__name__} name={self.name!r}>"

"""
CommandResult — the outcome of one external process.

The runner sends commands, the strategies read results. A non-zero exit
is data, never an exception.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, Field


class CommandResult(BaseModel):
    """Result of running one external command.

    ``return_code`` is the process exit status. Failures to even start
    the process (missing executable, permission denied) are reported as
    ``127`` / ``126`` with ``error`` set.
    """

    command: list[str]
    return_code: int = 0
    stdout: str = ""
    stderr: str = ""
    error: str | None = None
    duration_ms: int = 0

    metadata: dict[str, Any] = Field(default_factory=dict)

    @property
    def ok(self) -> bool:
        """Whether the command exited with status 0."""
        return self.return_code == 0 and self.error is None

    @property
    def failed(self) -> bool:
        return not self.ok

    @property
    def command_line(self) -> str:
        """Space-joined command, for log and terminal output."""
        return " ".join(self.command)

    @classmethod
    def success(cls, command: list[str], stdout: str = "", **kwargs: Any) -> CommandResult:
        """Create a success result."""
        return cls(command=command, return_code=0, stdout=stdout, **kwargs)

    @classmethod
    def failure(
        cls,
        command: list[str],
        return_code: int = 1,
        stderr: str = "",
        **kwargs: Any,
    ) -> CommandResult:
        """Create a failure result."""
        return cls(command=command, return_code=return_code, stderr=stderr, **kwargs)

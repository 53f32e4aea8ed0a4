"""
Mock runner — test double for every external command.

Returns success for everything by default. Responses are scripted by
command prefix, and an optional side effect can mutate the fake world
(create a clone directory, put a binary on the fake PATH).
"""

from __future__ import annotations

from collections.abc import Callable, Iterable
from dataclasses import dataclass, field

from sectools.adapters.base import ProcessRunner
from sectools.core.models.result import CommandResult


@dataclass
class RecordedCall:
    """One command the mock has received."""

    command: list[str]
    cwd: str | None = None
    needs_sudo: bool = False
    env_overrides: dict[str, str] = field(default_factory=dict)

    @property
    def command_line(self) -> str:
        return " ".join(self.command)


@dataclass
class _Rule:
    prefix: tuple[str, ...]
    return_code: int
    stdout: str
    stderr: str
    effect: Callable[[RecordedCall], None] | None


class MockRunner(ProcessRunner):
    """Scriptable runner for tests.

    Args:
        path: Executables considered present on the fake PATH.
    """

    def __init__(self, path: Iterable[str] = ()):
        self.path: set[str] = set(path)
        self._rules: list[_Rule] = []
        self._call_log: list[RecordedCall] = []

    @property
    def name(self) -> str:
        return "mock"

    @property
    def call_log(self) -> list[RecordedCall]:
        """All commands this mock has received, in order."""
        return self._call_log

    @property
    def call_count(self) -> int:
        return len(self._call_log)

    @property
    def commands(self) -> list[list[str]]:
        return [c.command for c in self._call_log]

    def on(
        self,
        *prefix: str,
        return_code: int = 0,
        stdout: str = "",
        stderr: str = "",
        effect: Callable[[RecordedCall], None] | None = None,
    ) -> None:
        """Script the response for commands starting with ``prefix``.

        Later rules win over earlier ones for the same command.
        """
        self._rules.append(_Rule(tuple(prefix), return_code, stdout, stderr, effect))

    def fail(self, *prefix: str, return_code: int = 1, stderr: str = "mock failure") -> None:
        """Make commands starting with ``prefix`` exit non-zero."""
        self.on(*prefix, return_code=return_code, stderr=stderr)

    def provides(self, *prefix: str, binary: str) -> None:
        """Make a successful ``prefix`` command put ``binary`` on the PATH."""
        self.on(*prefix, effect=lambda _call: self.path.add(binary))

    def ran(self, *prefix: str) -> bool:
        """Whether any recorded command starts with ``prefix``."""
        return any(tuple(c.command[: len(prefix)]) == prefix for c in self._call_log)

    def which(self, executable: str) -> str | None:
        if executable in self.path:
            return f"/usr/bin/{executable}"
        return None

    def run(
        self,
        cmd: list[str],
        *,
        cwd: str | None = None,
        needs_sudo: bool = False,
        env_overrides: dict[str, str] | None = None,
    ) -> CommandResult:
        call = RecordedCall(
            command=list(cmd),
            cwd=cwd,
            needs_sudo=needs_sudo,
            env_overrides=dict(env_overrides or {}),
        )
        self._call_log.append(call)

        for rule in reversed(self._rules):
            if tuple(cmd[: len(rule.prefix)]) == rule.prefix:
                if rule.return_code == 0 and rule.effect is not None:
                    rule.effect(call)
                return CommandResult(
                    command=list(cmd),
                    return_code=rule.return_code,
                    stdout=rule.stdout,
                    stderr=rule.stderr,
                    metadata={"mock": True},
                )

        return CommandResult.success(list(cmd), stdout="[mock] executed", metadata={"mock": True})

    def reset(self) -> None:
        """Clear call log and scripted responses."""
        self._call_log.clear()
        self._rules.clear()

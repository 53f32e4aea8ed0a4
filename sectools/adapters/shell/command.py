"""
Subprocess runner — execute real commands on the host.

The SINGLE PLACE where ``subprocess.run`` is called. Commands block
until they finish; there is no timeout, since package installs and
builds can legitimately take a long time.
"""

from __future__ import annotations

import logging
import os
import shutil
import subprocess
import time

from sectools.adapters.base import ProcessRunner
from sectools.core.models.result import CommandResult

logger = logging.getLogger(__name__)


class SubprocessRunner(ProcessRunner):
    """Run commands with ``subprocess.run``.

    Args:
        stream_output: If True, the child inherits the terminal so the user
            sees package-manager progress (and sudo can prompt). If False,
            stdout/stderr are captured into the result.
    """

    def __init__(self, stream_output: bool = True):
        self._stream_output = stream_output

    @property
    def name(self) -> str:
        return "subprocess"

    def which(self, executable: str) -> str | None:
        return shutil.which(executable)

    def run(
        self,
        cmd: list[str],
        *,
        cwd: str | None = None,
        needs_sudo: bool = False,
        env_overrides: dict[str, str] | None = None,
    ) -> CommandResult:
        if needs_sudo and os.geteuid() != 0:
            cmd = ["sudo"] + cmd

        env = None
        if env_overrides:
            env = os.environ.copy()
            for key, value in env_overrides.items():
                env[key] = os.path.expandvars(value)

        logger.debug("Executing: %s (cwd=%s)", " ".join(cmd), cwd)
        start = time.monotonic()

        try:
            result = subprocess.run(
                cmd,
                cwd=cwd,
                env=env,
                capture_output=not self._stream_output,
                text=True,
            )
        except FileNotFoundError as e:
            return CommandResult.failure(
                cmd, return_code=127, error=f"Command not found: {e.filename or cmd[0]}",
            )
        except PermissionError as e:
            return CommandResult.failure(cmd, return_code=126, error=f"Permission denied: {e}")
        except OSError as e:
            logger.exception("Subprocess error: %s", cmd)
            return CommandResult.failure(cmd, return_code=1, error=str(e))

        elapsed_ms = int((time.monotonic() - start) * 1000)
        stdout = (result.stdout or "")[-2000:]
        stderr = (result.stderr or "")[-2000:]

        if result.returncode != 0:
            logger.info("Command failed (exit %d): %s", result.returncode, " ".join(cmd))

        return CommandResult(
            command=cmd,
            return_code=result.returncode,
            stdout=stdout,
            stderr=stderr,
            duration_ms=elapsed_ms,
        )

"""Adapters — process runners for external commands.

Public re-exports for convenient access.
"""

from sectools.adapters.base import ProcessRunner
from sectools.adapters.mock import MockRunner, RecordedCall
from sectools.adapters.shell.command import SubprocessRunner

__all__ = [
    "MockRunner",
    "ProcessRunner",
    "RecordedCall",
    "SubprocessRunner",
]

"""
Environment facts — what host we are installing onto.

Detected once at startup by ``sectools.core.services.detection`` and
read everywhere else.
"""

from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, ConfigDict

PackageManager = Literal["apt", "pacman", "dnf", "brew"]
OsFamily = Literal["debian", "arch", "fedora", "macos"]


class EnvironmentFacts(BaseModel):
    """Host OS classification.

    ``os_id`` is the raw distribution ID (``ubuntu``, ``kali``, ``arch``...)
    or ``macos``. ``known`` is False when an unrecognised Linux distribution
    fell back to the default package manager.
    """

    model_config = ConfigDict(frozen=True)

    os_id: str
    os_family: OsFamily
    package_manager: PackageManager
    pretty_name: str = ""
    known: bool = True

    @property
    def label(self) -> str:
        return self.pretty_name or self.os_id

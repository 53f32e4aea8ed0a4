"""
Shared test fixtures and configuration.
"""

from pathlib import Path

import pytest

from sectools.adapters.mock import MockRunner
from sectools.core.context import InstallContext
from sectools.core.models.environment import EnvironmentFacts
from sectools.core.models.settings import Settings
from sectools.core.services import wordlists


@pytest.fixture
def ubuntu() -> EnvironmentFacts:
    return EnvironmentFacts(
        os_id="ubuntu", os_family="debian", package_manager="apt", pretty_name="Ubuntu 24.04 LTS",
    )


@pytest.fixture
def settings(tmp_path: Path) -> Settings:
    """Settings with every path redirected into tmp_path."""
    return Settings(
        install_dir=tmp_path / "security-tools",
        wordlist_dir=tmp_path / "wordlists",
        bin_dir=tmp_path / "bin",
        report_path=tmp_path / "report.txt",
        shell_profile=tmp_path / ".bashrc",
    )


@pytest.fixture
def runner() -> MockRunner:
    return MockRunner()


@pytest.fixture
def ictx(ubuntu: EnvironmentFacts, runner: MockRunner, settings: Settings) -> InstallContext:
    return InstallContext(facts=ubuntu, runner=runner, settings=settings)


@pytest.fixture
def no_system_seclists(tmp_path: Path, monkeypatch):
    """Point the system SecLists location at an empty tmp path."""
    monkeypatch.setattr(wordlists, "SYSTEM_SECLISTS_DIR", tmp_path / "no-system-seclists")

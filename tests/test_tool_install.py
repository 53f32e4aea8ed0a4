"""
Tests for the installation dispatcher and its four strategies.

Every test runs against MockRunner — no real package manager, git, go,
or pip is ever invoked.
"""

import logging
import sys
from pathlib import Path

import pytest

from sectools.adapters.mock import MockRunner, RecordedCall
from sectools.core.context import InstallContext
from sectools.core.data.constants import PIP
from sectools.core.models import (
    EnvironmentFacts,
    PackageDirective,
    RunState,
    SourceDirective,
    SpecialDirective,
    ToolSpec,
)
from sectools.core.services.report import render_report
from sectools.core.services.tool_check import check_all_tools
from sectools.core.services.tool_install import (
    build_install_command,
    build_update_command,
    install_missing,
    install_tool,
    update_package_manager,
)
from sectools.core.services.tool_install.language import install_from_pip
from sectools.core.services.tool_install.package import install_from_package
from sectools.core.services.tool_install.source import install_from_source
from sectools.core.services.tool_install.special import install_special


def _mkdir_clone_target(call: RecordedCall) -> None:
    """Simulate ``git clone <url> <dir>`` creating the directory."""
    Path(call.command[-1]).mkdir(parents=True)


# ── Command builders ────────────────────────────────────────────────


class TestCommandBuilders:
    @pytest.mark.parametrize(
        "pm, expected",
        [
            ("apt", ["apt-get", "install", "-y", "nmap"]),
            ("pacman", ["pacman", "-S", "--noconfirm", "nmap"]),
            ("dnf", ["dnf", "install", "-y", "nmap"]),
            ("brew", ["brew", "install", "nmap"]),
        ],
    )
    def test_install_command(self, pm, expected):
        assert build_install_command(pm, ["nmap"]) == expected

    @pytest.mark.parametrize(
        "pm, expected",
        [
            ("apt", ["apt-get", "update", "-y"]),
            ("pacman", ["pacman", "-Sy"]),
            ("dnf", ["dnf", "check-update"]),
            ("brew", ["brew", "update"]),
        ],
    )
    def test_update_command(self, pm, expected):
        assert build_update_command(pm) == expected

    def test_unknown_manager(self):
        with pytest.raises(ValueError):
            build_install_command("zypper", ["nmap"])


# ── Dispatch ────────────────────────────────────────────────────────


class TestDispatch:
    def test_unknown_tool(self, ictx: InstallContext, runner: MockRunner, caplog):
        caplog.set_level(logging.INFO)
        assert not install_tool("not-a-tool", ictx)
        assert runner.call_count == 0
        assert "No installation method defined" in caplog.text
        assert all(r.levelno < logging.WARNING for r in caplog.records)

    def test_strategy_rejects_other_directive(self, ictx: InstallContext, runner: MockRunner):
        nmap = ictx.registry["nmap"]
        for strategy in (install_from_pip, install_from_source, install_special):
            with pytest.raises(TypeError, match="nmap"):
                strategy(nmap, ictx)
        with pytest.raises(TypeError, match="wafw00f"):
            install_from_package(ictx.registry["wafw00f"], ictx)
        assert runner.call_count == 0


# ── Package strategy ────────────────────────────────────────────────


class TestPackageStrategy:
    def test_success(self, ictx: InstallContext, runner: MockRunner):
        assert install_tool("nmap", ictx)
        call = runner.call_log[0]
        assert call.command == ["apt-get", "install", "-y", "nmap"]
        assert call.needs_sudo

    def test_manager_failure(self, ictx: InstallContext, runner: MockRunner):
        runner.fail("apt-get", "install", return_code=100)
        assert not install_tool("nmap", ictx)

    def test_per_manager_override(self, ictx: InstallContext, runner: MockRunner):
        install_tool("go", ictx)
        assert runner.commands[-1] == ["apt-get", "install", "-y", "golang-go"]

    def test_pacman_override(self, runner: MockRunner, settings):
        arch = EnvironmentFacts(os_id="arch", os_family="arch", package_manager="pacman")
        ctx = InstallContext(facts=arch, runner=runner, settings=settings)
        install_tool("go", ctx)
        assert runner.commands[-1] == ["pacman", "-S", "--noconfirm", "go"]

    def test_brew_runs_unprivileged(self, runner: MockRunner, settings):
        mac = EnvironmentFacts(os_id="macos", os_family="macos", package_manager="brew")
        ctx = InstallContext(facts=mac, runner=runner, settings=settings)
        assert install_tool("hydra", ctx)
        assert runner.call_log[0].command == ["brew", "install", "hydra"]
        assert not runner.call_log[0].needs_sudo


# ── Source strategy ─────────────────────────────────────────────────


class TestSourceStrategy:
    def test_clone_then_build(self, ictx: InstallContext, runner: MockRunner, settings):
        runner.on("git", "clone", effect=_mkdir_clone_target)
        runner.provides("cp", binary="ffuf")

        assert install_tool("ffuf", ictx)

        clone_dir = settings.install_dir / "ffuf"
        assert runner.commands[0] == [
            "git", "clone", "https://github.com/ffuf/ffuf.git", str(clone_dir),
        ]
        assert runner.commands[1] == ["go", "build", "-o", "ffuf", "."]
        assert runner.call_log[1].cwd == str(clone_dir)
        assert runner.commands[2] == ["cp", str(clone_dir / "ffuf"), f"{settings.bin_dir}/"]
        assert runner.call_log[2].needs_sudo

    def test_second_install_pulls_instead_of_cloning(
        self, ictx: InstallContext, runner: MockRunner, settings,
    ):
        runner.on("git", "clone", effect=_mkdir_clone_target)

        install_tool("nuclei", ictx)
        install_tool("nuclei", ictx)

        clones = [c for c in runner.call_log if c.command[:2] == ["git", "clone"]]
        pulls = [c for c in runner.call_log if c.command[:2] == ["git", "pull"]]
        assert len(clones) == 1
        assert len(pulls) == 1
        assert pulls[0].cwd == str(settings.install_dir / "nuclei")
        assert [p.name for p in settings.install_dir.iterdir()] == ["nuclei"]

    def test_clone_failure_skips_build(self, ictx: InstallContext, runner: MockRunner):
        runner.fail("git", "clone", return_code=128)
        assert not install_tool("ffuf", ictx)
        assert runner.call_count == 1

    def test_pull_failure_still_builds(self, ictx: InstallContext, runner: MockRunner, settings):
        (settings.install_dir / "amass").mkdir(parents=True)
        runner.fail("git", "pull")
        runner.provides("go", "install", binary="amass")

        assert install_tool("amass", ictx)
        assert runner.ran("go", "install", "./...")

    def test_build_step_failure_does_not_abort(
        self, ictx: InstallContext, runner: MockRunner,
    ):
        runner.fail("go", "build")
        assert not install_tool("ffuf", ictx)
        assert runner.ran("cp")

    def test_subdirectory_build(self, ictx: InstallContext, runner: MockRunner, settings):
        install_tool("subfinder", ictx)
        build = next(c for c in runner.call_log if c.command[:2] == ["go", "build"])
        assert build.cwd == str(settings.install_dir / "subfinder" / "v2")

    def test_script_symlink(self, ictx: InstallContext, runner: MockRunner, settings):
        runner.provides("ln", binary="testssl.sh")
        assert install_tool("testssl.sh", ictx)

        clone_dir = settings.install_dir / "testssl.sh"
        assert ["chmod", "+x", str(clone_dir / "testssl.sh")] in runner.commands
        assert [
            "ln", "-sf", str(clone_dir / "testssl.sh"), str(settings.bin_dir / "testssl.sh"),
        ] in runner.commands

    def test_sublist3r_requirements_and_link(
        self, ictx: InstallContext, runner: MockRunner, settings,
    ):
        install_tool("sublist3r", ictx)
        clone_dir = settings.install_dir / "sublist3r"
        assert PIP + ["install", "-r", "requirements.txt"] in runner.commands
        assert [
            "ln", "-sf", str(clone_dir / "sublist3r.py"), str(settings.bin_dir / "sublist3r"),
        ] in runner.commands

    def test_generic_fallback(self, ictx: InstallContext, runner: MockRunner, settings):
        ictx.registry["sometool"] = ToolSpec(
            name="sometool", directive=SourceDirective(repo="someone/sometool"),
        )
        clone_dir = settings.install_dir / "sometool"
        clone_dir.mkdir(parents=True)
        (clone_dir / "requirements.txt").write_text("requests\n")
        (clone_dir / "setup.py").write_text("")
        runner.provides(*PIP, "install", ".", binary="sometool")

        assert install_tool("sometool", ictx)
        assert runner.commands[1] == PIP + ["install", "-r", "requirements.txt"]
        assert runner.commands[2] == PIP + ["install", "."]

    def test_generic_fallback_without_python_files(
        self, ictx: InstallContext, runner: MockRunner,
    ):
        ictx.registry["bare"] = ToolSpec(name="bare", directive=SourceDirective(repo="x/bare"))
        assert not install_tool("bare", ictx)
        assert runner.call_count == 1


# ── Language strategy ───────────────────────────────────────────────


class TestPipStrategy:
    def test_success(self, ictx: InstallContext, runner: MockRunner):
        assert install_tool("wafw00f", ictx)
        assert runner.commands == [["pip3", "install", "wafw00f"]]
        assert not runner.call_log[0].needs_sudo

    def test_uses_pip_on_path_not_own_interpreter(self, ictx: InstallContext, runner: MockRunner):
        install_tool("sslyze", ictx)
        install_tool("sublist3r", ictx)
        assert ["pip3", "install", "sslyze"] in runner.commands
        assert ["pip3", "install", "-r", "requirements.txt"] in runner.commands
        assert not any(sys.executable in cmd for cmd in runner.commands)

    def test_failure(self, ictx: InstallContext, runner: MockRunner):
        runner.fail(*PIP, "install")
        assert not install_tool("sslyze", ictx)


# ── Special strategy ────────────────────────────────────────────────


class TestMetasploit:
    def test_debian_uses_msfinstall(self, ictx: InstallContext, runner: MockRunner):
        scripts: list[str] = []

        def _downloaded(call: RecordedCall) -> None:
            script = call.command[-1]
            scripts.append(script)
            runner.provides(script, binary="msfconsole")

        runner.on("curl", effect=_downloaded)

        assert install_tool("msfconsole", ictx)
        script = scripts[0]
        assert "msfupdate.erb" in runner.commands[0][2]
        assert runner.commands[1] == ["chmod", "755", script]
        assert runner.call_log[2].command == [script]
        assert runner.call_log[2].needs_sudo
        assert not Path(script).exists()

    def test_download_failure_stops(self, ictx: InstallContext, runner: MockRunner):
        runner.fail("curl")
        assert not install_tool("msfconsole", ictx)
        assert runner.call_count == 1

    def test_arch_uses_pacman(self, runner: MockRunner, settings):
        arch = EnvironmentFacts(os_id="manjaro", os_family="arch", package_manager="pacman")
        ctx = InstallContext(facts=arch, runner=runner, settings=settings)
        runner.provides("pacman", binary="msfconsole")
        assert install_tool("msfconsole", ctx)
        assert runner.commands == [["pacman", "-S", "--noconfirm", "metasploit"]]

    def test_macos_uses_brew(self, runner: MockRunner, settings):
        mac = EnvironmentFacts(os_id="macos", os_family="macos", package_manager="brew")
        ctx = InstallContext(facts=mac, runner=runner, settings=settings)
        install_tool("msfconsole", ctx)
        assert runner.commands == [["brew", "install", "metasploit"]]

    def test_unknown_handler(self, ictx: InstallContext, runner: MockRunner):
        ictx.registry["weird"] = ToolSpec(name="weird", directive=SpecialDirective(handler="nope"))
        assert not install_tool("weird", ictx)
        assert runner.call_count == 0


# ── Batch installer ─────────────────────────────────────────────────


class TestInstallMissing:
    def test_nothing_missing_is_noop(self, ictx: InstallContext, runner: MockRunner):
        assert install_missing(ictx, RunState(installed=["curl"])) == []
        assert runner.call_count == 0

    def test_success_moves_to_installed(self, ictx: InstallContext):
        state = RunState(missing=["nmap"], failed=["nmap"])
        assert install_missing(ictx, state) == []
        assert state.installed == ["nmap"]
        assert state.missing == []
        assert state.failed == []

    def test_continues_after_failure(self, ictx: InstallContext, runner: MockRunner):
        runner.fail("apt-get", "install", "-y", "masscan")
        state = RunState(missing=["masscan", "nikto"])
        failures = install_missing(ictx, state)
        assert failures == ["masscan"]
        assert state.failed == ["masscan"]
        assert state.installed == ["nikto"]
        assert runner.ran("apt-get", "install", "-y", "nikto")

    def test_progress_callback(self, ictx: InstallContext):
        events: list[tuple[str, bool | None]] = []
        install_missing(ictx, RunState(missing=["nmap"]), progress=lambda n, r: events.append((n, r)))
        assert events == [("nmap", None), ("nmap", True)]

    def test_curl_and_fictitious_tool(self, ubuntu, settings):
        runner = MockRunner(path={"curl"})
        runner.fail("apt-get", "install", "-y", "zzzfake", stderr="E: Unable to locate package zzzfake")
        ctx = InstallContext(
            facts=ubuntu,
            runner=runner,
            settings=settings,
            registry={
                "curl": ToolSpec(name="curl", directive=PackageDirective(package="curl")),
                "zzzfake": ToolSpec(name="zzzfake", directive=PackageDirective(package="zzzfake")),
            },
        )
        state = RunState()

        check_all_tools(ctx.registry, runner, state)
        assert state.installed == ["curl"]
        assert state.missing == ["zzzfake"]

        assert install_missing(ctx, state) == ["zzzfake"]
        assert runner.commands == [["apt-get", "install", "-y", "zzzfake"]]
        assert state.failed == ["zzzfake"]

        report = render_report(ctx.facts, state, settings)
        failed_section = report.split("FAILED INSTALLATIONS (1):", 1)[1]
        assert "zzzfake" in failed_section


class TestUpdatePackageManager:
    def test_apt_update(self, ictx: InstallContext, runner: MockRunner):
        assert update_package_manager(ictx).ok
        assert runner.call_log[0].command == ["apt-get", "update", "-y"]
        assert runner.call_log[0].needs_sudo

    def test_dnf_updates_available_is_not_fatal(self, runner: MockRunner, settings):
        fedora = EnvironmentFacts(os_id="fedora", os_family="fedora", package_manager="dnf")
        ctx = InstallContext(facts=fedora, runner=runner, settings=settings)
        runner.fail("dnf", "check-update", return_code=100)
        result = update_package_manager(ctx)
        assert result.return_code == 100

"""
Tests for the installation report.
"""

from datetime import datetime

from sectools.core.models import RunState
from sectools.core.services.report import render_report, write_report

NOW = datetime(2026, 10, 18, 9, 30, 0)


class TestRenderReport:
    def test_header(self, ubuntu, settings):
        text = render_report(ubuntu, RunState(), settings, now=NOW)
        assert text.startswith("=" * 42 + "\nSECURITY TOOLS INSTALLATION REPORT\n")
        assert "Date: Sun Oct 18 09:30:00 2026" in text
        assert "OS: ubuntu" in text
        assert "Package Manager: apt" in text

    def test_installed_section(self, ubuntu, settings):
        text = render_report(ubuntu, RunState(installed=["curl", "git"]), settings, now=NOW)
        assert "INSTALLED TOOLS (2):\n" + "=" * 42 + "\ncurl\ngit\n" in text

    def test_optional_sections_omitted(self, ubuntu, settings):
        text = render_report(ubuntu, RunState(installed=["curl"]), settings, now=NOW)
        assert "FAILED INSTALLATIONS" not in text
        assert "MISSING TOOLS" not in text

    def test_failed_and_missing(self, ubuntu, settings):
        state = RunState(installed=["curl"], missing=["ffuf"], failed=["ffuf"])
        text = render_report(ubuntu, state, settings, now=NOW)
        assert "MISSING TOOLS (1):" in text
        assert "FAILED INSTALLATIONS (1):" in text
        assert text.index("MISSING TOOLS") < text.index("FAILED INSTALLATIONS")

    def test_paths_and_steps(self, ubuntu, settings):
        text = render_report(ubuntu, RunState(), settings, now=NOW)
        assert f"GitHub tools: {settings.install_dir}" in text
        assert f"Wordlists: {settings.wordlist_dir}" in text
        assert "4. Read tool documentation before use" in text


class TestWriteReport:
    def test_writes_file(self, ubuntu, settings):
        path, text = write_report(ubuntu, RunState(installed=["nmap"]), settings, now=NOW)
        assert path == settings.report_path
        assert path.read_text() == text

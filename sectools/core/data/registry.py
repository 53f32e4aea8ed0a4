"""
L0 Data — Tool registry and post-clone build table.

Pure data, no logic. Keys are tool names; insertion order is the
display order of ``check``.
"""

from __future__ import annotations

from sectools.core.models.tool import (
    BuildStep,
    ChmodStep,
    CommandStep,
    CopyStep,
    LanguagePackageDirective,
    PackageDirective,
    SourceDirective,
    SpecialDirective,
    SymlinkStep,
    ToolSpec,
)
from sectools.core.data.constants import PIP


def _pkg(name: str, category: str, package: str | None = None, *,
         binary: str = "", **overrides: str) -> ToolSpec:
    return ToolSpec(
        name=name,
        category=category,
        binary=binary,
        directive=PackageDirective(package=package or name, overrides=overrides),
    )


def _src(name: str, category: str, repo: str) -> ToolSpec:
    return ToolSpec(name=name, category=category, directive=SourceDirective(repo=repo))


def _pip(name: str, category: str, package: str | None = None) -> ToolSpec:
    return ToolSpec(
        name=name,
        category=category,
        directive=LanguagePackageDirective(package=package or name),
    )


# Category id → heading shown by ``check``.
CATEGORIES: dict[str, str] = {
    "network": "Network Scanning Tools",
    "web": "Web Application Tools",
    "tls": "SSL/TLS Tools",
    "recon": "Reconnaissance Tools",
    "analysis": "Network Analysis",
    "exploitation": "Exploitation Frameworks",
    "passwords": "Password Tools",
    "wireless": "Wireless Tools",
    "utilities": "General Utilities",
}


_TOOLS: list[ToolSpec] = [
    # ── Network scanning ──
    _pkg("nmap", "network"),
    _pkg("masscan", "network"),

    # ── Web application ──
    _pkg("nikto", "web"),
    _pkg("sqlmap", "web"),
    _pkg("gobuster", "web"),
    _pkg("wfuzz", "web"),
    _src("ffuf", "web", "ffuf/ffuf"),
    _src("nuclei", "web", "projectdiscovery/nuclei"),
    _pip("wafw00f", "web"),
    _pkg("whatweb", "web"),

    # ── SSL/TLS ──
    _src("testssl.sh", "tls", "drwetter/testssl.sh"),
    _pip("sslyze", "tls"),

    # ── Reconnaissance ──
    _src("sublist3r", "recon", "aboul3la/Sublist3r"),
    _src("amass", "recon", "owasp-amass/amass"),
    _src("subfinder", "recon", "projectdiscovery/subfinder"),

    # ── Network analysis ──
    _pkg("wireshark", "analysis"),
    _pkg("tcpdump", "analysis"),
    _pkg("ncat", "analysis", pacman="nmap", dnf="nmap-ncat", brew="nmap"),
    _pkg("netcat", "analysis", binary="nc", apt="netcat-openbsd", pacman="openbsd-netcat"),

    # ── Exploitation ──
    ToolSpec(
        name="msfconsole",
        category="exploitation",
        directive=SpecialDirective(handler="metasploit"),
    ),

    # ── Password cracking ──
    _pkg("john", "passwords"),
    _pkg("hashcat", "passwords"),
    _pkg("hydra", "passwords", brew="hydra"),

    # ── Wireless ──
    _pkg("aircrack-ng", "wireless"),

    # ── General utilities ──
    _pkg("curl", "utilities"),
    _pkg("wget", "utilities"),
    _pkg("git", "utilities"),
    _pkg("python3", "utilities", pacman="python", brew="python"),
    _pkg("pip3", "utilities", "python3-pip", pacman="python-pip", brew="python"),
    _pkg("go", "utilities", "golang-go", pacman="go", dnf="golang", brew="go"),
]

TOOL_REGISTRY: dict[str, ToolSpec] = {t.name: t for t in _TOOLS}


# Per-tool steps run inside the clone after ``git clone`` / ``git pull``.
# Tools without an entry get the generic requirements.txt / setup path.
SOURCE_BUILDS: dict[str, list[BuildStep]] = {
    "ffuf": [
        CommandStep(argv=["go", "build", "-o", "ffuf", "."]),
        CopyStep(source="ffuf"),
    ],
    "nuclei": [
        CommandStep(argv=["go", "build", "-o", "nuclei", "./cmd/nuclei"]),
        CopyStep(source="nuclei"),
    ],
    "testssl.sh": [
        ChmodStep(path="testssl.sh"),
        SymlinkStep(source="testssl.sh", link_name="testssl.sh"),
    ],
    "sublist3r": [
        CommandStep(argv=PIP + ["install", "-r", "requirements.txt"]),
        ChmodStep(path="sublist3r.py"),
        SymlinkStep(source="sublist3r.py", link_name="sublist3r"),
    ],
    "amass": [
        CommandStep(argv=["go", "install", "./..."]),
    ],
    "subfinder": [
        CommandStep(argv=["go", "build", "-o", "subfinder", "./cmd/subfinder"], cwd="v2"),
        CopyStep(source="v2/subfinder"),
    ],
}


# ── Wordlists ──

SECLISTS_REPO = "https://github.com/danielmiessler/SecLists.git"

# Package names per OS family; kali ships them preinstalled.
WORDLIST_PACKAGES: dict[str, list[str]] = {
    "debian": ["seclists", "wordlists"],
    "arch": ["seclists"],
    "fedora": ["seclists"],
    "macos": ["seclists"],
}


# ── Metasploit ──

MSFINSTALL_URL = (
    "https://raw.githubusercontent.com/rapid7/metasploit-omnibus/master/"
    "config/templates/metasploit-framework-wrappers/msfupdate.erb"
)

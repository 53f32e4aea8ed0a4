"""
L0 Data — Module-level constants.

Pure data. No logic. No imports beyond stdlib.
"""

from __future__ import annotations

# System pip, so console scripts land on the user's PATH rather than in
# the environment sectools itself runs from.
PIP: list[str] = ["pip3"]

# os-release ID → (family, package manager)
DISTRO_MAP: dict[str, tuple[str, str]] = {
    "ubuntu": ("debian", "apt"),
    "debian": ("debian", "apt"),
    "kali": ("debian", "apt"),
    "arch": ("arch", "pacman"),
    "manjaro": ("arch", "pacman"),
    "fedora": ("fedora", "dnf"),
    "rhel": ("fedora", "dnf"),
    "centos": ("fedora", "dnf"),
}

# Used for Linux distributions not in DISTRO_MAP.
DEFAULT_LINUX = ("debian", "apt")

HOMEBREW_INSTALL_URL = "https://raw.githubusercontent.com/Homebrew/install/HEAD/install.sh"

# Go environment appended to the shell profile; skipped when the marker is present.
GO_ENV_MARKER = "GOPATH"
GO_ENV_VARS: dict[str, str] = {"GOPATH": "$HOME/go"}
GO_PATH_APPEND = "$GOPATH/bin"
GO_WORKSPACE_DIRS = ("bin", "src", "pkg")

"""
L0 Data — Shell profile/rc file mappings.

Maps shell types to the rc file the Go environment block is appended to.
"""

from __future__ import annotations

PROFILE_MAP: dict[str, str] = {
    "bash": "~/.bashrc",
    "zsh": "~/.zshrc",
    "fish": "~/.config/fish/config.fish",
    "sh": "~/.profile",
    "dash": "~/.profile",
    "ash": "~/.profile",
}

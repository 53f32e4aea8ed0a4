"""Security Tools Installer — check, install and report on pentest tooling."""

__version__ = "1.0.0"

"""
Configuration loader — reads the settings YAML into a ``Settings`` model.

Lookup order:
    --config flag  >  $SECTOOLS_CONFIG  >  ~/.config/sectools/config.yml

A missing default file is not an error; a missing explicit file is.
Path settings can be overridden by SECTOOLS_INSTALL_DIR,
SECTOOLS_WORDLIST_DIR and SECTOOLS_REPORT_PATH.
"""

from __future__ import annotations

import logging
import os
from pathlib import Path

import yaml
from pydantic import ValidationError

from sectools.core.data.registry import TOOL_REGISTRY
from sectools.core.models.settings import Settings
from sectools.core.models.tool import ToolSpec

logger = logging.getLogger(__name__)

DEFAULT_CONFIG_PATH = Path("~/.config/sectools/config.yml")

_ENV_OVERRIDES = {
    "SECTOOLS_INSTALL_DIR": "install_dir",
    "SECTOOLS_WORDLIST_DIR": "wordlist_dir",
    "SECTOOLS_REPORT_PATH": "report_path",
}


class ConfigError(Exception):
    """Raised when the settings file is invalid or unreadable."""


def find_config_file(explicit: Path | None = None) -> Path | None:
    """Resolve which settings file to read.

    Returns:
        The explicit or ``$SECTOOLS_CONFIG`` path (even if it does not
        exist, so the caller can report it), the default path if it
        exists, or None.
    """
    if explicit is not None:
        return explicit
    env_path = os.environ.get("SECTOOLS_CONFIG")
    if env_path:
        return Path(env_path)
    default = DEFAULT_CONFIG_PATH.expanduser()
    return default if default.is_file() else None


def load_settings(path: Path | None = None) -> Settings:
    """Load and validate installer settings.

    Args:
        path: Explicit settings file. If None, the lookup order applies.

    Raises:
        ConfigError: If the file is missing (when explicit) or invalid.
    """
    config_path = find_config_file(path)
    data: dict = {}

    if config_path is not None:
        if not config_path.is_file():
            raise ConfigError(f"Config file not found: {config_path}")

        logger.debug("Loading settings from %s", config_path)
        try:
            raw = config_path.read_text(encoding="utf-8")
        except OSError as e:
            raise ConfigError(f"Cannot read {config_path}: {e}") from e

        try:
            loaded = yaml.safe_load(raw)
        except yaml.YAMLError as e:
            raise ConfigError(f"Invalid YAML in {config_path}: {e}") from e

        if loaded is None:
            loaded = {}
        if not isinstance(loaded, dict):
            raise ConfigError(
                f"Expected a YAML mapping in {config_path}, got {type(loaded).__name__}"
            )
        data = loaded

    for env_var, field_name in _ENV_OVERRIDES.items():
        value = os.environ.get(env_var)
        if value:
            data[field_name] = value

    try:
        settings = Settings.model_validate(data)
    except ValidationError as e:
        raise ConfigError(f"Invalid settings: {e}") from e

    if settings.tools:
        logger.info("Loaded %d custom tool entries", len(settings.tools))
    return settings


def build_registry(settings: Settings) -> dict[str, ToolSpec]:
    """Default registry with the settings' ``tools`` merged over it."""
    registry = dict(TOOL_REGISTRY)
    registry.update(settings.tools)
    return registry

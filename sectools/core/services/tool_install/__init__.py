"""
Tool install — dispatcher and the four install strategies.

    package  → package.py
    source   → source.py
    pip      → language.py
    special  → special.py
"""

from sectools.core.services.tool_install.dispatcher import (
    STRATEGIES,
    install_missing,
    install_tool,
)
from sectools.core.services.tool_install.package import (
    build_install_command,
    build_update_command,
    update_package_manager,
)

__all__ = [
    "STRATEGIES",
    "build_install_command",
    "build_update_command",
    "install_missing",
    "install_tool",
    "update_package_manager",
]

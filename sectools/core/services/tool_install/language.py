"""
Language-package strategy — install with the Python package installer.
"""

from __future__ import annotations

import logging

from sectools.core.context import InstallContext
from sectools.core.data.constants import PIP
from sectools.core.models.tool import LanguagePackageDirective, ToolSpec

logger = logging.getLogger(__name__)


def install_from_pip(spec: ToolSpec, ctx: InstallContext) -> bool:
    """Install a tool whose directive is a ``LanguagePackageDirective``."""
    directive = spec.directive
    if not isinstance(directive, LanguagePackageDirective):
        raise TypeError(f"{spec.name} has no LanguagePackageDirective")

    logger.info("Installing %s from pip (%s)", spec.name, directive.package)
    result = ctx.runner.run(PIP + ["install", directive.package])
    if result.failed:
        logger.warning("pip install %s failed (exit %d)", directive.package, result.return_code)
    return result.ok

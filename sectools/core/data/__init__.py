"""L0 Data — static registry and constants. No logic."""

from sectools.core.data.registry import (
    CATEGORIES,
    SOURCE_BUILDS,
    TOOL_REGISTRY,
)

__all__ = ["CATEGORIES", "SOURCE_BUILDS", "TOOL_REGISTRY"]

"""vitecraft data models - re-exports all public model classes."""

from vitecraft.models.config import ToolConfig, load_tool_config
from vitecraft.models.options import (
    PACKAGE_MANAGERS,
    TEMPLATES,
    ScaffoldOptions,
    normalize_package_manager,
    normalize_template,
)

__all__ = [
    "PACKAGE_MANAGERS",
    "ScaffoldOptions",
    "TEMPLATES",
    "ToolConfig",
    "load_tool_config",
    "normalize_package_manager",
    "normalize_template",
]

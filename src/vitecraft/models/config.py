"""Tool configuration model for vitecraft.

Captures vitecraft.yaml fields that provide defaults for the command
line. Explicit CLI flags always take precedence over these values.
"""

from __future__ import annotations

from pathlib import Path

import yaml
from pydantic import BaseModel

CONFIG_FILENAME = "vitecraft.yaml"


class ToolConfig(BaseModel):
    """Defaults loaded from vitecraft.yaml."""

    model_config = {"extra": "forbid"}

    package_manager: str = "npm"
    template: str = "react"
    tailwind: bool = False
    vite_version: str = "latest"


def load_tool_config(directory: Path | None = None) -> ToolConfig:
    """Load ToolConfig from vitecraft.yaml. Returns defaults if not found.

    Args:
        directory: Directory containing vitecraft.yaml. Defaults to cwd.

    Returns:
        Validated ToolConfig instance.
    """
    config_path = (directory or Path.cwd()) / CONFIG_FILENAME
    if not config_path.exists():
        return ToolConfig()

    raw = yaml.safe_load(config_path.read_text(encoding="utf-8"))
    if raw is None:
        return ToolConfig()
    return ToolConfig.model_validate(raw)

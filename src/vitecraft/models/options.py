"""Scaffold options model.

Captures the parsed command line in one immutable record that is
read by every downstream step (registry, overlay, add-ons, orchestrator).
"""

from __future__ import annotations

from typing import Literal, get_args

from pydantic import BaseModel, Field, field_validator

Template = Literal["react", "react-ts"]
PackageManager = Literal["npm", "yarn", "pnpm"]

TEMPLATES: tuple[str, ...] = get_args(Template)
PACKAGE_MANAGERS: tuple[str, ...] = get_args(PackageManager)

DEFAULT_TEMPLATE: str = "react"
DEFAULT_PACKAGE_MANAGER: str = "npm"


def normalize_template(value: str | None) -> str:
    """Return value if it is a known Vite template, else the default."""
    if value and value.strip().lower() in TEMPLATES:
        return value.strip().lower()
    return DEFAULT_TEMPLATE


def normalize_package_manager(value: str | None) -> str:
    """Return value if it is a supported package manager, else the default."""
    if value and value.strip().lower() in PACKAGE_MANAGERS:
        return value.strip().lower()
    return DEFAULT_PACKAGE_MANAGER


class ScaffoldOptions(BaseModel):
    """Immutable options for one bootstrap run."""

    model_config = {"extra": "forbid", "frozen": True}

    app_name: str = Field(min_length=1)
    template: Template = "react"
    package_manager: PackageManager = "npm"
    tailwind: bool = False

    @field_validator("app_name")
    @classmethod
    def _check_directory_name(cls, value: str) -> str:
        if value in (".", "..") or "/" in value or "\\" in value:
            raise ValueError(
                f"app name {value!r} must be a plain directory name"
            )
        return value

    @property
    def use_typescript(self) -> bool:
        return self.template == "react-ts"

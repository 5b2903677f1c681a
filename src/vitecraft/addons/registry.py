"""Add-on registry for resolving add-on names to instances."""

from __future__ import annotations

from vitecraft.addons.base import BaseAddon
from vitecraft.addons.tailwind import TailwindAddon
from vitecraft.models.options import ScaffoldOptions

# Builtin add-on short names, in the order they are applied.
BUILTIN_ADDONS: dict[str, type[BaseAddon]] = {
    "tailwind": TailwindAddon,
}


def get_addon(name: str) -> BaseAddon:
    """Return an instance of the builtin add-on called name.

    Raises:
        ValueError: If name is not a builtin add-on.
    """
    try:
        cls = BUILTIN_ADDONS[name]
    except KeyError:
        available = ", ".join(sorted(BUILTIN_ADDONS))
        raise ValueError(
            f"Unknown add-on '{name}'. Available add-ons: {available}."
        ) from None
    return cls()


def enabled_addons(options: ScaffoldOptions) -> list[BaseAddon]:
    """Return the add-ons options enable, in application order."""
    addons = [get_addon(name) for name in BUILTIN_ADDONS]
    return [addon for addon in addons if addon.enabled(options)]

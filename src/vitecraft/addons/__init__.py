"""Optional add-ons applied on top of the base overlay."""

from vitecraft.addons.base import AddonContext, BaseAddon
from vitecraft.addons.registry import enabled_addons, get_addon
from vitecraft.addons.tailwind import TailwindAddon, inject_vite_plugin

__all__ = [
    "AddonContext",
    "BaseAddon",
    "TailwindAddon",
    "enabled_addons",
    "get_addon",
    "inject_vite_plugin",
]

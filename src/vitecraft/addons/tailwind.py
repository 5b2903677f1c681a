"""Tailwind CSS add-on.

Follows the Tailwind "using Vite" installation: adds the Vite plugin,
replaces the stylesheet with the Tailwind import and registers the
class-sorting Prettier plugin.
"""

from __future__ import annotations

import re
from pathlib import Path

from rich.console import Console

from vitecraft.addons.base import AddonContext, BaseAddon
from vitecraft.errors import AddonError
from vitecraft.overlay.files import append_file, write_file
from vitecraft.overlay.json_merge import (
    JSONDocument,
    set_if_absent,
    union_list,
    upsert_json,
)
from vitecraft.package_manager import add_command

console = Console()

RUNTIME_PACKAGES: list[str] = ["tailwindcss", "@tailwindcss/vite"]
DEV_PACKAGES: list[str] = ["prettier-plugin-tailwindcss"]

PRETTIER_PLUGIN = "prettier-plugin-tailwindcss"

VITE_PLUGIN_MODULE = "@tailwindcss/vite"
VITE_PLUGIN_IMPORT = "import tailwindcss from '@tailwindcss/vite';\n"
VITE_PLUGIN_CALL = "tailwindcss()"

# Checked in order; create-vite writes .ts for react-ts and .js for react.
VITE_CONFIG_NAMES: tuple[str, ...] = (
    "vite.config.ts",
    "vite.config.js",
    "vite.config.mts",
    "vite.config.mjs",
)

# From "plugins: [" up to the first react() call; earlier entries may nest brackets.
_PLUGIN_LIST_RE = re.compile(r"(plugins:\s*\[.*?\breact\(\))", re.DOTALL)

INDEX_CSS = "src/index.css"
INDEX_CSS_PLACEHOLDER = "/* App styles */\n"
CSS_DIRECTIVES = '@import "tailwindcss";\n'

EDITOR_SETTING_KEY = "tailwindCSS.experimental.configFile"

README_HEADING = "## Tailwind CSS"
README_SECTION = f"""
{README_HEADING}

- Tailwind CSS and `prettier-plugin-tailwindcss` are enabled.
- Utility classes are automatically sorted by Prettier.
"""


def inject_vite_plugin(config: str) -> str:
    """Add the Tailwind import and plugin call to Vite config text.

    Textual edit: the plugin call is spliced in right after react()
    inside the plugins array. Text that already references the plugin
    or its module is left alone, so applying twice is a no-op.

    Args:
        config: Current Vite config source.

    Returns:
        Updated Vite config source.

    Raises:
        AddonError: If no plugins array containing react() is found.
    """
    if VITE_PLUGIN_CALL not in config:
        config, count = _PLUGIN_LIST_RE.subn(rf"\1, {VITE_PLUGIN_CALL}", config, count=1)
        if count == 0:
            raise AddonError(
                "Could not find a 'plugins: [react()]' list in the Vite config; "
                f"add {VITE_PLUGIN_CALL} to it manually."
            )
    if VITE_PLUGIN_MODULE not in config:
        config = VITE_PLUGIN_IMPORT + config
    return config


def find_vite_config(app_dir: Path) -> Path:
    """Return the project's Vite config file.

    Raises:
        AddonError: If none of the known config file names exist.
    """
    for name in VITE_CONFIG_NAMES:
        candidate = app_dir / name
        if candidate.exists():
            return candidate
    raise AddonError(
        f"No Vite config found in {app_dir} (looked for {', '.join(VITE_CONFIG_NAMES)})"
    )


def ensure_index_css(app_dir: Path) -> Path:
    """Create src/index.css with a placeholder comment if it is missing."""
    path = app_dir / INDEX_CSS
    if not path.exists():
        write_file(path, INDEX_CSS_PLACEHOLDER)
    return path


def add_prettier_plugin(cfg: JSONDocument) -> None:
    union_list(cfg, "plugins", PRETTIER_PLUGIN)


def add_editor_setting(settings: JSONDocument) -> None:
    set_if_absent(settings, EDITOR_SETTING_KEY, INDEX_CSS)


class TailwindAddon(BaseAddon):
    """Installs and wires up Tailwind CSS in a generated Vite project."""

    name = "tailwind"

    def apply(self, context: AddonContext) -> None:
        app_dir = context.app_dir
        pm = context.options.package_manager
        console.print("[bold]➡ Enabling Tailwind CSS…[/bold]")

        # 1. Dependencies
        for packages, dev in ((RUNTIME_PACKAGES, False), (DEV_PACKAGES, True)):
            argv = add_command(pm, packages, dev=dev)
            if argv:
                context.runner.run(argv, cwd=app_dir)

        # 2. Vite plugin
        vite_config = find_vite_config(app_dir)
        write_file(vite_config, inject_vite_plugin(vite_config.read_text(encoding="utf-8")))

        # 3. CSS directives
        write_file(ensure_index_css(app_dir), CSS_DIRECTIVES)

        # 4-5. Prettier plugin and VS Code setting
        upsert_json(app_dir / ".prettierrc.json", add_prettier_plugin)
        upsert_json(app_dir / ".vscode" / "settings.json", add_editor_setting)

        # 6. README
        readme_path = app_dir / "README.md"
        existing = readme_path.read_text(encoding="utf-8") if readme_path.exists() else ""
        if README_HEADING not in existing.splitlines():
            append_file(readme_path, README_SECTION)

        console.print("[green][bold]✅ Tailwind CSS enabled.[/bold][/green]")

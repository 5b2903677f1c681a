"""vitecraft CLI command for bootstrapping a new project.

Parses the app name and flags, falls back to vitecraft.yaml and then to
built-in defaults, and runs the bootstrap. Any fatal error is printed
to stderr and exits with code 1.
"""

from __future__ import annotations

from pathlib import Path
from typing import Optional

import typer
import yaml
from pydantic import ValidationError
from rich.console import Console
from rich.markup import escape

from vitecraft import __version__
from vitecraft.bootstrap import bootstrap_project
from vitecraft.errors import VitecraftError
from vitecraft.models.config import CONFIG_FILENAME, load_tool_config
from vitecraft.models.options import (
    ScaffoldOptions,
    normalize_package_manager,
    normalize_template,
)

err_console = Console(stderr=True)


def version_callback(value: bool) -> None:
    """Print version and exit."""
    if value:
        typer.echo(f"vitecraft {__version__}")
        raise typer.Exit()


def _resolve(value: Optional[str], fallback: str, normalize, label: str) -> str:
    """Normalize value (or fallback), warning when an unknown value is dropped."""
    raw = value if value is not None else fallback
    resolved = normalize(raw)
    if raw and raw.strip().lower() != resolved:
        err_console.print(
            f"[yellow]Unknown {label} '{escape(raw)}', using '{resolved}'.[/yellow]"
        )
    return resolved


def create(
    ctx: typer.Context,
    app_name: Optional[str] = typer.Argument(
        None, help="Name of the new project folder", show_default=False
    ),
    template_arg: Optional[str] = typer.Argument(
        None,
        metavar="[TEMPLATE]",
        help="Vite template: react | react-ts  [default: react]",
        show_default=False,
    ),
    template: Optional[str] = typer.Option(
        None,
        "--template",
        "-t",
        help="Vite template: react | react-ts  [default: react]",
        show_default=False,
    ),
    package_manager: Optional[str] = typer.Option(
        None,
        "--package-manager",
        "-p",
        help="Package manager: npm | yarn | pnpm  [default: npm]",
        show_default=False,
    ),
    tailwind: Optional[bool] = typer.Option(
        None,
        "--tailwind/--no-tailwind",
        help="Include Tailwind CSS and prettier-plugin-tailwindcss  [default: no-tailwind]",
        show_default=False,
    ),
    version: bool = typer.Option(
        False,
        "--version",
        "-v",
        help="Show version and exit.",
        callback=version_callback,
        is_eager=True,
    ),
) -> None:
    """Create a React + Vite app and pre-configure its tooling.

    Runs create-vite, then writes Prettier, ESLint and VS Code settings,
    adds lint/format scripts and lint-staged to package.json, installs
    the dev dependencies and a Husky pre-commit hook.
    """
    if not app_name:
        typer.echo(ctx.get_help())
        raise typer.Exit()

    try:
        config = load_tool_config()
    except (yaml.YAMLError, ValidationError) as exc:
        err_console.print(f"[bold red]Invalid {CONFIG_FILENAME}:[/bold red] {escape(str(exc))}")
        raise typer.Exit(code=1)

    chosen_template = template_arg if template_arg is not None else template
    try:
        options = ScaffoldOptions(
            app_name=app_name,
            template=_resolve(chosen_template, config.template, normalize_template, "template"),
            package_manager=_resolve(
                package_manager, config.package_manager, normalize_package_manager, "package manager"
            ),
            tailwind=tailwind if tailwind is not None else config.tailwind,
        )
    except ValidationError as exc:
        message = exc.errors()[0]["msg"]
        err_console.print(f"[bold red]Error:[/bold red] {escape(message)}")
        raise typer.Exit(code=1)

    try:
        bootstrap_project(options, base_dir=Path.cwd(), config=config)
    except (VitecraftError, OSError) as exc:
        err_console.print(f"[bold red]❌ Bootstrap failed:[/bold red]\n{escape(str(exc))}")
        raise typer.Exit(code=1)

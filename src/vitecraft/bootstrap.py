"""Bootstrap orchestration.

Creates the Vite app with the external generator, then overlays the
tooling configuration, installs dependencies, applies add-ons and sets
up git with a lint-staged pre-commit hook. Every step is sequential
and every path is explicit; the process working directory is never
changed.
"""

from __future__ import annotations

from pathlib import Path

from rich.console import Console
from rich.markup import escape

from vitecraft.addons import AddonContext, enabled_addons
from vitecraft.models.config import ToolConfig
from vitecraft.models.options import ScaffoldOptions
from vitecraft.overlay.files import write_all, write_file
from vitecraft.overlay.json_merge import upsert_json
from vitecraft.overlay.manifest import dev_dependencies_for, merge_package_manifest
from vitecraft.package_manager import (
    add_command,
    detect_package_manager,
    exec_command,
    install_command,
    run_script_command,
)
from vitecraft.process import CommandRunner
from vitecraft.templates import get_file_registry

console = Console()

PRE_COMMIT_HOOK = "lint-staged\n"


def generator_command(options: ScaffoldOptions, vite_version: str = "latest") -> list[str]:
    """Build the create-vite invocation for options."""
    return [
        "npm",
        "create",
        f"vite@{vite_version}",
        options.app_name,
        "--",
        "--template",
        options.template,
    ]


def apply_base_overlay(app_dir: Path, options: ScaffoldOptions) -> list[str]:
    """Write the template files and merge scripts into package.json.

    Safe to re-run against a partially configured project: templates
    are full overwrites and the manifest merge only adds missing keys.

    Returns:
        Relative paths of the written template files.
    """
    console.print("[bold]➡ Writing base config files…[/bold]")
    written = write_all(app_dir, get_file_registry(options))

    console.print("[bold]➡ Updating package.json…[/bold]")
    upsert_json(app_dir / "package.json", merge_package_manifest)
    return written


def setup_git_hooks(app_dir: Path, package_manager: str, runner: CommandRunner) -> None:
    """Initialize git if needed, then install the lint-staged pre-commit hook."""
    if not runner.succeeds(["git", "rev-parse", "--is-inside-work-tree"], cwd=app_dir):
        console.print("[bold]➡ Initializing git repo…[/bold]")
        runner.run(["git", "init"], cwd=app_dir)

    console.print("[bold]➡ Configuring Husky pre-commit hook…[/bold]")
    runner.run(exec_command(package_manager, "husky", "init"), cwd=app_dir)
    # husky init writes a default hook that runs the test script
    write_file(app_dir / ".husky" / "pre-commit", PRE_COMMIT_HOOK)


def print_next_steps(options: ScaffoldOptions) -> None:
    console.print("\n[green][bold]✅ All set![/bold][/green]")
    console.print("Next steps:")
    console.print(f"  cd {escape(options.app_name)}")
    console.print(f"  {run_script_command(options.package_manager, 'dev')}")
    console.print("\nNeed help?\n  vitecraft --help")
    console.print("\nPre-commit hooks are active. Try:")
    console.print('  git add -A && git commit -m "test hooks"')


def bootstrap_project(
    options: ScaffoldOptions,
    *,
    base_dir: Path,
    runner: CommandRunner | None = None,
    config: ToolConfig | None = None,
) -> Path:
    """Create and configure a new React + Vite project.

    Args:
        options: Parsed and validated scaffold options.
        base_dir: Directory in which the app directory is created.
        runner: Command runner (defaults to a real CommandRunner).
        config: Tool configuration (defaults to ToolConfig()).

    Returns:
        Path to the created project directory.

    Raises:
        CommandFailedError: If any external command fails.
        JSONOverlayError: If an existing JSON config is malformed.
        AddonError: If an add-on cannot be applied.
        OSError: On filesystem failures.
    """
    runner = runner or CommandRunner()
    config = config or ToolConfig()
    base_dir = base_dir.resolve()

    console.print(
        f"[bold]➡ Creating Vite app: {escape(options.app_name)} "
        f"(template: {options.template})[/bold]"
    )
    runner.run(generator_command(options, config.vite_version), cwd=base_dir)

    app_dir = base_dir / options.app_name
    console.print(f"[bold]➡ Working directory: {escape(str(app_dir))}[/bold]")

    package_manager = detect_package_manager(app_dir, options.package_manager)
    if package_manager != options.package_manager:
        options = options.model_copy(update={"package_manager": package_manager})
    console.print(f"[bold]➡ Package manager: {package_manager}[/bold]")

    apply_base_overlay(app_dir, options)

    console.print("[bold]➡ Installing base dev dependencies…[/bold]")
    argv = add_command(package_manager, dev_dependencies_for(options), dev=True)
    if argv:
        runner.run(argv, cwd=app_dir)

    context = AddonContext(app_dir=app_dir, options=options, runner=runner)
    for addon in enabled_addons(options):
        addon.apply(context)

    console.print("[bold]➡ Ensuring dependencies are installed…[/bold]")
    runner.run(install_command(package_manager), cwd=app_dir)

    setup_git_hooks(app_dir, package_manager, runner)

    print_next_steps(options)
    return app_dir

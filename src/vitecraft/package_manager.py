"""Package manager command lookup.

Every command is a pure function of the package manager id. Unknown
ids resolve to npm, the documented default.
"""

from __future__ import annotations

from pathlib import Path

from vitecraft.models.options import DEFAULT_PACKAGE_MANAGER

# Package manager id -> argv prefix that adds named packages.
_ADD_COMMANDS: dict[str, list[str]] = {
    "npm": ["npm", "i"],
    "yarn": ["yarn", "add"],
    "pnpm": ["pnpm", "add"],
}

# Package manager id -> argv prefix that runs a binary from node_modules.
_EXEC_COMMANDS: dict[str, list[str]] = {
    "npm": ["npx"],
    "yarn": ["yarn"],
    "pnpm": ["pnpm", "exec"],
}

# Lock file -> package manager that produced it, in detection priority order.
LOCK_FILES: list[tuple[str, str]] = [
    ("pnpm-lock.yaml", "pnpm"),
    ("yarn.lock", "yarn"),
]


def _known(pm: str) -> str:
    return pm if pm in _ADD_COMMANDS else DEFAULT_PACKAGE_MANAGER


def add_command(pm: str, packages: list[str], dev: bool = True) -> list[str] | None:
    """Build the argv that adds packages, or None when there is nothing to add.

    Args:
        pm: Package manager id.
        packages: Package names to add.
        dev: Add as development dependencies.

    Returns:
        Command argv, or None for an empty package list.
    """
    if not packages:
        return None
    argv = list(_ADD_COMMANDS[_known(pm)])
    if dev:
        argv.append("-D")
    argv.extend(packages)
    return argv


def install_command(pm: str) -> list[str]:
    """Build the argv that installs everything listed in package.json."""
    return [_known(pm), "install"]


def run_script_command(pm: str, script: str) -> str:
    """Render the shell command that runs a package.json script."""
    pm = _known(pm)
    if pm == "npm":
        return f"npm run {script}"
    return f"{pm} {script}"


def exec_command(pm: str, *args: str) -> list[str]:
    """Build the argv that runs a locally installed binary."""
    return [*_EXEC_COMMANDS[_known(pm)], *args]


def detect_package_manager(app_dir: Path, requested: str) -> str:
    """Pick the package manager actually used by the generated project.

    Lock file evidence overrides the requested choice: a pnpm lock file
    forces pnpm, else a yarn lock file forces yarn.

    Args:
        app_dir: Generated project directory.
        requested: Package manager requested on the command line.

    Returns:
        The package manager id to use for the rest of the run.
    """
    for lock_file, pm in LOCK_FILES:
        if (app_dir / lock_file).exists():
            return pm
    return _known(requested)

"""package.json overlay: lint/format scripts and lint-staged globs."""

from __future__ import annotations

from vitecraft.models.options import ScaffoldOptions
from vitecraft.overlay.json_merge import JSONDocument, set_if_absent

BASE_DEV_DEPENDENCIES: list[str] = [
    "prettier",
    "eslint",
    "eslint-config-prettier",
    "eslint-plugin-prettier",
    "eslint-plugin-react",
    "eslint-plugin-react-hooks",
    "husky",
    "lint-staged",
]

TYPESCRIPT_DEV_DEPENDENCIES: list[str] = [
    "@typescript-eslint/parser",
    "@typescript-eslint/eslint-plugin",
]

DEFAULT_SCRIPTS: dict[str, str] = {
    "prepare": "husky",
    "lint": "eslint .",
    "lint:fix": "eslint . --fix",
    "format": "prettier --write .",
}

DEFAULT_LINT_STAGED: dict[str, list[str]] = {
    "*.{js,jsx,ts,tsx}": ["eslint --fix", "prettier --write"],
    "*.{json,css,md}": ["prettier --write"],
}


def dev_dependencies_for(options: ScaffoldOptions) -> list[str]:
    """Return the base tooling dev dependencies for the chosen template."""
    if options.use_typescript:
        return BASE_DEV_DEPENDENCIES + TYPESCRIPT_DEV_DEPENDENCIES
    return list(BASE_DEV_DEPENDENCIES)


def merge_package_manifest(pkg: JSONDocument) -> None:
    """Add missing scripts and lint-staged globs; keep everything else."""
    scripts = set_if_absent(pkg, "scripts", {})
    for name, command in DEFAULT_SCRIPTS.items():
        set_if_absent(scripts, name, command)

    lint_staged = set_if_absent(pkg, "lint-staged", {})
    for glob, commands in DEFAULT_LINT_STAGED.items():
        set_if_absent(lint_staged, glob, list(commands))

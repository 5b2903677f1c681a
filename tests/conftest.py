"""Shared fixtures: a command runner that records calls instead of spawning."""

from __future__ import annotations

import json
from pathlib import Path

import pytest

from vitecraft.process import CommandRunner

VITE_CONFIG_JS = """\
import { defineConfig } from 'vite'
import react from '@vitejs/plugin-react'

// https://vite.dev/config/
export default defineConfig({
  plugins: [react()],
})
"""


class FakeRunner(CommandRunner):
    """Records commands and simulates create-vite writing a project."""

    def __init__(self, lock_file: str | None = None, in_git_repo: bool = False) -> None:
        self.calls: list[tuple[list[str], Path]] = []
        self.lock_file = lock_file
        self.in_git_repo = in_git_repo

    def run(self, argv: list[str], cwd: Path) -> None:
        self.calls.append((list(argv), cwd))
        if argv[:2] == ["npm", "create"]:
            self._generate(cwd / argv[3], template=argv[-1])
        elif argv[-2:] == ["husky", "init"]:
            hook = cwd / ".husky" / "pre-commit"
            hook.parent.mkdir(parents=True, exist_ok=True)
            hook.write_text("npm test\n", encoding="utf-8")

    def succeeds(self, argv: list[str], cwd: Path) -> bool:
        self.calls.append((list(argv), cwd))
        return self.in_git_repo

    def _generate(self, app_dir: Path, template: str) -> None:
        (app_dir / "src").mkdir(parents=True)
        manifest = {
            "name": app_dir.name,
            "private": True,
            "type": "module",
            "scripts": {"dev": "vite", "build": "vite build", "lint": "eslint ."},
        }
        (app_dir / "package.json").write_text(json.dumps(manifest, indent=2) + "\n", encoding="utf-8")
        config_name = "vite.config.ts" if template == "react-ts" else "vite.config.js"
        (app_dir / config_name).write_text(VITE_CONFIG_JS, encoding="utf-8")
        (app_dir / "README.md").write_text("# React + Vite\n", encoding="utf-8")
        if self.lock_file:
            (app_dir / self.lock_file).write_text("", encoding="utf-8")

    @property
    def argvs(self) -> list[list[str]]:
        return [argv for argv, _ in self.calls]


@pytest.fixture
def fake_runner() -> FakeRunner:
    return FakeRunner()


@pytest.fixture
def vite_project(tmp_path: Path) -> Path:
    """A minimal generated project with package.json and vite.config.js."""
    app_dir = tmp_path / "my-app"
    (app_dir / "src").mkdir(parents=True)
    (app_dir / "package.json").write_text('{\n  "name": "my-app"\n}\n', encoding="utf-8")
    (app_dir / "vite.config.js").write_text(VITE_CONFIG_JS, encoding="utf-8")
    return app_dir

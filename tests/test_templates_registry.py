"""Tests for vitecraft.templates.registry - get_file_registry()."""

from __future__ import annotations

import json

from vitecraft.models.options import ScaffoldOptions
from vitecraft.templates import get_file_registry
from vitecraft.templates.registry import TYPESCRIPT_PARSER


def _options(**overrides) -> ScaffoldOptions:
    return ScaffoldOptions(app_name="my-app", **overrides)


class TestFileRegistry:
    """Tests for the contents of the overlay file registry."""

    def test_plain_npm_registry(self) -> None:
        """Plain template yields prettier/eslint configs and src/App.jsx."""
        registry = get_file_registry(_options(template="react", package_manager="npm"))

        prettier = json.loads(registry[".prettierrc.json"])
        assert prettier["semi"] is True
        eslint = json.loads(registry[".eslintrc.json"])
        assert eslint["env"]["browser"] is True
        assert "parser" not in eslint
        assert "src/App.jsx" in registry
        assert "src/App.tsx" not in registry

    def test_typescript_registry(self) -> None:
        """react-ts yields src/App.tsx and the TypeScript ESLint parser."""
        registry = get_file_registry(_options(template="react-ts"))

        assert "src/App.tsx" in registry
        assert "src/App.jsx" not in registry
        eslint = json.loads(registry[".eslintrc.json"])
        assert eslint["parser"] == TYPESCRIPT_PARSER
        assert "@typescript-eslint" in eslint["plugins"]
        assert "useState<number>(0)" in registry["src/App.tsx"]

    def test_deterministic(self) -> None:
        """Two calls with the same options return identical mappings."""
        options = _options(template="react-ts", tailwind=True, package_manager="pnpm")
        assert get_file_registry(options) == get_file_registry(options)

    def test_expected_keys(self) -> None:
        """Registry contains every overlay file with slash-separated keys."""
        registry = get_file_registry(_options())
        assert set(registry) == {
            ".prettierrc.json",
            ".prettierignore",
            ".eslintrc.json",
            ".eslintignore",
            ".vscode/settings.json",
            "README.md",
            "src/App.jsx",
        }
        assert all("\\" not in key for key in registry)

    def test_json_templates_pretty_printed(self) -> None:
        """JSON templates use 2-space indentation and a trailing newline."""
        registry = get_file_registry(_options())
        for key in (".prettierrc.json", ".eslintrc.json", ".vscode/settings.json"):
            content = registry[key]
            assert content.endswith("}\n")
            assert content == json.dumps(json.loads(content), indent=2) + "\n"

    def test_tailwind_selects_styled_app(self) -> None:
        """The tailwind flag swaps in the utility-class starter at the same path."""
        plain = get_file_registry(_options())["src/App.jsx"]
        styled = get_file_registry(_options(tailwind=True))["src/App.jsx"]
        assert "className=\"App\"" in plain
        assert "min-h-screen" in styled
        assert "import './index.css';" in styled

    def test_app_component_references_its_path(self) -> None:
        """The starter tells the user which file to edit."""
        registry = get_file_registry(_options(template="react-ts"))
        assert "<code>src/App.tsx</code>" in registry["src/App.tsx"]
        assert "style={{ fontFamily" in registry["src/App.tsx"]


class TestReadmeTemplate:
    """Tests for the README rendering."""

    def test_readme_uses_app_name(self) -> None:
        readme = get_file_registry(_options())["README.md"]
        assert readme.startswith("# my-app\n")

    def test_readme_npm_scripts(self) -> None:
        readme = get_file_registry(_options(package_manager="npm"))["README.md"]
        assert "`npm run dev`" in readme
        assert "`npm run lint:fix`" in readme

    def test_readme_yarn_scripts(self) -> None:
        readme = get_file_registry(_options(package_manager="yarn"))["README.md"]
        assert "`yarn dev`" in readme
        assert "npm run" not in readme

"""Static file templates for the tooling overlay.

get_file_registry() is a pure function of ScaffoldOptions: it returns
relative path -> content and performs no I/O. Keys always use forward
slashes; the writer joins them onto the project root.
"""

from __future__ import annotations

from vitecraft.models.options import ScaffoldOptions
from vitecraft.overlay.json_merge import dump_json_document
from vitecraft.package_manager import run_script_command

# Prettier

PRETTIER_CONFIG: dict = {
    "semi": True,
    "singleQuote": True,
    "trailingComma": "es5",
    "printWidth": 80,
    "tabWidth": 2,
    "bracketSpacing": True,
    "arrowParens": "always",
}

PRETTIER_IGNORE: list[str] = [
    "node_modules",
    "dist",
    "build",
    "coverage",
    ".next",
    "out",
    "package-lock.json",
    "yarn.lock",
    "pnpm-lock.yaml",
]

# ESLint

_ESLINT_EXTENDS: list[str] = [
    "eslint:recommended",
    "plugin:react/recommended",
    "plugin:react-hooks/recommended",
    "plugin:prettier/recommended",
]

_ESLINT_PLUGINS: list[str] = ["react", "react-hooks", "prettier"]

TYPESCRIPT_PARSER = "@typescript-eslint/parser"

ESLINT_IGNORE: list[str] = [
    "dist",
    "node_modules",
    "vite.config.*.ts",
    "vite.config.*.js",
]

# VS Code

VSCODE_SETTINGS: dict = {
    "editor.defaultFormatter": "esbenp.prettier-vscode",
    "editor.formatOnSave": True,
    "editor.formatOnSaveMode": "modifications",
    "prettier.prettierPath": "./node_modules/prettier",
    "eslint.validate": [
        "javascript",
        "javascriptreact",
        "typescript",
        "typescriptreact",
    ],
    "editor.codeActionsOnSave": {
        "source.fixAll": "explicit",
        "source.fixAll.eslint": "explicit",
    },
}

# App

_APP_PLAIN = """\
import {{ useState }} from 'react';
import './App.css';

export default function App() {{
  const [count, setCount] = {use_state};
  return (
    <div className="App" style={{{{ fontFamily: 'sans-serif', padding: '2rem' }}}}>
      <h1>Hello, React + Vite 🚀</h1>
      <p>Edit <code>{path}</code> and save to test HMR</p>
      <button onClick={{() => setCount((c) => c + 1)}}>Count: {{count}}</button>
    </div>
  );
}}
"""

_APP_TAILWIND = """\
import {{ useState }} from 'react';
import './App.css';
import './index.css';

export default function App() {{
  const [count, setCount] = {use_state};

  return (
    <div className="min-h-screen flex items-center justify-center bg-gray-50 dark:bg-zinc-900">
      <div className="rounded-2xl shadow p-8 bg-white dark:bg-zinc-800">
        <h1 className="text-2xl font-bold tracking-tight mb-2 text-zinc-900 dark:text-zinc-50">
          Hello, React + Vite + Tailwind 🚀
        </h1>
        <p className="text-sm text-zinc-600 dark:text-zinc-300 mb-4">
          Edit <code>{path}</code> and save to test HMR
        </p>
        <button
          onClick={{() => setCount((c) => c + 1)}}
          className="px-4 py-2 rounded-lg border text-sm font-medium hover:bg-zinc-50 dark:hover:bg-zinc-700"
        >
          Count: {{count}}
        </button>
      </div>
    </div>
  );
}}
"""

# README

_README = """\
# {app_name}

[![Code Style: Prettier](https://img.shields.io/badge/code_style-prettier-ff69b4.svg)](https://prettier.io)
[![Linting: ESLint](https://img.shields.io/badge/linting-eslint-blue.svg)](https://eslint.org)

A React + Vite starter with Prettier, ESLint, Husky, lint-staged, and VS Code settings pre-configured.

## Scripts

"""

# (script, description) pairs listed in the README
_README_SCRIPTS: list[tuple[str, str]] = [
    ("dev", "Start development server"),
    ("build", "Build for production"),
    ("preview", "Preview production build"),
    ("lint", "Run ESLint"),
    ("lint:fix", "Fix ESLint issues"),
    ("format", "Format code with Prettier"),
]


def _lines(entries: list[str]) -> str:
    return "\n".join(entries) + "\n"


def eslint_config(use_typescript: bool) -> dict:
    """Build the .eslintrc.json document for the template language."""
    config: dict = {"env": {"browser": True, "es2021": True, "node": True}}
    extends = list(_ESLINT_EXTENDS)
    plugins = list(_ESLINT_PLUGINS)
    if use_typescript:
        config["parser"] = TYPESCRIPT_PARSER
        config["parserOptions"] = {"project": False}
        extends.insert(1, "plugin:@typescript-eslint/recommended")
        plugins.insert(0, "@typescript-eslint")
    config["extends"] = extends
    config["plugins"] = plugins
    config["rules"] = {"prettier/prettier": "error", "react/prop-types": "off"}
    config["settings"] = {"react": {"version": "detect"}}
    return config


def app_component_path(options: ScaffoldOptions) -> str:
    """Relative path of the entry component for the template language."""
    return "src/App.tsx" if options.use_typescript else "src/App.jsx"


def app_component(options: ScaffoldOptions) -> str:
    """Render the starter App component (Tailwind-styled when enabled)."""
    template = _APP_TAILWIND if options.tailwind else _APP_PLAIN
    use_state = "useState<number>(0)" if options.use_typescript else "useState(0)"
    return template.format(use_state=use_state, path=app_component_path(options))


def readme(options: ScaffoldOptions) -> str:
    """Render README.md with script commands for the package manager."""
    scripts = [
        f"- `{run_script_command(options.package_manager, script)}` — {description}"
        for script, description in _README_SCRIPTS
    ]
    return _README.format(app_name=options.app_name) + _lines(scripts)


def get_file_registry(options: ScaffoldOptions) -> dict[str, str]:
    """Return every overlay file for options as relative path -> content."""
    return {
        ".prettierrc.json": dump_json_document(PRETTIER_CONFIG),
        ".prettierignore": _lines(PRETTIER_IGNORE),
        ".eslintrc.json": dump_json_document(eslint_config(options.use_typescript)),
        ".eslintignore": _lines(ESLINT_IGNORE),
        ".vscode/settings.json": dump_json_document(VSCODE_SETTINGS),
        "README.md": readme(options),
        app_component_path(options): app_component(options),
    }

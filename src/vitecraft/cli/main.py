"""vitecraft CLI entry point."""

import typer

from vitecraft.cli.create_cmd import create

app = typer.Typer(
    name="vitecraft",
    help="Bootstrap a React + Vite app with Prettier, ESLint, Husky and lint-staged",
    add_completion=False,
    context_settings={"help_option_names": ["-h", "--help"]},
)

app.command()(create)

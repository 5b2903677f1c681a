"""Blocking invocation of external commands.

Commands inherit the host's stdin/stdout/stderr so the user sees live
output from npm, git and friends. There is no timeout and no retry:
a failing command is terminal for the run.
"""

from __future__ import annotations

import shutil
import subprocess
from pathlib import Path

from rich.console import Console
from rich.markup import escape

from vitecraft.errors import CommandFailedError

console = Console()


def _resolve_executable(argv: list[str]) -> list[str]:
    """Resolve argv[0] on PATH so npm.cmd and friends are found on Windows."""
    executable = shutil.which(argv[0])
    if executable is None:
        return list(argv)
    return [executable, *argv[1:]]


class CommandRunner:
    """Runs external commands in an explicit working directory."""

    def run(self, argv: list[str], cwd: Path) -> None:
        """Run a command to completion.

        Args:
            argv: Command and arguments (no shell).
            cwd: Working directory for the command.

        Raises:
            CommandFailedError: If the executable is missing or exits non-zero.
        """
        console.print(f"[dim]$ {escape(' '.join(argv))}[/dim]")
        try:
            subprocess.run(_resolve_executable(argv), cwd=cwd, check=True)
        except FileNotFoundError:
            raise CommandFailedError(argv) from None
        except subprocess.CalledProcessError as exc:
            raise CommandFailedError(argv, exc.returncode) from None

    def succeeds(self, argv: list[str], cwd: Path) -> bool:
        """Run a command silently and report whether it exited zero."""
        try:
            result = subprocess.run(
                _resolve_executable(argv),
                cwd=cwd,
                stdin=subprocess.DEVNULL,
                stdout=subprocess.DEVNULL,
                stderr=subprocess.DEVNULL,
            )
        except FileNotFoundError:
            return False
        return result.returncode == 0

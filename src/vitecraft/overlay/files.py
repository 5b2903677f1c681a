"""Filesystem writer for generated project files.

Every write replaces the target's full content. Writes go to a sibling
.tmp file that is renamed over the target, so an interrupted run never
leaves a half-written config file behind. I/O errors propagate.
"""

from __future__ import annotations

import os
import stat
from pathlib import Path

from rich.console import Console
from rich.markup import escape

console = Console()


def _display_path(path: Path) -> str:
    try:
        return str(path.resolve().relative_to(Path.cwd().resolve()))
    except ValueError:
        return str(path)


def write_file(path: Path, content: str) -> None:
    """Write content to path, creating parent directories as needed.

    Any existing content is replaced in full. The permission bits of an
    existing file are kept (git hooks stay executable).

    Args:
        path: Target file path.
        content: Complete new file content.
    """
    path.parent.mkdir(parents=True, exist_ok=True)
    tmp_path = path.with_name(path.name + ".tmp")
    tmp_path.write_text(content, encoding="utf-8")
    if path.exists():
        os.chmod(tmp_path, stat.S_IMODE(path.stat().st_mode))
    os.replace(tmp_path, path)
    console.print(f"  [green]✍[/green]  {escape(_display_path(path))}")


def write_all(root: Path, registry: dict[str, str]) -> list[str]:
    """Write every registry entry below root.

    Args:
        root: Project root directory.
        registry: Mapping of slash-separated relative path -> content.

    Returns:
        List of written relative paths, in registry order.
    """
    written: list[str] = []
    for rel_path, content in registry.items():
        write_file(root.joinpath(*rel_path.split("/")), content)
        written.append(rel_path)
    return written


def append_file(path: Path, content: str) -> None:
    """Append content to path, creating the file if it does not exist."""
    path.parent.mkdir(parents=True, exist_ok=True)
    with path.open("a", encoding="utf-8") as fh:
        fh.write(content)
    console.print(f"  [green]+[/green]  {escape(_display_path(path))}")

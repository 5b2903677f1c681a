"""Exception hierarchy for vitecraft.

Every failure is terminal for a run. Errors are raised where they
happen and only turned into an exit code at the CLI boundary.
"""

from __future__ import annotations

from pathlib import Path


class VitecraftError(Exception):
    """Base class for all vitecraft errors."""


class CommandFailedError(VitecraftError):
    """Raised when an external command is missing or exits non-zero."""

    def __init__(self, argv: list[str], returncode: int | None = None) -> None:
        self.argv = list(argv)
        self.returncode = returncode
        command = " ".join(self.argv)
        if returncode is None:
            message = f"Command could not be started: {command}"
        else:
            message = f"Command failed with exit code {returncode}: {command}"
        super().__init__(message)


class JSONOverlayError(VitecraftError):
    """Raised when an existing JSON document cannot be merged into."""

    def __init__(self, path: Path, reason: str) -> None:
        self.path = path
        self.reason = reason
        super().__init__(f"Cannot update {path}: {reason}")


class AddonError(VitecraftError):
    """Raised when an add-on cannot be applied to the generated project."""

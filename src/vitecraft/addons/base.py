"""BaseAddon ABC and the context passed to add-ons.

An add-on extends the base overlay after it has been written: it may
install packages, rewrite generated files and merge into JSON configs.
Whether it was already applied is inferred from file contents, so
applying an add-on twice leaves the project unchanged.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from pathlib import Path

from vitecraft.models.options import ScaffoldOptions
from vitecraft.process import CommandRunner


@dataclass
class AddonContext:
    """Everything an add-on needs to act on a generated project."""

    app_dir: Path
    options: ScaffoldOptions
    runner: CommandRunner


class BaseAddon(ABC):
    """Abstract base class for overlay add-ons."""

    name: str = ""

    def enabled(self, options: ScaffoldOptions) -> bool:
        """Return True if options ask for this add-on."""
        return bool(getattr(options, self.name, False))

    @abstractmethod
    def apply(self, context: AddonContext) -> None:
        """Apply the add-on to context.app_dir.

        Steps run in order and each must finish before the next. Any
        failure propagates; already-applied steps are not rolled back.
        """

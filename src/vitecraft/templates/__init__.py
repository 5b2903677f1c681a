"""Overlay file templates."""

from vitecraft.templates.registry import get_file_registry

__all__ = ["get_file_registry"]

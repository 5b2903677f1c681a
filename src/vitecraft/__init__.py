"""vitecraft - React + Vite project bootstrapper with lint/format tooling."""

__version__ = "0.1.0"

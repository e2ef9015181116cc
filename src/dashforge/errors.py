"""Custom exception types raised while scaffolding a dashboard."""

from __future__ import annotations

from pathlib import Path


class ScaffoldError(RuntimeError):
    """Base class for failures that abort a generation run."""

    def __init__(self, message: str) -> None:
        super().__init__(message)


class NoTabsError(ScaffoldError, ValueError):
    """Raised when a project would be generated without any tab."""


class ScaffoldWriteError(ScaffoldError):
    """Raised when a directory or file of the generated tree cannot be written."""

    def __init__(self, path: Path, error: OSError) -> None:
        super().__init__(f"could not write {path}: {error}")
        self.path = path
        self.error = error


__all__ = ["NoTabsError", "ScaffoldError", "ScaffoldWriteError"]

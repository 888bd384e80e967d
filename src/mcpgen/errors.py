"""Custom exception types raised while generating a project."""

from __future__ import annotations

from pathlib import Path


class GenerationError(RuntimeError):
    """Base class for failures that abort a generation run."""

    def __init__(self, message: str) -> None:
        super().__init__(message)


class InvalidProjectNameError(GenerationError, ValueError):
    """Raised when the requested project name is not a valid identifier."""


class PreconditionError(GenerationError):
    """Raised before any filesystem change when a run cannot start."""


class TemplateNotFoundError(PreconditionError):
    """Raised when the template root is missing or not a directory."""

    def __init__(self, path: Path, reason: str = "does not exist") -> None:
        self.path = path
        super().__init__(f"Template directory {path} {reason}")


class DestinationExistsError(PreconditionError):
    """Raised when the destination directory is already present."""

    def __init__(self, path: Path) -> None:
        self.path = path
        super().__init__(f"Directory {path} already exists")


class CopyError(GenerationError):
    """Raised when copying the template tree fails part way through."""


class RewriteError(GenerationError):
    """Raised when a copied file cannot be rewritten."""


class TemplateIntegrityError(RewriteError):
    """Raised when a file the rewrite table expects is missing from the copy."""

    def __init__(self, path: Path) -> None:
        self.path = path
        super().__init__(f"Expected template file {path} is missing")


__all__ = [
    "CopyError",
    "DestinationExistsError",
    "GenerationError",
    "InvalidProjectNameError",
    "PreconditionError",
    "RewriteError",
    "TemplateIntegrityError",
    "TemplateNotFoundError",
]

"""Errors raised while scaffolding a document."""

from __future__ import annotations

from pathlib import Path


class TexcliError(Exception):
    """Base class for fatal scaffolding errors."""

    def __init__(self, message: str, path: Path | None = None) -> None:
        super().__init__(message)
        self.path = path


class AlreadyExistsError(TexcliError):
    """Raised when the primary output file is already present."""

    def __init__(self, path: Path) -> None:
        super().__init__(
            f"File '{path}' already exists. Aborting to avoid overwrite.", path
        )


class DirectoryUnavailableError(TexcliError):
    """Raised when a required directory cannot be resolved or created."""


class WriteFailureError(TexcliError):
    """Raised when the primary document cannot be written."""


class TemplateRegistryError(TexcliError):
    """Raised when the template registry is misconfigured."""

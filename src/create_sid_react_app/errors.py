"""Exceptions raised while scaffolding a project.

Every failure in the workflow surfaces as a ``ScaffoldError`` subclass so the
CLI can report it in one place.  Library callers get the structured context
(paths, command, exit code, stderr) as attributes.
"""

from __future__ import annotations

from pathlib import Path


class ScaffoldError(Exception):
    """Base class for all scaffolding failures."""


class TemplateNotFoundError(ScaffoldError):
    """Raised when the template directory is missing or unreadable."""

    def __init__(self, path: Path, reason: str = "") -> None:
        self.path = path
        message = f"Template directory not found: {path}"
        if reason:
            message = f"Template directory unusable: {path}: {reason}"
        super().__init__(message)


class CopyError(ScaffoldError):
    """Raised when the template tree cannot be copied to the target."""

    def __init__(self, source: Path, destination: Path, reason: str = "") -> None:
        self.source = source
        self.destination = destination
        message = f"Failed to copy template {source} -> {destination}"
        if reason:
            message = f"{message}: {reason}"
        super().__init__(message)


class ManifestParseError(ScaffoldError):
    """Raised when ``package.json`` is missing or is not a JSON object."""

    def __init__(self, path: Path, reason: str = "") -> None:
        self.path = path
        message = f"Could not read package manifest {path}"
        if reason:
            message = f"{message}: {reason}"
        super().__init__(message)


class InstallCommandError(ScaffoldError):
    """Raised when the dependency install command fails or cannot start."""

    def __init__(
        self,
        message: str,
        command: str = "",
        returncode: int | None = None,
        stderr: str = "",
    ) -> None:
        self.command = command
        self.returncode = returncode
        self.stderr = stderr
        super().__init__(message)

"""Pydantic v2 models for a scaffolding run.

``ScaffoldRequest`` captures what the user asked for on the command line and
``PackageManifest`` wraps the copied ``package.json`` while its ``name`` is
rewritten.
"""

from __future__ import annotations

import os
from pathlib import Path
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator

from .errors import ManifestParseError
from .utils import load_json, save_json

MANIFEST_FILENAME = "package.json"


class ScaffoldRequest(BaseModel):
    """A project name and the absolute directory it resolves to."""

    model_config = ConfigDict(frozen=True)

    project_name: str = Field(..., min_length=1, description="Raw name given on the CLI")
    target_dir: Path = Field(..., description="Absolute directory the template is copied to")

    @field_validator("target_dir")
    @classmethod
    def _target_must_be_absolute(cls, value: Path) -> Path:
        if not value.is_absolute():
            raise ValueError(f"target_dir must be absolute, got {value}")
        return value

    @classmethod
    def from_cli(cls, project_name: str, cwd: str | Path | None = None) -> "ScaffoldRequest":
        """Resolve *project_name* against *cwd* (default: the process cwd).

        ``project_name`` may itself be a relative path such as ``sub/app``;
        the target becomes ``<cwd>/sub/app``.
        """
        base = Path(cwd) if cwd is not None else Path.cwd()
        # Symlinks are not followed: the target keeps the name that was typed.
        target_dir = Path(os.path.abspath(base / project_name))
        return cls(project_name=project_name, target_dir=target_dir)

    @property
    def app_name(self) -> str:
        """Name written into the manifest: the target directory's base name."""
        return self.target_dir.name


class PackageManifest(BaseModel):
    """A ``package.json`` loaded for editing.

    Only ``name`` is ever touched; every other key keeps its value and its
    position in the file.
    """

    path: Path
    data: dict[str, Any] = Field(default_factory=dict)

    @classmethod
    def load(cls, path: str | Path) -> "PackageManifest":
        """Read and parse the manifest at *path*.

        Raises:
            ManifestParseError: If the file is missing, unreadable, not valid
                JSON, or its top level is not an object.
        """
        manifest_path = Path(path)
        try:
            data = load_json(manifest_path)
        except FileNotFoundError as exc:
            raise ManifestParseError(manifest_path, "file does not exist") from exc
        except (OSError, ValueError) as exc:
            raise ManifestParseError(manifest_path, str(exc)) from exc
        return cls(path=manifest_path, data=data)

    @property
    def name(self) -> str | None:
        return self.data.get("name")

    def rename(self, new_name: str) -> None:
        """Set the manifest's ``name`` field in place."""
        self.data["name"] = new_name

    async def save(self) -> Path:
        """Write the manifest back with 2-space indentation, replacing the file."""
        try:
            await save_json(self.data, self.path)
        except OSError as exc:
            raise ManifestParseError(self.path, f"write failed: {exc}") from exc
        return self.path

"""create-sid-react-app configuration.

Typed settings for a scaffolding run.  The CLI exposes no flags beyond the
project name, so everything tuneable lives here and can be overridden through
``CSRA_*`` environment variables via :meth:`ScaffoldConfig.from_env`.
"""

from __future__ import annotations

import os
from pathlib import Path
from typing import Any

from pydantic import BaseModel, Field, field_validator

BUNDLED_TEMPLATE_DIR = Path(__file__).parent / "template"

_TRUTHY = {"1", "true", "yes", "on"}


def _env_flag(name: str) -> bool:
    return os.environ.get(name, "").strip().lower() in _TRUTHY


class ScaffoldConfig(BaseModel):
    """Settings for a single scaffolding run.

    Attributes:
        template_dir: Template to copy.  ``None`` selects the template shipped
            inside the package.
        install_command: Package-manager command run inside the new project.
        dev_command: Command suggested to the user once everything is done.
        install_timeout: Seconds before the install is killed.  ``None``
            waits for as long as the package manager takes.
        cleanup_on_failure: Remove the target directory when a step after
            template resolution fails.  Off by default, so partial results
            stay on disk for inspection.
        skip_install: Skip the install step entirely (offline use).
    """

    template_dir: Path | None = Field(default=None)
    install_command: str = Field(default="npm install")
    dev_command: str = Field(default="npm run dev")
    install_timeout: int | None = Field(default=None, ge=1)
    cleanup_on_failure: bool = Field(default=False)
    skip_install: bool = Field(default=False)

    @field_validator("install_command")
    @classmethod
    def _install_command_not_blank(cls, value: str) -> str:
        if not value.strip():
            raise ValueError("install_command must not be empty")
        return value

    @property
    def resolved_template_dir(self) -> Path:
        """The template directory this run copies from."""
        if self.template_dir is None:
            return BUNDLED_TEMPLATE_DIR
        return Path(self.template_dir)

    @classmethod
    def from_env(cls) -> "ScaffoldConfig":
        """Build a ``ScaffoldConfig`` from environment variables.

        Recognised variables (all optional):
            CSRA_TEMPLATE_DIR, CSRA_INSTALL_COMMAND, CSRA_DEV_COMMAND,
            CSRA_INSTALL_TIMEOUT, CSRA_CLEANUP_ON_FAILURE, CSRA_SKIP_INSTALL.
        """
        kwargs: dict[str, Any] = {}
        if os.environ.get("CSRA_TEMPLATE_DIR"):
            kwargs["template_dir"] = Path(os.environ["CSRA_TEMPLATE_DIR"])
        if os.environ.get("CSRA_INSTALL_COMMAND"):
            kwargs["install_command"] = os.environ["CSRA_INSTALL_COMMAND"]
        if os.environ.get("CSRA_DEV_COMMAND"):
            kwargs["dev_command"] = os.environ["CSRA_DEV_COMMAND"]
        if os.environ.get("CSRA_INSTALL_TIMEOUT"):
            kwargs["install_timeout"] = int(os.environ["CSRA_INSTALL_TIMEOUT"])

        return cls(
            cleanup_on_failure=_env_flag("CSRA_CLEANUP_ON_FAILURE"),
            skip_install=_env_flag("CSRA_SKIP_INSTALL"),
            **kwargs,
        )

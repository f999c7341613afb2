"""create-sid-react-app -- scaffolds React + Vite projects from a bundled template.

Quick usage::

    from create_sid_react_app import create_app

    project_path = await create_app("my-app", "/tmp/my-app")
"""

__version__ = "1.0.0"

from create_sid_react_app.config import ScaffoldConfig
from create_sid_react_app.errors import (
    CopyError,
    InstallCommandError,
    ManifestParseError,
    ScaffoldError,
    TemplateNotFoundError,
)
from create_sid_react_app.models import PackageManifest, ScaffoldRequest
from create_sid_react_app.scaffolder import Scaffolder, create_app

__all__ = [
    "CopyError",
    "InstallCommandError",
    "ManifestParseError",
    "PackageManifest",
    "ScaffoldConfig",
    "ScaffoldError",
    "ScaffoldRequest",
    "Scaffolder",
    "TemplateNotFoundError",
    "__version__",
    "create_app",
]

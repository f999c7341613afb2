"""Project scaffolding workflow.

Copies the bundled React + Vite template to the target directory, renames the
project in its ``package.json``, installs dependencies and tells the user how
to start the dev server.  Steps run strictly in order; nothing is retried.

Quick usage::

    from create_sid_react_app import ScaffoldConfig, ScaffoldRequest, Scaffolder

    request = ScaffoldRequest.from_cli("my-app")
    project_root = await Scaffolder(ScaffoldConfig()).run(request)
"""

from __future__ import annotations

import asyncio
import os
import shutil
from pathlib import Path

from rich.markup import escape

from .config import ScaffoldConfig
from .errors import CopyError, InstallCommandError, ScaffoldError, TemplateNotFoundError
from .models import MANIFEST_FILENAME, PackageManifest, ScaffoldRequest
from .utils import (
    console,
    create_progress,
    is_valid_package_name,
    print_step,
    print_success,
    print_warning,
    run_command,
)


class Scaffolder:
    """Runs the scaffolding workflow for one or more requests.

    The process working directory is never changed; the install command gets
    the project directory as its own ``cwd``.  That keeps ``run`` safe to
    call repeatedly from a single process.
    """

    def __init__(self, config: ScaffoldConfig | None = None) -> None:
        self.config = config or ScaffoldConfig()

    # -- Public API --------------------------------------------------------

    async def run(self, request: ScaffoldRequest) -> Path:
        """Scaffold a project for *request*.

        Returns:
            The project root (``request.target_dir``).

        Raises:
            TemplateNotFoundError: Before anything is written, if the template
                directory does not exist or cannot be read.
            CopyError: If the template tree cannot be copied.
            ManifestParseError: If the copied ``package.json`` is unusable.
            InstallCommandError: If the install command fails.
        """
        print_step(f"\nCreating project: {escape(request.project_name)}")

        template_dir = self.resolve_template_dir()
        target_dir = request.target_dir
        created_root = _first_missing_ancestor(target_dir)

        try:
            await self.copy_template(template_dir, target_dir)
            await self.patch_manifest(request)
            await self.install_dependencies(target_dir)
        except ScaffoldError:
            if self.config.cleanup_on_failure and created_root is not None:
                self._remove_partial(created_root)
            raise

        self.print_next_steps(request)
        return target_dir

    def resolve_template_dir(self) -> Path:
        """Return the template directory, failing if it is absent or unreadable."""
        template_dir = self.config.resolved_template_dir
        if not template_dir.is_dir():
            raise TemplateNotFoundError(template_dir)
        if not os.access(template_dir, os.R_OK | os.X_OK):
            raise TemplateNotFoundError(template_dir, "directory is not readable")
        return template_dir

    async def copy_template(self, template_dir: Path, target_dir: Path) -> Path:
        """Recursively copy *template_dir* into *target_dir*.

        Missing parents are created.  Files already present at the
        destination are overwritten; other existing content is left alone.
        """
        try:
            await asyncio.to_thread(
                shutil.copytree, template_dir, target_dir, dirs_exist_ok=True
            )
        except OSError as exc:
            raise CopyError(template_dir, target_dir, str(exc)) from exc

        print_success("✔ Template copied")
        return target_dir

    async def patch_manifest(self, request: ScaffoldRequest) -> PackageManifest:
        """Set the copied manifest's ``name`` to the target directory's base name."""
        manifest = PackageManifest.load(request.target_dir / MANIFEST_FILENAME)
        app_name = request.app_name

        if not is_valid_package_name(app_name):
            print_warning(
                f"'{escape(app_name)}' is not a valid npm package name; "
                "the package manager may refuse it."
            )

        manifest.rename(app_name)
        await manifest.save()
        return manifest

    async def install_dependencies(self, target_dir: Path) -> None:
        """Run the install command with *target_dir* as its working directory."""
        if self.config.skip_install:
            print_warning("Skipping dependency install")
            return

        command = self.config.install_command

        console.print("[yellow]Installing dependencies...[/yellow]")
        try:
            with create_progress() as progress:
                progress.add_task(escape(command), total=None)
                returncode, _stdout, stderr = await run_command(
                    command, cwd=target_dir, timeout=self.config.install_timeout
                )
        except OSError as exc:
            raise InstallCommandError(
                f"Could not start install command '{command}': {exc}",
                command=command,
            ) from exc

        if returncode != 0:
            raise InstallCommandError(
                f"Install command failed (exit {returncode}): {command}\n{stderr}",
                command=command,
                returncode=returncode,
                stderr=stderr,
            )

        print_success("✔ Dependencies installed")

    def print_next_steps(self, request: ScaffoldRequest) -> None:
        """Tell the user which commands start the new project."""
        console.print("\n[blue]All done! Run the following:[/blue]")
        next_command = f"cd {request.project_name} && {self.config.dev_command}"
        console.print(f"\n[bold]{escape(next_command)}[/bold]\n", highlight=False)

    # -- Internal helpers --------------------------------------------------

    @staticmethod
    def _remove_partial(target_dir: Path) -> None:
        if not target_dir.exists():
            return
        shutil.rmtree(target_dir, ignore_errors=True)
        print_warning(f"Removed partially created project at {escape(str(target_dir))}")


def _first_missing_ancestor(path: Path) -> Path | None:
    """Return the outermost directory a copy to *path* would create, if any."""
    if path.exists():
        return None
    missing = path
    while not missing.parent.exists():
        missing = missing.parent
    return missing


async def create_app(
    project_name: str,
    target_dir: str | Path,
    config: ScaffoldConfig | None = None,
) -> Path:
    """Scaffold *project_name* into *target_dir* with the given config."""
    request = ScaffoldRequest(
        project_name=project_name, target_dir=Path(os.path.abspath(target_dir))
    )
    return await Scaffolder(config).run(request)

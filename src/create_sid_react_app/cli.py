"""Command-line entry point for ``create-sid-react-app``.

Usage::

    create-sid-react-app my-app
    python -m create_sid_react_app my-app
"""

from __future__ import annotations

import argparse
import asyncio
import sys

from rich.markup import escape

from . import __version__
from .config import ScaffoldConfig
from .errors import ScaffoldError
from .models import ScaffoldRequest
from .scaffolder import Scaffolder
from .utils import console

PROG = "create-sid-react-app"


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog=PROG,
        description="Scaffold a new React + Vite project",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=(
            "Examples:\n"
            f"  {PROG} my-app\n"
            f"  CSRA_INSTALL_COMMAND='pnpm install' {PROG} my-app\n"
        ),
    )
    parser.add_argument("project_name", metavar="project-name", help="Name of the project")
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser


def main(argv: list[str] | None = None) -> None:
    """CLI entry point; exits with status 1 when scaffolding fails."""
    parser = build_parser()
    args = parser.parse_args(argv)
    if not args.project_name.strip():
        parser.error("project-name must not be empty")

    try:
        config = ScaffoldConfig.from_env()
    except ValueError as exc:
        # pydantic.ValidationError is a ValueError subclass.
        console.print(f"[bold red]Error:[/bold red] Invalid CSRA_* setting: {escape(str(exc))}")
        sys.exit(1)
    request = ScaffoldRequest.from_cli(args.project_name)

    try:
        asyncio.run(Scaffolder(config).run(request))
    except ScaffoldError as exc:
        console.print(f"[bold red]Error:[/bold red] {escape(str(exc))}")
        sys.exit(1)


if __name__ == "__main__":
    main()

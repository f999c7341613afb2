"""Shared helpers for create-sid-react-app.

Provides async command execution, JSON I/O, npm package-name checks and
Rich-based console output.  All user-facing text goes through the
module-level ``console``.
"""

from __future__ import annotations

import asyncio
import json
import os
import re
import shlex
from pathlib import Path
from typing import Any

from rich.console import Console
from rich.progress import Progress, SpinnerColumn, TextColumn, TimeElapsedColumn

console = Console()

# ---------------------------------------------------------------------------
# Async command execution
# ---------------------------------------------------------------------------


async def run_command(
    cmd: str | list[str],
    cwd: str | Path | None = None,
    timeout: float | None = None,
    env: dict[str, str] | None = None,
) -> tuple[int, str, str]:
    """Run a command asynchronously and capture its output.

    Args:
        cmd: A command string, run through the system shell so wrappers such
            as ``npm.cmd`` resolve the same way they do in a terminal, or a
            list of arguments executed directly.
        cwd: Working directory for the child process.  The parent's working
            directory is left alone.
        timeout: Maximum wall-clock seconds before the process is killed.
            ``None`` waits indefinitely.
        env: Optional extra environment variables merged on top of ``os.environ``.

    Returns:
        A ``(returncode, stdout, stderr)`` tuple.  A timeout is reported as
        returncode ``-1`` with an explanatory stderr.

    Raises:
        FileNotFoundError: If a list command's program is not on ``PATH``.
            A missing program in a shell command surfaces as the shell's own
            non-zero exit instead.
    """
    merged_env: dict[str, str] | None = None
    if env:
        merged_env = {**os.environ, **env}

    display = cmd if isinstance(cmd, str) else shlex.join(cmd)
    spawn_kwargs: dict[str, Any] = {
        "stdout": asyncio.subprocess.PIPE,
        "stderr": asyncio.subprocess.PIPE,
        "cwd": str(cwd) if cwd else None,
        "env": merged_env,
    }

    if isinstance(cmd, list):
        process = await asyncio.create_subprocess_exec(*cmd, **spawn_kwargs)
    else:
        process = await asyncio.create_subprocess_shell(cmd, **spawn_kwargs)

    try:
        stdout_bytes, stderr_bytes = await asyncio.wait_for(
            process.communicate(), timeout=timeout
        )
    except asyncio.TimeoutError:
        process.kill()
        await process.wait()
        return (-1, "", f"Command timed out after {timeout}s: {display}")

    stdout_str = (stdout_bytes or b"").decode("utf-8", errors="replace").strip()
    stderr_str = (stderr_bytes or b"").decode("utf-8", errors="replace").strip()
    return (process.returncode or 0, stdout_str, stderr_str)


# ---------------------------------------------------------------------------
# JSON I/O
# ---------------------------------------------------------------------------


def load_json(path: str | Path) -> dict[str, Any]:
    """Load a JSON file whose top level is an object.

    Raises:
        FileNotFoundError: If the file does not exist.
        json.JSONDecodeError: If the file is not valid JSON.
        ValueError: If the top level is not an object.
    """
    raw = Path(path).read_text(encoding="utf-8")
    data = json.loads(raw)
    if not isinstance(data, dict):
        raise ValueError(f"expected a JSON object, got {type(data).__name__}")
    return data


async def save_json(data: dict[str, Any] | list[Any], path: str | Path) -> None:
    """Save data as 2-space-indented JSON with a trailing newline.

    The existing file is replaced.  The write runs in a worker thread so the
    event loop is not blocked.
    """
    file_path = Path(path)
    content = json.dumps(data, indent=2, ensure_ascii=False) + "\n"
    await asyncio.to_thread(file_path.write_text, content, "utf-8")


# ---------------------------------------------------------------------------
# Package names
# ---------------------------------------------------------------------------

_NPM_NAME_RE = re.compile(r"^(?:@[a-z0-9-*~][a-z0-9-*._~]*/)?[a-z0-9-~][a-z0-9-._~]*$")
_NPM_NAME_MAX_LENGTH = 214


def is_valid_package_name(name: str) -> bool:
    """Return ``True`` if npm would accept *name* for a new package.

    Mirrors the rules npm applies to new packages: at most 214 characters,
    lowercase, URL-safe, and not starting with ``.`` or ``_``.

    Examples::

        is_valid_package_name("my-app")  -> True
        is_valid_package_name("My App")  -> False
        is_valid_package_name(".hidden") -> False
    """
    if not name or len(name) > _NPM_NAME_MAX_LENGTH:
        return False
    return bool(_NPM_NAME_RE.match(name))


# ---------------------------------------------------------------------------
# Rich output helpers
# ---------------------------------------------------------------------------


def print_step(message: str) -> None:
    """Print a cyan progress line."""
    console.print(f"[cyan]{message}[/cyan]")


def print_success(message: str) -> None:
    """Print a green success message."""
    console.print(f"[bold green]{message}[/bold green]")


def print_error(message: str) -> None:
    """Print a red error message."""
    console.print(f"[bold red]{message}[/bold red]")


def print_warning(message: str) -> None:
    """Print a yellow warning message."""
    console.print(f"[bold yellow]{message}[/bold yellow]")


def create_progress() -> Progress:
    """Create a Rich spinner for long-running steps.

    Returns:
        A ``Progress`` instance suitable for use as a context manager.
    """
    return Progress(
        SpinnerColumn(),
        TextColumn("[progress.description]{task.description}"),
        TimeElapsedColumn(),
        console=console,
        transient=True,
    )

"""Shared pytest fixtures for the create-sid-react-app test suite.

Provides reusable fixtures for:
- A small on-disk template tree
- Configs pointing at that template
- Mock subprocess helpers
"""

from __future__ import annotations

import copy
import json
from pathlib import Path
from typing import Any
from unittest.mock import AsyncMock, MagicMock

import pytest

from create_sid_react_app.config import ScaffoldConfig


# ---------------------------------------------------------------------------
# Template
# ---------------------------------------------------------------------------

TEMPLATE_MANIFEST: dict[str, Any] = {
    "name": "template",
    "private": True,
    "version": "0.0.0",
    "type": "module",
    "scripts": {"dev": "vite", "build": "vite build"},
    "dependencies": {"react": "^19.1.0", "react-dom": "^19.1.0"},
}


@pytest.fixture
def template_manifest() -> dict[str, Any]:
    """Manifest contents written into the fixture template."""
    return copy.deepcopy(TEMPLATE_MANIFEST)


@pytest.fixture
def template_dir(tmp_path: Path, template_manifest: dict[str, Any]) -> Path:
    """A minimal template: index.html, package.json and a nested source file."""
    root = tmp_path / "template"
    (root / "src").mkdir(parents=True)
    (root / "index.html").write_text("<div id=\"root\"></div>\n", encoding="utf-8")
    (root / "src" / "main.jsx").write_text("console.log('hi')\n", encoding="utf-8")
    # Deliberately compact so tests can see the 2-space rewrite.
    (root / "package.json").write_text(json.dumps(template_manifest), encoding="utf-8")
    return root


@pytest.fixture
def work_dir(tmp_path: Path) -> Path:
    """Directory the user would run the CLI from."""
    path = tmp_path / "work"
    path.mkdir()
    return path


@pytest.fixture
def scaffold_config(template_dir: Path) -> ScaffoldConfig:
    """Config that copies the fixture template."""
    return ScaffoldConfig(template_dir=template_dir)


# ---------------------------------------------------------------------------
# Mock subprocess
# ---------------------------------------------------------------------------

@pytest.fixture
def mock_subprocess():
    """Mock asyncio subprocess for testing command execution.

    Returns a factory that creates mock subprocess instances with configurable
    stdout, stderr, and return codes.

    Usage:
        def test_command(mock_subprocess):
            proc = mock_subprocess(stdout="output", returncode=0)
            with patch("asyncio.create_subprocess_shell", return_value=proc):
                ...
    """
    def factory(
        stdout: str = "",
        stderr: str = "",
        returncode: int = 0,
    ) -> AsyncMock:
        mock_proc = AsyncMock()
        mock_proc.communicate = AsyncMock(
            return_value=(stdout.encode("utf-8"), stderr.encode("utf-8"))
        )
        mock_proc.returncode = returncode
        mock_proc.pid = 99999
        mock_proc.kill = MagicMock()
        mock_proc.wait = AsyncMock(return_value=returncode)
        return mock_proc

    return factory


@pytest.fixture(autouse=True)
def _clear_csra_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep the developer's CSRA_* variables out of every test."""
    for name in (
        "CSRA_TEMPLATE_DIR",
        "CSRA_INSTALL_COMMAND",
        "CSRA_DEV_COMMAND",
        "CSRA_INSTALL_TIMEOUT",
        "CSRA_CLEANUP_ON_FAILURE",
        "CSRA_SKIP_INSTALL",
    ):
        monkeypatch.delenv(name, raising=False)

"""Shared pytest fixtures and test helpers for modgit tests."""

from __future__ import annotations

import logging
import subprocess
from collections.abc import Callable, Generator
from pathlib import Path

import pytest
from click.testing import CliRunner

from modgit.config.settings import ModgitSettings
from modgit.infrastructure.workspace import Workspace
from modgit.services.telemetry import disable_telemetry

SAMPLE_DEFINITIONS = """\
[module "core"]
    path = src/core
    path = include/core

[module "ui"]
    path = src/ui
    depends = core

[module "frontend"]
    path = apps/frontend
    depends = ui

[module "frontend/css"]
    path = apps/frontend/css

[module "backend"]
    path = apps/backend
    depends = core
    readonly = true

[module "tools"]
    path = tools
    role = infrastructure
"""


@pytest.fixture(autouse=True)
def _no_config_override(monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep an exported MODGIT_CONFIG from leaking into tests."""
    monkeypatch.delenv("MODGIT_CONFIG", raising=False)


@pytest.fixture(autouse=True)
def _reset_cli_state() -> Generator[None]:
    """Undo the logging and telemetry setup done by CLI invocations."""
    root = logging.getLogger()
    handlers = root.handlers[:]
    level = root.level
    yield
    disable_telemetry()
    root.handlers = handlers
    root.setLevel(level)


@pytest.fixture
def cli_runner() -> CliRunner:
    """Provide a Click CLI test runner."""
    return CliRunner()


@pytest.fixture
def write_definitions(tmp_path: Path) -> Callable[[str], Path]:
    """Write a ``.modgit`` file into the temp repository root."""

    def _write(text: str) -> Path:
        path = tmp_path / ".modgit"
        path.write_text(text, encoding="utf-8")
        return path

    return _write


@pytest.fixture
def repo_root(tmp_path: Path, write_definitions: Callable[[str], Path]) -> Path:
    """Temporary repository root holding the sample catalog.

    This is the single source of truth for the sample module layout.
    """
    write_definitions(SAMPLE_DEFINITIONS)
    return tmp_path


@pytest.fixture
def workspace(repo_root: Path) -> Workspace:
    """Workspace over the sample catalog."""
    return Workspace(ModgitSettings.from_cli(root=repo_root))


@pytest.fixture
def make_workspace(
    tmp_path: Path, write_definitions: Callable[[str], Path]
) -> Callable[..., Workspace]:
    """Build a workspace over custom definitions text."""

    def _make(text: str, **settings: object) -> Workspace:
        write_definitions(text)
        return Workspace(ModgitSettings.from_cli(root=tmp_path, **settings))

    return _make


@pytest.fixture
def _isolated_repo(repo_root: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    """Change CWD to the sample repository so the CLI discovers it.

    Use via ``@pytest.mark.usefixtures("_isolated_repo")`` on command test
    classes.
    """
    monkeypatch.chdir(repo_root)


def _git(cwd: Path, *args: str) -> None:
    subprocess.run(["git", *args], cwd=cwd, capture_output=True, check=True)


@pytest.fixture
def git_repo(repo_root: Path) -> Path:
    """Sample repository initialized as a git repo with one commit."""
    _git(repo_root, "init")
    _git(repo_root, "config", "user.email", "test@test.com")
    _git(repo_root, "config", "user.name", "Test")
    for directory in ("src/core", "src/ui", "apps/frontend", "apps/backend", "tools"):
        (repo_root / directory).mkdir(parents=True)
        (repo_root / directory / "README").write_text(directory, encoding="utf-8")
    _git(repo_root, "add", ".")
    _git(repo_root, "commit", "-m", "init")
    return repo_root

"""Shared pytest fixtures and test helpers for aidctl tests."""

from __future__ import annotations

from collections.abc import Iterable
from pathlib import Path

import pytest
from click.testing import CliRunner

from aidctl.config.settings import AidSettings
from aidctl.domain.generator import AidGenerator
from aidctl.domain.types import EntityDescriptor


@pytest.fixture
def cli_runner() -> CliRunner:
    """Provide a Click CLI test runner."""
    return CliRunner()


@pytest.fixture
def generator() -> AidGenerator:
    """A fresh generator with an empty issued set."""
    return AidGenerator()


@pytest.fixture
def descriptor() -> EntityDescriptor:
    return EntityDescriptor(prefix="G", title="Test Task", kind="task", status="todo")


@pytest.fixture
def project_root(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Temporary project directory with no config and no AIDCTL_* overrides."""
    for var in ("AIDCTL_CONFIG", "AIDCTL_PROJECT_ROOT"):
        monkeypatch.delenv(var, raising=False)
    return tmp_path


@pytest.fixture
def settings(project_root: Path) -> AidSettings:
    return AidSettings.from_cli(project_root=project_root)


@pytest.fixture
def _isolated_project(project_root: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    """Change CWD to a temp project root so the CLI resolves paths there.

    Use via ``@pytest.mark.usefixtures("_isolated_project")`` on command
    test classes.
    """
    monkeypatch.chdir(project_root)


# ---------------------------------------------------------------------------
# Shared test helpers
# ---------------------------------------------------------------------------


class ScriptedRandom:
    """Random source that replays a fixed sequence of suffixes.

    Each suffix is consumed one character per ``choice()`` call, which is
    how :class:`AidGenerator` draws.
    """

    def __init__(self, suffixes: Iterable[str]) -> None:
        self._chars = iter("".join(suffixes))

    def choice(self, seq: str) -> str:
        return next(self._chars)

"""
Shared fixtures for the buildvars test suite.

Every test gets its own vars file under tmp_path and an explicit
environment mapping, so nothing reads or writes the real user store.
"""

import io
from pathlib import Path

import pytest
from rich.console import Console

from buildvars.application.container import Container
from buildvars.domain.settings import VarsSettings
from buildvars.infrastructure.vars.store import VariableStore
from buildvars.interface.cli.formatters import VarsFormatter


class CapturedFormatter(VarsFormatter):
    """VarsFormatter writing to in-memory buffers, without colors."""

    def __init__(self):
        self.out_buffer = io.StringIO()
        self.err_buffer = io.StringIO()
        super().__init__(
            out=Console(file=self.out_buffer, soft_wrap=True, highlight=False, emoji=False, color_system=None),
            err=Console(file=self.err_buffer, soft_wrap=True, highlight=False, emoji=False, color_system=None),
        )

    @property
    def stdout(self) -> str:
        return self.out_buffer.getvalue()

    @property
    def stderr(self) -> str:
        return self.err_buffer.getvalue()

    def stdout_lines(self) -> list:
        return [line for line in self.stdout.splitlines() if line]


@pytest.fixture
def environ():
    """A private environment; tests add overrides to it."""
    return {}


@pytest.fixture
def settings(tmp_path: Path) -> VarsSettings:
    return VarsSettings(config_dir=tmp_path / "config")


@pytest.fixture
def container(settings, environ) -> Container:
    return Container(settings=settings, environ=environ)


@pytest.fixture
def store(container) -> VariableStore:
    return container.store


@pytest.fixture
def formatter() -> CapturedFormatter:
    return CapturedFormatter()


@pytest.fixture
def write_config(tmp_path: Path):
    """Write a buildvars.config.py into a project directory and return its path."""
    project = tmp_path / "project"
    project.mkdir()

    def _write(source: str, name: str = "buildvars.config.py") -> Path:
        path = project / name
        path.write_text(source, encoding="utf-8")
        return path

    return _write

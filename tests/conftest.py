"""Shared pytest fixtures for moos-ivp-deps tests."""

from __future__ import annotations

import io
import subprocess
from collections.abc import Callable
from pathlib import Path

import pytest
from rich.console import Console

from moosdeps.context import InstallerContext
from moosdeps.tui import TUI
from moosdeps.types import ContextConfig


class FakeRun:
  """Stands in for subprocess.run, recording every command it is given."""

  def __init__(self) -> None:
    self.commands: list[str] = []
    self.failing: set[str] = set()

  def __call__(self, command: str, check: bool = False, shell: bool = False) -> subprocess.CompletedProcess[str]:
    self.commands.append(command)
    if any(marker in command for marker in self.failing):
      raise subprocess.CalledProcessError(100, command)
    return subprocess.CompletedProcess(command, 0)


@pytest.fixture
def fake_run(monkeypatch: pytest.MonkeyPatch) -> FakeRun:
  """Replace subprocess.run so no package manager is ever spawned."""
  runner = FakeRun()
  monkeypatch.setattr("moosdeps.utils.subprocess.run", runner)
  return runner


@pytest.fixture
def output() -> io.StringIO:
  return io.StringIO()


@pytest.fixture
def make_ui(output: io.StringIO) -> Callable[..., TUI]:
  """Build a TUI that writes into the captured output buffer."""

  def _make(**kwargs: bool) -> TUI:
    return TUI(out=Console(file=output, width=200, no_color=True), **kwargs)

  return _make


@pytest.fixture
def make_ctx(tmp_path: Path, make_ui: Callable[..., TUI]) -> Callable[..., InstallerContext]:
  """Build an InstallerContext from keyword overrides of the CLI defaults."""

  def _make(**overrides: object) -> InstallerContext:
    values: dict[str, object] = {
      "minimal": False,
      "dry": False,
      "verbose": False,
      "yes": True,
      "log_file": str(tmp_path / "install.log"),
      "force_distro": None,
    }
    values.update(overrides)
    config = ContextConfig(**values)  # type: ignore[arg-type]
    return InstallerContext(config, make_ui(verbose=config.verbose))

  return _make


@pytest.fixture
def os_release(tmp_path: Path) -> Callable[[str], str]:
  """Write an os-release file with the given content and return its path."""

  def _write(content: str) -> str:
    path = tmp_path / "os-release"
    path.write_text(content)
    return str(path)

  return _write


@pytest.fixture
def as_user(monkeypatch: pytest.MonkeyPatch) -> None:
  """Pretend to run as an unprivileged user with every tool on PATH."""
  monkeypatch.setattr("moosdeps.steps.sudo_prefix", lambda: "sudo ")
  monkeypatch.setattr("moosdeps.steps.command_exists", lambda _name: True)

"""
Type definitions for moos-ivp-deps.

This module contains all custom type definitions used throughout the application.
"""

from dataclasses import dataclass, field
from enum import IntEnum
from typing import TypedDict


class DefaultsConfig(TypedDict):
  """Configuration defaults shipped in config.json."""

  log_file: str
  build_script: str
  check_script: str


class ExitCode(IntEnum):
  """Process exit codes."""

  SUCCESS = 0
  GENERAL_ERROR = 1
  UNSUPPORTED_DISTRO = 2
  PERMISSION_DENIED = 3
  PACKAGE_MANAGER_NOT_FOUND = 4
  INSTALL_FAILED = 5


@dataclass
class ContextConfig:
  """Typed configuration object with all command line arguments."""

  minimal: bool
  dry: bool
  verbose: bool
  yes: bool
  log_file: str
  force_distro: str | None = None


@dataclass
class PackageCategory:
  """A named group of packages installed with a single command."""

  name: str
  packages: list[str] = field(default_factory=list)
  skipped: bool = False


@dataclass
class InstallPlan:
  """Everything decided before the package manager is first invoked."""

  distro_id: str
  package_manager: str
  categories: list[PackageCategory] = field(default_factory=list)

  def category(self, name: str) -> PackageCategory:
    return next(c for c in self.categories if c.name == name)

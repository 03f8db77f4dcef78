"""Distro adapter registry"""

import sys
from importlib import import_module
from typing import Final, cast

from rich.console import Console

from moosdeps.distros.protocol import DistroProtocol
from moosdeps.types import ExitCode

console = Console()

__all__ = ["get_distro", "get_supported_distros", "resolve_distro_id", "DistroProtocol"]

# Supported distro id -> module implementing its package manager family
FAMILIES: Final[dict[str, str]] = {
  "ubuntu": "debian",
  "debian": "debian",
  "centos": "redhat",
  "fedora": "redhat",
  "arch": "arch",
  "opensuse": "opensuse",
}

# os-release ID -> supported distro id
OS_RELEASE_IDS: Final[dict[str, str]] = {
  "ubuntu": "ubuntu",
  "debian": "debian",
  "centos": "centos",
  "rhel": "centos",
  "fedora": "fedora",
  "arch": "arch",
  "manjaro": "arch",
  "opensuse": "opensuse",
  "opensuse-leap": "opensuse",
  "opensuse-tumbleweed": "opensuse",
}


def resolve_distro_id(os_release_id: str) -> str | None:
  """Map an os-release ID to a supported distro id, or None if unknown."""
  return OS_RELEASE_IDS.get(os_release_id.strip().lower())


def get_distro(distro_id: str) -> DistroProtocol:
  """
  Load and return the family module for the given distro_id.

  Each family module must implement the standard function interface.
  Exits with UNSUPPORTED_DISTRO if distro_id is not supported.
  """
  family = FAMILIES.get(distro_id)
  if family is None:
    console.print(f"\n[prompt.invalid]Unsupported distribution: {distro_id}[/]")
    sys.exit(ExitCode.UNSUPPORTED_DISTRO)

  module = import_module(f"moosdeps.distros.{family}")
  # Double cast needed: ModuleType -> object -> DistroProtocol
  # Type checker can't verify ModuleType implements Protocol at import time
  module_as_object = cast(object, module)
  return cast(DistroProtocol, module_as_object)


def get_supported_distros() -> list[str]:
  """Return list of supported distro IDs"""
  return list(FAMILIES)

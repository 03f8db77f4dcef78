"""Structural type every distro family module satisfies."""

from typing import Protocol


class DistroProtocol(Protocol):
  def package_manager(self, distro_id: str) -> str: ...

  def update_cache(self, pkg_cmd: str) -> str: ...

  def install_packages(self, pkg_cmd: str, packages: list[str], assume_yes: bool = False) -> str: ...

  def core_packages(self) -> list[str]: ...

  def moos_packages(self) -> list[str]: ...

  def gui_packages(self) -> list[str]: ...

from __future__ import annotations

import pytest

from moosdeps.distros import get_distro, get_supported_distros, resolve_distro_id
from moosdeps.types import ExitCode


def test_supported_distros() -> None:
  assert get_supported_distros() == ["ubuntu", "debian", "centos", "fedora", "arch", "opensuse"]


@pytest.mark.parametrize(
  ("os_id", "expected"),
  [
    ("ubuntu", "ubuntu"),
    ("debian", "debian"),
    ("centos", "centos"),
    ("rhel", "centos"),
    ("fedora", "fedora"),
    ("arch", "arch"),
    ("manjaro", "arch"),
    ("opensuse", "opensuse"),
    ("opensuse-leap", "opensuse"),
    ("opensuse-tumbleweed", "opensuse"),
    ("Ubuntu", "ubuntu"),
    ("gentoo", None),
    ("", None),
  ],
)
def test_resolve_distro_id(os_id: str, expected: str | None) -> None:
  assert resolve_distro_id(os_id) == expected


@pytest.mark.parametrize(
  ("distro_id", "manager"),
  [
    ("ubuntu", "apt-get"),
    ("debian", "apt-get"),
    ("fedora", "dnf"),
    ("arch", "pacman"),
    ("opensuse", "zypper"),
  ],
)
def test_package_manager(distro_id: str, manager: str) -> None:
  assert get_distro(distro_id).package_manager(distro_id) == manager


def test_centos_prefers_dnf(monkeypatch: pytest.MonkeyPatch) -> None:
  monkeypatch.setattr("moosdeps.distros.redhat.shutil.which", lambda name: f"/usr/bin/{name}")
  assert get_distro("centos").package_manager("centos") == "dnf"


def test_centos_falls_back_to_yum(monkeypatch: pytest.MonkeyPatch) -> None:
  monkeypatch.setattr("moosdeps.distros.redhat.shutil.which", lambda _name: None)
  assert get_distro("centos").package_manager("centos") == "yum"


def test_fedora_always_uses_dnf(monkeypatch: pytest.MonkeyPatch) -> None:
  monkeypatch.setattr("moosdeps.distros.redhat.shutil.which", lambda _name: None)
  assert get_distro("fedora").package_manager("fedora") == "dnf"


@pytest.mark.parametrize(
  ("distro_id", "expected"),
  [
    ("ubuntu", "sudo apt-get update"),
    ("fedora", ""),
    ("centos", ""),
    ("arch", "sudo pacman -Sy"),
    ("opensuse", "sudo zypper refresh"),
  ],
)
def test_update_cache(distro_id: str, expected: str) -> None:
  manager = {"ubuntu": "apt-get", "fedora": "dnf", "centos": "yum", "arch": "pacman", "opensuse": "zypper"}
  assert get_distro(distro_id).update_cache(f"sudo {manager[distro_id]}") == expected


@pytest.mark.parametrize(
  ("distro_id", "pkg_cmd", "assume_yes", "expected"),
  [
    ("debian", "apt-get", True, "apt-get install -y git cmake"),
    ("debian", "apt-get", False, "apt-get install git cmake"),
    ("fedora", "sudo dnf", True, "sudo dnf install -y git cmake"),
    ("arch", "pacman", True, "pacman -S --noconfirm git cmake"),
    ("arch", "pacman", False, "pacman -S git cmake"),
    ("opensuse", "zypper", True, "zypper install -y git cmake"),
  ],
)
def test_install_packages(distro_id: str, pkg_cmd: str, assume_yes: bool, expected: str) -> None:
  assert get_distro(distro_id).install_packages(pkg_cmd, ["git", "cmake"], assume_yes) == expected


def test_core_packages() -> None:
  assert get_distro("ubuntu").core_packages() == ["build-essential", "cmake", "git", "subversion", "g++"]
  assert get_distro("centos").core_packages() == ["gcc-c++", "cmake", "git", "subversion", "make"]
  assert get_distro("arch").core_packages() == ["base-devel", "cmake", "git", "subversion", "gcc"]
  assert get_distro("opensuse").core_packages() == ["gcc-c++", "cmake", "git", "subversion", "make"]


def test_moos_packages_use_distro_names() -> None:
  assert "libfltk1.3-dev" in get_distro("debian").moos_packages()
  assert "libjpeg-turbo-devel" in get_distro("fedora").moos_packages()
  assert "libjpeg-turbo" in get_distro("arch").moos_packages()
  assert "libpng16-devel" in get_distro("opensuse").moos_packages()


@pytest.mark.parametrize("distro_id", ["ubuntu", "debian", "centos", "fedora", "arch", "opensuse"])
def test_gui_packages_include_optional_tools(distro_id: str) -> None:
  gui = get_distro(distro_id).gui_packages()
  assert gui[:2] == ["xterm", "espeak"]
  assert len(gui) == 6


def test_unsupported_distro_exits() -> None:
  with pytest.raises(SystemExit) as exc:
    _ = get_distro("gentoo")

  assert exc.value.code == ExitCode.UNSUPPORTED_DISTRO

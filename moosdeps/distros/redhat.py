"""CentOS, RHEL and Fedora (dnf/yum) commands and package names"""

import shutil


# CentOS 7 ships yum only, later releases ship dnf
def package_manager(distro_id: str) -> str:
  if distro_id == "fedora":
    return "dnf"

  return "dnf" if shutil.which("dnf") else "yum"


# dnf and yum refresh their metadata on install
def update_cache(_pkg_cmd: str) -> str:
  return ""


def install_packages(pkg_cmd: str, packages: list[str], assume_yes: bool = False) -> str:
  yes_flag = " -y" if assume_yes else ""
  pkgs = " ".join(packages)
  return f"{pkg_cmd} install{yes_flag} {pkgs}"


def core_packages() -> list[str]:
  return [
    "gcc-c++",
    "cmake",
    "git",
    "subversion",
    "make",
  ]


def moos_packages() -> list[str]:
  return [
    "fltk-devel",
    "freeglut-devel",
    "libpng-devel",
    "libjpeg-turbo-devel",
    "libXft-devel",
    "libXinerama-devel",
    "libtiff-devel",
  ]


def gui_packages() -> list[str]:
  return [
    "xterm",
    "espeak",
    "mesa-libGLU-devel",
    "mesa-libGL-devel",
    "libXpm-devel",
    "xorg-x11-server-devel",
  ]

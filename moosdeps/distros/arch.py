"""Arch Linux (pacman) commands and package names"""


def package_manager(_distro_id: str) -> str:
  return "pacman"


def update_cache(pkg_cmd: str) -> str:
  return f"{pkg_cmd} -Sy"


def install_packages(pkg_cmd: str, packages: list[str], assume_yes: bool = False) -> str:
  yes_flag = " --noconfirm" if assume_yes else ""
  pkgs = " ".join(packages)
  return f"{pkg_cmd} -S{yes_flag} {pkgs}"


def core_packages() -> list[str]:
  return [
    "base-devel",
    "cmake",
    "git",
    "subversion",
    "gcc",
  ]


# Arch has no -dev split, headers ship with the libraries
def moos_packages() -> list[str]:
  return [
    "fltk",
    "freeglut",
    "libpng",
    "libjpeg-turbo",
    "libxft",
    "libxinerama",
    "libtiff",
  ]


def gui_packages() -> list[str]:
  return [
    "xterm",
    "espeak",
    "glu",
    "mesa",
    "libxpm",
    "xorg-server-devel",
  ]

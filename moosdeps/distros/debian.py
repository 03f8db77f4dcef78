"""Ubuntu and Debian (apt-get) commands and package names"""


def package_manager(_distro_id: str) -> str:
  return "apt-get"


def update_cache(pkg_cmd: str) -> str:
  return f"{pkg_cmd} update"


def install_packages(pkg_cmd: str, packages: list[str], assume_yes: bool = False) -> str:
  yes_flag = " -y" if assume_yes else ""
  pkgs = " ".join(packages)
  return f"{pkg_cmd} install{yes_flag} {pkgs}"


def core_packages() -> list[str]:
  return [
    "build-essential",
    "cmake",
    "git",
    "subversion",
    "g++",
  ]


def moos_packages() -> list[str]:
  return [
    "libfltk1.3-dev",
    "freeglut3-dev",
    "libpng-dev",
    "libjpeg-dev",
    "libxft-dev",
    "libxinerama-dev",
    "libtiff5-dev",
  ]


def gui_packages() -> list[str]:
  return [
    "xterm",
    "espeak",
    "xorg-dev",
    "libglu1-mesa-dev",
    "libgl1-mesa-dev",
    "libxpm-dev",
  ]

"""openSUSE (zypper) commands and package names"""


def package_manager(_distro_id: str) -> str:
  return "zypper"


def update_cache(pkg_cmd: str) -> str:
  return f"{pkg_cmd} refresh"


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
    "libpng16-devel",
    "libjpeg8-devel",
    "libXft-devel",
    "libXinerama-devel",
    "libtiff-devel",
  ]


def gui_packages() -> list[str]:
  return [
    "xterm",
    "espeak",
    "glu-devel",
    "Mesa-libGL-devel",
    "libXpm-devel",
    "xorg-x11-server-sdk",
  ]

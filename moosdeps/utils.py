import json
import logging
import os
import shutil
import subprocess
import sys
from pathlib import Path

from rich.console import Console

from moosdeps.distros import resolve_distro_id
from moosdeps.tui import TUI
from moosdeps.types import DefaultsConfig, ExitCode
from moosdeps.validations import validate_defaults_json, validate_forced_distro

console = Console()
logger = logging.getLogger(__name__)

OS_RELEASE = "/etc/os-release"

# Checked in order when os-release is missing
RELEASE_FILES: list[tuple[str, str]] = [
  ("/etc/redhat-release", "centos"),
  ("/etc/arch-release", "arch"),
  ("/etc/SuSE-release", "opensuse"),
]


def get_resource_path(relative_path: str) -> str:
  """Get absolute path to a resource shipped inside the package."""
  return str(Path(__file__).resolve().parent / relative_path)


def cmd(command: str, dry_run: bool, ui: TUI) -> bool:
  """
  Run a shell command, returning True if it exited successfully.

  In dry run the command is only shown. Output goes straight to the
  terminal so package manager prompts stay interactive.
  """
  logger.debug("Running: %s", command)
  if dry_run:
    ui.print(f"[bold green][dim][DRY RUN] {command}[/][/]")
    return True

  ui.verbose(f"Running: {command}")
  try:
    _ = subprocess.run(command, check=True, shell=True)

  except subprocess.CalledProcessError as e:
    logger.error("Command '%s' failed with exit code %s", command, e.returncode)
    return False

  return True


def command_exists(name: str) -> bool:
  return shutil.which(name) is not None


def is_root() -> bool:
  return os.geteuid() == 0


def sudo_prefix() -> str:
  return "" if is_root() else "sudo "


def read_os_release(file_path: str = OS_RELEASE) -> dict[str, str]:
  """
  Parse KEY=VALUE pairs from an os-release file.

  Args:
      file_path: Path to os-release file

  Returns:
      Mapping of keys to unquoted values, empty if the file is missing
  """
  fields: dict[str, str] = {}
  try:
    with open(file_path, "r") as f:
      for line in f:
        line = line.strip()
        if not line or line.startswith("#") or "=" not in line:
          continue

        key, value = line.split("=", 1)
        if len(value) >= 2 and value[0] == value[-1] and value[0] in "\"'":
          value = value[1:-1]
        fields[key.strip()] = value

  except (FileNotFoundError, IOError):
    return {}

  return fields


def get_distro_info(file_path: str = OS_RELEASE) -> tuple[str, str, list[str]]:
  """
  Extract NAME, ID and ID_LIKE from os-release file.

  Returns:
      Tuple of (name, id, id_like) where name and id default to "Linux"/"unknown"
  """
  fields = read_os_release(file_path)
  name = fields.get("NAME") or "Linux"
  distro_id = fields.get("ID", "").lower() or "unknown"
  id_like = fields.get("ID_LIKE", "").lower().split()
  return name, distro_id, id_like


def detect_distro(
  force_distro: str | None = None,
  os_release: str = OS_RELEASE,
  release_files: list[tuple[str, str]] | None = None,
  ui: TUI | None = None,
) -> str:
  """
  Return the supported distro id for this system, or "unknown".

  A forced distro wins over detection. Otherwise the os-release ID is
  mapped, then each ID_LIKE entry, then the legacy release files.
  """
  if force_distro:
    forced = force_distro.strip().lower()
    if ui:
      ui.verbose(f"Forcing distribution detection: {forced}")
    return forced if validate_forced_distro(forced) else "unknown"

  if os.path.isfile(os_release):
    name, os_id, id_like = get_distro_info(os_release)
    if ui:
      ui.verbose(f"os-release: {name} (ID={os_id})")
    for candidate in [os_id, *id_like]:
      if distro_id := resolve_distro_id(candidate):
        if candidate != os_id and ui:
          ui.verbose(f"Treating '{os_id}' as '{distro_id}' (ID_LIKE)")
        return distro_id

    if ui:
      ui.warning(f"Unknown distribution ID: {os_id}")
    return "unknown"

  for path, distro_id in RELEASE_FILES if release_files is None else release_files:
    if os.path.isfile(path):
      return distro_id

  if ui:
    ui.warning("Cannot detect Linux distribution")
  return "unknown"


def load_defaults() -> DefaultsConfig:
  """Load default values from config.json file."""
  config_file = get_resource_path("config.json")
  try:
    with open(config_file, "r") as f:
      config_data = json.load(f)
      data = validate_defaults_json(config_data.get("defaults"))
      return DefaultsConfig(
        log_file=str(data["log_file"]),
        build_script=str(data["build_script"]),
        check_script=str(data["check_script"]),
      )

  except (FileNotFoundError, json.JSONDecodeError) as e:
    console.print(f"\n[bold red]Error loading config.json: {e}[/]")
    sys.exit(ExitCode.GENERAL_ERROR)

  except (KeyError, ValueError) as e:
    console.print(f"\n[bold red]Invalid config.json format: {e}[/]")
    sys.exit(ExitCode.GENERAL_ERROR)


def format_step_name(name: str) -> str:
  """
  Format step name from function name string.

  Args:
      name: Step function name

  Returns:
      Formatted step name (e.g., "Core Build Tools")
  """
  return name.replace("step_", "").replace("_", " ").title().lstrip("0123456789 ")

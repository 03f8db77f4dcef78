"""
Validation functions for moos-ivp-deps.

This module contains the validation functions for command line arguments
and for the defaults shipped in config.json.
"""

import os
from typing import Any

from moosdeps.distros import get_supported_distros


def validate_forced_distro(distro: str) -> bool:
  """Validate a --force-distro value against the supported distributions."""
  return distro.strip().lower() in get_supported_distros()


def validate_log_file(path: str) -> bool:
  """Validate that a log file path names a file, not a directory."""
  if not path or not path.strip():
    return False

  return not os.path.isdir(path)


def validate_defaults_json(data: Any) -> dict[str, Any]:
  """Validate and return defaults JSON data with proper typing."""
  if not isinstance(data, dict):
    raise ValueError("Defaults JSON must be an object")

  required_keys = {"log_file", "build_script", "check_script"}
  missing_keys = required_keys - data.keys()
  if missing_keys:
    raise KeyError(f"Missing required keys: {missing_keys}")

  if not all(isinstance(data[key], str) for key in required_keys):
    raise ValueError("Default values must be strings")

  return data


def validate_cli_arguments(log_file: str, force_distro: str | None = None) -> list[str]:
  """
  Validate command line arguments that would otherwise fail late.

  Returns empty list if all arguments are valid, list of error messages otherwise.
  An unsupported forced distribution is left to detection since it has its own
  exit code, but an empty one is a usage error.
  """
  validators = [
    (validate_log_file(log_file), f"Invalid log file: {log_file!r} (must be a file path)"),
  ]

  if force_distro is not None:
    validators.append((bool(force_distro.strip()), "Option --force-distro requires a distribution name"))

  return [msg for valid, msg in validators if not valid]

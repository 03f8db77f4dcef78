#!/usr/bin/env python3

import argparse
import logging
import sys
from argparse import Namespace
from textwrap import dedent
from typing import NoReturn

if sys.version_info >= (3, 12):
  from typing import override
else:
  from typing_extensions import override

from rich.console import Console

from moosdeps.banner import print_banner
from moosdeps.context import InstallerContext
from moosdeps.logging_utils import configure_logging
from moosdeps.steps import get_install_steps
from moosdeps.tui import TUI
from moosdeps.types import ContextConfig, DefaultsConfig, ExitCode
from moosdeps.utils import command_exists, format_step_name, is_root, load_defaults
from moosdeps.validations import validate_cli_arguments

__version__ = "1.0"

console = Console()
logger = logging.getLogger("moosdeps.install")


class IndentedHelpFormatter(argparse.RawDescriptionHelpFormatter):
  def __init__(self, prog: str, **kwargs) -> None:
    super().__init__(prog, max_help_position=30, width=80, **kwargs)

  @override
  def _format_action_invocation(self, action: argparse.Action) -> str:
    options = action.option_strings
    if not options:
      return super()._format_action_invocation(action)

    parts: list[str] = []
    if len(options) == 1:
      parts.append(f"{'':4}{options[0]}")

    else:
      parts.append(f"{', '.join(options)}")

    if action.nargs != 0:
      default_metavar = self._get_default_metavar_for_optional(action)
      parts[-1] += f" {self._format_args(action, default_metavar)}"

    return parts[-1]


class ArgumentParser(argparse.ArgumentParser):
  """Argument parser that reports usage errors with the general error code."""

  @override
  def error(self, message: str) -> NoReturn:
    console.print(f"\n[prompt.invalid]{message}[/]")
    console.print("[yellow]Use --help for usage information[/]")
    sys.exit(ExitCode.GENERAL_ERROR)


def _check_system_requirements() -> None:
  """Check if the system meets installation requirements."""
  if not is_root() and not command_exists("sudo"):
    console.print("\n[prompt.invalid]This script requires root privileges or sudo access.[/]")
    console.print("Please run with sudo or as root user.")
    logger.error("Missing root privileges and sudo")
    sys.exit(ExitCode.PERMISSION_DENIED)


def _create_argument_parser(defaults: DefaultsConfig) -> argparse.ArgumentParser:
  """Create and configure the argument parser."""
  parser = ArgumentParser(
    prog="install-dependencies",
    formatter_class=IndentedHelpFormatter,
    description=dedent("""
      Installs the system packages needed to build MOOS-IvP on the
      supported Linux distributions: a C++ toolchain with cmake, git and
      subversion, the FLTK/OpenGL/image libraries the MOOS applications
      link against and, unless --minimal, the X11/GUI extras.

      Supported distributions:
        Ubuntu 16.04+ / Debian 9+
        CentOS 7+ / RHEL 7+ / Fedora 25+
        Arch Linux (current)
        openSUSE Leap 15+
    """),
    epilog=dedent(f"""
      Examples:
        %(prog)s                          # Full installation with GUI support
        %(prog)s --minimal                # Minimal installation for headless systems
        %(prog)s --dry-run                # Preview what would be installed
        %(prog)s --force-distro ubuntu    # Force Ubuntu package names
        %(prog)s --verbose --yes          # Verbose output, no prompts

      Exit codes:
        0  installation completed successfully
        1  general error
        2  unsupported Linux distribution
        3  root or sudo privileges required
        4  package manager not found
        5  one or more package categories failed to install

      Installation progress is logged to {defaults["log_file"]}
    """),
  )

  _ = parser.add_argument(
    "-m",
    "--minimal",
    action="store_true",
    help="install only minimal dependencies (no GUI components)",
    dest="minimal",
  )

  _ = parser.add_argument(
    "-n",
    "--dry-run",
    action="store_true",
    help="show what would be installed without actually installing",
    dest="dry",
  )

  _ = parser.add_argument(
    "-f",
    "--force-distro",
    metavar="DISTRO",
    type=str,
    help="force distribution (ubuntu, debian, centos, fedora, arch, opensuse)",
    dest="force_distro",
  )

  _ = parser.add_argument(
    "-v",
    "--verbose",
    action="store_true",
    help="enable verbose output for debugging",
    dest="verbose",
  )

  _ = parser.add_argument(
    "-y",
    "--yes",
    action="store_true",
    help="automatically answer yes to all prompts",
    dest="yes",
  )

  _ = parser.add_argument(
    "--log-file",
    metavar="PATH",
    type=str,
    default=defaults["log_file"],
    help="installation log file [default: %(default)s]",
    dest="log_file",
  )

  _ = parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")

  return parser


def _create_context_config(args: Namespace) -> ContextConfig:
  """Create a typed ContextConfig from an argparse Namespace."""
  return ContextConfig(
    minimal=bool(getattr(args, "minimal", False)),
    dry=bool(getattr(args, "dry", False)),
    verbose=bool(getattr(args, "verbose", False)),
    yes=bool(getattr(args, "yes", False)),
    log_file=str(getattr(args, "log_file")),
    force_distro=getattr(args, "force_distro", None),
  )


def _run_installation(ctx: InstallerContext) -> None:
  """Run the installation steps in order."""
  steps = get_install_steps(ctx)
  total_steps = len(steps) - 1  # Exclude step 0 from count

  for i, step in enumerate(steps):
    step_name = format_step_name(step.__name__)

    if i > 0:
      filled = "▓" * i
      empty = "░" * (total_steps - i)
      ctx.ui.update_status(f"[{filled}{empty}] {step_name} · Step {i}/{total_steps}", step_name)

    step(ctx)


def _print_summary(ctx: InstallerContext, defaults: DefaultsConfig) -> None:
  ui = ctx.ui
  ui.print()
  ui.info("=== Installation Summary ===")

  if ctx.dry:
    ui.info("DRY RUN completed - no packages were actually installed")
    logger.info("=== Installation completed ===")
    return

  failed = len(ctx.failed_categories)
  if failed:
    ui.warning(f"{failed} package categories failed to install: {', '.join(ctx.failed_categories)}")
    ui.warning(f"Check the log file for details: {ctx.log_path}")
    ui.warning("You may need to install missing packages manually")
    logger.warning("%d package categories failed", failed)
    sys.exit(ExitCode.INSTALL_FAILED)

  ui.success("All package categories installed successfully!")
  ui.info(f"You can now build MOOS-IvP with: {defaults['build_script']}")
  logger.info("SUCCESS: All packages installed successfully")

  ui.print()
  ui.info("=== Next Steps ===")
  ui.info(f"1. Build MOOS-IvP: {defaults['build_script']}")
  ui.info(f"2. Verify build: {defaults['check_script']}")
  ui.info("3. Add to PATH: export PATH=$PATH:$(pwd)/bin")
  ui.info("")
  ui.info("For detailed build instructions, see README-GNULINUX.txt")
  logger.info("=== Installation completed ===")


def main(argv: list[str] | None = None) -> None:
  """Main entry point for the installer."""
  defaults = load_defaults()
  parser = _create_argument_parser(defaults)
  config = _create_context_config(parser.parse_args(argv))

  errors = validate_cli_arguments(log_file=config.log_file, force_distro=config.force_distro)
  if errors:
    console.print("\n[prompt.invalid]Invalid arguments provided:[/]")
    console.print("\n".join(f" • {err}" for err in errors))
    console.print("\n[yellow]Use --help for valid options[/]")
    sys.exit(ExitCode.GENERAL_ERROR)

  log_path = configure_logging(config.log_file, verbose=config.verbose)
  logger.info("=== MOOS-IvP Dependencies Installation Started ===")
  logger.info("Script version: %s", __version__)
  logger.info(
    "Options: minimal=%s, dry_run=%s, verbose=%s, yes=%s, force_distro=%s",
    config.minimal,
    config.dry,
    config.verbose,
    config.yes,
    config.force_distro,
  )

  if not config.dry:
    _check_system_requirements()

  ctx = InstallerContext(config, TUI(verbose=config.verbose))
  ctx.log_path = log_path

  print_banner(__version__)
  console.print()
  if config.dry:
    console.print("[bold yellow]DRY RUN MODE[/] - No actual changes will be made to your system")
    console.print()

  _run_installation(ctx)
  _print_summary(ctx, defaults)


def run() -> None:
  """Console script wrapper mapping interrupts and crashes to exit codes."""
  try:
    main()

  except KeyboardInterrupt:
    console.print("\n[prompt.invalid]Installation interrupted. Exiting...[/]")
    sys.exit(130)

  except Exception as e:
    logger.exception("Fatal error")
    console.print(f"\n[prompt.invalid]Fatal error: {e}[/]")
    sys.exit(ExitCode.GENERAL_ERROR)


if __name__ == "__main__":
  run()

import logging
import sys
from typing import Callable

from rich.prompt import Confirm

from moosdeps.context import InstallerContext
from moosdeps.distros import get_distro
from moosdeps.types import ExitCode, InstallPlan, PackageCategory
from moosdeps.utils import cmd, command_exists, detect_distro, sudo_prefix

logger = logging.getLogger(__name__)

CORE = "core build tools"
MOOS = "MOOS libraries"
GUI = "GUI components"

SUPPORTED_NAMES = "Ubuntu, Debian, CentOS, RHEL, Fedora, Arch Linux, openSUSE"

PLAN_LABELS = {CORE: "Core", MOOS: "MOOS", GUI: "GUI"}


def build_plan(distro_id: str, package_manager: str, minimal: bool = False) -> InstallPlan:
  """Collect the package lists for every category, GUI left empty when minimal."""
  distro = get_distro(distro_id)
  return InstallPlan(
    distro_id=distro_id,
    package_manager=package_manager,
    categories=[
      PackageCategory(CORE, distro.core_packages()),
      PackageCategory(MOOS, distro.moos_packages()),
      PackageCategory(GUI, [] if minimal else distro.gui_packages(), skipped=minimal),
    ],
  )


def install_category(ctx: InstallerContext, category: PackageCategory) -> bool:
  """Install one category of packages, returning False if the package manager failed."""
  assert ctx.pkg_cmd is not None
  if not category.packages:
    ctx.ui.verbose(f"No {category.name} packages to install")
    return True

  pkgs = " ".join(category.packages)
  ctx.ui.info(f"Installing {category.name} packages: {pkgs}")
  logger.info("Installing %s packages: %s", category.name, pkgs)

  distro = get_distro(ctx.distro_id)
  command = distro.install_packages(ctx.pkg_cmd, category.packages, ctx.config.yes)

  if not cmd(command, ctx.dry, ctx.ui):
    ctx.ui.error(f"Failed to install {category.name} packages")
    logger.error("Failed to install %s packages", category.name)
    ctx.failed_categories.append(category.name)
    return False

  if not ctx.dry:
    ctx.ui.success(f"{category.name} packages installed successfully")
    logger.info("SUCCESS: %s packages installed", category.name)

  return True


def step_0_plan(ctx: InstallerContext) -> None:
  ctx.ui.info("Starting MOOS-IvP dependencies installation...")

  ctx.distro_id = detect_distro(ctx.config.force_distro, ui=ctx.ui)
  if ctx.distro_id == "unknown":
    ctx.ui.error("Unsupported Linux distribution")
    ctx.ui.error(f"Supported distributions: {SUPPORTED_NAMES}")
    ctx.ui.error("Use --force-distro option to override detection")
    logger.error("Unsupported Linux distribution")
    sys.exit(ExitCode.UNSUPPORTED_DISTRO)

  ctx.ui.set_distro(ctx.distro_id)
  ctx.ui.info(f"Detected distribution: {ctx.distro_id}")
  logger.info("Detected distribution: %s", ctx.distro_id)

  distro = get_distro(ctx.distro_id)
  package_manager = distro.package_manager(ctx.distro_id)
  ctx.pkg_cmd = f"{sudo_prefix()}{package_manager}"
  ctx.ui.verbose(f"Package manager command: {ctx.pkg_cmd}")

  if not command_exists(package_manager):
    ctx.ui.error(f"Package manager '{package_manager}' not found")
    logger.error("Package manager '%s' not found", package_manager)
    sys.exit(ExitCode.PACKAGE_MANAGER_NOT_FOUND)

  ctx.plan = build_plan(ctx.distro_id, package_manager, ctx.config.minimal)

  ctx.ui.info("Installation plan:")
  ctx.ui.info(f"  Package manager: {ctx.plan.package_manager}")
  for category in ctx.plan.categories:
    label = PLAN_LABELS[category.name]
    if category.skipped:
      ctx.ui.info(f"  {label} packages: (skipped - minimal installation)")
    else:
      ctx.ui.info(f"  {label} packages: {' '.join(category.packages)}")

  if ctx.dry:
    ctx.ui.warning("DRY RUN MODE: No packages will actually be installed")

  if not ctx.config.yes and not ctx.dry:
    ctx.ui.print()
    if not Confirm.ask("Proceed with installation?", default=False):
      ctx.ui.info("Installation cancelled by user")
      logger.info("Installation cancelled by user")
      sys.exit(ExitCode.SUCCESS)


def step_1_update_cache(ctx: InstallerContext) -> None:
  assert ctx.pkg_cmd is not None
  ctx.ui.info("Updating package manager cache...")
  logger.info("Updating package cache for %s", ctx.distro_id)

  command = get_distro(ctx.distro_id).update_cache(ctx.pkg_cmd)
  if not command:
    ctx.ui.verbose(f"{ctx.pkg_cmd} refreshes its cache automatically")
    return

  if not cmd(command, ctx.dry, ctx.ui):
    ctx.ui.warning("Package cache update failed, continuing anyway")
    logger.warning("Package cache update failed")
    return

  if not ctx.dry:
    ctx.ui.success("Package cache updated successfully")


def step_2_core_build_tools(ctx: InstallerContext) -> None:
  assert ctx.plan is not None
  _ = install_category(ctx, ctx.plan.category(CORE))


def step_3_moos_libraries(ctx: InstallerContext) -> None:
  assert ctx.plan is not None
  _ = install_category(ctx, ctx.plan.category(MOOS))


def step_4_gui_components(ctx: InstallerContext) -> None:
  assert ctx.plan is not None
  _ = install_category(ctx, ctx.plan.category(GUI))


def get_install_steps(ctx: InstallerContext) -> list[Callable[[InstallerContext], None]]:
  """Get installation steps, skipping GUI components for a minimal install."""
  all_steps = [
    step_0_plan,
    step_1_update_cache,
    step_2_core_build_tools,
    step_3_moos_libraries,
    step_4_gui_components,
  ]

  if ctx.config.minimal:
    return all_steps[:-1]

  return all_steps

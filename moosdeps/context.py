from __future__ import annotations

from moosdeps.tui import TUI
from moosdeps.types import ContextConfig, InstallPlan


class InstallerContext:
  """
  Holds the state and configuration for the installation process.

  This context object is passed between installation steps to carry the
  detected distribution, the package manager command and the outcome of
  every install phase through to the final summary.
  """

  def __init__(self, config: ContextConfig, ui: TUI | None = None) -> None:
    self.config: ContextConfig = config
    self.ui: TUI = ui or TUI(verbose=config.verbose)

    # Distribution information
    self.distro_id: str = "unknown"
    self.pkg_cmd: str | None = None
    self.plan: InstallPlan | None = None

    # Outcome
    self.log_path: str = config.log_file
    self.failed_categories: list[str] = []

  @property
  def dry(self) -> bool:
    """Access dry run flag from config."""
    return self.config.dry
